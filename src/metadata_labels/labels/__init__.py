"""Custom label derivation and the label-add pipeline."""
