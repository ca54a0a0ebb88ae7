"""Metadata file models and XML read/write helpers."""
