"""Metadata label tooling.

Provides a small, local-first CLI with:
- configuration loaded from `.env`
- structured logging
- custom label creation in `<target>/labels/<bundle>.labels-meta.xml`
"""

__version__ = "0.1.0"

from metadata_labels.config import LabelSettings

__all__ = ["__version__", "LabelSettings"]
