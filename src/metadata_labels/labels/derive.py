"""Build a custom label from free text.

Unless given explicitly, both the API name and the short description are
derived from the label text with the same rules:

1. split on whitespace and drop stopwords
2. rejoin with single spaces
3. drop every character that is not an ASCII letter or digit
4. keep at most 80 characters

Text made only of stopwords or punctuation derives to an empty string, which
is passed through as-is.
"""

from __future__ import annotations

import re

from metadata_labels.labels.options import LabelAddOptions
from metadata_labels.metadata.models import CustomLabel
from metadata_labels.metadata.stopwords import remove_stopwords

MAX_API_NAME_LENGTH = 80

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def derive_api_name(text: str) -> str:
    joined = " ".join(remove_stopwords(text.split()))
    return _NON_ALPHANUMERIC.sub("", joined)[:MAX_API_NAME_LENGTH]


def build_label(options: LabelAddOptions) -> CustomLabel:
    """Return the label described by `options`, deriving missing fields."""

    full_name = options.name or derive_api_name(options.text)
    # The description intentionally reuses the API name rules.
    short_description = options.description or derive_api_name(options.text)

    categories = ",".join(options.categories) if options.categories else None

    return CustomLabel(
        full_name=full_name,
        categories=categories,
        language=options.language,
        protected=options.protected,
        short_description=short_description,
        value=options.text,
    )
