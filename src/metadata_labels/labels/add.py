"""Append a custom label to a label bundle file.

One invocation reads the bundle (or starts from an empty one), appends a
single label and writes the whole file back. There is no locking: concurrent
writers to the same file race and the last write wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from metadata_labels.labels.derive import build_label
from metadata_labels.labels.options import LabelAddOptions
from metadata_labels.metadata.models import (
    LABELS_ROOT_TAG,
    METADATA_NAMESPACE,
    CustomLabel,
    LabelBundle,
)
from metadata_labels.metadata.xml_io import (
    STANDARD_XML_OPTIONS,
    fix_existing_dollar_sign,
    get_existing,
    setup_array,
    to_xml,
    write_xml,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LabelAlreadyExists(Exception):
    """Raised when the bundle already holds a label with the candidate's fullName."""

    existing: CustomLabel
    path: Path | None = None

    def __str__(self) -> str:
        return f"A label with the fullName {self.existing.full_name} already exists"


def find_duplicate(labels: Iterable[CustomLabel], candidate: CustomLabel) -> CustomLabel | None:
    for label in labels:
        if label.full_name == candidate.full_name:
            return label
    return None


def load_bundle(path: Path) -> LabelBundle:
    default = {
        STANDARD_XML_OPTIONS.attribute_key: {"xmlns": METADATA_NAMESPACE},
        "labels": [],
    }
    tree = get_existing(path, LABELS_ROOT_TAG, default)
    tree = setup_array(tree, "labels")
    return LabelBundle.from_tree(tree)


def save_bundle(path: Path, bundle: LabelBundle) -> None:
    tree = fix_existing_dollar_sign(bundle.to_tree())
    xml = to_xml(LABELS_ROOT_TAG, tree, STANDARD_XML_OPTIONS)
    write_xml(path, xml)


def add_label(options: LabelAddOptions) -> LabelBundle:
    """Add one label to `options.target_file` and return the updated bundle.

    Raises:
        LabelAlreadyExists: If the fullName is taken. Nothing is written.
        OSError: If the labels directory or file can't be created, read or written.
    """

    target_file = options.target_file
    options.labels_dir.mkdir(parents=True, exist_ok=True)

    bundle = load_bundle(target_file)
    logger.debug(
        "Loaded label bundle",
        extra={"path": str(target_file), "label_count": len(bundle.labels)},
    )

    candidate = build_label(options)

    duplicate = find_duplicate(bundle.labels, candidate)
    if duplicate is not None:
        raise LabelAlreadyExists(existing=duplicate, path=target_file)

    updated = bundle.model_copy(update={"labels": [*bundle.labels, candidate]})
    save_bundle(target_file, updated)

    logger.info(
        "Label added",
        extra={
            "path": str(target_file),
            "full_name": candidate.full_name,
            "label_count": len(updated.labels),
        },
    )
    return updated
