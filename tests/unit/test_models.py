"""Unit tests for the typed label records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from metadata_labels.metadata.models import METADATA_NAMESPACE, CustomLabel, LabelBundle


def _label(full_name: str, **overrides: object) -> dict[str, object]:
    values: dict[str, object] = {
        "fullName": full_name,
        "language": "en_US",
        "protected": "false",
        "shortDescription": full_name,
        "value": "Some value",
    }
    values.update(overrides)
    return values


def test_from_tree_reads_namespace_and_labels() -> None:
    bundle = LabelBundle.from_tree(
        {"$": {"xmlns": METADATA_NAMESPACE}, "labels": [_label("One"), _label("Two")]}
    )

    assert bundle.xmlns == METADATA_NAMESPACE
    assert bundle.full_names() == ["One", "Two"]
    assert bundle.labels[0].protected is False


def test_from_tree_parses_protected_and_categories() -> None:
    bundle = LabelBundle.from_tree(
        {"labels": [_label("One", protected="true", categories="A,B")]}
    )

    label = bundle.labels[0]
    assert label.protected is True
    assert label.categories == "A,B"


def test_from_tree_keeps_extra_root_attributes() -> None:
    bundle = LabelBundle.from_tree(
        {"$": {"xmlns": METADATA_NAMESPACE, "version": "2"}, "labels": []}
    )

    assert bundle.attributes == {"version": "2"}
    assert bundle.to_tree()["@"] == {"xmlns": METADATA_NAMESPACE, "version": "2"}


def test_from_tree_rejects_unknown_root_elements() -> None:
    with pytest.raises(ValueError, match="fieldSets"):
        LabelBundle.from_tree({"labels": [], "fieldSets": "x"})


def test_from_tree_rejects_unknown_label_fields() -> None:
    with pytest.raises(ValidationError):
        LabelBundle.from_tree({"labels": [_label("One", color="red")]})


def test_to_tree_orders_fields_and_omits_missing_categories() -> None:
    with_categories = CustomLabel(
        full_name="One",
        categories="A,B",
        language="en_US",
        protected=False,
        short_description="One",
        value="1",
    )
    without_categories = with_categories.model_copy(update={"categories": None})
    bundle = LabelBundle(labels=[with_categories, without_categories])

    tree = bundle.to_tree()

    assert list(tree["labels"][0]) == [
        "fullName",
        "categories",
        "language",
        "protected",
        "shortDescription",
        "value",
    ]
    assert "categories" not in tree["labels"][1]
