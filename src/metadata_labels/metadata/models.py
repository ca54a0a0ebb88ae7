"""Typed records for custom label metadata files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from metadata_labels.metadata.xml_io import PARSED_ATTRIBUTE_KEY, STANDARD_XML_OPTIONS

METADATA_NAMESPACE = "http://soap.sforce.com/2006/04/metadata"
LABELS_ROOT_TAG = "CustomLabels"


class CustomLabel(BaseModel):
    """One `<labels>` entry of a label bundle.

    Field order matches the element order written to disk.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    full_name: str = Field(alias="fullName")
    categories: str | None = Field(default=None)
    language: str
    protected: bool = Field(default=False)
    short_description: str = Field(alias="shortDescription")
    value: str


class LabelBundle(BaseModel):
    """The `<CustomLabels>` document: a namespace plus an ordered list of labels."""

    xmlns: str = Field(default=METADATA_NAMESPACE)
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Root attributes other than xmlns, preserved as read",
    )
    labels: list[CustomLabel] = Field(default_factory=list)

    @classmethod
    def from_tree(cls, tree: dict[str, Any]) -> LabelBundle:
        """Build a bundle from a parsed (or default) tree.

        `tree["labels"]` must already be a list; see `setup_array`.
        """

        known = {PARSED_ATTRIBUTE_KEY, STANDARD_XML_OPTIONS.attribute_key, "labels"}
        unexpected = set(tree) - known
        if unexpected:
            raise ValueError(
                f"Unexpected elements in <{LABELS_ROOT_TAG}>: {', '.join(sorted(unexpected))}"
            )

        attrs = dict(
            tree.get(PARSED_ATTRIBUTE_KEY) or tree.get(STANDARD_XML_OPTIONS.attribute_key) or {}
        )
        xmlns = attrs.pop("xmlns", METADATA_NAMESPACE)
        return cls.model_validate(
            {"xmlns": xmlns, "attributes": attrs, "labels": tree.get("labels", [])}
        )

    def to_tree(self) -> dict[str, Any]:
        """Return the tagged tree handed to the XML writer."""

        return {
            STANDARD_XML_OPTIONS.attribute_key: {"xmlns": self.xmlns, **self.attributes},
            "labels": [
                label.model_dump(by_alias=True, exclude_none=True) for label in self.labels
            ],
        }

    def full_names(self) -> list[str]:
        return [label.full_name for label in self.labels]
