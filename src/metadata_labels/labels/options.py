"""Per-invocation options for adding a custom label."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BUNDLE = "CustomLabels"
DEFAULT_LANGUAGE = "en_US"
DEFAULT_TARGET = Path("force-app/main/default")


class LabelAddOptions(BaseModel):
    """Immutable options captured once from the command line."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Text to turn into the label's value")
    bundle: str = Field(default=DEFAULT_BUNDLE)
    name: str | None = Field(default=None, description="Explicit API name")
    description: str | None = Field(default=None, description="Explicit short description")
    protected: bool = Field(default=False)
    categories: tuple[str, ...] | None = Field(default=None)
    language: str = Field(default=DEFAULT_LANGUAGE)
    target: Path = Field(default=DEFAULT_TARGET)

    @property
    def labels_dir(self) -> Path:
        return self.target / "labels"

    @property
    def target_file(self) -> Path:
        return self.labels_dir / f"{self.bundle}.labels-meta.xml"
