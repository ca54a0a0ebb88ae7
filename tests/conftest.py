"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from metadata_labels.labels.options import LabelAddOptions

NAMESPACE = "http://soap.sforce.com/2006/04/metadata"


def _label_xml(full_name: str, value: str = "Some value") -> str:
    return (
        "    <labels>\n"
        f"        <fullName>{full_name}</fullName>\n"
        "        <language>en_US</language>\n"
        "        <protected>false</protected>\n"
        f"        <shortDescription>{full_name}</shortDescription>\n"
        f"        <value>{value}</value>\n"
        "    </labels>\n"
    )


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo `configure_logging` so handlers never outlive a captured stream."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Provide a temporary `force-app/main/default`-style target directory."""
    return tmp_path / "force-app" / "main" / "default"


@pytest.fixture
def write_bundle(target_dir: Path) -> Callable[..., Path]:
    """Write a label bundle file holding labels with the given fullNames."""

    def _write(*full_names: str, bundle: str = "CustomLabels") -> Path:
        labels_dir = target_dir / "labels"
        labels_dir.mkdir(parents=True, exist_ok=True)
        path = labels_dir / f"{bundle}.labels-meta.xml"
        body = "".join(_label_xml(name) for name in full_names)
        path.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<CustomLabels xmlns="{NAMESPACE}">\n{body}</CustomLabels>\n',
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def make_options(target_dir: Path) -> Callable[..., LabelAddOptions]:
    """Build label options pointing at the temporary target directory."""

    def _make(**overrides: object) -> LabelAddOptions:
        values: dict[str, object] = {"text": "Hello there world", "target": target_dir}
        values.update(overrides)
        return LabelAddOptions(**values)  # type: ignore[arg-type]

    return _make
