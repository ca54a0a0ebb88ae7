"""Read and write metadata XML as tagged in-memory trees.

A *tree* is the plain-Python shape of an XML element:

- an element with only text becomes a `str`
- an element with children becomes a `dict` keyed by child tag name
- a child tag seen once is stored bare; a repeated tag is stored as a `list`
- attributes live under a reserved key: `$` when produced by `parse_xml`,
  `@` when handed to `to_xml`

The two attribute keys differ, so parsed trees go through
`fix_existing_dollar_sign` before they are serialized again.
"""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PARSED_ATTRIBUTE_KEY = "$"
TEXT_KEY = "_"


@dataclass(frozen=True, slots=True)
class XmlOptions:
    """Formatting options shared by every metadata file writer."""

    attribute_key: str = "@"
    indent: str = "    "
    xml_version: str = "1.0"
    encoding: str = "UTF-8"
    include_declaration: bool = True


STANDARD_XML_OPTIONS = XmlOptions()


def _split_tag(tag: str) -> tuple[str, str | None]:
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return local, namespace
    return tag, None


def _element_to_tree(elem: ET.Element, *, force_dict: bool = False) -> Any:
    children = list(elem)
    if not children and not elem.attrib and not force_dict:
        return elem.text or ""

    node: dict[str, Any] = {}
    if elem.attrib:
        node[PARSED_ATTRIBUTE_KEY] = dict(elem.attrib)

    repeated: set[str] = set()
    for child in children:
        key, _ = _split_tag(child.tag)
        value = _element_to_tree(child)
        if key not in node:
            node[key] = value
        elif key in repeated:
            node[key].append(value)
        else:
            node[key] = [node[key], value]
            repeated.add(key)

    if not children and elem.text and elem.text.strip():
        node[TEXT_KEY] = elem.text
    return node


def parse_xml(text: str) -> tuple[str, dict[str, Any]]:
    """Parse an XML document into `(root_name, tree)`.

    The root element's namespace is surfaced as its `xmlns` attribute.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is not well-formed.
    """

    root = ET.fromstring(text)
    name, namespace = _split_tag(root.tag)
    tree: dict[str, Any] = _element_to_tree(root, force_dict=True)
    if namespace:
        attrs = tree.setdefault(PARSED_ATTRIBUTE_KEY, {})
        attrs.setdefault("xmlns", namespace)
    return name, tree


def get_existing(path: Path, root_name: str, default: dict[str, Any]) -> dict[str, Any]:
    """Return the parsed tree at `path`, or a copy of `default` if it doesn't exist."""

    if not path.exists():
        logger.debug("Metadata file not found; using default", extra={"path": str(path)})
        return copy.deepcopy(default)

    name, tree = parse_xml(path.read_text(encoding="utf-8"))
    if name != root_name:
        raise ValueError(f"Expected root element <{root_name}> in {path}, found <{name}>")
    return tree


def setup_array(tree: dict[str, Any], key: str) -> dict[str, Any]:
    """Return a copy of `tree` where `tree[key]` is always a list."""

    value = tree.get(key)
    if isinstance(value, list):
        return tree

    updated = dict(tree)
    if value is None or value == "":
        updated[key] = []
    else:
        updated[key] = [value]
    return updated


def fix_existing_dollar_sign(tree: Any, options: XmlOptions = STANDARD_XML_OPTIONS) -> Any:
    """Move parser-style `$` attribute maps to the writer's attribute key, recursively."""

    if isinstance(tree, list):
        return [fix_existing_dollar_sign(item, options) for item in tree]
    if not isinstance(tree, dict):
        return tree

    fixed: dict[str, Any] = {}
    for key, value in tree.items():
        if key == PARSED_ATTRIBUTE_KEY:
            merged = dict(fixed.get(options.attribute_key) or {})
            merged.update(value)
            fixed[options.attribute_key] = merged
        elif key == options.attribute_key:
            merged = dict(value)
            merged.update(fixed.get(options.attribute_key) or {})
            fixed[options.attribute_key] = merged
        else:
            fixed[key] = fix_existing_dollar_sign(value, options)
    return fixed


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _build_element(name: str, value: Any, options: XmlOptions) -> ET.Element:
    elem = ET.Element(name)
    if not isinstance(value, dict):
        elem.text = _to_text(value)
        return elem

    for key, child in value.items():
        if key == options.attribute_key:
            for attr_name, attr_value in child.items():
                elem.set(attr_name, _to_text(attr_value))
            continue
        if key == TEXT_KEY:
            elem.text = _to_text(child)
            continue
        if child is None:
            continue
        for item in child if isinstance(child, list) else [child]:
            elem.append(_build_element(key, item, options))
    return elem


def to_xml(
    root_name: str, tree: dict[str, Any], options: XmlOptions = STANDARD_XML_OPTIONS
) -> str:
    """Serialize a tagged tree into an XML document string."""

    root = _build_element(root_name, tree, options)
    ET.indent(root, space=options.indent)
    body = ET.tostring(root, encoding="unicode", short_empty_elements=False)

    if not options.include_declaration:
        return body + "\n"
    declaration = f'<?xml version="{options.xml_version}" encoding="{options.encoding}"?>'
    return f"{declaration}\n{body}\n"


def write_xml(path: Path, xml: str) -> None:
    """Overwrite `path` with `xml` in full."""

    path.write_text(xml, encoding="utf-8")
