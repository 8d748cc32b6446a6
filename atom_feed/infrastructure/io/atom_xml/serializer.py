"""Serializer for compact attribute/text trees.

This module turns the compact tree assembled by the domain layer into an XML
string using ElementTree. Escaping of text and attribute values is
ElementTree's; indentation only adds whitespace between elements.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element
from xml.sax.saxutils import escape

from ....constants import TreeKeys

if TYPE_CHECKING:
    XmlElement: TypeAlias = Element[str]
else:
    XmlElement: TypeAlias = Element


class XmlTreeSerializer:
    pass

    def serialize(
        self, tree: Mapping[str, Any], *, indent: int | str | None = None
    ) -> str:
        return serialize_compact_tree(tree, indent=indent)


def serialize_compact_tree(
    tree: Mapping[str, Any], *, indent: int | str | None = None
) -> str:
    """Serialize a compact tree to an XML string.

    Args:
        tree: Compact tree with an optional declaration and one root element
        indent: None or 0 for compact output, a number of spaces, or an
            indent string

    Returns:
        XML document string
    """
    space = resolve_indent(indent)
    roots = [(name, node) for name, node in tree.items() if name != TreeKeys.DECLARATION]
    if len(roots) != 1:
        raise ValueError(
            f"Compact tree must have exactly one root element, got {len(roots)}"
        )

    name, node = roots[0]
    root = build_element(name, node)
    if space:
        ET.indent(root, space=space)
    body = ET.tostring(root, encoding="unicode")

    declaration = tree.get(TreeKeys.DECLARATION)
    if declaration is None:
        return body
    separator = "\n" if space else ""
    return f"{format_declaration(declaration)}{separator}{body}"


def resolve_indent(indent: int | str | None) -> str | None:
    if indent is None:
        return None
    if isinstance(indent, bool):
        raise TypeError("indent must be an int or a string, got bool")
    if isinstance(indent, int):
        if indent < 0:
            raise ValueError(f"indent must be non-negative, got {indent}")
        return " " * indent or None
    return indent or None


def build_element(name: str, node: Any) -> XmlElement:
    element = ET.Element(name)
    _populate(element, node)
    return element


def format_declaration(declaration: Mapping[str, Any]) -> str:
    attributes = declaration.get(TreeKeys.ATTRIBUTES) or {}
    parts = ["<?xml"]
    for key, value in attributes.items():
        quoted = escape(str(value), {'"': "&quot;"})
        parts.append(f' {key}="{quoted}"')
    parts.append("?>")
    return "".join(parts)


def _populate(element: XmlElement, node: Any) -> None:
    if not isinstance(node, Mapping):
        element.text = str(node)
        return

    for key, value in (node.get(TreeKeys.ATTRIBUTES) or {}).items():
        element.set(key, str(value))
    if TreeKeys.TEXT in node:
        element.text = str(node[TreeKeys.TEXT])

    for key, value in node.items():
        if key in (TreeKeys.ATTRIBUTES, TreeKeys.TEXT):
            continue
        children = value if isinstance(value, (list, tuple)) else [value]
        for child in children:
            _populate(ET.SubElement(element, key), child)
