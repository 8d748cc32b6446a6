"""Atom XML serialization.

The module is organized into focused components:
- serializer: compact tree to XML string
- writer: file output for rendered feeds
"""

from .serializer import XmlTreeSerializer, resolve_indent, serialize_compact_tree
from .writer import write_feed_file

__all__ = [
    "XmlTreeSerializer",
    "resolve_indent",
    "serialize_compact_tree",
    "write_feed_file",
]
