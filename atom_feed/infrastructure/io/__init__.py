"""I/O adapters: Atom XML serialization and feed-document loading."""

from .atom_xml import XmlTreeSerializer, serialize_compact_tree, write_feed_file
from .exceptions import FeedDocumentError
from .feed_document import FeedDocument, load_feed_document

__all__ = [
    "FeedDocument",
    "FeedDocumentError",
    "XmlTreeSerializer",
    "load_feed_document",
    "serialize_compact_tree",
    "write_feed_file",
]
