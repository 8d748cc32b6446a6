"""Domain services.

Normalization of caller input into canonical records and assembly of the
compact attribute/text tree handed to the XML serializer.
"""

from .entry_normalizer import normalize_entry
from .feed_normalizer import normalize_feed_metadata
from .tree_builder import build_feed_tree

__all__ = [
    "build_feed_tree",
    "normalize_entry",
    "normalize_feed_metadata",
]
