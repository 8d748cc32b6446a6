"""Loader for feed description documents.

A feed document is a JSON or TOML file with a ``feed`` table holding the
feed metadata and an optional ``entries`` array, for example::

    [feed]
    id = "urn:feed:1"
    title = "My Feed"
    authors = [{ name = "A" }]

    [[entries]]
    id = "urn:entry:1"
    title = "Hello"
    content = "Hi"
    authors = [{ name = "A" }]
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
import tomllib
from typing import Any, cast

from .exceptions import FeedDocumentError

SUPPORTED_SUFFIXES = (".json", ".toml")


@dataclass(frozen=True, slots=True)
class FeedDocument:
    feed: dict[str, Any]
    entries: tuple[dict[str, Any], ...] = field(default_factory=tuple)


def load_feed_document(path: Path) -> FeedDocument:
    """Load a feed description from a JSON or TOML file.

    Args:
        path: Path to the document

    Returns:
        The feed table and the entry tables in document order

    Raises:
        FeedDocumentError: If the file cannot be read or has the wrong shape
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise FeedDocumentError(
            f"Unsupported feed document type {suffix or '(none)'}: "
            f"expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )

    try:
        if suffix == ".json":
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        else:
            with path.open("rb") as handle:
                data = tomllib.load(handle)
    except OSError as exc:
        raise FeedDocumentError(f"Cannot read feed document {path}: {exc}") from exc
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise FeedDocumentError(f"Malformed feed document {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise FeedDocumentError(f"{path}: top level must be an object")
    document = cast("dict[str, Any]", data)

    feed = document.get("feed")
    if not isinstance(feed, dict):
        raise FeedDocumentError(f"{path}: missing 'feed' table")

    entries = document.get("entries", [])
    if not isinstance(entries, list) or not all(
        isinstance(entry, dict) for entry in entries
    ):
        raise FeedDocumentError(f"{path}: 'entries' must be an array of tables")

    return FeedDocument(feed=feed, entries=tuple(entries))
