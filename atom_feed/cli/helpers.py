"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from rich.markup import escape

from ..domain.exceptions import AtomFeedError
from ..infrastructure.io.feed_document import load_feed_document

if TYPE_CHECKING:
    from pathlib import Path

    from ..application.feed import AtomFeed
    from ..infrastructure.container import DependencyContainer


def load_feed(feed_file: Path, container: DependencyContainer) -> AtomFeed:
    """Build a feed from a document, appending its entries in order.

    Project errors are turned into ``click.ClickException`` so the CLI exits
    with a message instead of a traceback.
    """
    try:
        document = load_feed_document(feed_file)
        feed = container.create_feed(document.feed)
        for entry in document.entries:
            feed.add_entry(entry)
    except AtomFeedError as exc:
        container.create_logger().error(escape(str(exc)))
        raise click.ClickException(str(exc)) from exc
    return feed
