"""Writer for rendered Atom feeds."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ....application.feed import AtomFeed


def write_feed_file(
    feed: AtomFeed, output: Path, *, indent: int | str | None = None
) -> int:
    """Render ``feed`` and write it to ``output`` as UTF-8.

    Args:
        feed: The feed to render
        output: Destination file path
        indent: Indentation option passed through to ``render``

    Returns:
        Number of characters written
    """
    xml = feed.render(indent)
    output.parent.mkdir(parents=True, exist_ok=True)
    return output.write_text(xml, encoding="utf-8")
