from collections.abc import Mapping
from typing import Any

from ..entities.inputs import EntryInput
from ..entities.records import EntryRecord, Generator
from .entity_normalizers import (
    DEFAULT_GENERATOR,
    normalize_categories,
    normalize_links,
    normalize_people,
    require_value,
)
from .feed_normalizer import normalize_feed_metadata
from .parsing import parse_input
from .text_constructs import require_text, resolve_content, resolve_text
from .timestamps import Clock, canonical_timestamp, optional_timestamp, utc_now


def normalize_entry(
    data: EntryInput | Mapping[str, Any],
    *,
    default_generator: Generator = DEFAULT_GENERATOR,
    clock: Clock = utc_now,
    context: str = "entry",
) -> EntryRecord:
    """Normalize raw entry data into a canonical record.

    ``updated`` defaults to the clock's instant at this call; ``published``
    has no default. An embedded ``source`` goes through the feed metadata
    normalizer with the same generator default and clock.
    """
    entry = parse_input(EntryInput, data, context=context)
    entry_id = require_value(entry.id, field=f"{context}.id")
    title = require_text(entry.title, field=f"{context}.title")
    authors = normalize_people(entry.authors, field=f"{context}.authors", required=True)
    content = resolve_content(entry.content, field=f"{context}.content")

    source = None
    if entry.source is not None:
        source = normalize_feed_metadata(
            entry.source,
            default_generator=default_generator,
            clock=clock,
            context=f"{context}.source",
        )

    return EntryRecord(
        id=entry_id,
        title=title,
        updated=canonical_timestamp(entry.updated, clock=clock),
        authors=authors,
        content=content,
        categories=normalize_categories(
            entry.categories, field=f"{context}.categories"
        ),
        contributors=normalize_people(
            entry.contributors, field=f"{context}.contributors"
        ),
        links=normalize_links(entry.links, field=f"{context}.links"),
        published=optional_timestamp(entry.published),
        rights=resolve_text(entry.rights),
        source=source,
        summary=resolve_text(entry.summary),
    )
