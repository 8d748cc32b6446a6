"""Feed metadata normalization.

Used for the top-level feed and, recursively, for the ``source`` snapshot
embedded in an entry.
"""

from collections.abc import Mapping
from typing import Any

from ..entities.inputs import FeedInput
from ..entities.records import FeedMetadata, Generator
from .entity_normalizers import (
    DEFAULT_GENERATOR,
    normalize_categories,
    normalize_generator,
    normalize_links,
    normalize_people,
    require_value,
)
from .parsing import parse_input
from .text_constructs import require_text, resolve_text
from .timestamps import Clock, canonical_timestamp, utc_now


def normalize_feed_metadata(
    data: FeedInput | Mapping[str, Any],
    *,
    default_generator: Generator = DEFAULT_GENERATOR,
    clock: Clock = utc_now,
    context: str = "feed",
) -> FeedMetadata:
    """Normalize raw feed data into a canonical record.

    Args:
        data: Feed input model or a mapping of the same shape
        default_generator: Identity used when no generator is supplied
        clock: Source of "now" for a missing ``updated``
        context: Field path prefix for error messages

    Returns:
        The canonical feed metadata

    Raises:
        MissingRequiredFieldError: If id, title or authors are missing
        FeedValidationError: If the data has the wrong shape
    """
    feed = parse_input(FeedInput, data, context=context)
    return FeedMetadata(
        id=require_value(feed.id, field=f"{context}.id"),
        title=require_text(feed.title, field=f"{context}.title"),
        updated=canonical_timestamp(feed.updated, clock=clock),
        authors=normalize_people(
            feed.authors, field=f"{context}.authors", required=True
        ),
        generator=normalize_generator(
            feed.generator, default=default_generator, field=f"{context}.generator"
        ),
        categories=normalize_categories(
            feed.categories, field=f"{context}.categories"
        ),
        contributors=normalize_people(
            feed.contributors, field=f"{context}.contributors"
        ),
        icon=feed.icon or None,
        logo=feed.logo or None,
        links=normalize_links(feed.links, field=f"{context}.links"),
        rights=resolve_text(feed.rights),
        subtitle=resolve_text(feed.subtitle),
    )
