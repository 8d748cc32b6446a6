"""Timestamp canonicalization.

Atom dates are rendered as UTC instants with millisecond precision, for
example ``2024-05-01T12:30:00.000Z``. Defaults are read from the clock when
the canonicalizer is called, never when the feed is rendered.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeAlias

Clock: TypeAlias = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_iso_utc(value: datetime) -> str:
    return to_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def canonical_timestamp(value: datetime | None = None, *, clock: Clock = utc_now) -> str:
    """Canonicalize ``value``, or the clock's current instant when omitted.

    Args:
        value: Point in time to render
        clock: Source of "now", consulted only when ``value`` is None

    Returns:
        ISO-8601 UTC instant string
    """
    if value is None:
        value = clock()
    return format_iso_utc(value)


def optional_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return format_iso_utc(value)
