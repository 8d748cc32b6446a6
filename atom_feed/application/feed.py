"""Atom feed aggregate."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..domain.exceptions import FeedValidationError
from ..domain.services.entity_normalizers import DEFAULT_GENERATOR
from ..domain.services.entry_normalizer import normalize_entry
from ..domain.services.feed_normalizer import normalize_feed_metadata
from ..domain.services.timestamps import utc_now
from ..domain.services.tree_builder import build_feed_tree

if TYPE_CHECKING:
    from ..domain.entities.inputs import EntryInput, FeedInput
    from ..domain.entities.records import EntryRecord, FeedMetadata, Generator
    from ..domain.services.timestamps import Clock
    from .ports.services import LoggerPort, XmlSerializerPort


class AtomFeed:
    """Normalized feed metadata plus an append-only list of entries.

    Metadata is normalized once, here in the constructor; each entry is
    normalized once, when it is added. Rendering only projects that state
    and can be repeated any number of times.

    Instances are not thread-safe. Callers sharing one feed between threads
    must serialize ``add_entry`` calls themselves.

    Without a ``logger`` the feed logs nothing.
    """

    def __init__(
        self,
        data: FeedInput | Mapping[str, Any],
        *,
        serializer: XmlSerializerPort,
        logger: LoggerPort | None = None,
        default_generator: Generator = DEFAULT_GENERATOR,
        clock: Clock = utc_now,
    ) -> None:
        super().__init__()
        self._serializer = serializer
        self._logger = logger
        self._default_generator = default_generator
        self._clock = clock
        self._metadata = normalize_feed_metadata(
            data, default_generator=default_generator, clock=clock
        )
        self._entries: list[EntryRecord] = []
        if self._logger is not None:
            self._logger.log_feed_created(
                self._metadata.id, self._metadata.title.value
            )

    @property
    def metadata(self) -> FeedMetadata:
        return self._metadata

    @property
    def entries(self) -> tuple[EntryRecord, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add_entry(self, data: EntryInput | Mapping[str, Any]) -> int:
        """Normalize and append an entry.

        Args:
            data: Entry input model or a mapping of the same shape

        Returns:
            The number of entries after the append (1-based ordinal)

        Raises:
            FeedValidationError: If the entry is invalid; no entry is appended
        """
        try:
            entry = normalize_entry(
                data, default_generator=self._default_generator, clock=self._clock
            )
        except FeedValidationError as exc:
            if self._logger is not None:
                self._logger.log_entry_rejected(exc.field, str(exc))
            raise
        self._entries.append(entry)
        if self._logger is not None:
            self._logger.log_entry_added(entry.id, len(self._entries))
        return len(self._entries)

    def build_tree(self) -> dict[str, Any]:
        return build_feed_tree(self._metadata, self._entries)

    def render(self, indent: int | str | None = None) -> str:
        """Render the feed as an Atom XML document.

        Args:
            indent: None or 0 for compact output, a number of spaces, or an
                indent string

        Returns:
            The serializer's output, unchanged
        """
        xml = self._serializer.serialize(self.build_tree(), indent=indent)
        if self._logger is not None:
            self._logger.log_render_complete(len(self._entries), len(xml))
        return xml
