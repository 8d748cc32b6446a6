from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class XmlSerializerPort(Protocol):
    """Turns a compact attribute/text tree into an XML string."""

    def serialize(
        self, tree: Mapping[str, Any], *, indent: int | str | None = None
    ) -> str: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_feed_created(self, feed_id: str, title: str) -> None: ...

    def log_entry_added(self, entry_id: str, entry_count: int) -> None: ...

    def log_entry_rejected(self, field: str | None, reason: str) -> None: ...

    def log_render_complete(self, entry_count: int, size: int) -> None: ...

    def log_final_stats(self) -> None: ...
