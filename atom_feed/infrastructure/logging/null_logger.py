from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_feed_created(self, feed_id: str, title: str) -> None:
        return None

    @override
    def log_entry_added(self, entry_id: str, entry_count: int) -> None:
        return None

    @override
    def log_entry_rejected(self, field: str | None, reason: str) -> None:
        return None

    @override
    def log_render_complete(self, entry_count: int, size: int) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
