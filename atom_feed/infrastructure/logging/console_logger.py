from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    feed_id: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = {
            "entries_added": 0,
            "entries_rejected": 0,
            "renders": 0,
            "warnings": 0,
            "errors": 0,
        }

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_feed_created(self, feed_id: str, title: str) -> None:
        self.set_context(feed_id=feed_id)
        self.verbose(f"Feed created: {escape(title)}")

    @override
    def log_entry_added(self, entry_id: str, entry_count: int) -> None:
        self._stats["entries_added"] += 1
        self.debug(f"Entry #{entry_count} added: {escape(entry_id)}")

    @override
    def log_entry_rejected(self, field: str | None, reason: str) -> None:
        self._stats["entries_rejected"] += 1
        self.warning(escape(f"Entry rejected ({field or 'entry'}): {reason}"))

    @override
    def log_render_complete(self, entry_count: int, size: int) -> None:
        self._stats["renders"] += 1
        self.verbose(f"Rendered {entry_count} entries ({size:,} characters)")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        self.console.print()
        self.console.print("[bold]Statistics:[/bold]")
        self.console.print(f"  Entries added: {self._stats['entries_added']}")
        self.console.print(f"  Entries rejected: {self._stats['entries_rejected']}")
        self.console.print(f"  Renders: {self._stats['renders']}")
        if self._stats["warnings"]:
            self.console.print(f"  [yellow]Warnings: {self._stats['warnings']}[/yellow]")
        if self._stats["errors"]:
            self.console.print(f"  [red]Errors: {self._stats['errors']}[/red]")
        if self._context:
            self.console.print(f"  Elapsed: {self._context.elapsed_ms():.0f}ms")

    def _get_prefix(self) -> str:
        if self._context and self._context.feed_id:
            return escape(f"[{self._context.feed_id}]") + " "
        return ""
