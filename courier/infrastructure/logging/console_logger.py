from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...application.models import DispatchResult, SkipReason


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    batch_id: str = ""
    file_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "files_sent": 0,
        "files_skipped": 0,
        "lookups": 0,
        "cache_hits": 0,
        "cache_misses": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats = _empty_stats()
        self._batch_count = 0

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
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

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
    def log_dispatch_start(self, file_count: int) -> None:
        self._batch_count += 1
        self.clear_context()
        self.set_context(batch_id=f"batch-{self._batch_count}", operation="dispatch")
        self.verbose(f"Dispatching {file_count} file(s)")

    @override
    def log_file_sent(self, file_name: str) -> None:
        self._stats["files_sent"] += 1
        self.set_context(file_name=file_name)
        self.verbose(f"  Sent {escape(file_name)}")

    @override
    def log_file_skipped(self, file_name: str, reason: SkipReason) -> None:
        self._stats["files_skipped"] += 1
        self.set_context(file_name=file_name)
        self.warning(f"Skipped {escape(file_name)}: {reason}")

    @override
    def log_dispatch_complete(self, result: DispatchResult) -> None:
        self.set_context(file_name="")
        if result.all_sent:
            self.success(f"Sent {result.sent_count} file(s)")
        else:
            self.info(
                f"Sent {result.sent_count} file(s), skipped {result.skipped_count}"
            )
        if self._context is not None:
            self.verbose(f"Dispatch finished in {self._context.elapsed_ms():.1f} ms")
        self.clear_context()

    @override
    def log_cache_hit(self, item_id: str) -> None:
        self._stats["lookups"] += 1
        self._stats["cache_hits"] += 1
        self.debug(f"Cache hit for {item_id}")

    @override
    def log_cache_miss(self, item_id: str, *, found: bool) -> None:
        self._stats["lookups"] += 1
        self._stats["cache_misses"] += 1
        if found:
            self.debug(f"Cache miss for {item_id}: loaded from service")
        else:
            self.debug(f"Cache miss for {item_id}: not found in service")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Dispatch Statistics:[/dim]")
            self.console.print(f"[dim]  Files sent: {self._stats['files_sent']}[/dim]")
            self.console.print(
                f"[dim]  Files skipped: {self._stats['files_skipped']}[/dim]"
            )
            self.console.print(
                f"[dim]  Lookups: {self._stats['lookups']} (hits={self._stats['cache_hits']}, misses={self._stats['cache_misses']})[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.batch_id:
            parts.append(self._context.batch_id)
        if self._context.operation:
            parts.append(self._context.operation)
        if self._context.file_name:
            parts.append(escape(self._context.file_name))
        return f"\\[{':'.join(parts)}] " if parts else ""
