from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...application.models import DispatchResult, SkipReason


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
    def log_dispatch_start(self, file_count: int) -> None:
        return None

    @override
    def log_file_sent(self, file_name: str) -> None:
        return None

    @override
    def log_file_skipped(self, file_name: str, reason: SkipReason) -> None:
        return None

    @override
    def log_dispatch_complete(self, result: DispatchResult) -> None:
        return None

    @override
    def log_cache_hit(self, item_id: str) -> None:
        return None

    @override
    def log_cache_miss(self, item_id: str, *, found: bool) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
