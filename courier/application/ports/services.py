from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime

    from ...domain.entities.files import Certificate, ParsedDocument, RawFile
    from ...domain.entities.outcome import Lookup
    from ..models import DispatchResult, SkipReason


@runtime_checkable
class RecognizerPort(Protocol):
    pass

    def try_recognize(self, file: RawFile) -> Lookup[ParsedDocument]: ...


@runtime_checkable
class SignerPort(Protocol):
    pass

    def sign(self, content: bytes, certificate: Certificate) -> bytes: ...


@runtime_checkable
class SenderPort(Protocol):
    pass

    def try_send(self, signed_content: bytes) -> bool: ...


@runtime_checkable
class ClockPort(Protocol):
    pass

    def now(self) -> datetime: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_dispatch_start(self, file_count: int) -> None: ...

    def log_file_sent(self, file_name: str) -> None: ...

    def log_file_skipped(self, file_name: str, reason: SkipReason) -> None: ...

    def log_dispatch_complete(self, result: DispatchResult) -> None: ...

    def log_cache_hit(self, item_id: str) -> None: ...

    def log_cache_miss(self, item_id: str, *, found: bool) -> None: ...

    def log_final_stats(self) -> None: ...
