from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..domain.entities.files import Certificate, RawFile


def _empty_file_list() -> list[RawFile]:
    return []


class SkipReason(StrEnum):
    NOT_RECOGNIZED = "not recognized"
    UNSUPPORTED_FORMAT = "unsupported format"
    OUTDATED = "older than allowed age"
    SEND_FAILED = "send rejected"


@dataclass(slots=True)
class DispatchRequest:
    files: Sequence[RawFile]
    certificate: Certificate


@dataclass(slots=True)
class DispatchResult:
    skipped_files: list[RawFile] = field(default_factory=_empty_file_list)
    sent_files: list[RawFile] = field(default_factory=_empty_file_list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_files)

    @property
    def sent_count(self) -> int:
        return len(self.sent_files)

    @property
    def all_sent(self) -> bool:
        return not self.skipped_files
