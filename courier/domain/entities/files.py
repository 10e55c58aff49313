from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True, eq=False)
class RawFile:
    name: str
    content: bytes


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    name: str
    content: bytes
    created_at: datetime
    format_version: str


@dataclass(frozen=True, slots=True)
class Certificate:
    subject: str
    raw: bytes = b""
