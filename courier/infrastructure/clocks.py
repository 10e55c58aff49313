from __future__ import annotations

from datetime import datetime
from typing import override

from ..application.ports.services import ClockPort


class SystemClock(ClockPort):
    pass

    @override
    def now(self) -> datetime:
        return datetime.now()


class FixedClock(ClockPort):
    """Clock pinned to one moment, for deterministic recency checks."""

    def __init__(self, moment: datetime) -> None:
        super().__init__()
        self.moment = moment

    @override
    def now(self) -> datetime:
        return self.moment
