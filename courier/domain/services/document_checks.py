"""Validation predicates applied to recognized documents before signing."""

from __future__ import annotations

import calendar
from datetime import MAXYEAR
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection
    from datetime import datetime

    from ..entities.files import ParsedDocument

MONTHS_PER_YEAR = 12


def add_months(moment: datetime, months: int) -> datetime:
    """Shift ``moment`` by whole calendar months.

    The day is clamped to the last day of the target month (Jan 31 plus one
    month is Feb 28, or Feb 29 in a leap year); the time of day and tzinfo
    are preserved.

    Raises:
        OverflowError: If the result falls after year 9999.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // MONTHS_PER_YEAR
    month = month_index % MONTHS_PER_YEAR + 1
    if year > MAXYEAR:
        raise OverflowError(f"{moment.isoformat()} + {months} months is out of range")
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def is_supported_format(
    document: ParsedDocument, supported_formats: Collection[str]
) -> bool:
    # Exact match: "4.00" and " 4.0" are rejected.
    return document.format_version in supported_formats


def is_recent(document: ParsedDocument, now: datetime, max_age_months: int) -> bool:
    """Return True while ``created_at + max_age_months`` is still after ``now``."""
    try:
        expires_at = add_months(document.created_at, max_age_months)
    except OverflowError:
        return True
    return expires_at > now
