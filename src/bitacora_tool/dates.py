"""Fechas de la bitácora: parseo y control de secuencia día a día."""

from __future__ import annotations

from dataclasses import dataclass

from bitacora_tool.diagnostics import Diagnostics
from bitacora_tool.model import INVALID_DATE, ParsedDate

_DAYS_PER_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(year: int, month: int) -> int:
    """Month length; February has 29 days whenever ``year % 4 == 0``."""
    if month == 2 and year % 4 == 0:
        return 29
    return _DAYS_PER_MONTH[month - 1]


def _field(text: str) -> int:
    return int(text) if text.isascii() and text.isdecimal() else 0


def parse_date(token: str) -> ParsedDate:
    """Parse ``YYYY-MM-DD``; malformed or impossible dates give all zeros."""
    pieces = token.split("-")
    if len(pieces) != 3:
        return INVALID_DATE
    year, month, day = (_field(p) for p in pieces)
    if not 1 <= month <= 12:
        return INVALID_DATE
    if not 1 <= day <= days_in_month(year, month):
        return INVALID_DATE
    return ParsedDate(year, month, day)


def next_calendar_date(current: ParsedDate) -> ParsedDate:
    """Day after ``current`` under the simplified leap rule."""
    year, month, day = current.year, current.month, current.day + 1
    if day > days_in_month(year, month):
        day = 1
        month += 1
        if month > 12:
            month = 1
            year += 1
    return ParsedDate(year, month, day)


@dataclass
class DateSequencer:
    """Checks that each day follows the previous one by exactly one day."""

    last: ParsedDate | None = None

    def observe(
        self,
        current: ParsedDate,
        line_number: int,
        diagnostics: Diagnostics,
    ) -> bool:
        """Compare against the expected next day, then advance.

        Returns:
            True when ``current`` is the expected date (or the first one).
        """
        in_sequence = True
        if self.last is not None:
            expected = next_calendar_date(self.last)
            if current != expected:
                in_sequence = False
                diagnostics.anomaly(
                    f"date {current.isoformat()} does not follow "
                    f"{self.last.isoformat()} (expected {expected.isoformat()})",
                    line_number,
                )
        if current.is_valid:
            self.last = current
        return in_sequence
