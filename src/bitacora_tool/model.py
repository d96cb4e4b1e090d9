"""Modelos tipados para líneas, días y actividades de la bitácora."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawLogLine:
    """One physical line of the log file."""

    text: str
    line_number: int
    is_continuation: bool = False


@dataclass(frozen=True)
class LogicalEntry:
    """Merged text for one day (first physical line number kept)."""

    text: str
    line_number: int


@dataclass(frozen=True)
class ParsedDate:
    """Calendar date from a ``YYYY-MM-DD`` token (all zeros when invalid)."""

    year: int
    month: int
    day: int

    @property
    def is_valid(self) -> bool:
        return self.month != 0

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


INVALID_DATE = ParsedDate(0, 0, 0)


@dataclass(frozen=True)
class DayDescriptor:
    """Pieces of a day entry: date token, bracketed annotation and activities."""

    date_token: str
    annotation: str
    activity_text: str


@dataclass(frozen=True)
class ActivityRecord:
    """One activity of a day (``type`` is the canonical code)."""

    date: str
    type: str
    unit: str
    quantity: float


@dataclass
class DayAggregate:
    """Per-day totals in miles, one per logical entry."""

    date: str
    weight: float = 0.0
    walk_miles: float = 0.0
    run_miles: float = 0.0
    bike_miles: float = 0.0
    swim_miles: float = 0.0


@dataclass
class ParseResult:
    """Both output streams of a run, in input order."""

    activities: list[ActivityRecord] = field(default_factory=list)
    days: list[DayAggregate] = field(default_factory=list)
