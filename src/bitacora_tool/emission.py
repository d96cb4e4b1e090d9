"""Salida de los dos flujos (actividades y días) y reporte de frecuencias."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path

import pandas as pd

from bitacora_tool.diagnostics import Diagnostics
from bitacora_tool.model import ActivityRecord, DayAggregate, ParseResult
from bitacora_tool.parser import ParserState

ACTIVITY_COLUMNS: list[str] = ["date", "quantity", "unit", "type"]
DAY_COLUMNS: list[str] = [
    "date",
    "weight",
    "walk_miles",
    "run_miles",
    "bike_miles",
    "swim_miles",
]


def activities_to_frame(activities: Sequence[ActivityRecord]) -> pd.DataFrame:
    """One row per activity: date, quantity, unit, type."""
    if not activities:
        return pd.DataFrame(columns=ACTIVITY_COLUMNS)
    df = pd.DataFrame([asdict(a) for a in activities])
    return df[ACTIVITY_COLUMNS]


def days_to_frame(days: Sequence[DayAggregate]) -> pd.DataFrame:
    """One row per day, in input order (not re-sorted)."""
    if not days:
        return pd.DataFrame(columns=DAY_COLUMNS)
    df = pd.DataFrame([asdict(d) for d in days])
    return df[DAY_COLUMNS]


def write_streams(
    result: ParseResult, activities_path: Path, days_path: Path
) -> tuple[int, int]:
    """Write both streams as comma-delimited CSV files.

    Returns:
        Number of activity rows and day rows written.
    """
    activities_df = activities_to_frame(result.activities)
    days_df = days_to_frame(result.days)
    for path in (activities_path, days_path):
        path.parent.mkdir(parents=True, exist_ok=True)
    activities_df.to_csv(activities_path, index=False)
    days_df.to_csv(days_path, index=False)
    return len(activities_df), len(days_df)


def _format_counts(title: str, counts: Counter[str]) -> str:
    items = ", ".join(
        f"{name or '(none)'}={count}" for name, count in counts.most_common()
    )
    return f"{title}: {items}" if items else f"{title}: -"


def frequency_report(state: ParserState) -> list[str]:
    """Lines with raw (pre-conversion) unit and canonical type counts."""
    return [
        _format_counts("raw units", state.unit_counts),
        _format_counts("types", state.type_counts),
    ]


def report_frequencies(state: ParserState, diagnostics: Diagnostics) -> None:
    """Emit the end-of-run frequency report on the diagnostics channel."""
    for line in frequency_report(state):
        diagnostics.info(line)
