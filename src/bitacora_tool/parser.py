"""Pipeline completo: entrada lógica -> día agregado + actividades."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from bitacora_tool.activities import split_activities, tokenize_activity
from bitacora_tool.comments import strip_comments
from bitacora_tool.config import ParserConfig
from bitacora_tool.dates import DateSequencer, parse_date
from bitacora_tool.descriptor import extract_day_descriptor, update_year
from bitacora_tool.diagnostics import Diagnostics
from bitacora_tool.model import ActivityRecord, DayAggregate, LogicalEntry, ParseResult
from bitacora_tool.reassemble import iter_logical_entries
from bitacora_tool.units import (
    BIKE,
    RUN,
    SWIM,
    WALK,
    check_distance,
    convert_units,
    normalize_type,
)
from bitacora_tool.weight import parse_weight

_DAY_FIELDS: dict[str, str] = {
    WALK: "walk_miles",
    RUN: "run_miles",
    BIKE: "bike_miles",
    SWIM: "swim_miles",
}


@dataclass
class ParserState:
    """State carried across entries for one run (year context and tallies)."""

    year: int = 0
    sequencer: DateSequencer = field(default_factory=DateSequencer)
    unit_counts: Counter[str] = field(default_factory=Counter)
    type_counts: Counter[str] = field(default_factory=Counter)


def process_entry(
    entry: LogicalEntry,
    state: ParserState,
    diagnostics: Diagnostics,
    config: ParserConfig | None = None,
) -> tuple[DayAggregate, list[ActivityRecord]] | None:
    """Run one logical entry through the whole chain.

    Args:
        entry: Merged text of one day.
        state: Run state; its year and last date are updated.
        diagnostics: Diagnostics channel.
        config: Parser settings.

    Returns:
        The day aggregate and its activities, or None if the entry was
        skipped (year header or structural failure).
    """
    config = config or ParserConfig()
    line = entry.line_number
    if update_year(entry.text, state, line, diagnostics):
        return None

    text = strip_comments(entry.text).strip()
    descriptor = extract_day_descriptor(text, state.year, line, diagnostics)
    if descriptor is None:
        return None

    state.sequencer.observe(parse_date(descriptor.date_token), line, diagnostics)

    day = DayAggregate(
        date=descriptor.date_token,
        weight=parse_weight(descriptor.annotation, line, diagnostics, config),
    )
    activities: list[ActivityRecord] = []
    for piece in split_activities(descriptor.activity_text):
        token = tokenize_activity(piece, line, diagnostics)
        if token is None or token.is_empty:
            continue
        kind = normalize_type(token.type)
        unit, quantity = convert_units(
            kind, token.units, token.quantity, line, diagnostics
        )
        check_distance(kind, quantity, line, diagnostics, config)
        state.unit_counts[token.units] += 1
        state.type_counts[kind] += 1

        activities.append(
            ActivityRecord(
                date=descriptor.date_token, type=kind, unit=unit, quantity=quantity
            )
        )
        day_field = _DAY_FIELDS.get(kind)
        if day_field is not None:
            # Mismo tipo dos veces en el día: gana el último.
            setattr(day, day_field, quantity)
    return day, activities


def parse_lines(
    lines: Iterable[str],
    config: ParserConfig | None = None,
    diagnostics: Diagnostics | None = None,
    state: ParserState | None = None,
) -> ParseResult:
    """Parse a whole log into activity and day streams, in input order."""
    config = config or ParserConfig()
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    state = state or ParserState(year=config.start_year)

    result = ParseResult()
    for entry in iter_logical_entries(lines, config.continuation_marker):
        processed = process_entry(entry, state, diagnostics, config)
        if processed is None:
            continue
        day, activities = processed
        result.activities.extend(activities)
        result.days.append(day)
    return result
