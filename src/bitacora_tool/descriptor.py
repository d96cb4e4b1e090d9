"""Separación de una entrada en fecha, anotación y actividades."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bitacora_tool.diagnostics import Diagnostics
from bitacora_tool.model import DayDescriptor

if TYPE_CHECKING:
    from bitacora_tool.parser import ParserState

_YEAR_MARKER = re.compile(r"\*\*\*\s*(\d{4})", re.ASCII)

DATE_TOKEN_LEN = 10


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def find_year_marker(text: str) -> int | None:
    """Return the year of a ``*** YYYY`` marker, if any."""
    match = _YEAR_MARKER.search(text)
    if not match:
        return None
    return int(match.group(1))


def update_year(
    raw_text: str,
    state: ParserState,
    line_number: int,
    diagnostics: Diagnostics,
) -> bool:
    """Adopt the year of an embedded marker.

    A year that is not the previous one plus one is reported but still
    adopted.

    Returns:
        True if the entry holds nothing but the year marker.
    """
    match = _YEAR_MARKER.search(raw_text)
    if not match:
        return False
    new_year = int(match.group(1))
    if state.year and new_year != state.year + 1:
        diagnostics.anomaly(
            f"year marker {new_year} does not follow {state.year}", line_number
        )
    state.year = new_year
    rest = raw_text[: match.start()] + raw_text[match.end() :]
    return not rest.strip()


def extract_day_descriptor(
    text: str,
    year: int,
    line_number: int,
    diagnostics: Diagnostics,
) -> DayDescriptor | None:
    """Split a stripped entry into date token, annotation and activity text.

    Args:
        text: Comment-stripped, trimmed entry text (``MM/DD ...``).
        year: Current year context.
        line_number: First physical line of the entry.
        diagnostics: Diagnostics channel.

    Returns:
        The descriptor, or None when the entry has no usable date.
    """
    if not text or not _is_ascii_digit(text[0]):
        diagnostics.failure(f"entry does not start with a date: {text!r}", line_number)
        return None
    if len(text) > 1 and text[1] == "/":
        text = "0" + text
    if len(text) < 3 or text[2] != "/":
        diagnostics.failure(f"missing '/' in date: {text!r}", line_number)
        return None

    dated = f"{year:04d}-{text[:2]}-{text[3:]}"
    if len(dated) < DATE_TOKEN_LEN:
        diagnostics.failure(f"truncated date: {text!r}", line_number)
        return None
    date_token = dated[:DATE_TOKEN_LEN]
    work = dated[DATE_TOKEN_LEN:].strip()

    annotation = ""
    open_at = work.find("[")
    if open_at >= 0:
        close_at = work.find("]", open_at + 1)
        if close_at >= 0:
            annotation = work[open_at + 1 : close_at]
            work = (work[:open_at] + work[close_at + 1 :]).strip()

    return DayDescriptor(
        date_token=date_token, annotation=annotation, activity_text=work
    )
