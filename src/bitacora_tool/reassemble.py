"""Reensamblado de líneas de continuación en una entrada por día."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bitacora_tool.model import LogicalEntry, RawLogLine


def iter_raw_lines(lines: Iterable[str], marker: str = "+") -> Iterator[RawLogLine]:
    """Number physical lines (1-based) and flag continuation lines."""
    for idx, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        yield RawLogLine(
            text=text,
            line_number=idx,
            is_continuation=bool(marker) and text.startswith(marker),
        )


def iter_logical_entries(
    lines: Iterable[str], marker: str = "+"
) -> Iterator[LogicalEntry]:
    """Merge continuation lines into one entry per day.

    A line starting with ``marker`` is appended (marker removed) to the
    entry being accumulated. Any other non-blank line flushes the current
    entry and starts a new one. Blank lines are only separators.

    Args:
        lines: Physical lines, in file order.
        marker: Continuation marker character.

    Yields:
        Logical entries in input order.
    """
    parts: list[str] = []
    first_line = 0
    for raw in iter_raw_lines(lines, marker):
        if not raw.text.strip():
            continue
        if raw.is_continuation:
            if not parts:
                first_line = raw.line_number
            parts.append(raw.text[len(marker) :])
            continue
        if parts:
            yield LogicalEntry(text=" ".join(parts), line_number=first_line)
        parts = [raw.text]
        first_line = raw.line_number
    if parts:
        yield LogicalEntry(text=" ".join(parts), line_number=first_line)
