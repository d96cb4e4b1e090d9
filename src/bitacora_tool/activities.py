"""Separación y tokenizado de las actividades de un día."""

from __future__ import annotations

import re
from dataclasses import dataclass

from bitacora_tool.diagnostics import Diagnostics

ACTIVITY_SEPARATOR = ";"

_LEADING_QUANTITY = re.compile(r"[\d.]*", re.ASCII)


@dataclass(frozen=True)
class ActivityToken:
    """Raw pieces of one activity before normalization."""

    quantity: float
    units: str
    type: str

    @property
    def is_empty(self) -> bool:
        return self.quantity == 0 and not self.type


EMPTY_ACTIVITY = ActivityToken(quantity=0.0, units="", type="")


def split_activities(text: str) -> list[str]:
    """Split the activity text on ``;`` (pieces are not trimmed)."""
    return text.split(ACTIVITY_SEPARATOR)


def _strip_period(token: str) -> str:
    return token[:-1] if token.endswith(".") else token


def tokenize_activity(
    piece: str, line_number: int, diagnostics: Diagnostics
) -> ActivityToken | None:
    """Parse ``QUANTITY [UNITS] TYPE[.]``.

    Returns:
        The token (``EMPTY_ACTIVITY`` for a blank piece), or None when the
        piece has no leading quantity.
    """
    piece = piece.strip()
    if not piece:
        return EMPTY_ACTIVITY

    match = _LEADING_QUANTITY.match(piece)
    number = match.group(0) if match else ""
    try:
        quantity = float(number)
    except ValueError:
        diagnostics.failure(f"no quantity in activity {piece!r}", line_number)
        return None

    rest = piece[len(number) :].strip()
    parts = rest.split(None, 1)
    units = parts[0] if parts else ""
    kind = parts[1].strip() if len(parts) > 1 else ""
    if not kind:
        units, kind = "", units

    return ActivityToken(
        quantity=quantity,
        units=_strip_period(units),
        type=_strip_period(kind).lower(),
    )
