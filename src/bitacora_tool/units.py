"""Normalización de tipos de actividad y conversión a millas."""

from __future__ import annotations

from bitacora_tool.config import ParserConfig
from bitacora_tool.diagnostics import Diagnostics

MILES = "miles"
KM_TO_MILES = 0.621371

RUN = "r"
SWIM = "s"
BIKE = "b"
WALK = "w"
CROSS = "c"

CANONICAL_TYPES: frozenset[str] = frozenset({BIKE, RUN, SWIM, WALK, CROSS, ""})

# Códigos históricos -> código canónico (las carreras terminan en "r").
_TYPE_CODES: dict[str, str] = {
    "r": RUN,
    "rr": RUN,
    "run": RUN,
    "runs": RUN,
    "jog": RUN,
    "s": SWIM,
    "sr": SWIM,
    "swim": SWIM,
    "b": BIKE,
    "br": BIKE,
    "bike": BIKE,
    "cycle": BIKE,
    "w": WALK,
    "wr": WALK,
    "walk": WALK,
    "hike": WALK,
    "c": CROSS,
    "xc": CROSS,
    "ski": CROSS,
    "": "",
}

_IDENTITY: dict[str, float] = {"miles": 1.0, "mile": 1.0, "": 1.0}

# Factor por unidad cruda, para cada tipo canónico con distancia.
_CONVERSIONS: dict[str, dict[str, float]] = {
    RUN: {
        **_IDENTITY,
        "k": KM_TO_MILES,
        "min": 0.125,
        "minutes": 0.125,
    },
    SWIM: {
        **_IDENTITY,
        "yards": 1 / 1760,
        "meters": 1 / 1609,
        "meter": 1 / 1609,
        "k": KM_TO_MILES,
        "min": 1 / 25,
        "minutes": 1 / 25,
    },
    BIKE: {
        **_IDENTITY,
        "min": 9 / 60,
        "minutes": 9 / 60,
        "hour": 9.0,
        "hours": 9.0,
        "k": KM_TO_MILES,
    },
    WALK: {
        **_IDENTITY,
        "min": 3 / 60,
        "minutes": 3 / 60,
    },
}

_LABELS: dict[str, str] = {RUN: "run", SWIM: "swim", BIKE: "bike", WALK: "walk"}


def normalize_type(raw: str) -> str:
    """Map a lowercase raw type code to its canonical code.

    Unknown codes are returned unchanged.
    """
    return _TYPE_CODES.get(raw, raw)


def convert_units(
    kind: str,
    unit: str,
    quantity: float,
    line_number: int,
    diagnostics: Diagnostics,
) -> tuple[str, float]:
    """Convert ``quantity`` in ``unit`` to miles for run/swim/bike/walk.

    The returned unit is always ``"miles"`` for those types, also when the
    unit is not recognized and the quantity is left as is. Other types come
    back untouched.
    """
    rules = _CONVERSIONS.get(kind)
    if rules is None:
        return unit, quantity
    factor = rules.get(unit)
    if factor is None:
        diagnostics.anomaly(
            f"unknown unit {unit!r} for {_LABELS[kind]} ({quantity:g})", line_number
        )
        return MILES, quantity
    return MILES, quantity * factor


def check_distance(
    kind: str,
    miles: float,
    line_number: int,
    diagnostics: Diagnostics,
    config: ParserConfig | None = None,
) -> None:
    """Report improbable run, walk and bike distances."""
    config = config or ParserConfig()
    limits = {
        RUN: config.max_run_miles,
        WALK: config.max_walk_miles,
        BIKE: config.max_bike_miles,
    }
    limit = limits.get(kind)
    if limit is not None and miles > limit:
        diagnostics.anomaly(
            f"improbable {_LABELS[kind]} distance {miles:g} miles", line_number
        )
