"""Peso corporal desde la anotación entre corchetes."""

from __future__ import annotations

import re

from bitacora_tool.config import ParserConfig
from bitacora_tool.diagnostics import Diagnostics

_LEADING_NUMBER = re.compile(r"\d*\.?\d*", re.ASCII)


def parse_weight(
    annotation: str,
    line_number: int,
    diagnostics: Diagnostics,
    config: ParserConfig | None = None,
) -> float:
    """Extract body weight (lbs) from an annotation like ``124.8T 120/80``.

    Only the leading number counts; blood pressure or pulse after it is
    ignored. A trailing scale marker adds the scale bias, only when a
    weight was actually written (a bare ``T`` stays 0).

    Returns:
        The weight, or 0.0 when the annotation has none.
    """
    config = config or ParserConfig()
    text = annotation.strip()
    match = _LEADING_NUMBER.match(text)
    number = match.group(0) if match else ""
    weight = float(number) if any(ch.isdigit() for ch in number) else 0.0

    rest = text[len(number) :]
    if weight and rest and rest[-1] == config.scale_marker:
        weight += config.scale_bias_lbs

    if weight != 0 and not config.weight_min <= weight < config.weight_max:
        diagnostics.anomaly(f"implausible weight {weight:g}", line_number)
    return weight
