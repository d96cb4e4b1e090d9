"""Configuración del parser de la bitácora de entrenamiento."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Tunables for parsing the hand-typed exercise log."""

    continuation_marker: str = "+"
    start_year: int = 0
    # Balanza de Tam: marca una lectura que pesa de menos.
    scale_marker: str = "T"
    scale_bias_lbs: float = 0.8
    weight_min: float = 100.0
    weight_max: float = 140.0
    max_run_miles: float = 12.0
    max_walk_miles: float = 12.0
    max_bike_miles: float = 40.0
