"""CLI para convertir la bitácora de entrenamiento en registros CSV."""

from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path

from dateutil import tz

from bitacora_tool.config import ParserConfig
from bitacora_tool.diagnostics import Diagnostics, setup_logging
from bitacora_tool.emission import days_to_frame, report_frequencies, write_streams
from bitacora_tool.excel_writer import ExcelLayout, write_days_xlsx
from bitacora_tool.parser import ParserState, parse_lines
from bitacora_tool.sources.text_log import LogFilePaths, LogFileSource

_LOCAL_TZ = tz.tzlocal()


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Bitácora de entrenamiento: días y actividades normalizados."
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Archivo de la bitácora, o carpeta (se usa el *.txt más nuevo).",
    )
    parser.add_argument(
        "--out-dir",
        default=str(Path.cwd() / "salidas"),
        help="Directorio de salida (default: ./salidas).",
    )
    parser.add_argument(
        "--start-year",
        type=int,
        default=0,
        help="Año inicial, antes del primer marcador '*** YYYY'.",
    )
    parser.add_argument(
        "--marker",
        default="+",
        help="Carácter que marca líneas de continuación (default: '+').",
    )
    parser.add_argument(
        "--xlsx",
        action="store_true",
        help="Además, exporta los días a Excel.",
    )
    return parser.parse_args()


def main() -> int:
    """Run the log conversion CLI.

    Returns:
        Exit code (0 on success; diagnostics never change it).
    """
    ns = parse_args()
    setup_logging()

    source = LogFileSource(LogFilePaths(root=Path(ns.input).expanduser().resolve()))
    source.validate()
    log_path = source.log_file()
    lines = source.read_lines(log_path)

    config = ParserConfig(continuation_marker=ns.marker, start_year=ns.start_year)
    diagnostics = Diagnostics()
    state = ParserState(year=config.start_year)
    result = parse_lines(lines, config, diagnostics, state)
    report_frequencies(state, diagnostics)

    out_dir = Path(ns.out_dir).expanduser()
    ts = datetime.now(tz=_LOCAL_TZ).strftime("%Y-%m-%d_%H-%M-%S")
    activities_path = out_dir / f"actividades_{ts}.csv"
    days_path = out_dir / f"dias_{ts}.csv"
    n_activities, n_days = write_streams(result, activities_path, days_path)

    print(f"OK: Log file: {log_path}")
    print(f"OK: Activities: {n_activities} -> {activities_path}")
    print(f"OK: Days: {n_days} -> {days_path}")
    if ns.xlsx:
        xlsx_path = out_dir / f"dias_{ts}.xlsx"
        write_days_xlsx(days_to_frame(result.days), xlsx_path, ExcelLayout())
        print(f"OK: Excel: {xlsx_path}")
    print(
        f"OK: Diagnostics: {len(diagnostics.anomalies)} anomalies, "
        f"{len(diagnostics.failures)} failures"
    )
    return 0
