"""Tests for CLI entrypoints."""

from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd
import pytest

from bitacora_tool import cli

_LOG = """\
*** 2006
03/05  [130.5] 6.2 miles r.; 2.7 miles w.
03/06 [124.8T] 13.29 b.;
+ 2.3 w.

03/08 3 r (gap)
"""


def _args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "input": "",
        "out_dir": "",
        "start_year": 0,
        "marker": "+",
        "xlsx": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class _FixedDatetime(datetime):
    @classmethod
    def now(cls, tz: Any | None = None) -> _FixedDatetime:
        return cls(2025, 12, 31, 23, 59, 1, tzinfo=tz)


def test_parse_args_custom_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "sys.argv",
        ["prog", "--input", "/tmp/log.txt", "--start-year", "1988", "--xlsx"],
    )
    ns = cli.parse_args()
    assert ns.input == "/tmp/log.txt"
    assert ns.start_year == 1988
    assert ns.marker == "+"
    assert ns.xlsx is True


def test_main_happy_path(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    log = tmp_path / "bitacora.txt"
    log.write_text(_LOG, encoding="utf-8")
    out_dir = tmp_path / "salidas"
    monkeypatch.setattr(
        cli, "parse_args", lambda: _args(input=str(log), out_dir=str(out_dir))
    )
    monkeypatch.setattr(cli, "datetime", _FixedDatetime)

    code = cli.main()

    assert code == 0
    acts = pd.read_csv(out_dir / "actividades_2025-12-31_23-59-01.csv")
    days = pd.read_csv(out_dir / "dias_2025-12-31_23-59-01.csv")
    assert list(acts["type"]) == ["r", "w", "b", "w", "r"]
    assert list(days["date"]) == ["2006-03-05", "2006-03-06", "2006-03-08"]
    assert days.loc[1, "weight"] == pytest.approx(125.6)
    assert days.loc[1, "walk_miles"] == 2.3
    out = capsys.readouterr().out
    assert "OK: Days: 3" in out
    assert "1 anomalies, 0 failures" in out
    assert not list(out_dir.glob("*.xlsx"))


def test_main_writes_excel_when_asked(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log = tmp_path / "bitacora.txt"
    log.write_text(_LOG, encoding="utf-8")
    out_dir = tmp_path / "salidas"
    monkeypatch.setattr(
        cli,
        "parse_args",
        lambda: _args(input=str(tmp_path), out_dir=str(out_dir), xlsx=True),
    )
    captured: dict[str, object] = {}

    def _write_days_xlsx(df: pd.DataFrame, out_path: Path, _: Any) -> None:
        captured["df"] = df
        captured["out_path"] = out_path

    monkeypatch.setattr(cli, "write_days_xlsx", _write_days_xlsx)

    assert cli.main() == 0
    df = captured["df"]
    assert isinstance(df, pd.DataFrame)
    assert df.shape[0] == 3
    out_path = captured["out_path"]
    assert isinstance(out_path, Path)
    assert out_path.name.startswith("dias_")
    assert out_path.suffix == ".xlsx"


def test_main_propagates_missing_input(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(
        cli,
        "parse_args",
        lambda: _args(input=str(tmp_path / "missing.txt"), out_dir=str(tmp_path)),
    )
    with pytest.raises(FileNotFoundError):
        cli.main()
