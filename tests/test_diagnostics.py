from __future__ import annotations

import io

from bitacora_tool.diagnostics import (
    ANOMALY,
    FAILURE,
    Diagnostic,
    Diagnostics,
    setup_logging,
)


def test_render_with_and_without_line() -> None:
    assert Diagnostic(ANOMALY, 12, "odd").render() == "!! line 12: odd"
    assert Diagnostic(FAILURE, None, "bad").render() == "** bad"


def test_collects_by_severity() -> None:
    diag = Diagnostics()
    diag.anomaly("a", 1)
    diag.failure("b", 2)
    diag.anomaly("c")
    assert [d.message for d in diag.anomalies] == ["a", "c"]
    assert [d.message for d in diag.failures] == ["b"]


def test_setup_logging_writes_bare_lines() -> None:
    stream = io.StringIO()
    setup_logging(stream)
    diag = Diagnostics()
    diag.failure("no quantity", 3)
    diag.info("raw units: miles=1")
    assert stream.getvalue().splitlines() == [
        "** line 3: no quantity",
        "raw units: miles=1",
    ]
