from __future__ import annotations

from bitacora_tool.model import LogicalEntry
from bitacora_tool.reassemble import iter_logical_entries, iter_raw_lines


def test_iter_raw_lines_numbers_and_flags() -> None:
    raw = list(iter_raw_lines(["03/05 6 r\n", "+ 2 w\n"], marker="+"))
    assert [r.line_number for r in raw] == [1, 2]
    assert raw[0].text == "03/05 6 r"
    assert not raw[0].is_continuation
    assert raw[1].is_continuation


def test_continuation_lines_are_merged() -> None:
    lines = [
        "03/05 [130] 6 miles r.;",
        "+ 2 w.",
        "03/06 3 r",
    ]
    entries = list(iter_logical_entries(lines, marker="+"))
    assert entries == [
        LogicalEntry(text="03/05 [130] 6 miles r.;  2 w.", line_number=1),
        LogicalEntry(text="03/06 3 r", line_number=3),
    ]


def test_blank_lines_do_not_flush_or_merge() -> None:
    lines = ["03/05 6 r;", "", "   ", "+2 w", "", "03/06 3 r", ""]
    entries = list(iter_logical_entries(lines))
    assert [e.text for e in entries] == ["03/05 6 r; 2 w", "03/06 3 r"]
    assert [e.line_number for e in entries] == [1, 6]


def test_leading_continuation_opens_an_entry() -> None:
    entries = list(iter_logical_entries(["+ 2 w", "03/06 3 r"]))
    assert entries[0] == LogicalEntry(text=" 2 w", line_number=1)
    assert len(entries) == 2


def test_custom_marker_and_empty_input() -> None:
    assert list(iter_logical_entries([])) == []
    entries = list(iter_logical_entries(["03/05 6 r", "&1 w"], marker="&"))
    assert [e.text for e in entries] == ["03/05 6 r 1 w"]
