"""Tests for report formatting and export."""

from __future__ import annotations

import io
import json

from rich.console import Console

from issue_upvotes.report import (
    RATE_LIMIT_FALLBACK,
    format_rank_line,
    format_rate_limit_hint,
    print_line,
    print_report,
    write_json,
)
from issue_upvotes.types import ScoreEntry


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200), buffer


class TestFormatting:
    def test_rank_line(self):
        assert format_rank_line(1, ScoreEntry(20, 2)) == "#1 – Issue #20 with 2 upvotes!"

    def test_rank_line_negative_score(self):
        assert format_rank_line(3, ScoreEntry(7, -4)) == "#3 – Issue #7 with -4 upvotes!"

    def test_rate_limit_hint_with_reset(self):
        hint = format_rate_limit_hint(1_000 + 2 * 3600 + 5 * 60 + 9, now=1_000)
        assert hint == "Please try again later after 2:05:09!"

    def test_rate_limit_hint_reset_in_past(self):
        assert format_rate_limit_hint(500, now=1_000) == "Please try again later after 0:00:00!"

    def test_rate_limit_hint_fallback(self):
        assert format_rate_limit_hint(None) == RATE_LIMIT_FALLBACK


class TestPrintReport:
    def test_report_lines(self):
        out, buffer = _console()

        print_report([ScoreEntry(20, 2), ScoreEntry(10, 1)], out=out)

        assert buffer.getvalue().splitlines() == [
            "",
            "#1 – Issue #20 with 2 upvotes!",
            "#2 – Issue #10 with 1 upvotes!",
        ]

    def test_empty_report_prints_only_separator(self):
        out, buffer = _console()

        print_report([], out=out)

        assert buffer.getvalue() == "\n"

    def test_long_lines_are_not_wrapped(self):
        buffer = io.StringIO()
        out = Console(file=buffer, width=80)
        message = "Error: Invalid JSON from https://api.github.com/repos/facebook/react/issues/12345/reactions: Expecting value"

        print_line(message, out=out)

        assert buffer.getvalue() == message + "\n"


class TestWriteJson:
    def test_ranked_rows(self, tmp_path):
        path = tmp_path / "out" / "ranking.json"

        write_json(path, [ScoreEntry(20, 2), ScoreEntry(10, 1)])

        assert json.loads(path.read_text(encoding="utf-8")) == [
            {"rank": 1, "issue_number": 20, "score": 2},
            {"rank": 2, "issue_number": 10, "score": 1},
        ]
