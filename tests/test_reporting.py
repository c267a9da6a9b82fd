"""Tests for console report formatting."""

import re

import typer

from tinytest.reporting import format_failure, format_suite_summary, report_suite
from tinytest.state import ExecutionState, SuiteTally

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


def test_format_failure():
    state = ExecutionState(
        test="test_that_fails",
        message="add_numbers(3, 33)",
        expression="10 == add_numbers(3, 33)",
        file="examples/myfunctions_test.py",
        line=20,
    )
    assert format_failure(state) == (
        "examples/myfunctions_test.py:20: In test test_that_fails:\n"
        "    add_numbers(3, 33) (10 == add_numbers(3, 33))"
    )


def test_format_suite_summary_failed():
    summary = format_suite_summary("S1", SuiteTally(passed=1, failed=1))
    assert _plain(summary) == "FAILED [S1] (passed:1, failed:1, tests:2)"
    assert summary.startswith(typer.style("FAILED", fg=typer.colors.RED, bold=True))


def test_format_suite_summary_passed():
    summary = format_suite_summary("S2", SuiteTally(passed=3))
    assert _plain(summary) == "PASSED [S2] (tests:3)"
    assert summary.startswith(typer.style("PASSED", fg=typer.colors.GREEN, bold=True))


def test_report_suite_failed_returns_nonzero_and_resets(capsys):
    tally = SuiteTally(passed=2, failed=1)
    assert report_suite("S", tally) == 1
    assert tally.passed == 0 and tally.failed == 0
    assert capsys.readouterr().out == "FAILED [S] (passed:2, failed:1, tests:3)\n"


def test_report_suite_passed_returns_zero_and_resets(capsys):
    tally = SuiteTally(passed=2)
    assert report_suite("S", tally) == 0
    assert tally.total == 0
    assert capsys.readouterr().out == "PASSED [S] (tests:2)\n"


def test_report_suite_color_off_strips_styling(capsys):
    report_suite("S", SuiteTally(failed=1), color=False)
    assert "\x1b[" not in capsys.readouterr().out


def test_report_suite_color_on_keeps_styling(capsys):
    report_suite("S", SuiteTally(passed=1), color=True)
    out = capsys.readouterr().out
    assert "\x1b[" in out
    assert _plain(out) == "PASSED [S] (tests:1)\n"


def test_tally_record():
    tally = SuiteTally()
    tally.record(failed=False)
    tally.record(failed=True)
    tally.record(failed=False)
    assert (tally.passed, tally.failed, tally.total) == (2, 1, 3)
