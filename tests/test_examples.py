"""Run the bundled example suite end to end."""

from pathlib import Path

from typer.testing import CliRunner

from tinytest.cli import app

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def test_example_suite_reports_the_demonstration_failure(monkeypatch):
    monkeypatch.chdir(EXAMPLES_DIR.parent)

    result = CliRunner().invoke(app, ["run", "examples"])

    assert result.exit_code == 1
    lines = result.output.splitlines()
    assert lines[0].endswith(": In test test_that_fails:")
    assert lines[0].startswith("examples/myfunctions_test.py:")
    assert lines[1] == "    add_numbers(3, 33) (10 == add_numbers(3, 33))"
    assert lines[2] == "FAILED [examples/myfunctions_test.py] (passed:2, failed:1, tests:3)"


def test_example_suite_lists_tests_in_definition_order(monkeypatch):
    monkeypatch.chdir(EXAMPLES_DIR.parent)

    result = CliRunner().invoke(app, ["list", "examples"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "examples/myfunctions_test.py::test_addition",
        "examples/myfunctions_test.py::test_that_fails",
        "examples/myfunctions_test.py::test_multiplication",
        "3 test(s) in 1 suite(s)",
    ]
