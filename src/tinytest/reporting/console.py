from __future__ import annotations

import typer

from tinytest.state import ExecutionState, SuiteTally


def format_failure(state: ExecutionState) -> str:
    """Render the diagnostic printed at the point of a failing assertion."""
    return (
        f"{state.file}:{state.line}: In test {state.test}:\n"
        f"    {state.message} ({state.expression})"
    )


def format_suite_summary(suite: str, tally: SuiteTally) -> str:
    """Render the one-line summary for a completed suite.

    The marker is styled red or green. ``typer.echo`` strips the styling
    unless color is forced on or stdout is a terminal.
    """
    if tally.failed:
        marker = typer.style("FAILED", fg=typer.colors.RED, bold=True)
        return (
            f"{marker} [{suite}] "
            f"(passed:{tally.passed}, failed:{tally.failed}, tests:{tally.total})"
        )
    marker = typer.style("PASSED", fg=typer.colors.GREEN, bold=True)
    return f"{marker} [{suite}] (tests:{tally.passed})"


def print_failure(state: ExecutionState) -> None:
    typer.echo(format_failure(state))


def report_suite(suite: str, tally: SuiteTally, color: bool | None = None) -> int:
    """Print the summary for *suite*, reset *tally*, return the suite status.

    Returns 1 when the suite had at least one failing test, else 0.
    """
    status = 1 if tally.failed else 0
    typer.echo(format_suite_summary(suite, tally), color=color)
    tally.reset()
    return status
