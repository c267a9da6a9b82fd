"""Core assertion primitive shared by every assertion form."""

from __future__ import annotations

from tinytest.reporting.console import print_failure
from tinytest.state import get_session


class AssertionFailed(Exception):
    """Raised by a failing assertion to stop the enclosing test.

    Only the test-execution wrapper catches it; it never escapes a run.
    """

    def __init__(self, message: str, expression: str, file: str, line: int):
        super().__init__(f"{file}:{line}: {message} ({expression})")
        self.message = message
        self.expression = expression
        self.file = file
        self.line = line


def check(message: str, expression: str, passed: bool, file: str, line: int) -> None:
    """Record an assertion outcome and stop the test if it failed.

    The outcome is written into the active session's execution state. On
    failure the diagnostic line is printed immediately and
    ``AssertionFailed`` is raised.
    """
    state = get_session().state
    state.message = message
    state.expression = expression
    state.file = file
    state.line = line
    state.failed = not passed

    if not passed:
        print_failure(state)
        raise AssertionFailed(message, expression, file, line)
