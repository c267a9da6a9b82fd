from __future__ import annotations

import logging
import sys

from tinytest.assertions.base import AssertionFailed
from tinytest.registration import suite_for
from tinytest.registry import TestAction, TestCase
from tinytest.reporting.console import report_suite
from tinytest.state import Session, activate, get_session


class Runner:
    """Executes registered tests in registry order, one suite at a time."""

    def __init__(
        self,
        session: Session | None = None,
        color: bool | None = None,
        logger: logging.Logger | None = None,
    ):
        self.session = session
        self.color = color
        self.logger = logger or logging.getLogger("tinytest")

    def run_all(self) -> int:
        """Run every registered test, then drain the registry.

        Returns 0 when every suite passed, 1 when any suite had a failure.
        """
        session = self.session or get_session()
        with activate(session):
            cases = list(session.registry)
            self.logger.debug(
                f"Running {len(cases)} test(s) in {len(session.registry.suites())} suite(s)"
            )
            rc = 0
            try:
                for index, case in enumerate(cases):
                    self.execute(case)
                    following = cases[index + 1] if index + 1 < len(cases) else None
                    if following is None or following.suite != case.suite:
                        self.logger.debug(
                            f"Suite '{case.suite}' complete: "
                            f"{session.tally.passed} passed, {session.tally.failed} failed"
                        )
                        rc |= report_suite(case.suite, session.tally, color=self.color)
            finally:
                # An aborted suite never reached report_suite.
                session.tally.reset()
                session.state.failed = False
                released = session.registry.drain_all()
                self.logger.debug(f"Released {released} test(s)")
            return rc

    def execute(self, case: TestCase) -> bool:
        """Run one test and tally it. Returns True when it passed."""
        session = self.session or get_session()
        state = session.state
        state.begin(case.name, case.suite)
        self.logger.debug(f"Running test '{case.name}' [{case.suite}]")

        failed = False
        try:
            case.action()
        except AssertionFailed as failure:
            failed = True
            self.logger.debug(
                f"Test '{case.name}' stopped at {failure.file}:{failure.line}"
            )
        failed = failed or state.failed

        session.tally.record(failed)
        return not failed


def run_all(color: bool | None = None) -> int:
    """Run every test registered in the active session."""
    return Runner(color=color).run_all()


def run(action: TestAction, name: str | None = None) -> bool:
    """Execute *action* immediately as a test, without registering it.

    The outcome is tallied into the current suite; call :func:`report` to
    print the summary.
    """
    case = TestCase(name=name or action.__name__, suite=suite_for(action), action=action)
    return Runner().execute(case)


def report(color: bool | None = None) -> int:
    """Print the summary for tests executed with :func:`run` since the last report."""
    session = get_session()
    suite = session.state.suite or session.state.file or "<unknown>"
    return report_suite(suite, session.tally, color=color)


def main() -> None:
    """Run everything registered so far and exit with the run status."""
    sys.exit(run_all())
