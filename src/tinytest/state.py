"""Process-wide execution state shared by the runner and the assertions."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from tinytest.registry import Registry


@dataclass
class ExecutionState:
    """Scratch state for the test currently executing.

    Attributes:
        test: Name of the running test.
        suite: Suite of the running test.
        failed: Whether the most recent assertion failed.
        message: Message of the most recent assertion.
        expression: Source text of the most recent assertion's expression.
        file: File of the most recent assertion.
        line: Line of the most recent assertion.
    """

    test: str | None = None
    suite: str | None = None
    failed: bool = False
    message: str | None = None
    expression: str | None = None
    file: str | None = None
    line: int | None = None

    def begin(self, test: str, suite: str | None) -> None:
        self.test = test
        self.suite = suite
        self.failed = False


@dataclass
class SuiteTally:
    passed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    def record(self, failed: bool) -> None:
        if failed:
            self.failed += 1
        else:
            self.passed += 1

    def reset(self) -> None:
        self.passed = 0
        self.failed = 0


@dataclass
class Session:
    """Registry, execution state and suite tally for one process."""

    registry: Registry = field(default_factory=Registry)
    state: ExecutionState = field(default_factory=ExecutionState)
    tally: SuiteTally = field(default_factory=SuiteTally)


_session = Session()


def get_session() -> Session:
    """Return the active session."""
    return _session


@contextmanager
def activate(session: Session) -> Iterator[Session]:
    """Make *session* the active session for the duration of the block."""
    global _session
    previous = _session
    _session = session
    try:
        yield session
    finally:
        _session = previous
