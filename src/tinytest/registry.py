"""Ordered registry of test cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

TestAction = Callable[[], None]


@dataclass(frozen=True)
class TestCase:
    """One registered test.

    Attributes:
        name: Test identifier, conventionally the function name.
        suite: Grouping key, conventionally the defining file path.
        action: Zero-argument callable that performs the assertions.
    """

    __test__ = False

    name: str
    suite: str
    action: TestAction


class Registry:
    """Suite-sorted sequence of test cases.

    Entries are kept in ascending suite order; within one suite they keep
    their registration order, so consecutive entries with the same suite
    form one reporting group.
    """

    def __init__(self) -> None:
        self._cases: list[TestCase] = []

    def register(self, name: str, suite: str, action: TestAction) -> TestCase:
        if not isinstance(name, str):
            raise TypeError(f"test name must be a str, got {type(name).__name__}")
        if not isinstance(suite, str):
            raise TypeError(f"suite for test '{name}' must be a str, got {type(suite).__name__}")
        if not name:
            raise ValueError("test name must not be empty")
        if not suite:
            raise ValueError(f"suite for test '{name}' must not be empty")
        if not callable(action):
            raise TypeError(f"action for test '{name}' is not callable")

        case = TestCase(name=name, suite=suite, action=action)

        # Skip every entry whose suite sorts at or before the new one, so a
        # suite keeps its registration order.
        index = 0
        while index < len(self._cases) and self._cases[index].suite <= suite:
            index += 1
        self._cases.insert(index, case)
        return case

    def drain_all(self) -> int:
        """Release every registered case. Returns how many were released."""
        released = len(self._cases)
        self._cases.clear()
        return released

    def discard(self, cases: Iterable[TestCase]) -> int:
        """Remove the given cases (matched by identity). Returns how many went."""
        doomed = {id(case) for case in cases}
        kept = [case for case in self._cases if id(case) not in doomed]
        removed = len(self._cases) - len(kept)
        self._cases[:] = kept
        return removed

    def suites(self) -> list[str]:
        seen: list[str] = []
        for case in self._cases:
            if not seen or seen[-1] != case.suite:
                seen.append(case.suite)
        return seen

    def __iter__(self) -> Iterator[TestCase]:
        return iter(list(self._cases))

    def __len__(self) -> int:
        return len(self._cases)

    def __getitem__(self, index: int) -> TestCase:
        return self._cases[index]
