"""Registration surface used by test modules."""

from __future__ import annotations

import inspect
import logging
from typing import Callable, overload

from tinytest.assertions.source import display_path
from tinytest.registry import TestAction, TestCase
from tinytest.state import get_session

logger = logging.getLogger("tinytest")


def suite_for(action: Callable[..., object]) -> str:
    """Return the suite key for *action*: the file that defines it."""
    code = getattr(inspect.unwrap(action), "__code__", None)
    if code is not None:
        return display_path(code.co_filename)
    return getattr(action, "__module__", None) or "<unknown>"


def register(name: str, suite: str, action: TestAction) -> TestCase:
    """Add a test to the active session's registry."""
    case = get_session().registry.register(name, suite, action)
    logger.debug(f"Registered test '{name}' in suite '{suite}'")
    return case


@overload
def test(func: TestAction) -> TestAction: ...


@overload
def test(
    *, name: str | None = None, suite: str | None = None
) -> Callable[[TestAction], TestAction]: ...


def test(func=None, *, name=None, suite=None):
    """Register the decorated function as a test.

    Usable bare (``@test``) or with overrides (``@test(name="...")``). The
    test name defaults to the function name and the suite to the defining
    file. The function is returned unchanged apart from being hidden from
    pytest collection.
    """

    def decorate(action: TestAction) -> TestAction:
        register(name or action.__name__, suite or suite_for(action), action)
        action.__test__ = False  # type: ignore[attr-defined]
        return action

    if func is not None:
        return decorate(func)
    return decorate


test.__test__ = False  # type: ignore[attr-defined]
