"""Assertion forms available to test bodies."""

from __future__ import annotations

import operator
import sys
from typing import Any

from tinytest.assertions.base import check
from tinytest.assertions.source import argument_sources, location


def assert_true(message: str, value: Any) -> None:
    """Fail with *message* unless *value* is truthy."""
    frame = sys._getframe(1)
    sources = argument_sources(frame, ("message", "value"))
    expression = sources["value"] if sources else repr(value)
    check(message, expression, bool(value), *location(frame))


def assert_equals(expected: Any, actual: Any) -> None:
    """Fail unless ``expected == actual``.

    The message is the source text of *actual*.
    """
    frame = sys._getframe(1)
    sources = argument_sources(frame, ("expected", "actual"))
    if sources:
        expected_src, actual_src = sources["expected"], sources["actual"]
    else:
        expected_src, actual_src = repr(expected), repr(actual)
    check(
        actual_src,
        f"{expected_src} == {actual_src}",
        bool(expected == actual),
        *location(frame),
    )


def assert_string_equals(expected: str, actual: str) -> None:
    """Fail unless two strings have the same content.

    The message is the actual string itself.
    """
    for value in (expected, actual):
        if not isinstance(value, str):
            raise TypeError(
                f"assert_string_equals expects str, got {type(value).__name__}"
            )
    frame = sys._getframe(1)
    sources = argument_sources(frame, ("expected", "actual"))
    if sources:
        expression = f"{sources['expected']} == {sources['actual']}"
    else:
        expression = f"{expected!r} == {actual!r}"
    check(actual, expression, expected == actual, *location(frame))


def assert_int_equals(expected: int, actual: int) -> None:
    """Fail unless two integers are equal, reporting both values."""
    e = operator.index(expected)
    a = operator.index(actual)
    frame = sys._getframe(1)
    sources = argument_sources(frame, ("expected", "actual"))
    if sources:
        expected_src, actual_src = sources["expected"], sources["actual"]
    else:
        expected_src, actual_src = str(e), str(a)
    check(
        f"{actual_src} is {a}, expected {expected_src}, which is {e}",
        f"{expected_src} == {actual_src}",
        a == e,
        *location(frame),
    )
