"""Assertion system for test bodies."""

from tinytest.assertions.base import AssertionFailed, check
from tinytest.assertions.checks import (
    assert_equals,
    assert_int_equals,
    assert_string_equals,
    assert_true,
)

__all__ = [
    "AssertionFailed",
    "assert_equals",
    "assert_int_equals",
    "assert_string_equals",
    "assert_true",
    "check",
]
