"""A tiny unit-testing framework.

Test modules decorate functions with :func:`test`; importing the module
registers them. :func:`run_all` then runs every registered test grouped by
suite and returns 0 when all suites passed::

    from tinytest import test, assert_equals, main

    @test
    def test_addition():
        assert_equals(10, add_numbers(3, 7))

    if __name__ == "__main__":
        main()
"""

from tinytest.assertions import (
    AssertionFailed,
    assert_equals,
    assert_int_equals,
    assert_string_equals,
    assert_true,
)
from tinytest.registration import register, test
from tinytest.registry import Registry, TestCase
from tinytest.runner import Runner, main, report, run, run_all
from tinytest.state import ExecutionState, Session, SuiteTally, activate, get_session

__all__ = [
    "AssertionFailed",
    "ExecutionState",
    "Registry",
    "Runner",
    "Session",
    "SuiteTally",
    "TestCase",
    "activate",
    "assert_equals",
    "assert_int_equals",
    "assert_string_equals",
    "assert_true",
    "get_session",
    "main",
    "register",
    "report",
    "run",
    "run_all",
    "test",
]
