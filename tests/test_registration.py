"""Tests for the @test decorator and register()."""

import functools
import os

from tinytest.assertions.source import display_path
from tinytest.registration import register, suite_for, test


def test_decorator_registers_with_function_name_and_file(session):
    @test
    def test_sheep():
        pass

    (case,) = list(session.registry)
    assert case.name == "test_sheep"
    assert case.suite == display_path(__file__)
    assert case.action is test_sheep


def test_decorator_returns_function_hidden_from_pytest(session):
    def test_cheese():
        return "tangy"

    decorated = test(test_cheese)

    assert decorated is test_cheese
    assert decorated() == "tangy"
    assert decorated.__test__ is False


def test_decorator_with_overrides(session):
    @test(name="cheese_is_tangy", suite="dairy")
    def body():
        pass

    (case,) = list(session.registry)
    assert (case.name, case.suite) == ("cheese_is_tangy", "dairy")


def test_decorator_with_only_suite_override(session):
    @test(suite="dairy")
    def test_milk():
        pass

    assert [(c.name, c.suite) for c in session.registry] == [("test_milk", "dairy")]


def test_register_goes_to_active_session(session):
    register("t", "s", lambda: None)
    assert len(session.registry) == 1


def test_suite_for_unwraps_decorated_functions():
    def inner():
        pass

    @functools.wraps(inner)
    def wrapper():
        return inner()

    assert suite_for(wrapper) == display_path(__file__)


class _CallableCheck:
    def __call__(self):
        pass


def test_suite_for_callable_object_uses_module():
    assert suite_for(_CallableCheck()) == __name__


def test_display_path_outside_cwd(tmp_path, monkeypatch):
    tmp_path = tmp_path.resolve()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert display_path(str(workdir / "tests" / "a_test.py")) == os.path.join("tests", "a_test.py")
    outside = str(tmp_path / "elsewhere" / "b_test.py")
    assert display_path(outside) == outside
