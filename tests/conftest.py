"""Pytest configuration and fixtures."""

import logging

import pytest

from tinytest.state import Session, activate


@pytest.fixture(autouse=True)
def session():
    """Give each test its own registry, execution state and tally."""
    with activate(Session()) as fresh:
        yield fresh


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset tinytest loggers after each test so handlers don't leak."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("tinytest"):
            continue
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_test_file(tmp_path):
    """Helper that writes a tinytest module into tmp_path and returns its path."""

    def _write(relpath: str, content: str):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
