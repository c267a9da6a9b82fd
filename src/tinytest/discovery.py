"""Import test modules so their tests register before the run starts."""

from __future__ import annotations

import hashlib
import importlib.machinery
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Iterable

from tinytest.state import get_session

DEFAULT_PATTERNS = ("test_*.py", "*_test.py")


def collect_files(paths: Iterable[str | Path], patterns: Iterable[str] = DEFAULT_PATTERNS) -> list[Path]:
    """Expand *paths* into a sorted, de-duplicated list of test files.

    Files are taken as given; directories are searched recursively for
    files matching any of *patterns*.
    """
    patterns = list(patterns)
    found: set[Path] = set()
    for entry in paths:
        path = Path(entry)
        if path.is_file():
            found.add(path.resolve())
        elif path.is_dir():
            for pattern in patterns:
                found.update(
                    f.resolve() for f in path.rglob(pattern) if f.is_file()
                )
        else:
            raise FileNotFoundError(f"test path not found: {entry}")
    return sorted(found)


def _module_name(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:8]
    return f"tinytest_discovered_{path.stem}_{digest}"


def module_spec(path: Path) -> importlib.machinery.ModuleSpec:
    """Build the import spec for a test file, or raise ``ValueError``."""
    spec = importlib.util.spec_from_file_location(_module_name(path), path)
    if spec is None or spec.loader is None:
        raise ValueError(f"cannot import test file: {path}")
    return spec


def load_module(path: Path, logger: logging.Logger | None = None) -> str:
    """Import the file at *path* as a fresh module and return its name.

    The file's directory is put on ``sys.path`` while it executes so it
    can import its neighbours. If the import fails, the tests the file
    registered before the error are removed again.
    """
    logger = logger or logging.getLogger("tinytest")
    spec = module_spec(path)
    name = spec.name

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module

    registry = get_session().registry
    before = list(registry)
    original_path = sys.path.copy()
    sys.path.insert(0, str(path.parent))
    try:
        spec.loader.exec_module(module)
    except Exception:
        del sys.modules[name]
        known = {id(case) for case in before}
        removed = registry.discard(case for case in registry if id(case) not in known)
        logger.error(f"Failed to import test file {path}; dropped {removed} test(s) it registered")
        raise
    finally:
        sys.path = original_path

    logger.debug(f"Loaded test file {path} as {name}")
    return name


def discover(
    paths: Iterable[str | Path],
    patterns: Iterable[str] = DEFAULT_PATTERNS,
    logger: logging.Logger | None = None,
) -> list[str]:
    """Import every test file under *paths* in sorted order.

    Returns the names of the loaded modules.
    """
    files = collect_files(paths, patterns)
    return [load_module(f, logger=logger) for f in files]
