"""Recover the source text of assertion arguments from the calling frame."""

from __future__ import annotations

import ast
import inspect
import linecache
import os
from types import FrameType


def display_path(filename: str) -> str:
    """Return *filename* relative to the working directory when it lies beneath it."""
    try:
        relative = os.path.relpath(filename)
    except ValueError:
        # Different drive on Windows.
        return filename
    if relative.startswith(os.pardir):
        return filename
    return relative


def location(frame: FrameType) -> tuple[str, int]:
    return display_path(frame.f_code.co_filename), frame.f_lineno


def _call_source(frame: FrameType) -> str | None:
    info = inspect.getframeinfo(frame, context=0)
    positions = getattr(info, "positions", None)
    if positions is None or positions.lineno is None or positions.end_lineno is None:
        line = linecache.getline(info.filename, info.lineno)
        return line.strip() or None

    lines = [
        linecache.getline(info.filename, number).encode("utf-8")
        for number in range(positions.lineno, positions.end_lineno + 1)
    ]
    if not all(lines):
        return None
    # Column offsets are byte offsets into the UTF-8 encoded lines.
    if positions.end_col_offset is not None:
        lines[-1] = lines[-1][: positions.end_col_offset]
    if positions.col_offset is not None:
        lines[0] = lines[0][positions.col_offset :]
    return b"".join(lines).decode("utf-8", errors="replace").strip() or None


def argument_sources(frame: FrameType, params: tuple[str, ...]) -> dict[str, str] | None:
    """Map each name in *params* to the source text passed for it at the call site.

    *frame* is the frame that made the call. Returns None when the source
    is unavailable or the call cannot be matched, e.g. in an interactive
    session or when arguments are unpacked with ``*``/``**``.
    """
    source = _call_source(frame)
    if source is None:
        return None
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return None

    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        if any(isinstance(arg, ast.Starred) for arg in node.args):
            continue
        if any(kw.arg is None for kw in node.keywords):
            continue
        if len(node.args) + len(node.keywords) != len(params):
            continue

        found: dict[str, str] = {}
        for param, arg in zip(params, node.args):
            found[param] = ast.get_source_segment(source, arg) or ast.unparse(arg)
        for kw in node.keywords:
            if kw.arg not in params or kw.arg in found:
                break
            found[kw.arg] = ast.get_source_segment(source, kw.value) or ast.unparse(kw.value)
        else:
            return found
    return None
