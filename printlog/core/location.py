from __future__ import annotations

"""
Caller-location capture and source path shortening.
"""

from dataclasses import dataclass
import os
import sys
from typing import Optional


def _segments(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


def abs_to_rel_filepath(abs_filepath: str) -> tuple[str, bool]:
    """
    Shorten an absolute path to its last two nodes.

    Used for the ``errorf`` location prefix.

    Parameters
    ----------
    abs_filepath : str
        ``/``-separated source path.

    Returns
    -------
    tuple[str, bool]
        ``("dir/file.py", True)``, or ``("", False)`` when the path is empty
        or has fewer than two nodes.
    """
    if not abs_filepath:
        return "", False
    segments = _segments(abs_filepath)
    if len(segments) < 2:
        return "", False
    return "/".join(segments[-2:]), True


def abs_to_simple_filepath(abs_filepath: str) -> tuple[str, bool]:
    """
    Shorten an absolute path to its last two nodes for info/debug lines.

    Same output as :func:`abs_to_rel_filepath`, but the input needs at least
    three nodes.

    Example
    -------
    ``/tmp/aaa/bbb/ccc`` -> ``("bbb/ccc", True)``
    """
    if not abs_filepath:
        return "", False
    segments = _segments(abs_filepath)
    if len(segments) < 3:
        return "", False
    return "/".join(segments[-2:]), True


@dataclass(frozen=True)
class CallerLocation:
    """
    Source location of a logging call.

    Parameters
    ----------
    path : str
        Absolute source path with ``/`` separators.
    line : int
        Line number of the call.
    function : str
        Qualified ``module.qualname`` of the enclosing function.
    """

    path: str
    line: int
    function: str


def caller_location(depth: int = 1) -> Optional[CallerLocation]:
    """
    Capture the location ``depth`` frames above the function calling this one.

    Returns ``None`` when the stack is too shallow or frame introspection is
    not available on this interpreter.
    """
    try:
        frame = sys._getframe(depth + 1)
    except (AttributeError, ValueError):
        return None

    code = frame.f_code
    module = frame.f_globals.get("__name__", "")
    qualname = getattr(code, "co_qualname", code.co_name)
    function = f"{module}.{qualname}" if module else qualname
    path = code.co_filename
    # pseudo files such as <stdin> have no directory to shorten
    if not path.startswith("<"):
        path = os.path.abspath(path).replace(os.sep, "/")
    return CallerLocation(path=path, line=frame.f_lineno, function=function)


__all__ = [
    "CallerLocation",
    "abs_to_rel_filepath",
    "abs_to_simple_filepath",
    "caller_location",
]
