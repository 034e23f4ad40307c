"""
loguru backend for printlog.

Every printed line is one loguru record. The record carries its color, prefix
and line ending in ``extra`` so that the console format can be chosen per
record and color markup is always closed by loguru itself.

printlog records go through a private copy of the loguru logger, so the host
application's ``logger.add()``/``logger.remove()`` calls and printlog's sinks
never affect each other.
"""

import copy
import time
from pathlib import Path
from typing import Callable, Optional, TextIO

from loguru import logger

_FILE_FORMAT = "{time:YYYY/MM/DD HH:mm:ss.SSSSSS} {extra[printlog_prefix]}{message}"

_printlog_logger = None


def init_logger():
    """
    Return printlog's own loguru logger, creating it on first use.

    The logger is a deep copy of loguru's global logger without any of the
    host's handlers. The global logger is left untouched.
    """
    global _printlog_logger
    if _printlog_logger is None:
        # host sinks such as sys.stderr cannot be deep-copied
        memo = {id(logger._core.handlers): {}}
        independent = copy.deepcopy(logger, memo)
        independent.remove()
        _printlog_logger = independent
    return _printlog_logger


def bind_owner(owner: int):
    """
    Return a loguru logger whose records belong to ``owner``.
    """
    return init_logger().bind(
        printlog_owner=owner,
        printlog_color=None,
        printlog_prefix="",
        printlog_end="",
        printlog_dual=False,
    )


def _console_format(record) -> str:
    body = "{extra[printlog_prefix]}{message}"
    color = record["extra"].get("printlog_color")
    if color:
        body = f"<{color}>{body}</{color}>"
    return body + "{extra[printlog_end]}"


def _owned_by(owner: int, dual_only: bool = False):
    def _filter(record) -> bool:
        extra = record["extra"]
        if extra.get("printlog_owner") != owner:
            return False
        return extra.get("printlog_dual", False) or not dual_only

    return _filter


def add_console_sink(owner: int, stream_getter: Callable[[], TextIO], colorize: bool) -> int:
    """
    Attach a console handler for ``owner``.

    Parameters
    ----------
    owner : int
        Owner id bound to the records by :func:`bind_owner`.
    stream_getter : Callable[[], TextIO]
        Returns the stream to write to. Resolved on every write so that a
        swapped ``sys.stdout`` is honoured.
    colorize : bool
        Emit ANSI sequences for the color markup, or strip it.

    Returns
    -------
    int
        loguru handler id.
    """

    def _write(message) -> None:
        stream = stream_getter()
        stream.write(message)
        stream.flush()

    return init_logger().add(
        _write,
        format=_console_format,
        colorize=colorize,
        level=0,
        filter=_owned_by(owner),
        backtrace=False,
        diagnose=False,
    )


def add_file_sink(owner: int, path: Path) -> int:
    """
    Attach an append-mode file handler receiving ``owner``'s dual records.

    Raises
    ------
    OSError
        When the parent directory does not exist or loguru cannot open ``path``.
    ValueError
        When ``path`` is not a valid file name, e.g. it contains a NUL byte.
    """
    # loguru would create missing directories; the file must go to an existing one
    if not path.parent.is_dir():
        raise FileNotFoundError(f"No such directory: '{path.parent}'")
    # loguru expands {time} placeholders in file paths
    sink = str(path).replace("{", "{{").replace("}", "}}")
    return init_logger().add(
        sink,
        format=_FILE_FORMAT,
        mode="a",
        encoding="utf-8",
        colorize=False,
        level=0,
        filter=_owned_by(owner, dual_only=True),
        backtrace=False,
        diagnose=False,
    )


def remove_sink(handler_id: Optional[int]) -> None:
    if handler_id is None:
        return
    try:
        init_logger().remove(handler_id)
    except ValueError:
        # already removed
        pass


def log_file_name(prefix: str = "", timestamp: Optional[int] = None) -> str:
    """
    Build ``<prefix>_<unix seconds>.log``, or ``<unix seconds>.log`` without a prefix.
    """
    if timestamp is None:
        timestamp = int(time.time())
    if prefix == "":
        return f"{timestamp}.log"
    return f"{prefix}_{timestamp}.log"


__all__ = [
    "init_logger",
    "bind_owner",
    "add_console_sink",
    "add_file_sink",
    "remove_sink",
    "log_file_name",
]
