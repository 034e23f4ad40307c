from __future__ import annotations

"""
Leveled print helpers with colorized severity tags and caller locations.
"""

import itertools
from pathlib import Path
import sys
from typing import Any, Optional, TextIO

from . import logging as _backend
from .exceptions import PrintError
from .levels import DEFAULT_LEVEL, Level
from .location import abs_to_rel_filepath, abs_to_simple_filepath, caller_location

_COLOR_INFO = "light-blue"
_COLOR_WARN = "red"
_COLOR_DEBUG = "yellow"

_owner_ids = itertools.count(1)


def _format(template: str, args: tuple) -> str:
    return template % args if args else template


def _isatty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except ValueError:
        # closed stream
        return False


class PrintLogger:
    """
    Logger context holding the verbosity level and the output destinations.

    Parameters
    ----------
    level : Level, optional
        Initial verbosity, by default ``Level.INFO``.
    stream : TextIO, optional
        Console stream. ``None`` writes to whatever ``sys.stdout`` is at the
        time of the call.
    colorize : bool, optional
        Force ANSI colors on or off. ``None`` colors only when the console
        stream is a TTY.
    """

    def __init__(
        self,
        level: Level = DEFAULT_LEVEL,
        stream: Optional[TextIO] = None,
        colorize: Optional[bool] = None,
    ) -> None:
        self.level = level
        self._stream = stream
        self._owner = next(_owner_ids)
        self._log = _backend.bind_owner(self._owner)
        if colorize is None:
            colorize = _isatty(self._get_stream())
        self.colorize = colorize
        self._console_id: Optional[int] = _backend.add_console_sink(
            self._owner, self._get_stream, colorize
        )
        self._file_id: Optional[int] = None
        self._log_file: Optional[Path] = None

    def _get_stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(
        self,
        level_name: str,
        message: str,
        *,
        color: Optional[str] = None,
        prefix: str = "",
        end: str = "",
        dual: bool = False,
    ) -> None:
        # depth 2: _emit -> public method -> caller
        self._log.bind(
            printlog_color=color,
            printlog_prefix=prefix,
            printlog_end=end,
            printlog_dual=dual,
        ).opt(depth=2).log(level_name, message)

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------
    def set_level(self, level: Level) -> None:
        """
        Set the verbosity threshold. The value is stored without validation.
        """
        self.level = level

    @property
    def log_file(self) -> Optional[Path]:
        return self._log_file

    def set_log_file(self, prefix: str = "") -> Optional[Path]:
        """
        Duplicate debug lines into ``<prefix>_<unix seconds>.log``.

        The file is created (or appended to) in the current working
        directory. Failing to open it leaves the destinations unchanged.

        Parameters
        ----------
        prefix : str, optional
            File name prefix, by default none.

        Returns
        -------
        Optional[Path]
            Path of the attached file, or ``None`` when it could not be opened.
        """
        path = Path(_backend.log_file_name(prefix))
        try:
            file_id = _backend.add_file_sink(self._owner, path)
        except (OSError, ValueError):
            return None
        _backend.remove_sink(self._file_id)
        self._file_id = file_id
        self._log_file = path.resolve()
        return self._log_file

    def close(self) -> None:
        """
        Detach this logger's sinks and close the log file.
        """
        _backend.remove_sink(self._file_id)
        _backend.remove_sink(self._console_id)
        self._file_id = None
        self._console_id = None
        self._log_file = None

    # ------------------------------------------------------------------
    # info
    # ------------------------------------------------------------------
    def info_func(self) -> None:
        """Print ``[+:<file>:<line>] <function>()`` for the calling function."""
        if self.level < Level.INFO:
            return
        location = caller_location(1)
        if location is None:
            return
        rel_filepath, ok = abs_to_simple_filepath(location.path)
        if not ok:
            return
        self._emit(
            "INFO",
            f"{location.function}()",
            prefix=f"[+:{rel_filepath}:{location.line}] ",
            end="\n",
        )

    def infoln(self, text: str) -> None:
        """Print ``[+] <text>`` in light blue, with a newline."""
        if self.level < Level.INFO:
            return
        self._emit("INFO", str(text), color=_COLOR_INFO, prefix="[+] ", end="\n")

    def infof(self, template: str, *args: Any) -> None:
        """Print ``[+] `` and the formatted template in light blue, without a newline."""
        if self.level < Level.INFO:
            return
        self._emit("INFO", _format(template, args), color=_COLOR_INFO, prefix="[+] ")

    # ------------------------------------------------------------------
    # warn, never gated
    # ------------------------------------------------------------------
    def warnln(self, *values: Any) -> None:
        """Print the values joined by spaces in red, at any level."""
        self._emit("WARNING", " ".join(str(value) for value in values), color=_COLOR_WARN, end="\n")

    def warnf(self, template: str, *args: Any) -> None:
        """Print the formatted template in red, at any level, without a newline."""
        self._emit("WARNING", _format(template, args), color=_COLOR_WARN)

    # ------------------------------------------------------------------
    # debug
    # ------------------------------------------------------------------
    @staticmethod
    def _debug_prefix(depth: int) -> str:
        location = caller_location(depth + 1)
        if location is None:
            return "[D] "
        rel_filepath, ok = abs_to_simple_filepath(location.path)
        if not ok:
            return "[D] "
        return f"[D:{rel_filepath}:{location.line}] "

    def debugln(self, text: str) -> None:
        """Print a debug line, duplicated into the log file when one is attached."""
        if self.level < Level.DEBUG:
            return
        self._emit(
            "DEBUG",
            str(text),
            color=_COLOR_DEBUG,
            prefix=self._debug_prefix(1),
            end="\n",
            dual=True,
        )

    def debugf(self, template: str, *args: Any) -> None:
        """Print the formatted template as a debug line, without a newline."""
        if self.level < Level.DEBUG:
            return
        self._emit(
            "DEBUG",
            _format(template, args),
            color=_COLOR_DEBUG,
            prefix=self._debug_prefix(1),
            dual=True,
        )

    def debug_func(self) -> None:
        """Print ``[+<file>:<line>] <function>()`` in debug color for the calling function."""
        if self.level < Level.DEBUG:
            return
        location = caller_location(1)
        if location is None:
            return
        rel_filepath, ok = abs_to_simple_filepath(location.path)
        if not ok:
            return
        self._emit(
            "DEBUG",
            f"{location.function}()",
            color=_COLOR_DEBUG,
            prefix=f"[+{rel_filepath}:{location.line}] ",
            end="\n",
        )

    # ------------------------------------------------------------------
    # errors
    # ------------------------------------------------------------------
    def errorf(
        self, template: str, *args: Any, cause: Optional[BaseException] = None
    ) -> PrintError:
        """
        Build an error prefixed with the caller's location. Nothing is printed.

        Parameters
        ----------
        template : str
            ``%``-style message template.
        *args : Any
            Template arguments.
        cause : BaseException, optional
            Stored as ``__cause__`` when given. The message is unchanged.

        Returns
        -------
        PrintError
            Error with message ``[!<file>:<line>]: <content>``, or
            ``: <content>`` when the caller location is unavailable.
        """
        content = _format(template, args)
        prefix = ""
        location = caller_location(1)
        if location is not None:
            rel_filepath, ok = abs_to_rel_filepath(location.path)
            if ok:
                prefix = f"[!{rel_filepath}:{location.line}]"
        error = PrintError(f"{prefix}: {content}")
        if cause is not None:
            error.__cause__ = cause
        return error


__all__ = ["PrintLogger"]
