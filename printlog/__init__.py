"""
printlog package.

Leveled print helpers with colorized severity tags and caller-location
annotations, written to the console and optionally duplicated into a log file.

The module-level functions are bound to ``default_logger``, a process-wide
:class:`PrintLogger`. Create more ``PrintLogger`` instances when separate
levels or streams are needed.
"""

from .core import (
    CallerLocation,
    Level,
    PrintError,
    PrintLogger,
    abs_to_rel_filepath,
    abs_to_simple_filepath,
    caller_location,
)

LOG_SILENCE = Level.SILENT
LOG_INFO = Level.INFO
LOG_DEBUG = Level.DEBUG

default_logger = PrintLogger()

# bound methods, so caller introspection sees the user's frame directly
set_level = default_logger.set_level
set_log_file = default_logger.set_log_file
info_func = default_logger.info_func
infoln = default_logger.infoln
infof = default_logger.infof
warnln = default_logger.warnln
warnf = default_logger.warnf
debugln = default_logger.debugln
debugf = default_logger.debugf
debug_func = default_logger.debug_func
errorf = default_logger.errorf

__all__ = [
    "core",
    "CallerLocation",
    "Level",
    "LOG_SILENCE",
    "LOG_INFO",
    "LOG_DEBUG",
    "PrintError",
    "PrintLogger",
    "abs_to_rel_filepath",
    "abs_to_simple_filepath",
    "caller_location",
    "default_logger",
    "set_level",
    "set_log_file",
    "info_func",
    "infoln",
    "infof",
    "warnln",
    "warnf",
    "debugln",
    "debugf",
    "debug_func",
    "errorf",
]
