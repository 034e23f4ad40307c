"""
Core primitives shared across the printlog package.
"""

from .exceptions import PrintError
from .levels import DEFAULT_LEVEL, Level
from .location import CallerLocation, abs_to_rel_filepath, abs_to_simple_filepath, caller_location
from .logging import init_logger, log_file_name
from .printer import PrintLogger

__all__ = [
    "PrintError",
    "DEFAULT_LEVEL",
    "Level",
    "CallerLocation",
    "abs_to_rel_filepath",
    "abs_to_simple_filepath",
    "caller_location",
    "init_logger",
    "log_file_name",
    "PrintLogger",
]
