"""
Verbosity levels understood by :class:`printlog.core.printer.PrintLogger`.
"""

from enum import IntEnum


class Level(IntEnum):
    """
    Ordered verbosity threshold.

    ``SILENT`` shows only warnings, ``INFO`` adds info lines and ``DEBUG``
    shows everything.
    """

    SILENT = 0
    INFO = 1
    DEBUG = 2


DEFAULT_LEVEL = Level.INFO

__all__ = ["Level", "DEFAULT_LEVEL"]
