"""Core enumerations shared by events, sinks and the logging bridge.

Design Decisions:
    - String enum: levels serialize as their names ("INFO", "ERROR", ...)
    - Numeric values follow the standard library so records convert losslessly
    - TRACE sits below DEBUG so records at custom low levels map onto a name
"""

from __future__ import annotations

import logging
from enum import Enum

TRACE_LEVEL = 5

_LEVELNO_MAP = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class Level(str, Enum):
    """Severity level of a log event."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def levelno(self) -> int:
        """Numeric level compatible with the ``logging`` module."""
        return _LEVELNO_MAP[self.value]

    @classmethod
    def from_levelno(cls, levelno: int) -> Level:
        """Map a numeric level to the closest level at or below it.

        Custom numeric levels between the standard ones round down, and
        anything below TRACE is reported as TRACE.
        """
        matched = cls.TRACE
        for level in cls:
            if level.levelno <= levelno:
                matched = level
        return matched
