"""Data models for log events.

Architecture:
    All models are pydantic v2 models with ``frozen=True``. Derived events are
    built by copying (see ``laakhay.logchunk.utils.events``), never by
    mutating an event that a caller may still hold.

Model Categories:
    - Events: LogEvent
    - Errors: ErrorRepresentation, ErrorProxy, ErrorSnapshot
    - Frames: StackFrame
"""

from .errors import ErrorProxy, ErrorRepresentation, ErrorSnapshot
from .event import LogEvent
from .frames import StackFrame

__all__ = [
    "ErrorProxy",
    "ErrorRepresentation",
    "ErrorSnapshot",
    "LogEvent",
    "StackFrame",
]
