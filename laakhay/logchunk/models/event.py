"""Log event data model."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Level
from .errors import ErrorProxy, ErrorRepresentation
from .frames import StackFrame


def _current_thread_name() -> str:
    return threading.current_thread().name


class LogEvent(BaseModel):
    """One log occurrence as seen by the chunker.

    The model is frozen; derived events are produced through the cloning
    helpers in ``laakhay.logchunk.utils.events``. The contextual map ``mdc``
    may be None on input events but is always a fresh dict on clones.
    """

    level: Level = Level.INFO
    logger_name: str = "root"
    message: str = ""
    args: tuple[Any, ...] = ()
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    thread_name: str = Field(default_factory=_current_thread_name)
    markers: tuple[str, ...] = ()
    caller_data: tuple[StackFrame, ...] | None = None
    mdc: dict[str, str] | None = None
    error: ErrorRepresentation | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def formatted_message(self) -> str:
        """Message template rendered with its args (``%``-style)."""
        if not self.args:
            return self.message
        args: Any = self.args
        # a single non-empty mapping is used for named placeholders
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            args = args[0]
        return self.message % args

    @property
    def has_caller_data(self) -> bool:
        return bool(self.caller_data)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> LogEvent:
        """Convert a standard library log record.

        The message is formatted eagerly so chunk boundaries are computed on
        the text that sinks will actually see. Extra attributes ``mdc`` (a
        mapping) and ``markers`` (a name or an iterable of names) are picked up when
        present.
        """
        error = None
        if record.exc_info and record.exc_info[1] is not None:
            error = ErrorProxy.from_exception(record.exc_info[1])

        caller_data = None
        if record.pathname:
            caller_data = (
                StackFrame(
                    filename=record.pathname,
                    lineno=record.lineno,
                    function=record.funcName or "<module>",
                ),
            )

        mdc = getattr(record, "mdc", None)
        markers = getattr(record, "markers", None) or ()
        if isinstance(markers, str):
            markers = (markers,)

        return cls(
            level=Level.from_levelno(record.levelno),
            logger_name=record.name,
            message=record.getMessage(),
            timestamp=datetime.fromtimestamp(record.created, tz=UTC),
            thread_name=record.threadName or "",
            markers=tuple(str(marker) for marker in markers),
            caller_data=caller_data,
            mdc={str(k): str(v) for k, v in mdc.items()} if isinstance(mdc, Mapping) else None,
            error=error,
        )

    def to_record(self) -> logging.LogRecord:
        """Convert back into a standard library log record.

        Contextual entries are exposed as record attributes (without
        shadowing built-in record fields) and as ``record.mdc``. The error
        representation is pre-rendered into ``exc_text`` so formatters print
        exactly the frames this event carries.
        """
        caller = self.caller_data[0] if self.has_caller_data else None
        record = logging.LogRecord(
            name=self.logger_name,
            level=self.level.levelno,
            pathname=caller.filename if caller else "",
            lineno=(caller.lineno or 0) if caller else 0,
            msg=self.message,
            args=self.args,
            exc_info=None,
            func=caller.function if caller else None,
        )
        created = self.timestamp.timestamp()
        record.created = created
        record.msecs = (created - int(created)) * 1000
        record.threadName = self.thread_name

        mdc = dict(self.mdc or {})
        for key, value in mdc.items():
            if key not in record.__dict__:
                setattr(record, key, value)
        record.mdc = mdc
        record.markers = list(self.markers)

        if self.error is not None:
            record.exc_text = self.error.render()
        return record
