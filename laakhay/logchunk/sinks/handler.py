"""Sink adapter for standard library logging handlers."""

from __future__ import annotations

import logging

from ..models import LogEvent


class HandlerSink:
    """Delivers events to a ``logging.Handler``.

    Events are converted back into ``LogRecord`` objects (see
    ``LogEvent.to_record``). The handler's level is honoured the same way a
    logger honours it before calling a handler.
    """

    def __init__(self, handler: logging.Handler, name: str | None = None) -> None:
        self.handler = handler
        self.name = name or handler.get_name() or handler.__class__.__name__

    def deliver(self, event: LogEvent) -> None:
        record = event.to_record()
        if record.levelno >= self.handler.level:
            self.handler.handle(record)

    def close(self) -> None:
        self.handler.close()
