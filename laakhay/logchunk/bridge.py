"""Bridge between the ``logging`` module and the chunk relay.

Attach a ChunkHandler to a logger and register the real handlers on it::

    chunker = ChunkHandler(settings=ChunkSettings(max_length=4000))
    chunker.add_handler(logging.StreamHandler())
    logging.getLogger().addHandler(chunker)

Records are converted into LogEvents, split when oversized, and each derived
event is handed to the downstream handlers as its own record.
"""

from __future__ import annotations

import logging

from .core.config import ChunkSettings
from .models import LogEvent
from .runtime.relay import ChunkRelay, Sink
from .sinks.handler import HandlerSink


class ChunkHandler(logging.Handler):
    """Logging handler that splits oversized records before forwarding."""

    def __init__(
        self,
        level: int = logging.NOTSET,
        *,
        settings: ChunkSettings | None = None,
        relay: ChunkRelay | None = None,
    ) -> None:
        super().__init__(level)
        self.relay = relay or ChunkRelay(settings)

    def add_handler(self, handler: logging.Handler) -> HandlerSink:
        """Forward chunked records to ``handler``."""
        sink = HandlerSink(handler)
        self.relay.add_sink(sink)
        return sink

    def add_sink(self, sink: Sink) -> None:
        self.relay.add_sink(sink)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.relay.append(LogEvent.from_record(record))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            self.relay.close()
        finally:
            self.release()
            super().close()
