"""Chunk relay forwarding split events to pluggable sinks.

The ChunkRelay owns the current ChunkSettings and an ordered list of sinks.
Every appended event goes through the chunker and each produced event is
delivered to every sink, synchronously and in registration order.

Design Decisions:
    - Protocol-based sinks: anything with deliver() and close() works
    - Immutable settings: reconfiguration swaps the whole settings object
    - No buffering or retries: sink errors propagate to the caller
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Protocol

from ..core.config import ChunkSettings
from ..models import LogEvent
from .chunking import EventChunker

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Protocol for downstream consumers of log events."""

    def deliver(self, event: LogEvent) -> None:
        """Consume one event.

        Raises:
            Exception: If delivery fails (propagated by the relay)
        """
        ...

    def close(self) -> None:
        """Release resources. Called when the relay is closed."""
        ...


def sink_name(sink: Any) -> str:
    """Name of a sink: its ``name`` attribute if set, else its class name."""
    return getattr(sink, "name", None) or sink.__class__.__name__


class ChunkRelay:
    """Runs the chunker and fans produced events out to sinks."""

    def __init__(
        self,
        settings: ChunkSettings | None = None,
        *,
        chunker: EventChunker | None = None,
    ) -> None:
        """Initialize chunk relay.

        Args:
            settings: Chunking settings (defaults to ChunkSettings())
            chunker: Chunker instance (defaults to a new EventChunker)
        """
        self._settings = settings or ChunkSettings()
        self._chunker = chunker or EventChunker()
        self._sinks: list[Sink] = []

    @property
    def settings(self) -> ChunkSettings:
        return self._settings

    @settings.setter
    def settings(self, settings: ChunkSettings) -> None:
        self._settings = settings

    def configure(self, **changes: Any) -> ChunkSettings:
        """Apply validated changes to the current settings.

        Raises:
            ConfigurationError: If a changed value is invalid
        """
        self._settings = self._settings.replace(**changes)
        return self._settings

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return tuple(self._sinks)

    def add_sink(self, sink: Sink) -> None:
        """Register a sink to receive events."""
        self._sinks.append(sink)
        logger.info(f"Added sink: {sink_name(sink)}")

    def remove_sink(self, sink: Sink) -> bool:
        """Detach a sink without closing it.

        Returns:
            True if the sink was attached
        """
        if sink not in self._sinks:
            return False
        self._sinks.remove(sink)
        logger.info(f"Removed sink: {sink_name(sink)}")
        return True

    def remove_sink_named(self, name: str) -> bool:
        """Detach the first sink called ``name`` without closing it."""
        sink = self.get_sink(name)
        if sink is None:
            return False
        return self.remove_sink(sink)

    def get_sink(self, name: str) -> Sink | None:
        for sink in self._sinks:
            if sink_name(sink) == name:
                return sink
        return None

    def is_attached(self, sink: Sink) -> bool:
        return sink in self._sinks

    def iter_sinks(self) -> Iterator[Sink]:
        return iter(tuple(self._sinks))

    def append(self, event: LogEvent) -> list[LogEvent]:
        """Chunk ``event`` and deliver the results.

        Each produced event is delivered to all sinks before the next one.

        Returns:
            The produced events
        """
        produced = self._chunker.process_with(event, self._settings)
        sinks = tuple(self._sinks)
        for item in produced:
            for sink in sinks:
                sink.deliver(item)
        return produced

    def close(self) -> None:
        """Close and detach all sinks."""
        sinks, self._sinks = self._sinks, []
        for sink in sinks:
            try:
                sink.close()
            except Exception as e:
                logger.error(f"Error closing sink {sink_name(sink)}: {e}")

    def __enter__(self) -> ChunkRelay:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
