"""In-memory sink, mainly for tests and buffering."""

from __future__ import annotations

from ..models import LogEvent


class InMemorySink:
    """Collects delivered events in order."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._events: list[LogEvent] = []
        self._closed = False

    @property
    def events(self) -> list[LogEvent]:
        """Snapshot of the delivered events."""
        return list(self._events)

    @property
    def closed(self) -> bool:
        return self._closed

    def deliver(self, event: LogEvent) -> None:
        if self._closed:
            raise RuntimeError("Sink is closed")
        self._events.append(event)

    def clear(self) -> None:
        self._events.clear()

    def close(self) -> None:
        self._closed = True

    def __len__(self) -> int:
        return len(self._events)
