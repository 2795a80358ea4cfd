"""Cloning helpers for deriving events from an original log event.

Every derived event is a structural copy of the original. Markers and caller
data are immutable tuples and are shared; the contextual map is always a
fresh dict so tagging a clone never touches the original.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.exceptions import UnsupportedRepresentationError
from ..models import ErrorRepresentation, LogEvent, StackFrame


def clone_event(event: LogEvent) -> LogEvent:
    """Copy ``event`` keeping its formatted message."""
    return clone_with_message(event, event.formatted_message)


def clone_with_message(event: LogEvent, message: str) -> LogEvent:
    """Copy ``event`` with ``message`` as its (already formatted) message.

    The error representation is not carried over: message-split events never
    include a stack trace.
    """
    return event.model_copy(
        update={
            "message": message,
            "args": (),
            "mdc": dict(event.mdc or {}),
            "error": None,
        }
    )


def clone_with_frames(
    error: ErrorRepresentation,
    frames: Iterable[StackFrame],
) -> ErrorRepresentation:
    """Copy ``error`` with its frame sequence replaced by ``frames``.

    The copy references the same exception and cause chain.

    Raises:
        UnsupportedRepresentationError: If the representation variant cannot
            be rebuilt with a partial frame sequence
    """
    if not error.supports_frame_replacement:
        raise UnsupportedRepresentationError(
            f"Cannot replace frames of {type(error).__name__}",
            representation_type=type(error).__name__,
        )
    return error.model_copy(update={"frames": tuple(frames)})


def split_by_length(text: str, chunk_size: int) -> list[str]:
    """Split ``text`` into consecutive windows of ``chunk_size`` characters.

    The last window may be shorter. Empty text yields no windows.
    """
    return [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]
