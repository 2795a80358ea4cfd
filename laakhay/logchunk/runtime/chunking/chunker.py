"""Event chunking.

This module provides the EventChunker that splits oversized log events into
sequentially numbered derived events.

Only one split path is ever taken per event. When the formatted message is
too long the message is split and the error representation is dropped from
every derived event; otherwise an oversized stack trace is split by frames
and every derived event repeats the full message. Splitting on both at once
is not supported.
"""

from __future__ import annotations

from ...core.config import DEFAULT_MAX_LENGTH, DEFAULT_SEQUENCE_KEY, ChunkSettings
from ...core.exceptions import UnsupportedRepresentationError
from ...models import LogEvent
from ...utils.events import clone_event, clone_with_frames, clone_with_message, split_by_length
from .definitions import SplitMode
from .planners import FrameGroupPlanner
from .telemetry import (
    log_message_split,
    log_stack_trace_group,
    log_stack_trace_split,
    log_stack_trace_split_skipped,
)


def _tag(event: LogEvent, sequence_key: str, sequence: int) -> LogEvent:
    # clones always carry their own mdc dict
    event.mdc[sequence_key] = str(sequence)
    return event


class EventChunker:
    """Splits log events whose message or stack trace exceeds a limit.

    The chunker holds no state; every call is self-contained given the
    event and the configuration values passed in. ``max_length`` must be
    positive and ``sequence_key`` non-empty: these are caller preconditions
    and are not checked here (``ChunkSettings`` validates them).
    """

    def process(
        self,
        event: LogEvent,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
        sequence_key: str = DEFAULT_SEQUENCE_KEY,
        enabled: bool = True,
        debug: bool = False,
    ) -> list[LogEvent]:
        """Split ``event`` if needed.

        Args:
            event: Event to process
            max_length: Chunk size and split threshold in characters
            sequence_key: Contextual map key for the one-based ordinal tag
            enabled: When False the event is returned unchanged
            debug: Emit debug telemetry

        Returns:
            Derived events in order, or ``[event]`` when no split applies
        """
        mode = self.decide(event, max_length=max_length, enabled=enabled)

        if mode is SplitMode.MESSAGE:
            return self.split_message(
                event, max_length=max_length, sequence_key=sequence_key, debug=debug
            )
        if mode is SplitMode.STACK_TRACE:
            return self.split_stack_trace(
                event, max_length=max_length, sequence_key=sequence_key, debug=debug
            )
        return [event]

    def process_with(self, event: LogEvent, settings: ChunkSettings) -> list[LogEvent]:
        """Process ``event`` using a settings object."""
        return self.process(
            event,
            max_length=settings.max_length,
            sequence_key=settings.sequence_key,
            enabled=settings.enabled,
            debug=settings.debug_enabled,
        )

    def decide(self, event: LogEvent, *, max_length: int, enabled: bool = True) -> SplitMode:
        """Choose the split strategy for ``event``.

        The message is checked first; the stack trace is only measured when
        the message fits.
        """
        if not enabled:
            return SplitMode.DISABLED
        if self.should_split_message(event, max_length):
            return SplitMode.MESSAGE
        if self.should_split_stack_trace(event, max_length):
            return SplitMode.STACK_TRACE
        return SplitMode.NONE

    @staticmethod
    def should_split_message(event: LogEvent, max_length: int) -> bool:
        return len(event.formatted_message) > max_length

    @staticmethod
    def should_split_stack_trace(event: LogEvent, max_length: int) -> bool:
        stack_length = event.error.stack_length if event.error is not None else 0
        return stack_length > max_length

    def split_message(
        self,
        event: LogEvent,
        *,
        max_length: int,
        sequence_key: str,
        debug: bool = False,
    ) -> list[LogEvent]:
        """Split the formatted message into fixed-size windows.

        Returns:
            One derived event per window, tagged 1..N
        """
        message = event.formatted_message
        windows = split_by_length(message, max_length)
        if debug:
            log_message_split(
                chunks=len(windows), message_length=len(message), max_length=max_length
            )

        return [
            _tag(clone_with_message(event, window), sequence_key, sequence)
            for sequence, window in enumerate(windows, start=1)
        ]

    def split_stack_trace(
        self,
        event: LogEvent,
        *,
        max_length: int,
        sequence_key: str,
        debug: bool = False,
    ) -> list[LogEvent]:
        """Split the error's frames into greedy groups.

        Falls back to ``[event]`` when there are no frames or when the error
        representation cannot be rebuilt with a subset of its frames.

        Returns:
            One derived event per frame group, tagged 1..N
        """
        error = event.error
        if error is None or not error.frames:
            return [event]

        groups = FrameGroupPlanner(max_length).plan(error.frames)
        derived: list[LogEvent] = []
        for group in groups:
            try:
                partial = clone_with_frames(error, group.frames)
            except UnsupportedRepresentationError as exc:
                log_stack_trace_split_skipped(
                    representation_type=exc.representation_type or type(error).__name__,
                    reason=str(exc),
                )
                return [event]

            if debug:
                log_stack_trace_group(group=group)
            clone = clone_event(event).model_copy(update={"error": partial})
            derived.append(_tag(clone, sequence_key, group.sequence))

        if debug:
            log_stack_trace_split(
                groups=len(derived), stack_length=error.stack_length, max_length=max_length
            )
        return derived


_default_chunker = EventChunker()


def process(
    event: LogEvent,
    max_length: int = DEFAULT_MAX_LENGTH,
    sequence_key: str = DEFAULT_SEQUENCE_KEY,
    enabled: bool = True,
) -> list[LogEvent]:
    """Split ``event`` with a shared stateless chunker.

    See ``EventChunker.process``.
    """
    return _default_chunker.process(
        event, max_length=max_length, sequence_key=sequence_key, enabled=enabled
    )
