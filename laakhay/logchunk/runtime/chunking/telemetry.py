"""Structured logging for chunking decisions.

Debug events are only emitted when the caller asks for them (see
``ChunkSettings.debug_enabled``); the fallback warning is always emitted.
"""

from __future__ import annotations

import logging

from .definitions import FrameGroup

logger = logging.getLogger(__name__)


def log_message_split(*, chunks: int, message_length: int, max_length: int) -> None:
    """Log a message split.

    Args:
        chunks: Number of derived events
        message_length: Length of the formatted message
        max_length: Configured limit
    """
    logger.debug(
        "message_split",
        extra={
            "chunks": chunks,
            "message_length": message_length,
            "max_length": max_length,
        },
    )


def log_stack_trace_group(*, group: FrameGroup) -> None:
    """Log one planned frame group."""
    logger.debug(
        "stack_trace_group",
        extra={
            "sequence": group.sequence,
            "frame_count": len(group.frames),
            "group_length": group.length,
        },
    )


def log_stack_trace_split(*, groups: int, stack_length: int, max_length: int) -> None:
    """Log a completed stack-trace split."""
    logger.debug(
        "stack_trace_split",
        extra={
            "groups": groups,
            "stack_length": stack_length,
            "max_length": max_length,
        },
    )


def log_stack_trace_split_skipped(*, representation_type: str, reason: str) -> None:
    """Log a stack-trace split that fell back to the original event.

    Args:
        representation_type: Class name of the error representation
        reason: Why the split was skipped
    """
    logger.warning(
        "stack_trace_split_skipped",
        extra={
            "representation_type": representation_type,
            "reason": reason,
        },
    )
