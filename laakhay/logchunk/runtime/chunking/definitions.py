"""Chunking definitions shared by the planner and the chunker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...models import StackFrame


class SplitMode(str, Enum):
    """Split strategy chosen for one event before any cloning happens."""

    DISABLED = "disabled"
    NONE = "none"
    MESSAGE = "message"
    STACK_TRACE = "stack_trace"


@dataclass(frozen=True)
class FrameGroup:
    """Consecutive frames assigned to one derived event.

    Attributes:
        sequence: One-based position of the group among all groups
        frames: Frames of the group, in original order
        length: Sum of the rendered lengths of the frames
    """

    sequence: int
    frames: tuple[StackFrame, ...]
    length: int
