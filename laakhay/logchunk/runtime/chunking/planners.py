"""Frame grouping for stack-trace splitting.

This module provides the FrameGroupPlanner that partitions an error's frames
into consecutive groups whose rendered length stays around the configured
limit.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...models import StackFrame
from .definitions import FrameGroup


class FrameGroupPlanner:
    """Plans greedy frame groups.

    Frames are walked in order and accumulated into the current group. A
    group is closed once its running length reaches ``max_length`` or when
    the frame just added is the last one. A single frame longer than the
    limit therefore forms a group on its own; frames are never split.
    """

    def __init__(self, max_length: int) -> None:
        """Initialize planner.

        Args:
            max_length: Target maximum rendered length per group
        """
        self._max_length = max_length

    def plan(self, frames: Sequence[StackFrame]) -> list[FrameGroup]:
        """Partition ``frames`` into groups.

        Args:
            frames: Frames in original order

        Returns:
            Non-empty groups in frame order (empty list for no frames)
        """
        groups: list[FrameGroup] = []
        current: list[StackFrame] = []
        length = 0
        remaining = len(frames)

        for frame in frames:
            length += len(frame)
            current.append(frame)
            if length < self._max_length and remaining > 1:
                remaining -= 1
                continue

            remaining -= 1
            groups.append(FrameGroup(sequence=len(groups) + 1, frames=tuple(current), length=length))
            current = []
            length = 0

        return groups
