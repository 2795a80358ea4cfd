"""Chunking layer for oversized log events.

Architecture:
    - definitions.py: Split modes and frame group structures
    - planners.py: Greedy frame grouping for stack-trace splits
    - chunker.py: Split decision and derived event construction
    - telemetry.py: Structured logging of split decisions

Usage:
    The chunker is stateless; a ChunkRelay feeds it the current settings for
    every event and forwards the results to sinks.
"""

from __future__ import annotations

from .chunker import EventChunker, process
from .definitions import FrameGroup, SplitMode
from .planners import FrameGroupPlanner

__all__ = [
    "EventChunker",
    "FrameGroup",
    "FrameGroupPlanner",
    "SplitMode",
    "process",
]
