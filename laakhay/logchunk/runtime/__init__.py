"""Runtime components: chunking and sink fan-out."""

from .chunking import EventChunker, FrameGroup, FrameGroupPlanner, SplitMode, process
from .relay import ChunkRelay, Sink, sink_name

__all__ = [
    "ChunkRelay",
    "EventChunker",
    "FrameGroup",
    "FrameGroupPlanner",
    "Sink",
    "SplitMode",
    "process",
    "sink_name",
]
