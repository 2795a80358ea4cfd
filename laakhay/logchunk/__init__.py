"""Laakhay LogChunk - split oversized log events into numbered chunks."""

from .bridge import ChunkHandler
from .core import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_SEQUENCE_KEY,
    ChunkSettings,
    ConfigurationError,
    Level,
    LogChunkError,
    UnsupportedRepresentationError,
)
from .models import ErrorProxy, ErrorRepresentation, ErrorSnapshot, LogEvent, StackFrame
from .runtime import ChunkRelay, EventChunker, FrameGroupPlanner, Sink, SplitMode, process
from .sinks import HandlerSink, InMemorySink
from .utils import clone_event, clone_with_frames, clone_with_message, split_by_length

__version__ = "0.1.0"

__all__ = [
    # Core
    "ChunkSettings",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_SEQUENCE_KEY",
    "Level",
    # Exceptions
    "LogChunkError",
    "UnsupportedRepresentationError",
    "ConfigurationError",
    # Models
    "LogEvent",
    "ErrorRepresentation",
    "ErrorProxy",
    "ErrorSnapshot",
    "StackFrame",
    # Chunking
    "EventChunker",
    "FrameGroupPlanner",
    "SplitMode",
    "process",
    "clone_event",
    "clone_with_message",
    "clone_with_frames",
    "split_by_length",
    # Delivery
    "ChunkRelay",
    "Sink",
    "InMemorySink",
    "HandlerSink",
    "ChunkHandler",
]
