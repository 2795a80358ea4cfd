"""Core components."""

from .config import DEFAULT_MAX_LENGTH, DEFAULT_SEQUENCE_KEY, ENV_PREFIX, ChunkSettings
from .enums import TRACE_LEVEL, Level
from .exceptions import ConfigurationError, LogChunkError, UnsupportedRepresentationError

__all__ = [
    "ChunkSettings",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_SEQUENCE_KEY",
    "ENV_PREFIX",
    "Level",
    "TRACE_LEVEL",
    "LogChunkError",
    "UnsupportedRepresentationError",
    "ConfigurationError",
]
