"""Custom exception hierarchy."""

from __future__ import annotations


class LogChunkError(Exception):
    """Base exception for all library errors."""

    pass


class UnsupportedRepresentationError(LogChunkError):
    """Error representation cannot be rebuilt with a subset of its frames.

    Raised by the cloning helpers when the concrete representation is a
    detached value (for example a snapshot received from another process)
    rather than a proxy over a live exception. The chunker catches it and
    falls back to delivering the original event.
    """

    def __init__(self, message: str, representation_type: str | None = None) -> None:
        super().__init__(message)
        self.representation_type = representation_type


class ConfigurationError(LogChunkError):
    """Chunking settings failed validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
