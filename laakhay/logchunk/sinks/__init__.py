"""Sinks receiving chunked events."""

from .handler import HandlerSink
from .in_memory import InMemorySink

__all__ = ["HandlerSink", "InMemorySink"]
