"""Utility helpers."""

from .events import clone_event, clone_with_frames, clone_with_message, split_by_length

__all__ = [
    "clone_event",
    "clone_with_frames",
    "clone_with_message",
    "split_by_length",
]
