"""Error representations attached to log events.

Two variants exist. ``ErrorProxy`` wraps a live exception and can be rebuilt
with any subset of its frames, which is what stack-trace splitting needs.
``ErrorSnapshot`` is a detached value (typically deserialized from another
process) and does not support frame replacement.
"""

from __future__ import annotations

import traceback
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .frames import StackFrame

_CAUSE_SEPARATOR = "\nThe above exception was the direct cause of the following exception:\n\n"
_CONTEXT_SEPARATOR = "\nDuring handling of the above exception, another exception occurred:\n\n"


class ErrorRepresentation(BaseModel):
    """Rendered view of an error: type, message, frames and cause chain."""

    class_name: str = Field(..., min_length=1)
    message: str | None = None
    frames: tuple[StackFrame, ...] = ()
    cause: ErrorRepresentation | None = None
    # cause came from implicit __context__ rather than "raise ... from"
    cause_is_context: bool = False

    supports_frame_replacement: ClassVar[bool] = False

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def stack_length(self) -> int:
        """Sum of the rendered lengths of all frames."""
        return sum(len(frame) for frame in self.frames)

    def render(self) -> str:
        """Render the error (cause first) the way ``traceback`` prints it."""
        parts = []
        if self.cause is not None:
            parts.append(self.cause.render())
            parts.append(_CONTEXT_SEPARATOR if self.cause_is_context else _CAUSE_SEPARATOR)
        parts.append("Traceback (most recent call last):\n")
        for frame in self.frames:
            parts.append(f"  {frame.rendering}\n")
        if self.message:
            parts.append(f"{self.class_name}: {self.message}")
        else:
            parts.append(self.class_name)
        return "".join(parts)


class ErrorProxy(ErrorRepresentation):
    """Representation backed by a live exception object."""

    exception: BaseException | None = None

    supports_frame_replacement: ClassVar[bool] = True

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorProxy:
        """Build a proxy for ``exc`` including its cause chain.

        Explicit causes (``raise ... from``) win over implicit context;
        suppressed context is skipped and cycles in the chain are cut.
        """
        return cls._from_exception(exc, set())

    @classmethod
    def _from_exception(cls, exc: BaseException, seen: set[int]) -> ErrorProxy:
        seen.add(id(exc))
        linked = exc.__cause__
        is_context = False
        if linked is None and not exc.__suppress_context__:
            linked = exc.__context__
            is_context = linked is not None

        cause = None
        if linked is not None and id(linked) not in seen:
            cause = cls._from_exception(linked, seen)

        frames = tuple(
            StackFrame.from_summary(summary) for summary in traceback.extract_tb(exc.__traceback__)
        )
        return cls(
            class_name=type(exc).__qualname__,
            message=str(exc) or None,
            frames=frames,
            cause=cause,
            cause_is_context=is_context and cause is not None,
            exception=exc,
        )


class ErrorSnapshot(ErrorRepresentation):
    """Detached representation with no underlying exception."""

    @classmethod
    def of(cls, representation: ErrorRepresentation) -> ErrorSnapshot:
        """Detach any representation (and its causes) into a snapshot."""
        cause = cls.of(representation.cause) if representation.cause is not None else None
        return cls(
            class_name=representation.class_name,
            message=representation.message,
            frames=representation.frames,
            cause=cause,
            cause_is_context=representation.cause_is_context,
        )
