"""Stack frame data model."""

from __future__ import annotations

import traceback

from pydantic import BaseModel, ConfigDict, Field


class StackFrame(BaseModel):
    """One entry of an error's frame sequence.

    Frames are the atomic unit of stack-trace splitting: a frame is never
    broken across two derived events. ``len(frame)`` is the length of its
    rendering.
    """

    filename: str = Field(..., min_length=1)
    lineno: int | None = None
    function: str = "<module>"
    line: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_summary(cls, summary: traceback.FrameSummary) -> StackFrame:
        """Build a frame from a ``traceback`` frame summary."""
        return cls(
            filename=summary.filename,
            lineno=summary.lineno,
            function=summary.name,
            line=summary.line or None,
        )

    @property
    def rendering(self) -> str:
        """Traceback-style rendering of the frame."""
        text = f'File "{self.filename}", line {self.lineno}, in {self.function}'
        if self.line:
            text += f"\n    {self.line}"
        return text

    def __len__(self) -> int:
        return len(self.rendering)

    def __str__(self) -> str:
        return self.rendering
