"""Frame value object: one captured execution context plus optional tags."""

from __future__ import annotations

from dataclasses import dataclass

from .context import FrameContext


@dataclass(frozen=True, eq=False)
class Frame:
    """Non-owning reference to a host context.

    ``frame_type`` is a free-form tag (for example ``"method"`` or ``"block"``)
    and ``frame_label`` an optional producer-supplied description that takes
    precedence over the label derived from the context.
    """

    context: FrameContext
    frame_type: str | None = None
    frame_label: str | None = None
