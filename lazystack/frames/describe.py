"""Plain-text descriptions of frames for stack listings and status lines.

Rendering only reads through the ``FrameContext`` capabilities, so results
depend solely on the context and are safe to memoize per stack.
"""

from __future__ import annotations

from .context import FrameContext
from .frame import Frame

DEFAULT_SELF_CLIP_WIDTH = 60
FRAME_TYPE_COLUMN_WIDTH = 9


def frame_description(context: FrameContext) -> str:
    """Derive a label from the construct the context is executing in."""
    construct = context.defining_construct()
    if construct.kind == "function":
        return construct.name
    if construct.kind == "class":
        return f"<class:{construct.name}>"
    if construct.kind == "module":
        return f"<module:{construct.name}>"
    return "<main>"


def frame_info(frame: Frame, verbose: bool = False, self_width: int = DEFAULT_SELF_CLIP_WIDTH) -> str:
    """Return the short or verbose one-frame description.

    Short form is ``"[type]    label <signature>"``; verbose form adds a second
    line with the clipped ``self`` and the source location.
    """
    context = frame.context
    frame_type = f"[{frame.frame_type}]".ljust(FRAME_TYPE_COLUMN_WIDTH) if frame.frame_type else ""
    desc = frame.frame_label if frame.frame_label else frame_description(context)
    signature = context.signature()
    sig = f"<{signature}>" if signature else ""

    summary = f"{frame_type} {desc} {sig}"
    if not verbose:
        return summary

    self_clipped = context.describe_self(self_width)
    filename, lineno = context.source_location()
    return f"{summary}\n      in {self_clipped} @ {filename}:{lineno}"
