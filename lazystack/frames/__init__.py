"""Frame navigation core: frames, cursor-tracked stacks, and the registry."""

from __future__ import annotations

from .context import Construct, FrameContext
from .describe import frame_description, frame_info
from .frame import Frame
from .registry import StackRegistry
from .stack import FrameStack

__all__ = [
    "Construct",
    "Frame",
    "FrameContext",
    "FrameStack",
    "StackRegistry",
    "frame_description",
    "frame_info",
]
