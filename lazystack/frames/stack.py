"""Cursor-tracked, immutable sequence of frames.

Index 0 is the innermost (most recent) frame. The cursor primitives are
strict: any out-of-range target raises ``OutOfRangeError``. Clamping and
boundary messages belong to the command layer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..errors import OutOfRangeError
from .describe import DEFAULT_SELF_CLIP_WIDTH, frame_info
from .frame import Frame

if TYPE_CHECKING:
    from .registry import StackRegistry


class FrameStack:
    def __init__(
        self,
        frames: Iterable[Frame],
        start: int = 0,
        prior_binding: object | None = None,
        self_width: int = DEFAULT_SELF_CLIP_WIDTH,
    ) -> None:
        self._frames: tuple[Frame, ...] = tuple(frames)
        if not self._frames:
            raise ValueError("a frame stack needs at least one frame")
        self._check_index(start)
        self._cursor = start
        self.prior_binding = prior_binding
        self.self_width = self_width
        self._render_cache: dict[tuple[int, bool], str] = {}
        self._registry: StackRegistry | None = None
        self._session_id: object | None = None

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return f"FrameStack(frames={len(self._frames)}, cursor={self._cursor})"

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._frames

    @property
    def current_frame(self) -> Frame:
        return self._frames[self._cursor]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._frames):
            raise OutOfRangeError(index, len(self._frames))

    def current_index(self) -> int:
        return self._cursor

    def frame_at(self, index: int) -> Frame:
        self._check_index(index)
        return self._frames[index]

    def move_to(self, target: int) -> None:
        """Select ``target``; the cursor is untouched when it is out of range."""
        self._check_index(target)
        self._cursor = target

    def move_relative(self, delta: int) -> None:
        self.move_to(self._cursor + delta)

    @property
    def is_bound(self) -> bool:
        """Whether a registry currently owns this stack."""
        return self._registry is not None

    def bind(self, registry: StackRegistry, session_id: object) -> None:
        """Record the registry entry that owns this stack."""
        self._registry = registry
        self._session_id = session_id

    def has_prior_context(self) -> bool:
        """Whether leaving this stack would return somewhere meaningful.

        True when the stack was entered from an existing binding, or when it
        is nested on top of another stack in the same session.
        """
        if self.prior_binding is not None:
            return True
        if self._registry is None:
            return False
        return len(self._registry.all_stacks(self._session_id)) > 1

    def render_frame(self, index: int, verbose: bool = False) -> str:
        """Return the memoized description of the frame at ``index``."""
        self._check_index(index)
        key = (index, bool(verbose))
        rendered = self._render_cache.get(key)
        if rendered is None:
            rendered = frame_info(self._frames[index], bool(verbose), self.self_width)
            self._render_cache[key] = rendered
        return rendered

    def destroy(self) -> None:
        """Drop cached renderings and the registry back-reference."""
        self._render_cache.clear()
        self._registry = None
        self._session_id = None
