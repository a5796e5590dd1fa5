"""Command surface for moving through the active frame stack.

Each command looks up the session's active stack, validates the move, and
asks the stack to change its cursor. Boundary policy is deliberately
asymmetric: ``up`` past the outermost frame clamps, ``down`` past frame 0 is
an error. A failing command leaves the cursor where it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass

from ..errors import BelowBottomError, CommandUsageError, NoContextError, OutOfRangeError
from ..frames import Frame, FrameStack, StackRegistry
from .parsing import DEFAULT_SHOW_STACK_COUNT, parse_count, parse_index, parse_show_stack

logger = logging.getLogger(__name__)

NO_STACK_MESSAGE = "No caller stack available!"


@dataclass(frozen=True)
class ShowStackResult:
    """Composed listing plus counts; ``total`` is 0 when no stack exists."""

    text: str
    total: int = 0
    shown: int = 0


class NavigationCommands:
    def __init__(
        self,
        registry: StackRegistry,
        session_id: Hashable,
        on_frame_change: Callable[[Frame], None] | None = None,
        show_stack_count: int = DEFAULT_SHOW_STACK_COUNT,
    ) -> None:
        self.registry = registry
        self.session_id = session_id
        self.on_frame_change = on_frame_change
        self.show_stack_count = show_stack_count

    def _require_stack(self) -> FrameStack:
        stack = self.registry.active_stack(self.session_id)
        if stack is None:
            raise NoContextError()
        return stack

    def _move(self, stack: FrameStack, target: int) -> int:
        """Select ``target`` and notify; a failing listener undoes the move."""
        previous = stack.current_index()
        stack.move_to(target)
        if self.on_frame_change is not None:
            try:
                self.on_frame_change(stack.current_frame)
            except Exception:
                stack.move_to(previous)
                raise
        return stack.current_index()

    def up(self, count: int = 1) -> int:
        """Move toward the callers; overshooting stops at the outermost frame."""
        with self.registry.locked(self.session_id):
            stack = self._require_stack()
            target = stack.current_index() + count
            if target >= len(stack):
                target = len(stack) - 1
            return self._move(stack, target)

    def down(self, count: int = 1) -> int:
        """Move toward the innermost frame; moving below frame 0 fails."""
        with self.registry.locked(self.session_id):
            stack = self._require_stack()
            target = stack.current_index() - count
            if target < 0:
                raise BelowBottomError()
            return self._move(stack, target)

    def frame(self, index: int | None = None) -> int | str:
        """Jump to ``index`` (negative counts from the end), or describe the current frame.

        Returns the new cursor after a jump, or ``"#N <verbose info>"`` when
        called without an index.
        """
        with self.registry.locked(self.session_id):
            stack = self._require_stack()
            if index is None:
                current = stack.current_index()
                return f"#{current} {stack.render_frame(current, verbose=True)}"
            target = len(stack) + index if index < 0 else index
            if not 0 <= target < len(stack):
                raise OutOfRangeError(index, len(stack))
            return self._move(stack, target)

    def _selected_range(self, stack: FrameStack, head: int | None, tail: int | None) -> range:
        size = len(stack)
        if head is not None:
            return range(0, min(head, size))
        if tail is not None:
            return range(max(0, size - tail), size)
        return range(0, size)

    def show_stack(self, head: int | None = None, tail: int | None = None, verbose: bool = False) -> ShowStackResult:
        """List a contiguous range of frames, marking the current one with ``=>``."""
        with self.registry.locked(self.session_id):
            stack = self.registry.active_stack(self.session_id)
            if stack is None:
                return ShowStackResult(NO_STACK_MESSAGE)

            selected = self._selected_range(stack, head, tail)
            current = stack.current_index()
            lines = [
                "",
                f"Showing all accessible frames in stack ({len(stack)} in total):",
                "--",
            ]
            for index in selected:
                marker = "=>" if index == current else "  "
                lines.append(f"{marker} #{index} {stack.render_frame(index, verbose)}")
            return ShowStackResult("\n".join(lines) + "\n", total=len(stack), shown=len(selected))

    def dispatch(self, name: str, argument: str = "") -> object:
        """Run a navigation command from its textual form."""
        logger.debug("dispatch %s %r for session %r", name, argument, self.session_id)
        if name == "up":
            return self.up(parse_count(argument))
        if name == "down":
            return self.down(parse_count(argument))
        if name == "frame":
            return self.frame(parse_index(argument))
        if name == "show-stack":
            options = parse_show_stack(argument, self.show_stack_count)
            return self.show_stack(options.head, options.tail, options.verbose)
        raise CommandUsageError(f"Unknown command: {name}")
