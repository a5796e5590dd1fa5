"""One navigation session: its registry entries, commands, and listeners.

Entering a stack nests it on top of the active one; leaving returns to the
stack it was entered from. Listeners are told whenever the selected frame
changes so a host can re-anchor its evaluation context there.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Hashable, Iterable

from ..commands import NavigationCommands
from ..frames import Frame, FrameStack, StackRegistry
from .config import Settings

logger = logging.getLogger(__name__)

FrameListener = Callable[[Frame], None]


class NavigationSession:
    def __init__(
        self,
        registry: StackRegistry | None = None,
        session_id: Hashable | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry if registry is not None else StackRegistry()
        self.session_id = session_id if session_id is not None else uuid.uuid4().hex
        self.settings = settings if settings is not None else Settings()
        self._listeners: list[FrameListener] = []
        self.commands = NavigationCommands(
            self.registry,
            self.session_id,
            on_frame_change=self._notify,
            show_stack_count=self.settings.show_stack_count,
        )

    def __enter__(self) -> NavigationSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def add_listener(self, listener: FrameListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: FrameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, frame: Frame) -> None:
        for listener in list(self._listeners):
            listener(frame)

    @property
    def current_stack(self) -> FrameStack | None:
        return self.registry.active_stack(self.session_id)

    @property
    def current_frame(self) -> Frame | None:
        stack = self.current_stack
        return stack.current_frame if stack is not None else None

    @property
    def current_context(self) -> object | None:
        frame = self.current_frame
        return frame.context if frame is not None else None

    @property
    def depth(self) -> int:
        return len(self.registry.all_stacks(self.session_id))

    def prior_context_exists(self) -> bool:
        return self.registry.prior_context_exists(self.session_id)

    def enter(self, frames: Iterable[Frame], start: int = 0, prior_binding: object | None = None) -> FrameStack:
        """Push a new stack and select its ``start`` frame."""
        stack = FrameStack(frames, start=start, prior_binding=prior_binding, self_width=self.settings.self_clip_width)
        self.registry.push(self.session_id, stack)
        logger.debug("session %r entered stack of %d frame(s) at depth %d", self.session_id, len(stack), self.depth)
        self._notify(stack.current_frame)
        return stack

    def leave(self) -> FrameStack | None:
        """Pop the active stack; listeners see the frame selected in the outer one."""
        stack = self.registry.pop(self.session_id)
        if stack is None:
            return None
        logger.debug("session %r left stack, depth now %d", self.session_id, self.depth)
        outer = self.current_frame
        if outer is not None:
            self._notify(outer)
        return stack

    def close(self) -> None:
        self.registry.discard(self.session_id)
