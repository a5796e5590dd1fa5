"""Per-session stack-of-stacks.

Each session keeps its nesting history of frame stacks, oldest first; the
last entry is the active stack. A session's stacks are never shared with
another session.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable

from .stack import FrameStack

logger = logging.getLogger(__name__)


class StackRegistry:
    def __init__(self) -> None:
        self._stacks: dict[Hashable, list[FrameStack]] = {}
        self._locks: dict[Hashable, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def locked(self, session_id: Hashable) -> threading.RLock:
        """Return the session's re-entrant lock.

        Hold it around a lookup plus the mutation that depends on it when a
        session can be driven from more than one thread.
        """
        with self._locks_guard:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.RLock()
                self._locks[session_id] = lock
            return lock

    def active_stack(self, session_id: Hashable) -> FrameStack | None:
        stacks = self._stacks.get(session_id)
        return stacks[-1] if stacks else None

    def all_stacks(self, session_id: Hashable) -> tuple[FrameStack, ...]:
        return tuple(self._stacks.get(session_id, ()))

    def sessions(self) -> list[Hashable]:
        with self._locks_guard:
            return [session_id for session_id, stacks in self._stacks.items() if stacks]

    def push(self, session_id: Hashable, stack: FrameStack) -> None:
        """Make ``stack`` the active stack of the session.

        A stack belongs to one registry entry at a time; pushing one that is
        still registered raises ``ValueError``.
        """
        with self.locked(session_id):
            with self._locks_guard:
                if stack.is_bound:
                    raise ValueError(f"{stack!r} is already registered")
                self._stacks.setdefault(session_id, []).append(stack)
                stack.bind(self, session_id)
            depth = len(self._stacks[session_id])
        logger.debug("pushed %r for session %r (depth %d)", stack, session_id, depth)

    def pop(self, session_id: Hashable) -> FrameStack | None:
        """Remove and return the active stack, or ``None`` when there is none."""
        with self.locked(session_id):
            with self._locks_guard:
                stacks = self._stacks.get(session_id)
                if not stacks:
                    self._locks.pop(session_id, None)
                    return None
                stack = stacks.pop()
                if not stacks:
                    del self._stacks[session_id]
                    self._locks.pop(session_id, None)
        stack.destroy()
        logger.debug("popped %r for session %r", stack, session_id)
        return stack

    def prior_context_exists(self, session_id: Hashable) -> bool:
        stack = self.active_stack(session_id)
        return stack is not None and stack.has_prior_context()

    def discard(self, session_id: Hashable) -> None:
        """Destroy every stack of a session that is ending."""
        with self.locked(session_id):
            with self._locks_guard:
                stacks = self._stacks.pop(session_id, [])
                self._locks.pop(session_id, None)
        for stack in reversed(stacks):
            stack.destroy()
        if stacks:
            logger.debug("discarded %d stack(s) for session %r", len(stacks), session_id)
