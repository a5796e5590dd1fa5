"""Tests for the per-session stack-of-stacks.

Covers push/pop ordering, empty-session behavior, teardown, and isolation
between sessions.
"""

from __future__ import annotations

import unittest

from lazystack.frames import Frame, FrameStack, StackRegistry
from stub_contexts import StubContext, make_frames


class StackRegistryTests(unittest.TestCase):
    def test_active_stack_is_last_pushed(self) -> None:
        registry = StackRegistry()
        outer = FrameStack(make_frames(2))
        inner = FrameStack(make_frames(3))

        self.assertIsNone(registry.active_stack("s"))
        registry.push("s", outer)
        registry.push("s", inner)

        self.assertIs(registry.active_stack("s"), inner)
        self.assertEqual(registry.all_stacks("s"), (outer, inner))

    def test_pop_returns_to_prior_stack(self) -> None:
        registry = StackRegistry()
        outer = FrameStack(make_frames(2))
        inner = FrameStack(make_frames(3))
        registry.push("s", outer)
        registry.push("s", inner)

        self.assertIs(registry.pop("s"), inner)
        self.assertIs(registry.active_stack("s"), outer)
        self.assertIs(registry.pop("s"), outer)
        self.assertIsNone(registry.active_stack("s"))
        self.assertEqual(registry.sessions(), [])

    def test_pop_without_stacks_returns_none(self) -> None:
        registry = StackRegistry()
        self.assertIsNone(registry.pop("missing"))

    def test_popped_stack_cache_is_cleared(self) -> None:
        registry = StackRegistry()
        context = StubContext()
        stack = FrameStack([Frame(context)])
        registry.push("s", stack)
        stack.render_frame(0)
        registry.pop("s")
        stack.render_frame(0)
        self.assertEqual(context.calls["defining_construct"], 2)
        self.assertFalse(stack.has_prior_context())

    def test_sessions_are_isolated(self) -> None:
        registry = StackRegistry()
        first = FrameStack(make_frames(2))
        second = FrameStack(make_frames(2))
        registry.push("a", first)
        registry.push("b", second)

        first.move_to(1)

        self.assertEqual(second.current_index(), 0)
        self.assertIs(registry.active_stack("a"), first)
        self.assertIs(registry.active_stack("b"), second)
        self.assertCountEqual(registry.sessions(), ["a", "b"])

    def test_prior_context_exists(self) -> None:
        registry = StackRegistry()
        self.assertFalse(registry.prior_context_exists("s"))
        registry.push("s", FrameStack(make_frames(1)))
        self.assertFalse(registry.prior_context_exists("s"))
        registry.push("s", FrameStack(make_frames(1)))
        self.assertTrue(registry.prior_context_exists("s"))

    def test_discard_destroys_whole_session(self) -> None:
        registry = StackRegistry()
        registry.push("s", FrameStack(make_frames(1)))
        registry.push("s", FrameStack(make_frames(1)))
        registry.push("other", FrameStack(make_frames(1)))

        registry.discard("s")

        self.assertEqual(registry.all_stacks("s"), ())
        self.assertIsNotNone(registry.active_stack("other"))

    def test_stack_registered_elsewhere_is_rejected(self) -> None:
        registry = StackRegistry()
        outer = FrameStack(make_frames(1))
        shared = FrameStack(make_frames(2))
        registry.push("a", outer)
        registry.push("a", shared)

        with self.assertRaises(ValueError):
            registry.push("b", shared)
        with self.assertRaises(ValueError):
            registry.push("a", shared)

        self.assertEqual(registry.all_stacks("a"), (outer, shared))
        self.assertEqual(registry.all_stacks("b"), ())
        self.assertTrue(shared.has_prior_context())

    def test_popped_stack_can_be_pushed_again(self) -> None:
        registry = StackRegistry()
        stack = FrameStack(make_frames(1))
        registry.push("a", stack)
        registry.pop("a")
        registry.push("b", stack)
        self.assertIs(registry.active_stack("b"), stack)

    def test_lock_is_released_when_last_stack_is_popped(self) -> None:
        registry = StackRegistry()
        lock = registry.locked("s")
        registry.push("s", FrameStack(make_frames(1)))
        self.assertIs(registry.locked("s"), lock)
        registry.pop("s")
        self.assertIsNot(registry.locked("s"), lock)

    def test_session_lock_is_reentrant_and_stable(self) -> None:
        registry = StackRegistry()
        lock = registry.locked("s")
        self.assertIs(registry.locked("s"), lock)
        with lock:
            with registry.locked("s"):
                registry.push("s", FrameStack(make_frames(1)))
        self.assertIsNotNone(registry.active_stack("s"))


if __name__ == "__main__":
    unittest.main()
