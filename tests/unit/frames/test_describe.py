"""Tests for short and verbose frame descriptions."""

from __future__ import annotations

import unittest

from lazystack.frames import Construct, Frame, frame_description, frame_info
from stub_contexts import StubContext


class FrameDescriptionTests(unittest.TestCase):
    def test_fallback_labels_by_construct(self) -> None:
        self.assertEqual(frame_description(StubContext(name="parse")), "parse")
        self.assertEqual(frame_description(StubContext(kind="class", name="Parser")), "<class:Parser>")
        self.assertEqual(frame_description(StubContext(kind="module", name="pkg.mod")), "<module:pkg.mod>")
        self.assertEqual(frame_description(StubContext(kind="main", name="")), "<main>")

    def test_unknown_construct_kind_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Construct("lambda")


class FrameInfoTests(unittest.TestCase):
    def test_short_form_without_type_or_signature(self) -> None:
        self.assertEqual(frame_info(Frame(StubContext(name="work"))), " work ")

    def test_short_form_with_type_label_and_signature(self) -> None:
        frame = Frame(
            StubContext(name="ignored", signature="Api.get(self, key)"),
            frame_type="method",
            frame_label="custom label",
        )
        self.assertEqual(frame_info(frame), "[method]  custom label <Api.get(self, key)>")

    def test_type_column_is_padded_to_nine(self) -> None:
        rendered = frame_info(Frame(StubContext(name="f"), frame_type="eval"))
        self.assertTrue(rendered.startswith("[eval]    f"))

    def test_explicit_label_skips_construct_lookup(self) -> None:
        context = StubContext()
        frame_info(Frame(context, frame_label="given"))
        self.assertEqual(context.calls["defining_construct"], 0)

    def test_verbose_form_adds_self_and_location(self) -> None:
        frame = Frame(StubContext(name="run", self_text="<Job 7>", location=("/srv/job.py", 42)))
        self.assertEqual(frame_info(frame, verbose=True), " run \n      in <Job 7> @ /srv/job.py:42")


if __name__ == "__main__":
    unittest.main()
