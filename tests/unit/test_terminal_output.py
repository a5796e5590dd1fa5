"""Tests for the output sink's write and paging decisions."""

from __future__ import annotations

import io
import unittest
from unittest import mock

from lazystack.terminal import TerminalOutput


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class TerminalOutputTests(unittest.TestCase):
    def test_write_appends_missing_newline(self) -> None:
        stream = io.StringIO()
        output = TerminalOutput(stream)
        output.write("one")
        output.write("two\n")
        output.write("")
        self.assertEqual(stream.getvalue(), "one\ntwo\n")

    def test_no_paging_for_non_tty_or_disabled(self) -> None:
        tall = "row\n" * 500
        self.assertFalse(TerminalOutput(io.StringIO()).should_page(tall))
        self.assertFalse(TerminalOutput(_TtyStream(), use_pager=False).should_page(tall))

    def test_pages_only_text_taller_than_terminal(self) -> None:
        output = TerminalOutput(_TtyStream())
        with mock.patch("lazystack.terminal.shutil.get_terminal_size", return_value=mock.Mock(lines=10, columns=80)):
            self.assertFalse(output.should_page("row\n" * 5))
            self.assertTrue(output.should_page("row\n" * 9))

    def test_stagger_output_writes_short_text(self) -> None:
        stream = _TtyStream()
        with mock.patch("lazystack.terminal.pydoc.pager") as pager, mock.patch(
            "lazystack.terminal.shutil.get_terminal_size", return_value=mock.Mock(lines=40, columns=80)
        ):
            TerminalOutput(stream).stagger_output("short\n")
        pager.assert_not_called()
        self.assertEqual(stream.getvalue(), "short\n")

    def test_closed_stream_is_not_a_tty(self) -> None:
        stream = io.StringIO()
        stream.close()
        self.assertFalse(TerminalOutput(stream).should_page("row\n" * 500))


if __name__ == "__main__":
    unittest.main()
