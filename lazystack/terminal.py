"""Output sink for command results.

Short text is written straight to the stream. Text taller than the terminal
is handed to ``pydoc.pager`` when paging is enabled and the stream is a TTY.
"""

from __future__ import annotations

import pydoc
import shutil
import sys
from typing import TextIO


def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed streams raise instead of answering.
        return False


class TerminalOutput:
    def __init__(self, stream: TextIO | None = None, use_pager: bool = True) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.use_pager = use_pager

    def write(self, text: str) -> None:
        if not text:
            return
        self.stream.write(text if text.endswith("\n") else text + "\n")
        self.stream.flush()

    def should_page(self, text: str) -> bool:
        if not self.use_pager or not _stream_is_tty(self.stream):
            return False
        term = shutil.get_terminal_size((80, 24))
        return text.count("\n") >= max(1, term.lines - 1)

    def stagger_output(self, text: str) -> None:
        """Write ``text``, paging it when it would scroll off the screen."""
        if self.should_page(text):
            pydoc.pager(text)
            return
        self.write(text)
