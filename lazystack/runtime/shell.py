"""Line-oriented command shell over a navigation session.

Reads ``name [argument]`` lines, runs them, and writes results through the
output sink. Command errors are reported and the loop continues.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Iterable

from ..commands import ShowStackResult, split_command_line
from ..commands.table import NAVIGATION_COMMANDS, help_text
from ..errors import CommandError, CommandUsageError
from ..frames.python_context import frames_from_traceback
from ..terminal import TerminalOutput
from .config import Settings
from .session import NavigationSession

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "[lazystack] "
_NAVIGATION_NAMES = frozenset(name for name, _usage, _summary in NAVIGATION_COMMANDS)


class FrameShell:
    def __init__(
        self,
        session: NavigationSession,
        output: TerminalOutput | None = None,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self.session = session
        self.output = output if output is not None else TerminalOutput(use_pager=session.settings.use_pager)
        self.prompt = prompt

    def execute(self, line: str) -> bool:
        """Run one command line; returns ``False`` once the session has nothing left."""
        name, argument = split_command_line(line)
        if not name:
            return True
        try:
            return self._execute(name, argument)
        except CommandError as exc:
            self.output.write(f"Error: {exc}")
            return True

    def _execute(self, name: str, argument: str) -> bool:
        if name == "help":
            self.output.write(help_text())
            return True
        if name == "exit":
            self.session.leave()
            return self.session.current_stack is not None
        if name == "exit-all":
            self.session.close()
            return False
        if name not in _NAVIGATION_NAMES:
            raise CommandUsageError(f"Unknown command: {name} (try 'help')")

        result = self.session.commands.dispatch(name, argument)
        if isinstance(result, ShowStackResult):
            self.output.stagger_output(result.text)
        elif isinstance(result, str):
            self.output.write(result)
        else:
            self.output.write(self.session.commands.frame())
        return True

    def run(self, lines: Iterable[str] | None = None) -> None:
        """Execute ``lines``, or prompt interactively until EOF when omitted."""
        if lines is not None:
            for line in lines:
                if not self.execute(line):
                    return
            return

        while self.session.current_stack is not None:
            try:
                line = input(self.prompt)
            except EOFError:
                self.output.write("\n")
                return
            except KeyboardInterrupt:
                self.output.write("\n")
                continue
            if not self.execute(line):
                return


def post_mortem(
    tb: types.TracebackType,
    commands: Iterable[str] | None = None,
    output: TerminalOutput | None = None,
    settings: Settings | None = None,
) -> NavigationSession:
    """Navigate the frames of ``tb``, starting at the innermost one.

    With ``commands`` the shell runs them and returns; otherwise it prompts
    until the user exits. The session is closed before returning.
    """
    frames = frames_from_traceback(tb)
    if not frames:
        raise ValueError("traceback has no frames")
    with NavigationSession(settings=settings) as session:
        session.enter(frames)
        shell = FrameShell(session, output=output)
        shell.output.write(session.commands.frame())
        shell.run(commands)
    logger.debug("post-mortem session %r finished", session.session_id)
    return session
