"""Static command definitions shown by the shell's ``help``."""

from __future__ import annotations

NAVIGATION_COMMANDS: tuple[tuple[str, str, str], ...] = (
    ("up", "up [N]", "Go up to the caller's context, N frames at a time (default 1)."),
    ("down", "down [N]", "Go down to the callee's context, N frames at a time (default 1)."),
    ("frame", "frame [N]", "Switch to frame N (negative counts from the end); no N shows the current frame."),
    ("show-stack", "show-stack [-v] [-H [N]] [-T [N]]", "Show the accessible frames; -H/-T limit to the first/last N."),
)

SHELL_COMMANDS: tuple[tuple[str, str, str], ...] = (
    ("help", "help", "Show this list."),
    ("exit", "exit", "Leave the current stack, returning to the one it was entered from."),
    ("exit-all", "exit-all", "Leave every stack and end the session."),
)


def help_text() -> str:
    rows = NAVIGATION_COMMANDS + SHELL_COMMANDS
    width = max(len(usage) for _name, usage, _summary in rows)
    return "\n".join(f"  {usage.ljust(width)}  {summary}" for _name, usage, summary in rows) + "\n"


__all__ = ["NAVIGATION_COMMANDS", "SHELL_COMMANDS", "help_text"]
