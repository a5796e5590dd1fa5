"""Navigation command surface and its argument parsing."""

from __future__ import annotations

from .navigation import NO_STACK_MESSAGE, NavigationCommands, ShowStackResult
from .parsing import ShowStackOptions, parse_count, parse_index, parse_show_stack, split_command_line

__all__ = [
    "NO_STACK_MESSAGE",
    "NavigationCommands",
    "ShowStackOptions",
    "ShowStackResult",
    "parse_count",
    "parse_index",
    "parse_show_stack",
    "split_command_line",
]
