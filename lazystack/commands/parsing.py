"""Argument decoding for navigation commands.

Each command receives its arguments as one line of text. Malformed input
raises ``CommandUsageError`` instead of exiting, so the shell keeps running.
"""

from __future__ import annotations

import argparse
import shlex
from dataclasses import dataclass

from ..errors import CommandUsageError

DEFAULT_SHOW_STACK_COUNT = 10


def split_command_line(line: str) -> tuple[str, str]:
    """Split ``"name rest of line"`` into ``("name", "rest of line")``."""
    stripped = line.strip()
    if not stripped:
        return "", ""
    name, _sep, argument = stripped.partition(" ")
    return name, argument.strip()


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise CommandUsageError(f"invalid integer value: {text!r}") from exc


def parse_count(argument: str | None, default: int = 1) -> int:
    """Decode the optional step count of ``up``/``down``."""
    if argument is None or not argument.strip():
        return default
    return _parse_int(argument.split()[0])


def parse_index(argument: str | None) -> int | None:
    """Decode the optional (possibly negative) target of ``frame``."""
    if argument is None or not argument.strip():
        return None
    return _parse_int(argument.split()[0])


@dataclass(frozen=True)
class ShowStackOptions:
    verbose: bool = False
    head: int | None = None
    tail: int | None = None


class _CommandArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise CommandUsageError(f"{self.prog}: {message}")

    def exit(self, status: int = 0, message: str | None = None):
        raise CommandUsageError(message.strip() if message else f"{self.prog}: invalid arguments")


def _non_negative_int(value: str) -> int:
    """argparse type for frame counts."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def show_stack_parser(default_count: int = DEFAULT_SHOW_STACK_COUNT) -> argparse.ArgumentParser:
    parser = _CommandArgumentParser(prog="show-stack", add_help=False, description="Show all accessible stack frames.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Include extra information.")
    parser.add_argument(
        "-H",
        "--head",
        nargs="?",
        type=_non_negative_int,
        const=default_count,
        default=None,
        help=f"Display the first N stack frames (defaults to {default_count}).",
    )
    parser.add_argument(
        "-T",
        "--tail",
        nargs="?",
        type=_non_negative_int,
        const=default_count,
        default=None,
        help=f"Display the last N stack frames (defaults to {default_count}).",
    )
    return parser


def parse_show_stack(argument: str | None, default_count: int = DEFAULT_SHOW_STACK_COUNT) -> ShowStackOptions:
    try:
        argv = shlex.split(argument or "")
    except ValueError as exc:
        raise CommandUsageError(f"show-stack: {exc}") from exc
    namespace = show_stack_parser(default_count).parse_args(argv)
    return ShowStackOptions(verbose=namespace.verbose, head=namespace.head, tail=namespace.tail)
