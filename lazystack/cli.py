"""Command-line front door for lazystack.

Runs a Python script and, if it raises, opens the frame navigation shell on
the failing call stack (innermost frame first).
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import runpy
import sys
import traceback
import types
from pathlib import Path

from .runtime import post_mortem
from .runtime.config import MIN_SELF_CLIP_WIDTH, load_settings
from .terminal import TerminalOutput

logger = logging.getLogger(__name__)


def _clip_width(value: str) -> int:
    """argparse type for the ``self`` clip width."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < MIN_SELF_CLIP_WIDTH:
        raise argparse.ArgumentTypeError(f"value must be >= {MIN_SELF_CLIP_WIDTH}")
    return parsed


def _trim_to_script(tb: types.TracebackType | None, script: Path) -> types.TracebackType | None:
    """Drop leading traceback entries that belong to the runner, not the script."""
    target = str(script)
    current = tb
    while current is not None and current.tb_frame.f_code.co_filename != target:
        current = current.tb_next
    return current if current is not None else tb


def run_script(script: Path, script_args: list[str]) -> types.TracebackType | None:
    """Run ``script`` as ``__main__``; return the traceback of an uncaught error.

    ``SystemExit`` raised by the script propagates unchanged.
    """
    saved_argv = sys.argv[:]
    saved_path0 = sys.path[0] if sys.path else None
    sys.argv = [str(script), *script_args]
    if sys.path:
        sys.path[0] = str(script.parent)
    try:
        runpy.run_path(str(script), run_name="__main__")
    except Exception:
        traceback.print_exc()
        return _trim_to_script(sys.exc_info()[2], script)
    finally:
        sys.argv = saved_argv
        if saved_path0 is not None:
            sys.path[0] = saved_path0
    return None


def main() -> None:
    """Parse CLI arguments, run the target script, and navigate its failure."""
    parser = argparse.ArgumentParser(
        prog="lazystack",
        description="Run a Python script and browse its call stack if it fails.",
    )
    parser.add_argument("script", help="Python script to run.")
    parser.add_argument("script_args", nargs=argparse.REMAINDER, help="Arguments passed to the script.")
    parser.add_argument("--nopager", action="store_true", help="Print stack listings directly without paging.")
    parser.add_argument(
        "--self-width",
        type=_clip_width,
        default=None,
        help="Maximum width of the 'self' description in verbose frame info.",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=None,
        metavar="CMD",
        help="Navigation command to run instead of prompting (repeatable).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging threshold for diagnostics on stderr.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    script = Path(args.script).resolve()
    if not script.is_file():
        raise SystemExit(f"Script not found: {args.script}")

    settings = load_settings()
    if args.nopager:
        settings = dataclasses.replace(settings, use_pager=False)
    if args.self_width is not None:
        settings = dataclasses.replace(settings, self_clip_width=args.self_width)

    tb = run_script(script, args.script_args)
    if tb is None:
        return

    logger.info("script %s failed; entering post-mortem navigation", script)
    output = TerminalOutput(use_pager=settings.use_pager)
    post_mortem(tb, commands=args.command, output=output, settings=settings)
    raise SystemExit(1)


if __name__ == "__main__":
    main()
