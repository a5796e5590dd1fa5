"""Public runtime entry points.

Groups the navigation session, the interactive shell, and ``post_mortem``.
Imports are lazy so ``import lazystack`` stays lightweight.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .session import NavigationSession
    from .shell import FrameShell


def post_mortem(*args, **kwargs):
    """Lazily import the post-mortem entry point."""
    from .shell import post_mortem as _post_mortem

    return _post_mortem(*args, **kwargs)


def __getattr__(name: str):
    if name == "NavigationSession":
        from .session import NavigationSession

        return NavigationSession
    if name == "FrameShell":
        from .shell import FrameShell

        return FrameShell
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FrameShell",
    "NavigationSession",
    "post_mortem",
]
