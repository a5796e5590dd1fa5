"""Public package surface for lazystack.

Exports ``main`` for programmatic CLI invocation and ``post_mortem`` for
hosts that want to navigate a traceback they already hold.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def post_mortem(*args, **kwargs):
    """Lazily import the post-mortem shell."""
    from .runtime.shell import post_mortem as _post_mortem

    return _post_mortem(*args, **kwargs)


__all__ = ["main", "post_mortem"]
