"""Error taxonomy for frame navigation.

Every navigation failure is a ``CommandError`` carrying a user-facing message.
Failures abort only the current command; navigation state is left unchanged.
"""

from __future__ import annotations


class LazyStackError(Exception):
    """Root of all lazystack errors."""


class CommandError(LazyStackError):
    """A command could not run; ``str(exc)`` is shown to the user."""


class NoContextError(CommandError):
    """No active frame stack exists for the session."""

    def __init__(self, message: str = "Nowhere to go!") -> None:
        super().__init__(message)


class BelowBottomError(CommandError):
    """A move would go below the first frame."""

    def __init__(self, message: str = "At bottom of stack, cannot go further!") -> None:
        super().__init__(message)


class OutOfRangeError(CommandError):
    """A frame index does not exist in the stack."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"No frame with index {index} (stack has {size} frames).")


class CommandUsageError(CommandError):
    """Command arguments could not be parsed."""
