"""Capability interface the core uses to read an execution context.

The core never constructs, copies, or mutates a context. It only asks these
four questions of it, so any host can bind them however suits it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

CONSTRUCT_KINDS = ("function", "class", "module", "main")


@dataclass(frozen=True)
class Construct:
    """The syntactic construct a context is executing inside."""

    kind: str
    name: str = ""

    def __post_init__(self) -> None:
        if self.kind not in CONSTRUCT_KINDS:
            raise ValueError(f"unknown construct kind: {self.kind!r}")


class FrameContext(Protocol):
    def defining_construct(self) -> Construct:
        ...

    def signature(self) -> str | None:
        ...

    def describe_self(self, width: int) -> str:
        ...

    def source_location(self) -> tuple[str, int]:
        ...
