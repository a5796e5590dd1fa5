"""Call-counting frame contexts shared by the test suites."""

from __future__ import annotations

from collections import Counter

from lazystack.frames import Construct, Frame


class StubContext:
    def __init__(
        self,
        name: str = "work",
        kind: str = "function",
        signature: str | None = None,
        self_text: str = "<obj>",
        location: tuple[str, int] = ("app.py", 1),
    ) -> None:
        self.name = name
        self.kind = kind
        self._signature = signature
        self.self_text = self_text
        self.location = location
        self.calls: Counter[str] = Counter()

    def defining_construct(self) -> Construct:
        self.calls["defining_construct"] += 1
        return Construct(self.kind, self.name)

    def signature(self) -> str | None:
        self.calls["signature"] += 1
        return self._signature

    def describe_self(self, width: int) -> str:
        self.calls["describe_self"] += 1
        return self.self_text[:width]

    def source_location(self) -> tuple[str, int]:
        self.calls["source_location"] += 1
        return self.location


def make_frames(count: int) -> list[Frame]:
    return [Frame(StubContext(name=f"f{i}", location=("app.py", i + 1))) for i in range(count)]
