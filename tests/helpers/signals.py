"""Helpers for observing Qt signals in tests."""

from __future__ import annotations

from typing import Any


class SignalRecorder:
    """Collects the argument tuples of every emission of one signal."""

    def __init__(self, signal: Any) -> None:
        self.calls: list[tuple[Any, ...]] = []

        def slot(*args: Any) -> None:
            self.calls.append(args)

        self._slot = slot
        signal.connect(slot)

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def last(self) -> tuple[Any, ...] | None:
        return self.calls[-1] if self.calls else None
