"""Append-only record of committed engine events."""
from __future__ import annotations

from typing import Any


class EventLog:
    """Events emitted by entry points; truncated back on rollback."""

    def __init__(self) -> None:
        self._events: list[Any] = []

    def emit(self, event: Any) -> None:
        self._events.append(event)

    def __len__(self) -> int:
        return len(self._events)

    def all(self) -> tuple[Any, ...]:
        return tuple(self._events)

    def snapshot(self) -> int:
        return len(self._events)

    def restore(self, state: int) -> None:
        del self._events[state:]
