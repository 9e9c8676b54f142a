"""Journaled protocol: state that can be captured and restored by a transaction."""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Journaled(Protocol):
    """Objects whose state a transaction rolls back on failure."""

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...
