"""All-or-nothing execution of engine entry points.

Each mutating entry point runs inside a ``ReentrancyGuard`` and a
``Transaction``. The transaction snapshots every journaled participant on
entry (the ledger, the event log, and any collaborator token that can be
journaled) and restores them if the body raises, so a failed operation
leaves no trace. The guard rejects any nested call into a mutating entry
point, e.g. from a token callback.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Iterable, TypeVar

from .errors import EngineError, ReentrantCall
from .interfaces.journaled import Journaled

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class ReentrancyGuard:
    """Mutual-exclusion flag around the shared ledger."""

    def __init__(self) -> None:
        self._entered: str | None = None

    @property
    def locked(self) -> bool:
        return self._entered is not None

    def enter(self, entry_point: str) -> None:
        if self._entered is not None:
            raise ReentrantCall(entry_point)
        self._entered = entry_point

    def exit(self) -> None:
        self._entered = None


class Transaction:
    """Snapshot participants on entry, restore them if the body raises."""

    def __init__(self, participants: Iterable[Journaled], name: str = "tx") -> None:
        self.participants = list(participants)
        self.name = name
        self._snapshots: list[tuple[Journaled, Any]] = []

    def __enter__(self) -> Transaction:
        self._snapshots = [(p, p.snapshot()) for p in self.participants]
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            self._rollback()
            if isinstance(exc, EngineError):
                logger.warning("%s rejected: %s", self.name, exc)
            else:
                logger.warning("%s aborted by %s: %s", self.name, exc_type.__name__, exc)
        self._snapshots = []
        return False

    def _rollback(self) -> None:
        for participant, state in reversed(self._snapshots):
            participant.restore(state)
        logger.debug("%s rolled back %d participants", self.name, len(self._snapshots))


def atomic(method: F) -> F:
    """Run an engine method as one guarded, all-or-nothing transaction.

    The owning object must provide ``_guard`` (a ``ReentrancyGuard``) and
    ``_participants()`` returning the journaled objects to protect.
    """

    @functools.wraps(method)
    def wrapper(self, *args: Any, **kwargs: Any) -> Any:
        self._guard.enter(method.__name__)
        try:
            with Transaction(self._participants(), name=method.__name__):
                return method(self, *args, **kwargs)
        finally:
            self._guard.exit()

    return wrapper  # type: ignore[return-value]
