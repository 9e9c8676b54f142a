"""Unit tests for transactional rollback and the reentrancy guard."""
from __future__ import annotations

import logging

import pytest

from stable_engine.core import Ledger
from stable_engine.errors import MustBeMoreThanZero, ReentrantCall
from stable_engine.transaction import ReentrancyGuard, Transaction, atomic


class TestTransaction:
    def test_commit_keeps_changes(self) -> None:
        ledger = Ledger()
        with Transaction([ledger]):
            ledger.increase_debt("u", 5)
        assert ledger.debt("u") == 5

    def test_exception_rolls_back_and_propagates(self, caplog: pytest.LogCaptureFixture) -> None:
        ledger = Ledger()
        caplog.set_level(logging.WARNING)
        with pytest.raises(MustBeMoreThanZero):
            with Transaction([ledger], name="mint"):
                ledger.increase_debt("u", 5)
                raise MustBeMoreThanZero()
        assert ledger.debt("u") == 0
        assert "mint rejected" in caplog.text


class TestReentrancyGuard:
    def test_nested_enter_rejected(self) -> None:
        guard = ReentrancyGuard()
        guard.enter("deposit")
        assert guard.locked
        with pytest.raises(ReentrantCall) as exc:
            guard.enter("mint")
        assert exc.value.entry_point == "mint"
        guard.exit()
        assert not guard.locked


class _Counter:
    def __init__(self) -> None:
        self._guard = ReentrancyGuard()
        self.ledger = Ledger()

    def _participants(self):
        return [self.ledger]

    @atomic
    def bump(self, fail: bool = False) -> int:
        self.ledger.increase_debt("u", 1)
        if fail:
            raise RuntimeError("boom")
        return self.ledger.debt("u")

    @atomic
    def nested(self) -> int:
        return self.bump()


class TestAtomic:
    def test_returns_value(self) -> None:
        assert _Counter().bump() == 1

    def test_releases_guard_after_failure(self) -> None:
        c = _Counter()
        with pytest.raises(RuntimeError):
            c.bump(fail=True)
        assert not c._guard.locked
        assert c.ledger.debt("u") == 0
        assert c.bump() == 1

    def test_nested_entry_point_rejected(self) -> None:
        c = _Counter()
        with pytest.raises(ReentrantCall):
            c.nested()
        assert not c._guard.locked
