"""Unit tests for data models."""
from __future__ import annotations

import pytest

from stable_engine.models import (
    AccountInformation,
    CollateralDeposited,
    EngineParams,
    PRECISION,
)


class TestEngineParams:
    def test_defaults(self) -> None:
        p = EngineParams()
        assert p.liquidation_threshold == 50
        assert p.liquidation_bonus == 10
        assert p.liquidation_precision == 100
        assert p.min_health_factor == PRECISION
        assert p.precision == 10**18

    def test_frozen(self) -> None:
        p = EngineParams()
        with pytest.raises(AttributeError):
            p.liquidation_bonus = 20  # type: ignore[misc]


class TestAccountInformation:
    def test_equality(self) -> None:
        assert AccountInformation(1, 2) == AccountInformation(debt=1, collateral_value_usd=2)

    def test_frozen(self) -> None:
        info = AccountInformation(1, 2)
        with pytest.raises(AttributeError):
            info.debt = 5  # type: ignore[misc]


class TestEvents:
    def test_frozen(self) -> None:
        e = CollateralDeposited(user="u", asset="WETH", amount=1)
        with pytest.raises(AttributeError):
            e.amount = 2  # type: ignore[misc]
