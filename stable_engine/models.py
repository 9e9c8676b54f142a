"""Data models, all frozen."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PRECISION = 10**18
MAX_HEALTH_FACTOR = 2**256 - 1


@dataclass(frozen=True)
class EngineParams:
    """Risk constants shared by every position.

    ``liquidation_threshold`` and ``liquidation_bonus`` are percentages of
    ``liquidation_precision``; ``min_health_factor`` is 18-decimal fixed point.
    """

    liquidation_threshold: int = 50
    liquidation_bonus: int = 10
    liquidation_precision: int = 100
    min_health_factor: int = PRECISION
    precision: int = PRECISION


@dataclass(frozen=True)
class CollateralAsset:
    """A registered collateral token and the feed that prices it."""

    address: str
    token: Any
    price_feed: Any


@dataclass(frozen=True)
class AccountInformation:
    debt: int
    collateral_value_usd: int


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CollateralDeposited:
    user: str
    asset: str
    amount: int


@dataclass(frozen=True)
class CollateralRedeemed:
    redeemed_from: str
    redeemed_to: str
    asset: str
    amount: int


@dataclass(frozen=True)
class StableMinted:
    user: str
    amount: int


@dataclass(frozen=True)
class StableBurned:
    on_behalf_of: str
    payer: str
    amount: int


@dataclass(frozen=True)
class Liquidated:
    liquidator: str
    target: str
    asset: str
    debt_covered: int
    collateral_seized: int
    health_factor_before: int
    health_factor_after: int
