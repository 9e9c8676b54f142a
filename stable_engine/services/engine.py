"""Public engine: entry points plus read-only account queries."""
from __future__ import annotations

from typing import Any

from ..interfaces.price_feed import PriceFeed
from ..interfaces.token import CollateralToken, StableIssuer
from ..models import AccountInformation
from .liquidation import LiquidationEngine


class StableEngine(LiquidationEngine):
    """Overcollateralized stable-token engine.

    Users deposit registered collateral, mint stable tokens against it, and
    must keep their health factor at or above ``params.min_health_factor``.
    Anyone may liquidate an account that falls below it.
    """

    # ------------------------------------------------------------------
    # Account queries
    # ------------------------------------------------------------------

    def account_information(self, user: str) -> AccountInformation:
        return AccountInformation(
            debt=self._ledger.debt(user),
            collateral_value_usd=self._health.collateral_value_usd(user),
        )

    def user_collateral_amount(self, user: str, asset: str) -> int:
        self._registry.require(asset)
        return self._ledger.balance(user, asset)

    def collateral_balance_of_user(self, user: str, asset: str) -> int:
        return self.user_collateral_amount(user, asset)

    def account_collateral_value(self, user: str) -> int:
        return self._health.collateral_value_usd(user)

    def health_factor(self, user: str) -> int:
        return self._health.health_factor(user)

    def calculate_health_factor(self, debt: int, collateral_value_usd: int) -> int:
        return self._health.calculate_health_factor(debt, collateral_value_usd)

    # ------------------------------------------------------------------
    # Pricing queries
    # ------------------------------------------------------------------

    def usd_value(self, asset: str, amount: int) -> int:
        return self._pricing.usd_value(asset, amount)

    def quantity_from_usd(self, asset: str, usd_amount: int) -> int:
        return self._pricing.quantity_from_usd(asset, usd_amount)

    # ------------------------------------------------------------------
    # Configuration queries
    # ------------------------------------------------------------------

    def collateral_tokens(self) -> tuple[str, ...]:
        return self._registry.addresses

    def collateral_price_feed(self, asset: str) -> PriceFeed:
        return self._registry.price_feed(asset)

    def collateral_token(self, asset: str) -> CollateralToken:
        return self._registry.token(asset)

    @property
    def stable_token(self) -> StableIssuer:
        return self._stable

    @property
    def events(self) -> tuple[Any, ...]:
        return self._events.all()

    @property
    def busy(self) -> bool:
        """True while an entry point is executing."""
        return self._guard.locked
