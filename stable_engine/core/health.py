"""Risk-adjusted collateral value and health factor per account."""
from __future__ import annotations

from .. import fixed_point
from ..errors import TransactionBreaksHealthFactor
from ..models import EngineParams
from .ledger import Ledger
from .pricing import PriceOracleAdapter
from .registry import CollateralRegistry


class HealthFactorEngine:
    """Derive account solvency from the ledger and current prices."""

    def __init__(
        self,
        registry: CollateralRegistry,
        ledger: Ledger,
        pricing: PriceOracleAdapter,
        params: EngineParams,
    ) -> None:
        self._registry = registry
        self._ledger = ledger
        self._pricing = pricing
        self._params = params

    def collateral_value_usd(self, user: str) -> int:
        # Linear in the number of registered assets.
        total = 0
        for asset in self._registry.addresses:
            balance = self._ledger.balance(user, asset)
            if balance:
                total += self._pricing.usd_value(asset, balance)
        return total

    def calculate_health_factor(self, debt: int, collateral_value_usd: int) -> int:
        return fixed_point.health_factor(debt, collateral_value_usd, self._params)

    def health_factor(self, user: str) -> int:
        debt = self._ledger.debt(user)
        if debt == 0:
            return self.calculate_health_factor(0, 0)
        return self.calculate_health_factor(debt, self.collateral_value_usd(user))

    def assert_not_broken(self, user: str) -> None:
        factor = self.health_factor(user)
        if factor < self._params.min_health_factor:
            raise TransactionBreaksHealthFactor(user, factor)
