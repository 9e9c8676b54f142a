"""Third-party liquidation of under-collateralized positions."""
from __future__ import annotations

import logging

from .. import fixed_point
from ..errors import (
    HealthFactorIsNotBroken,
    HealthFactorNotImproved,
    InsufficientBalance,
)
from ..models import Liquidated
from ..transaction import atomic
from .positions import PositionOperations, _require_positive

logger = logging.getLogger(__name__)


class LiquidationEngine(PositionOperations):
    """Position operations plus discounted seizure for broken accounts."""

    @atomic
    def liquidate(
        self, liquidator: str, target: str, asset: str, debt_to_cover: int
    ) -> Liquidated:
        """Repay ``debt_to_cover`` of ``target``'s debt and seize collateral.

        The liquidator supplies the stable tokens and receives the
        debt-equivalent quantity of ``asset`` plus the liquidation bonus.
        Settlement uses that single asset only: a target with enough value
        spread over other assets still fails with ``InsufficientBalance``.
        """
        _require_positive(debt_to_cover, "debt_to_cover")
        self._registry.require(asset)

        starting = self._health.health_factor(target)
        if starting >= self.params.min_health_factor:
            raise HealthFactorIsNotBroken(target, starting)

        base = self._pricing.quantity_from_usd(asset, debt_to_cover)
        bonus, seized = fixed_point.liquidation_seizure(base, self.params)
        balance = self._ledger.balance(target, asset)
        if balance < seized:
            raise InsufficientBalance(target, asset, balance, seized)

        self._redeem_collateral(target, liquidator, asset, seized)
        self._burn_stable_token(target, liquidator, debt_to_cover)

        ending = self._health.health_factor(target)
        if ending <= starting:
            raise HealthFactorNotImproved(target, starting, ending)
        self._health.assert_not_broken(liquidator)

        event = Liquidated(
            liquidator=liquidator,
            target=target,
            asset=asset,
            debt_covered=debt_to_cover,
            collateral_seized=seized,
            health_factor_before=starting,
            health_factor_after=ending,
        )
        self._events.emit(event)
        logger.info(
            "%s liquidated %s: covered %d, seized %d %s (bonus %d)",
            liquidator,
            target,
            debt_to_cover,
            seized,
            asset,
            bonus,
        )
        return event
