"""Deposit, mint, redeem and burn against the shared ledger."""
from __future__ import annotations

import logging
from typing import Sequence

from ..core import CollateralRegistry, EventLog, HealthFactorEngine, Ledger, PriceOracleAdapter
from ..errors import (
    BurnFailed,
    DepositFailed,
    MintFailed,
    MustBeMoreThanZero,
    RedeemFailed,
)
from ..interfaces.journaled import Journaled
from ..interfaces.price_feed import PriceFeed
from ..interfaces.token import CollateralToken, StableIssuer
from ..models import (
    CollateralDeposited,
    CollateralRedeemed,
    EngineParams,
    StableBurned,
    StableMinted,
)
from ..transaction import ReentrancyGuard, atomic

logger = logging.getLogger(__name__)


def _require_positive(amount: int, name: str = "amount") -> None:
    if amount <= 0:
        raise MustBeMoreThanZero(name)


class PositionOperations:
    """Collateral and debt management for a single global ledger.

    Every public method is an atomic entry point. Each step finishes its
    ledger update before calling a collaborator, and the whole operation
    rolls back if any later step fails.
    """

    def __init__(
        self,
        collateral_tokens: Sequence[CollateralToken],
        price_feeds: Sequence[PriceFeed],
        stable_token: StableIssuer,
        params: EngineParams | None = None,
        address: str = "stable-engine",
    ) -> None:
        self.address = address
        self.params = params or EngineParams()
        self._registry = CollateralRegistry(collateral_tokens, price_feeds)
        self._ledger = Ledger()
        self._events = EventLog()
        self._pricing = PriceOracleAdapter(self._registry)
        self._health = HealthFactorEngine(
            self._registry, self._ledger, self._pricing, self.params
        )
        self._stable = stable_token
        self._supply = stable_token.issue_capability(address)
        self._guard = ReentrancyGuard()

    def _participants(self) -> list[Journaled]:
        # Each journaled token snapshots its full balance and allowance
        # tables, so every entry point copies O(accounts) state.
        participants: list[Journaled] = [self._ledger, self._events]
        collaborators = [self._stable] + [
            self._registry.token(asset) for asset in self._registry.addresses
        ]
        for collaborator in collaborators:
            if isinstance(collaborator, Journaled) and collaborator not in participants:
                participants.append(collaborator)
        return participants

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    @atomic
    def deposit_collateral(self, user: str, asset: str, amount: int) -> None:
        self._deposit_collateral(user, asset, amount)

    @atomic
    def mint_stable_token(self, user: str, amount: int) -> None:
        self._mint_stable_token(user, amount)

    @atomic
    def deposit_collateral_and_mint(
        self, user: str, asset: str, amount: int, mint_amount: int
    ) -> None:
        self._deposit_collateral(user, asset, amount)
        self._mint_stable_token(user, mint_amount)

    @atomic
    def redeem_collateral(self, user: str, asset: str, amount: int) -> None:
        _require_positive(amount)
        self._redeem_collateral(user, user, asset, amount)
        self._health.assert_not_broken(user)

    @atomic
    def burn_stable_token(self, user: str, amount: int) -> None:
        self._burn_stable_token(user, user, amount)

    @atomic
    def redeem_and_burn(
        self, user: str, asset: str, redeem_amount: int, burn_amount: int
    ) -> None:
        _require_positive(redeem_amount, "redeem_amount")
        self._burn_stable_token(user, user, burn_amount)
        self._redeem_collateral(user, user, asset, redeem_amount)
        self._health.assert_not_broken(user)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _deposit_collateral(self, user: str, asset: str, amount: int) -> None:
        _require_positive(amount)
        token = self._registry.token(asset)

        self._ledger.credit_collateral(user, asset, amount)
        self._events.emit(CollateralDeposited(user=user, asset=asset, amount=amount))

        if not token.transfer_from(self.address, user, self.address, amount):
            raise DepositFailed(asset, amount)
        logger.info("%s deposited %d %s", user, amount, asset)

    def _mint_stable_token(self, user: str, amount: int) -> None:
        _require_positive(amount)
        self._ledger.increase_debt(user, amount)
        self._health.assert_not_broken(user)
        self._events.emit(StableMinted(user=user, amount=amount))

        if not self._supply.mint(user, amount):
            raise MintFailed(self._stable.address, amount)
        logger.info("%s minted %d, debt now %d", user, amount, self._ledger.debt(user))

    def _redeem_collateral(
        self, redeemed_from: str, redeemed_to: str, asset: str, amount: int
    ) -> None:
        token = self._registry.token(asset)

        self._ledger.debit_collateral(redeemed_from, asset, amount)
        self._events.emit(
            CollateralRedeemed(
                redeemed_from=redeemed_from,
                redeemed_to=redeemed_to,
                asset=asset,
                amount=amount,
            )
        )

        if not token.transfer(self.address, redeemed_to, amount):
            raise RedeemFailed(asset, amount)
        logger.info(
            "Redeemed %d %s from %s to %s", amount, asset, redeemed_from, redeemed_to
        )

    def _burn_stable_token(self, on_behalf_of: str, payer: str, amount: int) -> None:
        _require_positive(amount)
        self._ledger.decrease_debt(on_behalf_of, amount)
        self._events.emit(
            StableBurned(on_behalf_of=on_behalf_of, payer=payer, amount=amount)
        )

        if not self._stable.transfer_from(self.address, payer, self.address, amount):
            raise BurnFailed(self._stable.address, amount)
        if not self._supply.burn(amount):
            raise BurnFailed(self._stable.address, amount)
        logger.info(
            "%s burned %d for %s, debt now %d",
            payer,
            amount,
            on_behalf_of,
            self._ledger.debt(on_behalf_of),
        )
