"""Stable token whose supply only the engine can change."""
from __future__ import annotations

import logging

from .erc20 import Erc20Token, TokenError

logger = logging.getLogger(__name__)


class MintBurnCapability:
    """Exclusive right to mint and burn, bound to one holder address."""

    def __init__(self, token: StableToken, holder: str) -> None:
        self._token = token
        self._holder = holder

    @property
    def holder(self) -> str:
        return self._holder

    def mint(self, to: str, amount: int) -> bool:
        if not to:
            raise TokenError("mint to null recipient")
        if amount <= 0:
            raise TokenError("mint amount must be more than zero")
        self._token._mint(to, amount)
        return True

    def burn(self, amount: int) -> bool:
        """Destroy ``amount`` from the holder's own balance."""
        if amount <= 0:
            raise TokenError("burn amount must be more than zero")
        self._token._burn(self._holder, amount)
        return True


class StableToken(Erc20Token):
    """Transferable stable token; supply changes go through one capability."""

    def __init__(self, address: str = "stable-token", symbol: str = "DSC") -> None:
        super().__init__(address, symbol)
        self._capability: MintBurnCapability | None = None

    @property
    def minter(self) -> str | None:
        return self._capability.holder if self._capability else None

    def issue_capability(self, holder: str) -> MintBurnCapability:
        if self._capability is not None:
            raise TokenError(
                f"{self.symbol}: supply capability already held by {self._capability.holder}"
            )
        self._capability = MintBurnCapability(self, holder)
        logger.info("%s supply capability issued to %s", self.symbol, holder)
        return self._capability

    def faucet(self, to: str, amount: int) -> None:
        raise TokenError(f"{self.symbol}: supply is restricted to {self.minter}")
