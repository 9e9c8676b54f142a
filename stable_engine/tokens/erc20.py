"""Minimal fungible token with balances, allowances and journaling."""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class TokenError(Exception):
    """A token call reverted."""


class Erc20Token:
    """Fungible token ledger keyed by account address.

    Invalid transfers raise ``TokenError`` the way a reverting token would;
    successful ones return ``True``.
    """

    def __init__(self, address: str, symbol: str | None = None, decimals: int = 18) -> None:
        self._address = address
        self.symbol = symbol or address
        self.decimals = decimals
        self._balances: dict[str, int] = {}
        self._allowances: dict[str, dict[str, int]] = {}
        self.total_supply = 0

    @property
    def address(self) -> str:
        return self._address

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._address!r})"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get(owner, {}).get(spender, 0)

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------

    def approve(self, owner: str, spender: str, amount: int) -> bool:
        if amount < 0:
            raise TokenError("negative allowance")
        self._allowances.setdefault(owner, {})[spender] = amount
        return True

    def transfer(self, sender: str, recipient: str, amount: int) -> bool:
        self._move(sender, recipient, amount)
        return True

    def transfer_from(self, spender: str, owner: str, recipient: str, amount: int) -> bool:
        allowed = self.allowance(owner, spender)
        if allowed < amount:
            raise TokenError(
                f"{self.symbol}: allowance {allowed} of {spender} below {amount}"
            )
        self._move(owner, recipient, amount)
        self._allowances.setdefault(owner, {})[spender] = allowed - amount
        return True

    def _move(self, sender: str, recipient: str, amount: int) -> None:
        if not recipient:
            raise TokenError(f"{self.symbol}: transfer to null recipient")
        if amount < 0:
            raise TokenError(f"{self.symbol}: negative transfer")
        balance = self.balance_of(sender)
        if balance < amount:
            raise TokenError(
                f"{self.symbol}: {sender} balance {balance} below {amount}"
            )
        self._balances[sender] = balance - amount
        self._balances[recipient] = self.balance_of(recipient) + amount

    # ------------------------------------------------------------------
    # Supply
    # ------------------------------------------------------------------

    def _mint(self, to: str, amount: int) -> None:
        if amount < 0:
            raise TokenError(f"{self.symbol}: negative mint")
        self._balances[to] = self.balance_of(to) + amount
        self.total_supply += amount

    def _burn(self, account: str, amount: int) -> None:
        if amount < 0:
            raise TokenError(f"{self.symbol}: negative burn")
        balance = self.balance_of(account)
        if balance < amount:
            raise TokenError(
                f"{self.symbol}: burn {amount} exceeds balance {balance}"
            )
        self._balances[account] = balance - amount
        self.total_supply -= amount

    def faucet(self, to: str, amount: int) -> None:
        """Credit test balances; collateral tokens have no supply policy here."""
        self._mint(to, amount)
        logger.debug("%s faucet %d to %s", self.symbol, amount, to)

    # ------------------------------------------------------------------
    # Journaling
    # ------------------------------------------------------------------

    def snapshot(self) -> Any:
        return (
            dict(self._balances),
            {owner: dict(spenders) for owner, spenders in self._allowances.items()},
            self.total_supply,
        )

    def restore(self, state: Any) -> None:
        balances, allowances, total_supply = state
        self._balances = dict(balances)
        self._allowances = {owner: dict(s) for owner, s in allowances.items()}
        self.total_supply = total_supply
