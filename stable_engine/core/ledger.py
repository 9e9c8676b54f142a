"""Per-user collateral balances and stable-token debt."""
from __future__ import annotations

from typing import Any

from ..errors import InsufficientBalance, InsufficientDebt


class Ledger:
    """Collateral and debt book for every account.

    Accounts appear on first credit and are never removed; a zero balance
    simply stays. Debits that would go below zero raise instead of wrapping.
    """

    def __init__(self) -> None:
        self._collateral: dict[str, dict[str, int]] = {}
        self._debt: dict[str, int] = {}

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def balance(self, user: str, asset: str) -> int:
        return self._collateral.get(user, {}).get(asset, 0)

    def debt(self, user: str) -> int:
        return self._debt.get(user, 0)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def credit_collateral(self, user: str, asset: str, amount: int) -> None:
        account = self._collateral.setdefault(user, {})
        account[asset] = account.get(asset, 0) + amount

    def debit_collateral(self, user: str, asset: str, amount: int) -> None:
        balance = self.balance(user, asset)
        if balance < amount:
            raise InsufficientBalance(user, asset, balance, amount)
        self._collateral[user][asset] = balance - amount

    def increase_debt(self, user: str, amount: int) -> None:
        self._debt[user] = self.debt(user) + amount

    def decrease_debt(self, user: str, amount: int) -> None:
        debt = self.debt(user)
        if debt < amount:
            raise InsufficientDebt(user, debt, amount)
        self._debt[user] = debt - amount

    # ------------------------------------------------------------------
    # Journaling
    # ------------------------------------------------------------------

    def snapshot(self) -> Any:
        return (
            {user: dict(assets) for user, assets in self._collateral.items()},
            dict(self._debt),
        )

    def restore(self, state: Any) -> None:
        collateral, debt = state
        self._collateral = {user: dict(assets) for user, assets in collateral.items()}
        self._debt = dict(debt)
