"""Token protocols: fungible transfers and the restricted supply capability."""
from typing import Protocol


class CollateralToken(Protocol):
    """Fungible token accepted as collateral, identified by its address."""

    @property
    def address(self) -> str: ...

    def transfer(self, sender: str, recipient: str, amount: int) -> bool: ...

    def transfer_from(
        self, spender: str, owner: str, recipient: str, amount: int
    ) -> bool: ...


class SupplyCapability(Protocol):
    """Mint/burn rights over the stable token, held by exactly one caller."""

    @property
    def holder(self) -> str: ...

    def mint(self, to: str, amount: int) -> bool: ...

    def burn(self, amount: int) -> bool: ...


class StableIssuer(CollateralToken, Protocol):
    """The stable token: transferable, and able to issue its supply capability once."""

    def issue_capability(self, holder: str) -> SupplyCapability: ...
