"""Price feed protocol: one latest-answer source per collateral asset."""
from typing import Protocol


class PriceFeed(Protocol):
    """Abstract interface for a signed USD price with fixed decimals."""

    @property
    def decimals(self) -> int: ...

    def latest_price(self) -> int: ...
