"""Settable price feed for simulations and tests."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class FixedPriceFeed:
    """Feed that reports whatever answer it was last given.

    Answers are signed integers with ``decimals`` places, e.g. ``2000_00000000``
    for $2000 at 8 decimals.
    """

    def __init__(self, answer: int, decimals: int = 8, description: str = "") -> None:
        self._answer = answer
        self._decimals = decimals
        self.description = description
        self.round_id = 1

    @classmethod
    def from_usd(cls, usd: float | int, decimals: int = 8, description: str = "") -> FixedPriceFeed:
        return cls(int(round(usd * 10**decimals)), decimals, description)

    @property
    def decimals(self) -> int:
        return self._decimals

    def latest_price(self) -> int:
        return self._answer

    def update_answer(self, answer: int) -> None:
        logger.info(
            "%s answer %d -> %d (round %d)",
            self.description or "feed",
            self._answer,
            answer,
            self.round_id + 1,
        )
        self._answer = answer
        self.round_id += 1
