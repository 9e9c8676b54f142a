"""Collateral quantity <-> USD value conversion through registered feeds."""
from __future__ import annotations

import logging

from .. import fixed_point
from ..errors import InvalidPrice, MustBeMoreThanZero
from .registry import CollateralRegistry

logger = logging.getLogger(__name__)


class PriceOracleAdapter:
    """Read the latest feed answer for an asset and apply 18-decimal math.

    Feeds are trusted for sign and magnitude beyond the positivity check;
    there is no staleness validation.
    """

    def __init__(self, registry: CollateralRegistry) -> None:
        self._registry = registry

    def normalized_price(self, asset: str) -> int:
        feed = self._registry.price_feed(asset)
        price = int(feed.latest_price())
        if price <= 0:
            raise InvalidPrice(asset, price)
        normalized = fixed_point.normalize_price(price, int(feed.decimals))
        logger.debug("%s price %d (%d decimals) -> %d", asset, price, feed.decimals, normalized)
        return normalized

    def usd_value(self, asset: str, quantity: int) -> int:
        self._registry.require(asset)
        if quantity == 0:
            raise MustBeMoreThanZero("quantity")
        return fixed_point.usd_value(self.normalized_price(asset), quantity)

    def quantity_from_usd(self, asset: str, usd_amount: int) -> int:
        self._registry.require(asset)
        return fixed_point.quantity_from_usd(self.normalized_price(asset), usd_amount)
