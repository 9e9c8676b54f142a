"""Immutable registry of collateral tokens and their price feeds."""
from __future__ import annotations

import logging
from typing import Sequence

from ..errors import DuplicateAsset, LengthMismatch, NotAllowedAsset
from ..interfaces.price_feed import PriceFeed
from ..interfaces.token import CollateralToken
from ..models import CollateralAsset

logger = logging.getLogger(__name__)


class CollateralRegistry:
    """Supported collateral assets, fixed at construction.

    Assets are keyed by token address and iterated in registration order.
    Adding an asset means building a new registry.
    """

    def __init__(
        self,
        tokens: Sequence[CollateralToken],
        price_feeds: Sequence[PriceFeed],
    ) -> None:
        if len(tokens) != len(price_feeds):
            raise LengthMismatch(len(tokens), len(price_feeds))

        assets: dict[str, CollateralAsset] = {}
        for token, feed in zip(tokens, price_feeds):
            if token.address in assets:
                raise DuplicateAsset(token.address)
            assets[token.address] = CollateralAsset(
                address=token.address, token=token, price_feed=feed
            )

        self._assets = assets
        self._order = tuple(assets)
        logger.debug("Registered collateral: %s", ", ".join(self._order))

    def __contains__(self, asset: object) -> bool:
        return asset in self._assets

    def __len__(self) -> int:
        return len(self._order)

    @property
    def addresses(self) -> tuple[str, ...]:
        return self._order

    def get(self, asset: str) -> CollateralAsset:
        try:
            return self._assets[asset]
        except KeyError:
            raise NotAllowedAsset(asset) from None

    def require(self, asset: str) -> None:
        if asset not in self._assets:
            raise NotAllowedAsset(asset)

    def price_feed(self, asset: str) -> PriceFeed:
        return self.get(asset).price_feed

    def token(self, asset: str) -> CollateralToken:
        return self.get(asset).token
