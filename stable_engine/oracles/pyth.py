"""Pyth Network price feeds, refreshed from Hermes and read synchronously."""
from __future__ import annotations

import logging
import ssl

import aiohttp
import certifi

from ..config import PythConfig

logger = logging.getLogger(__name__)


class PythPriceFeed:
    """Last Pyth answer for one feed, exposed as a signed fixed-point price."""

    def __init__(self, name: str, feed_id: str) -> None:
        self.name = name
        self.feed_id = feed_id
        self._price = 0
        self._decimals = 0

    @property
    def decimals(self) -> int:
        return self._decimals

    def latest_price(self) -> int:
        # Zero until the first refresh; the engine rejects non-positive prices.
        return self._price

    def update(self, price_raw: int, expo: int) -> None:
        if expo <= 0:
            self._price, self._decimals = price_raw, -expo
        else:
            self._price, self._decimals = price_raw * 10**expo, 0


class PythOracle:
    """Fetch prices from Pyth Network and keep one ``PythPriceFeed`` per name."""

    def __init__(self, config: PythConfig) -> None:
        self.hermes_url = config.hermes_url
        self.price_feeds = dict(config.feeds)
        self._feeds = {
            name: PythPriceFeed(name, feed_id)
            for name, feed_id in self.price_feeds.items()
        }

    def feed(self, name: str) -> PythPriceFeed:
        try:
            return self._feeds[name]
        except KeyError:
            raise ValueError(f"No Pyth feed configured for '{name}'") from None

    async def fetch_prices(self, names: list[str] | None = None) -> dict[str, float]:
        """Refresh feeds from Hermes and return the prices as floats.

        Args:
            names: Optional list of feed names to refresh. If None, refreshes
                   all configured feeds.
        """
        prices: dict[str, float] = {}

        feeds = self.price_feeds
        if names is not None:
            feeds = {k: v for k, v in self.price_feeds.items() if k in names}

        feed_ids = list(set(feeds.values()))
        if not feed_ids:
            return prices

        query_params = "&".join([f"ids[]={fid}" for fid in feed_ids])
        url = f"{self.hermes_url}?{query_params}"

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        logger.error(
                            "Error fetching prices from Pyth: HTTP %s", response.status
                        )
                        return prices

                    data = await response.json()
                    parsed = data.get("parsed", [])

                    id_to_names: dict[str, list[str]] = {}
                    for name, feed_id in feeds.items():
                        id_to_names.setdefault(feed_id, []).append(name)

                    for item in parsed:
                        feed_id = item.get("id")
                        if feed_id not in id_to_names:
                            continue
                        price_data = item.get("price", {})
                        price_raw = int(price_data.get("price", 0))
                        expo = int(price_data.get("expo", 0))

                        for name in id_to_names[feed_id]:
                            self._feeds[name].update(price_raw, expo)
                            prices[name] = price_raw * (10**expo)

                    logger.info("Fetched prices from Pyth Network:")
                    for name, price in sorted(prices.items()):
                        logger.info("  %s: $%.4f", name, price)

        except (aiohttp.ClientError, OSError, ValueError) as e:
            logger.error("Error fetching prices from Pyth: %s", e)

        return prices
