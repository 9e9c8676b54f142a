"""Unit tests for Pyth feeds: price response parsing and error handling."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from stable_engine.config import PythConfig
from stable_engine.oracles import PythOracle, PythPriceFeed


@pytest.fixture()
def oracle() -> PythOracle:
    return PythOracle(
        PythConfig(
            hermes_url="https://hermes.example.com/v2/updates/price/latest",
            feeds={"ETH": "aaa111", "BTC": "bbb222", "USDC": "ccc333"},
        )
    )


def _make_pyth_response(items: list[dict]) -> dict:
    return {"parsed": items}


def _mock_session(status: int = 200, data: dict | None = None) -> AsyncMock:
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=data or {})
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = AsyncMock()
    mock_session.get = MagicMock(return_value=mock_response)
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    return mock_session


class TestPythPriceFeed:
    def test_unrefreshed_feed_reports_zero(self) -> None:
        feed = PythPriceFeed("ETH", "aaa111")
        assert feed.latest_price() == 0

    def test_negative_exponent(self) -> None:
        feed = PythPriceFeed("ETH", "aaa111")
        feed.update(200000000000, -8)
        assert feed.latest_price() == 200000000000
        assert feed.decimals == 8

    def test_positive_exponent(self) -> None:
        feed = PythPriceFeed("ETH", "aaa111")
        feed.update(2, 3)
        assert feed.latest_price() == 2000
        assert feed.decimals == 0


class TestPythOracleFetchPrices:
    @pytest.mark.asyncio
    async def test_parses_response_and_updates_feeds(self, oracle: PythOracle) -> None:
        mock_data = _make_pyth_response(
            [
                {"id": "aaa111", "price": {"price": "200000000000", "expo": "-8"}},
                {"id": "bbb222", "price": {"price": "3000000000000", "expo": "-8"}},
                {"id": "ccc333", "price": {"price": "100000000", "expo": "-8"}},
            ]
        )
        mock_session = _mock_session(data=mock_data)

        with patch("stable_engine.oracles.pyth.aiohttp.ClientSession", return_value=mock_session):
            with patch("stable_engine.oracles.pyth.aiohttp.TCPConnector"):
                prices = await oracle.fetch_prices()

        assert prices["ETH"] == pytest.approx(2000.0)
        assert prices["BTC"] == pytest.approx(30000.0)
        assert prices["USDC"] == pytest.approx(1.0)
        assert oracle.feed("ETH").latest_price() == 200000000000
        assert oracle.feed("ETH").decimals == 8

    @pytest.mark.asyncio
    async def test_handles_http_error(self, oracle: PythOracle) -> None:
        mock_session = _mock_session(status=500)

        with patch("stable_engine.oracles.pyth.aiohttp.ClientSession", return_value=mock_session):
            with patch("stable_engine.oracles.pyth.aiohttp.TCPConnector"):
                prices = await oracle.fetch_prices()

        assert prices == {}
        assert oracle.feed("ETH").latest_price() == 0

    @pytest.mark.asyncio
    async def test_handles_network_error(self, oracle: PythOracle) -> None:
        mock_session = AsyncMock()
        mock_session.get = MagicMock(side_effect=ConnectionError("timeout"))
        mock_session.__aenter__ = AsyncMock(return_value=mock_session)
        mock_session.__aexit__ = AsyncMock(return_value=None)

        with patch("stable_engine.oracles.pyth.aiohttp.ClientSession", return_value=mock_session):
            with patch("stable_engine.oracles.pyth.aiohttp.TCPConnector"):
                prices = await oracle.fetch_prices()

        assert prices == {}

    @pytest.mark.asyncio
    async def test_name_filter(self, oracle: PythOracle) -> None:
        mock_data = _make_pyth_response(
            [
                {"id": "aaa111", "price": {"price": "200000000000", "expo": "-8"}},
                {"id": "bbb222", "price": {"price": "3000000000000", "expo": "-8"}},
            ]
        )
        mock_session = _mock_session(data=mock_data)

        with patch("stable_engine.oracles.pyth.aiohttp.ClientSession", return_value=mock_session):
            with patch("stable_engine.oracles.pyth.aiohttp.TCPConnector"):
                prices = await oracle.fetch_prices(names=["ETH"])

        assert "ETH" in prices
        # BTC was returned by Hermes but not requested
        assert "BTC" not in prices
        assert oracle.feed("BTC").latest_price() == 0

    @pytest.mark.asyncio
    async def test_empty_feeds_returns_empty(self) -> None:
        oracle = PythOracle(PythConfig(hermes_url="https://x.com", feeds={}))
        assert await oracle.fetch_prices() == {}

    def test_unknown_feed(self, oracle: PythOracle) -> None:
        with pytest.raises(ValueError, match="No Pyth feed"):
            oracle.feed("DOGE")
