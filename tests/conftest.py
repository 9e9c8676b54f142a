"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from stable_engine.config import (
    AppConfig,
    CollateralConfig,
    EngineConfig,
    PriceOracleConfig,
    PythConfig,
)
from stable_engine.oracles import FixedPriceFeed
from stable_engine.services import StableEngine
from stable_engine.tokens import Erc20Token, StableToken

E18 = 10**18

USER = "user"
LIQUIDATOR = "liquidator"
WETH = "WETH"
WBTC = "WBTC"

ETH_PRICE = 2000_00000000  # 8-decimal feed answers
BTC_PRICE = 30000_00000000


# ---------------------------------------------------------------------------
# Collaborator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def weth() -> Erc20Token:
    return Erc20Token(WETH)


@pytest.fixture()
def wbtc() -> Erc20Token:
    return Erc20Token(WBTC)


@pytest.fixture()
def eth_feed() -> FixedPriceFeed:
    return FixedPriceFeed(ETH_PRICE, decimals=8, description="ETH / USD")


@pytest.fixture()
def btc_feed() -> FixedPriceFeed:
    return FixedPriceFeed(BTC_PRICE, decimals=8, description="BTC / USD")


@pytest.fixture()
def dsc() -> StableToken:
    return StableToken()


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def engine(
    weth: Erc20Token,
    wbtc: Erc20Token,
    eth_feed: FixedPriceFeed,
    btc_feed: FixedPriceFeed,
    dsc: StableToken,
) -> StableEngine:
    return StableEngine([weth, wbtc], [eth_feed, btc_feed], dsc)


def fund(token: Erc20Token, engine: StableEngine, user: str, amount: int) -> None:
    """Give ``user`` tokens and let the engine pull them."""
    token.faucet(user, amount)
    token.approve(user, engine.address, token.allowance(user, engine.address) + amount)


@pytest.fixture()
def funded_user(engine: StableEngine, weth: Erc20Token, wbtc: Erc20Token) -> str:
    fund(weth, engine, USER, 10 * E18)
    fund(wbtc, engine, USER, 1 * E18)
    return USER


@pytest.fixture()
def position(engine: StableEngine, funded_user: str) -> str:
    """1 WETH at $2000 backing 1000 stable units: health factor exactly 1.0."""
    engine.deposit_collateral_and_mint(funded_user, WETH, 1 * E18, 1000 * E18)
    return funded_user


@pytest.fixture()
def liquidator(engine: StableEngine, weth: Erc20Token, dsc: StableToken) -> str:
    """Well-collateralized account holding 1000 stable units to repay with."""
    fund(weth, engine, LIQUIDATOR, 20 * E18)
    engine.deposit_collateral_and_mint(LIQUIDATOR, WETH, 20 * E18, 1000 * E18)
    dsc.approve(LIQUIDATOR, engine.address, 1000 * E18)
    return LIQUIDATOR


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_app_config() -> AppConfig:
    return AppConfig(
        engine=EngineConfig(),
        collateral=(
            CollateralConfig(symbol="WETH", feed="ETH", decimals=18),
            CollateralConfig(symbol="WBTC", feed="BTC", decimals=18),
        ),
        price_oracle=PriceOracleConfig(
            provider="pyth",
            pyth=PythConfig(
                hermes_url="https://hermes.example.com",
                feeds={"ETH": "eee111", "BTC": "bbb222"},
            ),
        ),
    )


SAMPLE_YAML = textwrap.dedent("""\
    engine:
      address: test-engine
      liquidation_threshold: 50
      liquidation_bonus: 10
      min_health_factor: "1000000000000000000"
    collateral:
      - symbol: WETH
        feed: ETH
        decimals: 18
      - symbol: WBTC
        feed: BTC
    price_oracle:
      provider: pyth
      pyth:
        hermes_url: "https://hermes.example.com"
        feeds: {ETH: "aaa", BTC: "bbb"}
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
