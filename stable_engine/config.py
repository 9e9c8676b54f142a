"""Configuration loader: reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .models import PRECISION, EngineParams

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EngineConfig:
    address: str = "stable-engine"
    liquidation_threshold: int = 50
    liquidation_bonus: int = 10
    min_health_factor: int = PRECISION

    def params(self) -> EngineParams:
        return EngineParams(
            liquidation_threshold=self.liquidation_threshold,
            liquidation_bonus=self.liquidation_bonus,
            min_health_factor=self.min_health_factor,
        )


@dataclass(frozen=True)
class CollateralConfig:
    symbol: str = ""
    feed: str = ""
    decimals: int = 18


@dataclass(frozen=True)
class PythConfig:
    hermes_url: str = "https://hermes.pyth.network/v2/updates/price/latest"
    feeds: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PriceOracleConfig:
    provider: str = "pyth"
    pyth: PythConfig = field(default_factory=PythConfig)


@dataclass(frozen=True)
class AppConfig:
    engine: EngineConfig = field(default_factory=EngineConfig)
    collateral: tuple[CollateralConfig, ...] = ()
    price_oracle: PriceOracleConfig = field(default_factory=PriceOracleConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_engine(raw: dict[str, Any]) -> EngineConfig:
    return EngineConfig(
        address=str(raw.get("address", "stable-engine")),
        liquidation_threshold=int(raw.get("liquidation_threshold", 50)),
        liquidation_bonus=int(raw.get("liquidation_bonus", 10)),
        # Quoted in YAML to survive float parsing of large integers.
        min_health_factor=int(raw.get("min_health_factor", PRECISION)),
    )


def _build_collateral(raw: list[dict[str, Any]]) -> tuple[CollateralConfig, ...]:
    collateral: list[CollateralConfig] = []
    for c in raw:
        symbol = c.get("symbol", "")
        collateral.append(
            CollateralConfig(
                symbol=symbol,
                feed=c.get("feed", symbol),
                decimals=int(c.get("decimals", 18)),
            )
        )
    return tuple(collateral)


def _build_price_oracle(raw: dict[str, Any]) -> PriceOracleConfig:
    pyth_raw = raw.get("pyth", {})
    return PriceOracleConfig(
        provider=raw.get("provider", "pyth"),
        pyth=PythConfig(
            hermes_url=pyth_raw.get("hermes_url", PythConfig.hermes_url),
            feeds=dict(pyth_raw.get("feeds", {})),
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        engine=_build_engine(raw.get("engine", {})),
        collateral=_build_collateral(raw.get("collateral", [])),
        price_oracle=_build_price_oracle(raw.get("price_oracle", {})),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    engine = cfg.engine
    if not 1 <= engine.liquidation_threshold <= 100:
        raise ValueError("liquidation_threshold must be between 1 and 100")
    if not 0 <= engine.liquidation_bonus <= 100:
        raise ValueError("liquidation_bonus must be between 0 and 100")
    if engine.min_health_factor <= 0:
        raise ValueError("min_health_factor must be positive")
    if not engine.address:
        raise ValueError("Engine address must not be empty")

    if not cfg.collateral:
        raise ValueError("At least one collateral asset must be configured")

    seen: set[str] = set()
    for asset in cfg.collateral:
        if not asset.symbol:
            raise ValueError("Collateral asset has no symbol")
        if asset.symbol in seen:
            raise ValueError(f"Collateral asset '{asset.symbol}' configured twice")
        seen.add(asset.symbol)
        if asset.feed not in cfg.price_oracle.pyth.feeds:
            raise ValueError(
                f"Collateral '{asset.symbol}' references unknown feed '{asset.feed}'"
            )
