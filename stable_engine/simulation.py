"""Scripted deposit → mint → price move → liquidation walk-through."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from .errors import EngineError
from .models import PRECISION
from .oracles import FixedPriceFeed
from .services import StableEngine
from .tokens import Erc20Token, StableToken

logger = logging.getLogger(__name__)

BORROWER = "borrower"
LIQUIDATOR = "liquidator"
ASSET = "WETH"


@dataclass(frozen=True)
class AccountSnapshot:
    user: str
    collateral: int
    debt: int
    collateral_value_usd: int
    health_factor: int


@dataclass(frozen=True)
class ScenarioStep:
    label: str
    accounts: tuple[AccountSnapshot, ...]
    error: str = ""


@dataclass
class ScenarioReport:
    steps: list[ScenarioStep] = field(default_factory=list)
    liquidated: bool = False


def to_wei(value: float | int | str | Decimal) -> int:
    """Whole units → 18-decimal base units, without float rounding."""
    return int(Decimal(str(value)) * PRECISION)


def _snapshot(engine: StableEngine, user: str) -> AccountSnapshot:
    info = engine.account_information(user)
    return AccountSnapshot(
        user=user,
        collateral=engine.user_collateral_amount(user, ASSET),
        debt=info.debt,
        collateral_value_usd=info.collateral_value_usd,
        health_factor=engine.health_factor(user),
    )


def run_scenario(
    price: float,
    crash_price: float,
    deposit: float,
    mint: float,
    cover: float,
) -> ScenarioReport:
    """Borrow against one collateral asset, move its price, then liquidate.

    The liquidator funds ``cover`` by minting against four times that value
    in collateral at the crash price, so only the borrower's position is at
    risk. If either position cannot be opened the report ends with that
    error and no liquidation is attempted.
    """
    feed = FixedPriceFeed.from_usd(price, description="ETH / USD")
    crash_answer = FixedPriceFeed.from_usd(crash_price).latest_price()
    if feed.latest_price() <= 0 or crash_answer <= 0:
        raise ValueError(f"prices must be positive, got {price} and {crash_price}")

    weth = Erc20Token(ASSET)
    dsc = StableToken()
    engine = StableEngine([weth], [feed], dsc)
    report = ScenarioReport()

    def record(label: str, error: str = "") -> None:
        accounts = tuple(_snapshot(engine, u) for u in (BORROWER, LIQUIDATOR))
        report.steps.append(ScenarioStep(label=label, accounts=accounts, error=error))

    deposit_wei, mint_wei, cover_wei = to_wei(deposit), to_wei(mint), to_wei(cover)
    liquidator_wei = 4 * cover_wei * PRECISION // to_wei(crash_price) + 1

    weth.faucet(BORROWER, deposit_wei)
    weth.faucet(LIQUIDATOR, liquidator_wei)
    for user, amount in ((BORROWER, deposit_wei), (LIQUIDATOR, liquidator_wei)):
        weth.approve(user, engine.address, amount)

    try:
        engine.deposit_collateral_and_mint(BORROWER, ASSET, deposit_wei, mint_wei)
        engine.deposit_collateral_and_mint(LIQUIDATOR, ASSET, liquidator_wei, cover_wei)
    except EngineError as e:
        record(f"Opening positions at ${price:,.2f} rejected", error=f"{type(e).__name__}: {e}")
        return report
    record(f"Opened positions at ${price:,.2f}")

    feed.update_answer(crash_answer)
    record(f"Price moved to ${crash_price:,.2f}")

    dsc.approve(LIQUIDATOR, engine.address, cover_wei)
    try:
        engine.liquidate(LIQUIDATOR, BORROWER, ASSET, cover_wei)
    except EngineError as e:
        record(f"Liquidation of {cover:,.2f} rejected", error=f"{type(e).__name__}: {e}")
    else:
        report.liquidated = True
        record(f"Liquidated {cover:,.2f} of debt")
    return report


def format_report(report: ScenarioReport) -> str:
    """Render the scenario steps as a plain-text table."""

    def units(value: int) -> str:
        return f"{Decimal(value) / PRECISION:,.4f}"

    def factor(value: int) -> str:
        return "∞" if value >= 2**255 else units(value)

    lines: list[str] = []
    for step in report.steps:
        lines.append(f"== {step.label} ==")
        for a in step.accounts:
            lines.append(
                f"  {a.user:<11} collateral={units(a.collateral)} {ASSET} "
                f"value=${units(a.collateral_value_usd)} debt={units(a.debt)} "
                f"HF={factor(a.health_factor)}"
            )
        if step.error:
            lines.append(f"  ! {step.error}")
    return "\n".join(lines)
