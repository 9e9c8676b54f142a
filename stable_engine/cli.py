"""Command-line interface for the stable-token engine."""
from __future__ import annotations

import argparse
import asyncio
import sys
from decimal import Decimal

from . import fixed_point
from .config import AppConfig, load_config
from .logging_setup import configure_logging
from .models import PRECISION
from .oracles import PythOracle
from .simulation import format_report, run_scenario


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="stable-engine",
        description="Overcollateralized stable-token engine",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("prices", help="Fetch collateral prices from Pyth")

    sim = sub.add_parser("simulate", help="Run a deposit/mint/liquidation walk-through")
    sim.add_argument("--price", type=_positive_float, default=2000.0, help="Opening ETH price")
    sim.add_argument(
        "--crash-price", type=_positive_float, default=1800.0, help="ETH price after the move"
    )
    sim.add_argument(
        "--deposit", type=_positive_float, default=1.0, help="Borrower collateral (ETH)"
    )
    sim.add_argument(
        "--mint", type=_positive_float, default=1000.0, help="Borrower debt (stable units)"
    )
    sim.add_argument(
        "--cover", type=_positive_float, default=500.0, help="Debt the liquidator repays"
    )

    return parser


async def show_prices(config: AppConfig) -> int:
    """Refresh Pyth feeds and print each collateral asset's value per unit."""
    oracle = PythOracle(config.price_oracle.pyth)
    await oracle.fetch_prices([c.feed for c in config.collateral])

    missing = 0
    for asset in config.collateral:
        feed = oracle.feed(asset.feed)
        price = feed.latest_price()
        if price <= 0:
            print(f"{asset.symbol:<8} no price from feed '{asset.feed}'")
            missing += 1
            continue
        normalized = fixed_point.normalize_price(price, feed.decimals)
        one_unit = fixed_point.usd_value(normalized, 10**asset.decimals)
        print(
            f"{asset.symbol:<8} ${Decimal(normalized) / PRECISION:,.4f} "
            f"(1 unit = {one_unit} USD base units)"
        )
    return 1 if missing else 0


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    configure_logging(args.log_level)

    if args.command == "prices":
        return await show_prices(load_config(args.config))
    if args.command == "simulate":
        report = run_scenario(
            price=args.price,
            crash_price=args.crash_price,
            deposit=args.deposit,
            mint=args.mint,
            cover=args.cover,
        )
        print(format_report(report))
        return 0 if report.liquidated else 2

    build_parser().print_help()
    return 1


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
