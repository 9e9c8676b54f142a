"""Pure 18-decimal fixed-point arithmetic for pricing and risk, no I/O."""
from __future__ import annotations

from .models import MAX_HEALTH_FACTOR, PRECISION, EngineParams


def normalize_price(price: int, decimals: int) -> int:
    """Rescale a feed answer with ``decimals`` places to 18 decimals.

    Examples:
        normalize_price(2000_00000000, 8) → 2000 * 10**18
        normalize_price(2000 * 10**18, 18) → 2000 * 10**18
    """
    if decimals <= 18:
        return price * 10 ** (18 - decimals)
    return price // 10 ** (decimals - 18)


def usd_value(price_normalized: int, quantity: int) -> int:
    return price_normalized * quantity // PRECISION


def quantity_from_usd(price_normalized: int, usd_amount: int) -> int:
    return usd_amount * PRECISION // price_normalized


def health_factor(
    debt: int, collateral_value_usd: int, params: EngineParams = EngineParams()
) -> int:
    """Risk-adjusted collateral over debt; debt-free accounts are unbounded.

    With the default 50% threshold a position needs 200% collateral to sit
    exactly at ``params.min_health_factor``.
    """
    if debt == 0:
        return MAX_HEALTH_FACTOR
    adjusted = (
        collateral_value_usd
        * params.liquidation_threshold
        // params.liquidation_precision
    )
    return adjusted * params.precision // debt


def liquidation_seizure(base_quantity: int, params: EngineParams = EngineParams()) -> tuple[int, int]:
    """Return ``(bonus, seized)`` for a debt-equivalent collateral quantity."""
    bonus = base_quantity * params.liquidation_bonus // params.liquidation_precision
    return bonus, base_quantity + bonus
