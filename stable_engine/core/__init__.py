"""Ledger, registry, pricing and risk primitives."""
from .events import EventLog
from .health import HealthFactorEngine
from .ledger import Ledger
from .pricing import PriceOracleAdapter
from .registry import CollateralRegistry

__all__ = [
    "CollateralRegistry",
    "EventLog",
    "HealthFactorEngine",
    "Ledger",
    "PriceOracleAdapter",
]
