"""Overcollateralized stable-token engine."""
from .errors import EngineError
from .models import MAX_HEALTH_FACTOR, PRECISION, AccountInformation, EngineParams
from .oracles import FixedPriceFeed
from .services import StableEngine
from .tokens import Erc20Token, StableToken

__all__ = [
    "MAX_HEALTH_FACTOR",
    "PRECISION",
    "AccountInformation",
    "EngineError",
    "EngineParams",
    "Erc20Token",
    "FixedPriceFeed",
    "StableEngine",
    "StableToken",
]
