"""Price feed implementations."""
from .fixed import FixedPriceFeed
from .pyth import PythOracle, PythPriceFeed

__all__ = ["FixedPriceFeed", "PythOracle", "PythPriceFeed"]
