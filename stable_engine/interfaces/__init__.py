"""Protocol interfaces for engine collaborators."""
from .journaled import Journaled
from .price_feed import PriceFeed
from .token import CollateralToken, StableIssuer, SupplyCapability

__all__ = ["CollateralToken", "Journaled", "PriceFeed", "StableIssuer", "SupplyCapability"]
