"""Service modules"""
from .positions import PositionOperations
from .liquidation import LiquidationEngine
from .engine import StableEngine

__all__ = ["PositionOperations", "LiquidationEngine", "StableEngine"]
