"""In-memory token collaborators."""
from .erc20 import Erc20Token, TokenError
from .stable_token import MintBurnCapability, StableToken

__all__ = ["Erc20Token", "MintBurnCapability", "StableToken", "TokenError"]
