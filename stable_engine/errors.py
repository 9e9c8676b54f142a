"""Engine error taxonomy: every failure aborts the enclosing operation."""
from __future__ import annotations


class EngineError(Exception):
    """Base class for all engine failures."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationError(EngineError):
    """Bad input: zero amounts, unknown assets, malformed construction."""


class MustBeMoreThanZero(ValidationError):
    def __init__(self, name: str = "amount") -> None:
        super().__init__(f"{name} must be more than zero")
        self.name = name


class NotAllowedAsset(ValidationError):
    def __init__(self, asset: str, reason: str = "not a registered collateral asset") -> None:
        super().__init__(f"{asset}: {reason}")
        self.asset = asset


class InvalidPrice(NotAllowedAsset):
    """Feed reported a zero or negative price."""

    def __init__(self, asset: str, price: int) -> None:
        super().__init__(asset, f"feed price {price} is not positive")
        self.price = price


class LengthMismatch(ValidationError):
    def __init__(self, tokens: int, feeds: int) -> None:
        super().__init__(
            f"{tokens} collateral tokens but {feeds} price feeds"
        )
        self.tokens = tokens
        self.feeds = feeds


class DuplicateAsset(ValidationError):
    def __init__(self, asset: str) -> None:
        super().__init__(f"collateral asset {asset} registered twice")
        self.asset = asset


class ReentrantCall(ValidationError):
    def __init__(self, entry_point: str) -> None:
        super().__init__(f"re-entered {entry_point} while another operation is running")
        self.entry_point = entry_point


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


class StateError(EngineError):
    """The ledger cannot satisfy the request."""


class InsufficientBalance(StateError):
    def __init__(self, user: str, asset: str, balance: int, requested: int) -> None:
        super().__init__(
            f"{user} holds {balance} of {asset}, {requested} requested"
        )
        self.user = user
        self.asset = asset
        self.balance = balance
        self.requested = requested


class InsufficientDebt(StateError):
    def __init__(self, user: str, debt: int, requested: int) -> None:
        super().__init__(f"{user} owes {debt}, cannot burn {requested}")
        self.user = user
        self.debt = debt
        self.requested = requested


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------


class InvariantError(EngineError):
    """The operation would leave a position in a forbidden risk state."""


class TransactionBreaksHealthFactor(InvariantError):
    def __init__(self, user: str, health_factor: int) -> None:
        super().__init__(f"health factor of {user} would be {health_factor}")
        self.user = user
        self.health_factor = health_factor


class HealthFactorIsNotBroken(InvariantError):
    def __init__(self, user: str, health_factor: int) -> None:
        super().__init__(
            f"{user} is not liquidatable, health factor {health_factor}"
        )
        self.user = user
        self.health_factor = health_factor


class HealthFactorNotImproved(InvariantError):
    def __init__(self, user: str, start: int, end: int) -> None:
        super().__init__(
            f"liquidation left {user} at health factor {end} (was {start})"
        )
        self.user = user
        self.start = start
        self.end = end


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


class CollaboratorFailure(EngineError):
    """An external token reported failure."""

    def __init__(self, collaborator: str, amount: int) -> None:
        super().__init__(f"{collaborator} reported failure for amount {amount}")
        self.collaborator = collaborator
        self.amount = amount


class DepositFailed(CollaboratorFailure):
    pass


class MintFailed(CollaboratorFailure):
    pass


class RedeemFailed(CollaboratorFailure):
    pass


class BurnFailed(CollaboratorFailure):
    pass
