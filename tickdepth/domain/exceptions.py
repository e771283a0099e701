from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class UnknownFeeTierError(DomainError):
    """Fee tier has no known tick spacing."""


class PoolNotFoundError(DomainError):
    """Requested pool does not exist in the subgraph."""


class PoolStateUnavailableError(DomainError):
    """Pool exists but its state cannot be used for the computation."""


class LiquidityInputError(DomainError):
    """Invalid parameters for a liquidity computation."""
