from __future__ import annotations

from dataclasses import dataclass

from tickdepth.domain.entities.pool import Token


@dataclass(frozen=True)
class Position:
    token0: Token
    token1: Token
    tick_lower: int
    tick_upper: int
    liquidity: int


@dataclass(frozen=True)
class PositionAmounts:
    amount0: int
    amount1: int
