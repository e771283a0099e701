from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GetPositionAmountsInput:
    pool_address: str
    tick_lower: int
    tick_upper: int
    liquidity: int


@dataclass(frozen=True)
class TokenAmountOutput:
    address: str
    symbol: str | None
    raw: int
    amount: Decimal


@dataclass(frozen=True)
class GetPositionAmountsOutput:
    current_tick: int
    token0: TokenAmountOutput
    token1: TokenAmountOutput
