from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    address: str
    decimals: int
    symbol: str | None = None

    def sorts_before(self, other: Token) -> bool:
        return self.address.lower() < other.address.lower()


@dataclass(frozen=True)
class PoolState:
    pool_address: str
    tick: int | None
    token0: Token
    token1: Token
    fee_tier: int
    sqrt_price_x96: int
    liquidity: int
