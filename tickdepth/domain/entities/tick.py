from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class InitializedTick:
    tick_idx: int
    liquidity_gross: int
    liquidity_net: int
    price0: str | None = None
    price1: str | None = None


@dataclass(frozen=True)
class ProcessedTick:
    tick_idx: int
    liquidity_active: int
    liquidity_net: int
    liquidity_gross: int
    price0: str
    price1: str


@dataclass(frozen=True)
class TickBucket:
    index: int
    current_liquidity: int
    active_liquidity: int
    price0: Decimal
    price1: Decimal
