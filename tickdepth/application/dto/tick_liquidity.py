from __future__ import annotations

from dataclasses import dataclass

from tickdepth.domain.entities.pool import Token
from tickdepth.domain.entities.tick import ProcessedTick


@dataclass(frozen=True)
class GetSurroundingTicksInput:
    pool_address: str
    surrounding_ticks: int


@dataclass(frozen=True)
class SurroundingTicksData:
    ticks_processed: list[ProcessedTick]
    fee_tier: int
    tick_spacing: int
    active_tick_idx: int
    token0: Token
    token1: Token


@dataclass(frozen=True)
class GetSurroundingTicksOutput:
    data: SurroundingTicksData | None
    error: bool = False
    loading: bool = False


@dataclass(frozen=True)
class GetFormattedLiquidityInput:
    pool_address: str
    surrounding_ticks: int
    ticks_per_group: int
