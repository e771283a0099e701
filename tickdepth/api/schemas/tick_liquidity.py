from __future__ import annotations

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    address: str
    symbol: str | None
    decimals: int


class ProcessedTickResponse(BaseModel):
    tick_idx: int
    liquidity_active: str = Field(..., description="Active liquidity at this tick (integer as string).")
    liquidity_net: str
    liquidity_gross: str
    price0: str = Field(..., description="Price of token0 in token1.")
    price1: str = Field(..., description="Price of token1 in token0.")


class SurroundingTicksResponse(BaseModel):
    pool_address: str
    fee_tier: int
    tick_spacing: int
    active_tick_idx: int
    token0: TokenResponse
    token1: TokenResponse
    ticks_processed: list[ProcessedTickResponse]


class TickBucketResponse(BaseModel):
    index: int
    is_current: str = Field(..., description="Active tick liquidity when the bucket holds it, else 0.")
    active_liquidity: str = Field(..., description="Summed liquidity of the other ticks in the bucket.")
    price0: str = Field(..., description="Sum of member price0 values.")
    price1: str = Field(..., description="Sum of member price1 values.")


class FormattedLiquidityResponse(BaseModel):
    pool_address: str
    data: list[TickBucketResponse]
