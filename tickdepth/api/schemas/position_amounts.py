from __future__ import annotations

from pydantic import BaseModel, Field


class PositionAmountsRequest(BaseModel):
    pool_address: str = Field(..., description="Pool address (0x...).")
    tick_lower: int = Field(..., description="Lower tick of the position.")
    tick_upper: int = Field(..., description="Upper tick of the position.")
    liquidity: int = Field(..., ge=0, description="Position liquidity (unbounded integer).")


class TokenAmountResponse(BaseModel):
    address: str
    symbol: str | None
    raw: str
    amount: str


class PositionAmountsResponse(BaseModel):
    current_tick: int
    token0: TokenAmountResponse
    token1: TokenAmountResponse
