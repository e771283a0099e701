from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tickdepth.domain.entities.pool import PoolState, Token
from tickdepth.domain.entities.tick import InitializedTick


def map_row_to_token(row: Mapping[str, Any]) -> Token:
    return Token(
        address=str(row["id"]).lower(),
        decimals=int(row["decimals"]),
        symbol=row.get("symbol"),
    )


def map_row_to_pool_state(pool_address: str, row: Mapping[str, Any]) -> PoolState:
    return PoolState(
        pool_address=pool_address,
        tick=int(row["tick"]) if row.get("tick") is not None else None,
        token0=map_row_to_token(row["token0"]),
        token1=map_row_to_token(row["token1"]),
        fee_tier=int(row["feeTier"]),
        sqrt_price_x96=int(row.get("sqrtPrice") or 0),
        liquidity=int(row.get("liquidity") or 0),
    )


def map_row_to_initialized_tick(row: Mapping[str, Any]) -> InitializedTick:
    return InitializedTick(
        tick_idx=int(row["tickIdx"]),
        liquidity_gross=int(row.get("liquidityGross") or 0),
        liquidity_net=int(row.get("liquidityNet") or 0),
        price0=row.get("price0"),
        price1=row.get("price1"),
    )
