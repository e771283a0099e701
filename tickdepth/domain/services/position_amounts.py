from __future__ import annotations

from decimal import Decimal

from tickdepth.domain.entities.pool import Token
from tickdepth.domain.entities.position import Position, PositionAmounts
from tickdepth.domain.services.univ3_math import (
    get_amount0_delta,
    get_amount1_delta,
    get_sqrt_ratio_at_tick,
)


def amount0_for_position(
    *,
    current_tick: int,
    tick_lower: int,
    tick_upper: int,
    liquidity: int,
    sqrt_ratio_current_x96: int,
) -> int:
    if current_tick < tick_lower:
        return get_amount0_delta(
            get_sqrt_ratio_at_tick(tick_lower),
            get_sqrt_ratio_at_tick(tick_upper),
            liquidity,
            False,
        )
    if current_tick < tick_upper:
        return get_amount0_delta(
            sqrt_ratio_current_x96,
            get_sqrt_ratio_at_tick(tick_upper),
            liquidity,
            False,
        )
    return 0


def amount1_for_position(
    *,
    current_tick: int,
    tick_lower: int,
    tick_upper: int,
    liquidity: int,
    sqrt_ratio_current_x96: int,
) -> int:
    if current_tick < tick_lower:
        return 0
    if current_tick < tick_upper:
        return get_amount1_delta(
            get_sqrt_ratio_at_tick(tick_lower),
            sqrt_ratio_current_x96,
            liquidity,
            False,
        )
    return get_amount1_delta(
        get_sqrt_ratio_at_tick(tick_lower),
        get_sqrt_ratio_at_tick(tick_upper),
        liquidity,
        False,
    )


def amounts_for_position(
    *,
    position: Position,
    current_tick: int,
    sqrt_ratio_current_x96: int,
) -> PositionAmounts:
    """Token amounts withdrawable from `position` at the pool's current price.

    Below the range the position is all token0, above it all token1, and in
    range it holds both. Every delta rounds down. `tick_lower < tick_upper` is
    assumed, not checked.
    """
    kwargs = {
        "current_tick": current_tick,
        "tick_lower": position.tick_lower,
        "tick_upper": position.tick_upper,
        "liquidity": position.liquidity,
        "sqrt_ratio_current_x96": sqrt_ratio_current_x96,
    }
    return PositionAmounts(
        amount0=amount0_for_position(**kwargs),
        amount1=amount1_for_position(**kwargs),
    )


def to_token_units(amount: int, token: Token) -> Decimal:
    return Decimal(amount).scaleb(-token.decimals)
