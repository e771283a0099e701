from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Literal

from tickdepth.domain.entities.pool import Token
from tickdepth.domain.entities.tick import InitializedTick, ProcessedTick
from tickdepth.domain.services.univ3_math import (
    MAX_TICK,
    MIN_TICK,
    align_tick_floor,
    clamp_tick,
    price_to_fixed,
    tick_to_price,
)


Direction = Literal["asc", "desc"]

DEFAULT_PRICE_FIXED_DIGITS = 4


def index_initialized_ticks(ticks: Iterable[InitializedTick]) -> dict[int, InitializedTick]:
    # Later rows win on duplicated indexes.
    return {tick.tick_idx: tick for tick in ticks}


def build_active_tick(
    *,
    active_tick_idx: int,
    total_liquidity: int,
    ticks_by_idx: Mapping[int, InitializedTick],
    token0: Token,
    token1: Token,
    price_digits: int = DEFAULT_PRICE_FIXED_DIGITS,
) -> ProcessedTick:
    # A snapped tick may sit below MIN_TICK; only the price lookup is clamped.
    price0, price1 = _tick_prices(clamp_tick(active_tick_idx), token0, token1, price_digits)
    initialized = ticks_by_idx.get(active_tick_idx)
    return ProcessedTick(
        tick_idx=active_tick_idx,
        liquidity_active=total_liquidity,
        liquidity_net=initialized.liquidity_net if initialized else 0,
        liquidity_gross=initialized.liquidity_gross if initialized else 0,
        price0=price0,
        price1=price1,
    )


def compute_surrounding_ticks(
    *,
    active_tick: ProcessedTick,
    tick_spacing: int,
    window_size: int,
    direction: Direction,
    ticks_by_idx: Mapping[int, InitializedTick],
    token0: Token,
    token1: Token,
    price_digits: int = DEFAULT_PRICE_FIXED_DIGITS,
) -> list[ProcessedTick]:
    """Walk `window_size` spacing steps away from the active tick.

    Ascending, an initialized tick's net applies at that tick. Descending, the
    net of the tick just left is subtracted at the next lower tick, so the
    change shows up one step later. Descending output is returned reversed so
    it is always in ascending tick order.
    """
    step = tick_spacing if direction == "asc" else -tick_spacing
    previous = active_tick
    processed: list[ProcessedTick] = []

    for _ in range(window_size):
        tick_idx = previous.tick_idx + step
        if tick_idx < MIN_TICK or tick_idx > MAX_TICK:
            break

        initialized = ticks_by_idx.get(tick_idx)
        liquidity_active = previous.liquidity_active
        if direction == "asc" and initialized is not None:
            liquidity_active = previous.liquidity_active + initialized.liquidity_net
        elif direction == "desc" and previous.liquidity_net != 0:
            liquidity_active = previous.liquidity_active - previous.liquidity_net

        price0, price1 = _tick_prices(tick_idx, token0, token1, price_digits)
        current = ProcessedTick(
            tick_idx=tick_idx,
            liquidity_active=liquidity_active,
            liquidity_net=initialized.liquidity_net if initialized else 0,
            liquidity_gross=initialized.liquidity_gross if initialized else 0,
            price0=price0,
            price1=price1,
        )
        processed.append(current)
        previous = current

    if direction == "desc":
        processed.reverse()
    return processed


def reconstruct_surrounding_ticks(
    *,
    pool_active_tick: int,
    tick_spacing: int,
    total_liquidity: int,
    initialized_ticks: Iterable[InitializedTick],
    window_size: int,
    token0: Token,
    token1: Token,
    price_digits: int = DEFAULT_PRICE_FIXED_DIGITS,
) -> list[ProcessedTick]:
    """Active liquidity at every spacing-aligned tick within `window_size` steps of the pool tick.

    The pool tick is snapped down to the spacing and seeded with the pool's
    reported liquidity. Output is strictly ascending and at most
    `2 * window_size + 1` long; it is shorter only when a global tick bound
    truncates one side.
    """
    ticks_by_idx = index_initialized_ticks(initialized_ticks)
    active_tick = build_active_tick(
        active_tick_idx=align_tick_floor(pool_active_tick, tick_spacing),
        total_liquidity=total_liquidity,
        ticks_by_idx=ticks_by_idx,
        token0=token0,
        token1=token1,
        price_digits=price_digits,
    )

    walk = {
        "active_tick": active_tick,
        "tick_spacing": tick_spacing,
        "window_size": window_size,
        "ticks_by_idx": ticks_by_idx,
        "token0": token0,
        "token1": token1,
        "price_digits": price_digits,
    }
    previous_ticks = compute_surrounding_ticks(direction="desc", **walk)
    subsequent_ticks = compute_surrounding_ticks(direction="asc", **walk)
    return [*previous_ticks, active_tick, *subsequent_ticks]


def _tick_prices(tick_idx: int, token0: Token, token1: Token, digits: int) -> tuple[str, str]:
    return (
        price_to_fixed(tick_to_price(token0, token1, tick_idx), digits),
        price_to_fixed(tick_to_price(token1, token0, tick_idx), digits),
    )
