from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from tickdepth.domain.entities.tick import ProcessedTick, TickBucket


def format_tick_window(
    *,
    ticks: Sequence[ProcessedTick],
    active_tick_idx: int,
    group_size: int,
) -> list[TickBucket]:
    """Group consecutive ticks into buckets of `group_size`.

    Prices of the members are summed, not averaged. The active tick's liquidity
    goes to `current_liquidity` and is left out of `active_liquidity`.
    """
    if group_size < 1:
        raise ValueError("group_size must be >= 1.")

    buckets: list[TickBucket] = []
    for index, start in enumerate(range(0, len(ticks), group_size)):
        members = ticks[start : start + group_size]
        current_liquidity = 0
        active_liquidity = 0
        price0 = Decimal("0")
        price1 = Decimal("0")
        for tick in members:
            if tick.tick_idx == active_tick_idx:
                current_liquidity = tick.liquidity_active
            else:
                active_liquidity += tick.liquidity_active
            price0 += Decimal(tick.price0)
            price1 += Decimal(tick.price1)

        buckets.append(
            TickBucket(
                index=index,
                current_liquidity=current_liquidity,
                active_liquidity=active_liquidity,
                price0=price0,
                price1=price1,
            )
        )
    return buckets
