from __future__ import annotations

from tickdepth.domain.entities.pool import Token
from tickdepth.domain.entities.tick import InitializedTick
from tickdepth.domain.services.tick_liquidity import (
    compute_surrounding_ticks,
    reconstruct_surrounding_ticks,
)
from tickdepth.domain.services.univ3_math import (
    MAX_TICK,
    MIN_TICK,
    price_to_fixed,
    tick_to_price,
)


TOKEN0 = Token(address="0x" + "a" * 40, decimals=18, symbol="AAA")
TOKEN1 = Token(address="0x" + "b" * 40, decimals=18, symbol="BBB")
TOTAL_LIQUIDITY = 4280791798686518438655


def _reconstruct(
    *,
    pool_tick: int,
    initialized: list[InitializedTick] | None = None,
    window_size: int = 2,
    tick_spacing: int = 60,
    total_liquidity: int = TOTAL_LIQUIDITY,
):
    return reconstruct_surrounding_ticks(
        pool_active_tick=pool_tick,
        tick_spacing=tick_spacing,
        total_liquidity=total_liquidity,
        initialized_ticks=initialized or [],
        window_size=window_size,
        token0=TOKEN0,
        token1=TOKEN1,
    )


def test_snaps_pool_tick_down_and_keeps_liquidity_flat_without_initialized_ticks():
    ticks = _reconstruct(pool_tick=78533)

    assert [tick.tick_idx for tick in ticks] == [78360, 78420, 78480, 78540, 78600]
    assert all(tick.liquidity_active == TOTAL_LIQUIDITY for tick in ticks)
    assert all(tick.liquidity_net == 0 and tick.liquidity_gross == 0 for tick in ticks)


def test_aligned_pool_tick_is_used_as_is():
    ticks = _reconstruct(pool_tick=78540)
    assert ticks[2].tick_idx == 78540
    assert ticks[2].liquidity_active == TOTAL_LIQUIDITY


def test_ascending_crossing_applies_net_at_the_crossed_tick():
    ticks = _reconstruct(
        pool_tick=78540,
        initialized=[InitializedTick(tick_idx=78600, liquidity_gross=500, liquidity_net=500)],
    )
    by_idx = {tick.tick_idx: tick for tick in ticks}

    assert by_idx[78540].liquidity_active == TOTAL_LIQUIDITY
    assert by_idx[78600].liquidity_active == TOTAL_LIQUIDITY + 500
    assert by_idx[78600].liquidity_net == 500
    assert by_idx[78600].liquidity_gross == 500
    assert by_idx[78660].liquidity_active == TOTAL_LIQUIDITY + 500


def test_descending_crossing_applies_net_one_tick_later():
    ticks = _reconstruct(
        pool_tick=78660,
        initialized=[InitializedTick(tick_idx=78600, liquidity_gross=500, liquidity_net=500)],
    )
    by_idx = {tick.tick_idx: tick for tick in ticks}

    assert by_idx[78660].liquidity_active == TOTAL_LIQUIDITY
    assert by_idx[78600].liquidity_active == TOTAL_LIQUIDITY
    assert by_idx[78540].liquidity_active == TOTAL_LIQUIDITY - 500


def test_initialized_active_tick_copies_fields_and_feeds_descending_walk():
    ticks = _reconstruct(
        pool_tick=5,
        tick_spacing=10,
        total_liquidity=1000,
        initialized=[InitializedTick(tick_idx=0, liquidity_gross=100, liquidity_net=100)],
        window_size=1,
    )

    assert [tick.tick_idx for tick in ticks] == [-10, 0, 10]
    active = ticks[1]
    assert active.liquidity_active == 1000
    assert active.liquidity_net == 100
    assert active.liquidity_gross == 100
    assert ticks[0].liquidity_active == 900
    assert ticks[2].liquidity_active == 1000


def test_neighbouring_ticks_differ_by_net_of_the_higher_tick():
    initialized = [
        InitializedTick(tick_idx=-240, liquidity_gross=2**70, liquidity_net=2**70),
        InitializedTick(tick_idx=-120, liquidity_gross=3 * 10**20, liquidity_net=3 * 10**20),
        InitializedTick(tick_idx=0, liquidity_gross=7, liquidity_net=-7),
        InitializedTick(tick_idx=60, liquidity_gross=10**20, liquidity_net=-(10**20)),
        InitializedTick(tick_idx=300, liquidity_gross=2**70, liquidity_net=-(2**70)),
    ]
    ticks = _reconstruct(
        pool_tick=17,
        initialized=initialized,
        window_size=8,
        total_liquidity=2**100,
    )

    assert len(ticks) == 17
    for lower, higher in zip(ticks, ticks[1:]):
        assert higher.tick_idx - lower.tick_idx == 60
        assert higher.liquidity_active == lower.liquidity_active + higher.liquidity_net


def test_liquidity_values_beyond_64_bits_stay_exact():
    big = 2**130 + 1
    ticks = _reconstruct(
        pool_tick=0,
        total_liquidity=big,
        initialized=[InitializedTick(tick_idx=60, liquidity_gross=2**90, liquidity_net=-(2**90))],
    )
    assert ticks[3].liquidity_active == big - 2**90
    assert isinstance(ticks[3].liquidity_active, int)


def test_duplicated_initialized_ticks_keep_the_last_row():
    ticks = _reconstruct(
        pool_tick=0,
        initialized=[
            InitializedTick(tick_idx=60, liquidity_gross=1, liquidity_net=1),
            InitializedTick(tick_idx=60, liquidity_gross=9, liquidity_net=9),
        ],
    )
    assert ticks[3].liquidity_net == 9
    assert ticks[3].liquidity_active == TOTAL_LIQUIDITY + 9


def test_window_is_truncated_at_max_tick():
    ticks = _reconstruct(pool_tick=MAX_TICK - 5, window_size=3)

    assert [tick.tick_idx for tick in ticks] == [887040, 887100, 887160, 887220]
    assert ticks[-1].tick_idx <= MAX_TICK


def test_window_is_truncated_at_min_tick_and_active_price_is_clamped():
    ticks = _reconstruct(pool_tick=MIN_TICK, window_size=2)

    assert [tick.tick_idx for tick in ticks] == [-887280, -887220, -887160]
    active = ticks[0]
    assert active.tick_idx < MIN_TICK
    assert active.price0 == price_to_fixed(tick_to_price(TOKEN0, TOKEN1, MIN_TICK), 4)
    assert active.price1 == price_to_fixed(tick_to_price(TOKEN1, TOKEN0, MIN_TICK), 4)


def test_prices_are_fixed_point_strings_per_tick():
    ticks = _reconstruct(pool_tick=0, tick_spacing=10, window_size=1)
    assert [tick.price0 for tick in ticks] == ["0.9990", "1.0000", "1.0010"]
    assert [tick.price1 for tick in ticks] == ["1.0010", "1.0000", "0.9990"]


def test_reconstruction_is_deterministic():
    initialized = [
        InitializedTick(tick_idx=78600, liquidity_gross=500, liquidity_net=500),
        InitializedTick(tick_idx=78420, liquidity_gross=200, liquidity_net=-200),
    ]
    first = _reconstruct(pool_tick=78533, initialized=initialized, window_size=5)
    second = _reconstruct(pool_tick=78533, initialized=initialized, window_size=5)
    assert first == second


def test_compute_surrounding_ticks_returns_descending_walk_in_ascending_order():
    active = _reconstruct(pool_tick=0, window_size=1)[1]
    ticks = compute_surrounding_ticks(
        active_tick=active,
        tick_spacing=60,
        window_size=3,
        direction="desc",
        ticks_by_idx={},
        token0=TOKEN0,
        token1=TOKEN1,
    )
    assert [tick.tick_idx for tick in ticks] == [-180, -120, -60]
