from __future__ import annotations

from decimal import Decimal

import pytest

from tickdepth.domain.entities.tick import ProcessedTick
from tickdepth.domain.services.tick_window import format_tick_window


def _tick(tick_idx: int, liquidity: int, price0: str = "1.0000", price1: str = "1.0000") -> ProcessedTick:
    return ProcessedTick(
        tick_idx=tick_idx,
        liquidity_active=liquidity,
        liquidity_net=0,
        liquidity_gross=0,
        price0=price0,
        price1=price1,
    )


TICKS = [
    _tick(-120, 10, "0.9880", "1.0121"),
    _tick(-60, 20, "0.9940", "1.0060"),
    _tick(0, 30, "1.0000", "1.0000"),
    _tick(60, 40, "1.0060", "0.9940"),
    _tick(120, 50, "1.0121", "0.9880"),
]


def test_group_size_one_yields_one_bucket_per_tick():
    buckets = format_tick_window(ticks=TICKS, active_tick_idx=0, group_size=1)

    assert [bucket.index for bucket in buckets] == [0, 1, 2, 3, 4]
    assert [bucket.current_liquidity for bucket in buckets] == [0, 0, 30, 0, 0]
    assert [bucket.active_liquidity for bucket in buckets] == [10, 20, 0, 40, 50]
    assert buckets[0].price0 == Decimal("0.9880")
    assert buckets[4].price1 == Decimal("0.9880")


def test_groups_sum_prices_and_split_active_tick_liquidity():
    buckets = format_tick_window(ticks=TICKS, active_tick_idx=0, group_size=2)

    assert len(buckets) == 3
    first, second, last = buckets
    assert first.current_liquidity == 0
    assert first.active_liquidity == 30
    assert first.price0 == Decimal("1.9820")
    assert second.current_liquidity == 30
    assert second.active_liquidity == 40
    assert second.price0 == Decimal("2.0060")
    assert second.price1 == Decimal("1.9940")
    assert last.active_liquidity == 50
    assert last.index == 2


def test_bucket_without_active_tick_reports_zero_current_liquidity():
    buckets = format_tick_window(ticks=TICKS, active_tick_idx=999, group_size=5)
    assert len(buckets) == 1
    assert buckets[0].current_liquidity == 0
    assert buckets[0].active_liquidity == 150


def test_empty_sequence_yields_no_buckets():
    assert format_tick_window(ticks=[], active_tick_idx=0, group_size=3) == []


def test_rejects_non_positive_group_size():
    with pytest.raises(ValueError):
        format_tick_window(ticks=TICKS, active_tick_idx=0, group_size=0)
