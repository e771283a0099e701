from __future__ import annotations

import logging
from fractions import Fraction

from tickdepth.domain.entities.pool import Token
from tickdepth.domain.exceptions import UnknownFeeTierError


logger = logging.getLogger(__name__)


MIN_TICK = -887272
MAX_TICK = 887272
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342
Q32 = 2**32
Q96 = 2**96
Q192 = 2**192
MAX_UINT256 = 2**256 - 1

FEE_TIER_TO_TICK_SPACING = {
    100: 1,
    500: 10,
    3000: 60,
    10000: 200,
}

# Multipliers of sqrt(1.0001) ** -(2 ** i) in Q128.128, one per bit of |tick| above bit 0.
_SQRT_RATIO_MULTIPLIERS = (
    (0x2, 0xFFF97272373D413259A46990580E213A),
    (0x4, 0xFFF2E50F5F656932EF12357CF3C7FDCC),
    (0x8, 0xFFE5CACA7E10E4E61C3624EAA0941CD0),
    (0x10, 0xFFCB9843D60F6159C9DB58835C926644),
    (0x20, 0xFF973B41FA98C081472E6896DFB254C0),
    (0x40, 0xFF2EA16466C96A3843EC78B326B52861),
    (0x80, 0xFE5DEE046A99A2A811C461F1969C3053),
    (0x100, 0xFCBE86C7900A88AEDCFFC83B479AA3A4),
    (0x200, 0xF987A7253AC413176F2B074CF7815E54),
    (0x400, 0xF3392B0822B70005940C7A398E4B70F3),
    (0x800, 0xE7159475A2C29B7443B29C7FA6E889D9),
    (0x1000, 0xD097F3BDFD2022B8845AD8F792AA5825),
    (0x2000, 0xA9F746462D870FDF8A65DC1F90E061E5),
    (0x4000, 0x70D869A156D2A1B890BB3DF62BAF32F7),
    (0x8000, 0x31BE135F97D08FD981231505542FCFA6),
    (0x10000, 0x9AA508B5B7A84E1C677DE54F3E99BC9),
    (0x20000, 0x5D6AF8DEDB81196699C329225EE604),
    (0x40000, 0x2216E584F5FA1EA926041BEDFE98),
    (0x80000, 0x48A170391F7DC42444E8FA2),
)


def fee_tier_to_tick_spacing(fee_tier: int) -> int:
    tick_spacing = FEE_TIER_TO_TICK_SPACING.get(int(fee_tier))
    if tick_spacing is None:
        logger.error("univ3_math: unknown_fee_tier fee_tier=%s", fee_tier)
        raise UnknownFeeTierError(f"Tick spacing for fee tier {fee_tier} undefined.")
    return tick_spacing


def align_tick_floor(tick: int, tick_spacing: int) -> int:
    if tick_spacing <= 0:
        raise ValueError("tick_spacing must be positive.")
    return (tick // tick_spacing) * tick_spacing


def clamp_tick(tick: int) -> int:
    return max(MIN_TICK, min(MAX_TICK, tick))


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """Exact TickMath.getSqrtRatioAtTick: sqrt(1.0001 ** tick) as a Q64.96 integer, rounded up."""
    if tick < MIN_TICK or tick > MAX_TICK:
        raise ValueError(f"tick {tick} outside [{MIN_TICK}, {MAX_TICK}].")

    abs_tick = abs(tick)
    ratio = 0xFFFCB933BD6FAD37AA2D162D1A594001 if abs_tick & 0x1 else 1 << 128
    for bit, multiplier in _SQRT_RATIO_MULTIPLIERS:
        if abs_tick & bit:
            ratio = (ratio * multiplier) >> 128

    if tick > 0:
        ratio = MAX_UINT256 // ratio

    return (ratio >> 32) + (0 if ratio % Q32 == 0 else 1)


def get_amount0_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool = False,
) -> int:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96
    if sqrt_ratio_a_x96 <= 0:
        raise ValueError("sqrt ratio must be positive.")

    numerator1 = liquidity << 96
    numerator2 = sqrt_ratio_b_x96 - sqrt_ratio_a_x96

    if round_up:
        return _div_round_up(_div_round_up(numerator1 * numerator2, sqrt_ratio_b_x96), sqrt_ratio_a_x96)
    return numerator1 * numerator2 // sqrt_ratio_b_x96 // sqrt_ratio_a_x96


def get_amount1_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool = False,
) -> int:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    product = liquidity * (sqrt_ratio_b_x96 - sqrt_ratio_a_x96)
    if round_up:
        return _div_round_up(product, Q96)
    return product // Q96


def tick_to_price(base_token: Token, quote_token: Token, tick: int) -> Fraction:
    """Price of `base_token` in units of `quote_token` at `tick`, adjusted for decimals."""
    sqrt_ratio_x96 = get_sqrt_ratio_at_tick(tick)
    ratio_x192 = sqrt_ratio_x96 * sqrt_ratio_x96

    if base_token.sorts_before(quote_token):
        raw = Fraction(ratio_x192, Q192)
    else:
        raw = Fraction(Q192, ratio_x192)
    return raw * Fraction(10**base_token.decimals, 10**quote_token.decimals)


def price_to_fixed(price: Fraction, digits: int) -> str:
    """Render a non-negative price with `digits` decimals, rounding half up."""
    if digits < 0:
        raise ValueError("digits must be non-negative.")
    quotient, remainder = divmod(price.numerator * 10**digits, price.denominator)
    if 2 * remainder >= price.denominator:
        quotient += 1
    if digits == 0:
        return str(quotient)
    text = str(quotient).rjust(digits + 1, "0")
    return f"{text[:-digits]}.{text[-digits:]}"


def _div_round_up(numerator: int, denominator: int) -> int:
    quotient, remainder = divmod(numerator, denominator)
    return quotient + 1 if remainder else quotient
