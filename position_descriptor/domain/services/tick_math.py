from __future__ import annotations

from math import isqrt


MIN_TICK = -887272
MAX_TICK = -MIN_TICK

MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342

Q96 = 2**96
Q128 = 2**128
UINT160_MAX = 2**160 - 1
UINT256_MAX = 2**256 - 1

TICK_SPACINGS = {
    500: 10,
    3000: 60,
    10000: 200,
}

# 1 / sqrt(1.0001)^(2^i) as Q128.128, i = 0..19
_SQRT_RATIO_FACTORS = (
    0xFFFCB933BD6FAD37AA2D162D1A594001,
    0xFFF97272373D413259A46990580E213A,
    0xFFF2E50F5F656932EF12357CF3C7FDCC,
    0xFFE5CACA7E10E4E61C3624EAA0941CD0,
    0xFFCB9843D60F6159C9DB58835C926644,
    0xFF973B41FA98C081472E6896DFB254C0,
    0xFF2EA16466C96A3843EC78B326B52861,
    0xFE5DEE046A99A2A811C461F1969C3053,
    0xFCBE86C7900A88AEDCFFC83B479AA3A4,
    0xF987A7253AC413176F2B074CF7815E54,
    0xF3392B0822B70005940C7A398E4B70F3,
    0xE7159475A2C29B7443B29C7FA6E889D9,
    0xD097F3BDFD2022B8845AD8F792AA5825,
    0xA9F746462D870FDF8A65DC1F90E061E5,
    0x70D869A156D2A1B890BB3DF62BAF32F7,
    0x31BE135F97D08FD981231505542FCFA6,
    0x9AA508B5B7A84E1C677DE54F3E99BC9,
    0x5D6AF8DEDB81196699C329225EE604,
    0x2216E584F5FA1EA926041BEDFE98,
    0x48A170391F7DC42444E8FA2,
)


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator) over the uint256 domain."""
    if denominator == 0:
        raise ZeroDivisionError("mul_div denominator is zero.")
    result = (a * b) // denominator
    if result > UINT256_MAX:
        raise OverflowError("mul_div result exceeds uint256.")
    return result


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """sqrt(1.0001^tick) * 2^96, rounded up, bit-exact with the pool TickMath library."""
    if tick < MIN_TICK or tick > MAX_TICK:
        raise ValueError(f"tick {tick} outside [{MIN_TICK}, {MAX_TICK}].")

    abs_tick = abs(tick)
    ratio = _SQRT_RATIO_FACTORS[0] if abs_tick & 0x1 else Q128
    for bit, factor in enumerate(_SQRT_RATIO_FACTORS[1:], start=1):
        if abs_tick & (1 << bit):
            ratio = (ratio * factor) >> 128

    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96, rounding up so the result never undershoots the tick.
    return (ratio >> 32) + (0 if ratio % (1 << 32) == 0 else 1)


def min_tick_for_spacing(tick_spacing: int) -> int:
    _require_spacing(tick_spacing)
    return -(-MIN_TICK // tick_spacing) * tick_spacing


def max_tick_for_spacing(tick_spacing: int) -> int:
    _require_spacing(tick_spacing)
    return (MAX_TICK // tick_spacing) * tick_spacing


def tick_spacing_for_fee(fee: int) -> int:
    spacing = TICK_SPACINGS.get(fee)
    if spacing is None:
        raise ValueError(f"fee {fee} has no standard tick spacing.")
    return spacing


def encode_price_sqrt(reserve1: int, reserve0: int) -> int:
    """Floored sqrt(reserve1 / reserve0) as a Q64.96 value."""
    if reserve0 <= 0 or reserve1 < 0:
        raise ValueError("reserves must be positive.")
    return isqrt((reserve1 << 192) // reserve0)


def _require_spacing(tick_spacing: int) -> None:
    if tick_spacing <= 0:
        raise ValueError("tick_spacing must be positive.")
    if tick_spacing > MAX_TICK:
        raise ValueError(f"tick_spacing must not exceed {MAX_TICK}.")
