from __future__ import annotations

import re
from collections.abc import Callable

from position_descriptor.domain.services.decimal_string import DecimalStringFormatter
from position_descriptor.domain.services.tick_math import (
    UINT160_MAX,
    get_sqrt_ratio_at_tick,
    max_tick_for_spacing,
    min_tick_for_spacing,
)


MIN_SENTINEL = "MIN"
MAX_SENTINEL = "MAX"

FEE_MAX = 2**24 - 1
FEE_PERCENT_DECIMALS = 4

ADDRESS_HEX_DIGITS = 40
_ADDRESS_PATTERN = re.compile(r"0[xX][0-9a-fA-F]{40}")


def tick_to_decimal_string(
    tick: int,
    tick_spacing: int,
    *,
    formatter: DecimalStringFormatter,
    sqrt_ratio_at_tick: Callable[[int], int] = get_sqrt_ratio_at_tick,
) -> str:
    min_tick = min_tick_for_spacing(tick_spacing)
    max_tick = max_tick_for_spacing(tick_spacing)
    if tick < min_tick or tick > max_tick:
        raise ValueError(f"tick {tick} outside [{min_tick}, {max_tick}] for tick_spacing {tick_spacing}.")
    if tick == min_tick:
        return MIN_SENTINEL
    if tick == max_tick:
        return MAX_SENTINEL
    return formatter.format_sqrt_ratio_x96(sqrt_ratio_at_tick(tick))


def fee_to_percent_string(fee: int) -> str:
    """Fee in hundredths of a bip (millionths) to a percent string, e.g. 3000 -> "0.3%"."""
    if fee < 0 or fee > FEE_MAX:
        raise ValueError(f"fee must be within [0, {FEE_MAX}].")
    scale = 10**FEE_PERCENT_DECIMALS
    whole, fraction = divmod(fee, scale)
    fraction_digits = f"{fraction:0{FEE_PERCENT_DECIMALS}d}".rstrip("0")
    if not fraction_digits:
        return f"{whole}%"
    return f"{whole}.{fraction_digits}%"


def address_to_string(address: int) -> str:
    if address < 0 or address > UINT160_MAX:
        raise ValueError("address must be within the uint160 range.")
    return f"0x{address:0{ADDRESS_HEX_DIGITS}x}"


def parse_address(value: str) -> int:
    raw = value.strip()
    if not _ADDRESS_PATTERN.fullmatch(raw):
        raise ValueError(f"address must be 0x followed by {ADDRESS_HEX_DIGITS} hex digits.")
    return int(raw[2:], 16)
