from __future__ import annotations

import json
from collections.abc import Callable

from position_descriptor.domain.entities.token_uri import TokenURIParams
from position_descriptor.domain.services.decimal_string import DecimalStringFormatter
from position_descriptor.domain.services.position_strings import (
    address_to_string,
    fee_to_percent_string,
    tick_to_decimal_string,
)
from position_descriptor.domain.services.tick_math import get_sqrt_ratio_at_tick


DEFAULT_PROTOCOL_NAME = "Uniswap V3"
TOKEN_URI_PREFIX = "data:application/json,"
UINT128_MAX = 2**128 - 1


def construct_token_uri(
    params: TokenURIParams,
    *,
    formatter: DecimalStringFormatter,
    sqrt_ratio_at_tick: Callable[[int], int] = get_sqrt_ratio_at_tick,
    protocol_name: str = DEFAULT_PROTOCOL_NAME,
) -> str:
    if params.liquidity < 0 or params.liquidity > UINT128_MAX:
        raise ValueError("liquidity must be within the uint128 range.")

    tick_lower = tick_to_decimal_string(
        params.tick_lower,
        params.tick_spacing,
        formatter=formatter,
        sqrt_ratio_at_tick=sqrt_ratio_at_tick,
    )
    tick_upper = tick_to_decimal_string(
        params.tick_upper,
        params.tick_spacing,
        formatter=formatter,
        sqrt_ratio_at_tick=sqrt_ratio_at_tick,
    )
    name = (
        f"{protocol_name} - {fee_to_percent_string(params.fee)} - "
        f"{params.token0_symbol}/{params.token1_symbol} - {tick_lower}<>{tick_upper}"
    )
    description = "\n".join(
        [
            f"Represents a liquidity position in a {protocol_name} pool. Redeemable for owed reserve tokens.",
            f"liquidity: {params.liquidity}",
            f"poolAddress: {address_to_string(params.pool_address)}",
            f"token0Address: {address_to_string(params.token0)}",
            f"token1Address: {address_to_string(params.token1)}",
        ]
    )
    document = json.dumps(
        {"name": name, "description": description},
        separators=(", ", ":"),
        ensure_ascii=False,
    )
    return TOKEN_URI_PREFIX + document
