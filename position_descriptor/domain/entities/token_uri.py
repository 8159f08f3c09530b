from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenURIParams:
    token0: int
    token1: int
    tick_lower: int
    tick_upper: int
    tick_spacing: int
    token0_symbol: str
    token1_symbol: str
    fee: int
    liquidity: int
    pool_address: int
