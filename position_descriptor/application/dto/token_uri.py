from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConstructTokenURIInput:
    token0: str
    token1: str
    tick_lower: int
    tick_upper: int
    token0_symbol: str
    token1_symbol: str
    fee: int
    liquidity: int
    pool_address: str
    tick_spacing: int | None = None


@dataclass(frozen=True)
class ConstructTokenURIOutput:
    token_uri: str
