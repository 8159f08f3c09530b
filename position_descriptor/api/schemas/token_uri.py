from __future__ import annotations

from pydantic import BaseModel, Field


class TokenURIRequest(BaseModel):
    token0: str = Field(..., description="token0 address (0x + 40 hex digits).")
    token1: str = Field(..., description="token1 address (0x + 40 hex digits).")
    tick_lower: int
    tick_upper: int
    tick_spacing: int | None = Field(None, description="Omit to derive from a standard fee tier.")
    token0_symbol: str
    token1_symbol: str
    fee: int = Field(..., description="Fee in hundredths of a bip, e.g. 3000 = 0.3%.")
    liquidity: int = Field(..., ge=0)
    pool_address: str


class TokenURIResponse(BaseModel):
    token_uri: str
