from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FixedPointDecimalStringResponse(BaseModel):
    value: str = Field(..., description="Fixed-point input as a decimal integer string.")
    kind: Literal["sqrt_ratio_x96", "ratio_x96"]
    decimal_string: str


class TickDecimalStringResponse(BaseModel):
    tick: int
    tick_spacing: int
    decimal_string: str = Field(..., description="Price at the tick, or MIN/MAX at the spacing bounds.")


class TickBoundsResponse(BaseModel):
    tick_spacing: int
    min_tick: int
    max_tick: int


class FeePercentStringResponse(BaseModel):
    fee: int
    percent_string: str


class AddressStringResponse(BaseModel):
    address: str
