from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


FixedPointKind = Literal["sqrt_ratio_x96", "ratio_x96"]


@dataclass(frozen=True)
class FormatFixedPointInput:
    value: int
    kind: FixedPointKind = "sqrt_ratio_x96"


@dataclass(frozen=True)
class FormatFixedPointOutput:
    value: int
    kind: FixedPointKind
    decimal_string: str


@dataclass(frozen=True)
class FormatTickInput:
    tick: int
    tick_spacing: int


@dataclass(frozen=True)
class FormatTickOutput:
    tick: int
    tick_spacing: int
    decimal_string: str


@dataclass(frozen=True)
class GetTickBoundsInput:
    tick_spacing: int | None = None
    fee: int | None = None


@dataclass(frozen=True)
class GetTickBoundsOutput:
    tick_spacing: int
    min_tick: int
    max_tick: int


@dataclass(frozen=True)
class FormatFeeOutput:
    fee: int
    percent_string: str


@dataclass(frozen=True)
class FormatAddressInput:
    address: str


@dataclass(frozen=True)
class FormatAddressOutput:
    address: str
