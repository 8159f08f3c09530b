from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from position_descriptor.api.deps import (
    get_format_address_use_case,
    get_format_fee_use_case,
    get_format_fixed_point_use_case,
    get_format_tick_use_case,
    get_tick_bounds_use_case,
)
from position_descriptor.api.schemas.formatting import (
    AddressStringResponse,
    FeePercentStringResponse,
    FixedPointDecimalStringResponse,
    TickBoundsResponse,
    TickDecimalStringResponse,
)
from position_descriptor.application.dto.formatting import (
    FormatAddressInput,
    FormatFixedPointInput,
    FormatTickInput,
    GetTickBoundsInput,
)
from position_descriptor.application.use_cases.format_address import FormatAddressUseCase
from position_descriptor.application.use_cases.format_fee import FormatFeeUseCase
from position_descriptor.application.use_cases.format_fixed_point import FormatFixedPointUseCase
from position_descriptor.application.use_cases.format_tick import FormatTickUseCase
from position_descriptor.application.use_cases.get_tick_bounds import GetTickBoundsUseCase
from position_descriptor.domain.exceptions import (
    AddressInputError,
    FeeInputError,
    FixedPointInputError,
    TickInputError,
)

router = APIRouter()

# 2**256 - 1 has 78 decimal digits
_UINT256_MAX_DIGITS = 78


def _parse_uint(value: str, *, field_name: str) -> int:
    raw = value.strip()
    if not (raw.isascii() and raw.isdigit()):
        raise HTTPException(status_code=400, detail=f"{field_name} must be a non-negative integer.")
    if len(raw.lstrip("0")) > _UINT256_MAX_DIGITS:
        raise HTTPException(status_code=400, detail=f"{field_name} must be within the uint256 range.")
    return int(raw)


@router.get("/v1/fixed-point/decimal-string", response_model=FixedPointDecimalStringResponse)
def fixed_point_decimal_string(
    value: str = Query(..., description="Unsigned integer, decimal digits."),
    kind: Literal["sqrt_ratio_x96", "ratio_x96"] = "sqrt_ratio_x96",
    use_case: FormatFixedPointUseCase = Depends(get_format_fixed_point_use_case),
):
    try:
        result = use_case.execute(
            FormatFixedPointInput(value=_parse_uint(value, field_name="value"), kind=kind)
        )
    except FixedPointInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return FixedPointDecimalStringResponse(
        value=str(result.value),
        kind=result.kind,
        decimal_string=result.decimal_string,
    )


@router.get("/v1/ticks/bounds", response_model=TickBoundsResponse)
def tick_bounds(
    tick_spacing: int | None = None,
    fee: int | None = None,
    use_case: GetTickBoundsUseCase = Depends(get_tick_bounds_use_case),
):
    try:
        result = use_case.execute(GetTickBoundsInput(tick_spacing=tick_spacing, fee=fee))
    except TickInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return TickBoundsResponse(
        tick_spacing=result.tick_spacing,
        min_tick=result.min_tick,
        max_tick=result.max_tick,
    )


@router.get("/v1/ticks/{tick}/decimal-string", response_model=TickDecimalStringResponse)
def tick_decimal_string(
    tick: int,
    tick_spacing: int,
    use_case: FormatTickUseCase = Depends(get_format_tick_use_case),
):
    try:
        result = use_case.execute(FormatTickInput(tick=tick, tick_spacing=tick_spacing))
    except TickInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return TickDecimalStringResponse(
        tick=result.tick,
        tick_spacing=result.tick_spacing,
        decimal_string=result.decimal_string,
    )


@router.get("/v1/fees/{fee}/percent-string", response_model=FeePercentStringResponse)
def fee_percent_string(
    fee: int,
    use_case: FormatFeeUseCase = Depends(get_format_fee_use_case),
):
    try:
        result = use_case.execute(fee=fee)
    except FeeInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return FeePercentStringResponse(fee=result.fee, percent_string=result.percent_string)


@router.get("/v1/addresses/{address}", response_model=AddressStringResponse)
def address_string(
    address: str,
    use_case: FormatAddressUseCase = Depends(get_format_address_use_case),
):
    try:
        result = use_case.execute(FormatAddressInput(address=address))
    except AddressInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return AddressStringResponse(address=result.address)
