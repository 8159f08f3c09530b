from __future__ import annotations

from functools import lru_cache

from position_descriptor.application.use_cases.construct_token_uri import ConstructTokenURIUseCase
from position_descriptor.application.use_cases.format_address import FormatAddressUseCase
from position_descriptor.application.use_cases.format_fee import FormatFeeUseCase
from position_descriptor.application.use_cases.format_fixed_point import FormatFixedPointUseCase
from position_descriptor.application.use_cases.format_tick import FormatTickUseCase
from position_descriptor.application.use_cases.get_tick_bounds import GetTickBoundsUseCase
from position_descriptor.domain.services.decimal_string import DecimalStringFormatter
from position_descriptor.infrastructure.math.tick_math_sqrt_ratio_provider import TickMathSqrtRatioProvider
from position_descriptor.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_formatter() -> DecimalStringFormatter:
    settings = get_settings()
    return DecimalStringFormatter(significant_digits=settings.significant_digits)


@lru_cache(maxsize=1)
def _get_sqrt_ratio_provider() -> TickMathSqrtRatioProvider:
    return TickMathSqrtRatioProvider()


def get_format_fixed_point_use_case() -> FormatFixedPointUseCase:
    return FormatFixedPointUseCase(formatter=_get_formatter())


def get_format_tick_use_case() -> FormatTickUseCase:
    return FormatTickUseCase(
        sqrt_ratio_port=_get_sqrt_ratio_provider(),
        formatter=_get_formatter(),
    )


def get_tick_bounds_use_case() -> GetTickBoundsUseCase:
    return GetTickBoundsUseCase()


def get_format_fee_use_case() -> FormatFeeUseCase:
    return FormatFeeUseCase()


def get_format_address_use_case() -> FormatAddressUseCase:
    return FormatAddressUseCase()


def get_construct_token_uri_use_case() -> ConstructTokenURIUseCase:
    settings = get_settings()
    return ConstructTokenURIUseCase(
        sqrt_ratio_port=_get_sqrt_ratio_provider(),
        formatter=_get_formatter(),
        protocol_name=settings.protocol_name,
    )
