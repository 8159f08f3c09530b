from __future__ import annotations

from position_descriptor.domain.services.tick_math import Q96, Q128, UINT160_MAX, UINT256_MAX, mul_div


DEFAULT_SIGNIFICANT_DIGITS = 5


class DecimalStringFormatter:
    """Renders non-negative fixed-point ratios as plain decimal strings.

    Every non-zero result carries exactly ``significant_digits`` significant
    digits, truncated (never rounded up) at the cutoff. Magnitudes at or above
    ``10 ** (significant_digits - 1)`` are zero-filled integers, magnitudes
    below one keep their leading fractional zeros in front of the digits.
    Only integer arithmetic is used.
    """

    def __init__(self, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS):
        if significant_digits < 1:
            raise ValueError("significant_digits must be at least 1.")
        self._significant_digits = significant_digits

    @property
    def significant_digits(self) -> int:
        return self._significant_digits

    def format_sqrt_ratio_x96(self, sqrt_ratio_x96: int) -> str:
        """Formats the price encoded by a Q64.96 square-root ratio.

        The price is first taken to Q128.128 (``sqrt_ratio_x96 ** 2 >> 64``),
        which is the precision prices are rendered at.
        """
        if sqrt_ratio_x96 < 0 or sqrt_ratio_x96 > UINT160_MAX:
            raise ValueError("sqrt_ratio_x96 must be within the uint160 range.")
        price_x128 = mul_div(sqrt_ratio_x96, sqrt_ratio_x96, 1 << 64)
        return self.format_fraction(price_x128, Q128)

    def format_ratio_x96(self, ratio_x96: int) -> str:
        if ratio_x96 < 0 or ratio_x96 > UINT256_MAX:
            raise ValueError("ratio_x96 must be within the uint256 range.")
        return self.format_fraction(ratio_x96, Q96)

    def format_fraction(self, numerator: int, denominator: int) -> str:
        if denominator <= 0:
            raise ZeroDivisionError("denominator must be positive.")
        if numerator < 0:
            raise ValueError("numerator must be non-negative.")
        if numerator == 0:
            return "0"

        exponent = decimal_exponent(numerator, denominator)
        digits = str(self._significant_part(numerator, denominator, exponent))
        budget = self._significant_digits

        if exponent >= budget - 1:
            return digits + "0" * (exponent - budget + 1)
        if exponent >= 0:
            return f"{digits[: exponent + 1]}.{digits[exponent + 1 :]}"
        return "0." + "0" * (-exponent - 1) + digits

    def _significant_part(self, numerator: int, denominator: int, exponent: int) -> int:
        shift = self._significant_digits - 1 - exponent
        if shift >= 0:
            sigfigs = (numerator * 10**shift) // denominator
        else:
            sigfigs = numerator // (denominator * 10**-shift)
        if len(str(sigfigs)) != self._significant_digits:
            raise ArithmeticError(f"expected {self._significant_digits} significant digits, got {sigfigs}.")
        return sigfigs


def decimal_exponent(numerator: int, denominator: int) -> int:
    """Largest e with 10 ** e <= numerator / denominator, for positive operands."""
    exponent = len(str(numerator)) - len(str(denominator))
    if _below_power_of_ten(numerator, denominator, exponent):
        exponent -= 1
    return exponent


def fixed_point_to_decimal_string(
    sqrt_ratio_x96: int,
    *,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    return DecimalStringFormatter(significant_digits).format_sqrt_ratio_x96(sqrt_ratio_x96)


def _below_power_of_ten(numerator: int, denominator: int, exponent: int) -> bool:
    if exponent >= 0:
        return numerator < denominator * 10**exponent
    return numerator * 10**-exponent < denominator
