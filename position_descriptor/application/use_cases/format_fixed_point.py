from __future__ import annotations

import logging

from position_descriptor.application.dto.formatting import FormatFixedPointInput, FormatFixedPointOutput
from position_descriptor.domain.exceptions import FixedPointInputError
from position_descriptor.domain.services.decimal_string import DecimalStringFormatter


logger = logging.getLogger(__name__)


class FormatFixedPointUseCase:
    def __init__(self, *, formatter: DecimalStringFormatter):
        self._formatter = formatter

    def execute(self, command: FormatFixedPointInput) -> FormatFixedPointOutput:
        try:
            if command.kind == "sqrt_ratio_x96":
                decimal_string = self._formatter.format_sqrt_ratio_x96(command.value)
            elif command.kind == "ratio_x96":
                decimal_string = self._formatter.format_ratio_x96(command.value)
            else:
                raise ValueError(f"Unsupported fixed-point kind {command.kind!r}.")
        except ValueError as exc:
            logger.warning(
                "format_fixed_point: rejected kind=%s value=%s reason=%s",
                command.kind,
                command.value,
                exc,
            )
            raise FixedPointInputError(str(exc)) from exc

        logger.debug(
            "format_fixed_point: formatted kind=%s value=%s result=%s",
            command.kind,
            command.value,
            decimal_string,
        )
        return FormatFixedPointOutput(
            value=command.value,
            kind=command.kind,
            decimal_string=decimal_string,
        )
