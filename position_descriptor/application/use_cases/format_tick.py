from __future__ import annotations

import logging

from position_descriptor.application.dto.formatting import FormatTickInput, FormatTickOutput
from position_descriptor.application.ports.sqrt_ratio_port import SqrtRatioPort
from position_descriptor.domain.exceptions import TickInputError
from position_descriptor.domain.services.decimal_string import DecimalStringFormatter
from position_descriptor.domain.services.position_strings import tick_to_decimal_string


logger = logging.getLogger(__name__)


class FormatTickUseCase:
    def __init__(self, *, sqrt_ratio_port: SqrtRatioPort, formatter: DecimalStringFormatter):
        self._sqrt_ratio_port = sqrt_ratio_port
        self._formatter = formatter

    def execute(self, command: FormatTickInput) -> FormatTickOutput:
        try:
            decimal_string = tick_to_decimal_string(
                command.tick,
                command.tick_spacing,
                formatter=self._formatter,
                sqrt_ratio_at_tick=self._sqrt_ratio_at_tick,
            )
        except ValueError as exc:
            logger.warning(
                "format_tick: rejected tick=%s tick_spacing=%s reason=%s",
                command.tick,
                command.tick_spacing,
                exc,
            )
            raise TickInputError(str(exc)) from exc

        logger.debug(
            "format_tick: formatted tick=%s tick_spacing=%s result=%s",
            command.tick,
            command.tick_spacing,
            decimal_string,
        )
        return FormatTickOutput(
            tick=command.tick,
            tick_spacing=command.tick_spacing,
            decimal_string=decimal_string,
        )

    def _sqrt_ratio_at_tick(self, tick: int) -> int:
        return self._sqrt_ratio_port.get_sqrt_ratio_at_tick(tick=tick)
