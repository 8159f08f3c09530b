from __future__ import annotations

import logging

from position_descriptor.application.dto.formatting import GetTickBoundsInput, GetTickBoundsOutput
from position_descriptor.domain.exceptions import TickInputError
from position_descriptor.domain.services.tick_math import (
    max_tick_for_spacing,
    min_tick_for_spacing,
    tick_spacing_for_fee,
)


logger = logging.getLogger(__name__)


class GetTickBoundsUseCase:
    def execute(self, command: GetTickBoundsInput) -> GetTickBoundsOutput:
        try:
            tick_spacing = self._resolve_tick_spacing(command)
            result = GetTickBoundsOutput(
                tick_spacing=tick_spacing,
                min_tick=min_tick_for_spacing(tick_spacing),
                max_tick=max_tick_for_spacing(tick_spacing),
            )
        except ValueError as exc:
            logger.warning(
                "get_tick_bounds: rejected tick_spacing=%s fee=%s reason=%s",
                command.tick_spacing,
                command.fee,
                exc,
            )
            raise TickInputError(str(exc)) from exc

        logger.debug(
            "get_tick_bounds: resolved tick_spacing=%s min_tick=%s max_tick=%s",
            result.tick_spacing,
            result.min_tick,
            result.max_tick,
        )
        return result

    def _resolve_tick_spacing(self, command: GetTickBoundsInput) -> int:
        if command.tick_spacing is None and command.fee is None:
            raise ValueError("tick_spacing or fee is required.")
        if command.fee is None:
            return command.tick_spacing

        fee_spacing = tick_spacing_for_fee(command.fee)
        if command.tick_spacing is not None and command.tick_spacing != fee_spacing:
            raise ValueError(
                f"tick_spacing {command.tick_spacing} does not match fee {command.fee} "
                f"(expected {fee_spacing})."
            )
        return fee_spacing
