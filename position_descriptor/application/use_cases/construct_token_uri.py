from __future__ import annotations

import logging

from position_descriptor.application.dto.token_uri import ConstructTokenURIInput, ConstructTokenURIOutput
from position_descriptor.application.ports.sqrt_ratio_port import SqrtRatioPort
from position_descriptor.domain.entities.token_uri import TokenURIParams
from position_descriptor.domain.exceptions import TokenURIInputError
from position_descriptor.domain.services.decimal_string import DecimalStringFormatter
from position_descriptor.domain.services.position_strings import parse_address
from position_descriptor.domain.services.tick_math import tick_spacing_for_fee
from position_descriptor.domain.services.token_uri import construct_token_uri


logger = logging.getLogger(__name__)


class ConstructTokenURIUseCase:
    def __init__(
        self,
        *,
        sqrt_ratio_port: SqrtRatioPort,
        formatter: DecimalStringFormatter,
        protocol_name: str,
    ):
        self._sqrt_ratio_port = sqrt_ratio_port
        self._formatter = formatter
        self._protocol_name = protocol_name

    def execute(self, command: ConstructTokenURIInput) -> ConstructTokenURIOutput:
        try:
            tick_spacing = command.tick_spacing
            if tick_spacing is None:
                tick_spacing = tick_spacing_for_fee(command.fee)
            params = TokenURIParams(
                token0=parse_address(command.token0),
                token1=parse_address(command.token1),
                tick_lower=command.tick_lower,
                tick_upper=command.tick_upper,
                tick_spacing=tick_spacing,
                token0_symbol=command.token0_symbol,
                token1_symbol=command.token1_symbol,
                fee=command.fee,
                liquidity=command.liquidity,
                pool_address=parse_address(command.pool_address),
            )
            token_uri = construct_token_uri(
                params,
                formatter=self._formatter,
                sqrt_ratio_at_tick=self._sqrt_ratio_at_tick,
                protocol_name=self._protocol_name,
            )
        except ValueError as exc:
            logger.warning(
                "construct_token_uri: rejected pool=%s tick_lower=%s tick_upper=%s fee=%s reason=%s",
                command.pool_address,
                command.tick_lower,
                command.tick_upper,
                command.fee,
                exc,
            )
            raise TokenURIInputError(str(exc)) from exc

        logger.debug(
            "construct_token_uri: built pool=%s tick_lower=%s tick_upper=%s tick_spacing=%s",
            command.pool_address,
            command.tick_lower,
            command.tick_upper,
            tick_spacing,
        )
        return ConstructTokenURIOutput(token_uri=token_uri)

    def _sqrt_ratio_at_tick(self, tick: int) -> int:
        return self._sqrt_ratio_port.get_sqrt_ratio_at_tick(tick=tick)
