from __future__ import annotations

import logging

from position_descriptor.application.dto.formatting import FormatFeeOutput
from position_descriptor.domain.exceptions import FeeInputError
from position_descriptor.domain.services.position_strings import fee_to_percent_string


logger = logging.getLogger(__name__)


class FormatFeeUseCase:
    def execute(self, *, fee: int) -> FormatFeeOutput:
        try:
            percent_string = fee_to_percent_string(fee)
        except ValueError as exc:
            logger.warning("format_fee: rejected fee=%s reason=%s", fee, exc)
            raise FeeInputError(str(exc)) from exc

        logger.debug("format_fee: formatted fee=%s result=%s", fee, percent_string)
        return FormatFeeOutput(fee=fee, percent_string=percent_string)
