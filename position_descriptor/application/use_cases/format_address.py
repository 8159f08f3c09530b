from __future__ import annotations

import logging

from position_descriptor.application.dto.formatting import FormatAddressInput, FormatAddressOutput
from position_descriptor.domain.exceptions import AddressInputError
from position_descriptor.domain.services.position_strings import address_to_string, parse_address


logger = logging.getLogger(__name__)


class FormatAddressUseCase:
    def execute(self, command: FormatAddressInput) -> FormatAddressOutput:
        try:
            address = address_to_string(parse_address(command.address))
        except ValueError as exc:
            logger.warning("format_address: rejected address=%s reason=%s", command.address, exc)
            raise AddressInputError(str(exc)) from exc

        logger.debug("format_address: formatted address=%s", address)
        return FormatAddressOutput(address=address)
