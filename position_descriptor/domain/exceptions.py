from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class FixedPointInputError(DomainError):
    """Invalid fixed-point ratio for decimal formatting."""


class TickInputError(DomainError):
    """Tick or tick spacing outside the representable range."""


class FeeInputError(DomainError):
    """Fee outside the supported fee units range."""


class AddressInputError(DomainError):
    """Address is not a valid 160-bit value."""


class TokenURIInputError(DomainError):
    """Invalid position parameters for the token URI."""
