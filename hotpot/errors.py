"""
errors.py — exception types raised by hotpot.

Every error is a ValueError, so callers that only care about "bad input"
can catch that alone. Errors are raised at configuration or construction
time; nothing here is retried.
"""


class HotpotError(ValueError):
    """Base class for all hotpot errors."""


class ArgumentError(HotpotError):
    """A required input is missing (None) or blank."""


class ValidationError(ArgumentError):
    """A value is well-formed but outside the allowed domain
    (digits not 6/8, time step not 30/60, unknown hash algorithm...)."""


class FormatError(HotpotError):
    """Malformed Base32 text."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Invalid Base32 character: {character!r}")
