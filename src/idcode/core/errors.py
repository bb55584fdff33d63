"""Error kinds raised by the id-code transform.

All of them are ValueErrors, so callers that only care about bad input
can catch that.
"""


class IdCodeError(ValueError):
    """Base class for id-code errors."""


class InvalidAlphabet(IdCodeError):
    """Alphabet is not exactly RADIX distinct upper-case symbols."""


class InvalidNumber(IdCodeError):
    """Value to encode is not a non-negative integer."""


class InvalidCode(IdCodeError):
    """Code fails grammar, length or check symbol validation."""
