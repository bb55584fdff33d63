"""Length scaling: how many base-32 digits an id needs.

Tier 0 holds ids below RADIX**num_digits and uses exactly num_digits
digits. Each further tier adds block_digits digits, so code lengths
step up in fixed increments instead of one digit at a time.
"""

from idcode.core.alphabet import DIGITS, RADIX


def num_digits_for(value: int, num_digits: int, block_digits: int) -> int:
    """Return the digit count of the smallest tier that can hold `value`."""
    nd = num_digits
    while value >= RADIX ** nd:
        nd += block_digits
    return nd


def is_tier_length(nd: int, num_digits: int, block_digits: int) -> bool:
    """True if `nd` digits is the size of some tier."""
    extra = nd - num_digits
    return extra >= 0 and extra % block_digits == 0


def to_digits(value: int, nd: int) -> list[int]:
    """Base-32 digit values of `value`, most significant first, zero-padded to nd."""
    digits = []
    while value:
        value, d = divmod(value, RADIX)
        digits.append(d)
    digits.extend([0] * (nd - len(digits)))
    digits.reverse()
    return digits


def from_digits(digits: list[int]) -> int:
    """Inverse of to_digits: parse base-32 digit values, most significant first."""
    if not digits:
        raise ValueError("No digits to parse")
    return int("".join(DIGITS[d] for d in digits), RADIX)
