"""Radix-32 alphabets for id codes.

Codes use 32 display symbols: the digits 2-9 and the capital letters,
minus I and O (and the digits 0 and 1) which are too easily confused.
The default ordering is a fixed permutation; it is part of the code
format, so changing it changes every code ever issued.

Internally digit values are handled through DIGITS, the standard
base-32 digit string understood by int(s, 32).
"""

import logging
import random

from idcode.core.errors import InvalidAlphabet

log = logging.getLogger(__name__)

RADIX = 32

# Standard base-32 digits, value i <-> DIGITS[i]
DIGITS = "0123456789abcdefghijklmnopqrstuv"

# Display symbols, a permutation of 2-9 and A-Z minus I, O
CODE_DIGITS = "BAFTQ4EJCNVYZKDPG37H5S8WML692RXU"


def validate_alphabet(alphabet: str) -> str:
    """Return the alphabet unchanged, or raise InvalidAlphabet."""
    if not isinstance(alphabet, str):
        raise InvalidAlphabet(f"Alphabet must be a string, got {type(alphabet).__name__}")
    if len(alphabet) != RADIX or len(set(alphabet)) != RADIX:
        raise InvalidAlphabet(
            f"Alphabet must have exactly {RADIX} distinct symbols, got {alphabet!r}"
        )
    if alphabet != alphabet.upper() or any(c.isspace() for c in alphabet):
        # decode() upper-cases and strips its input
        raise InvalidAlphabet(f"Alphabet symbols must be upper case, non-blank: {alphabet!r}")
    return alphabet


def shuffled_alphabet(seed: int, base: str = CODE_DIGITS) -> str:
    """Derive an alphabet by shuffling `base` with a seeded generator.

    A private random.Random is used so global random state is neither
    read nor disturbed. The result depends on Python's Mersenne Twister
    and shuffle implementation; keep the returned string and pass it as
    an explicit alphabet if codes must survive a change of runtime.
    """
    symbols = list(base)
    random.Random(seed).shuffle(symbols)
    alphabet = "".join(symbols)
    log.debug("Derived alphabet %s from seed %r", alphabet, seed)
    return alphabet


def symbol_index(alphabet: str) -> dict[str, int]:
    """Reverse lookup: symbol -> digit value."""
    return {c: i for i, c in enumerate(alphabet)}
