"""Luhn mod N check symbols over a radix-32 alphabet.

See https://en.wikipedia.org/wiki/Luhn_mod_N_algorithm

Every single-symbol substitution is caught. Adjacent transpositions are
caught except for a handful of value pairs the algorithm cannot tell
apart.
"""

from idcode.core.alphabet import RADIX, symbol_index


def check_value(values) -> int:
    """Check digit value for a sequence of digit values, read left to right."""
    factor = 2
    total = 0
    for v in values:
        addend = factor * v
        factor = 1 if factor == 2 else 2
        total += addend // RADIX + addend % RADIX
    return (RADIX - total % RADIX) % RADIX


def check_symbol(body: str, alphabet: str) -> str:
    """Return the check symbol for `body`, all of whose symbols are in `alphabet`."""
    index = symbol_index(alphabet)
    return alphabet[check_value(index[c] for c in body)]


def verify(code: str, alphabet: str) -> bool:
    """True if the last symbol of `code` is the check symbol of the rest."""
    if len(code) < 2:
        return False
    return check_symbol(code[:-1], alphabet) == code[-1]
