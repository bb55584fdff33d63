"""Id codes: short, human-friendly codes for internal integer ids.

A bijection between ids and codes is computed on the fly from a fixed
configuration, so codes never need to be stored. Codes are meant to be
read out, typed and spoken, hence the restricted alphabet (see
idcode.core.alphabet) and the optional Luhn mod N check symbol.

Code length scales with the id: num_digits symbols for ids below
32**num_digits, then block_digits more per tier, plus one check symbol.

    coder = IdCoder(num_digits=6, block_digits=2)
    coder.encode(0)          # "BATBQAG"
    coder.decode("batbqag ") # 0

Before substitution the base-32 digits go through a rolling XOR mask so
that neighbouring ids give visually unrelated codes. This deters casual
guessing only; it is not encryption.
"""

import logging
from dataclasses import asdict, dataclass, replace

from idcode.core.alphabet import (
    CODE_DIGITS,
    RADIX,
    shuffled_alphabet,
    symbol_index,
    validate_alphabet,
)
from idcode.core.checksum import check_symbol, check_value
from idcode.core.errors import InvalidCode, InvalidNumber
from idcode.core.scaling import from_digits, is_tier_length, num_digits_for, to_digits

log = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CoderConfig:
    num_digits: int = 6
    block_digits: int = 2
    check_digit: bool = True
    alphabet: str | None = None
    seed: int | None = None

    @classmethod
    def from_mapping(cls, mapping: dict) -> "CoderConfig":
        """Build a config from a plain dict, e.g. loaded from JSON.

        `code_digits` is accepted as an alias of `alphabet`. Digit counts
        may be numeric strings and check_digit a yes/no style string.
        """
        options = dict(mapping)
        if "code_digits" in options:
            options.setdefault("alphabet", options.pop("code_digits"))
        unknown = set(options) - {"num_digits", "block_digits", "check_digit", "alphabet", "seed"}
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        for key in ("num_digits", "block_digits", "seed"):
            if isinstance(options.get(key), str):
                options[key] = int(options[key])
        if isinstance(options.get("check_digit"), str):
            options["check_digit"] = _parse_bool(options["check_digit"])
        return cls(**options)


def _parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Not a boolean: {text!r}")


def _positive_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be an integer >= 1, got {value!r}")
    return value


class IdCoder:
    """Encode ids as codes and back, under one immutable configuration.

    Safe to share between threads: nothing is mutated after __init__.
    """

    def __init__(self, config: CoderConfig | None = None, **options):
        if config is None:
            config = CoderConfig(**options)
        elif options:
            config = replace(config, **options)

        _positive_int("num_digits", config.num_digits)
        _positive_int("block_digits", config.block_digits)
        if not isinstance(config.check_digit, bool):
            raise ValueError(f"check_digit must be a bool, got {config.check_digit!r}")

        if config.alphabet is not None:
            alphabet = validate_alphabet(config.alphabet)
        elif config.seed is not None:
            if isinstance(config.seed, bool) or not isinstance(config.seed, int):
                raise ValueError(f"seed must be an integer, got {config.seed!r}")
            alphabet = shuffled_alphabet(config.seed)
        else:
            alphabet = CODE_DIGITS

        self._config = replace(config, alphabet=alphabet)
        self._index = symbol_index(alphabet)
        log.debug("Configured %r", self)

    @classmethod
    def from_config(cls, config: CoderConfig | dict) -> "IdCoder":
        if isinstance(config, dict):
            config = CoderConfig.from_mapping(config)
        return cls(config)

    # ---- Configuration ----

    @property
    def config(self) -> CoderConfig:
        """Resolved configuration; alphabet is always filled in."""
        return self._config

    @property
    def num_digits(self) -> int:
        """Digits in the shortest (tier 0) codes."""
        return self._config.num_digits

    @property
    def block_digits(self) -> int:
        """Digits added per tier above tier 0."""
        return self._config.block_digits

    @property
    def check_digit(self) -> bool:
        return self._config.check_digit

    @property
    def alphabet(self) -> str:
        """The 32 display symbols in digit-value order.

        When derived from a seed, capture this and pass it back as an
        explicit alphabet for long-term stability.
        """
        return self._config.alphabet

    @property
    def code_length(self) -> int:
        """Length of tier 0 codes."""
        return self.num_digits + self._check_len

    @property
    def num_valid_codes(self) -> int:
        """Number of ids representable before codes grow."""
        return RADIX ** self.num_digits

    @property
    def _check_len(self) -> int:
        return 1 if self.check_digit else 0

    def num_digits_for(self, value: int) -> int:
        return num_digits_for(self._checked_id(value), self.num_digits, self.block_digits)

    def code_length_for(self, value: int) -> int:
        return self.num_digits_for(value) + self._check_len

    def parameters(self) -> dict:
        """Resolved parameters as a dict; CoderConfig.from_mapping() accepts it back."""
        params = asdict(self._config)
        del params["seed"]
        return params

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters().items())
        return f"IdCoder({args})"

    def __eq__(self, other):
        if not isinstance(other, IdCoder):
            return NotImplemented
        return self.parameters() == other.parameters()

    def __hash__(self):
        return hash(tuple(self.parameters().items()))

    # ---- Transform ----

    def encode(self, value: int) -> str:
        """Return the code for a non-negative integer id."""
        value = self._checked_id(value)
        nd = num_digits_for(value, self.num_digits, self.block_digits)
        alphabet = self.alphabet

        # Least significant digit first; each symbol depends on all before it.
        symbols = []
        mask = 0
        for i, d in enumerate(reversed(to_digits(value, nd))):
            mask = ((d + i) % RADIX) ^ mask
            symbols.append(alphabet[mask])
        code = "".join(symbols)

        if self.check_digit:
            code += check_symbol(code, alphabet)
        return code

    def decode(self, code: str) -> int:
        """Return the id for a code. Case and surrounding whitespace are ignored."""
        if not isinstance(code, str):
            raise InvalidCode(f"Codes must be strings, got {type(code).__name__}")
        normalized = code.strip().upper()
        if not normalized or any(c not in self._index for c in normalized):
            raise InvalidCode(f"Invalid code: {code!r}")

        values = [self._index[c] for c in normalized]
        if self.check_digit:
            body, check = values[:-1], values[-1]
            if check_value(body) != check:
                raise InvalidCode(f"Invalid code: {code!r}")
            values = body

        if not is_tier_length(len(values), self.num_digits, self.block_digits):
            raise InvalidCode(f"Invalid code: {code!r}")

        digits = []
        mask = 0
        for i, next_mask in enumerate(values):
            digits.append(((next_mask ^ mask) - i) % RADIX)
            mask = next_mask
        digits.reverse()
        return from_digits(digits)

    def is_valid(self, code: str) -> bool:
        """True iff decode(code) would succeed."""
        try:
            self.decode(code)
        except InvalidCode:
            return False
        return True

    @staticmethod
    def _checked_id(value) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidNumber(
                f"Numbers to be coded must be passed as integers, got {type(value).__name__}"
            )
        if value < 0:
            raise InvalidNumber(f"Negative numbers cannot be encoded: {value}")
        return value
