"""Tests for idcode.core.alphabet."""

import random

import pytest

from idcode.core.alphabet import (
    CODE_DIGITS,
    DIGITS,
    RADIX,
    shuffled_alphabet,
    symbol_index,
    validate_alphabet,
)
from idcode.core.errors import IdCodeError, InvalidAlphabet


class TestDefaultAlphabet:
    def test_radix(self):
        assert RADIX == 32

    def test_distinct_symbols(self):
        assert len(CODE_DIGITS) == RADIX
        assert len(set(CODE_DIGITS)) == RADIX

    def test_upper_case(self):
        assert CODE_DIGITS == CODE_DIGITS.upper()

    def test_excludes_confusable(self):
        """I, O, 0 and 1 are never used."""
        for c in "IO01":
            assert c not in CODE_DIGITS

    def test_is_digits_and_letters(self):
        expected = set("23456789ABCDEFGHJKLMNPQRSTUVWXYZ")
        assert set(CODE_DIGITS) == expected

    def test_digits_match_int_base32(self):
        """DIGITS[i] is what int(..., 32) reads as i."""
        assert len(DIGITS) == RADIX
        for i, c in enumerate(DIGITS):
            assert int(c, RADIX) == i


class TestValidateAlphabet:
    def test_default_is_valid(self):
        assert validate_alphabet(CODE_DIGITS) == CODE_DIGITS

    def test_plain_base32_is_valid(self):
        alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
        assert validate_alphabet(alphabet) == alphabet

    def test_too_short(self):
        with pytest.raises(InvalidAlphabet, match="exactly 32"):
            validate_alphabet(CODE_DIGITS[:-1])

    def test_too_long(self):
        with pytest.raises(InvalidAlphabet, match="exactly 32"):
            validate_alphabet(CODE_DIGITS + "0")

    def test_repeated_symbol(self):
        with pytest.raises(InvalidAlphabet, match="exactly 32"):
            validate_alphabet(CODE_DIGITS[:-1] + CODE_DIGITS[0])

    def test_lower_case_rejected(self):
        with pytest.raises(InvalidAlphabet, match="upper case"):
            validate_alphabet(CODE_DIGITS[:-1] + "u")

    def test_whitespace_rejected(self):
        with pytest.raises(InvalidAlphabet):
            validate_alphabet(CODE_DIGITS[:-1] + " ")

    def test_not_a_string(self):
        with pytest.raises(InvalidAlphabet, match="must be a string"):
            validate_alphabet(list(CODE_DIGITS))

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_alphabet("ABC")
        assert issubclass(InvalidAlphabet, IdCodeError)


class TestShuffledAlphabet:
    def test_is_permutation(self):
        alphabet = shuffled_alphabet(8734112)
        assert sorted(alphabet) == sorted(CODE_DIGITS)
        validate_alphabet(alphabet)

    def test_reproducible(self):
        assert shuffled_alphabet(42) == shuffled_alphabet(42)

    def test_seed_matters(self):
        assert shuffled_alphabet(1) != shuffled_alphabet(2)

    def test_global_random_untouched(self):
        """Shuffling neither reads nor advances the module-level generator."""
        random.seed(1234)
        state = random.getstate()
        shuffled_alphabet(99)
        assert random.getstate() == state

    def test_independent_of_global_seed(self):
        random.seed(1)
        first = shuffled_alphabet(7)
        random.seed(2)
        assert shuffled_alphabet(7) == first


class TestSymbolIndex:
    def test_inverse(self):
        index = symbol_index(CODE_DIGITS)
        assert len(index) == RADIX
        for i, c in enumerate(CODE_DIGITS):
            assert index[c] == i

    def test_known_positions(self):
        index = symbol_index(CODE_DIGITS)
        assert index["B"] == 0
        assert index["A"] == 1
        assert index["U"] == 31
