"""Shared fixtures for idcode tests."""

import pytest

from idcode.core.coder import IdCoder


@pytest.fixture
def coder():
    """Default layout: 6 digits, blocks of 2, check symbol."""
    return IdCoder(num_digits=6, block_digits=2, check_digit=True)


@pytest.fixture
def short_coder():
    """4 digits, blocks of 3, no check symbol."""
    return IdCoder(num_digits=4, block_digits=3, check_digit=False)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("IDCODE_NUM_DIGITS", "IDCODE_BLOCK_DIGITS", "IDCODE_CHECK_DIGIT",
                "IDCODE_ALPHABET", "IDCODE_SEED"):
        monkeypatch.delenv(var, raising=False)
