"""Tests for the fixed-width base57 codec."""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from chunkaddr.base10x10 import Base10x10Codec
from chunkaddr.base57 import Base57Codec
from chunkaddr.config import BASE57_ALPHABET, MAX_BASE10X10_PAIRS, MAX_BASE57_SYMBOLS
from chunkaddr.errors import (
    InputTooLongError,
    InvalidConfigError,
    InvalidSymbolError,
    NegativeValueError,
    ValueTooLargeError,
)

SMALL = Base57Codec(3)
DEFAULT = Base57Codec(MAX_BASE57_SYMBOLS)


def test_alphabet_has_57_distinct_symbols():
    assert len(BASE57_ALPHABET) == 57
    assert len(set(BASE57_ALPHABET)) == 57
    assert BASE57_ALPHABET.index("´") == 44


def test_default_capacity_covers_base10x10_capacity():
    assert Base10x10Codec(MAX_BASE10X10_PAIRS).capacity < DEFAULT.capacity


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(max_symbols=0),
        dict(max_symbols=3, alphabet="abc"),
        dict(max_symbols=3, alphabet="a" * 57),
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(InvalidConfigError):
        Base57Codec(**kwargs)


@pytest.mark.parametrize(
    "n, encoded",
    [
        (0, "aaa"),
        (1, "aab"),
        (44, "aa´"),
        (56, "aa="),
        (57, "aba"),
        (57 ** 2, "baa"),
        (57 ** 3 - 1, "==="),
    ],
)
def test_encode_decode_known_values(n, encoded):
    assert SMALL.encode(n) == encoded
    assert SMALL.decode(encoded) == n


def test_encode_too_large():
    with pytest.raises(ValueTooLargeError) as info:
        SMALL.encode(57 ** 3)
    assert info.value.capacity == 57 ** 3


def test_encode_negative():
    with pytest.raises(NegativeValueError):
        SMALL.encode(-5)


def test_decode_too_long():
    with pytest.raises(InputTooLongError) as info:
        SMALL.decode("aaaa")
    assert (info.value.length, info.value.max_symbols) == (4, 3)


def test_decode_invalid_symbol():
    with pytest.raises(InvalidSymbolError) as info:
        SMALL.decode("aA")
    assert (info.value.position, info.value.symbol) == (1, "A")


def test_decode_unpadded_input():
    assert SMALL.decode("b") == SMALL.decode("aab") == 1
    assert SMALL.decode("") == 0


@given(st.integers(min_value=0, max_value=DEFAULT.capacity - 1))
def test_round_trip_and_fixed_width(n: int):
    encoded = DEFAULT.encode(n)
    assert len(encoded) == MAX_BASE57_SYMBOLS
    assert DEFAULT.decode(encoded) == n


@given(st.text(alphabet=BASE57_ALPHABET, min_size=1, max_size=MAX_BASE57_SYMBOLS))
def test_encode_pads_any_string(s: str):
    assert DEFAULT.encode(DEFAULT.decode(s)) == s.rjust(MAX_BASE57_SYMBOLS, "a")
