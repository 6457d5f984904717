"""Tests for the EAN-13 symbol encoder."""

import pytest

from ean13.encoder import (
    GUARD,
    LEFT_PARITY,
    PARITY_KEY,
    RIGHT_PARITY,
    SYMBOL_MODULES,
    encode,
    is_guard,
    modules,
    parity_key,
)
from ean13.errors import InvalidDigits


class TestTables:
    def test_parity_keys_cover_all_digits(self):
        assert sorted(PARITY_KEY) == list(range(10))
        for key in PARITY_KEY.values():
            assert len(key) == 6
            assert set(key) <= {"0", "1"}

    def test_zero_is_all_odd(self):
        assert PARITY_KEY[0] == "000000"

    def test_left_patterns_have_odd_and_even_parity(self):
        for pattern in LEFT_PARITY["0"]:
            assert pattern.count("1") % 2 == 1
        for pattern in LEFT_PARITY["1"]:
            assert pattern.count("1") % 2 == 0

    def test_right_patterns_start_with_bar(self):
        for pattern in RIGHT_PARITY:
            assert len(pattern) == 7
            assert pattern.startswith("1")

    def test_right_is_complement_of_left_odd(self):
        for left, right in zip(LEFT_PARITY["0"], RIGHT_PARITY):
            assert right == "".join("1" if b == "0" else "0" for b in left)


class TestEncode:
    def test_encode_returns_15_patterns(self):
        bars = encode("1234567890128")
        assert len(bars) == 15

    def test_encode_95_modules(self):
        bars = encode("123456789012")
        assert len(modules(bars)) == SYMBOL_MODULES == 95

    def test_encode_guards_in_place(self):
        bars = encode("605589605589")
        assert bars[0] == "101"
        assert bars[7] == "01010"
        assert bars[-1] == "101"
        assert modules(bars).startswith("101")
        assert modules(bars).endswith("101")

    def test_encode_known_symbol(self):
        # First digit 4 -> parity 010011
        bars = encode("4006381333931")
        assert bars == [
            "101",
            "0001101",  # 0 odd
            "0100111",  # 0 even
            "0101111",  # 6 odd
            "0111101",  # 3 odd
            "0001001",  # 8 even
            "0110011",  # 1 even
            "01010",
            "1000010",  # 3
            "1000010",  # 3
            "1000010",  # 3
            "1110100",  # 9
            "1000010",  # 3
            "1100110",  # 1
            "101",
        ]

    def test_encode_12_digits_appends_check_digit(self):
        assert encode("123456789012") == encode("1234567890128")

    def test_encode_last_pattern_is_check_digit(self):
        bars = encode("123456789012")
        assert bars[13] == RIGHT_PARITY[8]

    def test_encode_pads_short_numbers(self):
        assert encode("42") == encode("000000000042")

    def test_encode_leading_zero_uses_odd_parity(self):
        bars = encode("012345678905")
        for i, digit in enumerate("123456", start=1):
            assert bars[i] == LEFT_PARITY["0"][int(digit)]

    def test_encode_deterministic(self):
        assert encode("590123412345") == encode("590123412345")

    def test_encode_rejects_non_digits(self):
        with pytest.raises(InvalidDigits):
            encode("12a4")

    def test_encode_rejects_too_long(self):
        with pytest.raises(InvalidDigits):
            encode("12345678901234")


class TestHelpers:
    def test_parity_key_from_first_digit(self):
        assert parity_key("4006381333931") == "010011"
        assert parity_key("0000000000000") == "000000"

    def test_is_guard(self):
        assert is_guard(GUARD["start"])
        assert is_guard(GUARD["middle"])
        assert is_guard(GUARD["end"])
        assert not is_guard(RIGHT_PARITY[0])
