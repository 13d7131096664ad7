"""Tests for chunked digit conversion."""

import pytest

from arith.core.digits import CHUNK_DIGITS, digits_to_int, int_to_digits


class TestDigitsToInt:
    """Test text to int."""

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("007", 7),
        ("-42", -42),
        ("+42", 42),
        ("1_000_000", 1000000),
    ])
    def test_short(self, text, expected):
        """Test values handled in one piece."""
        assert digits_to_int(text) == expected

    def test_long(self):
        """Test 10,000 digits."""
        assert digits_to_int("1" + "0" * 9999) == 10 ** 9999
        assert digits_to_int("-" + "9" * 10000) == -(10 ** 10000 - 1)

    def test_chunk_boundary(self):
        """Test the split keeps inner zeros."""
        text = "1" + "0" * CHUNK_DIGITS + "1"
        assert digits_to_int(text) == 10 ** (CHUNK_DIGITS + 1) + 1


class TestIntToDigits:
    """Test int to text."""

    @pytest.mark.parametrize("value", [0, 1, -1, 10 ** 18, -(2 ** 64)])
    def test_short(self, value):
        """Test values handled in one piece."""
        assert int_to_digits(value) == str(value)

    def test_long(self):
        """Test 10,001 digits with inner zeros."""
        assert int_to_digits(10 ** 10000 + 7) == "1" + "0" * 9999 + "7"
        assert int_to_digits(-(10 ** 10000)) == "-1" + "0" * 10000

    def test_inverse(self):
        """Test text survives both conversions."""
        text = "31415926535" * 1000
        assert int_to_digits(digits_to_int(text)) == text
