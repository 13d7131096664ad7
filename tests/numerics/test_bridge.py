"""Tests for lossy conversion of rationals to native floats and decimals."""

import math
import struct
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from arith.core.errors import NumericOverflowError
from arith.math import bridge
from arith.math.floating import BINARY32, BINARY64
from arith.math.rational import NAN, NEGATIVE_INFINITY, POSITIVE_INFINITY, RationalNumber


class TestBinaryWindow:
    """Test significand window selection."""

    def test_one_third(self):
        """Test 53 leading bits of 1/3."""
        mantissa, exponent = bridge.binary_window(1, 3, BINARY64)
        assert mantissa.bit_length() == 53
        assert Fraction(mantissa) * Fraction(2) ** exponent == Fraction(1 / 3)

    def test_exact_power_of_two(self):
        """Test exact values need no rounding."""
        mantissa, exponent = bridge.binary_window(1, 1, BINARY64)
        assert mantissa * 2.0 ** exponent == 1.0

    def test_subnormal_window_is_narrower(self):
        """Test gradual underflow keeps fewer bits."""
        mantissa, exponent = bridge.binary_window(3, 2 ** 1075, BINARY64)
        assert exponent == BINARY64.min_exponent
        assert mantissa == 2


class TestToDouble:
    """Test RationalNumber.to_double."""

    def test_matches_fraction_conversion(self):
        """Test correct rounding for a spread of values."""
        for numerator, denominator in [(1, 3), (2, 3), (-22, 7), (1, 10), (10 ** 30 + 1, 7), (1, 2 ** 1070 * 3)]:
            expected = float(Fraction(numerator, denominator))
            assert RationalNumber(numerator, denominator).to_double() == expected

    def test_ties_round_to_even(self):
        """Test exact halves between doubles."""
        assert RationalNumber(2 ** 53 + 1).to_double() == 2.0 ** 53
        assert RationalNumber(2 ** 53 + 3).to_double() == 2.0 ** 53 + 4

    def test_specials(self):
        """Test NaN and infinities."""
        assert math.isnan(NAN.to_double())
        assert POSITIVE_INFINITY.to_double() == math.inf
        assert NEGATIVE_INFINITY.to_double() == -math.inf

    def test_float_builtin(self):
        """Test float() uses the same conversion."""
        assert float(RationalNumber(3, 4)) == 0.75

    def test_underflow_to_signed_zero(self):
        """Test tiny values become zero with the right sign."""
        positive = RationalNumber(1, 2 ** 1100).to_double()
        negative = RationalNumber(-1, 2 ** 1100).to_double()
        assert positive == 0.0
        assert struct.pack("<d", negative) == struct.pack("<d", -0.0)

    def test_overflow_raises(self):
        """Test magnitudes beyond the double range."""
        with pytest.raises(NumericOverflowError):
            RationalNumber(2 ** 1024).to_double()

    def test_largest_double_survives(self):
        """Test the largest finite double is representable."""
        assert RationalNumber.from_double(1.7976931348623157e308).to_double() == 1.7976931348623157e308

    def test_round_trip_through_rational(self):
        """Test from_double then to_double is the identity."""
        for value in [0.1, -2.5e-300, 123456.789, 5e-324]:
            assert RationalNumber.from_double(value).to_double() == value


class TestToSingle:
    """Test RationalNumber.to_single."""

    def test_returns_float32(self):
        """Test the result type."""
        value = RationalNumber(1, 10).to_single()
        assert isinstance(value, np.float32)
        assert value == np.float32(0.1)

    def test_specials(self):
        """Test NaN and infinities."""
        assert np.isnan(NAN.to_single())
        assert np.isposinf(POSITIVE_INFINITY.to_single())

    def test_overflow_raises(self):
        """Test magnitudes beyond the binary32 range."""
        with pytest.raises(NumericOverflowError):
            RationalNumber(2 ** 128).to_single()

    def test_round_trip(self):
        """Test from_single then to_single is the identity."""
        for value in [np.float32(0.1), np.float32(-7.25), np.float32(1e-45)]:
            assert RationalNumber.from_single(value).to_single() == value


class TestToDecimal:
    """Test RationalNumber.to_decimal and to_packed_decimal."""

    def test_terminating(self):
        """Test exact decimals keep their digits."""
        assert RationalNumber(5, 4).to_decimal() == Decimal("1.25")
        assert RationalNumber(-3).to_decimal() == Decimal("-3")

    def test_repeating_uses_28_places(self):
        """Test 1/3 keeps 28 fractional digits."""
        assert RationalNumber(1, 3).to_decimal() == Decimal("0." + "3" * 28)

    def test_rounds_half_even(self):
        """Test rounding at the last place."""
        assert RationalNumber(2, 3).to_decimal() == Decimal("0." + "6" * 27 + "7")

    def test_scale_shrinks_for_large_values(self):
        """Test big integer parts leave fewer fractional digits."""
        value = RationalNumber(10 ** 20) + RationalNumber(1, 3)
        result = value.to_decimal()
        assert result.as_tuple().exponent == -8
        assert result == Decimal("100000000000000000000.33333333")

    def test_trailing_zeros_dropped(self):
        """Test the smallest scale is used."""
        packed = RationalNumber(1, 2).to_packed_decimal()
        assert packed.scale == 1
        assert packed.significand == 5

    def test_overflow_raises(self):
        """Test values needing more than 96 bits."""
        with pytest.raises(NumericOverflowError):
            RationalNumber(2 ** 96).to_decimal()
        with pytest.raises(NumericOverflowError):
            NAN.to_packed_decimal()

    def test_round_trip(self):
        """Test from_decimal then to_decimal is the identity."""
        for text in ["0.1", "-12345.6789", "79228162514264337593543950335", "0.0000000000000000000000000001"]:
            value = Decimal(text)
            assert RationalNumber.from_decimal(value).to_decimal() == value
