"""Tests for the IEEE 754 binary32/binary64 codec."""

import math
import struct

import numpy as np
import pytest

from arith.core.errors import DomainError, RangeError
from arith.math.floating import (
    BINARY32,
    BINARY64,
    decompose_double,
    decompose_single,
    narrow_single,
    reconstruct_double,
    reconstruct_single,
)
from arith.math.mantissa import MantissaExponent


class TestFloatFormat:
    """Test derived layout constants."""

    def test_binary64_layout(self):
        """Test binary64 constants."""
        assert BINARY64.total_bits == 64
        assert BINARY64.bias == 1023
        assert BINARY64.precision == 53
        assert BINARY64.min_exponent == -1074
        assert BINARY64.max_exponent == 971

    def test_binary32_layout(self):
        """Test binary32 constants."""
        assert BINARY32.total_bits == 32
        assert BINARY32.bias == 127
        assert BINARY32.precision == 24
        assert BINARY32.min_exponent == -149
        assert BINARY32.max_exponent == 104


class TestDecomposeDouble:
    """Test splitting binary64 values."""

    def test_one(self):
        """Test the implicit bit is included."""
        assert decompose_double(1.0) == (4503599627370496, -52)

    def test_returns_named_pair(self):
        """Test the result type."""
        pair = decompose_double(0.75)
        assert isinstance(pair, MantissaExponent)
        assert pair.mantissa * 2.0 ** pair.exponent == 0.75

    def test_negative_sign_folded_into_mantissa(self):
        """Test the sign lands on the mantissa."""
        mantissa, exponent = decompose_double(-2.5)
        assert mantissa < 0
        assert mantissa * 2.0 ** exponent == -2.5

    def test_zero(self):
        """Test zeros decompose to (0, 0)."""
        assert decompose_double(0.0) == (0, 0)
        assert decompose_double(-0.0) == (0, 0)

    def test_smallest_subnormal(self):
        """Test subnormals have no implicit bit."""
        assert decompose_double(5e-324) == (1, -1074)

    def test_largest_finite(self):
        """Test the largest double."""
        assert decompose_double(1.7976931348623157e308) == (2 ** 53 - 1, 971)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value):
        """Test NaN and infinities are rejected."""
        with pytest.raises(DomainError):
            decompose_double(value)


class TestReconstructDouble:
    """Test building binary64 values."""

    def test_one(self):
        """Test rebuilding 1.0."""
        assert reconstruct_double(4503599627370496, -52) == 1.0

    def test_accepts_pair(self):
        """Test a MantissaExponent argument."""
        assert reconstruct_double(MantissaExponent(3, -2)) == 0.75

    def test_unnormalized_mantissa(self):
        """Test small and even mantissas are normalized."""
        assert reconstruct_double(1, 0) == 1.0
        assert reconstruct_double(6, 10) == 6144.0
        assert reconstruct_double(2 ** 60, -60) == 1.0

    def test_negative(self):
        """Test negative mantissas."""
        assert reconstruct_double(-5, -1) == -2.5

    def test_zero(self):
        """Test zero mantissa."""
        assert reconstruct_double(0, 123) == 0.0

    def test_subnormal(self):
        """Test subnormal results."""
        assert reconstruct_double(1, -1074) == 5e-324
        assert reconstruct_double(3, -1074) == 1.5e-323

    def test_round_trip_is_bit_exact(self):
        """Test decompose then reconstruct preserves the bits."""
        for value in [0.1, -123.456, 1e-310, 2.0 ** -1022, 1.7976931348623157e308, 3.0e200]:
            rebuilt = reconstruct_double(decompose_double(value))
            assert struct.pack("<d", rebuilt) == struct.pack("<d", value)

    def test_too_many_bits_raises(self):
        """Test mantissas wider than 53 significant bits."""
        with pytest.raises(RangeError):
            reconstruct_double(2 ** 53 + 1, 0)

    def test_exponent_too_large_raises(self):
        """Test overflow."""
        with pytest.raises(RangeError):
            reconstruct_double(1, 1024)

    def test_exponent_too_small_raises(self):
        """Test bits below the subnormal range."""
        with pytest.raises(RangeError):
            reconstruct_double(1, -1075)
        with pytest.raises(RangeError):
            reconstruct_double(3, -1075)


class TestSingle:
    """Test the binary32 codec."""

    def test_decompose_one(self):
        """Test 1.0f."""
        assert decompose_single(np.float32(1.0)) == (2 ** 23, -23)

    def test_decompose_narrows_python_float(self):
        """Test Python floats are narrowed to binary32 first."""
        assert decompose_single(0.1) == (13421773, -27)

    def test_decompose_overflowing_float_raises(self):
        """Test values that narrow to infinity."""
        with pytest.raises(DomainError):
            decompose_single(1e39)

    def test_reconstruct(self):
        """Test binary32 results are numpy float32."""
        value = reconstruct_single(13421773, -27)
        assert isinstance(value, np.float32)
        assert value == np.float32(0.1)

    def test_round_trip_is_bit_exact(self):
        """Test decompose then reconstruct preserves the bits."""
        for value in [np.float32(0.1), np.float32(-3.0e38), np.float32(1e-45), np.float32(1.17549435e-38)]:
            rebuilt = reconstruct_single(decompose_single(value))
            assert rebuilt.tobytes() == value.tobytes()

    def test_reconstruct_out_of_range(self):
        """Test binary32 limits."""
        with pytest.raises(RangeError):
            reconstruct_single(1, 128)
        with pytest.raises(RangeError):
            reconstruct_single(2 ** 24 + 1, 0)

    def test_narrow_single(self):
        """Test narrowing rounds and overflows to infinity."""
        assert narrow_single(0.1) == np.float32(0.1)
        assert np.isinf(narrow_single(1e300))
