"""Tests for fixed_isqrt/arith.py — fixed-width helpers."""

import pytest

from fixed_isqrt.arith import (
    checked_mul,
    ilog2,
    is_floor_root,
    leading_zeros,
    mask,
    max_root,
    overflowing_sub,
    require_value,
    wrapping_add,
)
from fixed_isqrt.errors import IsqrtRangeError
from fixed_isqrt.types import I8, U8, U64


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestRequireValue:
    def test_accepts_bounds(self):
        assert require_value(0, U8) == 0
        assert require_value(255, U8) == 255
        assert require_value(-128, I8) == -128

    def test_rejects_out_of_range(self):
        with pytest.raises(IsqrtRangeError, match="out of range for u8"):
            require_value(256, U8)
        with pytest.raises(IsqrtRangeError):
            require_value(-1, U64)
        with pytest.raises(IsqrtRangeError):
            require_value(128, I8)

    def test_rejects_non_int(self):
        with pytest.raises(TypeError, match="must be an int"):
            require_value(4.0, U8)  # type: ignore[arg-type]

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            require_value(True, U8)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            require_value(1 << 64, U64)


# ---------------------------------------------------------------------------
# Bit helpers
# ---------------------------------------------------------------------------

class TestBits:
    def test_mask(self):
        assert mask(8) == 0xFF
        assert mask(128) == (1 << 128) - 1

    def test_leading_zeros(self):
        assert leading_zeros(0, 16) == 16
        assert leading_zeros(1, 16) == 15
        assert leading_zeros(0x8000, 16) == 0
        assert leading_zeros(0xFF, 64) == 56

    def test_ilog2(self):
        assert ilog2(1) == 0
        assert ilog2(2) == 1
        assert ilog2(255) == 7
        assert ilog2(256) == 8

    def test_ilog2_rejects_zero(self):
        with pytest.raises(ValueError):
            ilog2(0)


# ---------------------------------------------------------------------------
# Overflow-aware operations
# ---------------------------------------------------------------------------

class TestOverflow:
    def test_checked_mul_fits(self):
        assert checked_mul(15, 15, 8) == 225
        assert checked_mul(0xFFFF_FFFF, 0xFFFF_FFFF, 64) == 0xFFFF_FFFE_0000_0001

    def test_checked_mul_overflow(self):
        assert checked_mul(16, 16, 8) is None
        assert checked_mul(1 << 32, 1 << 32, 64) is None

    def test_overflowing_sub(self):
        assert overflowing_sub(5, 3, 8) == (2, False)
        assert overflowing_sub(3, 5, 8) == (254, True)
        assert overflowing_sub(0, 1, 16) == (0xFFFF, True)

    def test_wrapping_add(self):
        assert wrapping_add(254, 3, 8) == 1
        assert wrapping_add(1, 2, 8) == 3

    def test_borrow_then_add_back_recovers_value(self):
        # (3 - 5) + 7 == 5, even though the subtraction wraps.
        wrapped, borrow = overflowing_sub(3, 5, 8)
        assert borrow is True
        assert wrapping_add(wrapped, 7, 8) == 5


# ---------------------------------------------------------------------------
# Root bounds
# ---------------------------------------------------------------------------

class TestRootBounds:
    def test_max_root(self):
        assert max_root(8) == 15
        assert max_root(64) == 4_294_967_295

    def test_is_floor_root(self):
        assert is_floor_root(15, 255, 8) is True
        assert is_floor_root(14, 255, 8) is False
        assert is_floor_root(16, 255, 8) is False
        assert is_floor_root(2, 8, 8) is True
        assert is_floor_root(3, 8, 8) is False

    def test_is_floor_root_treats_overflow_as_exceeding(self):
        # (r+1)**2 == 2**64 overflows, which counts as "exceeds n".
        assert is_floor_root(4_294_967_295, (1 << 64) - 1, 64) is True

    def test_negative_root_rejected(self):
        assert is_floor_root(-1, 0, 8) is False
