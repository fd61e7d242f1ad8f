"""Tests for fixed_isqrt/table.py — the 8-bit base-case table."""

import math

import pytest

from fixed_isqrt import table
from fixed_isqrt.errors import IsqrtRangeError
from fixed_isqrt.types import PartialRootRemainder


def test_table_covers_every_8_bit_value() -> None:
    assert len(table.ISQRT_AND_REMAINDER_8_BIT) == 256
    assert len(table.PACKED_ISQRT_AND_REMAINDER_8_BIT) == 256


def test_entries_are_root_and_remainder() -> None:
    for n, (root, rem) in enumerate(table.ISQRT_AND_REMAINDER_8_BIT):
        assert root == math.isqrt(n)
        assert root * root + rem == n
        assert 0 <= rem <= 2 * root


def test_packed_lookup_agrees_with_plain_lookup() -> None:
    for n in range(256):
        assert table.lookup_packed(n) == table.lookup(n)


def test_known_entries() -> None:
    assert table.lookup(0) == PartialRootRemainder(0, 0)
    assert table.lookup(63) == PartialRootRemainder(7, 14)
    assert table.lookup(64) == PartialRootRemainder(8, 0)
    assert table.lookup(255) == PartialRootRemainder(15, 30)
    assert table.isqrt(255) == 15


def test_remainder_fits_packed_field() -> None:
    assert max(rem for _, rem in table.ISQRT_AND_REMAINDER_8_BIT) == 30


@pytest.mark.parametrize("n", [-1, 256])
def test_lookup_rejects_out_of_domain(n: int) -> None:
    with pytest.raises(IsqrtRangeError):
        table.lookup(n)
    with pytest.raises(IsqrtRangeError):
        table.lookup_packed(n)


def test_partial_root_remainder_unpacks() -> None:
    root, rem = table.lookup(200)
    assert (root, rem) == (14, 4)
    assert table.lookup(200).value == 200
