from __future__ import annotations

import pytest

from fixed_isqrt import binary
from fixed_isqrt.errors import IsqrtRangeError


@pytest.mark.parametrize(
    "value,expected",
    (
        (0, 0),
        (1, 1),
        (2, 1),
        (3, 1),
        (4, 2),
        (27, 5),
        (65535, 255),
        (65536, 256),
        (18446744073709551615, 4294967295),
    ),
)
def test_binary_isqrt_success(value: int, expected: int) -> None:
    assert binary.isqrt(value, 128) == expected


def test_binary_does_not_depend_on_width() -> None:
    assert binary.isqrt(200, 8) == binary.isqrt(200, 128) == 14


def test_binary_u128_max() -> None:
    assert binary.isqrt((1 << 128) - 1, 128) == (1 << 64) - 1


@pytest.mark.parametrize("value,bits", [(-1, 8), (256, 8), (1 << 128, 128)])
def test_binary_rejects_out_of_range(value: int, bits: int) -> None:
    with pytest.raises(IsqrtRangeError):
        binary.isqrt(value, bits)
