"""Floating-point square root with integer correction.

Precision per width:
- 8 and 16 bits: single precision (``numpy.float32``). Every input is exactly
  representable in the 24-bit mantissa, so the truncated root is exact.
- 32 bits: double precision. Inputs are below 2**53 and therefore exact.
- 64 bits: double precision, but inputs above 2**53 are rounded on conversion.
  See `isqrt_unchecked` for why one correction step is enough.
- 128 bits: beyond double precision. One Karatsuba step is taken at 128 bits
  and only the upper 64-bit half goes through floating point.

The correction runs at every width; squarings are overflow-checked and an
overflow counts as "exceeds n", never as a wrapped (smaller) value.
"""

from __future__ import annotations

import math

import numpy as np

from . import karatsuba
from .arith import checked_mul, require_value
from .types import IntType, require_width

FLOAT32_WIDTHS: tuple[int, ...] = (8, 16)
FLOAT_BASE_BITS: int = 64


def _candidate(n: int, bits: int) -> int:
    if bits in FLOAT32_WIDTHS:
        return int(np.sqrt(np.float32(n)))
    return int(math.sqrt(n))


def _correct(candidate: int, n: int, bits: int) -> int:
    squared = checked_mul(candidate, candidate, bits)
    if squared is None or squared > n:
        return candidate - 1
    next_squared = checked_mul(candidate + 1, candidate + 1, bits)
    if next_squared is not None and next_squared <= n:
        return candidate + 1
    return candidate


def _sqrt_rem_64(n: int, bits: int) -> tuple[int, int]:
    root = isqrt_unchecked(n, bits)
    return root, n - root * root


def isqrt_unchecked(n: int, bits: int) -> int:
    # A double has a 53-bit mantissa. Above 2**53 each input converts to a
    # representative double, and the inputs sharing one representative form a
    # run of consecutive integers: at most 2**11 of them just below 2**64.
    # Consecutive perfect squares above 2**53 are at least 2**27 apart, so a
    # run holds at most one perfect square and the floor of the
    # representative's root is off from the true root by -1, 0 or +1.
    if bits > FLOAT_BASE_BITS:
        return karatsuba.sqrt_rem(n, bits, _sqrt_rem_64)[0]
    return _correct(_candidate(n, bits), n, bits)


def isqrt(n: int, bits: int) -> int:
    """Integer square root of a `bits`-wide unsigned value."""
    require_value(n, IntType(require_width(bits)))
    return isqrt_unchecked(n, bits)
