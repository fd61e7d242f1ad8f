"""Recursive Karatsuba square root.

Implements the divide-and-conquer square root from P. Zimmermann, "Karatsuba
Square Root" (INRIA RR-3805):
<https://inria.hal.science/inria-00072854v1/file/RR-3805.pdf>

A `bits`-wide input is normalized so that its top two bits are not both zero,
split into halves, and the root and remainder of the upper half (computed one
width down, bottoming out in the 8-bit table) are combined with the lower half
using a single division. Recursion depth is fixed per width: log2(bits / 8).

`sqrt_rem` takes the half-width root provider as an argument so the same
combination step serves other engines (the floating engine uses it at 128
bits over its 64-bit float root).
"""

from __future__ import annotations

from typing import Callable

from .arith import leading_zeros, mask, overflowing_sub, require_value, wrapping_add
from .table import BASE_CASE_BITS, ISQRT_AND_REMAINDER_8_BIT, sqrt_rem_packed
from .types import IntType, PartialRootRemainder, require_width

# (value, bits) -> (root, remainder) of a `bits`-wide value
HalfSqrtRem = Callable[[int, int], tuple[int, int]]


def combine(n: int, bits: int, half_sqrt_rem: HalfSqrtRem) -> tuple[int, int]:
    """One Karatsuba step on a normalized input (top two bits not both zero).

    Returns ``(s, r)`` with ``n == s*s + r`` and ``0 <= r <= 2*s``.
    """
    half_bits = bits >> 1
    quarter_bits = bits >> 2

    hi = n >> half_bits
    lo = n & mask(half_bits)

    s_prime, r_prime = half_sqrt_rem(hi, half_bits)

    numerator = (r_prime << quarter_bits) | (lo >> quarter_bits)
    denominator = s_prime << 1
    q, u = divmod(numerator, denominator)

    s = (s_prime << quarter_bits) + q
    r, borrow = overflowing_sub((u << quarter_bits) | (lo & mask(quarter_bits)), q * q, bits)
    if borrow:
        r = wrapping_add(r, (s << 1) - 1, bits)
        s -= 1
    return s, r


def sqrt_rem(n: int, bits: int, half_sqrt_rem: HalfSqrtRem) -> tuple[int, int]:
    """Root and remainder of a `bits`-wide value via one Karatsuba step."""
    half_bits = bits >> 1

    zeros = leading_zeros(n, bits)
    if zeros >= half_bits:
        return half_sqrt_rem(n, half_bits)

    # Either the most significant bit or its neighbour must be set.
    precondition_shift = zeros & (half_bits - 2)
    s, r = combine(n << precondition_shift, bits, half_sqrt_rem)
    if precondition_shift == 0:
        return s, r

    # The root scales exactly by half the shift; the remainder does not.
    root = s >> (precondition_shift >> 1)
    return root, n - root * root


def _sqrt_rem(n: int, bits: int) -> tuple[int, int]:
    if bits == BASE_CASE_BITS:
        return sqrt_rem_packed(n)
    return sqrt_rem(n, bits, _sqrt_rem)


def isqrt_unchecked(n: int, bits: int) -> int:
    if bits == BASE_CASE_BITS:
        return ISQRT_AND_REMAINDER_8_BIT[n][0]

    half_bits = bits >> 1
    zeros = leading_zeros(n, bits)
    if zeros >= half_bits:
        return isqrt_unchecked(n, half_bits)

    precondition_shift = zeros & (half_bits - 2)
    s, _ = combine(n << precondition_shift, bits, _sqrt_rem)
    return s >> (precondition_shift >> 1)


def isqrt(n: int, bits: int) -> int:
    """Integer square root of a `bits`-wide unsigned value."""
    require_value(n, IntType(require_width(bits)))
    return isqrt_unchecked(n, bits)


def isqrt_with_remainder(n: int, bits: int) -> PartialRootRemainder:
    """``(root, remainder)`` of a `bits`-wide unsigned value."""
    require_value(n, IntType(require_width(bits)))
    return PartialRootRemainder(*_sqrt_rem(n, bits))
