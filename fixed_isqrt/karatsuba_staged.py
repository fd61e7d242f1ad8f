"""Staged (iterative) Karatsuba square root.

Same identity as `karatsuba`, applied bottom-up over a single normalized
input instead of by recursion:

1. normalize once at full width (even left shift),
2. look up the top 8 bits in the base-case table,
3. for each stage width 16, 32, ... up to half the input width, extend the
   running ``(s, r)`` with the next bits of the normalized input,
4. at full width compute only ``s`` and fix it with an overflow-checked square,
5. undo the normalization.
"""

from __future__ import annotations

from .arith import checked_mul, leading_zeros, mask, overflowing_sub, require_value, wrapping_add
from .table import BASE_CASE_BITS, ISQRT_AND_REMAINDER_8_BIT
from .types import IntType, require_width


def _middle_stage(n: int, bits: int, stage_bits: int, s: int, r: int) -> tuple[int, int]:
    top = n >> (bits - stage_bits)
    half_bits = stage_bits >> 1
    quarter_bits = stage_bits >> 2

    lo = top & mask(half_bits)
    numerator = (r << quarter_bits) | (lo >> quarter_bits)
    q, u = divmod(numerator, s << 1)
    next_s = (s << quarter_bits) + q
    next_r, borrow = overflowing_sub((u << quarter_bits) | (lo & mask(quarter_bits)), q * q, stage_bits)
    if borrow:
        next_r = wrapping_add(next_r, 2 * next_s - 1, stage_bits)
        next_s -= 1
    return next_s, next_r


def _last_stage(n: int, bits: int, s: int, r: int) -> int:
    half_bits = bits >> 1
    quarter_bits = bits >> 2

    lo = n & mask(half_bits)
    numerator = (r << quarter_bits) | (lo >> quarter_bits)
    q = numerator // (s << 1)
    root = (s << quarter_bits) + q
    squared = checked_mul(root, root, bits)
    if squared is None or squared > n:
        root -= 1
    return root


def isqrt_unchecked(n: int, bits: int) -> int:
    if n == 0:
        return 0

    precondition_shift = leading_zeros(n, bits) & ~1
    n <<= precondition_shift

    s, r = ISQRT_AND_REMAINDER_8_BIT[n >> (bits - BASE_CASE_BITS)]
    if bits == BASE_CASE_BITS:
        return s >> (precondition_shift >> 1)

    stage_bits = BASE_CASE_BITS << 1
    while stage_bits < bits:
        s, r = _middle_stage(n, bits, stage_bits, s, r)
        stage_bits <<= 1

    return _last_stage(n, bits, s, r) >> (precondition_shift >> 1)


def isqrt(n: int, bits: int) -> int:
    """Integer square root of a `bits`-wide unsigned value."""
    require_value(n, IntType(require_width(bits)))
    return isqrt_unchecked(n, bits)
