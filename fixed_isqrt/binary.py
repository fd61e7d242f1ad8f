"""Binary digit-by-digit square root.

Classical shift-and-subtract method (long division on base-4 digits), see
<https://en.wikipedia.org/wiki/Methods_of_computing_square_roots#Binary_numeral_system_(base_2)>.
It needs no table, no division and no floating point, which makes it the
reference engine every other engine is checked against.
"""

from __future__ import annotations

from .arith import ilog2, require_value
from .types import IntType, require_width


def isqrt_unchecked(n: int) -> int:
    if n < 2:
        return n

    op = n
    res = 0
    one = 1 << (ilog2(n) & ~1)

    while one != 0:
        if op >= res + one:
            op -= res + one
            res = (res >> 1) + one
        else:
            res >>= 1
        one >>= 2

    return res


def isqrt(n: int, bits: int) -> int:
    """Integer square root of a `bits`-wide unsigned value."""
    require_value(n, IntType(require_width(bits)))
    return isqrt_unchecked(n)
