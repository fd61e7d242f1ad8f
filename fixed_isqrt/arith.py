"""Fixed-width arithmetic helpers.

Every function is stateless and operates on plain Python ints, emulating the
wrapping / checked / overflowing operations of a `bits`-wide unsigned
register. Python ints never overflow on their own, so overflow has to be made
explicit here: a checked operation returns ``None`` and an overflowing one
returns ``(wrapped, overflowed)``.
"""

from __future__ import annotations

from .errors import IsqrtRangeError
from .types import IntType


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_value(value: int, int_type: IntType, *, name: str = "n") -> int:
    """Validate that *value* is an int representable in *int_type*."""
    require_int(name, value)
    if not int_type.contains(value):
        raise IsqrtRangeError(value, int_type.name)
    return value


# -- Bit helpers --------------------------------------------------------------

def mask(bits: int) -> int:
    """All-ones value of width *bits*."""
    return (1 << bits) - 1


def leading_zeros(n: int, bits: int) -> int:
    """Number of leading zero bits of *n* in a `bits`-wide register."""
    return bits - n.bit_length()


def ilog2(n: int) -> int:
    """Floor of log2(n) for n > 0."""
    if n <= 0:
        raise ValueError("ilog2 argument must be positive")
    return n.bit_length() - 1


# -- Overflow-aware operations -------------------------------------------------

def checked_mul(a: int, b: int, bits: int) -> int | None:
    """Product of *a* and *b*, or None when it does not fit in *bits*."""
    product = a * b
    if product > mask(bits):
        return None
    return product


def overflowing_sub(a: int, b: int, bits: int) -> tuple[int, bool]:
    """``a - b`` wrapped to *bits*, and whether a borrow occurred."""
    diff = a - b
    return diff & mask(bits), diff < 0


def wrapping_add(a: int, b: int, bits: int) -> int:
    return (a + b) & mask(bits)


# -- Root bounds ---------------------------------------------------------------

def max_root(bits: int) -> int:
    """Largest possible root of a `bits`-wide unsigned value."""
    return mask(bits >> 1)


def is_floor_root(root: int, n: int, bits: int) -> bool:
    """True when ``root*root <= n`` and ``(root+1)**2`` overflows or exceeds n."""
    if root < 0:
        return False
    squared = checked_mul(root, root, bits)
    if squared is None or squared > n:
        return False
    next_squared = checked_mul(root + 1, root + 1, bits)
    return next_squared is None or next_squared > n
