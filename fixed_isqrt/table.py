"""Base-case table: integer square root and remainder of every 8-bit value.

The table is built once at import time by counting: root ``s`` covers exactly
``2*s + 1`` consecutive values (``s**2 .. (s+1)**2 - 1``), so a single linear
pass with a countdown produces every entry. No floating point and no division
are involved, which keeps the table usable by the constant-safe engines.

Two read-only encodings are provided:
- `ISQRT_AND_REMAINDER_8_BIT`: tuple of ``(root, remainder)`` pairs,
- `PACKED_ISQRT_AND_REMAINDER_8_BIT`: one byte per entry, ``(root & 0b111) << 5 | remainder``.
  The fourth root bit is implied by ``n >= 64`` and the remainder (at most 30)
  fits in five bits.
"""

from __future__ import annotations

from .arith import require_value
from .types import U8, PartialRootRemainder

BASE_CASE_BITS: int = 8

_REMAINDER_BITS = 5
_REMAINDER_MASK = (1 << _REMAINDER_BITS) - 1
_ROOT_LOW_MASK = 0b111


def _build_table() -> tuple[tuple[int, int], ...]:
    entries: list[tuple[int, int]] = []
    root = 0
    remaining = 2 * root + 1
    for _ in range(1 << BASE_CASE_BITS):
        entries.append((root, 2 * root + 1 - remaining))
        remaining -= 1
        if remaining == 0:
            root += 1
            remaining = 2 * root + 1
    return tuple(entries)


def _pack(entries: tuple[tuple[int, int], ...]) -> bytes:
    return bytes(((root & _ROOT_LOW_MASK) << _REMAINDER_BITS) | rem for root, rem in entries)


ISQRT_AND_REMAINDER_8_BIT: tuple[tuple[int, int], ...] = _build_table()
PACKED_ISQRT_AND_REMAINDER_8_BIT: bytes = _pack(ISQRT_AND_REMAINDER_8_BIT)


def isqrt(n: int) -> int:
    """Integer square root of an 8-bit unsigned value."""
    return ISQRT_AND_REMAINDER_8_BIT[require_value(n, U8)][0]


def lookup(n: int) -> PartialRootRemainder:
    """``(root, remainder)`` of an 8-bit unsigned value."""
    root, rem = ISQRT_AND_REMAINDER_8_BIT[require_value(n, U8)]
    return PartialRootRemainder(root, rem)


def sqrt_rem_packed(n: int) -> tuple[int, int]:
    """Decode the packed entry of an 8-bit value (no range check)."""
    entry = PACKED_ISQRT_AND_REMAINDER_8_BIT[n]
    return (int(n >= 64) << 3) | (entry >> _REMAINDER_BITS), entry & _REMAINDER_MASK


def lookup_packed(n: int) -> PartialRootRemainder:
    """Same as `lookup` but decoded from the packed byte table."""
    return PartialRootRemainder(*sqrt_rem_packed(require_value(n, U8)))
