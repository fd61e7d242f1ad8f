"""`fixed_isqrt`: exact integer square roots of 8- to 128-bit integers.

Several independently-correct engines compute the same function
``floor(sqrt(n))`` for every representable input:
- `Engine.BINARY`: digit-by-digit shift-and-subtract (no table, no division),
- `Engine.FLOATING`: hardware float root plus an overflow-checked integer correction,
- `Engine.KARATSUBA`: recursive Karatsuba square root over an 8-bit table,
- `Engine.KARATSUBA_STAGED`: the same identity applied iteratively.

Everything is pure and integer-valued; the only shared data is the
read-only base-case table built at import time.

Public API:
- `isqrt(n, bits, engine) -> int` (unsigned)
- `checked_isqrt(n, bits, engine) -> int | None` (signed)
- `signed_isqrt(n, bits, engine) -> int` (signed, raises on negative input)
- `UnsignedIsqrt` / `SignedIsqrt` width-bound kernels and `ISQRT_U8` ... `ISQRT_I128`
"""

from .api import (
    ISQRT_I8,
    ISQRT_I16,
    ISQRT_I32,
    ISQRT_I64,
    ISQRT_I128,
    ISQRT_U8,
    ISQRT_U16,
    ISQRT_U32,
    ISQRT_U64,
    ISQRT_U128,
    SignedIsqrt,
    UnsignedIsqrt,
)
from .dispatch import isqrt
from .errors import IsqrtDomainError, IsqrtError, IsqrtRangeError
from .karatsuba import isqrt_with_remainder
from .signed import checked_isqrt
from .signed import isqrt as signed_isqrt
from .types import DEFAULT_ENGINE, SUPPORTED_WIDTHS, Engine, IntType, PartialRootRemainder

__version__ = "0.1.0"

__all__ = [
    "isqrt",
    "checked_isqrt",
    "signed_isqrt",
    "isqrt_with_remainder",
    "UnsignedIsqrt",
    "SignedIsqrt",
    "ISQRT_U8",
    "ISQRT_U16",
    "ISQRT_U32",
    "ISQRT_U64",
    "ISQRT_U128",
    "ISQRT_I8",
    "ISQRT_I16",
    "ISQRT_I32",
    "ISQRT_I64",
    "ISQRT_I128",
    "Engine",
    "DEFAULT_ENGINE",
    "SUPPORTED_WIDTHS",
    "IntType",
    "PartialRootRemainder",
    "IsqrtError",
    "IsqrtDomainError",
    "IsqrtRangeError",
]
