"""Width-bound square root kernels.

`UnsignedIsqrt` and `SignedIsqrt` bind a width and an engine once so callers
can pass them around instead of threading ``(bits, engine)`` through every
call::

    ISQRT_U64.isqrt(2**64 - 1)          # 4294967295
    ISQRT_I32.checked_isqrt(-1)         # None
    UnsignedIsqrt(128, Engine.BINARY).isqrt(n)
"""

from __future__ import annotations

from dataclasses import dataclass

from . import dispatch, signed
from .types import DEFAULT_ENGINE, Engine, IntType, parse_engine, require_width


@dataclass(frozen=True)
class UnsignedIsqrt:
    bits: int
    engine: Engine = DEFAULT_ENGINE

    def __post_init__(self) -> None:
        require_width(self.bits)
        object.__setattr__(self, "engine", parse_engine(self.engine))

    @property
    def int_type(self) -> IntType:
        return IntType(self.bits)

    def isqrt(self, n: int) -> int:
        return dispatch.isqrt(n, self.bits, self.engine)


@dataclass(frozen=True)
class SignedIsqrt:
    bits: int
    engine: Engine = DEFAULT_ENGINE

    def __post_init__(self) -> None:
        require_width(self.bits)
        object.__setattr__(self, "engine", parse_engine(self.engine))

    @property
    def int_type(self) -> IntType:
        return IntType(self.bits, signed=True)

    @property
    def unsigned(self) -> UnsignedIsqrt:
        return UnsignedIsqrt(self.bits, self.engine)

    def checked_isqrt(self, n: int) -> int | None:
        return signed.checked_isqrt(n, self.bits, self.engine)

    def isqrt(self, n: int) -> int:
        return signed.isqrt(n, self.bits, self.engine)


ISQRT_U8 = UnsignedIsqrt(8)
ISQRT_U16 = UnsignedIsqrt(16)
ISQRT_U32 = UnsignedIsqrt(32)
ISQRT_U64 = UnsignedIsqrt(64)
ISQRT_U128 = UnsignedIsqrt(128)
ISQRT_I8 = SignedIsqrt(8)
ISQRT_I16 = SignedIsqrt(16)
ISQRT_I32 = SignedIsqrt(32)
ISQRT_I64 = SignedIsqrt(64)
ISQRT_I128 = SignedIsqrt(128)
