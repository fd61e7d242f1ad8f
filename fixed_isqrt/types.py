"""Data types for the fixed-width integer square root engines.

All types are immutable (frozen dataclasses / enums).

Conventions:
- values are plain Python ints; an `IntType` says which range they must lie in,
- `bits` is always one of `SUPPORTED_WIDTHS`,
- a root of a `bits`-wide value always fits in `bits // 2` bits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

SUPPORTED_WIDTHS: tuple[int, ...] = (8, 16, 32, 64, 128)


def require_width(bits: int) -> int:
    if isinstance(bits, bool) or not isinstance(bits, int) or bits not in SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported width: {bits!r} (expected one of {SUPPORTED_WIDTHS})")
    return bits


@unique
class Engine(Enum):
    """One member per unsigned square-root strategy."""
    BINARY = "binary"
    FLOATING = "floating"
    KARATSUBA = "karatsuba"
    KARATSUBA_STAGED = "karatsuba_staged"

    @property
    def const_safe(self) -> bool:
        """True when the engine uses no floating point (usable for constant tables)."""
        return self is not Engine.FLOATING


DEFAULT_ENGINE: Engine = Engine.KARATSUBA


def parse_engine(value: Engine | str) -> Engine:
    """Accept an `Engine` or its string value (``"karatsuba"``)."""
    if isinstance(value, Engine):
        return value
    try:
        return Engine(value)
    except ValueError:
        raise ValueError(f"unknown engine: {value!r}") from None


@dataclass(frozen=True)
class IntType:
    """A two's-complement integer type of a given width and signedness."""

    bits: int
    signed: bool = False

    def __post_init__(self) -> None:
        require_width(self.bits)

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def unsigned(self) -> IntType:
        """Same-width unsigned counterpart."""
        return IntType(self.bits, signed=False)

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return self.name


U8 = IntType(8)
U16 = IntType(16)
U32 = IntType(32)
U64 = IntType(64)
U128 = IntType(128)
I8 = IntType(8, signed=True)
I16 = IntType(16, signed=True)
I32 = IntType(32, signed=True)
I64 = IntType(64, signed=True)
I128 = IntType(128, signed=True)


@dataclass(frozen=True)
class PartialRootRemainder:
    """A root together with its remainder: ``value == root*root + remainder``.

    Produced by the with-remainder Karatsuba variant and the base-case table.
    ``0 <= remainder <= 2*root`` always holds, so `root` is the floor root.
    """

    root: int
    remainder: int

    @property
    def value(self) -> int:
        return self.root * self.root + self.remainder

    def __iter__(self):
        yield self.root
        yield self.remainder
