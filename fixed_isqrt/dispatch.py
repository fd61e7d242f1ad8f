"""Engine dispatch for unsigned integer square roots.

The caller names the engine explicitly (see `Engine`); nothing here picks one
on the caller's behalf.
"""

from __future__ import annotations

from . import binary, floating, karatsuba, karatsuba_staged
from .arith import max_root, require_value
from .types import DEFAULT_ENGINE, Engine, IntType, parse_engine, require_width


def isqrt_unchecked(n: int, bits: int, engine: Engine) -> int:
    if engine is Engine.BINARY:
        result = binary.isqrt_unchecked(n)
    elif engine is Engine.FLOATING:
        result = floating.isqrt_unchecked(n, bits)
    elif engine is Engine.KARATSUBA:
        result = karatsuba.isqrt_unchecked(n, bits)
    elif engine is Engine.KARATSUBA_STAGED:
        result = karatsuba_staged.isqrt_unchecked(n, bits)
    else:
        raise ValueError(f"unsupported engine: {engine!r}")

    # Range hint only: stripped under `python -O`.
    assert 0 <= result <= max_root(bits)
    return result


def isqrt(n: int, bits: int, engine: Engine | str = DEFAULT_ENGINE) -> int:
    """Integer square root of a `bits`-wide unsigned value using *engine*."""
    require_value(n, IntType(require_width(bits)))
    return isqrt_unchecked(n, bits, parse_engine(engine))
