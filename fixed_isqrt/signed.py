"""Signed integer square roots, delegating to the unsigned engines.

A non-negative signed value has a clear sign bit, so it is the same number as
its unsigned reinterpretation; the root of a `bits`-wide value fits in
``bits - 1`` bits, so converting it back cannot reach the sign bit either.
"""

from __future__ import annotations

from . import dispatch
from .arith import require_value
from .errors import IsqrtDomainError
from .types import DEFAULT_ENGINE, Engine, IntType, parse_engine, require_width


def checked_isqrt(n: int, bits: int, engine: Engine | str = DEFAULT_ENGINE) -> int | None:
    """Root of a `bits`-wide signed value, or None when *n* is negative."""
    require_value(n, IntType(require_width(bits), signed=True))
    if n < 0:
        return None
    return dispatch.isqrt_unchecked(n, bits, parse_engine(engine))


def isqrt(n: int, bits: int, engine: Engine | str = DEFAULT_ENGINE) -> int:
    """Like `checked_isqrt` but raises on negative input.

    Raises:
        IsqrtDomainError: *n* is negative.
    """
    result = checked_isqrt(n, bits, engine)
    if result is None:
        raise IsqrtDomainError(n)
    return result
