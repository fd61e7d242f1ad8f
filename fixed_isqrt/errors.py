"""Exception types for the integer square root engines.

``IsqrtDomainError`` is raised by the signed ``isqrt()`` for callers that
prefer exceptions over inspecting ``checked_isqrt()`` for ``None``.
"""

from __future__ import annotations


class IsqrtError(Exception):
    """Base class for all errors raised by `fixed_isqrt`."""


class IsqrtDomainError(IsqrtError, ValueError):
    """Raised when the square root of a negative value is requested."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__("argument of integer square root must be non-negative")


class IsqrtRangeError(IsqrtError, ValueError):
    """Raised when an argument is not representable in the requested integer type."""

    def __init__(self, value: int, type_name: str) -> None:
        self.value = value
        self.type_name = type_name
        super().__init__(f"{value} is out of range for {type_name}")
