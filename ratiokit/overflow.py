"""Overflow-checked arithmetic on 64-bit signed integers.

Every function takes and returns values in the range of a signed 64-bit
integer and raises :class:`RatioOverflowError` when a result would fall
outside that range.
"""

from __future__ import annotations

import math
import operator

__all__ = [
    "INTMAX_MAX",
    "INTMAX_MIN",
    "RatioOverflowError",
    "sign",
    "checked_add",
    "checked_sub",
    "checked_mul",
    "checked_div",
    "gcd",
    "lcm",
]

INTMAX_MAX = 2**63 - 1
INTMAX_MIN = -(2**63)


class RatioOverflowError(OverflowError):
    """Raised when an integer operation leaves the 64-bit signed range."""


def _intmax(value, what: str = "value") -> int:
    """Return ``value`` as an int, checking it fits in 64 signed bits."""
    number = operator.index(value)
    if not INTMAX_MIN <= number <= INTMAX_MAX:
        raise RatioOverflowError(f"{what} {number} is out of range")
    return number


def sign(x) -> int:
    """Return -1, 0 or 1 according to the sign of ``x``."""
    x = _intmax(x)
    return (x > 0) - (x < 0)


def checked_add(x, y) -> int:
    """Return ``x + y``, raising if the sum overflows."""
    x = _intmax(x, "operand")
    y = _intmax(y, "operand")
    if y > 0 and x > INTMAX_MAX - y:
        raise RatioOverflowError(f"overflow in addition: {x} + {y}")
    if y < 0 and x < INTMAX_MIN - y:
        raise RatioOverflowError(f"overflow in addition: {x} + {y}")
    return x + y


def checked_sub(x, y) -> int:
    """Return ``x - y``, raising if the difference overflows."""
    x = _intmax(x, "operand")
    y = _intmax(y, "operand")
    if y > 0 and x < INTMAX_MIN + y:
        raise RatioOverflowError(f"overflow in subtraction: {x} - {y}")
    if y < 0 and x > INTMAX_MAX + y:
        raise RatioOverflowError(f"overflow in subtraction: {x} - {y}")
    return x - y


def checked_mul(x, y) -> int:
    """Return ``x * y``, raising if the product overflows.

    The most negative value is rejected as an operand unless the other
    operand is zero, since its magnitude is not representable.
    """
    x = _intmax(x, "operand")
    y = _intmax(y, "operand")
    if x == 0 or y == 0:
        return 0
    if x == INTMAX_MIN or y == INTMAX_MIN:
        raise RatioOverflowError(f"overflow in multiplication: {x} * {y}")
    if abs(x) > INTMAX_MAX // abs(y):
        raise RatioOverflowError(f"overflow in multiplication: {x} * {y}")
    return x * y


def checked_div(x, y) -> int:
    """Return ``x / y`` truncated toward zero.

    Raises :class:`ZeroDivisionError` when ``y`` is zero and
    :class:`RatioOverflowError` when either operand is the most negative value.
    """
    x = _intmax(x, "operand")
    y = _intmax(y, "operand")
    if x == INTMAX_MIN or y == INTMAX_MIN:
        raise RatioOverflowError(f"overflow in division: {x} / {y}")
    if y == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def gcd(a, b) -> int:
    """Return the non-negative greatest common divisor of ``a`` and ``b``."""
    return math.gcd(_intmax(a, "operand"), _intmax(b, "operand"))


def lcm(a, b) -> int:
    """Return the non-negative least common multiple of ``a`` and ``b``.

    The result is zero when either operand is zero.
    """
    a = _intmax(a, "operand")
    b = _intmax(b, "operand")
    if a == 0 or b == 0:
        return 0
    return abs(checked_mul(a // math.gcd(a, b), b))