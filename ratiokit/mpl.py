"""Generic numeric operations over ratios and plain integers.

Each operation accepts :class:`~ratiokit.ratio.Ratio` values or integers.
Integers take part as the ratio ``n / 1``, so mixed operands combine
naturally. Arithmetic returns a :class:`~ratiokit.ratio.Ratio`, comparisons
return ``bool`` and :func:`sign` returns -1, 0 or 1.
"""

from __future__ import annotations

import operator

from ratiokit.ratio import (
    Ratio,
    ratio_abs,
    ratio_add,
    ratio_divide,
    ratio_equal,
    ratio_gcd,
    ratio_greater,
    ratio_greater_equal,
    ratio_lcm,
    ratio_less,
    ratio_less_equal,
    ratio_multiply,
    ratio_negate,
    ratio_not_equal,
    ratio_sign,
    ratio_subtract,
)

__all__ = [
    "to_ratio",
    "plus",
    "minus",
    "times",
    "divides",
    "negate",
    "absolute",
    "sign",
    "gcd",
    "lcm",
    "equal_to",
    "not_equal_to",
    "less",
    "less_equal",
    "greater",
    "greater_equal",
]


def to_ratio(value) -> Ratio:
    """Return ``value`` as a ratio; an integer ``n`` becomes ``n / 1``.

    Raises :class:`TypeError` for anything that is neither a ratio nor an
    integer.
    """
    if isinstance(value, Ratio):
        return value
    try:
        number = operator.index(value)
    except TypeError:
        raise TypeError(
            f"cannot convert {type(value).__name__} to a ratio"
        ) from None
    return Ratio(number, 1)


def plus(a, b) -> Ratio:
    """Return ``a + b``."""
    return ratio_add(to_ratio(a), to_ratio(b))


def minus(a, b) -> Ratio:
    """Return ``a - b``."""
    return ratio_subtract(to_ratio(a), to_ratio(b))


def times(a, b) -> Ratio:
    """Return ``a * b``."""
    return ratio_multiply(to_ratio(a), to_ratio(b))


def divides(a, b) -> Ratio:
    """Return ``a / b``; raises ZeroDivisionError when ``b`` is zero."""
    return ratio_divide(to_ratio(a), to_ratio(b))


def negate(a) -> Ratio:
    """Return ``-a``."""
    return ratio_negate(to_ratio(a))


def absolute(a) -> Ratio:
    """Return ``|a|``."""
    return ratio_abs(to_ratio(a))


def sign(a) -> int:
    """Return -1, 0 or 1 according to the sign of ``a``."""
    return ratio_sign(to_ratio(a))


def gcd(a, b) -> Ratio:
    """Return the largest ratio of which both operands are integer multiples."""
    return ratio_gcd(to_ratio(a), to_ratio(b))


def lcm(a, b) -> Ratio:
    """Return the smallest ratio that is an integer multiple of both operands."""
    return ratio_lcm(to_ratio(a), to_ratio(b))


def equal_to(a, b) -> bool:
    """Return whether ``a == b``."""
    return ratio_equal(to_ratio(a), to_ratio(b))


def not_equal_to(a, b) -> bool:
    """Return whether ``a != b``."""
    return ratio_not_equal(to_ratio(a), to_ratio(b))


def less(a, b) -> bool:
    """Return whether ``a < b``."""
    return ratio_less(to_ratio(a), to_ratio(b))


def less_equal(a, b) -> bool:
    """Return whether ``a <= b``."""
    return ratio_less_equal(to_ratio(a), to_ratio(b))


def greater(a, b) -> bool:
    """Return whether ``a > b``."""
    return ratio_greater(to_ratio(a), to_ratio(b))


def greater_equal(a, b) -> bool:
    """Return whether ``a >= b``."""
    return ratio_greater_equal(to_ratio(a), to_ratio(b))