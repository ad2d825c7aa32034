"""Exact rational constants with overflow-checked 64-bit arithmetic.

A :class:`Ratio` always holds a normalized fraction: the numerator carries
the sign, the denominator is positive and the two share no common factor.
Every arithmetic operation keeps its intermediate values within the range
of a signed 64-bit integer and raises
:class:`~ratiokit.overflow.RatioOverflowError` when it cannot.
"""

from __future__ import annotations

import operator
from fractions import Fraction

from ratiokit.overflow import (
    INTMAX_MAX,
    INTMAX_MIN,
    RatioOverflowError,
    checked_add,
    checked_mul,
    checked_sub,
    gcd,
    lcm,
    sign,
)

__all__ = [
    "Ratio",
    "ratio_add",
    "ratio_subtract",
    "ratio_multiply",
    "ratio_divide",
    "ratio_equal",
    "ratio_not_equal",
    "ratio_less",
    "ratio_less_equal",
    "ratio_greater",
    "ratio_greater_equal",
    "ratio_gcd",
    "ratio_lcm",
    "ratio_negate",
    "ratio_abs",
    "ratio_sign",
    "ratio_inverse",
    "ratio_modulo",
    "ratio_min",
    "ratio_max",
    "ratio_power",
    "is_evenly_divisible_by",
    "ATTO",
    "FEMTO",
    "PICO",
    "NANO",
    "MICRO",
    "MILLI",
    "CENTI",
    "DECI",
    "DECA",
    "HECTO",
    "KILO",
    "MEGA",
    "GIGA",
    "TERA",
    "PETA",
    "EXA",
    "KIBI",
    "MEBI",
    "GIBI",
    "TEBI",
    "PEBI",
    "EXBI",
]


def _component(value, what: str) -> int:
    number = operator.index(value)
    if not INTMAX_MIN < number <= INTMAX_MAX:
        raise RatioOverflowError(f"{what} {number} is out of range")
    return number


class Ratio:
    """An immutable, normalized rational number ``num / den``."""

    __slots__ = ("_num", "_den")

    def __init__(self, num, den=1):
        num = _component(num, "numerator")
        den = _component(den, "denominator")
        if den == 0:
            raise ZeroDivisionError("ratio denominator is zero")
        divisor = gcd(abs(num), abs(den))
        self._num = sign(num) * sign(den) * abs(num) // divisor
        self._den = abs(den) // divisor

    @property
    def num(self) -> int:
        """The numerator, carrying the sign."""
        return self._num

    @property
    def den(self) -> int:
        """The denominator, always positive."""
        return self._den

    def __add__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_subtract(self, other)

    def __mul__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_multiply(self, other)

    def __truediv__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_divide(self, other)

    def __mod__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_modulo(self, other)

    def __neg__(self):
        return ratio_negate(self)

    def __abs__(self):
        return ratio_abs(self)

    def __eq__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_equal(self, other)

    def __lt__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_less(self, other)

    def __le__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_less_equal(self, other)

    def __gt__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_greater(self, other)

    def __ge__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return ratio_greater_equal(self, other)

    def __hash__(self):
        return hash((self._num, self._den))

    def __repr__(self):
        return f"Ratio({self._num}, {self._den})"

    def sign(self) -> int:
        """Return -1, 0 or 1 according to the sign of the ratio."""
        return ratio_sign(self)

    def inverse(self) -> Ratio:
        """Return ``den / num``."""
        return ratio_inverse(self)

    def power(self, p) -> Ratio:
        """Return the ratio raised to the integer power ``p``."""
        return ratio_power(self, p)

    def as_fraction(self) -> Fraction:
        """Return the value as a :class:`fractions.Fraction`."""
        return Fraction(self._num, self._den)


def ratio_multiply(r1: Ratio, r2: Ratio) -> Ratio:
    """Return ``r1 * r2``, cross-reducing before multiplying."""
    g1 = gcd(r1.num, r2.den)
    g2 = gcd(r1.den, r2.num)
    return Ratio(
        checked_mul(r1.num // g1, r2.num // g2),
        checked_mul(r2.den // g1, r1.den // g2),
    )


def _combine(r1: Ratio, r2: Ratio, join) -> Ratio:
    g_n = gcd(r1.num, r2.num)
    g_d = gcd(r1.den, r2.den)
    inner = join(
        checked_mul(r1.num // g_n, r2.den // g_d),
        checked_mul(r2.num // g_n, r1.den // g_d),
    )
    return ratio_multiply(Ratio(g_n, r1.den // g_d), Ratio(inner, r2.den))


def ratio_add(r1: Ratio, r2: Ratio) -> Ratio:
    """Return ``r1 + r2`` without overflowing where avoidable."""
    if r2.num == 0:
        return r1
    return _combine(r1, r2, checked_add)


def ratio_subtract(r1: Ratio, r2: Ratio) -> Ratio:
    """Return ``r1 - r2`` without overflowing where avoidable."""
    if r2.num == 0:
        return r1
    return _combine(r1, r2, checked_sub)


def ratio_divide(r1: Ratio, r2: Ratio) -> Ratio:
    """Return ``r1 / r2``; raises ZeroDivisionError when ``r2`` is zero."""
    if r2.num == 0:
        raise ZeroDivisionError("ratio division by zero")
    g_n = gcd(r1.num, r2.num)
    g_d = gcd(r1.den, r2.den)
    return Ratio(
        checked_mul(r1.num // g_n, r2.den // g_d),
        checked_mul(r2.num // g_n, r1.den // g_d),
    )


def ratio_equal(r1: Ratio, r2: Ratio) -> bool:
    """Return whether the two ratios are equal."""
    return r1.num == r2.num and r1.den == r2.den


def ratio_not_equal(r1: Ratio, r2: Ratio) -> bool:
    """Return whether the two ratios differ."""
    return not ratio_equal(r1, r2)


def ratio_less(r1: Ratio, r2: Ratio) -> bool:
    """Return whether ``r1 < r2``."""
    return r1.num * r2.den < r2.num * r1.den


def ratio_less_equal(r1: Ratio, r2: Ratio) -> bool:
    """Return whether ``r1 <= r2``."""
    return not ratio_less(r2, r1)


def ratio_greater(r1: Ratio, r2: Ratio) -> bool:
    """Return whether ``r1 > r2``."""
    return ratio_less(r2, r1)


def ratio_greater_equal(r1: Ratio, r2: Ratio) -> bool:
    """Return whether ``r1 >= r2``."""
    return not ratio_less(r1, r2)


def ratio_gcd(r1: Ratio, r2: Ratio) -> Ratio:
    """Return the largest ratio of which both are integer multiples."""
    return Ratio(gcd(r1.num, r2.num), lcm(r1.den, r2.den))


def ratio_lcm(r1: Ratio, r2: Ratio) -> Ratio:
    """Return the smallest ratio that is an integer multiple of both."""
    return Ratio(lcm(r1.num, r2.num), gcd(r1.den, r2.den))


def ratio_negate(r: Ratio) -> Ratio:
    """Return ``-r``."""
    return Ratio(-r.num, r.den)


def ratio_abs(r: Ratio) -> Ratio:
    """Return ``|r|``."""
    return Ratio(abs(r.num), r.den)


def ratio_sign(r: Ratio) -> int:
    """Return -1, 0 or 1 according to the sign of ``r``."""
    return sign(r.num)


def ratio_inverse(r: Ratio) -> Ratio:
    """Return ``1 / r``; raises ZeroDivisionError when ``r`` is zero."""
    return Ratio(r.den, r.num)


def ratio_modulo(r1: Ratio, r2: Ratio) -> Ratio:
    """Return the remainder of ``r1 / r2``, taking the sign of ``r1``."""
    dividend = checked_mul(r1.num, r2.den)
    divisor = checked_mul(r2.num, r1.den)
    if divisor == 0:
        raise ZeroDivisionError("ratio modulo by zero")
    remainder = abs(dividend) % abs(divisor)
    if dividend < 0:
        remainder = -remainder
    return Ratio(remainder, checked_mul(r1.den, r2.den))


def ratio_min(r1: Ratio, r2: Ratio) -> Ratio:
    """Return the smaller ratio, ``r2`` when they are equal."""
    return r1 if ratio_less(r1, r2) else r2


def ratio_max(r1: Ratio, r2: Ratio) -> Ratio:
    """Return the larger ratio, ``r1`` when they are equal."""
    return r2 if ratio_less(r1, r2) else r1


def ratio_power(r: Ratio, p) -> Ratio:
    """Return ``r`` raised to the integer power ``p`` by repeated squaring."""
    p = operator.index(p)
    if p == 0:
        return Ratio(1)
    if p == 1:
        return r
    if p == -1:
        return ratio_divide(Ratio(1), r)
    half = -(-p // 2) if p < 0 else p // 2
    rest = p - 2 * half
    return ratio_multiply(ratio_power(r, rest), ratio_power(ratio_multiply(r, r), half))


def is_evenly_divisible_by(r1: Ratio, r2: Ratio) -> bool:
    """Return whether ``r1 / r2`` is an integer."""
    g_n = gcd(r1.num, r2.num)
    g_d = gcd(r1.den, r2.den)
    return r2.num // g_n == 1 and r1.den // g_d == 1


ATTO = Ratio(1, 10**18)
FEMTO = Ratio(1, 10**15)
PICO = Ratio(1, 10**12)
NANO = Ratio(1, 10**9)
MICRO = Ratio(1, 10**6)
MILLI = Ratio(1, 10**3)
CENTI = Ratio(1, 100)
DECI = Ratio(1, 10)
DECA = Ratio(10)
HECTO = Ratio(100)
KILO = Ratio(10**3)
MEGA = Ratio(10**6)
GIGA = Ratio(10**9)
TERA = Ratio(10**12)
PETA = Ratio(10**15)
EXA = Ratio(10**18)

KIBI = Ratio(1024)
MEBI = Ratio(1024**2)
GIBI = Ratio(1024**3)
TEBI = Ratio(1024**4)
PEBI = Ratio(1024**5)
EXBI = Ratio(1024**6)