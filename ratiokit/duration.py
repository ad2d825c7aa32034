"""Time durations: a count of ticks of a rational period.

A :class:`Duration` pairs a tick count held in a :class:`~ratiokit.traits.Rep`
with a period in seconds given as a :class:`~ratiokit.ratio.Ratio`. Mixed
operands are combined in their common duration: the greatest common divisor
of the periods and the common representation. Implicit conversions (the
constructor and :meth:`Duration.convert`) refuse to lose information, while
:func:`duration_cast` converts anything, truncating toward zero.
"""

from __future__ import annotations

import math
import numbers
from fractions import Fraction

from ratiokit.ratio import MICRO, MILLI, NANO, Ratio, ratio_divide, ratio_gcd
from ratiokit.traits import (
    INT64,
    INT_LEAST32,
    INT_LEAST64,
    INTMAX,
    Rep,
    common_rep,
    rep_of,
    treat_as_floating_point,
)

__all__ = [
    "Duration",
    "duration_cast",
    "common_duration",
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
]

_SECOND = Ratio(1)
_MINUTE = Ratio(60)
_HOUR = Ratio(3600)


def _check_period(period) -> Ratio:
    if not isinstance(period, Ratio):
        raise TypeError(f"a duration period must be a Ratio, not {type(period).__name__}")
    if period.num <= 0:
        raise ValueError("duration period must be positive")
    return period


def _check_rep(rep) -> Rep:
    if not isinstance(rep, Rep):
        raise TypeError(f"a duration representation must be a Rep, not {type(rep).__name__}")
    return rep


def _divide(rep: Rep, a, b):
    """Divide in ``rep``: truncating for integers, IEEE semantics for floats."""
    if rep.is_floating:
        a = float(a)
        b = float(b)
        if b == 0.0:
            if a == 0.0 or math.isnan(a):
                return rep.convert(math.nan)
            return rep.convert(math.copysign(math.inf, a) * math.copysign(1.0, b))
        return rep.convert(a / b)
    if b == 0:
        raise ZeroDivisionError("integer duration division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return rep.convert(quotient)


def _remainder(rep: Rep, a, b):
    """Remainder in ``rep`` taking the sign of the dividend."""
    if rep.is_floating:
        raise TypeError("modulo needs an integer representation")
    if b == 0:
        raise ZeroDivisionError("integer duration modulo by zero")
    remainder = abs(a) % abs(b)
    if a < 0:
        remainder = -remainder
    return rep.convert(remainder)


def _scalar_rep(value):
    """Return the representation of a scalar operand, or None if it is not one."""
    if isinstance(value, Duration):
        return None
    try:
        return rep_of(value)
    except TypeError:
        return None


class Duration:
    """An immutable count of ticks, each ``period`` seconds long."""

    __slots__ = ("_count", "_period", "_rep")

    def __init__(self, count=0, period=_SECOND, rep=INT64):
        period = _check_period(period)
        rep = _check_rep(rep)
        if isinstance(count, Duration):
            exact = ratio_divide(count.period, period).den == 1
            if not (treat_as_floating_point(rep) or (exact and not treat_as_floating_point(count.rep))):
                raise TypeError(
                    f"converting {count!r} to period {period!r} with {rep!r} may lose information"
                )
            value = duration_cast(count, period, rep).count
        elif isinstance(count, numbers.Real):
            if not isinstance(count, numbers.Integral) and not rep.is_floating:
                raise TypeError("a non-integral count needs a floating point representation")
            value = rep.convert(count)
        else:
            raise TypeError(f"cannot make a duration from {type(count).__name__}")
        self._count = value
        self._period = period
        self._rep = rep

    @classmethod
    def _make(cls, count, period: Ratio, rep: Rep) -> Duration:
        result = object.__new__(cls)
        result._count = count
        result._period = period
        result._rep = rep
        return result

    @property
    def count(self):
        """The number of ticks."""
        return self._count

    @property
    def period(self) -> Ratio:
        """The length of one tick in seconds."""
        return self._period

    @property
    def rep(self) -> Rep:
        """The representation the count is held in."""
        return self._rep

    def convert(self, period=None, rep=None) -> Duration:
        """Convert to another period or representation without losing information.

        Raises :class:`TypeError` when the conversion could truncate.
        """
        return Duration(
            self,
            self._period if period is None else period,
            self._rep if rep is None else rep,
        )

    @classmethod
    def zero(cls, period=_SECOND, rep=INT64) -> Duration:
        """Return the zero duration of the given type."""
        return cls._make(_check_rep(rep).zero(), _check_period(period), rep)

    @classmethod
    def min(cls, period=_SECOND, rep=INT64) -> Duration:
        """Return the most negative duration of the given type."""
        return cls._make(_check_rep(rep).min(), _check_period(period), rep)

    @classmethod
    def max(cls, period=_SECOND, rep=INT64) -> Duration:
        """Return the largest duration of the given type."""
        return cls._make(_check_rep(rep).max(), _check_period(period), rep)

    def __pos__(self):
        return self

    def __neg__(self):
        return Duration._make(self._rep.convert(-self._count), self._period, self._rep)

    def _common(self, other: Duration):
        period, rep = common_duration(self, other)
        if self._period == other._period and self._rep == other._rep:
            return self._count, other._count, period, rep
        return (
            duration_cast(self, period, rep).count,
            duration_cast(other, period, rep).count,
            period,
            rep,
        )

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, period, rep = self._common(other)
        return Duration._make(rep.convert(a + b), period, rep)

    def __sub__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, period, rep = self._common(other)
        return Duration._make(rep.convert(a - b), period, rep)

    def __mul__(self, other):
        other_rep = _scalar_rep(other)
        if other_rep is None:
            return NotImplemented
        rep = common_rep(self._rep, other_rep)
        value = rep.convert(rep.convert(self._count) * rep.convert(other))
        return Duration._make(value, self._period, rep)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Duration):
            a, b, _, rep = self._common(other)
            return _divide(rep, a, b)
        other_rep = _scalar_rep(other)
        if other_rep is None:
            return NotImplemented
        rep = common_rep(self._rep, other_rep)
        value = _divide(rep, rep.convert(self._count), rep.convert(other))
        return Duration._make(value, self._period, rep)

    def __rtruediv__(self, other):
        other_rep = _scalar_rep(other)
        if other_rep is None:
            return NotImplemented
        rep = common_rep(other_rep, self._rep)
        return float(_divide(rep, rep.convert(other), rep.convert(self._count)))

    def __mod__(self, other):
        if isinstance(other, Duration):
            a, b, period, rep = self._common(other)
            return Duration._make(_remainder(rep, a, b), period, rep)
        other_rep = _scalar_rep(other)
        if other_rep is None:
            return NotImplemented
        rep = common_rep(self._rep, other_rep)
        value = _remainder(rep, rep.convert(self._count), rep.convert(other))
        return Duration._make(value, self._period, rep)

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, _, _ = self._common(other)
        return a == b

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        a, b, _, _ = self._common(other)
        return a < b

    def __le__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return not other.__lt__(self)

    def __gt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return other.__lt__(self)

    def __ge__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return not self.__lt__(other)

    def __hash__(self):
        if isinstance(self._count, float) and not math.isfinite(self._count):
            return hash(self._count)
        return hash(Fraction(self._count) * self._period.as_fraction())

    def __repr__(self):
        return f"Duration({self._count!r}, {self._period!r}, {self._rep!r})"


def duration_cast(d: Duration, period, rep=None) -> Duration:
    """Convert ``d`` to ``period`` and ``rep``, truncating toward zero.

    The count is scaled in the common representation of both types and the
    widest integer, then cast to ``rep``. ``rep`` defaults to that of ``d``.
    """
    if not isinstance(d, Duration):
        raise TypeError(f"expected a Duration, got {type(d).__name__}")
    period = _check_period(period)
    rep = d.rep if rep is None else _check_rep(rep)
    factor = ratio_divide(d.period, period)
    if factor.num == 1 and factor.den == 1:
        return Duration._make(rep.convert(d.count), period, rep)
    work = common_rep(rep, d.rep, INTMAX)
    value = work.convert(d.count)
    if factor.num != 1:
        value = work.convert(value * work.convert(factor.num))
    if factor.den != 1:
        value = _divide(work, value, work.convert(factor.den))
    return Duration._make(rep.convert(value), period, rep)


def common_duration(d1: Duration, d2: Duration) -> tuple[Ratio, Rep]:
    """Return the ``(period, rep)`` that ``d1`` and ``d2`` combine in."""
    if not isinstance(d1, Duration) or not isinstance(d2, Duration):
        raise TypeError("common_duration needs two durations")
    return ratio_gcd(d1.period, d2.period), common_rep(d1.rep, d2.rep)


def nanoseconds(count) -> Duration:
    """Return a duration of ``count`` nanoseconds."""
    return Duration(count, NANO, INT_LEAST64)


def microseconds(count) -> Duration:
    """Return a duration of ``count`` microseconds."""
    return Duration(count, MICRO, INT_LEAST64)


def milliseconds(count) -> Duration:
    """Return a duration of ``count`` milliseconds."""
    return Duration(count, MILLI, INT_LEAST64)


def seconds(count) -> Duration:
    """Return a duration of ``count`` seconds."""
    return Duration(count, _SECOND, INT_LEAST64)


def minutes(count) -> Duration:
    """Return a duration of ``count`` minutes."""
    return Duration(count, _MINUTE, INT_LEAST32)


def hours(count) -> Duration:
    """Return a duration of ``count`` hours."""
    return Duration(count, _HOUR, INT_LEAST32)