"""Arithmetic representation types for durations.

A :class:`Rep` describes the numeric type that holds a duration's count:
a signed or unsigned integer of a fixed width, or a binary floating point
type. It knows its limits and how a value is cast into it. Integer casts
truncate toward zero and wrap around the width, as a static cast does.
:func:`common_rep` picks the type that mixed operands are computed in.
"""

from __future__ import annotations

import math
import numbers
import operator
import struct
import sys
from dataclasses import dataclass

from ratiokit.overflow import INTMAX_MAX, INTMAX_MIN, RatioOverflowError

__all__ = [
    "Rep",
    "treat_as_floating_point",
    "common_rep",
    "rep_of",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "FLOAT32",
    "FLOAT64",
    "INT_LEAST32",
    "INT_LEAST64",
    "INTMAX",
]

_INTEGER_WIDTHS = frozenset({8, 16, 32, 64})
_FLOAT_WIDTHS = frozenset({32, 64})
_FLOAT32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]


@dataclass(frozen=True)
class Rep:
    """A numeric representation: integer of some width, or floating point."""

    name: str
    bits: int
    is_floating: bool = False
    signed: bool = True

    def __post_init__(self):
        if self.is_floating:
            if self.bits not in _FLOAT_WIDTHS:
                raise ValueError(f"unsupported floating point width {self.bits}")
            if not self.signed:
                raise ValueError("floating point representations are signed")
        elif self.bits not in _INTEGER_WIDTHS:
            raise ValueError(f"unsupported integer width {self.bits}")

    def __repr__(self):
        return f"Rep({self.name!r})"

    def convert(self, value):
        """Cast ``value`` into this representation.

        Integers truncate fractional values toward zero and wrap modulo
        their width; floats round to their precision, overflowing to an
        infinity of the same sign.
        """
        if not isinstance(value, numbers.Real):
            raise TypeError(f"cannot convert {type(value).__name__} to {self.name}")
        if self.is_floating:
            return self._to_float(value)
        return self._to_integer(value)

    def _to_float(self, value) -> float:
        try:
            result = float(value)
        except OverflowError:
            result = math.copysign(math.inf, value)
        if self.bits == 32 and math.isfinite(result):
            try:
                result = struct.unpack("<f", struct.pack("<f", result))[0]
            except OverflowError:
                result = math.copysign(math.inf, result)
        return result

    def _to_integer(self, value) -> int:
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"cannot convert {value} to {self.name}")
        number = value if isinstance(value, int) else math.trunc(value)
        number = operator.index(number)
        modulus = 1 << self.bits
        number &= modulus - 1
        if self.signed and number >= modulus >> 1:
            number -= modulus
        return number

    def zero(self):
        """Return the zero value of this representation."""
        return 0.0 if self.is_floating else 0

    def min(self):
        """Return the lowest finite value of this representation."""
        if self.is_floating:
            return -self.max()
        if not self.signed:
            return 0
        return -(1 << (self.bits - 1))

    def max(self):
        """Return the largest finite value of this representation."""
        if self.is_floating:
            return _FLOAT32_MAX if self.bits == 32 else sys.float_info.max
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1


INT8 = Rep("int8", 8)
INT16 = Rep("int16", 16)
INT32 = Rep("int32", 32)
INT64 = Rep("int64", 64)
UINT8 = Rep("uint8", 8, signed=False)
UINT16 = Rep("uint16", 16, signed=False)
UINT32 = Rep("uint32", 32, signed=False)
UINT64 = Rep("uint64", 64, signed=False)
FLOAT32 = Rep("float32", 32, is_floating=True)
FLOAT64 = Rep("float64", 64, is_floating=True)

INT_LEAST32 = INT32
INT_LEAST64 = INT64
INTMAX = INT64


def treat_as_floating_point(rep: Rep) -> bool:
    """Return whether durations with this representation convert inexactly."""
    if not isinstance(rep, Rep):
        raise TypeError(f"expected a Rep, got {type(rep).__name__}")
    return rep.is_floating


def _promote(rep: Rep) -> Rep:
    if not rep.is_floating and rep.bits < 32:
        return INT32
    return rep


def _common_pair(a: Rep, b: Rep) -> Rep:
    if a == b:
        return a
    if a.is_floating or b.is_floating:
        floats = [r for r in (a, b) if r.is_floating]
        return max(floats, key=lambda r: r.bits)
    a = _promote(a)
    b = _promote(b)
    if a == b:
        return a
    if a.signed == b.signed:
        return a if a.bits >= b.bits else b
    unsigned, signed = (a, b) if not a.signed else (b, a)
    return unsigned if unsigned.bits >= signed.bits else signed


def common_rep(*args) -> Rep:
    """Return the representation that values of all ``args`` combine into."""
    if not args:
        raise TypeError("common_rep needs at least one representation")
    for rep in args:
        if not isinstance(rep, Rep):
            raise TypeError(f"expected a Rep, got {type(rep).__name__}")
    result = args[0]
    for rep in args[1:]:
        result = _common_pair(result, rep)
    return result


def rep_of(value) -> Rep:
    """Return the natural representation of a Python number.

    Integers map to the 64-bit signed type and floats to 64-bit floating
    point; an integer outside the 64-bit range raises
    :class:`~ratiokit.overflow.RatioOverflowError`.
    """
    if isinstance(value, float):
        return FLOAT64
    if isinstance(value, int):
        if not INTMAX_MIN <= value <= INTMAX_MAX:
            raise RatioOverflowError(f"integer {value} is out of range")
        return INT64
    raise TypeError(f"no representation for {type(value).__name__}")