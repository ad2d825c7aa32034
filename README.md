# ratiokit

ratiokit provides exact rational ratios. Their numerators and denominators
stay inside the signed 64-bit range. When a result would leave that range,
the library raises an error instead of quietly widening the number. Built on
these ratios are generic arithmetic helpers and durations. A duration carries
its period, which is a ratio of seconds, and a representation type.

## Install

From a checkout of the project:

```
pip install .
```

## Ratios

`ratiokit.ratio.Ratio` is an immutable fraction. It is always kept in lowest
terms, its denominator is always positive, and the sign sits on the
numerator. A zero denominator raises `ZeroDivisionError`.

```python
from ratiokit.ratio import Ratio, ratio_add

five_thirds = Ratio(25, 15)
assert (five_thirds.num, five_thirds.den) == (5, 3)

assert ratio_add(Ratio(1, 2), Ratio(1, 3)) == Ratio(5, 6)
assert Ratio(-1, 2) < Ratio(1, 2)
assert Ratio(2, 3).power(-2) == Ratio(9, 4)
assert Ratio(1, -2).sign() == -1
```

`Ratio` supports these operators with another `Ratio`: `+`, `-`, `*`, `/`,
`%`, unary `-`, `abs()`, and all the comparisons. It also provides `sign()`,
`inverse()`, `power(p)` and `as_fraction()`. The last one returns a
`fractions.Fraction`.

The module also offers the same operations as plain functions:

* arithmetic: `ratio_add`, `ratio_subtract`, `ratio_multiply`,
  `ratio_divide`, `ratio_modulo`, `ratio_negate`, `ratio_abs`,
  `ratio_inverse` and `ratio_power`;
* comparison: `ratio_equal`, `ratio_not_equal`, `ratio_less`,
  `ratio_less_equal`, `ratio_greater` and `ratio_greater_equal`;
* other helpers: `ratio_gcd`, `ratio_lcm`, `ratio_sign`, `ratio_min`,
  `ratio_max` and `is_evenly_divisible_by`.

Ready-made constants are provided for prefixes:

* SI prefixes: `ATTO`, `FEMTO`, `PICO`, `NANO`, `MICRO`, `MILLI`, `CENTI`,
  `DECI`, `DECA`, `HECTO`, `KILO`, `MEGA`, `GIGA`, `TERA`, `PETA` and `EXA`;
* binary prefixes: `KIBI`, `MEBI`, `GIBI`, `TEBI`, `PEBI` and `EXBI`.

Addition, subtraction, multiplication and division first reduce their
operands by common factors. This avoids overflow wherever it can be avoided.
If a value still does not fit in 64 bits, they raise
`ratiokit.overflow.RatioOverflowError`, which is a subclass of
`OverflowError`:

```python
from ratiokit.overflow import RatioOverflowError

try:
    Ratio(2**63 - 1, 1) * Ratio(2, 1)
except RatioOverflowError:
    ...
```

`ratiokit.overflow` also provides the checked integer primitives on their
own: `checked_add`, `checked_sub`, `checked_mul` and `checked_div`. It also
has `sign`, `gcd` and `lcm`, and the limits `INTMAX_MIN` and `INTMAX_MAX`.

## Generic arithmetic

The functions in `ratiokit.mpl` accept ratios and plain integers alike. An
integer `n` is turned into `n / 1` by `to_ratio`.

```python
from ratiokit import mpl
from ratiokit.ratio import Ratio

assert mpl.plus(Ratio(1, 2), 1) == Ratio(3, 2)
assert mpl.sign(Ratio(1, -2)) == -1
assert mpl.greater_equal(Ratio(1, 1), Ratio(1, -1))
```

The module also has:

* arithmetic: `minus`, `times`, `divides`, `negate`, `absolute`, `gcd` and
  `lcm`;
* comparison: `equal_to`, `not_equal_to`, `less` and `less_equal`.

## Representation types

`ratiokit.traits.Rep` describes the numeric type that holds a duration's
count. The predefined types are:

* signed integers: `INT8`, `INT16`, `INT32` and `INT64`;
* unsigned integers: `UINT8`, `UINT16`, `UINT32` and `UINT64`;
* floating point: `FLOAT32` and `FLOAT64`;
* aliases: `INT_LEAST32`, `INT_LEAST64` and `INTMAX`.

A `Rep` has these methods:

* `convert(value)` casts a value into the type. Integer types truncate
  toward zero and wrap around their width. Floating point types round to
  their precision.
* `zero()`, `min()` and `max()` give the type's zero and limits.

The module also has three functions:

* `treat_as_floating_point(rep)` tells whether a type is floating point;
* `common_rep(*reps)` picks the type that mixed operands are computed in;
* `rep_of(value)` maps a Python `int` to `INT64` and a `float` to `FLOAT64`.

## Durations

`ratiokit.duration.Duration(count, period, rep)` is a count of ticks, where
each tick lasts `period` seconds. The helpers `nanoseconds`, `microseconds`,
`milliseconds` and `seconds` hold their count in a 64-bit integer. `minutes`
and `hours` use a 32-bit integer.

```python
from ratiokit.duration import duration_cast, milliseconds, minutes, seconds

total = seconds(3) + milliseconds(250)
assert total.count == 3250

assert duration_cast(total, minutes(0).period, minutes(0).rep).count == 0
assert seconds(60) == minutes(1)
```

Operations that mix two durations are computed in their common type.
`common_duration(d1, d2)` returns that type as a `(period, rep)` pair: the
period is the greatest common divisor of the two periods, and the rep is the
common representation of the two. Durations with different periods can
therefore be added, subtracted, compared and divided. Dividing one duration
by another gives a plain number.

There are two ways to change the period or representation of a duration:

* `Duration.convert` and the `Duration` constructor accept only conversions
  that lose no information. Any other conversion raises `TypeError`.
* `duration_cast(d, period, rep)` converts anything, truncating toward zero.

`Duration.zero`, `Duration.min` and `Duration.max` give the special values of
a duration type.

## What it does not do

ratiokit has no text names or symbols for prefixes. For example, it does not
turn `KILO` into `"kilo"` or `"k"`. It has no clocks or time points, and it
installs no command-line tool.

## Tests

```
pip install ".[test]"
pytest
```