import math
import sys

import pytest

from ratiokit.overflow import INTMAX_MAX, INTMAX_MIN, RatioOverflowError
from ratiokit.traits import (
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    INT_LEAST32,
    INTMAX,
    UINT32,
    UINT64,
    UINT8,
    Rep,
    common_rep,
    rep_of,
    treat_as_floating_point,
)


@pytest.mark.parametrize(
    "rep, expected",
    [(INT8, False), (INT64, False), (UINT32, False), (FLOAT32, True), (FLOAT64, True)],
)
def test_treat_as_floating_point(rep, expected):
    assert treat_as_floating_point(rep) is expected


def test_treat_as_floating_point_rejects_non_rep():
    with pytest.raises(TypeError):
        treat_as_floating_point(int)


def test_int64_limits_match_intmax():
    assert INT64.max() == INTMAX_MAX
    assert INT64.min() == INTMAX_MIN
    assert INTMAX == INT64


def test_signed_limits_are_twos_complement():
    for rep in (INT8, INT16, INT32, INT64):
        assert rep.min() == -rep.max() - 1


def test_unsigned_limits():
    for rep in (UINT8, UINT32, UINT64):
        assert rep.min() == 0
        assert rep.convert(rep.max() + 1) == 0


def test_float_limits_are_symmetric():
    assert FLOAT64.max() == sys.float_info.max
    assert FLOAT64.min() == -sys.float_info.max
    assert FLOAT32.min() == -FLOAT32.max()
    assert FLOAT32.max() < FLOAT64.max()


def test_zero_values():
    assert INT32.zero() == 0 and isinstance(INT32.zero(), int)
    assert FLOAT64.zero() == 0.0 and isinstance(FLOAT64.zero(), float)


def test_integer_convert_truncates_toward_zero():
    assert INT64.convert(3.7) == 3
    assert INT64.convert(-3.7) == -3


def test_integer_convert_wraps():
    assert INT32.convert(INT32.max() + 1) == INT32.min()
    assert INT32.convert(INT32.min() - 1) == INT32.max()
    assert INT8.convert(INT8.max()) == INT8.max()


def test_integer_convert_rejects_nan_and_inf():
    with pytest.raises(ValueError):
        INT64.convert(math.nan)
    with pytest.raises(ValueError):
        INT64.convert(math.inf)


def test_convert_rejects_non_numbers():
    with pytest.raises(TypeError):
        INT64.convert("5")


def test_float32_convert_rounds():
    once = FLOAT32.convert(0.1)
    assert FLOAT32.convert(once) == once
    assert once != 0.1 and abs(once - 0.1) < 1e-8
    assert FLOAT32.convert(0.5) == 0.5


def test_float32_overflows_to_infinity():
    assert FLOAT32.convert(FLOAT64.max()) == math.inf
    assert FLOAT32.convert(FLOAT64.min()) == -math.inf


def test_float64_convert_of_int():
    assert FLOAT64.convert(7) == 7.0 and isinstance(FLOAT64.convert(7), float)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((INT64,), INT64),
        ((INT8,), INT8),
        ((INT8, INT8), INT8),
        ((INT8, INT16), INT32),
        ((INT32, INT64), INT64),
        ((INT64, FLOAT32), FLOAT32),
        ((FLOAT32, FLOAT64), FLOAT64),
        ((UINT32, INT32), UINT32),
        ((UINT32, INT64), INT64),
        ((UINT64, INT64), UINT64),
        ((INT32, INT_LEAST32, INTMAX), INT64),
        ((INT32, INT64, FLOAT64), FLOAT64),
    ],
)
def test_common_rep(args, expected):
    assert common_rep(*args) == expected


def test_common_rep_is_symmetric():
    reps = [INT8, INT16, INT32, INT64, UINT8, UINT32, UINT64, FLOAT32, FLOAT64]
    for a in reps:
        for b in reps:
            assert common_rep(a, b) == common_rep(b, a)


def test_common_rep_errors():
    with pytest.raises(TypeError):
        common_rep()
    with pytest.raises(TypeError):
        common_rep(INT64, float)


def test_rep_of():
    assert rep_of(5) == INT64
    assert rep_of(1.5) == FLOAT64
    with pytest.raises(TypeError):
        rep_of("x")
    with pytest.raises(RatioOverflowError):
        rep_of(INTMAX_MAX + 1)


def test_rep_validation():
    with pytest.raises(ValueError):
        Rep("odd", 12)
    with pytest.raises(ValueError):
        Rep("half", 16, is_floating=True)
    with pytest.raises(ValueError):
        Rep("ufloat", 64, is_floating=True, signed=False)