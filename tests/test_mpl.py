import pytest

from ratiokit import mpl
from ratiokit.overflow import INTMAX_MAX, RatioOverflowError
from ratiokit.ratio import GIGA, Ratio

MAX = INTMAX_MAX


def _parts(r):
    return (r.num, r.den)


@pytest.mark.parametrize(
    "r1, r2, expected",
    [
        (Ratio(1, 1), Ratio(1, 1), (1, 1)),
        (Ratio(1, 2), Ratio(1, 1), (1, 2)),
        (Ratio(-1, 2), Ratio(1, 1), (-1, 2)),
        (Ratio(1, -2), Ratio(1, 1), (-1, 2)),
        (Ratio(1, 2), Ratio(-1, 1), (-1, 2)),
        (Ratio(1, 2), Ratio(1, -1), (-1, 2)),
        (Ratio(56987354, 467584654), Ratio(544668, 22145), (630992477165, 127339199162436)),
    ],
)
def test_divides(r1, r2, expected):
    assert _parts(mpl.divides(r1, r2)) == expected


@pytest.mark.parametrize(
    "r1, r2, expected",
    [
        (Ratio(1, 1), Ratio(1, 1), (0, 1)),
        (Ratio(1, 2), Ratio(1, 1), (-1, 2)),
        (Ratio(-1, 2), Ratio(1, 1), (-3, 2)),
        (Ratio(1, -2), Ratio(1, 1), (-3, 2)),
        (Ratio(1, 2), Ratio(-1, 1), (3, 2)),
        (Ratio(1, 2), Ratio(1, -1), (3, 2)),
        (Ratio(56987354, 467584654), Ratio(544668, 22145), (-126708206685271, 5177331081415)),
    ],
)
def test_minus(r1, r2, expected):
    assert _parts(mpl.minus(r1, r2)) == expected


@pytest.mark.parametrize(
    "r1, r2, expected",
    [
        (Ratio(1, 1), Ratio(1, 1), True),
        (Ratio(MAX, 1), Ratio(MAX, 1), True),
        (Ratio(1, MAX), Ratio(1, MAX), True),
        (Ratio(-MAX, 1), Ratio(-MAX, 1), True),
        (Ratio(1, 1), Ratio(1, -1), True),
        (Ratio(MAX, 1), Ratio(-MAX, 1), True),
        (Ratio(-MAX, 1), Ratio(MAX, 1), False),
        (Ratio(1, MAX), Ratio(1, -MAX), True),
    ],
)
def test_greater_equal(r1, r2, expected):
    assert mpl.greater_equal(r1, r2) is expected


@pytest.mark.parametrize(
    "r1, r2, expected",
    [
        (Ratio(1, 1), Ratio(1, 1), True),
        (Ratio(MAX, 1), Ratio(MAX, 1), True),
        (Ratio(-MAX, 1), Ratio(-MAX, 1), True),
        (Ratio(1, MAX), Ratio(1, MAX), True),
        (Ratio(1, 1), Ratio(1, -1), False),
        (Ratio(MAX, 1), Ratio(-MAX, 1), False),
        (Ratio(-MAX, 1), Ratio(MAX, 1), True),
        (Ratio(1, MAX), Ratio(1, -MAX), False),
    ],
)
def test_less_equal(r1, r2, expected):
    assert mpl.less_equal(r1, r2) is expected


@pytest.mark.parametrize(
    "r1, r2, expected",
    [
        (Ratio(1, 1), Ratio(1, 1), False),
        (Ratio(MAX, 1), Ratio(MAX, 1), False),
        (Ratio(-MAX, 1), Ratio(-MAX, 1), False),
        (Ratio(1, MAX), Ratio(1, MAX), False),
        (Ratio(1, 1), Ratio(1, -1), True),
        (Ratio(MAX, 1), Ratio(-MAX, 1), True),
        (Ratio(-MAX, 1), Ratio(MAX, 1), True),
        (Ratio(1, MAX), Ratio(1, -MAX), True),
    ],
)
def test_not_equal_to(r1, r2, expected):
    assert mpl.not_equal_to(r1, r2) is expected
    assert mpl.equal_to(r1, r2) is (not expected)


@pytest.mark.parametrize(
    "r, expected",
    [
        (Ratio(0), 0),
        (Ratio(1, 1), 1),
        (Ratio(1, 2), 1),
        (Ratio(-1, 2), -1),
        (Ratio(1, -2), -1),
    ],
)
def test_sign(r, expected):
    assert mpl.sign(r) == expected


def test_sign_of_integer():
    assert mpl.sign(-7) == -1


def test_to_ratio_from_integer():
    assert _parts(mpl.to_ratio(5)) == (5, 1)


def test_to_ratio_keeps_ratio():
    r = Ratio(10, 12)
    assert mpl.to_ratio(r) is r


def test_to_ratio_rejects_float():
    with pytest.raises(TypeError):
        mpl.to_ratio(2.5)


def test_plus_mixed_operands():
    assert _parts(mpl.plus(Ratio(1, 2), 1)) == (3, 2)
    assert _parts(mpl.plus(Ratio(1, 2), Ratio(1, 3))) == (5, 6)


def test_plus_overflow():
    with pytest.raises(RatioOverflowError):
        mpl.plus(Ratio(MAX, 1), 1)


def test_times():
    assert _parts(mpl.times(5, GIGA)) == (5000000000, 1)
    assert _parts(mpl.times(Ratio(56987354, 467584654), Ratio(544668, 22145))) == (
        15519594064236,
        5177331081415,
    )


def test_times_overflow():
    with pytest.raises(RatioOverflowError):
        mpl.times(Ratio(MAX, 1), Ratio(2, 1))


def test_divides_by_zero():
    with pytest.raises(ZeroDivisionError):
        mpl.divides(Ratio(1, 2), 0)


@pytest.mark.parametrize(
    "r, expected",
    [
        (Ratio(0), (0, 1)),
        (Ratio(1, 1), (-1, 1)),
        (Ratio(1, 2), (-1, 2)),
        (Ratio(-1, 2), (1, 2)),
        (Ratio(1, -2), (1, 2)),
    ],
)
def test_negate(r, expected):
    assert _parts(mpl.negate(r)) == expected


@pytest.mark.parametrize(
    "r, expected",
    [
        (Ratio(0), (0, 1)),
        (Ratio(1, 1), (1, 1)),
        (Ratio(1, 2), (1, 2)),
        (Ratio(-1, 2), (1, 2)),
        (Ratio(1, -2), (1, 2)),
    ],
)
def test_absolute(r, expected):
    assert _parts(mpl.absolute(r)) == expected


def test_gcd_and_lcm():
    assert _parts(mpl.gcd(Ratio(1, 2), Ratio(1, 3))) == (1, 6)
    assert _parts(mpl.lcm(Ratio(1, 2), Ratio(1, 3))) == (1, 1)
    assert _parts(mpl.gcd(4, 6)) == (2, 1)
    assert _parts(mpl.lcm(4, 6)) == (12, 1)


def test_less_and_greater():
    assert mpl.less(1, Ratio(3, 2)) is True
    assert mpl.greater(1, Ratio(3, 2)) is False
    assert mpl.less(Ratio(1291640, 2694141), Ratio(641981, 1339063)) is True
    assert mpl.greater(Ratio(1291640, 2694141), Ratio(641981, 1339063)) is False


def test_equal_to_mixed():
    assert mpl.equal_to(Ratio(10, 5), 2) is True
    assert mpl.equal_to(Ratio(10, 4), 2) is False