# Tests for rational intervals

import random

import pytest

from ratbound.exceptions import (
    DivisionByZero,
    IndeterminateDivision,
    InvalidFormat,
    NoRepresentableValue,
    UndefinedOperation,
)
from ratbound.interval import RationalInterval
from ratbound.rational import Rational


class TestConstruction:
    """Tests for RationalInterval construction."""

    def test_endpoints_are_sorted(self):
        interval = RationalInterval(3, 1)
        assert interval.low == 1
        assert interval.high == 3

    def test_point(self):
        assert RationalInterval.point(Rational(1, 2)).is_point()
        assert RationalInterval(5).is_point()

    def test_from_string(self):
        assert RationalInterval.from_string('1/2:3/4') == RationalInterval(Rational(1, 2), Rational(3, 4))

    def test_from_string_requires_colon(self):
        with pytest.raises(InvalidFormat, match="a:b"):
            RationalInterval.from_string('1/2')

    def test_hashable(self):
        assert len({RationalInterval(1, 2), RationalInterval(2, 1)}) == 1


class TestArithmetic:
    """Tests for interval arithmetic."""

    def test_add_subtract(self):
        a, b = RationalInterval(1, 2), RationalInterval(3, 5)
        assert a + b == RationalInterval(4, 7)
        assert a - b == RationalInterval(-4, -1)

    def test_multiply_corners(self):
        assert RationalInterval(1, 3) * RationalInterval(2, 4) == RationalInterval(2, 12)
        assert RationalInterval(-1, 2) * RationalInterval(-3, 1) == RationalInterval(-6, 3)

    def test_divide(self):
        assert RationalInterval(1, 2) / RationalInterval(2, 4) == RationalInterval(Rational(1, 4), 1)

    def test_divide_by_zero_point(self):
        with pytest.raises(DivisionByZero):
            RationalInterval(1, 2) / RationalInterval(0)

    def test_divide_by_interval_containing_zero(self):
        with pytest.raises(IndeterminateDivision):
            RationalInterval(1, 2) / RationalInterval(-1, 1)

    def test_reciprocate(self):
        assert RationalInterval(2, 4).reciprocate() == RationalInterval(Rational(1, 4), Rational(1, 2))

    def test_scalars(self):
        assert RationalInterval(1, 2) + 1 == RationalInterval(2, 3)
        assert 1 - RationalInterval(0, 1) == RationalInterval(0, 1)
        assert Rational(1, 2) * RationalInterval(2, 4) == RationalInterval(1, 2)

    def test_negate(self):
        assert -RationalInterval(1, 2) == RationalInterval(-2, -1)


class TestPowers:
    """Tests for pow and mpow."""

    def test_even_power_straddling_zero(self):
        assert RationalInterval(-2, 3) ** 2 == RationalInterval(0, 9)

    def test_even_power_negative(self):
        assert RationalInterval(-3, -2).pow(2) == RationalInterval(4, 9)

    def test_odd_power(self):
        assert RationalInterval(-2, 3).pow(3) == RationalInterval(-8, 27)

    def test_negative_power(self):
        assert RationalInterval(2, 4).pow(-1) == RationalInterval(Rational(1, 4), Rational(1, 2))

    def test_mpow_is_wider(self):
        assert RationalInterval(-2, 3).mpow(2) == RationalInterval(-6, 9)

    def test_zero_exponent_with_zero(self):
        with pytest.raises(UndefinedOperation):
            RationalInterval(-1, 1).pow(0)

    def test_negative_exponent_with_zero(self):
        with pytest.raises(UndefinedOperation):
            RationalInterval(-1, 1).pow(-2)

    def test_zero_exponent(self):
        assert RationalInterval(2, 3).pow(0) == RationalInterval(1)


class TestSetOperations:
    """Tests for containment, intersection and union."""

    def test_contains(self):
        outer = RationalInterval(0, 10)
        assert outer.contains(RationalInterval(1, 2))
        assert not RationalInterval(1, 2).contains(outer)
        assert Rational(1, 2) in RationalInterval(0, 1)
        assert RationalInterval(-1, 1).contains_zero()

    def test_intersection(self):
        assert RationalInterval(1, 3).intersection(RationalInterval(2, 4)) == RationalInterval(2, 3)

    def test_disjoint_intersection(self):
        assert RationalInterval(1, 2).intersection(RationalInterval(3, 4)) is None

    def test_union_of_touching(self):
        assert RationalInterval(1, 2).union(RationalInterval(2, 3)) == RationalInterval(1, 3)

    def test_union_of_disjoint(self):
        assert RationalInterval(1, 2).union(RationalInterval(3, 4)) is None

    def test_hull(self):
        assert RationalInterval(1, 2).hull(RationalInterval(3, 4)) == RationalInterval(1, 4)


class TestMeasures:
    """Tests for width, midpoint and mediant."""

    def test_width_and_midpoint(self):
        interval = RationalInterval(Rational(1, 2), Rational(3, 2))
        assert interval.width() == 1
        assert interval.midpoint() == 1

    def test_mediant(self):
        assert RationalInterval(Rational(1, 2), Rational(2, 3)).mediant() == Rational(3, 5)

    def test_scale10(self):
        assert RationalInterval(1, 2).scale10(-1) == RationalInterval(Rational(1, 10), Rational(1, 5))


class TestShortestDecimal:
    """Tests for the shortest decimal inside an interval."""

    def test_finds_short_value(self):
        interval = RationalInterval(Rational(1, 3), Rational(1, 2))
        assert interval.shortest_decimal() == Rational(2, 5)

    def test_prefers_integers(self):
        assert RationalInterval(Rational(1, 2), Rational(5, 2)).shortest_decimal() == 1

    def test_terminating_point(self):
        assert RationalInterval(Rational(1, 4)).shortest_decimal() == Rational(1, 4)

    def test_non_terminating_point(self):
        with pytest.raises(NoRepresentableValue):
            RationalInterval(Rational(1, 3)).shortest_decimal()

    def test_other_base(self):
        assert RationalInterval(Rational(1, 3)).shortest_decimal(3) == Rational(1, 3)


class TestRandomRational:
    """Tests for random_rational."""

    def test_within_interval(self):
        interval = RationalInterval(Rational(1, 3), Rational(1, 2))
        rng = random.Random(1234)
        for _ in range(20):
            value = interval.random_rational(50, rng)
            assert interval.contains_value(value)
            assert value.denominator <= 50

    def test_invalid_denominator(self):
        with pytest.raises(InvalidFormat):
            RationalInterval(0, 1).random_rational(0)


class TestDisplay:
    """Tests for string forms."""

    def test_to_string(self):
        assert RationalInterval(Rational(1, 2), Rational(3, 4)).to_string() == '1/2:3/4'

    def test_mixed(self):
        interval = RationalInterval(Rational(-3, 2), Rational(5, 2))
        assert interval.to_mixed_string() == '-1..1/2:2..1/2'

    def test_repeating_decimal(self):
        interval = RationalInterval(Rational(1, 3), Rational(1, 2))
        assert interval.to_repeating_decimal() == '0.#3:0.5#0'

    def test_compacted(self):
        interval = RationalInterval(Rational('3.1415'), Rational('3.1416'))
        assert interval.compacted_decimal_interval() == '3.141[5,6]'

    def test_relative_mid(self):
        assert RationalInterval(1, 3).relative_mid_decimal_interval() == '2[+-1]'

    def test_relative_decimal_symmetric(self):
        text = RationalInterval(Rational('1.23'), Rational('1.25')).relative_decimal_interval()
        assert text.startswith('1.24[+-')
