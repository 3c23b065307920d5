# Tests for mixed-kind promotion

import pytest

from ratbound import kinds
from ratbound.exceptions import InvalidFormat
from ratbound.integer import Integer
from ratbound.interval import RationalInterval
from ratbound.kinds import NumericKind
from ratbound.rational import Rational


class TestKinds:
    """Tests for kind detection and widening."""

    def test_kind_of(self):
        assert kinds.kind_of(3) is NumericKind.INTEGER
        assert kinds.kind_of(Integer(3)) is NumericKind.INTEGER
        assert kinds.kind_of(Rational(1, 2)) is NumericKind.RATIONAL
        assert kinds.kind_of(RationalInterval(0, 1)) is NumericKind.INTERVAL

    def test_unknown_kind(self):
        with pytest.raises(TypeError):
            kinds.kind_of(1.5)

    def test_is_numeric(self):
        assert kinds.is_numeric(Integer(1))
        assert not kinds.is_numeric(True)
        assert not kinds.is_numeric('1')

    def test_widen(self):
        assert kinds.widen(NumericKind.INTEGER, NumericKind.RATIONAL) is NumericKind.RATIONAL
        assert kinds.widen(NumericKind.INTERVAL, NumericKind.INTEGER) is NumericKind.INTERVAL


class TestPromotion:
    """Tests for promote and coerce_pair."""

    def test_promote_integer_to_rational(self):
        assert kinds.promote(Integer(2), NumericKind.RATIONAL) == Rational(2)

    def test_promote_rational_to_interval(self):
        assert kinds.promote(Rational(1, 2), NumericKind.INTERVAL) == RationalInterval(Rational(1, 2))

    def test_demotion_fails(self):
        with pytest.raises(InvalidFormat, match="demote"):
            kinds.promote(Rational(1, 2), NumericKind.INTEGER)

    def test_coerce_pair(self):
        left, right, kind = kinds.coerce_pair(Integer(1), RationalInterval(0, 1))
        assert kind is NumericKind.INTERVAL
        assert left == RationalInterval(1)
        assert right == RationalInterval(0, 1)


class TestOperations:
    """Tests for the promoted operations."""

    def test_add(self):
        assert kinds.add(Integer(1), Rational(1, 2)) == Rational(3, 2)

    def test_subtract(self):
        assert kinds.subtract(Rational(1, 2), RationalInterval(0, 1)) == RationalInterval(Rational(-1, 2), Rational(1, 2))

    def test_multiply(self):
        assert kinds.multiply(2, Rational(1, 4)) == Rational(1, 2)

    def test_integer_division_stays_exact(self):
        assert kinds.divide(Integer(6), Integer(3)) == Integer(2)
        assert kinds.divide(Integer(1), Integer(3)) == Rational(1, 3)

    def test_negate_and_power(self):
        assert kinds.negate(Integer(4)) == Integer(-4)
        assert kinds.power(RationalInterval(-1, 2), 2) == RationalInterval(0, 4)

    def test_unknown_operation(self):
        with pytest.raises(InvalidFormat):
            kinds.apply('modulo', Integer(1), Integer(2))
