# Tests for arbitrary-precision integers

import pytest

from ratbound.base_system import HEXADECIMAL
from ratbound.exceptions import DivisionByZero, DomainError, InvalidFormat, UndefinedOperation
from ratbound.integer import Integer
from ratbound.interval import RationalInterval
from ratbound.rational import Rational


class TestConstruction:
    """Tests for Integer construction."""

    def test_from_int_and_string(self):
        assert Integer(5) == Integer('5')
        assert Integer(' -12 ').value == -12

    def test_from_whole_float(self):
        assert Integer(3.0) == 3

    def test_rejects_fractional_float(self):
        with pytest.raises(InvalidFormat):
            Integer(2.5)

    def test_rejects_bad_text(self):
        with pytest.raises(InvalidFormat, match="whole number"):
            Integer('1.5')

    def test_rejects_bool(self):
        with pytest.raises(InvalidFormat):
            Integer(True)

    def test_from_rational(self):
        assert Integer.from_rational(Rational(8, 2)) == 4
        with pytest.raises(InvalidFormat):
            Integer.from_rational(Rational(1, 2))


class TestArithmetic:
    """Tests for exact integer arithmetic."""

    def test_add_subtract_multiply(self):
        assert Integer(7) + Integer(5) == Integer(12)
        assert Integer(7) - 10 == Integer(-3)
        assert 3 * Integer(4) == Integer(12)

    def test_exact_division_stays_integer(self):
        result = Integer(6) / Integer(3)
        assert isinstance(result, Integer)
        assert result == 2

    def test_inexact_division_widens(self):
        result = Integer(7) / Integer(2)
        assert isinstance(result, Rational)
        assert result == Rational(7, 2)

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            Integer(1) / 0

    def test_modulo_takes_dividend_sign(self):
        assert Integer(7) % 3 == Integer(1)
        assert Integer(-7) % 3 == Integer(-1)
        assert Integer(7) % -3 == Integer(1)

    def test_modulo_by_zero(self):
        with pytest.raises(DivisionByZero):
            Integer(1).modulo(0)

    def test_floor_division(self):
        assert Integer(-7) // 2 == Integer(-4)

    def test_pow(self):
        assert Integer(2) ** 10 == 1024
        assert Integer(2) ** -2 == Rational(1, 4)

    def test_zero_to_zero(self):
        with pytest.raises(UndefinedOperation):
            Integer(0) ** 0

    def test_zero_to_negative(self):
        with pytest.raises(UndefinedOperation):
            Integer(0).pow(-1)

    def test_big_values_are_exact(self):
        big = Integer(10) ** 50
        assert (big + 1) - big == 1


class TestMixedKinds:
    """Mixing with rationals and intervals widens the result."""

    def test_integer_plus_rational(self):
        assert Integer(1) + Rational(1, 2) == Rational(3, 2)

    def test_integer_times_interval(self):
        result = Integer(2) * RationalInterval(1, 3)
        assert result == RationalInterval(2, 6)


class TestNumberTheory:
    """Tests for gcd, lcm and factorials."""

    def test_gcd_lcm(self):
        assert Integer(12).gcd(18) == 6
        assert Integer(-12).gcd(-18) == 6
        assert Integer(0).gcd(0) == 0
        assert Integer(4).lcm(6) == 12
        assert Integer(0).lcm(5) == 0

    def test_factorial(self):
        assert Integer(5).factorial() == 120
        assert Integer(0).factorial() == 1

    def test_double_factorial(self):
        assert Integer(7).double_factorial() == 105
        assert Integer(8).double_factorial() == 384

    def test_negative_factorial(self):
        with pytest.raises(DomainError) as exc:
            Integer(-1).factorial()
        assert exc.value.function == 'factorial'


class TestPredicatesAndConversion:
    """Tests for predicates, comparisons and string forms."""

    def test_predicates(self):
        assert Integer(4).is_even()
        assert Integer(3).is_odd()
        assert Integer(0).is_zero()
        assert Integer(-2).is_negative()
        assert Integer(2).is_positive()

    def test_sign_and_abs(self):
        assert Integer(-9).sign() == -1
        assert abs(Integer(-9)) == 9

    def test_compare(self):
        assert Integer(3).compare_to(5) == -1
        assert Integer(3) < 5
        assert Integer(5).equals(5)

    def test_scale10(self):
        assert Integer(3).scale10(2) == 300
        assert Integer(3).scale10(-1) == Rational(3, 10)

    def test_to_string_in_base(self):
        assert Integer(255).to_string(HEXADECIMAL) == 'ff'
        assert Integer(5).to_string(2) == '101'

    def test_usable_as_index(self):
        assert [10, 20, 30][Integer(1)] == 20

    def test_hash_matches_int(self):
        assert hash(Integer(7)) == hash(7)
        assert {Integer(7): 'x'}[Integer(7)] == 'x'
