# Tests for rigorous transcendental enclosures

import logging

import pytest

from ratbound import reals
from ratbound.config import Config
from ratbound.exceptions import ConvergenceLimitExceeded, DomainError, InvalidFormat, UndefinedOperation
from ratbound.integer import Integer
from ratbound.interval import RationalInterval
from ratbound.rational import Rational


# Reference values; the first group is correct to 40 digits, the second to 16
PI = '3.1415926535897932384626433832795028841971'
E = '2.7182818284590452353602874713526624977572'
LN2 = '0.6931471805599453094172321214581765680755'
LN100 = '4.6051701859880913680359829093687284152022'
SIN_1 = '0.8414709848078965066525023216302989996226'
COS_2 = '-0.4161468365471423869975682295007621897660'
TAN_1 = '1.5574077246549022305069748074583601730873'
SQRT_2 = '1.4142135623730950488016887242096980785697'

EXP_MINUS_5 = '0.006737946999085467'
SIN_100 = '-0.5063656411097588'
ARCTAN_10 = '1.4711276743037346'
ARCSIN_NINE_TENTHS = '1.1197695149986342'
TWO_TO_ONE_HUNDREDTH = '1.0069555500567188'

# Known to 13 digits
SIN_10_30 = '-0.0901169019121'
COS_10_25_PLUS_7 = '-0.0137613420003'


def encloses(interval, reference, digits=20):
    """True when the enclosure contains ``reference`` widened by 10^-digits on each side."""
    value = Rational(reference)
    slack = Rational(1, 10 ** digits)
    return interval.low <= value - slack and value + slack <= interval.high


class TestPrecision:
    """Tests for precision codes."""

    def test_default(self):
        assert reals.parse_precision(None) == Rational(1, 10 ** 6)

    def test_negative_is_power_of_ten(self):
        assert reals.parse_precision(-3) == Rational(1, 1000)

    def test_positive_is_reciprocal(self):
        assert reals.parse_precision(6) == Rational(1, 6)
        assert reals.parse_precision(Integer(4)) == Rational(1, 4)

    def test_rational_epsilon(self):
        assert reals.parse_precision(Rational(1, 128)) == Rational(1, 128)

    def test_config_default(self):
        assert reals.parse_precision(None, Config.low_precision()) == Rational(1, 1000)

    @pytest.mark.parametrize('bad', [0, Rational(-1, 2), 'fine', 1.5])
    def test_invalid(self, bad):
        with pytest.raises(InvalidFormat):
            reals.parse_precision(bad)


class TestConstants:
    """Tests for pi, e and ln 2."""

    def test_pi(self):
        p = reals.pi(-10)
        assert p.width() <= Rational(1, 10 ** 10)
        assert encloses(p, PI)

    def test_coarser_precision_is_wider(self):
        assert reals.pi(6).width() > reals.pi(-6).width()

    def test_pi_beyond_stored_terms(self):
        with pytest.raises(ConvergenceLimitExceeded):
            reals.pi(-80)

    def test_e(self):
        value = reals.e(-8)
        assert value.width() <= Rational(1, 10 ** 8)
        assert encloses(value, E)

    def test_ln2(self):
        value = reals.ln2(-12)
        assert value.width() <= Rational(1, 10 ** 12)
        assert encloses(value, LN2)


class TestExp:
    """Tests for the exponential."""

    def test_exp_zero_is_exact(self):
        assert reals.exp(0) == RationalInterval(1)

    def test_exp_without_argument_is_e(self):
        assert reals.exp() == reals.e()

    def test_exp_one(self):
        assert encloses(reals.exp(1, -10), E)
        assert reals.exp(1, -10).width() <= Rational(1, 10 ** 10)

    def test_negative_argument(self):
        value = reals.exp(-5)
        assert encloses(value, EXP_MINUS_5, 14)

    def test_large_argument(self):
        value = reals.exp(50, -3)
        assert value.width() <= Rational(1, 1000)
        assert value.contains(reals.e(-40).pow(50))

    @pytest.mark.parametrize('precision', [-3, -4, -5, -6, -7, -8, -9])
    def test_exp_of_ln2_contains_two(self, precision):
        assert reals.exp(reals.ln(2, precision), precision).contains_value(2)

    def test_interval_argument(self):
        value = reals.exp(RationalInterval(0, 1))
        assert value.contains_value(1)
        assert value.high > Rational('2.718281')

    def test_text_argument(self):
        assert reals.exp('0:1') == reals.exp(RationalInterval(0, 1))


class TestLogarithms:
    """Tests for ln and log."""

    def test_ln_one_is_exact(self):
        assert reals.ln(1) == RationalInterval(0)

    @pytest.mark.parametrize('bad', [0, -1, Rational(-1, 2)])
    def test_ln_domain(self, bad):
        with pytest.raises(DomainError) as exc:
            reals.ln(bad)
        assert exc.value.function == 'ln'

    def test_ln_interval_domain(self):
        with pytest.raises(DomainError):
            reals.ln(RationalInterval(-1, 1))

    def test_ln_hundred(self):
        value = reals.ln(100, -9)
        assert value.width() <= Rational(1, 10 ** 9)
        assert encloses(value, LN100)

    def test_ln_small(self):
        assert encloses(reals.ln(Rational(1, 2)), -Rational(LN2))

    def test_log_base_ten(self):
        assert reals.log(1000).contains_value(3)

    def test_log_base_two(self):
        assert reals.log(8, 2).contains_value(3)

    @pytest.mark.parametrize('base', [1, 0, -2])
    def test_log_invalid_base(self, base):
        with pytest.raises(DomainError):
            reals.log(8, base)


class TestTrigonometric:
    """Tests for sin, cos and tan."""

    def test_sin_zero_is_exact(self):
        assert reals.sin(0) == RationalInterval(0)

    def test_cos_zero_is_exact(self):
        assert reals.cos(0) == RationalInterval(1)

    def test_sin_one(self):
        value = reals.sin(1, -9)
        assert value.width() <= Rational(1, 10 ** 9)
        assert encloses(value, SIN_1)

    def test_sin_is_odd(self):
        assert encloses(reals.sin(-1), -Rational(SIN_1))

    def test_cos_two_is_negative(self):
        value = reals.cos(2)
        assert value.high < 0
        assert encloses(value, COS_2)

    def test_large_argument(self):
        assert encloses(reals.sin(100), SIN_100, 14)

    def test_huge_arguments(self):
        assert encloses(reals.sin(10 ** 30), SIN_10_30, 12)
        assert encloses(reals.cos(10 ** 25 + 7), COS_10_25_PLUS_7, 12)

    def test_huge_interval_argument(self):
        value = reals.sin(RationalInterval(10 ** 30, 10 ** 30 + Rational(1, 10 ** 6)))
        assert encloses(value, SIN_10_30, 12)

    def test_pythagorean_identity(self):
        s, c = reals.sin(Rational(7, 3)), reals.cos(Rational(7, 3))
        assert (s.pow(2) + c.pow(2)).contains_value(1)

    def test_sin_interval_with_maximum(self):
        assert reals.sin(RationalInterval(0, 2)) == RationalInterval(0, 1)

    def test_sin_interval_with_minimum(self):
        value = reals.sin(RationalInterval(4, 5))
        assert value.low == -1
        assert value.high < 0

    def test_wide_interval(self):
        assert reals.cos(RationalInterval(0, 7)) == RationalInterval(-1, 1)

    def test_tan_zero(self):
        assert reals.tan(0) == RationalInterval(0)

    def test_tan_one(self):
        assert encloses(reals.tan(1), TAN_1)

    def test_tan_near_pole(self):
        with pytest.raises(DomainError):
            reals.tan(Rational(355, 226))

    def test_tan_interval_with_pole(self):
        with pytest.raises(DomainError):
            reals.tan(RationalInterval(1, 2))

    def test_tan_interval(self):
        value = reals.tan(RationalInterval(0, 1))
        assert value.low == 0
        assert value.high > Rational('1.5574')


class TestInverseTrigonometric:
    """Tests for arctan, arcsin and arccos."""

    def test_arctan_zero(self):
        assert reals.arctan(0) == RationalInterval(0)

    def test_arctan_one_is_quarter_pi(self):
        assert encloses(reals.arctan(1), Rational(PI) / 4)
        assert encloses(reals.arctan(-1), -Rational(PI) / 4)

    def test_arctan_large(self):
        assert encloses(reals.arctan(10), ARCTAN_10, 14)

    def test_arcsin_domain(self):
        with pytest.raises(DomainError):
            reals.arcsin(2)
        with pytest.raises(DomainError):
            reals.arcsin(RationalInterval(0, 2))

    def test_arcsin_zero(self):
        assert reals.arcsin(0) == RationalInterval(0)

    def test_arcsin_endpoints(self):
        assert encloses(reals.arcsin(1), Rational(PI) / 2)
        assert encloses(reals.arcsin(-1), -Rational(PI) / 2)

    def test_arcsin_half(self):
        assert encloses(reals.arcsin(Rational(1, 2)), Rational(PI) / 6)

    def test_arcsin_near_one(self):
        value = reals.arcsin(Rational(9, 10))
        assert value.width() <= Rational(1, 10 ** 6)
        assert encloses(value, ARCSIN_NINE_TENTHS, 14)

    def test_arccos(self):
        assert reals.arccos(1).contains_value(0)
        assert encloses(reals.arccos(0), Rational(PI) / 2)
        with pytest.raises(DomainError):
            reals.arccos(-2)

    def test_arccos_interval_is_decreasing(self):
        value = reals.arccos(RationalInterval(0, 1))
        assert value.contains_value(0)
        assert value.high > Rational('1.5707')


class TestRoots:
    """Tests for newton_root and rational powers."""

    def test_square_root_of_four(self):
        assert reals.newton_root(4, 2).contains_value(2)

    def test_square_root_of_two(self):
        value = reals.newton_root(2, 2, -10)
        assert value.width() <= Rational(1, 10 ** 10)
        assert encloses(value, SQRT_2)

    def test_even_root_of_negative(self):
        with pytest.raises(DomainError):
            reals.newton_root(-4, 2)

    def test_odd_root_of_negative(self):
        assert reals.newton_root(-8, 3).contains_value(-2)

    def test_trivial_roots(self):
        assert reals.newton_root(0, 3) == RationalInterval(0)
        assert reals.newton_root(7, 1) == RationalInterval(7)

    def test_invalid_degree(self):
        with pytest.raises(DomainError):
            reals.newton_root(5, 0)

    def test_interval_root(self):
        value = reals.newton_root(RationalInterval(4, 9), 2)
        assert value.contains_value(2)
        assert value.contains_value(3)

    def test_integer_power_is_exact(self):
        assert reals.rational_interval_power(2, 3) == RationalInterval(8)

    def test_root_power(self):
        assert reals.rational_interval_power(4, Rational(1, 2)).contains_value(2)
        assert reals.rational_interval_power(8, Rational(-2, 3)).contains_value(Rational(1, 4))

    def test_general_power(self):
        value = reals.rational_interval_power(2, Rational(1, 100))
        assert value.width() <= Rational(1, 10 ** 6)
        assert encloses(value, TWO_TO_ONE_HUNDREDTH, 14)

    def test_zero_to_negative_power(self):
        with pytest.raises(UndefinedOperation):
            reals.rational_interval_power(0, Rational(-1, 2))

    def test_even_root_of_negative_base(self):
        with pytest.raises(DomainError):
            reals.rational_interval_power(-4, Rational(1, 2))


class TestFloatFallback:
    """Series caps either fall back to a padded float or raise."""

    def test_fallback_encloses_value(self, caplog):
        config = Config(max_series_terms=1)
        with caplog.at_level(logging.WARNING, logger='ratbound.reals'):
            value = reals.exp(1, config=config)
        assert encloses(value, E)
        assert "float estimate" in caplog.text

    def test_fallback_disabled(self):
        config = Config(max_series_terms=1, allow_float_fallback=False)
        with pytest.raises(ConvergenceLimitExceeded):
            reals.exp(1, config=config)

    def test_no_fallback_for_inexact_float(self):
        config = Config(max_series_terms=1)
        with pytest.raises(ConvergenceLimitExceeded):
            reals.exp(Rational(1, 3), config=config)

    def test_no_fallback_for_large_periodic_argument(self):
        config = Config(max_series_terms=1)
        with pytest.raises(ConvergenceLimitExceeded):
            reals.sin(2 ** 40, config=config)

    def test_fallback_for_small_periodic_argument(self):
        config = Config(max_series_terms=1)
        assert encloses(reals.sin(1, config=config), SIN_1, 15)
