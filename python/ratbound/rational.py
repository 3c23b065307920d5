# RatBound SDK - Rational Numbers
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Exact rational numbers with decimal, positional-base and continued
fraction encodings.

A :class:`Rational` is always reduced with a positive denominator, so two
equal values are also structurally equal.

The Problem:
    >>> 0.1 + 0.2
    0.30000000000000004

The Solution:
    >>> from ratbound.rational import Rational
    >>> Rational('0.1') + Rational('0.2')
    Rational(3, 10)
    >>> Rational(1, 7).to_repeating_decimal()
    '0.#142857'
    >>> Rational('3.~7~16').to_string()
    '355/113'
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any, NamedTuple, Optional, Sequence, Union

from . import formats
from .base_system import BaseSystem
from .exceptions import (
    ConvergenceLimitExceeded,
    DivisionByZero,
    InvalidFormat,
    OutOfRange,
    UndefinedOperation,
)
from .integer import Integer

if TYPE_CHECKING:
    from .interval import RationalInterval


# Things that can be converted to Rational
RationalLike = Union['Rational', Integer, int, str, float]


class RepeatingDecimal(NamedTuple):
    """Repeating decimal text with its period length (0 terminating, -1 unknown)."""
    decimal: str
    period: int


class BaseExpansion(NamedTuple):
    """Positional expansion in an arbitrary base."""
    text: str
    period: int
    limit_hit: bool


class _DecimalProfile(NamedTuple):
    negative: bool
    whole: int
    remainder: int
    initial_length: int
    period_length: int


def _multiplicity(n: int, p: int) -> int:
    count = 0
    while n % p == 0:
        n //= p
        count += 1
    return count


def _long_division(remainder: int, denominator: int, count: int, base: int = 10) -> tuple[list[int], int]:
    """Next ``count`` digits of ``remainder/denominator`` in ``base``."""
    digits = []
    for _ in range(count):
        if remainder == 0:
            break
        digit, remainder = divmod(remainder * base, denominator)
        digits.append(digit)
    return digits, remainder


def _widened(operation: str, left: Any, right: Any) -> Any:
    from . import kinds
    return kinds.apply(operation, left, right)


@dataclass(frozen=True)
class Rational:
    """
    An immutable exact rational number ``numerator/denominator``.

    Derived data (decimal expansion metadata, continued fraction,
    convergents) is computed on first use and cached on the instance.
    """
    numerator: int
    denominator: int

    DEFAULT_PERIOD_DIGITS = 20
    MAX_PERIOD_DIGITS = 1000
    MAX_PERIOD_CHECK = 10 ** 7
    DEFAULT_CF_LIMIT = 1000
    DECIMAL_DIGITS = 20

    def __init__(self, numerator: RationalLike = 0, denominator: RationalLike = 1):
        """
        Create a normalized rational.

        Args:
            numerator: An int, Integer, Rational, float, or a literal such as
                       ``'3/4'``, ``'1..1/2'``, ``'0.1#6'`` or ``'3.~7~16'``.
            denominator: Divisor applied to ``numerator``.

        Raises:
            DivisionByZero: If the resulting denominator is zero.
            InvalidFormat: If a literal cannot be parsed.
        """
        n_num, n_den = _as_pair(numerator)
        if isinstance(denominator, int) and not isinstance(denominator, bool):
            d_num, d_den = denominator, 1
        else:
            d_num, d_den = _as_pair(denominator)
        num = n_num * d_den
        den = n_den * d_num
        if den == 0:
            raise DivisionByZero("Denominator cannot be zero")
        if den < 0:
            num, den = -num, -den
        common = math.gcd(num, den)
        if common > 1:
            num //= common
            den //= common
        object.__setattr__(self, 'numerator', num)
        object.__setattr__(self, 'denominator', den)

    @classmethod
    def _make(cls, numerator: int, denominator: int) -> Rational:
        """Build from an already reduced pair with a positive denominator."""
        obj = object.__new__(cls)
        object.__setattr__(obj, 'numerator', numerator)
        object.__setattr__(obj, 'denominator', denominator)
        return obj

    @classmethod
    def from_float(cls, x: float, max_denominator: int = 10 ** 12) -> Rational:
        """
        Convert a float to the decimal fraction it prints as.

        ``Rational.from_float(0.1)`` is ``1/10`` rather than the binary value
        ``3602879701896397/36028797018963968``.
        """
        if math.isnan(x) or math.isinf(x):
            raise InvalidFormat(f"Cannot convert {x!r} to Rational")
        if x == int(x):
            return cls(int(x))

        # str(0.1) == "0.1", which is exactly 1/10
        s = repr(x)
        if 'e' in s or 'E' in s:
            return cls.exact_float(x).best_approximation(max_denominator)

        result = cls(s)
        if result.denominator <= max_denominator:
            return result
        return cls.exact_float(x).best_approximation(max_denominator)

    @classmethod
    def exact_float(cls, x: float) -> Rational:
        """The exact binary value of a float."""
        if math.isnan(x) or math.isinf(x):
            raise InvalidFormat(f"Cannot convert {x!r} to Rational")
        return cls(*x.as_integer_ratio())

    # Arithmetic

    def add(self, other: Any) -> Any:
        o = _coerce(other)
        if o is None:
            return _widened('add', self, other)
        return Rational(self.numerator * o.denominator + o.numerator * self.denominator,
                        self.denominator * o.denominator)

    def subtract(self, other: Any) -> Any:
        o = _coerce(other)
        if o is None:
            return _widened('subtract', self, other)
        return Rational(self.numerator * o.denominator - o.numerator * self.denominator,
                        self.denominator * o.denominator)

    def multiply(self, other: Any) -> Any:
        o = _coerce(other)
        if o is None:
            return _widened('multiply', self, other)
        return Rational(self.numerator * o.numerator, self.denominator * o.denominator)

    def divide(self, other: Any) -> Any:
        o = _coerce(other)
        if o is None:
            return _widened('divide', self, other)
        if o.numerator == 0:
            raise DivisionByZero("Division by zero")
        return Rational(self.numerator * o.denominator, self.denominator * o.numerator)

    def negate(self) -> Rational:
        return Rational._make(-self.numerator, self.denominator)

    def reciprocal(self) -> Rational:
        if self.numerator == 0:
            raise DivisionByZero("Cannot take reciprocal of zero")
        if self.numerator < 0:
            return Rational._make(-self.denominator, -self.numerator)
        return Rational._make(self.denominator, self.numerator)

    def pow(self, exponent: Union[int, Integer, Rational]) -> Rational:
        """
        Raise to an integer power.

        Raises:
            UndefinedOperation: For 0^0, 0 to a negative power, or a
                                non-integer exponent.
        """
        if isinstance(exponent, Rational):
            if exponent.denominator != 1:
                raise UndefinedOperation(
                    "Rational powers are not exact; use reals.rational_interval_power"
                )
            exponent = exponent.numerator
        exp = int(exponent)
        if exp == 0:
            if self.numerator == 0:
                raise UndefinedOperation("Zero cannot be raised to the power of zero")
            return Rational._make(1, 1)
        if exp < 0:
            if self.numerator == 0:
                raise UndefinedOperation("Zero cannot be raised to a negative power")
            return self.reciprocal().pow(-exp)
        # Powers of a reduced fraction stay reduced
        return Rational._make(self.numerator ** exp, self.denominator ** exp)

    def abs(self) -> Rational:
        return self if self.numerator >= 0 else self.negate()

    def sign(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)

    def scale10(self, exponent: int) -> Rational:
        """Multiply by ``10**exponent``."""
        if exponent >= 0:
            return Rational(self.numerator * 10 ** exponent, self.denominator)
        return Rational(self.numerator, self.denominator * 10 ** -exponent)

    # Comparison

    def compare_to(self, other: Union[Rational, Integer, int]) -> int:
        o = _coerce(other)
        if o is None:
            raise TypeError(f"Cannot compare Rational with {type(other).__name__}")
        left = self.numerator * o.denominator
        right = o.numerator * self.denominator
        return (left > right) - (left < right)

    def equals(self, other: Any) -> bool:
        o = _coerce(other)
        return o is not None and self.numerator == o.numerator and self.denominator == o.denominator

    def less_than(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def less_than_or_equal(self, other: Any) -> bool:
        return self.compare_to(other) <= 0

    def greater_than(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def greater_than_or_equal(self, other: Any) -> bool:
        return self.compare_to(other) >= 0

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_negative(self) -> bool:
        return self.numerator < 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def bit_length(self) -> int:
        return max(self.numerator.bit_length(), self.denominator.bit_length())

    # String forms

    def to_string(self, base: Union[BaseSystem, int, None] = None) -> str:
        """``n/d`` (or ``n``); with a base, the repeating positional expansion."""
        if base is None:
            if self.denominator == 1:
                return str(self.numerator)
            return f"{self.numerator}/{self.denominator}"
        system = base if isinstance(base, BaseSystem) else BaseSystem.from_base(base)
        return self.to_repeating_base_with_period(system).text

    def to_mixed_string(self) -> str:
        """``w..r/d`` form, e.g. ``-1..1/2`` for ``-3/2``."""
        if self.denominator == 1 or self.numerator == 0:
            return str(self.numerator)
        sign = '-' if self.numerator < 0 else ''
        whole, remainder = divmod(abs(self.numerator), self.denominator)
        if whole == 0:
            return f"{sign}{remainder}/{self.denominator}"
        return f"{sign}{whole}..{remainder}/{self.denominator}"

    def to_number(self) -> float:
        """Nearest float. For display only; never used in exact paths."""
        return self.numerator / self.denominator

    def to_base(self, system: BaseSystem) -> str:
        """Numerator and denominator written in ``system``."""
        if not isinstance(system, BaseSystem):
            raise InvalidFormat("Argument must be a BaseSystem")
        num = system.from_decimal(self.numerator)
        if self.denominator == 1:
            return num
        return f"{num}/{system.from_decimal(self.denominator)}"

    def to_decimal(self, max_digits: Optional[int] = None) -> str:
        """Decimal string truncated after ``max_digits`` fractional digits (default 20)."""
        if max_digits is None:
            max_digits = self.DECIMAL_DIGITS
        if self.numerator == 0:
            return '0'
        sign = '-' if self.numerator < 0 else ''
        whole, remainder = divmod(abs(self.numerator), self.denominator)
        digits, _ = _long_division(remainder, self.denominator, max_digits)
        if not digits:
            return f"{sign}{whole}"
        return f"{sign}{whole}." + ''.join(map(str, digits))

    @cached_property
    def _decimal_profile(self) -> _DecimalProfile:
        negative = self.numerator < 0
        whole, remainder = divmod(abs(self.numerator), self.denominator)
        den = self.denominator
        twos, fives = _multiplicity(den, 2), _multiplicity(den, 5)
        reduced = den // (2 ** twos * 5 ** fives)
        return _DecimalProfile(
            negative=negative,
            whole=whole,
            remainder=remainder,
            initial_length=max(twos, fives),
            period_length=self._order_of_ten(reduced),
        )

    @classmethod
    def _order_of_ten(cls, modulus: int) -> int:
        """Multiplicative order of 10 modulo ``modulus``; -1 past the check cap."""
        if modulus == 1:
            return 0
        power = 10 % modulus
        k = 1
        while power != 1:
            if k >= cls.MAX_PERIOD_CHECK:
                return -1
            power = power * 10 % modulus
            k += 1
        return k

    @property
    def period_length(self) -> int:
        """Length of the repeating decimal block; 0 terminating, -1 unknown."""
        return self._decimal_profile.period_length

    @property
    def whole_part(self) -> int:
        """Integer part of ``|self|``."""
        return self._decimal_profile.whole

    def to_repeating_decimal_with_period(self, use_repeat_notation: bool = True) -> RepeatingDecimal:
        """
        Exact decimal text with ``#`` marking the repeating block.

        Examples: ``1/3`` is ``0.#3``, ``1/6`` is ``0.1#6``, ``5/4`` is
        ``1.25#0``. Runs of seven or more equal digits are written as
        ``{d~n}`` when ``use_repeat_notation`` is set. A period too long to
        print is cut after ``DEFAULT_PERIOD_DIGITS`` digits and marked with
        ``...``.
        """
        if self.numerator == 0:
            return RepeatingDecimal('0', 0)
        profile = self._decimal_profile
        text = ('-' if profile.negative else '') + str(profile.whole)
        initial, remainder = _long_division(profile.remainder, self.denominator, profile.initial_length)
        initial_text = ''.join(map(str, initial)).ljust(profile.initial_length, '0')
        if use_repeat_notation:
            initial_text = formats.compress_runs(initial_text)

        period = profile.period_length
        if period == 0:
            if profile.initial_length:
                text += '.' + initial_text + '#0'
            return RepeatingDecimal(text, 0)

        truncated = period < 0 or period > self.MAX_PERIOD_DIGITS
        count = self.DEFAULT_PERIOD_DIGITS if truncated else period
        digits, _ = _long_division(remainder, self.denominator, count)
        period_text = ''.join(map(str, digits)).ljust(count, '0')
        if use_repeat_notation:
            period_text = formats.compress_runs(period_text)
        text += '.' + initial_text + '#' + period_text
        if truncated:
            text += '...'
        return RepeatingDecimal(text, period)

    def to_repeating_decimal(self, use_repeat_notation: bool = True) -> str:
        return self.to_repeating_decimal_with_period(use_repeat_notation).decimal

    def to_scientific_notation(self, use_repeat_notation: bool = True) -> str:
        """
        Scientific notation with an exact mantissa in ``[1, 10)``.

        Examples: ``12300`` is ``1.23E4``, ``1/3`` is ``3.#3E-1``.
        """
        if self.numerator == 0:
            return '0'
        sign = '-' if self.numerator < 0 else ''
        a, b = abs(self.numerator), self.denominator
        exponent = len(str(a)) - len(str(b))
        if exponent >= 0:
            if a < b * 10 ** exponent:
                exponent -= 1
        elif a * 10 ** -exponent < b:
            exponent -= 1
        if exponent >= 0:
            mantissa = Rational(a, b * 10 ** exponent)
        else:
            mantissa = Rational(a * 10 ** -exponent, b)
        text = mantissa.to_repeating_decimal(use_repeat_notation)
        if text.endswith('#0'):
            text = text[:-2]
        return f"{sign}{text}E{exponent}"

    def to_repeating_base_with_period(
        self,
        system: BaseSystem,
        use_repeat_notation: bool = True,
        limit: int = 1000,
    ) -> BaseExpansion:
        """
        Expansion in ``system`` by long division with cycle detection.

        Each remainder is recorded with the index where it first appeared;
        a repeat marks the start of the period. Stops after ``limit``
        fractional digits, reporting ``limit_hit`` and period -1.
        """
        if not isinstance(system, BaseSystem):
            raise InvalidFormat("Argument must be a BaseSystem")
        if self.numerator < 0:
            inner = self.negate().to_repeating_base_with_period(system, use_repeat_notation, limit)
            return BaseExpansion('-' + inner.text, inner.period, inner.limit_hit)

        base = system.base
        whole, remainder = divmod(self.numerator, self.denominator)
        text = system.from_decimal(whole)
        if remainder == 0:
            return BaseExpansion(text, 0, False)

        fmt = formats.compress_runs if use_repeat_notation else (lambda s: s)
        seen: dict[int, int] = {}
        digits: list[str] = []
        while remainder != 0:
            if remainder in seen:
                start = seen[remainder]
                body = fmt(''.join(digits[:start])) + '#' + fmt(''.join(digits[start:]))
                return BaseExpansion(f"{text}.{body}", len(digits) - start, False)
            if len(digits) >= limit:
                return BaseExpansion(f"{text}.{fmt(''.join(digits))}...", -1, True)
            seen[remainder] = len(digits)
            digit, remainder = divmod(remainder * base, self.denominator)
            digits.append(system.get_char(digit))
        return BaseExpansion(f"{text}.{fmt(''.join(digits))}#0", 0, False)

    def to_repeating_base(self, system: BaseSystem) -> str:
        return self.to_repeating_base_with_period(system).text

    def period_modulo(self, system: BaseSystem, limit: int = 10 ** 6) -> int:
        """Period length of the expansion in ``system``'s base."""
        if not isinstance(system, BaseSystem):
            raise InvalidFormat("Argument must be a BaseSystem")
        base = system.base
        den = self.denominator
        common = math.gcd(den, base)
        while common > 1:
            den //= common
            common = math.gcd(den, base)
        if den == 1:
            return 0
        k = 1
        power = base % den
        while power != 1:
            if k >= limit:
                raise ConvergenceLimitExceeded(
                    f"Period calculation exceeded limit; period is likely > {limit}", limit
                )
            power = power * base % den
            k += 1
        return k

    # Continued fractions

    @cached_property
    def _continued_fraction(self) -> tuple[int, ...]:
        return tuple(self._expand_continued_fraction(self.DEFAULT_CF_LIMIT))

    def _expand_continued_fraction(self, max_terms: int) -> list[int]:
        num, den = self.numerator, self.denominator
        whole, num = divmod(num, den)
        terms = [whole]
        while num != 0 and len(terms) < max_terms:
            quotient, remainder = divmod(den, num)
            terms.append(quotient)
            den, num = num, remainder
        if num == 0 and len(terms) > 1 and terms[-1] == 1:
            terms.pop()
            terms[-1] += 1
        return terms

    def to_continued_fraction(self, max_terms: Optional[int] = None) -> list[int]:
        """
        Canonical continued fraction ``[a0; a1, ..., an]`` with floor-based
        ``a0`` (so ``-7/3`` is ``[-3; 1, 2]``) and ``an != 1``.
        """
        if max_terms is None or max_terms == self.DEFAULT_CF_LIMIT:
            return list(self._continued_fraction)
        return self._expand_continued_fraction(max_terms)

    def to_continued_fraction_string(self) -> str:
        return formats.format_continued_fraction(self.to_continued_fraction())

    @classmethod
    def from_continued_fraction(cls, terms: Sequence[Union[int, Integer]]) -> Rational:
        """
        Rebuild a rational from its continued fraction terms.

        The convergents produced on the way are cached on the result.
        """
        terms = [int(t) for t in terms]
        if not terms:
            raise InvalidFormat("Continued fraction array cannot be empty")
        pairs = formats.convergent_pairs(terms)
        convergents = tuple(cls._make(p, q) for p, q in pairs)
        result = convergents[-1]
        if len(terms) == 1 or terms[-1] != 1:
            result.__dict__['_continued_fraction'] = tuple(terms)
            result.__dict__['_convergents'] = convergents
        return result

    @classmethod
    def from_continued_fraction_string(cls, text: str) -> Rational:
        return cls.from_continued_fraction(formats.parse_continued_fraction(text))

    @cached_property
    def _convergents(self) -> tuple[Rational, ...]:
        pairs = formats.convergent_pairs(self._continued_fraction)
        return tuple(Rational._make(p, q) for p, q in pairs)

    def convergents(self, max_count: Optional[int] = None) -> list[Rational]:
        convergents = list(self._convergents)
        if max_count is not None:
            return convergents[:max_count]
        return convergents

    def get_convergent(self, n: int) -> Rational:
        convergents = self._convergents
        if n < 0 or n >= len(convergents):
            raise OutOfRange(f"Convergent index {n} out of range [0, {len(convergents) - 1}]")
        return convergents[n]

    @classmethod
    def convergents_from_cf(
        cls,
        terms: Union[str, Sequence[Union[int, Integer]]],
        max_count: Optional[int] = None,
    ) -> list[Rational]:
        """Convergents of a continued fraction given as terms or as text."""
        if isinstance(terms, str):
            terms = formats.parse_continued_fraction(terms)
        pairs = formats.convergent_pairs([int(t) for t in terms])
        convergents = [cls._make(p, q) for p, q in pairs]
        if max_count is not None:
            return convergents[:max_count]
        return convergents

    def approximation_error(self, target: Union[Rational, Integer, int]) -> Rational:
        return self.subtract(target).abs()

    def best_approximation(self, max_denominator: int) -> Rational:
        """Last convergent whose denominator does not exceed ``max_denominator``."""
        if max_denominator < 1:
            raise OutOfRange("max_denominator must be positive")
        best = self._convergents[0]
        for convergent in self._convergents:
            if convergent.denominator > max_denominator:
                break
            best = convergent
        return best

    # Python protocol

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, (Integer, int)):
            return self.denominator == 1 and self.numerator == int(other)
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare_to(other) >= 0

    def __floor__(self) -> int:
        return self.numerator // self.denominator

    def __ceil__(self) -> int:
        return -(-self.numerator // self.denominator)

    def __trunc__(self) -> int:
        if self.numerator < 0:
            return -(-self.numerator // self.denominator)
        return self.numerator // self.denominator

    def __round__(self, ndigits: Optional[int] = None) -> Any:
        if ndigits is not None:
            shifted = self.scale10(ndigits)
            return Rational(round(shifted)).scale10(-ndigits)
        floor, remainder = divmod(self.numerator, self.denominator)
        doubled = 2 * remainder
        if doubled < self.denominator:
            return floor
        if doubled > self.denominator:
            return floor + 1
        return floor if floor % 2 == 0 else floor + 1

    def __int__(self) -> int:
        return self.__trunc__()

    def __float__(self) -> float:
        return self.to_number()

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __neg__(self) -> Rational:
        return self.negate()

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return self.abs()

    def __add__(self, other: Any) -> Any:
        return self.add(other) if _is_operand(other) else NotImplemented

    def __radd__(self, other: Any) -> Any:
        return self.add(other) if _is_operand(other) else NotImplemented

    def __sub__(self, other: Any) -> Any:
        return self.subtract(other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other: Any) -> Any:
        return self.negate().add(other) if _is_operand(other) else NotImplemented

    def __mul__(self, other: Any) -> Any:
        return self.multiply(other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return self.multiply(other) if _is_operand(other) else NotImplemented

    def __truediv__(self, other: Any) -> Any:
        return self.divide(other) if _is_operand(other) else NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        o = _coerce(other)
        return o.divide(self) if o is not None else NotImplemented

    def __pow__(self, exponent: Any) -> Rational:
        if not isinstance(exponent, (int, Integer, Rational)):
            return NotImplemented
        return self.pow(exponent)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


def _as_pair(value: Any) -> tuple[int, int]:
    if isinstance(value, Rational):
        return value.numerator, value.denominator
    if isinstance(value, Integer):
        return value.value, 1
    if isinstance(value, bool):
        raise InvalidFormat("Booleans are not numbers")
    if isinstance(value, int):
        return value, 1
    if isinstance(value, str):
        if formats.classify(value.strip()) == 'continued':
            result = Rational.from_continued_fraction_string(value)
            return result.numerator, result.denominator
        return formats.parse_rational_text(value)
    if isinstance(value, float):
        result = Rational.from_float(value)
        return result.numerator, result.denominator
    raise InvalidFormat(f"Cannot create Rational from {type(value).__name__}")


def _coerce(value: Any) -> Optional[Rational]:
    """Value as a Rational when it is an exact scalar, else None."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, Integer):
        return Rational._make(value.value, 1)
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational._make(value, 1)
    return None


def _is_operand(value: Any) -> bool:
    from . import kinds
    return kinds.is_numeric(value)


Rational.ZERO = Rational._make(0, 1)
Rational.ONE = Rational._make(1, 1)
