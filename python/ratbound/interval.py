# RatBound SDK - Rational Intervals
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Closed intervals with exact rational endpoints.

Every arithmetic result encloses all values obtainable from members of
the operands.

Example:
    >>> from ratbound.interval import RationalInterval
    >>> i = RationalInterval(1, 3) * RationalInterval(2, 4)
    >>> i
    RationalInterval[2, 12]
    >>> RationalInterval.from_string('1/3:1/2').shortest_decimal()
    Rational(2, 5)
"""

from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import Any, Optional, Union

from .exceptions import (
    DivisionByZero,
    IndeterminateDivision,
    InvalidFormat,
    NoRepresentableValue,
    UndefinedOperation,
)
from .integer import Integer
from .rational import Rational, RationalLike


def _to_rational(value: RationalLike) -> Rational:
    return value if isinstance(value, Rational) else Rational(value)


@dataclass(frozen=True)
class RationalInterval:
    """
    A closed interval [low, high] with exact rational endpoints.

    The constructor accepts its endpoints in either order. Intervals are
    immutable and can be used as dictionary keys.
    """
    low: Rational
    high: Rational

    def __init__(self, a: RationalLike, b: Optional[RationalLike] = None):
        """
        Create the interval spanned by ``a`` and ``b``.

        Args:
            a: One endpoint (anything Rational accepts).
            b: Other endpoint; defaults to ``a`` for a point interval.
        """
        lo = _to_rational(a)
        hi = lo if b is None else _to_rational(b)
        if hi < lo:
            lo, hi = hi, lo
        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'low', lo)
        object.__setattr__(self, 'high', hi)

    @classmethod
    def point(cls, value: RationalLike) -> RationalInterval:
        """Create a point interval [x, x]."""
        return cls(value, value)

    @classmethod
    def from_string(cls, text: str) -> RationalInterval:
        """Parse ``'a:b'`` where each side is any rational literal."""
        parts = text.split(':')
        if len(parts) != 2:
            raise InvalidFormat("Invalid interval format. Use 'a:b'")
        return cls(Rational(parts[0]), Rational(parts[1]))

    # Arithmetic

    def add(self, other: Any) -> RationalInterval:
        o = _as_interval(other)
        return RationalInterval(self.low + o.low, self.high + o.high)

    def subtract(self, other: Any) -> RationalInterval:
        o = _as_interval(other)
        return RationalInterval(self.low - o.high, self.high - o.low)

    def multiply(self, other: Any) -> RationalInterval:
        o = _as_interval(other)
        corners = (
            self.low * o.low,
            self.low * o.high,
            self.high * o.low,
            self.high * o.high,
        )
        return RationalInterval(min(corners), max(corners))

    def divide(self, other: Any) -> RationalInterval:
        """
        Divide by an interval that excludes zero.

        Raises:
            DivisionByZero: If the divisor is exactly [0, 0].
            IndeterminateDivision: If the divisor contains zero.
        """
        o = _as_interval(other)
        if o.low.is_zero() and o.high.is_zero():
            raise DivisionByZero("Division by zero")
        if o.contains_zero():
            raise IndeterminateDivision("Division by interval containing zero")
        return self.multiply(o.reciprocate())

    def reciprocate(self) -> RationalInterval:
        if self.contains_zero():
            raise DivisionByZero("Cannot reciprocate an interval containing zero")
        return RationalInterval(self.high.reciprocal(), self.low.reciprocal())

    def negate(self) -> RationalInterval:
        return RationalInterval(self.high.negate(), self.low.negate())

    def pow(self, exponent: Union[int, Integer]) -> RationalInterval:
        """
        Tight integer power. Even powers of an interval straddling zero
        give ``[0, max]``; negative powers reciprocate.
        """
        n = int(exponent)
        if n == 0:
            if self.low.is_zero() and self.high.is_zero():
                raise UndefinedOperation("Zero cannot be raised to the power of zero")
            if self.contains_zero():
                raise UndefinedOperation("Cannot raise an interval containing zero to the power of zero")
            return RationalInterval(1, 1)
        if n < 0:
            if self.contains_zero():
                raise UndefinedOperation("Cannot raise an interval containing zero to a negative power")
            return self.pow(-n).reciprocate()
        if n == 1:
            return self
        if n % 2 == 0:
            if self.contains_zero():
                return RationalInterval(Rational.ZERO, max(self.low.abs(), self.high.abs()).pow(n))
            if self.high.is_negative():
                return RationalInterval(self.high.pow(n), self.low.pow(n))
        return RationalInterval(self.low.pow(n), self.high.pow(n))

    def mpow(self, exponent: Union[int, Integer]) -> RationalInterval:
        """Power by repeated interval multiplication (wider than :meth:`pow`)."""
        n = int(exponent)
        if n == 0:
            raise UndefinedOperation("Multiplicative exponentiation requires at least one factor")
        if n < 0:
            return self.reciprocate().mpow(-n)
        result = self
        for _ in range(n - 1):
            result = result.multiply(self)
        return result

    def scale10(self, exponent: int) -> RationalInterval:
        return RationalInterval(self.low.scale10(exponent), self.high.scale10(exponent))

    # Set operations

    def overlaps(self, other: RationalInterval) -> bool:
        return not (self.high < other.low or other.high < self.low)

    def contains(self, other: RationalInterval) -> bool:
        return self.low <= other.low and other.high <= self.high

    def contains_value(self, value: RationalLike) -> bool:
        r = _to_rational(value)
        return self.low <= r <= self.high

    def contains_zero(self) -> bool:
        return self.low.sign() <= 0 <= self.high.sign()

    def equals(self, other: Any) -> bool:
        return isinstance(other, RationalInterval) and self.low == other.low and self.high == other.high

    def intersection(self, other: RationalInterval) -> Optional[RationalInterval]:
        if not self.overlaps(other):
            return None
        return RationalInterval(max(self.low, other.low), min(self.high, other.high))

    def union(self, other: RationalInterval) -> Optional[RationalInterval]:
        """Hull of two overlapping or adjacent intervals, else None."""
        if not self.overlaps(other):
            return None
        return RationalInterval(min(self.low, other.low), max(self.high, other.high))

    def hull(self, other: RationalInterval) -> RationalInterval:
        """Smallest interval containing both, whether or not they touch."""
        return RationalInterval(min(self.low, other.low), max(self.high, other.high))

    # Measures

    def width(self) -> Rational:
        return self.high - self.low

    def midpoint(self) -> Rational:
        return (self.low + self.high) / 2

    def mediant(self) -> Rational:
        return Rational(self.low.numerator + self.high.numerator,
                        self.low.denominator + self.high.denominator)

    def is_point(self) -> bool:
        return self.low == self.high

    def bit_length(self) -> int:
        return max(self.low.bit_length(), self.high.bit_length())

    def shortest_decimal(self, base: int = 10) -> Rational:
        """
        The value in the interval with the smallest power-of-``base``
        denominator (smallest numerator among ties).

        Raises:
            NoRepresentableValue: If a point interval has no finite
                                  expansion in ``base``.
        """
        if base <= 1:
            raise InvalidFormat("Base must be greater than 1")
        if self.is_point():
            den = self.low.denominator
            common = math.gcd(den, base)
            while common > 1:
                den //= common
                common = math.gcd(den, base)
            if den != 1:
                raise NoRepresentableValue(
                    f"{self.low} has no terminating expansion in base {base}"
                )
            return self.low

        # Once base^k * width >= 1 an integer multiple of base^-k must fit
        width = self.width()
        max_k, reach = 0, width
        while reach < 1:
            max_k += 1
            reach = reach * base
        scale = 1
        for _ in range(max_k + 1):
            lowest = math.ceil(self.low * scale)
            highest = math.floor(self.high * scale)
            if lowest <= highest:
                return Rational(lowest, scale)
            scale *= base
        raise NoRepresentableValue("Failed to find shortest decimal representation (exceeded theoretical bound)")

    def random_rational(self, max_denominator: int = 1000, rng: Optional[random.Random] = None) -> Rational:
        """Uniform choice among reduced fractions in the interval with bounded denominator."""
        if max_denominator <= 0:
            raise InvalidFormat("max_denominator must be positive")
        choices = []
        for den in range(1, max_denominator + 1):
            for num in range(math.ceil(self.low * den), math.floor(self.high * den) + 1):
                if math.gcd(num, den) == 1:
                    choices.append(Rational._make(num, den))
        if not choices:
            return self.midpoint()
        return (rng or random).choice(choices)

    # String forms

    def to_string(self) -> str:
        return f"{self.low.to_string()}:{self.high.to_string()}"

    def to_mixed_string(self) -> str:
        return f"{self.low.to_mixed_string()}:{self.high.to_mixed_string()}"

    def to_repeating_decimal(self, use_repeat_notation: bool = True) -> str:
        return (f"{self.low.to_repeating_decimal(use_repeat_notation)}:"
                f"{self.high.to_repeating_decimal(use_repeat_notation)}")

    def compacted_decimal_interval(self) -> str:
        """Shared decimal prefix then the differing tails, e.g. ``3.14[15,16]``."""
        low, high = self.low.to_decimal(), self.high.to_decimal()
        prefix_length = 0
        for a, b in zip(low, high):
            if a != b:
                break
            prefix_length += 1
        prefix = low[:prefix_length]
        if prefix_length <= 1 or (prefix.startswith('-') and prefix_length <= 2):
            return f"{low}:{high}"
        low_tail, high_tail = low[prefix_length:], high[prefix_length:]
        if (not low_tail or not high_tail or len(low_tail) != len(high_tail)
                or not low_tail.isdigit() or not high_tail.isdigit()):
            return f"{low}:{high}"
        return f"{prefix}[{low_tail},{high_tail}]"

    def relative_mid_decimal_interval(self) -> str:
        """Midpoint with symmetric offset, ``mid[+-offset]``."""
        mid = self.midpoint()
        return f"{mid.to_decimal()}[+-{(self.high - mid).to_decimal()}]"

    def relative_decimal_interval(self) -> str:
        """
        Shortest decimal near the midpoint with offsets scaled to the unit of
        the digit after its last place: ``dec[+-x]`` or ``dec[+a,-b]``.
        """
        center = self._shortest_precise_decimal()
        below = center - self.low
        above = self.high - center
        text = center.to_decimal()
        places = len(text.split('.')[1]) if '.' in text else 0
        if places:
            scale = Rational(10 ** (places + 1))
            below_scaled, above_scaled = below * scale, above * scale
        else:
            below_scaled, above_scaled = below, above
        if (below - above).abs() < Rational(1, 10 ** 6):
            average = (below_scaled + above_scaled) / 2
            return f"{text}[+-{average.to_decimal()}]"
        return f"{text}[+{above_scaled.to_decimal()},-{below_scaled.to_decimal()}]"

    def _shortest_precise_decimal(self) -> Rational:
        mid = self.midpoint()
        for places in range(21):
            scale = 10 ** places
            lowest = math.ceil(self.low * scale)
            highest = math.floor(self.high * scale)
            if lowest <= highest:
                target = mid * scale
                # nearest integer to target within [lowest, highest], smaller on ties
                best = min(max(math.floor(target), lowest), highest)
                if best + 1 <= highest and (Rational(best + 1) - target).abs() < (target - best).abs():
                    best += 1
                return Rational(best, scale)
        return mid

    # Python protocol

    def __contains__(self, value: RationalLike) -> bool:
        return self.contains_value(value)

    def __hash__(self) -> int:
        return hash((self.low, self.high))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RationalInterval):
            return NotImplemented
        return self.equals(other)

    def __neg__(self) -> RationalInterval:
        return self.negate()

    def __add__(self, other: Any) -> Any:
        return self.add(other) if _is_operand(other) else NotImplemented

    def __radd__(self, other: Any) -> Any:
        return self.add(other) if _is_operand(other) else NotImplemented

    def __sub__(self, other: Any) -> Any:
        return self.subtract(other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other: Any) -> Any:
        return _as_interval(other).subtract(self) if _is_operand(other) else NotImplemented

    def __mul__(self, other: Any) -> Any:
        return self.multiply(other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return self.multiply(other) if _is_operand(other) else NotImplemented

    def __truediv__(self, other: Any) -> Any:
        return self.divide(other) if _is_operand(other) else NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        return _as_interval(other).divide(self) if _is_operand(other) else NotImplemented

    def __pow__(self, exponent: Any) -> RationalInterval:
        if not isinstance(exponent, (int, Integer)):
            return NotImplemented
        return self.pow(exponent)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"RationalInterval[{self.low}, {self.high}]"


def _as_interval(value: Any) -> RationalInterval:
    if isinstance(value, RationalInterval):
        return value
    if isinstance(value, (Rational, Integer)) or (isinstance(value, int) and not isinstance(value, bool)):
        return RationalInterval.point(value)
    raise TypeError(f"Cannot combine RationalInterval with {type(value).__name__}")


def _is_operand(value: Any) -> bool:
    from . import kinds
    return kinds.is_numeric(value)


RationalInterval.ZERO = RationalInterval(0)
RationalInterval.ONE = RationalInterval(1)
RationalInterval.UNIT = RationalInterval(0, 1)
