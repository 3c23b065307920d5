# RatBound SDK - Integers
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Arbitrary-precision integers that widen to rationals when needed.

Example:
    >>> from ratbound.integer import Integer
    >>> Integer(7) / Integer(2)
    Rational(7, 2)
    >>> Integer(6) / Integer(3)
    Integer(2)
    >>> Integer(2) ** -2
    Rational(1, 4)
"""

from __future__ import annotations
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from .base_system import BaseSystem
from .exceptions import DivisionByZero, DomainError, InvalidFormat, UndefinedOperation

if TYPE_CHECKING:
    from .rational import Rational


_INTEGER_TEXT = re.compile(r'^-?\d+$')

IntegerLike = Union['Integer', int]


def _widened(operation: str, left: Any, right: Any) -> Any:
    from . import kinds
    return kinds.apply(operation, left, right)


@dataclass(frozen=True)
class Integer:
    """
    An immutable arbitrary-precision integer.

    Exact divisions stay integers; inexact ones and negative powers
    become :class:`~ratbound.rational.Rational`. Mixing with rationals or
    intervals widens to the larger kind.
    """
    value: int

    def __init__(self, value: Union[IntegerLike, str, float] = 0):
        if isinstance(value, Integer):
            number = value.value
        elif isinstance(value, bool):
            raise InvalidFormat("Booleans are not integers")
        elif isinstance(value, int):
            number = value
        elif isinstance(value, str):
            text = value.strip()
            if not _INTEGER_TEXT.match(text):
                raise InvalidFormat("Invalid integer format. Must be a whole number")
            number = int(text)
        elif isinstance(value, float):
            if not value.is_integer():
                raise InvalidFormat(f"{value!r} is not a whole number")
            number = int(value)
        else:
            raise InvalidFormat(f"Cannot create Integer from {type(value).__name__}")
        object.__setattr__(self, 'value', number)

    @classmethod
    def from_rational(cls, rational: Rational) -> Integer:
        if rational.denominator != 1:
            raise InvalidFormat("Rational is not a whole number")
        return cls(rational.numerator)

    # Arithmetic

    def add(self, other: Any) -> Any:
        if isinstance(other, (Integer, int)) and not isinstance(other, bool):
            return Integer(self.value + int(other))
        return _widened('add', self, other)

    def subtract(self, other: Any) -> Any:
        if isinstance(other, (Integer, int)) and not isinstance(other, bool):
            return Integer(self.value - int(other))
        return _widened('subtract', self, other)

    def multiply(self, other: Any) -> Any:
        if isinstance(other, (Integer, int)) and not isinstance(other, bool):
            return Integer(self.value * int(other))
        return _widened('multiply', self, other)

    def divide(self, other: Any) -> Any:
        """Exact quotient; an Integer when it divides evenly, else a Rational."""
        if isinstance(other, (Integer, int)) and not isinstance(other, bool):
            divisor = int(other)
            if divisor == 0:
                raise DivisionByZero("Division by zero")
            quotient, remainder = divmod(self.value, divisor)
            if remainder == 0:
                return Integer(quotient)
            from .rational import Rational
            return Rational(self.value, divisor)
        return _widened('divide', self, other)

    def modulo(self, other: IntegerLike) -> Integer:
        """Remainder of truncated division; takes the sign of the dividend."""
        divisor = int(other)
        if divisor == 0:
            raise DivisionByZero("Modulo by zero")
        remainder = abs(self.value) % abs(divisor)
        return Integer(-remainder if self.value < 0 else remainder)

    def negate(self) -> Integer:
        return Integer(-self.value)

    def pow(self, exponent: IntegerLike) -> Union[Integer, Rational]:
        """
        Raise to an integer power by repeated squaring.

        Raises:
            UndefinedOperation: For 0^0 and 0 to a negative power.
        """
        exp = int(exponent)
        if exp == 0:
            if self.value == 0:
                raise UndefinedOperation("Zero cannot be raised to the power of zero")
            return Integer(1)
        if exp < 0:
            if self.value == 0:
                raise UndefinedOperation("Zero cannot be raised to a negative power")
            from .rational import Rational
            return Rational(1, self.value ** -exp)
        return Integer(self.value ** exp)

    def abs(self) -> Integer:
        return self if self.value >= 0 else self.negate()

    def sign(self) -> Integer:
        return Integer((self.value > 0) - (self.value < 0))

    def gcd(self, other: IntegerLike) -> Integer:
        return Integer(math.gcd(self.value, int(other)))

    def lcm(self, other: IntegerLike) -> Integer:
        b = int(other)
        if self.value == 0 or b == 0:
            return Integer(0)
        return Integer(abs(self.value * b) // self.gcd(b).value)

    def factorial(self) -> Integer:
        if self.value < 0:
            raise DomainError(
                "Factorial is not defined for negative integers",
                function='factorial', argument=self,
            )
        result = 1
        for i in range(2, self.value + 1):
            result *= i
        return Integer(result)

    def double_factorial(self) -> Integer:
        if self.value < 0:
            raise DomainError(
                "Double factorial is not defined for negative integers",
                function='double_factorial', argument=self,
            )
        result = 1
        for i in range(self.value, 0, -2):
            result *= i
        return Integer(result)

    def scale10(self, exponent: int) -> Union[Integer, Rational]:
        """Multiply by ``10**exponent``."""
        if exponent >= 0:
            return Integer(self.value * 10 ** exponent)
        from .rational import Rational
        return Rational(self.value, 10 ** -exponent)

    # Predicates and comparison

    def is_even(self) -> bool:
        return self.value % 2 == 0

    def is_odd(self) -> bool:
        return self.value % 2 != 0

    def is_zero(self) -> bool:
        return self.value == 0

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    def compare_to(self, other: IntegerLike) -> int:
        b = int(other)
        return (self.value > b) - (self.value < b)

    def equals(self, other: Any) -> bool:
        return isinstance(other, (Integer, int)) and self.value == int(other)

    def bit_length(self) -> int:
        return self.value.bit_length()

    # Conversion

    def to_rational(self) -> Rational:
        from .rational import Rational
        return Rational(self.value)

    def to_number(self) -> float:
        return float(self.value)

    def to_base(self, system: BaseSystem) -> str:
        if not isinstance(system, BaseSystem):
            raise InvalidFormat("Argument must be a BaseSystem")
        return system.from_decimal(self.value)

    def to_string(self, base: Union[BaseSystem, int, None] = None) -> str:
        if base is None or base == 10:
            return str(self.value)
        if isinstance(base, BaseSystem):
            return base.from_decimal(self.value)
        return BaseSystem.from_base(base).from_decimal(self.value)

    # Python protocol

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Integer({self.value})"

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Integer):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, (Integer, int)):
            return self.value < int(other)
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, (Integer, int)):
            return self.value <= int(other)
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, (Integer, int)):
            return self.value > int(other)
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, (Integer, int)):
            return self.value >= int(other)
        return NotImplemented

    def __neg__(self) -> Integer:
        return self.negate()

    def __pos__(self) -> Integer:
        return self

    def __abs__(self) -> Integer:
        return self.abs()

    def __add__(self, other: Any) -> Any:
        return self.add(other) if _is_operand(other) else NotImplemented

    def __radd__(self, other: Any) -> Any:
        return Integer(other).add(self) if isinstance(other, int) else NotImplemented

    def __sub__(self, other: Any) -> Any:
        return self.subtract(other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other: Any) -> Any:
        return Integer(other).subtract(self) if isinstance(other, int) else NotImplemented

    def __mul__(self, other: Any) -> Any:
        return self.multiply(other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return Integer(other).multiply(self) if isinstance(other, int) else NotImplemented

    def __truediv__(self, other: Any) -> Any:
        return self.divide(other) if _is_operand(other) else NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        return Integer(other).divide(self) if isinstance(other, int) else NotImplemented

    def __floordiv__(self, other: Any) -> Integer:
        if not isinstance(other, (Integer, int)):
            return NotImplemented
        if int(other) == 0:
            raise DivisionByZero("Division by zero")
        return Integer(self.value // int(other))

    def __mod__(self, other: Any) -> Integer:
        if not isinstance(other, (Integer, int)):
            return NotImplemented
        return self.modulo(other)

    def __pow__(self, exponent: Any) -> Union[Integer, Rational]:
        if not isinstance(exponent, (Integer, int)):
            return NotImplemented
        return self.pow(exponent)


def _is_operand(value: Any) -> bool:
    from . import kinds
    return kinds.is_numeric(value)


Integer.ZERO = Integer(0)
Integer.ONE = Integer(1)
