# RatBound SDK - Numeric Kinds
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Promotion lattice for mixed-kind arithmetic.

Values are ordered ``INTEGER < RATIONAL < INTERVAL``. A binary operation
widens both operands to the larger kind once and then runs the same-kind
operation.

Example:
    >>> from ratbound import kinds, Integer, Rational
    >>> kinds.add(Integer(1), Rational(1, 2))
    Rational(3, 2)
"""

from __future__ import annotations
from enum import IntEnum
from typing import Any, Union

from .exceptions import InvalidFormat
from .integer import Integer
from .interval import RationalInterval
from .rational import Rational


Numeric = Union[Integer, Rational, RationalInterval]


class NumericKind(IntEnum):
    """Kinds in widening order."""
    INTEGER = 0
    RATIONAL = 1
    INTERVAL = 2


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, Integer, Rational, RationalInterval))


def kind_of(value: Any) -> NumericKind:
    """Kind of a value; plain ints count as integers."""
    if isinstance(value, RationalInterval):
        return NumericKind.INTERVAL
    if isinstance(value, Rational):
        return NumericKind.RATIONAL
    if isinstance(value, Integer) or (isinstance(value, int) and not isinstance(value, bool)):
        return NumericKind.INTEGER
    raise TypeError(f"Unknown numeric type: {type(value).__name__}")


def widen(a: NumericKind, b: NumericKind) -> NumericKind:
    return max(a, b)


def promote(value: Any, kind: NumericKind) -> Numeric:
    """
    Convert ``value`` to ``kind``.

    Raises:
        InvalidFormat: When asked to narrow to a smaller kind.
    """
    current = kind_of(value)
    if current > kind:
        raise InvalidFormat(f"Cannot demote {current.name} to {kind.name}")
    if kind is NumericKind.INTEGER:
        return value if isinstance(value, Integer) else Integer(value)
    if kind is NumericKind.RATIONAL:
        return value if isinstance(value, Rational) else Rational(value)
    if isinstance(value, RationalInterval):
        return value
    return RationalInterval.point(value)


def coerce_pair(a: Any, b: Any) -> tuple[Numeric, Numeric, NumericKind]:
    """Promote two operands to their common kind."""
    kind = widen(kind_of(a), kind_of(b))
    return promote(a, kind), promote(b, kind), kind


_OPERATIONS = ('add', 'subtract', 'multiply', 'divide')


def apply(operation: str, a: Any, b: Any) -> Numeric:
    """Run a binary operation after promoting both operands."""
    if operation not in _OPERATIONS:
        raise InvalidFormat(f"Unknown operation: {operation}")
    left, right, _ = coerce_pair(a, b)
    return getattr(left, operation)(right)


def add(a: Any, b: Any) -> Numeric:
    return apply('add', a, b)


def subtract(a: Any, b: Any) -> Numeric:
    return apply('subtract', a, b)


def multiply(a: Any, b: Any) -> Numeric:
    return apply('multiply', a, b)


def divide(a: Any, b: Any) -> Numeric:
    """Integer division stays exact; it widens to Rational only when needed."""
    return apply('divide', a, b)


def negate(value: Any) -> Numeric:
    return promote(value, kind_of(value)).negate()


def power(base: Any, exponent: Union[int, Integer]) -> Numeric:
    return promote(base, kind_of(base)).pow(exponent)
