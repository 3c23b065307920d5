# RatBound SDK - Unreduced Fractions
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Unreduced fractions, mediants and the Stern-Brocot tree.

Unlike :class:`~ratbound.rational.Rational`, a :class:`Fraction` keeps the
numerator and denominator it was given, so ``2/4`` and ``1/2`` are
different objects with the same value. The two infinities ``-1/0`` and
``1/0`` bound the Stern-Brocot tree, whose root is ``0/1``.

Example:
    >>> from ratbound.fraction import Fraction
    >>> Fraction(3, 5).stern_brocot_path()
    ['R', 'L', 'R', 'L']
    >>> Fraction.from_stern_brocot_path('RLRL')
    Fraction(3, 5)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, NamedTuple, Optional, Sequence, Union

from .exceptions import DivisionByZero, InvalidFormat, PathTooLong, UndefinedOperation
from .integer import Integer
from .interval import RationalInterval
from .rational import Rational


class FareyParents(NamedTuple):
    """The two Stern-Brocot neighbours whose mediant is a fraction."""
    left: 'Fraction'
    right: 'Fraction'


class SternBrocotChildren(NamedTuple):
    left: 'Fraction'
    right: 'Fraction'


@dataclass(frozen=True)
class Fraction:
    """
    A fraction that is never reduced implicitly.

    Equality is structural (``Fraction(2, 4) != Fraction(1, 2)``); ordering
    compares values by cross multiplication.
    """
    numerator: int
    denominator: int
    is_infinite: bool

    MAX_DEPTH = 500

    def __init__(
        self,
        numerator: Union[int, Integer, str],
        denominator: Union[int, Integer] = 1,
        allow_infinite: bool = False,
    ):
        """
        Create a fraction.

        Args:
            numerator: Integer numerator, or text ``'a/b'`` / ``'a'``.
            denominator: Integer denominator.
            allow_infinite: Accept ``1/0`` and ``-1/0``.

        Raises:
            DivisionByZero: For a zero denominator unless an allowed infinity.
            InvalidFormat: For malformed text.
        """
        if isinstance(numerator, str):
            parts = numerator.strip().split('/')
            try:
                if len(parts) == 1:
                    num, den = int(parts[0]), int(denominator)
                elif len(parts) == 2:
                    num, den = int(parts[0]), int(parts[1])
                else:
                    raise InvalidFormat("Invalid fraction format. Use 'a/b' or 'a'")
            except ValueError as exc:
                if isinstance(exc, InvalidFormat):
                    raise
                raise InvalidFormat(f"Invalid fraction format: '{numerator}'") from exc
        else:
            num, den = int(numerator), int(denominator)

        infinite = False
        if den == 0:
            if allow_infinite and num in (1, -1):
                infinite = True
            else:
                raise DivisionByZero("Denominator cannot be zero")
        object.__setattr__(self, 'numerator', num)
        object.__setattr__(self, 'denominator', den)
        object.__setattr__(self, 'is_infinite', infinite)

    @classmethod
    def infinity(cls, sign: int = 1) -> Fraction:
        return cls(1 if sign > 0 else -1, 0, allow_infinite=True)

    @classmethod
    def from_rational(cls, rational: Rational) -> Fraction:
        return cls(rational.numerator, rational.denominator)

    def to_rational(self) -> Rational:
        if self.is_infinite:
            raise DivisionByZero("Infinite fraction has no rational value")
        return Rational(self.numerator, self.denominator)

    # Arithmetic (results stay unreduced)

    def add(self, other: Fraction) -> Fraction:
        if self.denominator != other.denominator:
            raise UndefinedOperation("Addition only supported for equal denominators")
        return Fraction(self.numerator + other.numerator, self.denominator)

    def subtract(self, other: Fraction) -> Fraction:
        if self.denominator != other.denominator:
            raise UndefinedOperation("Subtraction only supported for equal denominators")
        return Fraction(self.numerator - other.numerator, self.denominator)

    def multiply(self, other: Fraction) -> Fraction:
        return Fraction(self.numerator * other.numerator, self.denominator * other.denominator)

    def divide(self, other: Fraction) -> Fraction:
        if other.numerator == 0:
            raise DivisionByZero("Division by zero")
        return Fraction(self.numerator * other.denominator, self.denominator * other.numerator)

    def pow(self, exponent: Union[int, Integer]) -> Fraction:
        n = int(exponent)
        if n == 0:
            if self.numerator == 0:
                raise UndefinedOperation("Zero cannot be raised to the power of zero")
            return Fraction(1, 1)
        if n < 0:
            if self.numerator == 0:
                raise UndefinedOperation("Zero cannot be raised to a negative power")
            return Fraction(self.denominator ** -n, self.numerator ** -n)
        return Fraction(self.numerator ** n, self.denominator ** n)

    def scale(self, factor: Union[int, Integer]) -> Fraction:
        """Multiply numerator and denominator by the same factor."""
        k = int(factor)
        return Fraction(self.numerator * k, self.denominator * k)

    def scale10(self, exponent: int) -> Fraction:
        if exponent >= 0:
            return Fraction(self.numerator * 10 ** exponent, self.denominator)
        return Fraction(self.numerator, self.denominator * 10 ** -exponent)

    def reduce(self) -> Fraction:
        """Lowest terms with a positive denominator."""
        if self.is_infinite:
            return self
        if self.numerator == 0:
            return Fraction(0, 1)
        common = math.gcd(self.numerator, self.denominator)
        num, den = self.numerator // common, self.denominator // common
        if den < 0:
            num, den = -num, -den
        return Fraction(num, den)

    def mediant(self, other: Fraction) -> Fraction:
        """
        ``(a+c)/(b+d)``. Also usable as ``Fraction.mediant(a, b)``.

        The mediant of the two infinities is the tree root ``0/1``.
        """
        if self.is_infinite and other.is_infinite:
            if self.numerator != other.numerator:
                return Fraction(0, 1)
            raise UndefinedOperation("Cannot compute mediant of two equal infinities")
        num = self.numerator + other.numerator
        den = self.denominator + other.denominator
        if num == 0 and den == 0:
            raise UndefinedOperation("Mediant would result in 0/0")
        return Fraction(num, den, allow_infinite=True)

    # Comparison

    def equals(self, other: Any) -> bool:
        return (isinstance(other, Fraction) and self.numerator == other.numerator
                and self.denominator == other.denominator)

    def _cross(self, other: Fraction) -> tuple[int, int]:
        # Denominators are non-negative for tree nodes; flip sign otherwise
        left = self.numerator * other.denominator
        right = self.denominator * other.numerator
        if (self.denominator < 0) != (other.denominator < 0):
            left, right = -left, -right
        return left, right

    def less_than(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left < right

    def less_than_or_equal(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left <= right

    def greater_than(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left > right

    def greater_than_or_equal(self, other: Fraction) -> bool:
        left, right = self._cross(other)
        return left >= right

    # Stern-Brocot tree

    def _require_finite(self, what: str) -> None:
        if self.is_infinite:
            raise UndefinedOperation(f"Infinite fractions don't have {what}")

    def _walk(self) -> tuple[list[str], Fraction, Fraction]:
        """Descend from ``0/1`` to this value; return path and final bounds."""
        target = self.reduce()
        left, right = Fraction.infinity(-1), Fraction.infinity(1)
        current = Fraction(0, 1)
        path: list[str] = []
        while not current.equals(target):
            if len(path) >= self.MAX_DEPTH:
                raise PathTooLong(f"Stern-Brocot path for {self} is too long", self.MAX_DEPTH)
            if target.less_than(current):
                path.append('L')
                right = current
                current = left.mediant(current)
            else:
                path.append('R')
                left = current
                current = current.mediant(right)
        return path, left, right

    def farey_parents(self) -> FareyParents:
        """The bounds whose mediant produced this value in the tree."""
        self._require_finite('Farey parents')
        _, left, right = self._walk()
        return FareyParents(left, right)

    def stern_brocot_path(self) -> list[str]:
        """Sequence of ``'L'``/``'R'`` moves from the root to this value."""
        self._require_finite('tree paths')
        path, _, _ = self._walk()
        return path

    @classmethod
    def from_stern_brocot_path(cls, path: Iterable[str]) -> Fraction:
        left, right = cls.infinity(-1), cls.infinity(1)
        current = cls(0, 1)
        for direction in path:
            if direction == 'L':
                right = current
                current = left.mediant(current)
            elif direction == 'R':
                left = current
                current = current.mediant(right)
            else:
                raise InvalidFormat(f"Invalid direction in path: {direction}")
        return current

    def stern_brocot_parent(self) -> Optional[Fraction]:
        """Parent node, or None for the root."""
        path = self.stern_brocot_path()
        if not path:
            return None
        return Fraction.from_stern_brocot_path(path[:-1])

    def stern_brocot_children(self) -> SternBrocotChildren:
        path = self.stern_brocot_path()
        return SternBrocotChildren(
            Fraction.from_stern_brocot_path(path + ['L']),
            Fraction.from_stern_brocot_path(path + ['R']),
        )

    def stern_brocot_ancestors(self) -> list[Fraction]:
        """Ancestors from the parent up to the root."""
        if self.is_infinite:
            return []
        path = self.stern_brocot_path()
        return [Fraction.from_stern_brocot_path(path[:i]) for i in range(len(path) - 1, -1, -1)]

    def stern_brocot_depth(self) -> Union[int, float]:
        if self.is_infinite:
            return math.inf
        return len(self.stern_brocot_path())

    def is_stern_brocot_valid(self) -> bool:
        """Whether this exact fraction (not just its value) is a tree node."""
        if self.is_infinite:
            return True
        try:
            return self.equals(Fraction.from_stern_brocot_path(self.stern_brocot_path()))
        except PathTooLong:
            return False

    @staticmethod
    def mediant_partner(endpoint: Fraction, mediant: Fraction) -> Fraction:
        """
        The fraction ``r/s`` with ``endpoint`` ⊕ ``r/s`` equal to ``mediant``.

        Uses ``(a-p)/(b-q)`` when that is a proper fraction, otherwise
        ``(2a-p)/(2b-q)``, whose mediant with the endpoint has the same value.
        """
        if endpoint.is_infinite or mediant.is_infinite:
            raise UndefinedOperation("Cannot compute mediant partner with infinite fractions")
        p, q = endpoint.numerator, endpoint.denominator
        a, b = mediant.numerator, mediant.denominator
        if b - q > 0:
            return Fraction(a - p, b - q)
        return Fraction(2 * a - p, 2 * b - q)

    @staticmethod
    def is_mediant_triple(left: Fraction, mediant: Fraction, right: Fraction) -> bool:
        if mediant.is_infinite or (left.is_infinite and right.is_infinite):
            return False
        try:
            return mediant.equals(left.mediant(right))
        except UndefinedOperation:
            return False

    @staticmethod
    def is_farey_triple(left: Fraction, mediant: Fraction, right: Fraction) -> bool:
        """A mediant triple whose outer fractions have determinant ±1."""
        if not Fraction.is_mediant_triple(left, mediant, right):
            return False
        if left.is_infinite or right.is_infinite:
            return True
        determinant = left.numerator * right.denominator - left.denominator * right.numerator
        return determinant in (1, -1)

    # Python protocol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Fraction) -> bool:
        return self.less_than(other) if isinstance(other, Fraction) else NotImplemented

    def __le__(self, other: Fraction) -> bool:
        return self.less_than_or_equal(other) if isinstance(other, Fraction) else NotImplemented

    def __gt__(self, other: Fraction) -> bool:
        return self.greater_than(other) if isinstance(other, Fraction) else NotImplemented

    def __ge__(self, other: Fraction) -> bool:
        return self.greater_than_or_equal(other) if isinstance(other, Fraction) else NotImplemented

    def to_string(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"


@dataclass(frozen=True)
class FractionInterval:
    """A closed interval between two finite fractions, kept unreduced."""
    low: Fraction
    high: Fraction

    def __init__(self, a: Fraction, b: Fraction):
        if not isinstance(a, Fraction) or not isinstance(b, Fraction):
            raise InvalidFormat("FractionInterval endpoints must be Fraction objects")
        if a.is_infinite or b.is_infinite:
            raise InvalidFormat("FractionInterval endpoints must be finite")
        if b.less_than(a):
            a, b = b, a
        object.__setattr__(self, 'low', a)
        object.__setattr__(self, 'high', b)

    def mediant_split(self) -> tuple[FractionInterval, FractionInterval]:
        mid = self.low.mediant(self.high)
        return FractionInterval(self.low, mid), FractionInterval(mid, self.high)

    def partition_with_mediants(self, depth: int = 1) -> list[FractionInterval]:
        """Split every piece at its mediant ``depth`` times (``2**depth`` pieces)."""
        if depth < 0:
            raise InvalidFormat("Depth of mediant partitioning must be non-negative")
        pieces = [self]
        for _ in range(depth):
            pieces = [half for piece in pieces for half in piece.mediant_split()]
        return pieces

    def partition_with(
        self,
        fn: Callable[[Fraction, Fraction], Sequence[Fraction]],
    ) -> list[FractionInterval]:
        """
        Partition at the points ``fn(low, high)`` returns.

        Raises:
            InvalidFormat: If ``fn`` returns non-Fractions or points outside
                           the interval.
        """
        points = fn(self.low, self.high)
        if not isinstance(points, (list, tuple)):
            raise InvalidFormat("Partition function must return a list of Fractions")
        for point in points:
            if not isinstance(point, Fraction):
                raise InvalidFormat("Partition function must return Fraction objects")
            if point.less_than(self.low) or point.greater_than(self.high):
                raise InvalidFormat("Partition points should be within the interval")
        ordered = sorted([self.low, *points, self.high], key=lambda f: f.to_rational())
        unique = [ordered[0]]
        for point in ordered[1:]:
            if not point.equals(unique[-1]):
                unique.append(point)
        return [FractionInterval(a, b) for a, b in zip(unique, unique[1:])]

    def to_rational_interval(self) -> RationalInterval:
        return RationalInterval(self.low.to_rational(), self.high.to_rational())

    @classmethod
    def from_rational_interval(cls, interval: RationalInterval) -> FractionInterval:
        return cls(Fraction.from_rational(interval.low), Fraction.from_rational(interval.high))

    def scale10(self, exponent: int) -> FractionInterval:
        return FractionInterval(self.low.scale10(exponent), self.high.scale10(exponent))

    def equals(self, other: Any) -> bool:
        return isinstance(other, FractionInterval) and self.low.equals(other.low) and self.high.equals(other.high)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FractionInterval):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.low, self.high))

    def to_string(self) -> str:
        return f"{self.low}:{self.high}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"FractionInterval[{self.low}, {self.high}]"
