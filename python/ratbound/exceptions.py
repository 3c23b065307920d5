# RatBound SDK - Exceptions
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""Exception hierarchy for RatBound.

Every error derives from :class:`RatBoundError` and from the closest
built-in exception, so callers that only know about ``ValueError`` or
``ZeroDivisionError`` keep working.
"""

from __future__ import annotations
from typing import Any, Optional


class RatBoundError(Exception):
    """Base class for all RatBound exceptions."""
    pass


class InvalidFormat(RatBoundError, ValueError):
    """Raised when text or constructor input cannot be interpreted."""
    pass


class InvalidCharacter(InvalidFormat):
    """Raised when a digit string contains a character outside its alphabet."""

    def __init__(self, character: str, alphabet: Optional[str] = None):
        message = f"Invalid character '{character}'"
        if alphabet:
            message += f" for {alphabet}"
        super().__init__(message)
        self.character = character
        self.alphabet = alphabet


class OutOfRange(RatBoundError, IndexError):
    """Raised when an index lies outside its valid range."""
    pass


class DivisionByZero(RatBoundError, ZeroDivisionError):
    """Raised when dividing by an exact zero."""
    pass


class IndeterminateDivision(DivisionByZero):
    """Raised when dividing by an interval that contains zero."""
    pass


class UndefinedOperation(RatBoundError, ArithmeticError):
    """Raised for operations without a defined value, such as 0^0."""
    pass


class DomainError(RatBoundError, ValueError):
    """Raised when a function is evaluated outside its domain."""

    def __init__(
        self,
        message: str,
        function: Optional[str] = None,
        argument: Optional[Any] = None,
    ):
        super().__init__(message)
        self.function = function
        self.argument = argument


class ConvergenceLimitExceeded(RatBoundError, ArithmeticError):
    """Raised when an iterative procedure hits its safety cap."""

    def __init__(self, message: str, limit: Optional[int] = None):
        if limit is not None:
            message += f" (limit {limit})"
        super().__init__(message)
        self.limit = limit


class PathTooLong(ConvergenceLimitExceeded):
    """Raised when a Stern-Brocot walk exceeds the maximum depth."""
    pass


class NoRepresentableValue(RatBoundError, ArithmeticError):
    """Raised when no value of the requested form lies in an interval."""
    pass
