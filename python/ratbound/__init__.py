# RatBound SDK
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
RatBound Python SDK - Exact Rational Arithmetic.

This SDK provides exact integers and rationals with arbitrary precision,
rational intervals, unreduced fractions with Stern-Brocot tree
navigation, configurable base systems, and rigorous rational enclosures
of transcendental functions.

Example:
    >>> import ratbound as rb
    >>> rb.Rational('1/7').to_repeating_decimal()
    '0.#142857'
    >>> rb.RationalInterval(1, 3) * rb.RationalInterval(2, 4)
    RationalInterval[2, 12]
    >>> rb.reals.sin(0)
    RationalInterval[0, 0]

Key Features:
    - Repeating decimal and continued fraction notation
    - Interval arithmetic with exact endpoints
    - Mediants, Farey parents and Stern-Brocot paths
    - Enclosures of pi, e, exp, ln, trigonometric functions and roots
"""

__version__ = "0.1.0"

# Base systems
from .base_system import (
    BaseSystem,
    PrefixRegistry,
    prefix_registry,
    BINARY,
    OCTAL,
    DECIMAL,
    HEXADECIMAL,
    BASE36,
    BASE60,
    BASE62,
    ROMAN,
)

# Exact numbers
from .integer import Integer
from .rational import Rational, RepeatingDecimal, BaseExpansion
from .interval import RationalInterval
from .fraction import (
    Fraction,
    FractionInterval,
    FareyParents,
    SternBrocotChildren,
)

# Mixed-kind arithmetic
from .kinds import NumericKind

# Configuration
from .config import Config, DEFAULT_CONFIG

# Transcendental functions
from . import reals

# Exceptions
from .exceptions import (
    RatBoundError,
    InvalidFormat,
    InvalidCharacter,
    OutOfRange,
    DivisionByZero,
    IndeterminateDivision,
    UndefinedOperation,
    DomainError,
    ConvergenceLimitExceeded,
    PathTooLong,
    NoRepresentableValue,
)

__all__ = [
    # Version
    "__version__",
    # Base systems
    "BaseSystem",
    "PrefixRegistry",
    "prefix_registry",
    "BINARY",
    "OCTAL",
    "DECIMAL",
    "HEXADECIMAL",
    "BASE36",
    "BASE60",
    "BASE62",
    "ROMAN",
    # Exact numbers
    "Integer",
    "Rational",
    "RepeatingDecimal",
    "BaseExpansion",
    "RationalInterval",
    "Fraction",
    "FractionInterval",
    "FareyParents",
    "SternBrocotChildren",
    "NumericKind",
    # Configuration
    "Config",
    "DEFAULT_CONFIG",
    # Transcendental functions
    "reals",
    # Exceptions
    "RatBoundError",
    "InvalidFormat",
    "InvalidCharacter",
    "OutOfRange",
    "DivisionByZero",
    "IndeterminateDivision",
    "UndefinedOperation",
    "DomainError",
    "ConvergenceLimitExceeded",
    "PathTooLong",
    "NoRepresentableValue",
]
