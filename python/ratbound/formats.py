# RatBound SDK - Text Formats
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Parsing and formatting helpers for the textual number notations.

All parsers return plain ``(numerator, denominator)`` integer pairs (or
lists of integers for continued fractions) so that the value types can
build on them without import cycles.

Notations:
    ``3/4``             fraction
    ``1..3/4``          mixed number (1 + 3/4)
    ``1.25``            terminating decimal
    ``0.1#6``           repeating decimal (0.1666...)
    ``1.5#0``           terminating decimal written with an explicit period
    ``0.{0~9}1``        run token: nine zeros then a one
    ``3.~7~15~1``       continued fraction [3; 7, 15, 1]
    ``5.~0``            continued fraction of an integer
"""

from __future__ import annotations
import re
from typing import Iterable

from .exceptions import DivisionByZero, InvalidFormat


RUN_THRESHOLD = 7

_RUN_TOKEN = re.compile(r'\{(.+?)~(\d+)\}')
_INTEGER = re.compile(r'^[+-]?\d+$')
_FRACTION = re.compile(r'^([+-]?\d+)/([+-]?\d+)$')
_MIXED = re.compile(r'^([+-]?)(\d+)\.\.(\d+)/(\d+)$')
_DECIMAL = re.compile(r'^([+-]?)(\d*)\.(\d*)(?:#(\d*))?$')
_CONTINUED = re.compile(r'^([+-]?\d+)\.~(.*)$')


def compress_runs(digits: str, threshold: int = RUN_THRESHOLD) -> str:
    """
    Replace every run of ``threshold`` or more identical characters with
    a ``{d~n}`` token.

    Example:
        >>> compress_runs('1000000002')
        '1{0~8}2'
    """
    if len(digits) < threshold:
        return digits
    parts = []
    i = 0
    while i < len(digits):
        char = digits[i]
        j = i
        while j < len(digits) and digits[j] == char:
            j += 1
        count = j - i
        if count >= threshold:
            parts.append(f"{{{char}~{count}}}")
        else:
            parts.append(char * count)
        i = j
    return ''.join(parts)


def expand_runs(text: str) -> str:
    """Inverse of :func:`compress_runs`."""
    return _RUN_TOKEN.sub(lambda m: m.group(1) * int(m.group(2)), text)


def parse_integer(text: str) -> tuple[int, int]:
    if not _INTEGER.match(text):
        raise InvalidFormat(f"Invalid integer: '{text}'")
    return int(text), 1


def parse_fraction(text: str) -> tuple[int, int]:
    """Parse ``a/b``."""
    match = _FRACTION.match(text)
    if not match:
        raise InvalidFormat(f"Invalid fraction format: '{text}'")
    numerator, denominator = int(match.group(1)), int(match.group(2))
    if denominator == 0:
        raise DivisionByZero("Denominator cannot be zero")
    return numerator, denominator


def parse_mixed_number(text: str) -> tuple[int, int]:
    """Parse ``w..n/d`` as ``w + n/d``; a leading sign applies to the whole."""
    match = _MIXED.match(text)
    if not match:
        raise InvalidFormat(f"Invalid mixed number format: '{text}'")
    sign, whole, numerator, denominator = match.groups()
    whole, numerator, denominator = int(whole), int(numerator), int(denominator)
    if denominator == 0:
        raise DivisionByZero("Denominator cannot be zero")
    value = whole * denominator + numerator
    return (-value if sign == '-' else value), denominator


def parse_decimal(text: str) -> tuple[int, int]:
    """
    Parse a terminating or repeating decimal exactly.

    For ``W.F#R`` with ``n`` digits in F and ``m`` digits in R the value is
    ``(WFR - WF) / (10^n * (10^m - 1))``; ``#0`` is a terminating decimal.
    Run tokens ``{d~n}`` are expanded first.
    """
    expanded = expand_runs(text)
    match = _DECIMAL.match(expanded)
    if not match:
        raise InvalidFormat(f"Invalid decimal format: '{text}'")
    sign, whole, fraction, period = match.groups()
    if not whole and not fraction and not period:
        raise InvalidFormat(f"Invalid decimal format: '{text}'")
    if period is not None and period == '':
        raise InvalidFormat(f"Repeating part after '#' cannot be empty: '{text}'")

    head = int(whole + fraction) if (whole + fraction) else 0
    scale = 10 ** len(fraction)
    if period is None:
        numerator, denominator = head, scale
    else:
        numerator = int(whole + fraction + period) - head
        denominator = scale * (10 ** len(period) - 1)
    return (-numerator if sign == '-' else numerator), denominator


def parse_continued_fraction(text: str) -> list[int]:
    """
    Parse ``a0.~a1~a2~...`` into ``[a0, a1, a2, ...]``.

    ``a0.~0`` denotes the integer ``a0``. Terms after the first must be
    positive.
    """
    match = _CONTINUED.match(text.strip())
    if not match:
        raise InvalidFormat("Invalid continued fraction format")
    whole, rest = int(match.group(1)), match.group(2)
    if rest == '0':
        return [whole]
    if rest == '':
        raise InvalidFormat("Continued fraction must have at least one term after .~")
    if rest.endswith('~'):
        raise InvalidFormat("Continued fraction cannot end with ~")
    if '~~' in rest:
        raise InvalidFormat("Invalid continued fraction format: double tilde")
    terms = [whole]
    for term in rest.split('~'):
        if not term.isdigit():
            raise InvalidFormat(f"Invalid continued fraction term: {term}")
        if int(term) <= 0:
            raise InvalidFormat(f"Continued fraction terms must be positive integers: {term}")
        terms.append(int(term))
    return terms


def format_continued_fraction(terms: Iterable[int]) -> str:
    """Inverse of :func:`parse_continued_fraction`."""
    terms = list(terms)
    if not terms:
        raise InvalidFormat("Continued fraction cannot be empty")
    if len(terms) == 1:
        return f"{terms[0]}.~0"
    return f"{terms[0]}.~" + '~'.join(str(t) for t in terms[1:])


def convergent_pairs(terms: Iterable[int]) -> list[tuple[int, int]]:
    """
    Convergents ``p_k/q_k`` of a continued fraction by the recurrence
    ``p_k = a_k p_{k-1} + p_{k-2}``, ``q_k = a_k q_{k-1} + q_{k-2}``.
    """
    pairs = []
    p_prev, p = 1, None
    q_prev, q = 0, None
    for index, a in enumerate(terms):
        if index == 0:
            p, q = a, 1
        else:
            if a <= 0:
                raise InvalidFormat(f"Continued fraction terms must be positive: {a}")
            p, p_prev = a * p + p_prev, p
            q, q_prev = a * q + q_prev, q
        pairs.append((p, q))
    if not pairs:
        raise InvalidFormat("Continued fraction cannot be empty")
    return pairs


def classify(text: str) -> str:
    """Name the notation of a rational literal."""
    if '~' in text and '.~' in text:
        return 'continued'
    if '..' in text:
        return 'mixed'
    if '#' in text or '.' in text or '{' in text:
        return 'decimal'
    if '/' in text:
        return 'fraction'
    return 'integer'


def parse_rational_text(text: str) -> tuple[int, int]:
    """
    Parse any rational literal into an unreduced ``(numerator, denominator)``.

    Raises:
        InvalidFormat: If the text matches no notation.
        DivisionByZero: For a zero denominator.
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"Expected text, got {type(text).__name__}")
    text = text.strip().replace('_', '')
    if not text:
        raise InvalidFormat("Empty number literal")
    kind = classify(text)
    if kind == 'continued':
        return convergent_pairs(parse_continued_fraction(text))[-1]
    if kind == 'mixed':
        return parse_mixed_number(text)
    if kind == 'decimal':
        if '/' in text:
            raise InvalidFormat(f"Invalid number format: '{text}'")
        return parse_decimal(text)
    if kind == 'fraction':
        return parse_fraction(text)
    return parse_integer(text)
