# RatBound SDK - Transcendental Functions
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""
Rigorous rational enclosures of transcendental functions.

Every function returns a :class:`~ratbound.interval.RationalInterval`
that contains the true value. For a point argument the series path keeps
the width of the result within the requested epsilon. A float fallback
(see ``Config.allow_float_fallback``) is padded by at least epsilon on
each side, so it is wider.

Precision codes:
    ``None``    the configured default (``10^-6``)
    ``-n``      epsilon ``10^-n``
    ``n > 0``   epsilon ``1/n``
    Rational    that epsilon

Example:
    >>> from ratbound import reals
    >>> reals.pi(-10).contains_value(Rational(314159265358979, 10**14))
    True
    >>> reals.exp(reals.ln(2)).contains_value(2)
    True

Strategy:
    - Constants: pi and e from continued-fraction convergents, ln 2 from
      the series ``sum 1/(k 2^k)``.
    - Range reduction to small arguments, then Taylor-type series whose
      truncation error is bounded by twice the first omitted term.
    - Reduced arguments are rounded outward to dyadic rationals so the
      series arithmetic stays small.
    - A refinement loop tightens the working precision until the result
      is narrow enough.
"""

from __future__ import annotations
import logging
import math
from functools import lru_cache
from typing import Callable, Iterator, Optional, Union

from .config import DEFAULT_CONFIG, Config
from .exceptions import ConvergenceLimitExceeded, DomainError, InvalidFormat, UndefinedOperation
from .integer import Integer
from .interval import RationalInterval
from .rational import Rational


logger = logging.getLogger(__name__)

Argument = Union[int, Integer, Rational, RationalInterval, str]
Precision = Union[int, Integer, Rational, None]

# Continued fraction of pi (OEIS A001203)
PI_CONTINUED_FRACTION = (
    3, 7, 15, 1, 292, 1, 1, 1, 2, 1, 3, 1, 14, 2, 1, 1, 2, 2, 2, 2, 1, 84, 2, 1, 1,
    15, 3, 13, 1, 4, 2, 6, 6, 99, 1, 2, 2, 6, 3, 5, 1, 1, 6, 8, 1, 7, 1, 2, 3, 7,
    1, 2, 1, 1, 12, 1, 1, 1, 3, 1, 1, 8, 1, 1, 2, 1, 6,
)

# Relative padding applied to float estimates
FLOAT_RELATIVE_PAD = Rational(1, 2 ** 40)

# Largest |x| for which sin, cos and tan may fall back to floats
PERIODIC_FALLBACK_LIMIT = 2 ** 30

_COARSE = Rational(1, 2 ** 64)
_HALF = Rational(1, 2)


# Precision and argument handling

def parse_precision(precision: Precision = None, config: Optional[Config] = None) -> Rational:
    """
    Turn a precision code into a positive epsilon.

    Raises:
        InvalidFormat: For zero or a non-positive Rational.
    """
    if precision is None:
        precision = (config or DEFAULT_CONFIG).precision
    if isinstance(precision, Rational):
        if precision.sign() <= 0:
            raise InvalidFormat("Precision epsilon must be positive")
        return precision
    if isinstance(precision, bool) or not isinstance(precision, (int, Integer)):
        raise InvalidFormat(f"Invalid precision: {precision!r}")
    n = int(precision)
    if n == 0:
        raise InvalidFormat("Precision must be non-zero")
    if n > 0:
        return Rational(1, n)
    return Rational(1, 10 ** -n)


def _as_argument(x: Argument) -> Union[Rational, RationalInterval]:
    if isinstance(x, RationalInterval):
        return x.low if x.is_point() else x
    if isinstance(x, Rational):
        return x
    if isinstance(x, str) and ':' in x:
        return _as_argument(RationalInterval.from_string(x))
    if isinstance(x, (int, Integer, str, float)):
        return Rational(x)
    raise TypeError(f"Unsupported argument type: {type(x).__name__}")


def _bits_for(epsilon: Rational) -> int:
    """Smallest ``b`` with ``2^-b <= epsilon``."""
    return max(epsilon.denominator.bit_length() - epsilon.numerator.bit_length() + 1, 1)


def _round_down(r: Rational, bits: int) -> Rational:
    return Rational((r.numerator << bits) // r.denominator, 1 << bits)


def _round_up(r: Rational, bits: int) -> Rational:
    return Rational(-((-r.numerator << bits) // r.denominator), 1 << bits)


def _refine(compute: Callable[[Rational], RationalInterval], epsilon: Rational,
            config: Config) -> RationalInterval:
    """Call ``compute`` with shrinking working precision until narrow enough."""
    working = epsilon
    for _ in range(config.max_refinements):
        result = compute(working)
        width = result.width()
        if width <= epsilon:
            return result
        logger.debug("Enclosure width %.3g exceeds %.3g, refining", float(width), float(epsilon))
        working = min(working / 4, working * epsilon / (width * 2))
    raise ConvergenceLimitExceeded("Could not reach the requested precision", config.max_refinements)


def _float_enclosure(name: str, value: float, epsilon: Rational) -> RationalInterval:
    center = Rational.exact_float(value)
    pad = max(epsilon, center.abs() * FLOAT_RELATIVE_PAD)
    logger.warning("%s: series limit reached, returning padded float estimate %r", name, value)
    return RationalInterval(center - pad, center + pad)


def _float_stands_in(x: Rational, periodic: bool) -> bool:
    """Whether the float nearest ``x`` is ``x`` itself, and small enough for periodic functions."""
    if periodic and x.abs() > PERIODIC_FALLBACK_LIMIT:
        return False
    try:
        return Rational.exact_float(x.to_number()) == x
    except OverflowError:
        return False


def _evaluate(
    name: str,
    x: Rational,
    epsilon: Rational,
    config: Config,
    point: Callable[[Rational, Rational, Config], RationalInterval],
    fallback: Optional[Callable[[float], float]] = None,
    periodic: bool = False,
) -> RationalInterval:
    """Point evaluation with refinement and optional float fallback."""
    try:
        return _refine(lambda w: point(x, w, config), epsilon, config)
    except ConvergenceLimitExceeded as exc:
        if fallback is None or not config.allow_float_fallback or not _float_stands_in(x, periodic):
            raise
        try:
            value = fallback(x.to_number())
        except (OverflowError, ValueError):
            raise exc
        return _float_enclosure(name, value, epsilon)


def _increasing_hull(
    name: str,
    x: RationalInterval,
    epsilon: Rational,
    config: Config,
    point: Callable[[Rational, Rational, Config], RationalInterval],
    fallback: Optional[Callable[[float], float]] = None,
    periodic: bool = False,
) -> RationalInterval:
    low = _evaluate(name, x.low, epsilon, config, point, fallback, periodic)
    high = _evaluate(name, x.high, epsilon, config, point, fallback, periodic)
    return RationalInterval(low.low, high.high)


# Series, each returning (partial sum, bound on the omitted tail)

def _series_limit(name: str, config: Config) -> ConvergenceLimitExceeded:
    return ConvergenceLimitExceeded(f"{name} series did not converge", config.max_series_terms)


def _exp_series(r: Rational, tol: Rational, config: Config) -> tuple[Rational, Rational]:
    # |r| <= 1: term ratios are at most 1/2 past the first omitted term
    total = Rational.ONE
    term = Rational.ONE
    for n in range(1, config.max_series_terms + 1):
        term = term * r / n
        if term.abs() <= tol:
            return total, term.abs() * 2
        total = total + term
    raise _series_limit('exp', config)


def _ln1p_series(y: Rational, tol: Rational, config: Config) -> tuple[Rational, Rational]:
    # |y| <= 1/2
    total = Rational.ZERO
    power = Rational.ONE
    for j in range(1, config.max_series_terms + 1):
        power = power * y
        term = power / j if j % 2 else -power / j
        if term.abs() <= tol:
            return total, term.abs() * 2
        total = total + term
    raise _series_limit('ln', config)


def _sin_series(r: Rational, tol: Rational, config: Config) -> tuple[Rational, Rational]:
    # |r| <= 1
    total = Rational.ZERO
    term = r
    square = r * r
    for j in range(config.max_series_terms):
        if term.abs() <= tol:
            return total, term.abs() * 2
        total = total + term
        term = -term * square / ((2 * j + 2) * (2 * j + 3))
    raise _series_limit('sin', config)


def _cos_series(r: Rational, tol: Rational, config: Config) -> tuple[Rational, Rational]:
    # |r| <= 1
    total = Rational.ZERO
    term = Rational.ONE
    square = r * r
    for j in range(config.max_series_terms):
        if term.abs() <= tol:
            return total, term.abs() * 2
        total = total + term
        term = -term * square / ((2 * j + 1) * (2 * j + 2))
    raise _series_limit('cos', config)


def _atan_series(w: Rational, tol: Rational, config: Config) -> tuple[Rational, Rational]:
    # |w| <= 1/2
    total = Rational.ZERO
    power = w
    square = w * w
    for j in range(config.max_series_terms):
        term = power / (2 * j + 1)
        if term.abs() <= tol:
            return total, term.abs() * 2
        total = total + term
        power = -power * square
    raise _series_limit('arctan', config)


def _asin_series(x: Rational, tol: Rational, config: Config) -> tuple[Rational, Rational]:
    # |x| <= 1/2; all terms share the sign of x
    total = Rational.ZERO
    term = x
    square = x * x
    for j in range(config.max_series_terms):
        if term.abs() <= tol:
            return total, term.abs() * 2
        total = total + term
        term = term * square * (2 * j + 1) ** 2 / ((2 * j + 2) * (2 * j + 3))
    raise _series_limit('arcsin', config)


def _increasing(series, low: Rational, high: Rational, tol: Rational,
                config: Config) -> tuple[Rational, Rational]:
    """Enclose an increasing series function over [low, high]."""
    total, error = series(low, tol, config)
    lower = total - error
    if high != low:
        total, error = series(high, tol, config)
    return lower, total + error


# Constants

def _from_continued_fraction(terms: Iterator[int], epsilon: Rational, name: str,
                             limit: int) -> RationalInterval:
    """Bracket a constant between the first two convergents closer than epsilon."""
    p_prev, q_prev = 1, 0
    p, q = None, None
    previous = None
    for count, a in enumerate(terms):
        if count >= limit:
            break
        if p is None:
            p, q = a, 1
        else:
            p, p_prev = a * p + p_prev, p
            q, q_prev = a * q + q_prev, q
        current = Rational(p, q)
        if previous is not None and (current - previous).abs() <= epsilon:
            return RationalInterval(previous, current)
        previous = current
    raise ConvergenceLimitExceeded(f"Continued fraction for {name} exhausted before reaching precision", limit)


def _e_terms() -> Iterator[int]:
    """[2; 1, 2, 1, 1, 4, 1, 1, 6, ...]"""
    yield 2
    k = 1
    while True:
        yield 1
        yield 2 * k
        yield 1
        k += 1


@lru_cache(maxsize=256)
def _pi_interval(epsilon: Rational) -> RationalInterval:
    return _from_continued_fraction(iter(PI_CONTINUED_FRACTION), epsilon, 'pi',
                                    len(PI_CONTINUED_FRACTION))


@lru_cache(maxsize=64)
def _e_interval(epsilon: Rational, limit: int) -> RationalInterval:
    return _from_continued_fraction(_e_terms(), epsilon, 'e', limit)


@lru_cache(maxsize=256)
def _ln2_interval(epsilon: Rational) -> RationalInterval:
    # ln 2 = sum 1/(k 2^k); the tail after n terms is below 1/((n+1) 2^n)
    bits = _bits_for(epsilon) + 2
    total = Rational.ZERO
    n, power = 0, 1
    while True:
        n += 1
        power *= 2
        total = total + Rational(1, n * power)
        tail = Rational(1, (n + 1) * power)
        if tail * 2 <= epsilon:
            return RationalInterval(_round_down(total, bits), _round_up(total + tail, bits))


def pi(precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of pi.

    Raises:
        ConvergenceLimitExceeded: If the stored continued fraction cannot
                                  reach the precision.
    """
    return _pi_interval(parse_precision(precision, config))


def e(precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """Enclosure of Euler's number from its continued fraction."""
    cfg = config or DEFAULT_CONFIG
    return _e_interval(parse_precision(precision, cfg), cfg.max_series_terms)


def ln2(precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """Enclosure of ln 2."""
    return _ln2_interval(parse_precision(precision, config))


def _pi_near(x: Rational) -> RationalInterval:
    """Enclosure of pi fine enough to find the quadrant of ``x``."""
    # 64 bits beyond the integer part of x
    bits = max(x.numerator.bit_length() - x.denominator.bit_length(), 0) + 64
    return _pi_interval(Rational(1, 2 ** bits))


def _half_pi_near(x: Rational) -> Rational:
    return _pi_near(x).midpoint() / 2


# Exponential and logarithm

def _exp_point(x: Rational, epsilon: Rational, config: Config) -> RationalInterval:
    if x.is_zero():
        return RationalInterval(1)
    k = math.floor(x / _ln2_interval(_COARSE).midpoint())
    tol = epsilon / (16 * 2 ** max(k, 0))
    bits = _bits_for(tol)
    remainder = RationalInterval(x) - _ln2_interval(tol / (abs(k) + 1)) * k
    low, high = _round_down(remainder.low, bits), _round_up(remainder.high, bits)
    if low < -1 or high > 1:
        raise ConvergenceLimitExceeded("exp range reduction failed")
    lower, upper = _increasing(_exp_series, low, high, tol, config)
    scale = Rational(2) ** k
    return RationalInterval(lower * scale, upper * scale)


def exp(x: Optional[Argument] = None, precision: Precision = None, *,
        config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of ``e**x``; ``exp()`` with no argument encloses ``e``.

    Uses ``x = k ln2 + r`` with ``0 <= r < ln2`` and ``e**x = 2**k e**r``.
    """
    cfg = config or DEFAULT_CONFIG
    if x is None:
        return e(precision, config=cfg)
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)
    if isinstance(arg, RationalInterval):
        return _increasing_hull('exp', arg, eps, cfg, _exp_point, math.exp)
    return _evaluate('exp', arg, eps, cfg, _exp_point, math.exp)


def _ln_point(x: Rational, epsilon: Rational, config: Config) -> RationalInterval:
    if x.sign() <= 0:
        raise DomainError(f"Logarithm undefined for non-positive value {x}", function='ln', argument=x)
    if x == 1:
        return RationalInterval(0)
    # x = 2^k * m with m in (3/4, 3/2]
    k = x.numerator.bit_length() - x.denominator.bit_length()
    m = x * Rational(2) ** -k
    if m < 1:
        m, k = m * 2, k - 1
    elif m >= 2:
        m, k = m / 2, k + 1
    if m > Rational(3, 2):
        m, k = m / 2, k + 1
    y = m - 1
    tol = epsilon / 8
    bits = _bits_for(tol)
    lower, upper = _increasing(_ln1p_series, _round_down(y, bits), _round_up(y, bits), tol, config)
    result = RationalInterval(lower, upper)
    if k:
        result = result + _ln2_interval(tol / abs(k)) * k
    return result


def ln(x: Argument, precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of the natural logarithm.

    Raises:
        DomainError: If ``x`` (or any point of an interval) is not positive.
    """
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)
    if isinstance(arg, RationalInterval):
        if arg.low.sign() <= 0:
            raise DomainError(f"Logarithm undefined on interval {arg}", function='ln', argument=arg)
        return _increasing_hull('ln', arg, eps, cfg, _ln_point, math.log)
    return _evaluate('ln', arg, eps, cfg, _ln_point, math.log)


def log(x: Argument, base: Argument = 10, precision: Precision = None, *,
        config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of ``log_base(x) = ln(x) / ln(base)``.

    Raises:
        DomainError: For non-positive ``x``, or a base that is not positive
                     or equals 1.
    """
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    b = _as_argument(base)
    if isinstance(b, RationalInterval):
        raise InvalidFormat("Logarithm base must be a single value")
    if b.sign() <= 0 or b == 1:
        raise DomainError(f"Invalid logarithm base {b}", function='log', argument=b)

    def point(value: Rational, w: Rational, config: Config) -> RationalInterval:
        return _ln_point(value, w, config) / _ln_point(b, w, config)

    fallback = lambda v: math.log(v, b.to_number())  # noqa: E731
    arg = _as_argument(x)
    if isinstance(arg, RationalInterval):
        if arg.low.sign() <= 0:
            raise DomainError(f"Logarithm undefined on interval {arg}", function='log', argument=arg)
        low = _evaluate('log', arg.low, eps, cfg, point, fallback)
        high = _evaluate('log', arg.high, eps, cfg, point, fallback)
        return low.hull(high)
    return _evaluate('log', arg, eps, cfg, point, fallback)


# Trigonometric functions

def _cos_range(low: Rational, high: Rational, tol: Rational,
               config: Config) -> tuple[Rational, Rational]:
    """Enclose cos over [low, high] within [-1, 1]; cos is even and falls with |r|."""
    if low.sign() >= 0:
        near, far = low, high
    elif high.sign() <= 0:
        near, far = high, low
    else:
        far = low if -low > high else high
        total, error = _cos_series(far, tol, config)
        return total - error, Rational.ONE
    total, error = _cos_series(far, tol, config)
    lower = total - error
    total, error = _cos_series(near, tol, config)
    return lower, total + error


def _sin_cos_point(x: Rational, epsilon: Rational, config: Config, offset: int) -> RationalInterval:
    # x = k pi/2 + r with |r| <= pi/4; quadrant (k + offset) mod 4 picks +-sin or +-cos
    k = round(x / _half_pi_near(x))
    tol = epsilon / 8
    bits = _bits_for(tol)
    remainder = RationalInterval(x) - _pi_interval(tol / (abs(k) + 1)) * Rational(k, 2)
    low, high = _round_down(remainder.low, bits), _round_up(remainder.high, bits)
    if low < -1 or high > 1:
        raise ConvergenceLimitExceeded("Trigonometric range reduction failed")
    quadrant = (k + offset) % 4
    if quadrant % 2 == 0:
        lower, upper = _increasing(_sin_series, low, high, tol, config)
    else:
        lower, upper = _cos_range(low, high, tol, config)
    if quadrant >= 2:
        lower, upper = -upper, -lower
    return RationalInterval(max(lower, -Rational.ONE), min(upper, Rational.ONE))


def _sin_point(x: Rational, epsilon: Rational, config: Config) -> RationalInterval:
    if x.is_zero():
        return RationalInterval(0)
    return _sin_cos_point(x, epsilon, config, 0)


def _cos_point(x: Rational, epsilon: Rational, config: Config) -> RationalInterval:
    if x.is_zero():
        return RationalInterval(1)
    return _sin_cos_point(x, epsilon, config, 1)


def _half_pi_multiples(x: RationalInterval) -> Iterator[int]:
    """Integers m for which m*pi/2 may lie in x."""
    p = _pi_near(max(x.low.abs(), x.high.abs()))
    half_low, half_high = p.low / 2, p.high / 2
    estimate = p.midpoint() / 2
    for m in range(math.floor(x.low / estimate) - 2, math.ceil(x.high / estimate) + 3):
        position = RationalInterval(half_low * m, half_high * m)
        if position.overlaps(x):
            yield m


def _trig_interval(name: str, x: RationalInterval, epsilon: Rational, config: Config,
                   offset: int) -> RationalInterval:
    """
    Range of sin (offset 0) or cos (offset 1) over an interval.

    The extremes are the endpoint values plus +-1 wherever a maximum
    (``(m + offset) % 4 == 1``) or minimum (``== 3``) at ``m pi/2`` may lie
    inside the interval.
    """
    if x.width() >= _pi_interval(_COARSE).low * 2:
        return RationalInterval(-1, 1)
    point = _sin_point if offset == 0 else _cos_point
    fallback = math.sin if offset == 0 else math.cos
    at_low = _evaluate(name, x.low, epsilon, config, point, fallback, periodic=True)
    at_high = _evaluate(name, x.high, epsilon, config, point, fallback, periodic=True)
    lower = min(at_low.low, at_high.low)
    upper = max(at_low.high, at_high.high)
    for m in _half_pi_multiples(x):
        phase = (m + offset) % 4
        if phase == 1:
            upper = Rational.ONE
        elif phase == 3:
            lower = -Rational.ONE
    return RationalInterval(lower, upper)


def sin(x: Argument, precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """Enclosure of sine; ``sin(0)`` is exactly ``[0, 0]``."""
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)
    if isinstance(arg, RationalInterval):
        return _trig_interval('sin', arg, eps, cfg, 0)
    return _evaluate('sin', arg, eps, cfg, _sin_point, math.sin, periodic=True)


def cos(x: Argument, precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """Enclosure of cosine; ``cos(0)`` is exactly ``[1, 1]``."""
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)
    if isinstance(arg, RationalInterval):
        return _trig_interval('cos', arg, eps, cfg, 1)
    return _evaluate('cos', arg, eps, cfg, _cos_point, math.cos, periodic=True)


def _min_abs(interval: RationalInterval) -> Rational:
    if interval.contains_zero():
        return Rational.ZERO
    return min(interval.low.abs(), interval.high.abs())


def _check_tan_pole(x: Rational, epsilon: Rational) -> None:
    m = round(x / _half_pi_near(x))
    if m % 2 == 0:
        return
    offset = RationalInterval(x) - _pi_interval(min(epsilon, _COARSE) / (abs(m) + 1)) * Rational(m, 2)
    if _min_abs(offset) < epsilon:
        raise DomainError(f"Tangent undefined near odd multiple of pi/2: {x}", function='tan', argument=x)


def _tan_point_checked(x: Rational, w: Rational, config: Config, epsilon: Rational) -> RationalInterval:
    if x.is_zero():
        return RationalInterval(0)
    cosine = _cos_point(x, w, config)
    if _min_abs(cosine) < epsilon:
        raise DomainError(f"Tangent undefined: cosine vanishes near {x}", function='tan', argument=x)
    return _sin_point(x, w, config) / cosine


def tan(x: Argument, precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of tangent.

    Raises:
        DomainError: Within epsilon of an odd multiple of pi/2, or for an
                     interval that may contain one.
    """
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)

    def point(value: Rational, w: Rational, config: Config) -> RationalInterval:
        return _tan_point_checked(value, w, config, eps)

    if isinstance(arg, RationalInterval):
        poles = [m for m in _half_pi_multiples(arg) if m % 2]
        if poles:
            raise DomainError(f"Tangent undefined on interval {arg}", function='tan', argument=arg)
        return _increasing_hull('tan', arg, eps, cfg, point, math.tan, periodic=True)
    _check_tan_pole(arg, eps)
    return _evaluate('tan', arg, eps, cfg, point, math.tan, periodic=True)


# Inverse trigonometric functions

def _atan_unit(v: Rational, tol: Rational, config: Config) -> RationalInterval:
    """arctan on 0 <= v <= 1."""
    bits = _bits_for(tol)
    if v > _HALF:
        # arctan(v) = pi/4 + arctan((v-1)/(v+1)), argument in (-1/3, 0]
        w = (v - 1) / (v + 1)
        lower, upper = _increasing(_atan_series, _round_down(w, bits), _round_up(w, bits), tol, config)
        return RationalInterval(lower, upper) + _pi_interval(tol) * Rational(1, 4)
    lower, upper = _increasing(_atan_series, _round_down(v, bits), _round_up(v, bits), tol, config)
    return RationalInterval(lower, upper)


def _atan_point(x: Rational, epsilon: Rational, config: Config) -> RationalInterval:
    if x.is_zero():
        return RationalInterval(0)
    tol = epsilon / 8
    v = x.abs()
    if v > 1:
        result = _pi_interval(tol) * _HALF - _atan_unit(v.reciprocal(), tol, config)
    else:
        result = _atan_unit(v, tol, config)
    return result.negate() if x.is_negative() else result


def arctan(x: Argument, precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """Enclosure of the inverse tangent."""
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)
    if isinstance(arg, RationalInterval):
        return _increasing_hull('arctan', arg, eps, cfg, _atan_point, math.atan)
    return _evaluate('arctan', arg, eps, cfg, _atan_point, math.atan)


def _check_unit_domain(name: str, x: Union[Rational, RationalInterval]) -> None:
    low, high = (x.low, x.high) if isinstance(x, RationalInterval) else (x, x)
    if low < -1 or high > 1:
        raise DomainError(f"{name} is undefined outside [-1, 1]: {x}", function=name, argument=x)


def _asin_point(x: Rational, epsilon: Rational, config: Config) -> RationalInterval:
    _check_unit_domain('arcsin', x)
    if x.is_zero():
        return RationalInterval(0)
    if x.abs() == 1:
        half_pi = _pi_interval(epsilon) * _HALF
        return half_pi if x.sign() > 0 else half_pi.negate()
    tol = epsilon / 8
    if x.abs() <= _HALF:
        bits = _bits_for(tol)
        lower, upper = _increasing(_asin_series, _round_down(x, bits), _round_up(x, bits), tol, config)
        return RationalInterval(lower, upper)
    # arcsin(x) = arctan(x / sqrt(1 - x^2)); keep the root bounded away from zero
    y = 1 - x * x
    root = _root_point(y, 2, min(tol, y / 4), config)
    t = RationalInterval(x) / root
    return RationalInterval(_atan_point(t.low, tol, config).low, _atan_point(t.high, tol, config).high)


def arcsin(x: Argument, precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of the inverse sine.

    Raises:
        DomainError: Outside [-1, 1].
    """
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)
    _check_unit_domain('arcsin', arg)
    if isinstance(arg, RationalInterval):
        return _increasing_hull('arcsin', arg, eps, cfg, _asin_point, math.asin)
    return _evaluate('arcsin', arg, eps, cfg, _asin_point, math.asin)


def _acos_point(x: Rational, epsilon: Rational, config: Config) -> RationalInterval:
    _check_unit_domain('arccos', x)
    tol = epsilon / 4
    return _pi_interval(tol) * _HALF - _asin_point(x, tol, config)


def arccos(x: Argument, precision: Precision = None, *, config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of the inverse cosine, ``pi/2 - arcsin(x)``.

    Raises:
        DomainError: Outside [-1, 1].
    """
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    arg = _as_argument(x)
    _check_unit_domain('arccos', arg)
    if isinstance(arg, RationalInterval):
        # decreasing
        at_low = _evaluate('arccos', arg.low, eps, cfg, _acos_point, math.acos)
        at_high = _evaluate('arccos', arg.high, eps, cfg, _acos_point, math.acos)
        return RationalInterval(at_high.low, at_low.high)
    return _evaluate('arccos', arg, eps, cfg, _acos_point, math.acos)


# Roots and powers

def _initial_root_guess(q: Rational, n: int) -> Rational:
    try:
        guess = math.exp((math.log(q.numerator) - math.log(q.denominator)) / n)
    except OverflowError:
        guess = 0.0
    if guess > 0.0 and math.isfinite(guess):
        return Rational.exact_float(guess)
    shift = (q.numerator.bit_length() - q.denominator.bit_length()) // n
    return Rational(2) ** shift


def _root_point(q: Rational, n: int, epsilon: Rational, config: Config) -> RationalInterval:
    if n <= 0:
        raise DomainError(f"Root degree must be positive, got {n}", function='newton_root', argument=n)
    if n == 1 or q.is_zero():
        return RationalInterval(q)
    if q.is_negative():
        if n % 2 == 0:
            raise DomainError(f"Even root of negative number {q}", function='newton_root', argument=q)
        return _root_point(q.negate(), n, epsilon, config).negate()

    # For a > 0 the root lies between a and q / a^(n-1)
    bits = _bits_for(epsilon) + n.bit_length() + 4
    a = _initial_root_guess(q, n)
    for _ in range(config.max_newton_iterations):
        b = q / a ** (n - 1)
        if (b - a).abs() <= epsilon:
            return RationalInterval(a, b)
        a = _round_up(a + (b - a) / n, bits)
    raise ConvergenceLimitExceeded(f"Newton iteration for {n}-th root of {q} did not converge",
                                   config.max_newton_iterations)


def newton_root(q: Argument, n: Union[int, Integer], precision: Precision = None, *,
                config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of the real ``n``-th root of ``q``.

    Raises:
        DomainError: For an even root of a negative value or ``n <= 0``.
    """
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    degree = int(n)
    arg = _as_argument(q)

    def point(value: Rational, w: Rational, config: Config) -> RationalInterval:
        return _root_point(value, degree, w, config)

    def fallback(v: float) -> float:
        return math.copysign(abs(v) ** (1.0 / degree), v)

    if isinstance(arg, RationalInterval):
        if degree > 0 and degree % 2 == 0 and arg.low.is_negative():
            raise DomainError(f"Even root of interval with negative values {arg}",
                              function='newton_root', argument=arg)
        return _increasing_hull('newton_root', arg, eps, cfg, point, fallback)
    return _evaluate('newton_root', arg, eps, cfg, point, fallback)


def _exponent_value(exponent: Union[int, Integer, Rational, str]) -> Rational:
    if isinstance(exponent, Rational):
        return exponent
    if isinstance(exponent, (int, Integer, str)) and not isinstance(exponent, bool):
        return Rational(exponent)
    raise TypeError(f"Unsupported exponent type: {type(exponent).__name__}")


def rational_interval_power(base: Argument, exponent: Union[int, Integer, Rational, str],
                            precision: Precision = None, *,
                            config: Optional[Config] = None) -> RationalInterval:
    """
    Enclosure of ``base ** exponent`` for a rational exponent.

    Integer exponents are exact; denominators up to 10 take an n-th root
    then an integer power; anything else uses ``exp(exponent * ln(base))``.

    Raises:
        UndefinedOperation: For zero to a non-positive power.
        DomainError: For an even root of a negative base, or a negative
                     base with a large-denominator exponent.
    """
    cfg = config or DEFAULT_CONFIG
    eps = parse_precision(precision, cfg)
    p = _exponent_value(exponent)
    arg = _as_argument(base)
    interval = arg if isinstance(arg, RationalInterval) else RationalInterval(arg)

    if p.is_integer():
        return interval.pow(p.numerator)
    if interval.contains_zero() and p.sign() < 0:
        raise UndefinedOperation("Zero cannot be raised to a negative power")

    numerator, denominator = p.numerator, p.denominator
    if denominator <= 10:
        if denominator % 2 == 0 and interval.low.is_negative():
            raise DomainError(f"Even root of negative base {interval}",
                              function='rational_interval_power', argument=interval)

        def via_root(w: Rational) -> RationalInterval:
            root = RationalInterval(
                _evaluate('newton_root', interval.low, w, cfg,
                          lambda v, w2, c: _root_point(v, denominator, w2, c)).low,
                _evaluate('newton_root', interval.high, w, cfg,
                          lambda v, w2, c: _root_point(v, denominator, w2, c)).high,
            )
            return root.pow(numerator)

        return _refine(via_root, eps, cfg) if interval.is_point() else via_root(eps)

    if interval.low.is_zero() and interval.is_point():
        return RationalInterval(0)
    if interval.low.sign() <= 0:
        raise DomainError(f"Non-positive base {interval} with exponent {p}",
                          function='rational_interval_power', argument=interval)

    def via_exp(w: Rational) -> RationalInterval:
        inner = w / (4 * (p.abs() + 1))
        logarithm = RationalInterval(_ln_point(interval.low, inner, cfg).low,
                                     _ln_point(interval.high, inner, cfg).high)
        scaled = logarithm * p
        return RationalInterval(_exp_point(scaled.low, w, cfg).low, _exp_point(scaled.high, w, cfg).high)

    return _refine(via_exp, eps, cfg) if interval.is_point() else via_exp(eps)
