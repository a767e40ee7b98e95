"""Hyperbolic cosine and the inverse hyperbolic functions."""

from __future__ import annotations

import math
import struct

from minilibc.exponential import exp, expm1, expo2
from minilibc.logarithm import log1p

_MASK64 = (1 << 64) - 1
_ABS_MASK = (1 << 63) - 1
_LN2 = 0.693147180559945309417232121458176568


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i & _MASK64))[0]


def _sqrt(x: float) -> float:
    """Square root giving NaN rather than raising for negative input."""
    return math.nan if x < 0 else math.sqrt(x)


def _log(x: float) -> float:
    """Natural logarithm with IEEE results at zero and below."""
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return math.log(x)


def cosh(x: float) -> float:
    """Hyperbolic cosine; overflows to infinity for large ``|x|``."""
    u = _bits(x) & _ABS_MASK
    x = _from_bits(u)
    w = u >> 32

    if w < 0x3FE62E42:  # |x| < log(2)
        if w < 0x3FF00000 - (26 << 20):
            return 1.0
        t = expm1(x)
        return 1 + t * t / (2 * (1 + t))

    if w < 0x40862E42:  # |x| < log(DBL_MAX)
        t = exp(x)
        return 0.5 * (t + 1 / t)

    # |x| > log(DBL_MAX) or NaN
    return expo2(x, 1.0)


def acosh(x: float) -> float:
    """Inverse hyperbolic cosine; NaN for ``x < 1``."""
    e = (_bits(x) >> 52) & 0x7FF
    if e < 0x3FF + 1:  # |x| < 2
        return log1p(x - 1 + _sqrt((x - 1) * (x - 1) + 2 * (x - 1)))
    if e < 0x3FF + 26:  # |x| < 2**26
        return _log(2 * x - 1 / (x + _sqrt(x * x - 1)))
    # |x| >= 2**26 or NaN
    return _log(x) + _LN2


def asinh(x: float) -> float:
    """Inverse hyperbolic sine, odd in ``x`` including signed zero."""
    u = _bits(x)
    e = (u >> 52) & 0x7FF
    negative = bool(u >> 63)
    x = _from_bits(u & _ABS_MASK)

    if e >= 0x3FF + 26:  # |x| >= 2**26, inf or NaN
        x = _log(x) + _LN2
    elif e >= 0x3FF + 1:  # |x| >= 2
        x = _log(2 * x + 1 / (math.sqrt(x * x + 1) + x))
    elif e >= 0x3FF - 26:  # |x| >= 2**-26
        x = log1p(x + x * x / (math.sqrt(x * x + 1) + 1))
    return -x if negative else x


def atanh(x: float) -> float:
    """Inverse hyperbolic tangent; infinite at +-1 and NaN beyond."""
    u = _bits(x)
    e = (u >> 52) & 0x7FF
    negative = bool(u >> 63)
    y = _from_bits(u & _ABS_MASK)

    if e < 0x3FF - 1:
        if e >= 0x3FF - 32:  # |x| < 0.5
            y = 0.5 * log1p(2 * y + 2 * y * y / (1 - y))
    else:
        ratio = math.inf if y == 1.0 else y / (1 - y)
        y = 0.5 * log1p(2 * ratio)
    return -y if negative else y