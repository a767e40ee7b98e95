"""Bit-exact IEEE 754 double helpers: sign, magnitude, rounding and remainder."""

from __future__ import annotations

import math
import struct

_MASK64 = (1 << 64) - 1
_SIGN_BIT = 1 << 63
_ABS_MASK = _SIGN_BIT - 1
_TOINT = 2.0**52


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i & _MASK64))[0]


def _signbit(x: float) -> bool:
    return bool(_bits(x) >> 63)


def copysign(x: float, y: float) -> float:
    """Return ``x`` with the sign bit of ``y``."""
    return _from_bits((_bits(x) & _ABS_MASK) | (_bits(y) & _SIGN_BIT))


def fabs(x: float) -> float:
    """Return ``x`` with its sign bit cleared."""
    return _from_bits(_bits(x) & _ABS_MASK)


def frexp(x: float) -> tuple[float, int]:
    """Split ``x`` into a mantissa in [0.5, 1) and a power-of-two exponent."""
    i = _bits(x)
    ee = (i >> 52) & 0x7FF
    if ee == 0:
        if x:
            mantissa, exponent = frexp(x * 2.0**64)
            return mantissa, exponent - 64
        return x, 0
    if ee == 0x7FF:
        return x, 0
    i = (i & 0x800FFFFFFFFFFFFF) | 0x3FE0000000000000
    return _from_bits(i), ee - 0x3FE


def fmax(x: float, y: float) -> float:
    """Larger of two values; a NaN operand yields the other one, +0 beats -0."""
    if math.isnan(x):
        return y
    if math.isnan(y):
        return x
    if _signbit(x) != _signbit(y):
        return y if _signbit(x) else x
    return y if x < y else x


def fmin(x: float, y: float) -> float:
    """Smaller of two values; a NaN operand yields the other one, -0 beats +0."""
    if math.isnan(x):
        return y
    if math.isnan(y):
        return x
    if _signbit(x) != _signbit(y):
        return x if _signbit(x) else y
    return x if x < y else y


def fmod(x: float, y: float) -> float:
    """Exact floating remainder of ``x / y`` with the sign of ``x``."""
    uxi = _bits(x)
    uyi = _bits(y)
    ex = (uxi >> 52) & 0x7FF
    ey = (uyi >> 52) & 0x7FF
    sx = uxi >> 63

    if (uyi & _ABS_MASK) == 0 or math.isnan(y) or ex == 0x7FF:
        return math.nan
    if (uxi & _ABS_MASK) <= (uyi & _ABS_MASK):
        if (uxi & _ABS_MASK) == (uyi & _ABS_MASK):
            return 0.0 * x
        return x

    # Normalize both significands so the leading bit sits at position 52.
    if ex == 0:
        i = (uxi << 12) & _MASK64
        while not i >> 63:
            ex -= 1
            i = (i << 1) & _MASK64
        uxi = (uxi << (-ex + 1)) & _MASK64
    else:
        uxi = (uxi & ((1 << 52) - 1)) | (1 << 52)
    if ey == 0:
        i = (uyi << 12) & _MASK64
        while not i >> 63:
            ey -= 1
            i = (i << 1) & _MASK64
        uyi = (uyi << (-ey + 1)) & _MASK64
    else:
        uyi = (uyi & ((1 << 52) - 1)) | (1 << 52)

    while ex > ey:
        if uxi >= uyi:
            if uxi == uyi:
                return 0.0 * x
            uxi -= uyi
        uxi <<= 1
        ex -= 1
    if uxi >= uyi:
        if uxi == uyi:
            return 0.0 * x
        uxi -= uyi
    while not uxi >> 52:
        uxi <<= 1
        ex -= 1

    if ex > 0:
        uxi -= 1 << 52
        uxi |= ex << 52
    else:
        uxi >>= -ex + 1
    uxi |= sx << 63
    return _from_bits(uxi)


def _integer_gap(x: float, negative: bool) -> float:
    if negative:
        return x - _TOINT + _TOINT - x
    return x + _TOINT - _TOINT - x


def ceil(x: float) -> float:
    """Smallest integral value not less than ``x``, preserving signed zero."""
    i = _bits(x)
    e = (i >> 52) & 0x7FF
    if e >= 0x3FF + 52 or x == 0:
        return x
    negative = bool(i >> 63)
    y = _integer_gap(x, negative)
    if e <= 0x3FF - 1:
        return -0.0 if negative else 1.0
    if y < 0:
        return x + y + 1
    return x + y


def floor(x: float) -> float:
    """Largest integral value not greater than ``x``, preserving signed zero."""
    i = _bits(x)
    e = (i >> 52) & 0x7FF
    if e >= 0x3FF + 52 or x == 0:
        return x
    negative = bool(i >> 63)
    y = _integer_gap(x, negative)
    if e <= 0x3FF - 1:
        return -1.0 if negative else 0.0
    if y > 0:
        return x + y - 1
    return x + y


def math_divzero(sign: int) -> float:
    """Result of a pole error: infinity with the requested sign."""
    return -math.inf if sign else math.inf


def math_invalid(x: float) -> float:
    """Result of a domain error: NaN."""
    return math.nan


def math_xflow(sign: int, y: float) -> float:
    """Signed ``y * y``; used to produce overflow or underflow results."""
    return (-y if sign else y) * y


def math_oflow(sign: int) -> float:
    """Result of an overflowing computation: infinity with the given sign."""
    return math_xflow(sign, 2.0**769)


def math_uflow(sign: int) -> float:
    """Result of an underflowing computation: zero with the given sign."""
    return math_xflow(sign, 2.0**-767)