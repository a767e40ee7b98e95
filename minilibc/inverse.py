"""Inverse trigonometric functions: arc cosine, arc sine and arc tangent."""

from __future__ import annotations

import math
import struct

from minilibc.floating import fabs

_MASK64 = (1 << 64) - 1
_HIGH_MASK = 0xFFFFFFFF00000000
_TINY = 2.0**-120

_PIO2_HI = 1.57079632679489655800e00
_PIO2_LO = 6.12323399573676603587e-17
_PS0 = 1.66666666666666657415e-01
_PS1 = -3.25565818622400915405e-01
_PS2 = 2.01212532134862925881e-01
_PS3 = -4.00555345006794114027e-02
_PS4 = 7.91534994289814532176e-04
_PS5 = 3.47933107596021167570e-05
_QS1 = -2.40339491173441421878e00
_QS2 = 2.02094576023350569471e00
_QS3 = -6.88283971605453293030e-01
_QS4 = 7.70381505559019352791e-02

_ATANHI = (
    4.63647609000806093515e-01,
    7.85398163397448278999e-01,
    9.82793723247329054082e-01,
    1.57079632679489655800e00,
)
_ATANLO = (
    2.26987774529616870924e-17,
    3.06161699786838301793e-17,
    1.39033110312309984516e-17,
    6.12323399573676603587e-17,
)
_AT = (
    3.33333333333329318027e-01,
    -1.99999999998764832476e-01,
    1.42857142725034663711e-01,
    -1.11111104054623557880e-01,
    9.09088713343650656196e-02,
    -7.69187620504482999495e-02,
    6.66107313738753120669e-02,
    -5.83357013379057348645e-02,
    4.97687799461593236017e-02,
    -3.65315727442169155270e-02,
    1.62858201153657823623e-02,
)


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i & _MASK64))[0]


def _clear_low_word(x: float) -> float:
    return _from_bits(_bits(x) & _HIGH_MASK)


def _rational(z: float) -> float:
    p = z * (_PS0 + z * (_PS1 + z * (_PS2 + z * (_PS3 + z * (_PS4 + z * _PS5)))))
    q = 1.0 + z * (_QS1 + z * (_QS2 + z * (_QS3 + z * _QS4)))
    return p / q


def acos(x: float) -> float:
    """Arc cosine in [0, pi]; NaN outside [-1, 1]."""
    u = _bits(x)
    hx = u >> 32
    ix = hx & 0x7FFFFFFF
    if ix >= 0x3FF00000:
        lx = u & 0xFFFFFFFF
        if ((ix - 0x3FF00000) | lx) == 0:
            if hx >> 31:
                return 2 * _PIO2_HI + _TINY
            return 0.0
        return math.nan
    if ix < 0x3FE00000:  # |x| < 0.5
        if ix <= 0x3C600000:  # |x| < 2**-57
            return _PIO2_HI + _TINY
        return _PIO2_HI - (x - (_PIO2_LO - x * _rational(x * x)))
    if hx >> 31:  # x < -0.5
        z = (1.0 + x) * 0.5
        s = math.sqrt(z)
        w = _rational(z) * s - _PIO2_LO
        return 2 * (_PIO2_HI - (s + w))
    z = (1.0 - x) * 0.5  # x > 0.5
    s = math.sqrt(z)
    df = _clear_low_word(s)
    c = (z - df * df) / (s + df)
    w = _rational(z) * s + c
    return 2 * (df + w)


def asin(x: float) -> float:
    """Arc sine in [-pi/2, pi/2]; NaN outside [-1, 1]."""
    u = _bits(x)
    hx = u >> 32
    ix = hx & 0x7FFFFFFF
    if ix >= 0x3FF00000:
        lx = u & 0xFFFFFFFF
        if ((ix - 0x3FF00000) | lx) == 0:
            return x * _PIO2_HI + _TINY
        return math.nan
    if ix < 0x3FE00000:  # |x| < 0.5
        if 0x00100000 <= ix < 0x3E500000:
            return x
        return x + x * _rational(x * x)
    z = (1 - fabs(x)) * 0.5
    s = math.sqrt(z)
    r = _rational(z)
    if ix >= 0x3FEF3333:  # |x| > 0.975
        result = _PIO2_HI - (2 * (s + s * r) - _PIO2_LO)
    else:
        f = _clear_low_word(s)
        c = (z - f * f) / (s + f)
        result = 0.5 * _PIO2_HI - (2 * s * r - (_PIO2_LO - 2 * c) - (0.5 * _PIO2_HI - 2 * f))
    return -result if hx >> 31 else result


def atan(x: float) -> float:
    """Arc tangent in [-pi/2, pi/2]."""
    ix = _bits(x) >> 32
    sign = ix >> 31
    ix &= 0x7FFFFFFF
    if ix >= 0x44100000:  # |x| >= 2^66
        if math.isnan(x):
            return x
        z = _ATANHI[3] + _TINY
        return -z if sign else z
    if ix < 0x3FDC0000:  # |x| < 0.4375
        if ix < 0x3E400000:  # |x| < 2^-27
            return x
        index = -1
    else:
        x = fabs(x)
        if ix < 0x3FF30000:  # |x| < 1.1875
            if ix < 0x3FE60000:  # 7/16 <= |x| < 11/16
                index = 0
                x = (2.0 * x - 1.0) / (2.0 + x)
            else:  # 11/16 <= |x| < 19/16
                index = 1
                x = (x - 1.0) / (x + 1.0)
        elif ix < 0x40038000:  # |x| < 2.4375
            index = 2
            x = (x - 1.5) / (1.0 + 1.5 * x)
        else:  # 2.4375 <= |x| < 2^66
            index = 3
            x = -1.0 / x
    z = x * x
    w = z * z
    s1 = z * (_AT[0] + w * (_AT[2] + w * (_AT[4] + w * (_AT[6] + w * (_AT[8] + w * _AT[10])))))
    s2 = w * (_AT[1] + w * (_AT[3] + w * (_AT[5] + w * (_AT[7] + w * _AT[9]))))
    if index < 0:
        return x - x * (s1 + s2)
    z = _ATANHI[index] - (x * (s1 + s2) - _ATANLO[index] - x)
    return -z if sign else z