"""Euclidean norm and cube root with careful rounding."""

from __future__ import annotations

import math
import struct

_MASK64 = (1 << 64) - 1
_ABS_MASK = (1 << 63) - 1
_SPLIT = 2.0**27 + 1

_B1 = 715094163
_B2 = 696219795

_P0 = 1.87595182427177009643
_P1 = -1.88497979543377169875
_P2 = 1.621429720105354466140
_P3 = -0.758397934778766047437
_P4 = 0.145996192886612446982


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i & _MASK64))[0]


def _square(x: float) -> tuple[float, float]:
    """Return ``x*x`` as an exact head and tail pair."""
    xc = x * _SPLIT
    xh = x - xc + xc
    xl = x - xh
    hi = x * x
    lo = xh * xh - hi + 2 * xh * xl + xl * xl
    return hi, lo


def hypot(x: float, y: float) -> float:
    """Return ``sqrt(x*x + y*y)`` without undue overflow or underflow."""
    ux = _bits(x) & _ABS_MASK
    uy = _bits(y) & _ABS_MASK
    if ux < uy:
        ux, uy = uy, ux

    ex = ux >> 52
    ey = uy >> 52
    x = _from_bits(ux)
    y = _from_bits(uy)
    # hypot(inf, nan) is inf
    if ey == 0x7FF:
        return y
    if ex == 0x7FF or uy == 0:
        return x
    if ex - ey > 64:
        return x + y

    z = 1.0
    if ex > 0x3FF + 510:
        z = 2.0**700
        x *= 2.0**-700
        y *= 2.0**-700
    elif ey < 0x3FF - 450:
        z = 2.0**-700
        x *= 2.0**700
        y *= 2.0**700
    hx, lx = _square(x)
    hy, ly = _square(y)
    return z * math.sqrt(ly + lx + hy + hx)


def cbrt(x: float) -> float:
    """Return the real cube root of ``x``."""
    u = _bits(x)
    hx = (u >> 32) & 0x7FFFFFFF

    if hx >= 0x7FF00000:
        return x + x

    if hx < 0x00100000:
        u = _bits(x * 2.0**54)
        hx = (u >> 32) & 0x7FFFFFFF
        if hx == 0:
            return x
        hx = hx // 3 + _B2
    else:
        hx = hx // 3 + _B1
    u &= 1 << 63
    u |= hx << 32
    t = _from_bits(u)

    r = (t * t) * (t / x)
    t = t * ((_P0 + r * (_P1 + r * _P2)) + ((r * r) * r) * (_P3 + r * _P4))

    u = (_bits(t) + 0x80000000) & 0xFFFFFFFFC0000000
    t = _from_bits(u)

    s = t * t
    r = x / s
    w = t + t
    r = (r - t) / (w + r)
    return t + t * r