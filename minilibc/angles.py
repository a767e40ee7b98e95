"""Two-argument arc tangent."""

from __future__ import annotations

import math
import struct

from minilibc.floating import fabs
from minilibc.inverse import atan

_PI = 3.1415926535897931160e00
_PI_LO = 1.2246467991473531772e-16


def _words(x: float) -> tuple[int, int]:
    u = struct.unpack("<Q", struct.pack("<d", x))[0]
    return u >> 32, u & 0xFFFFFFFF


def atan2(y: float, x: float) -> float:
    """Angle of the point ``(x, y)`` in [-pi, pi], honouring signed zeros."""
    if math.isnan(x) or math.isnan(y):
        return x + y
    ix, lx = _words(x)
    iy, ly = _words(y)
    if ix == 0x3FF00000 and lx == 0:  # x == 1.0
        return atan(y)
    m = ((iy >> 31) & 1) | ((ix >> 30) & 2)  # 2*sign(x) + sign(y)
    ix &= 0x7FFFFFFF
    iy &= 0x7FFFFFFF

    if (iy | ly) == 0:  # y == 0
        if m in (0, 1):
            return y
        return _PI if m == 2 else -_PI
    if (ix | lx) == 0:  # x == 0
        return -_PI / 2 if m & 1 else _PI / 2
    if ix == 0x7FF00000:  # x is infinite
        if iy == 0x7FF00000:
            return (_PI / 4, -_PI / 4, 3 * _PI / 4, -3 * _PI / 4)[m]
        return (0.0, -0.0, _PI, -_PI)[m]
    # |y/x| > 2**64
    if ix + (64 << 20) < iy or iy == 0x7FF00000:
        return -_PI / 2 if m & 1 else _PI / 2

    # atan(|y/x|) without spurious underflow
    if (m & 2) and iy + (64 << 20) < ix:
        z = 0.0
    else:
        z = atan(fabs(y / x))
    if m == 0:
        return z
    if m == 1:
        return -z
    if m == 2:
        return _PI - (z - _PI_LO)
    return (z - _PI_LO) - _PI