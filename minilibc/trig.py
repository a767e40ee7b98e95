"""Trigonometric kernels on [-pi/4, pi/4] and the full-range cosine."""

from __future__ import annotations

import struct

from minilibc.reduction import rem_pio2

_MASK64 = (1 << 64) - 1
_HIGH_MASK = 0xFFFFFFFF00000000

_C1 = 4.16666666666666019037e-02
_C2 = -1.38888888888741095749e-03
_C3 = 2.48015872894767294178e-05
_C4 = -2.75573143513906633035e-07
_C5 = 2.08757232129817482790e-09
_C6 = -1.13596475577881948265e-11

_S1 = -1.66666666666666324348e-01
_S2 = 8.33333333332248946124e-03
_S3 = -1.98412698298579493134e-04
_S4 = 2.75573137070700676789e-06
_S5 = -2.50507602534068634195e-08
_S6 = 1.58969099521155010221e-10

_T = (
    3.33333333333334091986e-01,
    1.33333333333201242699e-01,
    5.39682539762260521377e-02,
    2.18694882948595424599e-02,
    8.86323982359930005737e-03,
    3.59207910759131235356e-03,
    1.45620945432529025516e-03,
    5.88041240820264096874e-04,
    2.46463134818469906812e-04,
    7.81794442939557092300e-05,
    7.14072491382608190305e-05,
    -1.85586374855275456654e-05,
    2.59073051863633712884e-05,
)
_PIO4 = 7.85398163397448278999e-01
_PIO4LO = 3.06161699786838301793e-17


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i & _MASK64))[0]


def _clear_low_word(x: float) -> float:
    return _from_bits(_bits(x) & _HIGH_MASK)


def kernel_cos(x: float, y: float) -> float:
    """Cosine of ``x + y`` for ``|x| <~ pi/4``, ``y`` being the tail of ``x``."""
    z = x * x
    w = z * z
    r = z * (_C1 + z * (_C2 + z * _C3)) + w * w * (_C4 + z * (_C5 + z * _C6))
    hz = 0.5 * z
    w = 1.0 - hz
    return w + (((1.0 - w) - hz) + (z * r - x * y))


def kernel_sin(x: float, y: float, iy: int) -> float:
    """Sine of ``x + y`` for ``|x| <~ pi/4``; ``iy == 0`` means ``y`` is zero."""
    z = x * x
    w = z * z
    r = _S2 + z * (_S3 + z * _S4) + z * w * (_S5 + z * _S6)
    v = z * x
    if iy == 0:
        return x + v * (_S1 + z * r)
    return x - ((z * (0.5 * y - v * r) - y) - v * _S1)


def kernel_tan(x: float, y: float, odd: int) -> float:
    """Tangent of ``x + y`` for ``|x| <~ pi/4``, or ``-1/tan`` when ``odd`` is set."""
    hx = _bits(x) >> 32
    big = (hx & 0x7FFFFFFF) >= 0x3FE59428  # |x| >= 0.6744
    sign = hx >> 31
    if big:
        if sign:
            x = -x
            y = -y
        x = (_PIO4 - x) + (_PIO4LO - y)
        y = 0.0
    z = x * x
    w = z * z
    r = _T[1] + w * (_T[3] + w * (_T[5] + w * (_T[7] + w * (_T[9] + w * _T[11]))))
    v = z * (_T[2] + w * (_T[4] + w * (_T[6] + w * (_T[8] + w * (_T[10] + w * _T[12])))))
    s = z * x
    r = y + z * (s * (r + v) + y) + s * _T[0]
    w = x + r
    if big:
        s = float(1 - 2 * odd)
        v = s - 2.0 * (x + (r - w * w / (w + s)))
        return -v if sign else v
    if not odd:
        return w
    # -1/(x+r) computed carefully to avoid a 2 ulp error
    w0 = _clear_low_word(w)
    v = r - (w0 - x)
    a = -1.0 / w
    a0 = _clear_low_word(a)
    return a0 + a * (1.0 + a0 * w0 + a0 * v)


def cos(x: float) -> float:
    """Cosine of ``x`` in radians; infinity and NaN give NaN."""
    ix = (_bits(x) >> 32) & 0x7FFFFFFF

    if ix <= 0x3FE921FB:  # |x| ~< pi/4
        if ix < 0x3E46A09E:  # |x| < 2**-27 * sqrt(2)
            return 1.0
        return kernel_cos(x, 0.0)

    if ix >= 0x7FF00000:
        return x - x

    n, y0, y1 = rem_pio2(x)
    quadrant = n & 3
    if quadrant == 0:
        return kernel_cos(y0, y1)
    if quadrant == 1:
        return -kernel_sin(y0, y1, 1)
    if quadrant == 2:
        return -kernel_cos(y0, y1)
    return kernel_sin(y0, y1, 1)