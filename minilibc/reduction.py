"""Reduction of a double modulo pi/2 for the trigonometric kernels."""

from __future__ import annotations

import functools
import math
import struct
from collections.abc import Sequence

_MASK64 = (1 << 64) - 1

_TOINT = 1.5 / 2.0**-52
_PIO4 = float.fromhex("0x1.921fb54442d18p-1")
_INVPIO2 = 6.36619772367581382433e-01
_PIO2_1 = 1.57079632673412561417e00
_PIO2_1T = 6.07710050650619224932e-11
_PIO2_2 = 6.07710050630396597660e-11
_PIO2_2T = 2.02226624879595063154e-21
_PIO2_3 = 2.02226624871116645580e-21
_PIO2_3T = 8.47842766036889956997e-32

# Initial number of 2/pi terms for single, double, extended and quad precision.
_INIT_JK = (3, 4, 4, 6)

# pi/2 cut into 24-bit chunks.
_PIO2_CHUNKS = (
    1.57079625129699707031e00,
    7.54978941586159635335e-08,
    5.39030252995776476554e-15,
    3.28200341580791294123e-22,
    1.27065575308067607349e-29,
    1.22933308981111328932e-36,
    2.73370053816464559624e-44,
    2.16741683877804819444e-51,
)

_TABLE_ENTRIES = 690
_MAX_E0 = 16360
_WORK_SIZE = 20


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i & _MASK64))[0]


def _arctan_inverse(x: int, one: int) -> int:
    """Fixed-point arctan(1/x) scaled by ``one``."""
    power = one // x
    total = power
    x2 = x * x
    n = 1
    sign = -1
    while power:
        power //= x2
        n += 2
        total += sign * (power // n)
        sign = -sign
    return total


@functools.lru_cache(maxsize=None)
def _ipio2_table() -> tuple[int, ...]:
    """Successive 24-bit chunks of the binary fraction of 2/pi."""
    width = 24 * _TABLE_ENTRIES
    scale_bits = width + 128
    one = 1 << scale_bits
    pi = 4 * (4 * _arctan_inverse(5, one) - _arctan_inverse(239, one))
    two_over_pi = (2 * one * one) // pi
    digits = two_over_pi >> (scale_bits - width)
    return tuple(
        (digits >> (24 * (_TABLE_ENTRIES - 1 - i))) & 0xFFFFFF
        for i in range(_TABLE_ENTRIES)
    )


def _dot(x: Sequence[float], f: Sequence[float], jx: int, i: int) -> float:
    fw = 0.0
    for j in range(jx + 1):
        fw += x[j] * f[jx + i - j]
    return fw


def rem_pio2_large(
    xs: Sequence[float], e0: int, prec: int
) -> tuple[int, tuple[float, ...]]:
    """Reduce a large positive value given as 24-bit pieces modulo pi/2.

    ``xs`` holds the pieces, the first scaled by ``2**e0``. ``prec`` selects
    24, 53, 64 or 113 bits of result (0 to 3). Returns the last three bits of
    the quotient and the remainder as 1, 2, 2 or 3 doubles whose sum is it.
    """
    if prec not in range(len(_INIT_JK)):
        raise ValueError(f"precision must be 0 to 3, not {prec}")
    x = [float(v) for v in xs]
    if not x:
        raise ValueError("at least one piece is required")
    if e0 > _MAX_E0:
        raise ValueError(f"exponent {e0} exceeds the table of 2/pi")

    ipio2 = _ipio2_table()
    jk = _INIT_JK[prec]
    jp = jk
    jx = len(x) - 1
    jv = max(0, (e0 - 3) // 24)
    q0 = e0 - 24 * (jv + 1)

    f = [0.0] * _WORK_SIZE
    q = [0.0] * _WORK_SIZE
    iq = [0] * _WORK_SIZE
    fq = [0.0] * _WORK_SIZE

    for i in range(jx + jk + 1):
        j = jv - jx + i
        f[i] = float(ipio2[j]) if j >= 0 else 0.0

    for i in range(jk + 1):
        q[i] = _dot(x, f, jx, i)

    jz = jk
    while True:
        # Distill q[] into 24-bit integers, most significant last.
        z = q[jz]
        for i, j in enumerate(range(jz, 0, -1)):
            fw = float(int(2.0**-24 * z))
            iq[i] = int(z - 2.0**24 * fw)
            z = q[j - 1] + fw

        z = math.ldexp(z, q0)
        z -= 8.0 * math.floor(z * 0.125)
        n = int(z)
        z -= float(n)
        ih = 0
        if q0 > 0:
            i = iq[jz - 1] >> (24 - q0)
            n += i
            iq[jz - 1] -= i << (24 - q0)
            ih = iq[jz - 1] >> (23 - q0)
        elif q0 == 0:
            ih = iq[jz - 1] >> 23
        elif z >= 0.5:
            ih = 2

        if ih > 0:
            n += 1
            carry = 0
            for i in range(jz):
                j = iq[i]
                if carry == 0:
                    if j != 0:
                        carry = 1
                        iq[i] = 0x1000000 - j
                else:
                    iq[i] = 0xFFFFFF - j
            if q0 == 1:
                iq[jz - 1] &= 0x7FFFFF
            elif q0 == 2:
                iq[jz - 1] &= 0x3FFFFF
            if ih == 2:
                z = 1.0 - z
                if carry:
                    z -= math.ldexp(1.0, q0)

        if z == 0.0 and not any(iq[jk:jz]):
            # Cancellation: pull in more terms of 2/pi and start over.
            k = 1
            while iq[jk - k] == 0:
                k += 1
            for i in range(jz + 1, jz + k + 1):
                f[jx + i] = float(ipio2[jv + i])
                q[i] = _dot(x, f, jx, i)
            jz += k
            continue
        break

    if z == 0.0:
        jz -= 1
        q0 -= 24
        while iq[jz] == 0:
            jz -= 1
            q0 -= 24
    else:
        z = math.ldexp(z, -q0)
        if z >= 2.0**24:
            fw = float(int(2.0**-24 * z))
            iq[jz] = int(z - 2.0**24 * fw)
            jz += 1
            q0 += 24
            iq[jz] = int(fw)
        else:
            iq[jz] = int(z)

    fw = math.ldexp(1.0, q0)
    for i in range(jz, -1, -1):
        q[i] = fw * float(iq[i])
        fw *= 2.0**-24

    for i in range(jz, -1, -1):
        fw = 0.0
        for k in range(min(jp, jz - i) + 1):
            fw += _PIO2_CHUNKS[k] * q[i + k]
        fq[jz - i] = fw

    def signed(v: float) -> float:
        return v if ih == 0 else -v

    if prec == 0:
        fw = 0.0
        for i in range(jz, -1, -1):
            fw += fq[i]
        result: tuple[float, ...] = (signed(fw),)
    elif prec in (1, 2):
        fw = 0.0
        for i in range(jz, -1, -1):
            fw += fq[i]
        head = signed(fw)
        fw = fq[0] - fw
        for i in range(1, jz + 1):
            fw += fq[i]
        result = (head, signed(fw))
    else:
        for i in range(jz, 0, -1):
            fw = fq[i - 1] + fq[i]
            fq[i] += fq[i - 1] - fw
            fq[i - 1] = fw
        for i in range(jz, 1, -1):
            fw = fq[i - 1] + fq[i]
            fq[i] += fq[i - 1] - fw
            fq[i - 1] = fw
        fw = 0.0
        for i in range(jz, 1, -1):
            fw += fq[i]
        result = (signed(fq[0]), signed(fq[1]), signed(fw))
    return n & 7, result


def _close(x: float, fn: float, n: int) -> tuple[int, float, float]:
    ix = (_bits(x) >> 32) & 0x7FFFFFFF
    r = x - fn * _PIO2_1
    w = fn * _PIO2_1T
    y0 = r - w
    ey = (_bits(y0) >> 52) & 0x7FF
    ex = ix >> 20
    if ex - ey > 16:
        t = r
        w = fn * _PIO2_2
        r = t - w
        w = fn * _PIO2_2T - ((t - r) - w)
        y0 = r - w
        ey = (_bits(y0) >> 52) & 0x7FF
        if ex - ey > 49:
            t = r
            w = fn * _PIO2_3
            r = t - w
            w = fn * _PIO2_3T - ((t - r) - w)
            y0 = r - w
    return n, y0, (r - y0) - w


def _medium(x: float) -> tuple[int, float, float]:
    fn = x * _INVPIO2 + _TOINT - _TOINT
    n = int(fn)
    r = x - fn * _PIO2_1
    w = fn * _PIO2_1T
    if r - w < -_PIO4:
        n -= 1
        fn -= 1
    elif r - w > _PIO4:
        n += 1
        fn += 1
    return _close(x, fn, n)


def _small_multiple(x: float, k: int, negative: bool) -> tuple[int, float, float]:
    if not negative:
        z = x - k * _PIO2_1
        y0 = z - k * _PIO2_1T
        return k, y0, (z - y0) - k * _PIO2_1T
    z = x + k * _PIO2_1
    y0 = z + k * _PIO2_1T
    return -k, y0, (z - y0) + k * _PIO2_1T


def rem_pio2(x: float) -> tuple[int, float, float]:
    """Return ``(n, y0, y1)`` with ``x - n*pi/2 == y0 + y1`` and ``|y0| <~ pi/4``.

    For very large arguments only the last three bits of ``n`` are kept.
    Callers handle ``|x| <~ pi/4`` themselves; infinity and NaN give NaN.
    """
    u = _bits(x)
    negative = bool(u >> 63)
    ix = (u >> 32) & 0x7FFFFFFF

    if ix <= 0x400F6A7A:  # |x| ~<= 5pi/4
        if (ix & 0xFFFFF) == 0x921FB:  # |x| ~= pi/2 or 2pi/2
            return _medium(x)
        if ix <= 0x4002D97C:  # |x| ~<= 3pi/4
            return _small_multiple(x, 1, negative)
        return _small_multiple(x, 2, negative)
    if ix <= 0x401C463B:  # |x| ~<= 9pi/4
        if ix <= 0x4015FDBC:  # |x| ~<= 7pi/4
            if ix == 0x4012D97C:  # |x| ~= 3pi/2
                return _medium(x)
            return _small_multiple(x, 3, negative)
        if ix == 0x401921FB:  # |x| ~= 4pi/2
            return _medium(x)
        return _small_multiple(x, 4, negative)
    if ix < 0x413921FB:  # |x| ~< 2^20*(pi/2)
        return _medium(x)

    if ix >= 0x7FF00000:
        nan = x - x
        return 0, nan, nan

    # z = |x| scaled to [2^23, 2^24)
    z = _from_bits((u & (_MASK64 >> 12)) | ((0x3FF + 23) << 52))
    tx = []
    for _ in range(2):
        piece = float(int(z))
        tx.append(piece)
        z = (z - piece) * 2.0**24
    tx.append(z)
    while tx[-1] == 0.0:
        tx.pop()
    n, (t0, t1) = rem_pio2_large(tx, (ix >> 20) - (0x3FF + 23), 1)
    if negative:
        return -n, -t0, -t1
    return n, t0, t1