"""128-bit integer division with the wrap-around of fixed-width arithmetic."""

from __future__ import annotations

UINT128_MAX = (1 << 128) - 1
INT128_MIN = -(1 << 127)
INT128_MAX = (1 << 127) - 1


def _unsigned(value: int) -> int:
    if not 0 <= value <= UINT128_MAX:
        raise ValueError(f"{value} does not fit in an unsigned 128-bit integer")
    return value


def _signed(value: int) -> int:
    if not INT128_MIN <= value <= INT128_MAX:
        raise ValueError(f"{value} does not fit in a signed 128-bit integer")
    return value


def _wrap(value: int) -> int:
    value &= UINT128_MAX
    return value - (1 << 128) if value > INT128_MAX else value


def udivmod128(num: int, den: int) -> tuple[int, int]:
    """Unsigned quotient and remainder of two 128-bit integers."""
    num, den = _unsigned(num), _unsigned(den)
    if den == 0:
        raise ZeroDivisionError("128-bit division by zero")
    return divmod(num, den)


def divmod128(num: int, den: int) -> tuple[int, int]:
    """Signed quotient truncated toward zero and remainder with the sign of ``num``."""
    num, den = _signed(num), _signed(den)
    quot, rem = udivmod128(abs(num), abs(den))
    if (num < 0) != (den < 0):
        quot = -quot
    if num < 0:
        rem = -rem
    return _wrap(quot), _wrap(rem)


def udiv128(a: int, b: int) -> int:
    """Unsigned 128-bit quotient."""
    return udivmod128(a, b)[0]


def umod128(a: int, b: int) -> int:
    """Unsigned 128-bit remainder."""
    return udivmod128(a, b)[1]


def div128(a: int, b: int) -> int:
    """Signed 128-bit quotient."""
    return divmod128(a, b)[0]


def mod128(a: int, b: int) -> int:
    """Signed 128-bit remainder."""
    return divmod128(a, b)[1]