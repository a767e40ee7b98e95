"""Conversion of Unix time to a broken-down UTC calendar time."""

from __future__ import annotations

import operator
from dataclasses import dataclass

from minilibc.errcodes import Errno, strerror

# 2000-03-01, the day after a leap day in a 400-year cycle
LEAPOCH = 946684800 + 86400 * (31 + 29)

DAYS_PER_400Y = 365 * 400 + 97
DAYS_PER_100Y = 365 * 100 + 24
DAYS_PER_4Y = 365 * 4 + 1

INT_MAX = (1 << 31) - 1
INT_MIN = -(1 << 31)

# Months counted from March.
_DAYS_IN_MONTH = (31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31, 29)


@dataclass(frozen=True)
class BrokenDownTime:
    """Calendar fields; ``year`` counts from 1900 and ``mon`` from 0."""

    sec: int
    min: int
    hour: int
    mday: int
    mon: int
    year: int
    wday: int
    yday: int
    isdst: int = 0
    gmtoff: int = 0
    zone: str = "GMT"


def _overflow() -> OverflowError:
    return OverflowError(Errno.EOVERFLOW, strerror(Errno.EOVERFLOW))


def secs_to_tm(t: int) -> BrokenDownTime:
    """Break seconds since the epoch into UTC calendar fields.

    Raises OverflowError when the year does not fit in a C ``int``.
    """
    t = operator.index(t)
    if t < INT_MIN * 31622400 or t > INT_MAX * 31622400:
        raise _overflow()

    days, remsecs = divmod(t - LEAPOCH, 86400)
    wday = (3 + days) % 7

    qc_cycles, remdays = divmod(days, DAYS_PER_400Y)

    c_cycles = min(remdays // DAYS_PER_100Y, 3)
    remdays -= c_cycles * DAYS_PER_100Y

    q_cycles = min(remdays // DAYS_PER_4Y, 24)
    remdays -= q_cycles * DAYS_PER_4Y

    remyears = min(remdays // 365, 3)
    remdays -= remyears * 365

    leap = int(remyears == 0 and (q_cycles != 0 or c_cycles == 0))
    yday = remdays + 31 + 28 + leap
    if yday >= 365 + leap:
        yday -= 365 + leap

    years = remyears + 4 * q_cycles + 100 * c_cycles + 400 * qc_cycles

    months = 0
    for months, length in enumerate(_DAYS_IN_MONTH):
        if length > remdays:
            break
        remdays -= length

    if months >= 10:
        months -= 12
        years += 1

    if not INT_MIN <= years + 100 <= INT_MAX:
        raise _overflow()

    return BrokenDownTime(
        sec=remsecs % 60,
        min=remsecs // 60 % 60,
        hour=remsecs // 3600,
        mday=remdays + 1,
        mon=months + 2,
        year=years + 100,
        wday=wday,
        yday=yday,
    )


def localtime(timer: int) -> BrokenDownTime:
    """Local time, which is always GMT with no daylight saving."""
    return secs_to_tm(timer)