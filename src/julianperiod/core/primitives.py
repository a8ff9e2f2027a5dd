"""
julianperiod.core.primitives
----------------------------
Leaf-level arithmetic shared by the date conversions and the cycle numbers.

Everything here is total over finite reals and has no validation of its own;
callers validate first.
"""

from __future__ import annotations

import math
from typing import Tuple

# Last Julian-calendar date is 1582-10-04; first Gregorian date is 1582-10-15.
SWITCH_YEAR = 1582
SWITCH_MONTH = 10
SWITCH_LAST_JULIAN_DAY = 14

# Integer JDN (noon-based) of 1582-10-15 Gregorian.
GREGORIAN_SWITCH_JDN = 2299161


def is_gregorian(year: int, month: int, day: int) -> bool:
    """
    True iff (year, month, day) falls after the Julian calendar.

    1582-10-14 and earlier count as Julian; this also covers the ten
    dropped days 1582-10-05..14.
    """
    return year > SWITCH_YEAR or (
        year == SWITCH_YEAR
        and (month > SWITCH_MONTH or (month == SWITCH_MONTH and day > SWITCH_LAST_JULIAN_DAY))
    )


def trunc(x: float) -> int:
    """
    Integer truncation toward zero.

    Not floor: trunc(-1.5) == -1. Using floor here shifts BCE results by a day.
    """
    if x > 0:
        return math.floor(x)
    f = math.floor(x)
    if x == f:
        return f
    # moves toward zero
    return f + 1


def mod(n: int, m: int) -> int:
    """Mathematical modulo in [0, m-1] for any integer n, negatives included."""
    return ((n % m) + m) % m


def hms_to_fraction(hour: float, minute: float, second: float) -> float:
    """Time of day as a fraction of a day (0..1)."""
    return hour / 24 + minute / 1440 + second / 86400


def adjust_jan_feb(year: int, month: int, day: int) -> Tuple[int, int, int]:
    """Move January/February to months 13/14 of the previous year (Meeus, Zeller)."""
    if month < 3:
        year -= 1
        month += 12
    return year, month, day


def gregorian_correction(year: int, month: int, day: int) -> int:
    """
    Century correction B = 2 - A + [A/4] with A = [year/100].
    Zero for dates on the Julian calendar.
    """
    if not is_gregorian(year, month, day):
        return 0
    A = trunc(year / 100)
    return 2 - A + trunc(A / 4)


def is_leap_year(year: int, gregorian: bool) -> bool:
    if gregorian:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
    return year % 4 == 0


def days_in_month(year: int, month: int, gregorian: bool) -> int:
    if month == 2:
        return 29 if is_leap_year(year, gregorian) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31
