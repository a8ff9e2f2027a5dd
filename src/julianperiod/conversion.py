"""
julianperiod.conversion
-----------------------
Civil date/time <-> Julian Date (JD), after Meeus, "Astronomical Algorithms", ch. 7.

Dates up to 1582-10-14 are read on the Julian calendar, later dates on the
Gregorian calendar. Years use astronomical numbering (0 = 1 BCE).
A JD counts days from noon UT, 1 January 4713 BCE (Julian); its fraction
is the time elapsed since the preceding noon.
"""

from __future__ import annotations

import math
from dataclasses import replace

from .core.primitives import (
    GREGORIAN_SWITCH_JDN,
    adjust_jan_feb,
    days_in_month,
    gregorian_correction,
    hms_to_fraction,
    is_gregorian,
    trunc,
)
from .core.types import CivilDateTime
from .core.validate import as_clock_field, as_integer, as_julian_date

JD_J2000 = 2451545.0  # 2000-01-01 12:00 UT

SECONDS_PER_DAY = 86400


# ---------------------------------------------------------
# Forward: civil date -> JD
# ---------------------------------------------------------

def g2jd(year: int, month: int, day: int, hour: float = 12, minute: float = 0, second: float = 0) -> float:
    """
    Julian Date of a civil date and UT time of day.

    The default time (12:00) gives the integral JD of that day.
    Raises InvalidDateError if a field is not finite, month/day are not
    integers in 1..12 / 1..31, or hour, minute, second fall outside
    [0, 24), [0, 60), [0, 60). The day is not checked against the month
    length; see days_in_month.
    """
    year = as_integer("year", year)
    month = as_integer("month", month, 1, 12)
    day = as_integer("day", day, 1, 31)
    hour = as_clock_field("hour", hour, 24)
    minute = as_clock_field("minute", minute, 60)
    second = as_clock_field("second", second, 60)

    y, m, d = adjust_jan_feb(year, month, day)
    B = gregorian_correction(y, m, d)
    f = hms_to_fraction(hour, minute, second)

    # the -1524.5 constant already carries the noon offset
    jd = trunc(365.25 * (y + 4716)) + trunc(30.6001 * (m + 1)) + d + B - 1524.5
    return jd + f


# ---------------------------------------------------------
# Inverse: JD -> civil date
# ---------------------------------------------------------

def jd2g(jd: float) -> CivilDateTime:
    """
    Civil date and UT time of day for a Julian Date.

    Seconds are rounded to the millisecond. Raises InvalidJulianDayError
    if jd is not a finite number.
    """
    jd = as_julian_date(jd)

    temp = jd + 0.5
    Z = trunc(temp)
    F = temp - Z

    A = Z
    if Z >= GREGORIAN_SWITCH_JDN:
        alpha = trunc((Z - 1867216.25) / 36524.25)
        A = Z + 1 + alpha - trunc(alpha / 4)

    B = A + 1524
    C = trunc((B - 122.1) / 365.25)
    D = trunc(365.25 * C)
    E = trunc((B - D) / 30.6001)

    day_with_frac = B - D - trunc(30.6001 * E) + F
    day = trunc(day_with_frac)
    month = E - 1 if E < 14 else E - 13
    year = C - 4716 if month > 2 else C - 4715

    hour, minute, second = _split_day_fraction(day_with_frac - day)
    return normalize_carries(CivilDateTime(year, month, day, hour, minute, second))


def _split_day_fraction(f: float) -> tuple[int, int, float]:
    total = f * SECONDS_PER_DAY
    # millisecond rounding, half up
    total = math.floor(total * 1000 + 0.5) / 1000

    hour = trunc(total / 3600)
    total -= hour * 3600
    minute = trunc(total / 60)
    second = round(total - minute * 60, 3)
    return hour, minute, second


def normalize_carries(dt: CivilDateTime) -> CivilDateTime:
    """
    Carry second -> minute -> hour -> day -> month -> year.

    Each field may overflow by at most one unit (second == 60 after
    rounding, hour == 24, day one past the month end). The month length is
    taken from the calendar in force on the resulting date.
    """
    year, month, day = dt.year, dt.month, dt.day
    hour, minute, second = dt.hour, dt.minute, dt.second

    if second >= 60:
        second = round(second - 60, 3)
        minute += 1
    if minute >= 60:
        minute -= 60
        hour += 1
    if hour >= 24:
        hour -= 24
        day += 1

    dim = days_in_month(year, month, is_gregorian(year, month, day))
    if day > dim:
        day = 1
        month += 1
        if month > 12:
            month = 1
            year += 1

    return replace(dt, year=year, month=month, day=day, hour=hour, minute=minute, second=second)


# ---------------------------------------------------------
# JD <-> civil day number
# ---------------------------------------------------------

def jd_to_jdn(jd: float) -> int:
    """
    Integer day number of the civil day (starting at midnight) containing jd.

      JDN = floor(JD + 0.5)
    """
    return math.floor(as_julian_date(jd) + 0.5)


def jdn_to_jd(jdn: int) -> float:
    """JD at midnight UT starting day number jdn."""
    return as_julian_date(jdn) - 0.5


date_to_jd = g2jd
jd_to_date = jd2g
