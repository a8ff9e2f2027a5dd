# tests/test_conversion.py

import math
import random

import pytest

import julianperiod as jp
from julianperiod.core.primitives import days_in_month, is_gregorian


# Meeus, Astronomical Algorithms, ch. 7
KNOWN_JD = [
    ((2000, 1, 1, 12, 0, 0), 2451545.0),
    ((1999, 1, 1, 0, 0, 0), 2451179.5),
    ((1987, 1, 27, 0, 0, 0), 2446822.5),
    ((1987, 6, 19, 12, 0, 0), 2446966.0),
    ((1988, 1, 27, 0, 0, 0), 2447187.5),
    ((1988, 6, 19, 12, 0, 0), 2447332.0),
    ((1900, 1, 1, 0, 0, 0), 2415020.5),
    ((1600, 1, 1, 0, 0, 0), 2305447.5),
    ((1600, 12, 31, 0, 0, 0), 2305812.5),
    ((1957, 10, 4, 19, 26, 24), 2436116.31),
    ((837, 4, 10, 7, 12, 0), 2026871.8),
    ((333, 1, 27, 12, 0, 0), 1842713.0),
    ((-123, 12, 31, 0, 0, 0), 1676496.5),
    ((-122, 1, 1, 0, 0, 0), 1676497.5),
    ((-1000, 7, 12, 12, 0, 0), 1356001.0),
    ((-1000, 2, 29, 0, 0, 0), 1355866.5),
    ((-1001, 8, 17, 21, 36, 0), 1355671.4),
    ((-4712, 1, 1, 12, 0, 0), 0.0),
]


@pytest.mark.parametrize("fields, expected", KNOWN_JD)
def test_known_julian_dates(fields, expected):
    assert jp.g2jd(*fields) == pytest.approx(expected, abs=1e-6)

@pytest.mark.parametrize("fields, expected", KNOWN_JD)
def test_known_julian_dates_inverse(fields, expected):
    dt = jp.jd2g(expected)
    assert dt.as_tuple()[:5] == fields[:5]
    assert dt.second == pytest.approx(fields[5], abs=1e-3)

def test_j2000_default_time_is_noon():
    assert jp.g2jd(2000, 1, 1) == 2451545.0
    assert jp.g2jd(2000, 1, 1, 12, 0, 0) == jp.JD_J2000

def test_meeus_inverse_examples():
    dt = jp.jd2g(2436116.31)
    assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (1957, 10, 4, 19, 26)
    assert dt.second == pytest.approx(24.0, abs=1e-3)

    dt = jp.jd2g(1507900.13)
    assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (-584, 5, 28, 15, 7)
    assert dt.second == pytest.approx(12.0, abs=1e-3)

def test_calendar_switch_days_are_consecutive():
    # 1582-10-04 (Julian) is followed by 1582-10-15 (Gregorian)
    assert jp.g2jd(1582, 10, 4) == 2299160.0
    assert jp.g2jd(1582, 10, 15) == 2299161.0
    assert jp.g2jd(1582, 10, 15) == jp.GREGORIAN_SWITCH_JDN

    assert jp.jd2g(2299160.0).as_tuple()[:3] == (1582, 10, 4)
    assert jp.jd2g(2299161.0).as_tuple()[:3] == (1582, 10, 15)

def test_switch_at_midnight():
    dt = jp.jd2g(2299160.5)
    assert dt.as_tuple()[:5] == (1582, 10, 15, 0, 0)
    dt = jp.jd2g(2299160.49999)
    assert dt.as_tuple()[:3] == (1582, 10, 4)

def test_permissive_day_of_month():
    # not checked against the month length: Feb 30 is read as Mar 1
    assert jp.g2jd(2020, 2, 30) == jp.g2jd(2020, 3, 1)
    assert jp.g2jd(2021, 4, 31) == jp.g2jd(2021, 5, 1)

def test_julian_leap_day_before_switch():
    # 1500 is a leap year only on the Julian calendar
    assert jp.g2jd(1500, 3, 1) - jp.g2jd(1500, 2, 28) == 2.0
    assert jp.jd2g(jp.g2jd(1500, 2, 29)).as_tuple()[:3] == (1500, 2, 29)
    assert jp.g2jd(1700, 3, 1) - jp.g2jd(1700, 2, 28) == 1.0

def _random_civil(rng: random.Random, start_year: int, end_year: int):
    y = rng.randint(start_year, end_year)
    m = rng.randint(1, 12)
    d = rng.randint(1, days_in_month(y, m, is_gregorian(y, m, 1)))
    if y == 1582 and m == 10 and 4 < d < 15:
        d = rng.choice([4, 15])
    return (y, m, d, rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59999) / 1000)

def test_civil_jd_roundtrip():
    rng = random.Random(42)
    for _ in range(20000):
        fields = _random_civil(rng, -4712, 3000)
        back = jp.jd2g(jp.g2jd(*fields))
        assert back.as_tuple()[:5] == fields[:5], fields
        assert back.second == pytest.approx(fields[5], abs=1e-3)

def test_roundtrip_around_switch():
    for d in (1, 2, 3, 4):
        back = jp.jd2g(jp.g2jd(1582, 10, d, 6, 30, 15.25))
        assert back.as_tuple() == (1582, 10, d, 6, 30, 15.25)
    for d in range(15, 32):
        back = jp.jd2g(jp.g2jd(1582, 10, d, 18, 0, 0))
        assert back.as_tuple() == (1582, 10, d, 18, 0, 0.0)

def test_consecutive_noons_are_one_day_apart():
    jd = jp.g2jd(-200, 1, 1)
    for _ in range(1000):
        nxt = jp.jd2g(jd + 1)
        assert jp.g2jd(nxt.year, nxt.month, nxt.day) == jd + 1
        jd += 1

def test_jd2g_returns_civil_datetime():
    dt = jp.jd2g(2451545)
    assert isinstance(dt, jp.CivilDateTime)
    assert dt == jp.CivilDateTime(2000, 1, 1, 12, 0, 0.0)

def test_aliases():
    assert jp.date_to_jd is jp.g2jd
    assert jp.jd_to_date is jp.jd2g

def test_jdn_helpers():
    assert jp.jd_to_jdn(2451545.0) == 2451545
    assert jp.jd_to_jdn(2451544.5) == 2451545
    assert jp.jd_to_jdn(2451544.49) == 2451544
    assert jp.jdn_to_jd(2451545) == 2451544.5
    with pytest.raises(jp.InvalidJulianDayError):
        jp.jd_to_jdn(math.inf)


# ---------------------------------------------------------
# Validation
# ---------------------------------------------------------

@pytest.mark.parametrize(
    "args",
    [
        (2020, 13, 1),
        (2020, 0, 1),
        (2020, 1.5, 1),
        (2020, True, 1),
        (2020, "1", 1),
        (2020, 1, 0),
        (2020, 1, 32),
        (2020, 1, 2.5),
        (2020, 1, math.nan),
        (2020, 1, 1, 24),
        (2020, 1, 1, -1),
        (2020, 1, 1, math.inf),
        (2020, 1, 1, 12, 60),
        (2020, 1, 1, 12, -0.5),
        (2020, 1, 1, 12, 0, 60),
        (2020, 1, 1, 12, 0, math.nan),
        (2020.5, 1, 1),
        (math.nan, 1, 1),
    ],
)
def test_g2jd_rejects_bad_fields(args):
    with pytest.raises(jp.InvalidDateError):
        jp.g2jd(*args)

def test_g2jd_error_kind():
    with pytest.raises(ValueError, match="month must be an integer in 1..12"):
        jp.g2jd(2020, 13, 1)
    with pytest.raises(jp.JulianPeriodError):
        jp.g2jd(2020, 1, 1, 25)

def test_g2jd_accepts_integral_floats():
    assert jp.g2jd(2000.0, 1.0, 1.0) == jp.g2jd(2000, 1, 1)
    assert jp.g2jd(2000, 1, 1, 6.5) == pytest.approx(2451544.5 + 6.5 / 24)

@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "2451545", None, True])
def test_jd2g_rejects_non_finite(bad):
    with pytest.raises(jp.InvalidJulianDayError):
        jp.jd2g(bad)
    with pytest.raises(TypeError):
        jp.jd2g(bad)
