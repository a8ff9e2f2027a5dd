"""julianperiod public API.

Civil date <-> Julian Date conversion (Julian calendar before 1582-10-15,
Gregorian after) and the solar, lunar, indiction and Julian Period year
numbers. Everything is re-exported here.
"""

from .conversion import (
    JD_J2000,
    g2jd,
    jd2g,
    date_to_jd,
    jd_to_date,
    normalize_carries,
    jd_to_jdn,
    jdn_to_jd,
)
from .cycles import (
    SOLAR_CYCLE,
    LUNAR_CYCLE,
    INDICTION_CYCLE,
    JULIAN_PERIOD,
    solar_number,
    lunar_number,
    indiction_number,
    julian_period_year_number,
    julian_period_cycles,
)
from .core.primitives import (
    GREGORIAN_SWITCH_JDN,
    is_gregorian,
    is_leap_year,
    days_in_month,
)
from .core.types import CivilDateTime, JulianPeriodYear
from .core.errors import JulianPeriodError, InvalidDateError, InvalidJulianDayError

__all__ = [
    "g2jd",
    "jd2g",
    "date_to_jd",
    "jd_to_date",
    "normalize_carries",
    "jd_to_jdn",
    "jdn_to_jd",
    "solar_number",
    "lunar_number",
    "indiction_number",
    "julian_period_year_number",
    "julian_period_cycles",
    "is_gregorian",
    "is_leap_year",
    "days_in_month",
    "CivilDateTime",
    "JulianPeriodYear",
    "JulianPeriodError",
    "InvalidDateError",
    "InvalidJulianDayError",
    "JD_J2000",
    "GREGORIAN_SWITCH_JDN",
    "SOLAR_CYCLE",
    "LUNAR_CYCLE",
    "INDICTION_CYCLE",
    "JULIAN_PERIOD",
]
