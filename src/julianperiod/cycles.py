"""
julianperiod.cycles
-------------------
Positions of a year in the classical chronological cycles:

  solar      28 years  (weekday/leap-year pattern of the Julian calendar)
  lunar      19 years  (Metonic cycle, "golden number")
  indiction  15 years  (Roman/Byzantine fiscal cycle)

and in Scaliger's Julian Period of 28*19*15 = 7980 years, whose year 1
(4713 BCE) is year 1 of all three cycles.

Years use astronomical numbering (0 = 1 BCE, -1 = 2 BCE, ...).
"""

from __future__ import annotations

from .core.primitives import mod
from .core.types import JulianPeriodYear
from .core.validate import as_integer

SOLAR_CYCLE = 28
LUNAR_CYCLE = 19
INDICTION_CYCLE = 15
JULIAN_PERIOD = INDICTION_CYCLE * LUNAR_CYCLE * SOLAR_CYCLE  # 7980

# Chinese-remainder weights for (indiction, lunar, solar):
#   6916 = 1 (mod 15), 0 (mod 19), 0 (mod 28)
#   4200 = 0 (mod 15), 1 (mod 19), 0 (mod 28)
#   4845 = 0 (mod 15), 0 (mod 19), 1 (mod 28)
CRT_INDICTION = 6916
CRT_LUNAR = 4200
CRT_SOLAR = 4845


def solar_number(year: int) -> int:
    """Position in the 28-year solar cycle (1..28)."""
    year = as_integer("year", year)
    return mod(year + 8, SOLAR_CYCLE) + 1


def lunar_number(year: int) -> int:
    """Position in the 19-year Metonic cycle, i.e. the golden number (1..19)."""
    year = as_integer("year", year)
    return mod(year, LUNAR_CYCLE) + 1


def indiction_number(year: int) -> int:
    """Position in the 15-year indiction cycle (1..15)."""
    year = as_integer("year", year)
    return mod(year + 2, INDICTION_CYCLE) + 1


def julian_period_year_number(year: int) -> int:
    """
    Year of the Julian Period (1..7980), recombined from the three cycle
    positions. For years after 4713 BCE this equals year + 4713.
    """
    ind0 = indiction_number(year) - 1
    lun0 = lunar_number(year) - 1
    sol0 = solar_number(year) - 1

    combined = CRT_INDICTION * ind0 + CRT_LUNAR * lun0 + CRT_SOLAR * sol0
    return mod(combined, JULIAN_PERIOD) + 1


def julian_period_cycles(year: int) -> JulianPeriodYear:
    year = as_integer("year", year)
    return JulianPeriodYear(
        year=year,
        solar=solar_number(year),
        lunar=lunar_number(year),
        indiction=indiction_number(year),
        julian_period=julian_period_year_number(year),
    )
