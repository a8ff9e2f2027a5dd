from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Optional

from .errors import InvalidDateError, InvalidJulianDayError


def _is_real(x: object) -> bool:
    # bool is an Integral subclass; never accept it as a number
    return isinstance(x, Real) and not isinstance(x, bool)


def as_integer(name: str, x: object, lo: Optional[int] = None, hi: Optional[int] = None) -> int:
    """
    Return x as int, raising InvalidDateError unless it is a finite integral
    value within [lo, hi] (either bound may be omitted).
    """
    if lo is not None and hi is not None:
        msg = f"{name} must be an integer in {lo}..{hi}"
    else:
        msg = f"{name} must be a finite integer"

    if not _is_real(x):
        raise InvalidDateError(f"{msg}, got {x!r}")
    if isinstance(x, Integral):
        v = int(x)
    else:
        xf = float(x)
        if not math.isfinite(xf) or not xf.is_integer():
            raise InvalidDateError(f"{msg}, got {x!r}")
        v = int(xf)

    if (lo is not None and v < lo) or (hi is not None and v > hi):
        raise InvalidDateError(f"{msg}, got {x!r}")
    return v


def as_clock_field(name: str, x: object, upper: int) -> float:
    """Return x if it is a finite real in [0, upper)."""
    if not _is_real(x) or not math.isfinite(float(x)) or not (0 <= x < upper):
        raise InvalidDateError(f"{name} must be in 0..{upper - 1}, got {x!r}")
    return x


def as_julian_date(jd: object) -> float:
    if not _is_real(jd) or not math.isfinite(float(jd)):
        raise InvalidJulianDayError(f"jd must be a finite number, got {jd!r}")
    return float(jd)
