from __future__ import annotations

import argparse
from typing import List, Optional

import julianperiod as jp


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "julianperiod[diagnostics]"') from e


def sample_dates(np, n: int, start_year: int, end_year: int, seed: int) -> List[jp.CivilDateTime]:
    """n random legal civil date-times in [start_year, end_year], seconds to the millisecond."""
    rng = np.random.default_rng(seed)
    years = rng.integers(start_year, end_year + 1, size=n)
    months = rng.integers(1, 13, size=n)
    u = rng.random(size=n)
    hours = rng.integers(0, 24, size=n)
    minutes = rng.integers(0, 60, size=n)
    millis = rng.integers(0, 60000, size=n)

    out = []
    for y, m, frac, h, mi, ms in zip(years, months, u, hours, minutes, millis):
        y, m = int(y), int(m)
        dim = jp.days_in_month(y, m, jp.is_gregorian(y, m, 1))
        d = 1 + int(frac * dim)
        if y == 1582 and m == 10 and 4 < d < 15:
            # dropped days: read as Julian, they alias Gregorian 15..24
            d = 4
        out.append(jp.CivilDateTime(y, m, d, int(h), int(mi), int(ms) / 1000))
    return out


def roundtrip_failures(dates: List[jp.CivilDateTime], *, tol_seconds: float = 1e-3) -> List[str]:
    failures = []
    for dt in dates:
        jd = jp.g2jd(*dt.as_tuple())
        back = jp.jd2g(jd)
        if back.as_tuple()[:5] != dt.as_tuple()[:5] or abs(back.second - dt.second) > tol_seconds:
            failures.append(f"{dt} -> JD {jd:.8f} -> {back}")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random civil date -> JD -> civil date round-trip check.")
    p.add_argument("--n", type=int, default=20000, help="number of samples (default: 20000)")
    p.add_argument("--start-year", type=int, default=-4712)
    p.add_argument("--end-year", type=int, default=3000)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--max-print", type=int, default=20, help="print at most this many failures")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    dates = sample_dates(np, args.n, args.start_year, args.end_year, args.seed)
    failures = roundtrip_failures(dates)

    for line in failures[: args.max_print]:
        print("FAIL", line)

    print(f"samples={len(dates)}  years={args.start_year}..{args.end_year}  failures={len(failures)}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
