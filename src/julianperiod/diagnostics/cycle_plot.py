#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Callable, List, Optional, Tuple

import julianperiod as jp


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "julianperiod[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "julianperiod[diagnostics]"') from e


CYCLES: List[Tuple[str, int, Callable[[int], int]]] = [
    ("Solar (28)", jp.SOLAR_CYCLE, jp.solar_number),
    ("Lunar (19)", jp.LUNAR_CYCLE, jp.lunar_number),
    ("Indiction (15)", jp.INDICTION_CYCLE, jp.indiction_number),
]


def build_series(np, fn, start_year: int, end_year: int):
    years = np.arange(start_year, end_year + 1, dtype=int)
    values = np.array([fn(int(y)) for y in years], dtype=int)
    return years, values


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Sawtooth plot of the solar, lunar and indiction cycle numbers.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="cycles.png")
    p.add_argument("--title", default="Chronological cycle numbers")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, axes = plt.subplots(len(CYCLES), 1, figsize=(14, 2.4 * len(CYCLES)), sharex=True)
    for ax, (label, length, fn) in zip(axes, CYCLES):
        x, y = build_series(np, fn, start_year, end_year)
        ax.step(x, y, where="mid", color="0.15", lw=1.0)
        # mark the years that open a cycle
        starts = x[y == 1]
        ax.scatter(starts, np.ones_like(starts), s=18, c="C3", zorder=5)
        ax.set_ylim(0.5, length + 0.5)
        ax.set_ylabel(label)
        ax.grid(True, axis="x", lw=0.4, alpha=0.5)

    axes[-1].set_xlabel("Year (astronomical numbering)")
    axes[0].set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    plt.close(fig)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
