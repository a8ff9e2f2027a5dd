from __future__ import annotations

import argparse
import sys
import importlib
import inspect


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_g2jd(argv: list[str]) -> int:
    import julianperiod as jp

    p = argparse.ArgumentParser(prog="julianperiod g2jd", description="Civil date/time (UT) -> Julian Date")
    p.add_argument("year", type=int, help="astronomical year (0 = 1 BCE)")
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--hour", type=float, default=12.0)
    p.add_argument("--minute", type=float, default=0.0)
    p.add_argument("--second", type=float, default=0.0)
    args = p.parse_args(argv)

    try:
        jd = jp.g2jd(args.year, args.month, args.day, args.hour, args.minute, args.second)
    except jp.JulianPeriodError as e:
        p.error(str(e))

    calendar = "Gregorian" if jp.is_gregorian(args.year, args.month, args.day) else "Julian"
    print(f"JD = {jd:.6f}  ({calendar} calendar)")
    return 0


def cmd_jd2g(argv: list[str]) -> int:
    import julianperiod as jp

    p = argparse.ArgumentParser(prog="julianperiod jd2g", description="Julian Date -> civil date/time (UT)")
    p.add_argument("jd", type=float)
    args = p.parse_args(argv)

    try:
        dt = jp.jd2g(args.jd)
    except jp.JulianPeriodError as e:
        p.error(str(e))

    calendar = "Gregorian" if jp.is_gregorian(dt.year, dt.month, dt.day) else "Julian"
    print(f"JD = {args.jd:.6f}")
    print(f"  year   = {dt.year}")
    print(f"  month  = {dt.month}")
    print(f"  day    = {dt.day}")
    print(f"  hour   = {dt.hour}")
    print(f"  minute = {dt.minute}")
    print(f"  second = {dt.second:.3f}")
    print(f"  calendar = {calendar}")
    return 0


def cmd_cycles(argv: list[str]) -> int:
    import julianperiod as jp

    p = argparse.ArgumentParser(prog="julianperiod cycles", description="Solar, lunar, indiction and Julian Period numbers of a year")
    p.add_argument("year", type=int, help="astronomical year (0 = 1 BCE)")
    args = p.parse_args(argv)

    c = jp.julian_period_cycles(args.year)
    print(f"Year {c.year}")
    print(f"  Solar cycle      ({jp.SOLAR_CYCLE:>4}) = {c.solar}")
    print(f"  Lunar cycle      ({jp.LUNAR_CYCLE:>4}) = {c.lunar}")
    print(f"  Indiction        ({jp.INDICTION_CYCLE:>4}) = {c.indiction}")
    print(f"  Julian Period    ({jp.JULIAN_PERIOD:>4}) = {c.julian_period}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="julianperiod", description="Julian Day and chronological cycle toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("g2jd", help="Civil date/time -> Julian Date", add_help=False)
    sub.add_parser("jd2g", help="Julian Date -> civil date/time", add_help=False)
    sub.add_parser("cycles", help="Cycle numbers of a year", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools (need the diagnostics extra)")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "cycle-plot"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "g2jd":
        return cmd_g2jd(rest)

    if args.cmd == "jd2g":
        return cmd_jd2g(rest)

    if args.cmd == "cycles":
        return cmd_cycles(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "julianperiod.diagnostics.round_trip",
            "cycle-plot": "julianperiod.diagnostics.cycle_plot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
