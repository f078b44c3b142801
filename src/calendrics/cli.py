from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

_DATE_RE = re.compile(r"^-?\d+-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """'2024-03-05' or '-44-03-15' (44 BCE)."""
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return sign * y, m, d


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


def _split_date(argv: list[str]) -> tuple[str | None, list[str]]:
    """
    Pull the first [-]Y-M-D argument out of argv. argparse would read a BCE
    date such as -44-03-15 as an unknown option.
    """
    for i, a in enumerate(argv):
        if _DATE_RE.match(a):
            return a, argv[:i] + argv[i + 1:]
    return None, argv


def _parser(prog: str, description: str, usage: str = "") -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog=prog, description=description, usage=f"{prog} [-]Y-M-D {usage}[options]"
    )


def _calendar_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--language", default=None, help="e.g. english, arabic")


def _date(p: argparse.ArgumentParser, s: str | None, args):
    import calendrics

    if s is None:
        p.error("expected a date, [-]Y-M-D")
    y, m, d = _parse_ymd(s)
    return calendrics.new_date(y, m, d, calendar=args.calendar, language=args.language)


def cmd_info(argv: list[str]) -> int:
    p = _parser("calendrics info", "Summary of a calendar date")
    _calendar_args(p)
    s, argv = _split_date(argv)
    args = p.parse_args(argv)

    date = _date(p, s, args)
    print(f"Date           : {date.format_date('DD, MM d, yyyy E')}")
    print(f"Calendar       : {date.calendar.name}")
    print(f"Day of year    : {date.day_of_year()} / {date.days_in_year()}")
    print(f"Week of year   : {date.week_of_year()}")
    print(f"Days in month  : {date.days_in_month()}")
    print(f"Leap year      : {'yes' if date.leap_year() else 'no'}")
    print(f"Week day       : {'yes' if date.week_day() else 'no'}")
    print(f"Julian Day     : {date.format_date('J')}")
    return 0


def cmd_format(argv: list[str]) -> int:
    p = _parser("calendrics format", "Format a date with a pattern")
    p.add_argument("--format", default=None, help="pattern, default: the locale's date format")
    _calendar_args(p)
    s, argv = _split_date(argv)
    args = p.parse_args(argv)

    print(_date(p, s, args).format_date(args.format))
    return 0


def cmd_add(argv: list[str]) -> int:
    p = _parser("calendrics add", "Add periods to a date", "OFFSET PERIOD ")
    p.add_argument("offset", type=int)
    p.add_argument("period", choices=["y", "m", "w", "d"])
    p.add_argument("--format", default=None)
    _calendar_args(p)
    s, argv = _split_date(argv)
    args = p.parse_args(argv)

    print(_date(p, s, args).add(args.offset, args.period).format_date(args.format))
    return 0


def cmd_set(argv: list[str]) -> int:
    p = _parser("calendrics set", "Replace the year, month or day of a date", "VALUE PERIOD ")
    p.add_argument("value", type=int)
    p.add_argument("period", choices=["y", "m", "d"])
    p.add_argument("--format", default=None)
    _calendar_args(p)
    s, argv = _split_date(argv)
    args = p.parse_args(argv)

    print(_date(p, s, args).set(args.value, args.period).format_date(args.format))
    return 0


def cmd_jd(argv: list[str]) -> int:
    p = _parser("calendrics jd", "Date -> Julian Day")
    _calendar_args(p)
    s, argv = _split_date(argv)
    args = p.parse_args(argv)

    print(_date(p, s, args).format_date("J"))
    return 0


def cmd_from_jd(argv: list[str]) -> int:
    import calendrics

    p = argparse.ArgumentParser(prog="calendrics from-jd", description="Julian Day -> date")
    p.add_argument("jd", type=float)
    p.add_argument("--format", default=None)
    _calendar_args(p)
    args = p.parse_args(argv)

    cal = calendrics.calendar(args.calendar, args.language)
    print(cal.from_jd(args.jd).format_date(args.format))
    return 0


def cmd_list(argv: list[str]) -> int:
    import calendrics

    argparse.ArgumentParser(prog="calendrics list", description="List calendars").parse_args(argv)
    for name in calendrics.list_calendars():
        print(name)
    return 0


COMMANDS = {
    "info": cmd_info,
    "format": cmd_format,
    "add": cmd_add,
    "set": cmd_set,
    "jd": cmd_jd,
    "from-jd": cmd_from_jd,
    "list": cmd_list,
}


def main(argv: list[str] | None = None) -> int:
    from calendrics.core.errors import CalendarsError

    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calendrics", description="Calendar conversion, arithmetic and formatting.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("info", help="Summary of a date (also: calendrics YYYY-MM-DD)")
    sub.add_parser("format", help="Format a date with a pattern")
    sub.add_parser("add", help="Add years/months/weeks/days to a date")
    sub.add_parser("set", help="Replace the year, month or day of a date")
    sub.add_parser("jd", help="Date -> Julian Day")
    sub.add_parser("from-jd", help="Julian Day -> date")
    sub.add_parser("list", help="List calendars")

    # diagnostics
    sub.add_parser("month", help="Print a month calendar grid (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    # Shorthand: `calendrics YYYY-MM-DD ...`
    head = [a for a in argv if a not in ("-v", "--verbose")]
    if head and _DATE_RE.match(head[0]):
        argv = [a for a in argv if a in ("-v", "--verbose")] + ["info"] + head

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd in COMMANDS:
            return COMMANDS[args.cmd](rest)

        if args.cmd == "month":
            return _run_module_main("calendrics.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calendrics.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalendarsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
