from __future__ import annotations

import argparse

import calendrics


def dow_header(cal, w: int = 6) -> str:
    """Short day names rotated to start at the locale's first day."""
    names = cal.regional.day_names_short
    n = cal.days_in_week()
    first = cal.regional.first_day
    return " ".join(names[(first + i) % n][:w].ljust(w) for i in range(n)).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_weeks(cal, year: int, month: int) -> list[list[tuple[str, str]]]:
    """
    Cells of the month laid out in weeks. The top line is the day of the
    month, the bottom line the day of the year, both in local digits.
    """
    n = cal.days_in_week()
    first = cal.new_date(year, month, cal.min_day)
    last_day = cal.min_day + cal.days_in_month(first) - 1

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.day_of_week() - cal.regional.first_day) % n
    for _ in range(pad):
        wk.append(cell("", ""))
    for day in range(cal.min_day, last_day + 1):
        d = first.set(day, "d")
        wk.append(cell(d.format_date("d"), d.format_date("'#'o")))
        if len(wk) == n:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < n:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def month_calendar(name: str, year: int, month: int, language: str | None = None) -> None:
    cal = calendrics.calendar(name, language)
    first = cal.new_date(year, month, cal.min_day)
    title = f"{cal.name}  {first.format_date('MM yyyy E')}"
    print_grid(title, dow_header(cal), month_weeks(cal, year, month))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month calendar grid with day-of-month and day-of-year labels."
    )
    p.add_argument("--calendar", default="gregorian", help="calendar name (default: gregorian)")
    p.add_argument("--language", default=None, help="e.g. english, arabic")
    p.add_argument("month", nargs="*", type=int, metavar="Y M",
                   help="Year and month to print (default: the current month)")

    args = p.parse_args(argv)

    if not args.month:
        today = calendrics.calendar(args.calendar, args.language).today()
        month_calendar(args.calendar, today.year, today.month, args.language)
        return 0

    if len(args.month) != 2:
        p.error("expected a year and a month, e.g. 2024 2")

    year, month = args.month
    month_calendar(args.calendar, year, month, args.language)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
