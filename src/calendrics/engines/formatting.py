"""
calendrics.engines.formatting
-----------------------------
Date format pattern interpreter.

    d  - day of month (no leading zero)      dd - day of month (two digit)
    o  - day of year (no leading zeros)      oo - day of year (three digit)
    D  - day name short                      DD - day name long
    w  - week of year (no leading zero)      ww - week of year (two digit)
    m  - month of year (no leading zero)     mm - month of year (two digit)
    M  - month name short                    MM - month name long
    yy - year (two digit)                    yyyy - year (full)
    YYYY - formatted year                    E  - epoch designator, e.g. BCE or CE
    J  - Julian Day (days since January 1, 4713 BCE Greenwich noon)
    @  - Unix timestamp (s since 01/01/1970)
    !  - ticks (100ns since 01/01/0001)
    '...' - literal text                     '' - single quote

A character is "doubled" when the run of identical characters starting at it,
divided by the token's step, is longer than one; the whole run is consumed.
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING, Callable, Sequence

from ..core.locale import RegionalOptions
from ..core.time import SECS_PER_DAY, TICKS_EPOCH, TICKS_PER_DAY, UNIX_EPOCH
from ..core.types import CalendarDate

if TYPE_CHECKING:
    from .base import BaseCalendar

_ASCII_DIGITS = "0123456789"


def pad(value: int, length: int) -> str:
    """Decimal ``value`` left-padded with zeros to ``length``."""
    return str(value).rjust(length, "0")


def substitute_digits(value: str, digits: Sequence[str]) -> str:
    return "".join(digits[_ASCII_DIGITS.index(ch)] if ch in _ASCII_DIGITS else ch for ch in value)


def localise_numbers(regional: RegionalOptions) -> Callable[[str], str]:
    """Digit substitution for ``regional``, or the identity if it is off."""
    digits = regional.digits
    if regional.local_numbers and digits:
        return lambda value: substitute_digits(value, digits)
    return lambda value: value


def _exact(value: Fraction) -> str:
    # integral values print without a fractional part
    if value.denominator == 1:
        return str(value.numerator)
    return str(float(value))


class _Pattern:
    """Read cursor over a format string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def doubled(self, match: str, step: int = 1) -> bool:
        matches = 1
        while self.pos + matches < len(self.text) and self.text[self.pos + matches] == match:
            matches += 1
        self.pos += matches - 1
        return matches // step > 1


def render(calendar: "BaseCalendar", date: CalendarDate, fmt: str, regional: RegionalOptions) -> str:
    """Interpret ``fmt`` against ``date`` using the names and digits of ``regional``."""
    local = localise_numbers(regional)
    pattern = _Pattern(fmt)

    def number(match: str, value: int, length: int) -> str:
        return pad(value, length) if pattern.doubled(match) else str(value)

    def name(match: str, index: int, short: Sequence[str], long: Sequence[str]) -> str:
        return long[index] if pattern.doubled(match) else short[index]

    out = []
    literal = False
    while pattern.pos < len(fmt):
        ch = fmt[pattern.pos]
        if literal:
            if ch == "'" and not pattern.doubled("'"):
                literal = False
            else:
                out.append(fmt[pattern.pos])
        elif ch == "d":
            out.append(local(number("d", date.day, 2)))
        elif ch == "D":
            out.append(name("D", calendar.day_of_week(date), regional.day_names_short, regional.day_names))
        elif ch == "o":
            out.append(local(number("o", calendar.day_of_year(date), 3)))
        elif ch == "w":
            out.append(local(number("w", calendar.week_of_year(date), 2)))
        elif ch == "m":
            out.append(local(number("m", date.month, 2)))
        elif ch == "M":
            out.append(name("M", date.month - calendar.min_month, regional.month_names_short, regional.month_names))
        elif ch == "y":
            if pattern.doubled("y", 2):
                out.append(local(str(date.year)))
            else:
                out.append(local(pad(abs(date.year) % 100, 2)))
        elif ch == "Y":
            if pattern.doubled("Y", 2):
                out.append(local(calendar.format_year(date)))
        elif ch == "J":
            out.append(_exact(Fraction(calendar.to_jd(date))))
        elif ch == "@":
            out.append(_exact((Fraction(calendar.to_jd(date)) - Fraction(UNIX_EPOCH)) * SECS_PER_DAY))
        elif ch == "!":
            out.append(_exact((Fraction(calendar.to_jd(date)) - Fraction(TICKS_EPOCH)) * TICKS_PER_DAY))
        elif ch == "'":
            if pattern.doubled("'"):
                out.append("'")
            else:
                literal = True
        elif ch == "E":
            out.append(calendar.epoch(date))
        else:
            out.append(ch)
        pattern.pos += 1
    return "".join(out)
