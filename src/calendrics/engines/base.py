"""
calendrics.engines.base
-----------------------
Calendar-independent algorithms built on the variant primitives: validation,
add/set by period, month-of-year remapping, day-of-year and day-of-week, and
the "no year zero" correction.

Every public method validates its arguments exactly once and then works on
plain integers through the underscore primitives, which never validate.
Callers that already hold a valid date skip the check with ``check=False``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date as _date
from functools import lru_cache
from operator import index as _index
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type

from ..core.errors import (
    CalendarsError,
    DifferentCalendarsError,
    InvalidArgumentsError,
    InvalidDateError,
    InvalidMonthError,
    InvalidYearError,
)
from ..core.locale import MESSAGES, Messages, RegionalOptions, replace_tags, resolve_language, select_options
from ..core.types import CalendarDate, Period
from .formatting import pad, render

Ymd = Tuple[int, int, int]


@lru_cache(maxsize=None)
def _gregorian() -> "BaseCalendar":
    """Platform dates are Gregorian; cross-calendar conversion goes through this instance."""
    from .gregorian import GregorianCalendar
    return GregorianCalendar()


def _integral(*values: Any) -> bool:
    try:
        for v in values:
            _index(v)
    except TypeError:
        return False
    return True


class BaseCalendar(ABC):
    """
    Generic calendar. Subclasses set the class attributes and implement the
    abstract primitives; everything else is inherited.
    """
    name: ClassVar[str] = ""
    has_year_zero: ClassVar[bool] = False
    min_month: ClassVar[int] = 1
    first_month: ClassVar[int] = 1
    min_day: ClassVar[int] = 1
    regional_options: ClassVar[Mapping[str, RegionalOptions]] = {}

    def __init__(self, language: Optional[str] = None, messages: Optional[Messages] = None):
        self.regional: RegionalOptions = select_options(self.regional_options, language, type(self).__name__)
        self.language: Optional[str] = resolve_language(self.regional_options, language)
        self.messages: Messages = messages if messages is not None else select_options(MESSAGES, language, "Messages")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(language={self.language!r})"

    def error(self, cls: Type[CalendarsError], *names: str) -> CalendarsError:
        """Build ``cls`` with its message rendered from this calendar's templates."""
        return cls(replace_tags(self.messages.template(cls.key), names), *names)

    # ---------------------------------------------------------
    # Variant primitives
    # ---------------------------------------------------------

    @abstractmethod
    def _leap_year(self, year: int) -> bool: ...

    @abstractmethod
    def _days_in_month(self, year: int, month: int) -> int: ...

    @abstractmethod
    def _to_jd(self, year: int, month: int, day: int) -> float: ...

    @abstractmethod
    def _from_jd(self, jd: float) -> Ymd: ...

    @abstractmethod
    def _week_of_year(self, year: int, month: int, day: int) -> int: ...

    def _months_in_year(self, year: int) -> int:
        return 12

    def _days_in_year(self, year: int) -> int:
        return 366 if self._leap_year(year) else 365

    def _month_of_year(self, year: int, month: int) -> int:
        n = self._months_in_year(year)
        return (month + n - self.first_month) % n + self.min_month

    def _from_month_of_year(self, year: int, ordinal: int) -> int:
        return (ordinal + self.first_month - 2 * self.min_month) % self._months_in_year(year) + self.min_month

    def _day_of_year(self, year: int, month: int, day: int) -> int:
        first = self._to_jd(year, self._from_month_of_year(year, self.min_month), self.min_day)
        return int(self._to_jd(year, month, day) - first) + 1

    def _day_of_week(self, year: int, month: int, day: int) -> int:
        return (math.floor(self._to_jd(year, month, day)) + 2) % self.days_in_week()

    # ---------------------------------------------------------
    # Construction and validation
    # ---------------------------------------------------------

    def new_date(self, year: Any = None, month: Optional[int] = None, day: Optional[int] = None,
                 *, check: bool = True) -> CalendarDate:
        """
        Today if called without arguments, a copy when given a CalendarDate,
        otherwise the date built from the explicit fields.
        """
        if year is None:
            return self.today()
        if isinstance(year, CalendarDate):
            source = self.validate(year, month, day, InvalidDateError, check=check)
            return CalendarDate(self, source.year, source.month, source.day, check=check)
        return CalendarDate(self, year, month, day, check=check)

    def today(self) -> CalendarDate:
        return self.from_date(_date.today())

    def is_valid(self, year: Any, month: Any, day: Any) -> bool:
        if not _integral(year, month, day):
            return False
        if year == 0 and not self.has_year_zero:
            return False
        if not (self.min_month <= month < self.min_month + self._months_in_year(year)):
            return False
        return self.min_day <= day < self.min_day + self._days_in_month(year, month)

    def validate(self, year: Any, month: Optional[int] = None, day: Optional[int] = None,
                 error: Type[CalendarsError] = InvalidArgumentsError, *, check: bool = True) -> CalendarDate:
        """
        Return a date of this calendar for the given date or fields.

        A CalendarDate is returned unchanged after checking it belongs to this
        calendar. Raw fields raise ``error`` when invalid. ``check=False``
        skips both checks.
        """
        if isinstance(year, CalendarDate):
            if check and year.calendar.name != self.name:
                raise self.error(DifferentCalendarsError, self.name, year.calendar.name)
            return year
        if check and not self.is_valid(year, month, day):
            raise self.error(error, self.name)
        return CalendarDate(self, year, month, day, check=False)

    # ---------------------------------------------------------
    # Validated contract
    # ---------------------------------------------------------

    def leap_year(self, year: Any) -> bool:
        date = self.validate(year, self.min_month, self.min_day, InvalidYearError)
        return self._leap_year(date.year)

    def months_in_year(self, year: Any) -> int:
        date = self.validate(year, self.min_month, self.min_day, InvalidYearError)
        return self._months_in_year(date.year)

    def days_in_month(self, year: Any, month: Optional[int] = None) -> int:
        date = self.validate(year, month, self.min_day, InvalidMonthError)
        return self._days_in_month(date.year, date.month)

    def days_in_year(self, year: Any) -> int:
        date = self.validate(year, self.min_month, self.min_day, InvalidYearError)
        return self._days_in_year(date.year)

    def days_in_week(self) -> int:
        return 7

    def month_of_year(self, year: Any, month: Optional[int] = None) -> int:
        """Position of the month within its year, counted from ``min_month``."""
        date = self.validate(year, month, self.min_day, InvalidMonthError)
        return self._month_of_year(date.year, date.month)

    def from_month_of_year(self, year: int, ordinal: int) -> int:
        """Actual month number for an ordinal position within ``year``."""
        month = self._from_month_of_year(year, ordinal)
        self.validate(year, month, self.min_day, InvalidMonthError)
        return month

    def day_of_year(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> int:
        date = self.validate(year, month, day, InvalidDateError)
        return self._day_of_year(date.year, date.month, date.day)

    def day_of_week(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> int:
        """0 .. days_in_week()-1, where 0 is the calendar's first weekday."""
        date = self.validate(year, month, day, InvalidDateError)
        return self._day_of_week(date.year, date.month, date.day)

    def week_of_year(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> int:
        date = self.validate(year, month, day, InvalidDateError)
        return self._week_of_year(date.year, date.month, date.day)

    def week_day(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> bool:
        """True for Monday .. Friday."""
        date = self.validate(year, month, day, InvalidDateError)
        return (self._day_of_week(date.year, date.month, date.day) or 7) < 6

    def extra_info(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> Dict[str, Any]:
        self.validate(year, month, day, InvalidDateError)
        return {}

    def epoch(self, year: Any) -> str:
        """Epoch designator for the year, e.g. BCE or CE."""
        date = self.validate(year, self.min_month, self.min_day, InvalidYearError)
        before, after = self.regional.epochs
        return before if date.year < 0 else after

    def format_year(self, year: Any) -> str:
        date = self.validate(year, self.min_month, self.min_day, InvalidYearError)
        return ("-" if date.year < 0 else "") + pad(abs(date.year), 4)

    def to_jd(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> float:
        date = self.validate(year, month, day, InvalidDateError)
        return self._to_jd(date.year, date.month, date.day)

    def from_jd(self, jd: float) -> CalendarDate:
        y, m, d = self._from_jd(jd)
        return CalendarDate(self, y, m, d, check=False)

    def compare(self, a: CalendarDate, b: CalendarDate) -> int:
        """-1, 0 or +1 as ``a`` is before, equal to or after ``b``."""
        self.validate(a, error=InvalidDateError)
        self.validate(b, error=InvalidDateError)
        if a.year != b.year:
            diff = a.year - b.year
        elif a.month != b.month:
            diff = self._month_of_year(a.year, a.month) - self._month_of_year(b.year, b.month)
        else:
            diff = a.day - b.day
        return (diff > 0) - (diff < 0)

    # ---------------------------------------------------------
    # Platform dates (always Gregorian)
    # ---------------------------------------------------------

    def to_date(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> _date:
        date = self.validate(year, month, day, InvalidDateError)
        return _gregorian().from_jd(self._to_jd(date.year, date.month, date.day)).to_date()

    def from_date(self, d: _date) -> CalendarDate:
        return self.from_jd(_gregorian().from_date(d).to_jd())

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add(self, date: CalendarDate, offset: int, period: Period) -> CalendarDate:
        """
        Add ``offset`` periods ('y', 'm', 'w' or 'd') to ``date``.

        Years and months keep the day where possible and clamp it to the
        length of the resulting month. Year zero is skipped when the calendar
        has none.
        """
        self.validate(date, self.min_month, self.min_day, InvalidDateError)
        return self._correct_add(date, self._add(date, offset, period), offset, period)

    def _add(self, date: CalendarDate, offset: int, period: str) -> Ymd:
        if period == "d" or period == "w":
            jd = self._to_jd(date.year, date.month, date.day)
            jd += offset * (self.days_in_week() if period == "w" else 1)
            return self._from_jd(jd)
        if period != "y" and period != "m":
            raise self.error(InvalidArgumentsError)

        y = date.year + (offset if period == "y" else 0)
        m = self._month_of_year(date.year, date.month) + (offset if period == "m" else 0)
        d = date.day
        if period == "y":
            # keep the same calendar month when the year starts elsewhere
            if date.month != self._from_month_of_year(y, m):
                m = self._month_of_year(y, date.month)
            m = min(m, self._months_in_year(y))
        else:
            y, m = self._resync_year_month(y, m)
        d = min(d, self._days_in_month(y, self._from_month_of_year(y, m)))
        return y, self._from_month_of_year(y, m), d

    def _resync_year_month(self, y: int, m: int) -> Tuple[int, int]:
        """Carry ordinal-month overflow into the year; months per year may vary."""
        while m < self.min_month:
            y -= 1
            m += self._months_in_year(y)
        year_months = self._months_in_year(y)
        while m > year_months - 1 + self.min_month:
            y += 1
            m -= year_months
            year_months = self._months_in_year(y)
        return y, m

    def _year_zero_adjustment(self, period: str) -> Tuple[int, int, str]:
        """(offset multiplier, nudge, period of the corrected add) for ``period``."""
        table = {
            "y": (1, 1, "y"),
            "m": (1, self._months_in_year(-1), "m"),
            "w": (self.days_in_week(), self._days_in_year(-1), "d"),
            "d": (1, self._days_in_year(-1), "d"),
        }
        return table[period]

    def _correct_add(self, date: CalendarDate, ymd: Ymd, offset: int, period: str) -> CalendarDate:
        if not self.has_year_zero and (period == "y" or period == "m"):
            if ymd[0] == 0 or (date.year > 0) != (ymd[0] > 0):
                scale, nudge, corrected = self._year_zero_adjustment(period)
                direction = -1 if offset < 0 else 1
                ymd = self._add(date, offset * scale + direction * nudge, corrected)
        return date.date(*ymd)

    def set(self, date: CalendarDate, value: int, period: Period) -> CalendarDate:
        """
        Replace the year, month or day of ``date``. Changing year or month
        clamps the day to the new month's length; nothing overflows.
        """
        self.validate(date, self.min_month, self.min_day, InvalidDateError)
        if period not in ("y", "m", "d"):
            raise self.error(InvalidArgumentsError)
        y = value if period == "y" else date.year
        m = value if period == "m" else date.month
        d = value if period == "d" else date.day
        if period == "y" or period == "m":
            d = min(d, self.days_in_month(y, m))
        return date.date(y, m, d)

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    def format_date(self, date: Optional[CalendarDate], fmt: Optional[str] = None,
                    settings: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render ``date`` with ``fmt`` (defaults to the locale's date format).

        ``settings`` overrides RegionalOptions fields for this call only,
        e.g. ``{"month_names": (...), "local_numbers": True}``.
        """
        if date is None:
            return ""
        if date.calendar.name != self.name:
            raise self.error(DifferentCalendarsError, self.name, date.calendar.name)
        # a None value keeps the locale default
        overrides = {k: v for k, v in (settings or {}).items() if v is not None}
        regional = replace(self.regional, **overrides) if overrides else self.regional
        return render(self, date, fmt or regional.date_format, regional)
