"""
calendrics.engines.interfaces
-----------------------------
The capability set every calendar variant provides.

Public methods take either a CalendarDate or raw integer fields and validate
them once. Variants only implement the raw primitives (leap year, month
length, Julian Day conversion, week numbering) on plain integers; the generic
arithmetic in BaseCalendar is written against those primitives alone.

Standard Reference Frame:
Julian Days count days from noon, 1 January 4713 BCE (proleptic Julian).
A civil date maps to the JD of its midnight, i.e. a value ending in .5.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

from ..core.locale import Messages, RegionalOptions
from ..core.types import CalendarDate, Period

YearArg = Union[CalendarDate, int]


@runtime_checkable
class CalendarProtocol(Protocol):
    name: str
    language: Optional[str]
    has_year_zero: bool
    min_month: int
    first_month: int
    min_day: int
    regional: RegionalOptions
    messages: Messages

    def error(self, cls: type, *names: str) -> Exception: ...

    # ---------------------------------------------------------
    # 1. Variant primitives (raw integers, never validated)
    # ---------------------------------------------------------
    def _leap_year(self, year: int) -> bool: ...

    def _months_in_year(self, year: int) -> int: ...

    def _days_in_month(self, year: int, month: int) -> int: ...

    def _to_jd(self, year: int, month: int, day: int) -> float: ...

    def _from_jd(self, jd: float) -> Tuple[int, int, int]: ...

    def _week_of_year(self, year: int, month: int, day: int) -> int: ...

    # ---------------------------------------------------------
    # 2. Validated contract
    # ---------------------------------------------------------
    def leap_year(self, year: YearArg) -> bool: ...

    def months_in_year(self, year: YearArg) -> int: ...

    def days_in_month(self, year: YearArg, month: Optional[int] = None) -> int: ...

    def week_of_year(self, year: YearArg, month: Optional[int] = None, day: Optional[int] = None) -> int: ...

    def to_jd(self, year: YearArg, month: Optional[int] = None, day: Optional[int] = None) -> float: ...

    def from_jd(self, jd: float) -> CalendarDate: ...

    # ---------------------------------------------------------
    # 3. Generic algorithms (inherited from BaseCalendar)
    # ---------------------------------------------------------
    def new_date(self, year: Any = None, month: Optional[int] = None, day: Optional[int] = None,
                 *, check: bool = True) -> CalendarDate: ...

    def is_valid(self, year: Any, month: Any, day: Any) -> bool: ...

    def validate(self, year: YearArg, month: Optional[int], day: Optional[int],
                 error: type = ..., *, check: bool = True) -> CalendarDate: ...

    def add(self, date: CalendarDate, offset: int, period: Period) -> CalendarDate: ...

    def set(self, date: CalendarDate, value: int, period: Period) -> CalendarDate: ...

    def month_of_year(self, year: YearArg, month: Optional[int] = None) -> int: ...

    def from_month_of_year(self, year: int, ordinal: int) -> int: ...

    def day_of_year(self, year: YearArg, month: Optional[int] = None, day: Optional[int] = None) -> int: ...

    def day_of_week(self, year: YearArg, month: Optional[int] = None, day: Optional[int] = None) -> int: ...

    def days_in_week(self) -> int: ...

    def week_day(self, year: YearArg, month: Optional[int] = None, day: Optional[int] = None) -> bool: ...

    def days_in_year(self, year: YearArg) -> int: ...

    def epoch(self, year: YearArg) -> str: ...

    def format_year(self, year: YearArg) -> str: ...

    def compare(self, a: CalendarDate, b: CalendarDate) -> int: ...

    def to_date(self, year: YearArg, month: Optional[int] = None, day: Optional[int] = None) -> date: ...

    def from_date(self, d: date) -> CalendarDate: ...

    def format_date(self, date: Optional[CalendarDate], fmt: Optional[str] = None,
                    settings: Optional[Mapping[str, Any]] = None) -> str: ...

    def extra_info(self, year: YearArg, month: Optional[int] = None, day: Optional[int] = None) -> Dict[str, Any]: ...
