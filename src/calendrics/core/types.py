from __future__ import annotations
from dataclasses import InitVar, dataclass, field
from datetime import date as _date
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Dict, Literal, Mapping, Optional

from .errors import InvalidDateError

if TYPE_CHECKING:
    from ..engines.interfaces import CalendarProtocol

Period = Literal["y", "m", "w", "d"]


@total_ordering
@dataclass(frozen=True, eq=False)
class CalendarDate:
    """
    A (year, month, day) triple bound to one calendar variant.

    All calendar-specific work is delegated to ``calendar``. Instances are
    immutable: ``date``, ``set`` and ``add`` return new dates.
    Construction validates the triple unless ``check=False`` is passed, which
    the engine does for results that are valid by construction.
    """
    calendar: "CalendarProtocol" = field(repr=False)
    year: int
    month: int
    day: int
    check: InitVar[bool] = True

    def __post_init__(self, check: bool) -> None:
        if check and not self.calendar.is_valid(self.year, self.month, self.day):
            raise self.calendar.error(InvalidDateError, self.calendar.name)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    def new_date(self, year: Any = None, month: Optional[int] = None, day: Optional[int] = None) -> "CalendarDate":
        """A new date in the same calendar; a copy of this one if no fields are given."""
        return self.calendar.new_date(self if year is None else year, month, day)

    def date(self, year: int, month: int, day: int) -> "CalendarDate":
        """This date with all three fields replaced."""
        return self.calendar.new_date(year, month, day)

    def add(self, offset: int, period: Period) -> "CalendarDate":
        return self.calendar.add(self, offset, period)

    def set(self, value: int, period: Period) -> "CalendarDate":
        return self.calendar.set(self, value, period)

    # ---------------------------------------------------------
    # Derived values
    # ---------------------------------------------------------

    def leap_year(self) -> bool:
        return self.calendar.leap_year(self)

    def epoch(self) -> str:
        return self.calendar.epoch(self)

    def format_year(self) -> str:
        return self.calendar.format_year(self)

    def month_of_year(self) -> int:
        return self.calendar.month_of_year(self)

    def week_of_year(self) -> int:
        return self.calendar.week_of_year(self)

    def days_in_year(self) -> int:
        return self.calendar.days_in_year(self)

    def day_of_year(self) -> int:
        return self.calendar.day_of_year(self)

    def days_in_month(self) -> int:
        return self.calendar.days_in_month(self)

    def day_of_week(self) -> int:
        return self.calendar.day_of_week(self)

    def week_day(self) -> bool:
        return self.calendar.week_day(self)

    def extra_info(self) -> Dict[str, Any]:
        return self.calendar.extra_info(self)

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_jd(self) -> float:
        return self.calendar.to_jd(self)

    def from_jd(self, jd: float) -> "CalendarDate":
        return self.calendar.from_jd(jd)

    def to_date(self) -> _date:
        return self.calendar.to_date(self)

    def from_date(self, d: _date) -> "CalendarDate":
        return self.calendar.from_date(d)

    def format_date(self, fmt: Optional[str] = None, settings: Optional[Mapping[str, Any]] = None) -> str:
        return self.calendar.format_date(self, fmt, settings)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def compare_to(self, other: "CalendarDate") -> int:
        """-1, 0 or +1; raises DifferentCalendarsError across calendars."""
        return self.calendar.compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self):
        return (self.calendar.name, self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.format_date()
