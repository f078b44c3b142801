"""
calendrics.engines.gregorian
----------------------------
Proleptic Gregorian calendar without a year zero (1 BCE is followed by 1 CE).
Julian Day conversion follows Jean Meeus, "Astronomical Algorithms", 1991.
"""

from __future__ import annotations

import math
from datetime import date as _date
from typing import Any, Optional, Tuple

from ..core.errors import InvalidDateError
from ..core.locale import RegionalOptions
from ..core.time import date_to_ymd, ymd_to_date
from ..core.types import CalendarDate
from .base import BaseCalendar

DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

REGIONAL_OPTIONS = {
    "english": RegionalOptions(
        epochs=("BCE", "CE"),
        month_names=("January", "February", "March", "April", "May", "June",
                     "July", "August", "September", "October", "November", "December"),
        month_names_short=("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        day_names=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        day_names_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        digits=None,
        local_numbers=False,
        date_format="mm/dd/yyyy",
        first_day=0,
    ),
    "arabic": RegionalOptions(
        epochs=("ق.م", "م"),
        month_names=("يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
                     "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"),
        month_names_short=("يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
                           "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"),
        day_names=("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"),
        day_names_short=("أحد", "اثنين", "ثلاثاء", "أربعاء", "خميس", "جمعة", "سبت"),
        digits=("٠", "١", "٢", "٣", "٤", "٥", "٦", "٧", "٨", "٩"),
        local_numbers=True,
        date_format="dd/mm/yyyy",
        first_day=6,
    ),
}


class GregorianCalendar(BaseCalendar):
    name = "Gregorian"
    has_year_zero = False
    min_month = 1
    first_month = 1
    min_day = 1
    regional_options = REGIONAL_OPTIONS

    # Julian Day of 1 January 0001 CE
    jd_epoch = 1721425.5

    def _leap_year(self, year: int) -> bool:
        year = year + (1 if year < 0 else 0)  # no year zero
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def _days_in_month(self, year: int, month: int) -> int:
        return DAYS_PER_MONTH[month - 1] + (1 if month == 2 and self._leap_year(year) else 0)

    def _week_of_year(self, year: int, month: int, day: int) -> int:
        # ISO 8601: the week belongs to the year holding its Thursday
        jd = self._to_jd(year, month, day)
        jd += 4 - (self._day_of_week(year, month, day) or 7)
        thursday = self._from_jd(jd)
        return (self._day_of_year(*thursday) - 1) // 7 + 1

    def _to_jd(self, year: int, month: int, day: int) -> float:
        if year < 0:
            year += 1  # no year zero
        if month < 3:
            month += 12
            year -= 1
        a = math.floor(year / 100)
        b = 2 - a + math.floor(a / 4)
        return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5

    def _from_jd(self, jd: float) -> Tuple[int, int, int]:
        z = math.floor(jd + 0.5)
        a = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + a - math.floor(a / 4)
        b = a + 1524
        c = math.floor((b - 122.1) / 365.25)
        d = math.floor(365.25 * c)
        e = math.floor((b - d) / 30.6001)
        day = b - d - math.floor(e * 30.6001)
        month = e - (13 if e > 13.5 else 1)
        year = c - (4716 if month > 2.5 else 4715)
        if year <= 0:
            year -= 1  # no year zero
        return year, month, day

    def to_date(self, year: Any, month: Optional[int] = None, day: Optional[int] = None) -> _date:
        date = self.validate(year, month, day, InvalidDateError)
        return ymd_to_date(date.year, date.month, date.day)

    def from_date(self, d: _date) -> CalendarDate:
        return self.new_date(*date_to_ymd(d))
