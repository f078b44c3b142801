from __future__ import annotations
from datetime import date
from typing import Tuple

Ymd = Tuple[int, int, int]

# Julian Day of the Unix epoch, 1970-01-01 00:00 UTC
UNIX_EPOCH = 2440587.5
SECS_PER_DAY = 86400

# Julian Day of 0001-01-01 00:00, origin of 100ns ticks
TICKS_EPOCH = 1721425.5
TICKS_PER_DAY = 864000000000


def date_to_ymd(d: date) -> Ymd:
    """Gregorian triple of a platform date."""
    return d.year, d.month, d.day


def ymd_to_date(year: int, month: int, day: int) -> date:
    """Platform date from a Gregorian triple (years 1..9999 only)."""
    return date(year, month, day)


def to_jdn(year: int, month: int, day: int) -> int:
    """Civil Julian Day Number of a Gregorian date (astronomical year numbering)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> Ymd:
    """Gregorian date of a civil Julian Day Number; inverse of to_jdn."""
    # count from 1 March 4801 BCE so leap days fall at the end of each year
    cycles, rest = divmod(4 * (jdn + 32044) + 3, 146097)
    years, rest = divmod(4 * (rest // 4) + 3, 1461)
    m, rest = divmod(5 * (rest // 4) + 2, 153)
    day = rest // 5 + 1
    carry = m // 10
    return 100 * cycles + years - 4800 + carry, m + 3 - 12 * carry, day
