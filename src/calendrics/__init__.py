"""calendrics public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    calendar,
    new_date,
    list_calendars,
    register_calendar,
    set_language,
)
from .core.errors import (
    CalendarsError,
    DifferentCalendarsError,
    InvalidArgumentsError,
    InvalidCalendarError,
    InvalidDateError,
    InvalidMonthError,
    InvalidYearError,
    MissingLocaleError,
)
from .core.locale import Messages, RegionalOptions
from .core.types import CalendarDate
from .engines.base import BaseCalendar
from .engines.gregorian import GregorianCalendar

__all__ = [
    "calendar",
    "new_date",
    "list_calendars",
    "register_calendar",
    "set_language",
    "CalendarDate",
    "BaseCalendar",
    "GregorianCalendar",
    "RegionalOptions",
    "Messages",
    "CalendarsError",
    "DifferentCalendarsError",
    "InvalidArgumentsError",
    "InvalidCalendarError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidYearError",
    "MissingLocaleError",
]
