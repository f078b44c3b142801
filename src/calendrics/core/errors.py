from __future__ import annotations

from typing import Tuple


class CalendarsError(Exception):
    """Base error.

    ``names`` holds the arguments substituted into the message template
    (calendar names, the requested calendar, the locale owner).
    """

    key = ""

    def __init__(self, message: str, *names: str):
        super().__init__(message)
        self.names: Tuple[str, ...] = names


class InvalidArgumentsError(CalendarsError, ValueError):
    key = "invalid_arguments"


class InvalidDateError(InvalidArgumentsError):
    key = "invalid_date"


class InvalidMonthError(InvalidArgumentsError):
    key = "invalid_month"


class InvalidYearError(InvalidArgumentsError):
    key = "invalid_year"


class DifferentCalendarsError(CalendarsError, ValueError):
    """Raised when a date from one calendar is handed to another."""
    key = "different_calendars"


class InvalidCalendarError(CalendarsError, LookupError):
    """Raised by the directory for an unknown calendar name."""
    key = "invalid_calendar"


class MissingLocaleError(CalendarsError, LookupError):
    key = "missing_regional_options"
