from __future__ import annotations

from typing import Any, List, Optional, Union

from .core.engine import CalendarFactory, CalendarRegistry
from .core.types import CalendarDate
from .engines.base import BaseCalendar

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def calendar(name: Optional[str] = None, language: Optional[str] = None) -> BaseCalendar:
    """Cached calendar instance, e.g. calendar("gregorian", "arabic")."""
    return _reg().get(name, language)

def list_calendars() -> List[str]:
    return _reg().list()

def register_calendar(name: str, factory: CalendarFactory, *, overwrite: bool = False) -> None:
    _reg().register(name, factory, overwrite=overwrite)

def set_language(language: str) -> None:
    _reg().set_language(language)

def new_date(
    year: Any = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    calendar: Union[str, BaseCalendar, None] = None,
    language: Optional[str] = None,
) -> CalendarDate:
    """
    Create a date; today if no fields are given.

    ``calendar`` may be a name, an instance or None for the default calendar.
    A CalendarDate passed as ``year`` is copied within its own calendar.
    """
    if isinstance(year, CalendarDate):
        cal = year.calendar
    elif isinstance(calendar, BaseCalendar):
        cal = calendar
    else:
        cal = _reg().get(calendar, language)
    return cal.new_date(year, month, day)
