"""
calendrics.engines.factory
--------------------------
The closed set of calendar variants, by name.
"""

from __future__ import annotations
from typing import Dict, Optional, Type

from ..core.errors import InvalidCalendarError
from ..core.locale import MESSAGES, Messages, replace_tags
from .base import BaseCalendar
from .interfaces import CalendarProtocol
from .gregorian import GregorianCalendar

CALENDAR_CLASSES: Dict[str, Type[BaseCalendar]] = {
    "gregorian": GregorianCalendar,
}


def make_calendar(name: str, language: Optional[str] = None, messages: Optional[Messages] = None) -> CalendarProtocol:
    """Build a fresh (uncached) calendar instance."""
    cls = CALENDAR_CLASSES.get(name.lower())
    if cls is None:
        template = (messages or MESSAGES["english"]).invalid_calendar
        raise InvalidCalendarError(replace_tags(template, name), name)
    return cls(language, messages)
