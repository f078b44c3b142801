from __future__ import annotations
from functools import partial

from calendrics.core.engine import CalendarRegistry
from calendrics.engines.factory import CALENDAR_CLASSES, make_calendar


def build_registry() -> CalendarRegistry:
    factories = {}
    for name in CALENDAR_CLASSES:
        factories[name] = partial(make_calendar, name)
    return CalendarRegistry(factories)
