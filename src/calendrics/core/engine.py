from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .errors import InvalidCalendarError
from .locale import MESSAGES, Messages, replace_tags, select_options

logger = logging.getLogger(__name__)

# Builds a calendar for a language code; returns a BaseCalendar.
CalendarFactory = Callable[[Optional[str], Optional[Messages]], object]

DEFAULT_CALENDAR = "gregorian"
DEFAULT_LANGUAGE = "english"


@dataclass
class CalendarRegistry:
    """
    Directory of calendar factories keyed by lower-case name, with a cache
    of built instances per (name, language).
    """
    _factories: Dict[str, CalendarFactory]
    default_language: str = DEFAULT_LANGUAGE
    _instances: Dict[Tuple[str, str], object] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def messages(self) -> Messages:
        return select_options(MESSAGES, self.default_language, "CalendarRegistry")

    def get(self, name: Optional[str] = None, language: Optional[str] = None):
        key = (name or DEFAULT_CALENDAR).lower()
        language = language or self.default_language
        if key not in self._factories:
            raise InvalidCalendarError(replace_tags(self.messages.invalid_calendar, name), name)
        with self._lock:
            cal = self._instances.get((key, language))
            if cal is None:
                logger.debug("Building %s calendar for language %r", key, language)
                cal = self._factories[key](language, self.messages)
                self._instances[(key, language)] = cal
        return cal

    def list(self) -> List[str]:
        return sorted(self._factories.keys())

    def register(self, name: str, factory: CalendarFactory, *, overwrite: bool = False) -> None:
        key = name.lower()
        with self._lock:
            if (not overwrite) and (key in self._factories):
                raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
            self._factories[key] = factory
            for cached in [k for k in self._instances if k[0] == key]:
                del self._instances[cached]
        logger.debug("Registered calendar %r", key)

    def set_language(self, language: str) -> None:
        """Change the default language; cached instances are kept per language."""
        self.default_language = language
