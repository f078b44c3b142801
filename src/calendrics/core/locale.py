"""
calendrics.core.locale
----------------------
Localisation tables: per-language month/day names, date formats, digit
glyphs and error-message templates, plus selection and templating helpers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple, TypeVar, Union

from .errors import MissingLocaleError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TAGS = ("{0}", "{1}", "{2}", "{3}", "{4}")


@dataclass(frozen=True)
class RegionalOptions:
    """Names and formats for one calendar in one language.

    Day names start from Sunday. ``digits`` is the glyph for each of 0..9,
    used only when ``local_numbers`` is set.
    """
    epochs: Tuple[str, str]
    month_names: Tuple[str, ...]
    month_names_short: Tuple[str, ...]
    day_names: Tuple[str, ...]
    day_names_short: Tuple[str, ...]
    digits: Optional[Tuple[str, ...]] = None
    local_numbers: bool = False
    date_format: str = "mm/dd/yyyy"
    first_day: int = 0

    def __post_init__(self) -> None:
        if len(self.epochs) != 2:
            raise ValueError("epochs must hold exactly two designators")
        if not (self.month_names and self.month_names_short and self.day_names and self.day_names_short):
            raise ValueError("name tables must not be empty")
        if self.digits is not None and len(self.digits) != 10:
            raise ValueError("digits must hold exactly ten glyphs")
        if not (0 <= self.first_day < len(self.day_names)):
            raise ValueError("first_day must index day_names")


@dataclass(frozen=True)
class Messages:
    """Error-message templates with {0}..{4} placeholders."""
    invalid_calendar: str
    invalid_date: str
    invalid_month: str
    invalid_year: str
    invalid_arguments: str
    different_calendars: str
    missing_regional_options: str

    def template(self, key: str) -> str:
        table = {
            "invalid_calendar": self.invalid_calendar,
            "invalid_date": self.invalid_date,
            "invalid_month": self.invalid_month,
            "invalid_year": self.invalid_year,
            "invalid_arguments": self.invalid_arguments,
            "different_calendars": self.different_calendars,
            "missing_regional_options": self.missing_regional_options,
        }
        return table[key]


MESSAGES: Mapping[str, Messages] = {
    "english": Messages(
        invalid_calendar="Calendar {0} not found",
        invalid_date="Invalid {0} date",
        invalid_month="Invalid {0} month",
        invalid_year="Invalid {0} year",
        invalid_arguments="Invalid arguments",
        different_calendars="Cannot mix {0} and {1} dates",
        missing_regional_options="Regional Options is missing from {0}",
    ),
}


def replace_tags(text: Optional[str], arguments: Union[str, Sequence[str]] = ()) -> str:
    """
    Substitute {0}..{4} in ``text`` with ``arguments``.

    A plain string counts as a single argument. Placeholders without a
    matching argument are left as they are.
    """
    if not text:
        return ""
    if isinstance(arguments, str):
        arguments = (arguments,)
    for tag, value in zip(_TAGS, arguments):
        text = text.replace(tag, str(value))
    return text


def select_options(options: Mapping[str, T], language: Optional[str], owner: str) -> T:
    """
    Pick the entry for ``language``, or the first entry if it is missing.

    Raises MissingLocaleError when ``options`` is empty.
    """
    if language is not None and language in options:
        return options[language]
    for first in options:
        if language is not None:
            logger.debug("No %r localisation for %s, falling back to %r", language, owner, first)
        return options[first]
    template = next(iter(MESSAGES.values())).missing_regional_options
    raise MissingLocaleError(replace_tags(template, owner), owner)


def resolve_language(options: Mapping[str, object], language: Optional[str]) -> Optional[str]:
    """The language code that select_options would use."""
    if language is not None and language in options:
        return language
    return next(iter(options), None)
