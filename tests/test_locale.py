# tests/test_locale.py

import logging

import pytest

from calendrics import (
    DifferentCalendarsError,
    GregorianCalendar,
    InvalidDateError,
    Messages,
    MissingLocaleError,
    RegionalOptions,
)
from calendrics.core.locale import MESSAGES, replace_tags, resolve_language, select_options
from calendrics.engines.gregorian import REGIONAL_OPTIONS


def _options(**kw):
    base = dict(
        epochs=("BC", "AD"),
        month_names=("One", "Two"),
        month_names_short=("1", "2"),
        day_names=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        day_names_short=("S", "M", "T", "W", "T", "F", "S"),
    )
    base.update(kw)
    return RegionalOptions(**base)


@pytest.mark.parametrize("text, args, expected", [
    ("Invalid {0} date", "Gregorian", "Invalid Gregorian date"),
    ("Cannot mix {0} and {1} dates", ["Gregorian", "Fiscal"], "Cannot mix Gregorian and Fiscal dates"),
    ("{0} {1}", "a", "a {1}"),
    ("{0}{0}", ("x",), "xx"),
    ("no tags", ("x", "y"), "no tags"),
    ("", "x", ""),
    (None, "x", ""),
])
def test_replace_tags(text, args, expected):
    assert replace_tags(text, args) == expected


def test_select_options_exact_and_fallback(caplog):
    opts = {"a": 1, "b": 2}
    assert select_options(opts, "b", "owner") == 2
    assert select_options(opts, None, "owner") == 1

    caplog.set_level(logging.DEBUG, logger="calendrics.core.locale")
    assert select_options(opts, "zz", "owner") == 1
    assert "falling back" in caplog.text


def test_select_options_empty():
    with pytest.raises(MissingLocaleError) as ei:
        select_options({}, "english", "Widget")
    assert str(ei.value) == "Regional Options is missing from Widget"
    assert isinstance(ei.value, LookupError)


def test_resolve_language():
    assert resolve_language(REGIONAL_OPTIONS, "arabic") == "arabic"
    assert resolve_language(REGIONAL_OPTIONS, "klingon") == "english"
    assert resolve_language(REGIONAL_OPTIONS, None) == "english"
    assert resolve_language({}, "english") is None


def test_unknown_language_falls_back_to_first():
    cal = GregorianCalendar("klingon")
    assert cal.language == "english"
    assert cal.regional is REGIONAL_OPTIONS["english"]
    assert cal.messages is MESSAGES["english"]


def test_calendar_without_regional_options():
    class Bare(GregorianCalendar):
        name = "Bare"
        regional_options = {}

    with pytest.raises(MissingLocaleError) as ei:
        Bare()
    assert "Bare" in str(ei.value)


def test_regional_options_validation():
    assert _options().date_format == "mm/dd/yyyy"
    with pytest.raises(ValueError):
        _options(epochs=("BC",))
    with pytest.raises(ValueError):
        _options(month_names=())
    with pytest.raises(ValueError):
        _options(digits=tuple("012345678"))
    with pytest.raises(ValueError):
        _options(first_day=7)


def test_regional_options_are_frozen():
    with pytest.raises(AttributeError):
        REGIONAL_OPTIONS["english"].date_format = "yyyy"


def test_message_templates():
    english = MESSAGES["english"]
    assert english.template("invalid_calendar") == "Calendar {0} not found"
    assert english.template("invalid_arguments") == "Invalid arguments"
    with pytest.raises(KeyError):
        english.template("nope")


def test_custom_messages():
    custom = Messages(
        invalid_calendar="Kalender {0} nicht gefunden",
        invalid_date="Ungültiges {0} Datum",
        invalid_month="Ungültiger {0} Monat",
        invalid_year="Ungültiges {0} Jahr",
        invalid_arguments="Ungültige Argumente",
        different_calendars="{0} und {1} nicht mischbar",
        missing_regional_options="Regionaloptionen fehlen in {0}",
    )
    cal = GregorianCalendar(messages=custom)
    with pytest.raises(InvalidDateError) as ei:
        cal.new_date(2023, 2, 29)
    assert str(ei.value) == "Ungültiges Gregorian Datum"

    err = cal.error(DifferentCalendarsError, "Gregorian", "Fiscal")
    assert str(err) == "Gregorian und Fiscal nicht mischbar"
    assert err.names == ("Gregorian", "Fiscal")


def test_arabic_locale():
    cal = GregorianCalendar("arabic")
    assert cal.language == "arabic"
    assert cal.regional.first_day == 6
    assert cal.regional.date_format == "dd/mm/yyyy"
    assert cal.epoch(2024) == "م"
