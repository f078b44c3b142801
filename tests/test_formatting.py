# tests/test_formatting.py

import pytest

import calendrics
from calendrics import DifferentCalendarsError, GregorianCalendar
from calendrics.engines.formatting import pad, substitute_digits

ARABIC_DIGITS = ("٠", "١", "٢", "٣", "٤", "٥", "٦", "٧", "٨", "٩")


@pytest.fixture
def greg():
    return GregorianCalendar("english")


@pytest.fixture
def arabic():
    return GregorianCalendar("arabic")


@pytest.mark.parametrize("fmt, expected", [
    ("mm/dd/yyyy", "03/05/2024"),
    ("d/m/yy", "5/3/24"),
    ("dd MM yyyy", "05 March 2024"),
    ("D, M d", "Tue, Mar 5"),
    ("DD", "Tuesday"),
    ("o", "65"),
    ("oo", "065"),
    ("w", "10"),
    ("ww", "10"),
    ("YYYY", "2024"),
    ("E", "CE"),
    ("J", "2460374.5"),
    ("yyyy-mm-dd", "2024-03-05"),
    ("ddd", "05"),
    ("d.m.y", "5.3.24"),
])
def test_tokens(greg, fmt, expected):
    assert greg.new_date(2024, 3, 5).format_date(fmt) == expected


def test_default_format_and_str(greg):
    d = greg.new_date(2024, 3, 5)
    assert d.format_date() == "03/05/2024"
    assert greg.format_date(d) == "03/05/2024"
    assert str(d) == "03/05/2024"


def test_format_none_date(greg):
    assert greg.format_date(None, "yyyy") == ""


def test_short_forms(greg):
    d = greg.new_date(2024, 1, 2)
    assert d.format_date("w ww o oo") == "1 01 2 002"
    assert greg.new_date(2005, 7, 9).format_date("yy") == "05"


def test_negative_years(greg):
    d = greg.new_date(-44, 3, 15)
    assert d.format_date("yyyy") == "-44"
    assert d.format_date("yy") == "44"
    assert d.format_date("YYYY") == "-0044"
    assert d.format_date("d MM yyyy E") == "15 March -44 BCE"


@pytest.mark.parametrize("ymd, fmt, expected", [
    ((1970, 1, 1), "@", "0"),
    ((1970, 1, 2), "@", "86400"),
    ((2000, 1, 1), "@", "946684800"),
    ((1969, 12, 31), "@", "-86400"),
    ((1, 1, 1), "!", "0"),
    ((1970, 1, 1), "!", "621355968000000000"),
    ((2000, 1, 1), "J", "2451544.5"),
])
def test_timestamps(greg, ymd, fmt, expected):
    assert greg.new_date(*ymd).format_date(fmt) == expected


@pytest.mark.parametrize("fmt, expected", [
    ("'Day' d", "Day 5"),
    ("'d'", "d"),
    ("''", "'"),
    ("'It''s' d", "It's 5"),
    ("d 'of' MM", "5 of March"),
    ("'unterminated d", "unterminated d"),
])
def test_literals(greg, fmt, expected):
    assert greg.new_date(2024, 3, 5).format_date(fmt) == expected


def test_settings_override_for_one_call(greg):
    d = greg.new_date(2024, 3, 5)
    names = tuple("ABCDEFGHIJKL")
    assert d.format_date("MM", {"month_names": names}) == "C"
    assert d.format_date("dd", {"digits": ARABIC_DIGITS, "local_numbers": True}) == "٠٥"
    assert d.format_date(settings={"date_format": "yyyy"}) == "2024"
    # None keeps the locale default
    assert d.format_date(settings={"date_format": None}) == "03/05/2024"
    assert d.format_date("MM", {"month_names": None}) == "March"
    assert d.format_date("MM d", {"month_names": None, "local_numbers": True, "digits": ARABIC_DIGITS}) == "March ٥"
    # the calendar's own options are unchanged
    assert d.format_date("MM") == "March"
    assert d.format_date() == "03/05/2024"


def test_local_digits(arabic):
    d = arabic.new_date(2024, 3, 5)
    assert d.format_date() == "٠٥/٠٣/٢٠٢٤"
    assert d.format_date("o") == "٦٥"
    assert d.format_date("MM") == "مارس"
    assert d.format_date("DD") == "الثلاثاء"
    # Julian Day and timestamps always use ASCII digits
    assert d.format_date("J") == "2460374.5"
    assert d.format_date(settings={"local_numbers": False}) == "05/03/2024"


def test_local_digits_keep_sign(arabic):
    assert arabic.new_date(-44, 3, 15).format_date("yyyy") == "-٤٤"
    assert arabic.new_date(-44, 3, 15).format_date("E") == "ق.م"


def test_format_other_calendar_date(greg):
    class Other(GregorianCalendar):
        name = "Other"

    with pytest.raises(DifferentCalendarsError):
        greg.format_date(Other().new_date(2024, 3, 5))


def test_helpers():
    assert pad(5, 2) == "05"
    assert pad(123, 2) == "123"
    assert substitute_digits("12/-3", ARABIC_DIGITS) == "١٢/-٣"


def test_formatting_through_the_api():
    d = calendrics.new_date(2024, 3, 5, calendar="gregorian", language="arabic")
    assert d.format_date("yyyy") == "٢٠٢٤"
