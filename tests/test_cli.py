# tests/test_cli.py

import pytest

from calendrics.cli import main


def run(capsys, *argv):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


def test_list(capsys):
    rc, out, _ = run(capsys, "list")
    assert rc == 0
    assert out.split() == ["gregorian"]


def test_format(capsys):
    rc, out, _ = run(capsys, "format", "2024-03-05", "--format", "dd MM yyyy")
    assert rc == 0
    assert out.strip() == "05 March 2024"


def test_format_default_and_language(capsys):
    assert run(capsys, "format", "2024-03-05")[1].strip() == "03/05/2024"
    assert run(capsys, "format", "2024-03-05", "--language", "arabic")[1].strip() == "٠٥/٠٣/٢٠٢٤"


def test_add(capsys):
    rc, out, _ = run(capsys, "add", "2024-01-31", "1", "m")
    assert rc == 0
    assert out.strip() == "02/29/2024"
    assert run(capsys, "add", "2024-03-05", "-1", "w", "--format", "yyyy-mm-dd")[1].strip() == "2024-02-27"


def test_set(capsys):
    rc, out, _ = run(capsys, "set", "2024-03-31", "2", "m", "--format", "yyyy-mm-dd")
    assert rc == 0
    assert out.strip() == "2024-02-29"


def test_bce_dates(capsys):
    rc, out, _ = run(capsys, "add", "-1-12-31", "1", "d", "--format", "yyyy-mm-dd E")
    assert rc == 0
    assert out.strip() == "1-01-01 CE"
    assert run(capsys, "format", "-44-03-15", "--format", "d MM YYYY E")[1].strip() == "15 March -0044 BCE"


def test_jd_round_trip(capsys):
    assert run(capsys, "jd", "2000-01-01")[1].strip() == "2451544.5"
    assert run(capsys, "from-jd", "2451544.5", "--format", "yyyy-mm-dd")[1].strip() == "2000-01-01"


def test_date_shortcut_runs_info(capsys):
    rc, out, _ = run(capsys, "2024-03-05")
    assert rc == 0
    assert "Tuesday, March 5, 2024 CE" in out
    assert "65 / 366" in out
    assert "2460374.5" in out


def test_invalid_date_is_reported(capsys):
    rc, out, err = run(capsys, "format", "2023-02-30")
    assert rc == 2
    assert out == ""
    assert "Invalid Gregorian date" in err


def test_unknown_calendar_is_reported(capsys):
    rc, _, err = run(capsys, "jd", "2024-03-05", "--calendar", "mayan")
    assert rc == 2
    assert "Calendar mayan not found" in err


def test_missing_date(capsys):
    with pytest.raises(SystemExit):
        main(["format"])


def test_month_grid(capsys):
    rc, out, _ = run(capsys, "month", "2024", "2")
    assert rc == 0
    lines = out.splitlines()
    assert lines[0] == "Gregorian  February 2024 CE"
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    # 1 February 2024 was a Thursday
    assert lines[3].split()[0] == "1"
    assert "29" in out and "#60" in out


def test_month_grid_starts_on_locale_first_day(capsys):
    rc, out, _ = run(capsys, "month", "2024", "2", "--language", "arabic")
    assert rc == 0
    header = out.splitlines()[1].split()
    assert header[0] == "سبت"
