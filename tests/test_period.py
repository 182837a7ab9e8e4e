import pathlib
import sys
from datetime import date, datetime

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from rudate import Rudate
from rudate.errors import InvalidDateError, InvalidPeriodError
from rudate.periods import last_day_of_month, to_civil_date


@pytest.fixture
def rd():
    return Rudate(use_russian_months=True)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("2016-01-01", "2016-01-01", "1 января 2016"),
        ("2016-01-01", "2016-01-31", "январь 2016"),
        ("2016-01-01", "2016-01-10", "1 - 10 января 2016"),
        ("2016-01-01", "2016-12-31", "2016 год"),
        ("2016-02-01", "2016-05-05", "1 февраля - 5 мая 2016"),
        ("2016-01-02", "2017-12-31", "2 января 2016 - 31 декабря 2017"),
        ("2016-02-01", "2016-02-29", "февраль 2016"),
        ("2015-02-01", "2015-02-28", "февраль 2015"),
        ("2016-02-01", "2016-02-28", "1 - 28 февраля 2016"),
        ("2016-01-02", "2016-01-31", "2 - 31 января 2016"),
        ("2016-01-01", "2016-12-30", "1 января - 30 декабря 2016"),
        ("2016-12-01", "2016-12-31", "декабрь 2016"),
        ("2015-01-01", "2016-12-31", "1 января 2015 - 31 декабря 2016"),
    ],
)
def test_period(rd, start, end, expected):
    assert rd.period(start, end) == expected


def test_period_accepts_date_objects(rd):
    assert rd.period(date(2016, 1, 1), datetime(2016, 1, 10, 23, 59)) == "1 - 10 января 2016"


def test_period_rejects_reversed_range(rd):
    with pytest.raises(InvalidPeriodError):
        rd.period("2016-05-05", "2016-02-01")


@pytest.mark.parametrize(
    "bad", ["2016-02-30", "не дата", "", 20160101, "2016", "2016-01", "20160101", "2016-W01-1"]
)
def test_period_rejects_invalid_dates(rd, bad):
    with pytest.raises(InvalidDateError):
        rd.period(bad, "2016-12-31")


def test_period_without_russian_months_uses_platform_names():
    rd = Rudate(use_russian_months=False)
    assert rd.period("2016-01-01", "2016-01-31") == date(2016, 1, 1).strftime("%B %Y")
    assert rd.period("2016-01-01", "2016-12-31") == "2016 год"


def test_helpers():
    assert to_civil_date(" 2016-03-08 ") == date(2016, 3, 8)
    assert last_day_of_month(date(2016, 2, 10)) == date(2016, 2, 29)
    assert last_day_of_month(date(2016, 4, 30)) == date(2016, 4, 30)


def test_module_level_shortcuts(monkeypatch):
    import rudate

    monkeypatch.setenv("RUDATE_RUSSIAN_MONTHS", "on")
    monkeypatch.delenv("RUDATE_CONFIG", raising=False)
    Rudate.reset_instance()
    try:
        assert Rudate.instance() is Rudate.instance()
        assert rudate.period("2016-01-01", "2016-01-10") == "1 - 10 января 2016"
        assert rudate.parse("23 янв. 2011") == "2011-01-23"
        assert rudate.strftime("{Месяц} %Y", date(2016, 6, 1)) == "Июнь 2016"
    finally:
        Rudate.reset_instance()


def test_period_accepts_iso_datetime_strings(rd):
    assert rd.period("2016-01-01T00:00", "2016-01-10 18:30:00") == "1 - 10 января 2016"
