import pathlib
import sys
from datetime import date, datetime

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from rudate import Rudate
from rudate.adapters.localized import LocalizedDateTime, format_localized


@pytest.fixture(autouse=True)
def fresh_instance():
    Rudate.reset_instance()
    yield
    Rudate.reset_instance()
    LocalizedDateTime.formatter = None


def test_format_localized_forwards_arguments_verbatim():
    calls = []

    def fake(template, instant):
        calls.append((template, instant))
        return "  как есть  "

    value = datetime(2016, 1, 1)
    assert format_localized(value, "%e {месяца}", fake) == "  как есть  "
    assert calls == [("%e {месяца}", value)]


def test_format_localized_with_rudate_formatter():
    rd = Rudate(use_russian_months=True)
    assert format_localized(date(2016, 5, 9), "%e {месяца} %Y", rd.strftime) == "9 мая 2016"


def test_default_formatter_uses_shared_instance(monkeypatch):
    monkeypatch.setenv("RUDATE_RUSSIAN_MONTHS", "on")
    monkeypatch.delenv("RUDATE_CONFIG", raising=False)
    assert format_localized(datetime(2016, 11, 7), "{Месяц} %Y") == "Ноябрь 2016"


def test_localized_datetime_strategy():
    LocalizedDateTime.formatter = Rudate(use_russian_months=True).strftime
    dt = LocalizedDateTime.from_datetime(datetime(2016, 2, 3, 4, 5, 6))

    assert isinstance(dt, datetime)
    assert dt == datetime(2016, 2, 3, 4, 5, 6)
    assert dt.format_localized("%e {месяца} %Y, %H:%M") == "3 февраля 2016, 04:05"
