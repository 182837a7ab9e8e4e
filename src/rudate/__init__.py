"""Russian dates: strftime with declined month names, parsing and period descriptions."""

from .core import Rudate
from .errors import ConfigError, InvalidDateError, InvalidPeriodError, RudateError
from .months import MONTHS_GENITIVE, MONTHS_NOMINATIVE


def strftime(template, instant=None):
    return Rudate.instance().strftime(template, instant)


def parse(text):
    return Rudate.instance().parse(text)


def period(start, end):
    return Rudate.instance().period(start, end)


__all__ = [
    "Rudate",
    "RudateError",
    "InvalidDateError",
    "InvalidPeriodError",
    "ConfigError",
    "MONTHS_GENITIVE",
    "MONTHS_NOMINATIVE",
    "strftime",
    "parse",
    "period",
]
