"""
Hook rudate's strftime into code that formats datetimes itself.

    format_localized(dt, '%e {месяца} %Y')

    LocalizedDateTime.formatter = Rudate(use_russian_months=True).strftime
    LocalizedDateTime.from_datetime(dt).format_localized('{Месяц} %Y')
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, ClassVar, Optional

from ..core import Rudate

Formatter = Callable[[str, Any], str]


def default_formatter(template: str, instant: Any = None) -> str:
    return Rudate.instance().strftime(template, instant)


def format_localized(value: Any, template: str, formatter: Optional[Formatter] = None) -> str:
    """Pass (template, value) to *formatter* and return its output untouched."""
    formatter = formatter or default_formatter
    return formatter(template, value)


class LocalizedDateTime(datetime):
    """datetime with a pluggable month-aware format_localized()."""

    formatter: ClassVar[Optional[Formatter]] = None

    @classmethod
    def from_datetime(cls, dt: datetime) -> "LocalizedDateTime":
        return cls(
            dt.year, dt.month, dt.day,
            dt.hour, dt.minute, dt.second, dt.microsecond,
            dt.tzinfo, fold=dt.fold,
        )

    def format_localized(self, template: str) -> str:
        return format_localized(self, template, type(self).formatter)
