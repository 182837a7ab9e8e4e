from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from . import formatter, parser, periods
from .config import load_settings


class Rudate:
    """
    Russian date helpers bundled together.

    Instances are cheap and stateless apart from the month switch, so build
    one per configuration or use the shared default from instance().
    """

    _instance: ClassVar[Optional["Rudate"]] = None

    def __init__(self, use_russian_months: Optional[bool] = None):
        # None: решает проба локали
        self.use_russian_months = use_russian_months

    @classmethod
    def instance(cls) -> "Rudate":
        if cls._instance is None:
            cls._instance = cls(load_settings().use_russian_months())
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def strftime(self, template: str, instant: formatter.Instant = None) -> str:
        return formatter.strftime(template, instant, self.use_russian_months)

    def parse(self, text: Optional[str]) -> Optional[str]:
        return parser.parse(text)

    def parse_date(self, text: Optional[str]) -> Optional[date]:
        return parser.parse_date(text)

    def period(self, start: periods.DateLike, end: periods.DateLike) -> str:
        return periods.summarize(start, end, self.strftime)

    def __repr__(self) -> str:
        return f"Rudate(use_russian_months={self.use_russian_months!r})"
