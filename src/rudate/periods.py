"""
Human-readable description of a period between two dates.

    2016-01-01 | 2016-01-01   ->  1 января 2016
    2016-01-01 | 2016-01-31   ->  январь 2016
    2016-01-01 | 2016-01-10   ->  1 - 10 января 2016
    2016-01-01 | 2016-12-31   ->  2016 год
    2016-02-01 | 2016-05-05   ->  1 февраля - 5 мая 2016
    2016-01-02 | 2017-12-31   ->  2 января 2016 - 31 декабря 2017
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Callable, Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from .errors import InvalidDateError, InvalidPeriodError

DateLike = Union[str, date, datetime]

DAY_MONTH_YEAR = "%e {месяца} %Y"
DAY_MONTH = "%e {месяца}"
DAY = "%e"
MONTH_YEAR = "{месяц} %Y"

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}(?:[T ].*)?")


def to_civil_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # только YYYY-MM-DD, без "2016", "2016-01", "20160101"
        if not ISO_DATE_RE.fullmatch(text):
            raise InvalidDateError(f"expected YYYY-MM-DD, got {value!r}")
        try:
            return isoparse(text).date()
        except (ValueError, OverflowError) as e:
            raise InvalidDateError(f"invalid date {value!r}: {e}") from e
    raise InvalidDateError(f"unsupported date value: {value!r}")


def last_day_of_month(d: date) -> date:
    return d + relativedelta(day=31)


def summarize(start: DateLike, end: DateLike, strftime: Callable[[str, date], str]) -> str:
    """Describe the period [start, end] using *strftime* for rendering."""
    start_day = to_civil_date(start)
    end_day = to_civil_date(end)
    if start_day > end_day:
        raise InvalidPeriodError(f"period starts after it ends: {start_day} > {end_day}")

    # 1. один и тот же день
    if start_day == end_day:
        return strftime(DAY_MONTH_YEAR, start_day)

    # 2. один месяц
    if (start_day.year, start_day.month) == (end_day.year, end_day.month):
        if start_day.day == 1 and end_day == last_day_of_month(end_day):
            return strftime(MONTH_YEAR, start_day)
        return f"{strftime(DAY, start_day)} - {strftime(DAY_MONTH_YEAR, end_day)}"

    # 3. один год
    if start_day.year == end_day.year:
        if (start_day.month, start_day.day) == (1, 1) and (end_day.month, end_day.day) == (12, 31):
            return f"{start_day.year} год"
        return f"{strftime(DAY_MONTH, start_day)} - {strftime(DAY_MONTH_YEAR, end_day)}"

    # 4. разные годы
    return f"{strftime(DAY_MONTH_YEAR, start_day)} - {strftime(DAY_MONTH_YEAR, end_day)}"
