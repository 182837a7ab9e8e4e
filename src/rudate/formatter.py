"""
strftime с русскими названиями месяцев.

В шаблоне, помимо обычных директив strftime, понимаются конструкции
{Месяц} {месяц} {Месяца} {месяца}:

    strftime('%e {месяца} %Y', datetime(2000, 1, 1))   # '1 января 2000'
    strftime('%e {Месяца} %Y', datetime(2000, 1, 1))   # '1 Января 2000'
    strftime('{Месяц} %Y', datetime(2000, 1, 1))       # 'Январь 2000'
    strftime('{месяц} %Y', datetime(2000, 1, 1))       # 'январь 2000'

Если русские названия выключены, конструкции превращаются в '%B'
и месяц печатается так, как его печатает текущая локаль.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from functools import lru_cache
from typing import Optional, Union

from .errors import InvalidDateError
from .months import genitive, nominative

log = logging.getLogger(__name__)

Instant = Union[datetime, date, int, float, None]

PLACEHOLDER_RE = re.compile(r"\{([Мм])есяц(а?)\}")
FALLBACK_DIRECTIVE = "%B"

# 2000-01-01 10:10:10 по локальному времени
PROBE_INSTANT = datetime(2000, 1, 1, 10, 10, 10)
PROBE_ABBREVIATION = "янв"


def probe_russian_locale() -> bool:
    """Check whether the current LC_TIME prints January as 'янв'."""
    abbr = PROBE_INSTANT.strftime("%b").strip().rstrip(".").lower()
    is_russian = abbr == PROBE_ABBREVIATION
    log.debug("locale probe: %%b=%r russian=%s", abbr, is_russian)
    return is_russian


@lru_cache(maxsize=1)
def locale_is_russian() -> bool:
    return probe_russian_locale()


def to_datetime(instant: Instant = None) -> datetime:
    """Resolve an instant to a naive local datetime; None means now."""
    if instant is None:
        return datetime.now()
    if isinstance(instant, datetime):
        return instant
    if isinstance(instant, date):
        return datetime(instant.year, instant.month, instant.day)
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        try:
            return datetime.fromtimestamp(instant)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidDateError(f"timestamp out of range: {instant!r}") from e
    raise InvalidDateError(f"unsupported instant: {instant!r}")


def expand_month_placeholders(template: str, month: int, use_russian_months: bool) -> str:
    if use_russian_months:
        name_genitive, name_nominative = genitive(month), nominative(month)
    else:
        name_genitive = name_nominative = FALLBACK_DIRECTIVE

    def replace(m: re.Match) -> str:
        name = name_genitive if m.group(2) == "а" else name_nominative
        if m.group(1) == "М":
            return name[:1].upper() + name[1:]
        return name

    return PLACEHOLDER_RE.sub(replace, template)


def strftime(template: str, instant: Instant = None, use_russian_months: Optional[bool] = None) -> str:
    """
    Format *instant* with *template*, expanding the month placeholders first.

    use_russian_months=None falls back to the locale probe, resolved once
    per process.
    """
    dt = to_datetime(instant)
    if use_russian_months is None:
        use_russian_months = locale_is_russian()
    expanded = expand_month_placeholders(template, dt.month, use_russian_months)
    return dt.strftime(expanded).strip()
