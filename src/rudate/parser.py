"""
Разбор дат, записанных по-русски, в формат 'YYYY-MM-DD'.

Понимает:
  31.12.2011г.
  31.12.2011 г.
  «23»   января  2011
  « 23 » января  2011
  "23"   января  2011
   23    янв.    2011
Возвращает None, если дату распознать не удалось.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Optional, Union

from .months import MONTH_PREFIXES

log = logging.getLogger(__name__)

NUMERIC_RE = re.compile(r"([0-9]{2})\.([0-9]{2})\.([0-9]{4})")
WORDED_RE = re.compile(r"[«\"]?\s*([0-9]+)\s*[»\"]?\s*(\S+)\s*([0-9]{4})")
MONTH_PREFIX_RE = re.compile(r"^(" + "|".join(MONTH_PREFIXES) + ")", re.IGNORECASE)


def _civil_date(year: str, month: Union[str, int], day: str) -> Optional[date]:
    try:
        return date(int(year), int(month), int(day))
    except (ValueError, OverflowError):
        return None


def month_from_word(word: str) -> Optional[int]:
    """Month number for a Russian month word or abbreviation ('янв.', 'Июня')."""
    m = MONTH_PREFIX_RE.match(word.strip())
    if not m:
        return None
    return MONTH_PREFIXES.index(m.group(1).lower()) + 1


def parse_date(text: Optional[str]) -> Optional[date]:
    if not text:
        return None

    # dd.mm.yyyy: если нашли, дальше не ищем
    m = NUMERIC_RE.search(text)
    if m:
        d = _civil_date(m.group(3), m.group(2), m.group(1))
        if d is None:
            log.debug("invalid calendar date in %r", text)
        return d

    # «23» января 2011
    m = WORDED_RE.search(text)
    if not m:
        log.debug("no date found in %r", text)
        return None
    month = month_from_word(m.group(2))
    if month is None:
        log.debug("unknown month %r in %r", m.group(2), text)
        return None
    d = _civil_date(m.group(3), month, m.group(1))
    if d is None:
        log.debug("invalid calendar date in %r", text)
    return d


def parse(text: Optional[str]) -> Optional[str]:
    """Return the date found in *text* as 'YYYY-MM-DD', or None."""
    d = parse_date(text)
    return d.isoformat() if d else None
