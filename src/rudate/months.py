"""Russian month names."""

from __future__ import annotations

from .errors import InvalidDateError

MONTHS_GENITIVE = {
    1: "января",
    2: "февраля",
    3: "марта",
    4: "апреля",
    5: "мая",
    6: "июня",
    7: "июля",
    8: "августа",
    9: "сентября",
    10: "октября",
    11: "ноября",
    12: "декабря",
}

MONTHS_NOMINATIVE = {
    1: "январь",
    2: "февраль",
    3: "март",
    4: "апрель",
    5: "май",
    6: "июнь",
    7: "июль",
    8: "август",
    9: "сентябрь",
    10: "октябрь",
    11: "ноябрь",
    12: "декабрь",
}

# Порядок важен: "мар" раньше "м", "ап" раньше "а".
# Номер месяца = позиция в списке + 1.
MONTH_PREFIXES = ("я", "ф", "мар", "ап", "м", "июн", "июл", "а", "с", "о", "н", "д")


def _lookup(table: dict[int, str], month: int) -> str:
    try:
        return table[month]
    except (KeyError, TypeError):
        raise InvalidDateError(f"month out of range: {month!r}") from None


def genitive(month: int) -> str:
    """'января' for 1, 'декабря' for 12."""
    return _lookup(MONTHS_GENITIVE, month)


def nominative(month: int) -> str:
    """'январь' for 1, 'декабрь' for 12."""
    return _lookup(MONTHS_NOMINATIVE, month)
