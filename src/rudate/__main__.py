import argparse
import locale
import logging
import sys

from dateutil.parser import isoparse

from .config import load_settings
from .core import Rudate
from .errors import RudateError
from .formatter import locale_is_russian

log = logging.getLogger("rudate")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rudate", description="Русские даты: форматирование, разбор, периоды")
    p.add_argument("--config", default=None, help="YAML с настройками (по умолчанию $RUDATE_CONFIG)")
    p.add_argument("--debug", action="store_true", help="Подробный лог")
    sub = p.add_subparsers(dest="cmd", required=True)

    f = sub.add_parser("format", help="strftime с {месяц}/{месяца}")
    f.add_argument("template", help="Напр.: '%%e {месяца} %%Y'")
    when = f.add_mutually_exclusive_group()
    when.add_argument("--date", default=None, help="Дата/время ISO, напр. 2016-01-01 или 2016-01-01T10:00")
    when.add_argument("--timestamp", type=float, default=None, help="POSIX timestamp")
    lang = f.add_mutually_exclusive_group()
    lang.add_argument("--russian", dest="russian", action="store_true", default=None)
    lang.add_argument("--no-russian", dest="russian", action="store_false", default=None)

    ps = sub.add_parser("parse", help="Русская дата -> YYYY-MM-DD")
    ps.add_argument("text", nargs="+")

    pr = sub.add_parser("period", help="Описание периода между двумя датами YYYY-MM-DD")
    pr.add_argument("start")
    pr.add_argument("end")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # LC_TIME из окружения (LANG/LC_ALL), иначе проба локали всегда видит "C"
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        log.debug("setlocale(LC_TIME) failed: %s", e)
    locale_is_russian.cache_clear()

    try:
        settings = load_settings(args.config)
    except RudateError as e:
        log.error("CONFIG %s", e)
        return 2
    if not args.debug:
        logging.getLogger().setLevel(settings.log_level)

    if args.cmd == "format":
        use_russian = args.russian if args.russian is not None else settings.use_russian_months()
        instant = args.timestamp
        if args.date:
            try:
                instant = isoparse(args.date)
            except ValueError as e:
                log.error("Bad --date %r: %s", args.date, e)
                return 2
        try:
            print(Rudate(use_russian).strftime(args.template, instant))
        except RudateError as e:
            log.error("%s", e)
            return 2
        return 0

    rd = Rudate(settings.use_russian_months())
    if args.cmd == "parse":
        text = " ".join(args.text)
        result = rd.parse(text)
        if result is None:
            log.error("Не удалось разобрать дату: %r", text)
            return 1
        print(result)
        return 0

    try:
        print(rd.period(args.start, args.end))
    except RudateError as e:
        log.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
