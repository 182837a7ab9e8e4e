"""rudate settings: defaults, then a YAML file, then environment variables."""

from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import yaml

from .errors import ConfigError
from .formatter import locale_is_russian

log = logging.getLogger(__name__)

CONFIG_ENV = "RUDATE_CONFIG"
RUSSIAN_MONTHS_ENV = "RUDATE_RUSSIAN_MONTHS"
LOG_LEVEL_ENV = "RUDATE_LOG_LEVEL"

_SWITCH_VALUES = {
    "auto": "auto",
    "on": "on", "true": "on", "yes": "on", "1": "on",
    "off": "off", "false": "off", "no": "off", "0": "off",
}


def _switch(value: Any, source: str) -> str:
    key = str(value).strip().lower()
    if key not in _SWITCH_VALUES:
        raise ConfigError(f"{source}: russian_months must be auto/on/off, got {value!r}")
    return _SWITCH_VALUES[key]


def _log_level(value: Any, source: str) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{source}: unknown log level {value!r}")
    return level


@dataclass
class Settings:
    russian_months: str = "auto"
    log_level: str = "INFO"

    def use_russian_months(self) -> bool:
        """'auto' is resolved through the locale probe."""
        if self.russian_months == "auto":
            return locale_is_russian()
        return self.russian_months == "on"


def _load_yaml(path: pathlib.Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return data


def load_settings(
    path: Optional[Union[str, os.PathLike]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    env = os.environ if environ is None else environ
    settings = Settings()

    path = path or env.get(CONFIG_ENV)
    if path:
        path = pathlib.Path(path)
        data = _load_yaml(path)
        for key in data:
            if key not in ("russian_months", "log_level"):
                log.warning("%s: unknown setting %r ignored", path, key)
        if "russian_months" in data:
            settings.russian_months = _switch(data["russian_months"], str(path))
        if "log_level" in data:
            settings.log_level = _log_level(data["log_level"], str(path))

    if env.get(RUSSIAN_MONTHS_ENV):
        settings.russian_months = _switch(env[RUSSIAN_MONTHS_ENV], RUSSIAN_MONTHS_ENV)
    if env.get(LOG_LEVEL_ENV):
        settings.log_level = _log_level(env[LOG_LEVEL_ENV], LOG_LEVEL_ENV)
    return settings
