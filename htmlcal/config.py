# htmlcal/config.py
from __future__ import annotations

import datetime as dt
import json
import os
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from pendulum.locales.locale import Locale

from .errors import ConfigError
from .util.dates import MONDAY, SUNDAY, sunday_index
from .util.tz import TzInfo, normalize_tz_name, resolve_tz

WEEKDAY_NAMES = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")

# Accepted spellings in config files, mapped to Config field names.
_ALIASES = {
    "starting_day": ("starting_day", "startingDay", "week_start"),
    "locale": ("locale",),
    "timezone": ("timezone", "tz"),
    "table_classes": ("table_classes", "tableClasses"),
    "time_interval": ("time_interval", "timeInterval"),
    "start_time": ("start_time", "startTime"),
    "end_time": ("end_time", "endTime"),
    "hidden_days": ("hidden_days", "hiddenDays"),
    "hidden_dates": ("hidden_dates", "hiddenDates"),
}


def _weekday_index(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 6:
        return value
    name = str(value or "").strip().lower()
    for i, full in enumerate(WEEKDAY_NAMES):
        if name == full or (len(name) >= 3 and full.startswith(name)):
            return i
    raise ConfigError(f"Unknown weekday: {value!r}")


def _date_value(value: Any) -> dt.date:
    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        return value
    try:
        return dt.datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError as ex:
        raise ConfigError(f"Invalid hidden date (expected YYYY-MM-DD): {value!r}") from ex


@dataclass(frozen=True)
class Config:
    """Rendering defaults shared by every view.

    starting_day: 0 = Sunday, 1 = Monday.
    hidden_days: Sunday-based weekday indices (names are accepted and converted).
    hidden_dates: individual dates to leave out of the grid.
    """

    starting_day: int = MONDAY
    locale: str = "en"
    timezone: str = "UTC"
    table_classes: str = ""
    time_interval: int = 60
    start_time: str = "08:00"
    end_time: str = "20:00"
    hidden_days: Tuple[int, ...] = ()
    hidden_dates: FrozenSet[dt.date] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.starting_day not in (SUNDAY, MONDAY) or isinstance(self.starting_day, bool):
            raise ConfigError(f"starting_day must be 0 (Sunday) or 1 (Monday), got {self.starting_day!r}")
        try:
            Locale.load(self.locale)
        except ValueError as ex:
            raise ConfigError(f"Unsupported locale: {self.locale!r}") from ex

        object.__setattr__(self, "timezone", normalize_tz_name(self.timezone))
        try:
            resolve_tz(self.timezone)
        except ValueError as ex:
            raise ConfigError(str(ex)) from ex

        days = tuple(sorted({_weekday_index(d) for d in self.hidden_days}))
        object.__setattr__(self, "hidden_days", days)
        object.__setattr__(self, "hidden_dates", frozenset(_date_value(d) for d in self.hidden_dates))
        object.__setattr__(self, "table_classes", " ".join(str(self.table_classes or "").split()))

    @cached_property
    def tzinfo(self) -> TzInfo:
        return resolve_tz(self.timezone)

    def day_should_be_hidden(self, day: dt.date) -> bool:
        if sunday_index(day) in self.hidden_days:
            return True
        return dt.date(day.year, day.month, day.day) in self.hidden_dates

    def with_overrides(self, **changes: Any) -> "Config":
        clean = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **clean) if clean else self


def config_from_mapping(raw: Mapping[str, Any]) -> Config:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"config must be a JSON object, got {type(raw).__name__}")

    kwargs: Dict[str, Any] = {}
    for field_name, keys in _ALIASES.items():
        for k in keys:
            if k in raw and raw[k] is not None:
                kwargs[field_name] = raw[k]
                break

    for list_field in ("hidden_days", "hidden_dates"):
        if list_field in kwargs:
            v = kwargs[list_field]
            if not isinstance(v, (list, tuple)):
                raise ConfigError(f"{list_field} must be a list")
            kwargs[list_field] = tuple(v)

    if "starting_day" in kwargs and isinstance(kwargs["starting_day"], str):
        kwargs["starting_day"] = _weekday_index(kwargs["starting_day"])

    return Config(**kwargs)


def load_config(path: Optional[str]) -> Config:
    """Load a Config from a JSON object file.

    Unknown keys are ignored. An empty `path` returns the defaults.
    """
    if not path:
        return Config()
    if not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as ex:
        raise ConfigError(f"Failed to read config {path}: {ex}") from ex
    return config_from_mapping(raw)


__all__ = [
    "Config",
    "WEEKDAY_NAMES",
    "config_from_mapping",
    "load_config",
]
