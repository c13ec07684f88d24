# htmlcal/util/dates.py
from __future__ import annotations

import datetime as dt
from typing import Any, List

import pendulum

from .tz import TzInfo

SUNDAY = 0
MONDAY = 1


def coerce_datetime(value: Any, tz: TzInfo) -> pendulum.DateTime:
    """Turn user input into an aware pendulum DateTime.

    Naive datetimes and date-only values are read in `tz`.
    Raises ValueError for anything else.
    """
    if isinstance(value, pendulum.DateTime) and value.tzinfo is not None:
        return value
    if isinstance(value, dt.datetime):
        return pendulum.instance(value, tz=tz)
    if isinstance(value, dt.date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)
    if isinstance(value, str):
        s = value.strip()
        if not s:
            raise ValueError("empty datetime string")
        try:
            parsed = pendulum.parse(s, tz=tz)
        except Exception as ex:
            raise ValueError(f"Invalid datetime: {value!r}") from ex
        if isinstance(parsed, pendulum.DateTime):
            return parsed
        if isinstance(parsed, dt.date):
            return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz=tz)
        raise ValueError(f"Invalid datetime: {value!r}")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return pendulum.from_timestamp(value, tz=tz)
    raise ValueError(f"Unsupported datetime value: {value!r}")


def coerce_date(value: Any, tz: TzInfo) -> pendulum.Date:
    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        return pendulum.date(value.year, value.month, value.day)
    moment = coerce_datetime(value, tz)
    return pendulum.date(moment.year, moment.month, moment.day)


def sunday_index(d: dt.date) -> int:
    """Day of week with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7


def week_start(d: pendulum.Date, starting_day: int) -> pendulum.Date:
    """Move `d` back to the most recent `starting_day` (0 = Sunday, 1 = Monday)."""
    delta = (sunday_index(d) - int(starting_day)) % 7
    return d.subtract(days=delta)


def week_days(start: pendulum.Date, days: int = 7) -> List[pendulum.Date]:
    return [start.add(days=i) for i in range(days)]


def at_clock(day: dt.date, hh: int, mm: int, tz: TzInfo) -> pendulum.DateTime:
    return pendulum.datetime(day.year, day.month, day.day, hh, mm, tz=tz)


def wall_clock(moment: dt.datetime, tz: TzInfo) -> dt.datetime:
    """Naive local reading of `moment` in `tz`, as printed on a wall clock."""
    local = moment.astimezone(tz)
    return dt.datetime(local.year, local.month, local.day, local.hour, local.minute, local.second, local.microsecond)


def ucfirst(s: str) -> str:
    return s[:1].upper() + s[1:]
