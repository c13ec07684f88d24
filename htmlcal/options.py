# htmlcal/options.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import pendulum

from .config import Config
from .errors import CalendarError, InvalidStartDate
from .util.dates import coerce_date, week_start
from .util.timeparse import check_interval, time_slots

_ALIASES = {
    "color": ("color", "colour"),
    "start_date": ("start_date", "startDate"),
    "time_interval": ("time_interval", "timeInterval"),
    "start_time": ("start_time", "startTime"),
    "end_time": ("end_time", "endTime"),
}


@dataclass(frozen=True)
class WeekOptions:
    """Per-render options. None means "use the Config default"."""

    color: str = ""
    start_date: Any = None
    time_interval: Optional[int] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "WeekOptions":
        if not isinstance(raw, Mapping):
            raise CalendarError(f"options must be a mapping, got {type(raw).__name__}")
        kwargs: Dict[str, Any] = {}
        for name, keys in _ALIASES.items():
            for k in keys:
                if raw.get(k) is not None:
                    kwargs[name] = raw[k]
                    break
        return cls(**kwargs)


OptionsLike = Union[WeekOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class ResolvedWeekOptions:
    color: str
    start_date: pendulum.Date
    time_interval: int
    start_time: str
    end_time: str
    slots: Tuple[str, ...]


def resolve_options(options: OptionsLike, config: Config, today: pendulum.Date) -> ResolvedWeekOptions:
    """Fill defaults from `config` and validate.

    start_date is moved back to the configured week start. Raises a
    CalendarError subclass on invalid input.
    """
    if options is None:
        opts = WeekOptions()
    elif isinstance(options, WeekOptions):
        opts = options
    else:
        opts = WeekOptions.from_mapping(options)

    if opts.start_date is None or opts.start_date == "":
        anchor = today
    else:
        try:
            anchor = coerce_date(opts.start_date, config.tzinfo)
        except ValueError as ex:
            raise InvalidStartDate(f"Invalid start date: {opts.start_date!r}") from ex

    interval = check_interval(opts.time_interval if opts.time_interval is not None else config.time_interval)
    start_time = opts.start_time if opts.start_time is not None else config.start_time
    end_time = opts.end_time if opts.end_time is not None else config.end_time
    slots = tuple(time_slots(start_time, end_time, interval))

    return ResolvedWeekOptions(
        color=" ".join(str(opts.color or "").split()),
        start_date=week_start(anchor, config.starting_day),
        time_interval=interval,
        start_time=start_time.strip(),
        end_time=end_time.strip(),
        slots=slots,
    )


__all__ = ["WeekOptions", "ResolvedWeekOptions", "OptionsLike", "resolve_options"]
