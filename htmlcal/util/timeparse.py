# htmlcal/util/timeparse.py
from __future__ import annotations

import re
from typing import Any, List, Tuple

from ..errors import InvalidInterval, InvalidTimeRange

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

MINUTES_PER_DAY = 24 * 60


def parse_hhmm(s: str) -> Tuple[int, int]:
    if not isinstance(s, str):
        raise InvalidTimeRange(f"Invalid HH:MM: {s!r}")
    m = _HHMM_RE.match(s.strip())
    if not m:
        raise InvalidTimeRange(f"Invalid HH:MM: {s!r}")
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        raise InvalidTimeRange(f"Invalid HH:MM: {s!r}")
    return hh, mm


def hhmm_to_minutes(s: str) -> int:
    hh, mm = parse_hhmm(s)
    return hh * 60 + mm


def format_minutes(total: int) -> str:
    # Clock label; values past midnight wrap around.
    total = int(total) % MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


def check_interval(interval: Any) -> int:
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise InvalidInterval(f"time interval must be an integer number of minutes, got {interval!r}")
    if interval <= 0:
        raise InvalidInterval(f"time interval must be > 0, got {interval}")
    return interval


def time_slots(start_time: str, end_time: str, interval: int) -> List[str]:
    """Clock labels of the rows between `start_time` and `end_time`.

    Labels step by `interval` minutes from start up to (excluding) end. A
    trailing partial slot is kept. Equal start and end means a full day:
    "00:00"-"00:00" at 60 minutes gives 24 labels.
    """
    step = check_interval(interval)
    start = hhmm_to_minutes(start_time)
    end = hhmm_to_minutes(end_time)
    if end == start:
        end += MINUTES_PER_DAY
    elif end < start:
        raise InvalidTimeRange(f"end time {end_time!r} is before start time {start_time!r}")

    labels = [format_minutes(m) for m in range(start, end, step)]
    return list(dict.fromkeys(labels))


def slot_end_label(label: str, interval: int) -> str:
    return format_minutes(hhmm_to_minutes(label) + int(interval))
