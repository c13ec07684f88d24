# htmlcal/util/tz.py
from __future__ import annotations

import re
from typing import Optional, Union

import pendulum
from pendulum.tz.timezone import FixedTimezone, Timezone

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

TzInfo = Union[Timezone, FixedTimezone]


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - None/"" -> "UTC"
      - "local" / "system" -> "local" (resolve to the machine's local timezone)
      - "UTC" / "Z" / "GMT" -> "UTC"
      - IANA names, e.g. "Europe/Berlin"
      - Fixed offsets: "+02:00", "+0200", "-05:00"
    """
    if name is None:
        return "UTC"
    s = str(name).strip()
    if not s:
        return "UTC"

    low = s.lower()
    if low in {"local", "system", "native"}:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"

    return s


def resolve_tz(name: Optional[str]) -> TzInfo:
    """Resolve a timezone name into a pendulum timezone.

    Raises ValueError for invalid timezone identifiers.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return pendulum.UTC

    if tz_name == "local":
        return pendulum.local_timezone()

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        return pendulum.fixed_timezone(sign * (hh * 3600 + mm * 60))

    try:
        return pendulum.timezone(tz_name)
    except Exception as ex:
        raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex


def now_in(tz: TzInfo) -> pendulum.DateTime:
    return pendulum.now(tz)
