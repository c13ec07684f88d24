# htmlcal/events_io.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .calendar import Calendar
from .errors import InvalidEvent
from .model import Event
from .util.console import eprint, obs_enabled

JsonPath = Union[str, Path]


def _raw_event_list(raw: Any) -> List[Any]:
    if isinstance(raw, dict) and isinstance(raw.get("events"), list):
        return list(raw["events"])
    if isinstance(raw, list):
        return raw
    raise InvalidEvent("events file must be a JSON list or an object with an 'events' list")


def normalize_event(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Map one raw JSON entry onto Calendar.add_event keyword names.

    Accepted aliases: title/description for summary, class/className for classes.
    """
    if not isinstance(raw, dict):
        raise InvalidEvent(f"event must be an object, got {type(raw).__name__}")
    summary = raw.get("summary")
    if summary is None:
        summary = raw.get("title") or raw.get("description") or ""
    classes = raw.get("classes")
    if classes is None:
        classes = raw.get("class") or raw.get("className") or ""
    return {
        "start": raw.get("start"),
        "end": raw.get("end"),
        "summary": str(summary),
        "mask": bool(raw.get("mask", False)),
        "classes": classes,
    }


def load_events(path: JsonPath, calendar: Calendar, *, strict: bool = True) -> List[Event]:
    """Read events from a JSON file into `calendar`.

    Accepted formats:
      - { "events": [ {..}, ... ] }
      - [ {..}, ... ]

    With strict=False, invalid entries are skipped with a warning.
    """
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as ex:
        raise InvalidEvent(f"Failed to read events from {p}: {ex}") from ex

    added: List[Event] = []
    skipped = 0
    for i, item in enumerate(_raw_event_list(raw)):
        try:
            fields = normalize_event(item)
            added.append(calendar.add_event(**fields))
        except InvalidEvent as ex:
            if strict:
                raise InvalidEvent(f"{p}: events[{i}]: {ex}") from ex
            skipped += 1
            eprint(f"[htmlcal.events_io] WARN: skipping events[{i}]: {ex}")

    if obs_enabled():
        eprint(f"[htmlcal.events_io] load.ok path={str(p)!r} events={len(added)} skipped={skipped}")
    return added


__all__ = ["load_events", "normalize_event"]
