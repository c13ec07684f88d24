# htmlcal/calendar.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Tuple

import pendulum

from .config import Config
from .errors import InvalidEvent
from .model import Event
from .util.dates import coerce_datetime


class Calendar:
    """Flat, ordered event pool.

    Events keep insertion order; the week grid picks the first match in
    that order when several events share a slot.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self._events: List[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def add_event(
        self,
        start: Any,
        end: Any,
        summary: str,
        mask: bool = False,
        classes: Any = "",
    ) -> Event:
        start_dt, end_dt = self._bounds(start, end, summary)
        if isinstance(classes, (list, tuple)):
            classes = " ".join(str(c) for c in classes)
        event = Event(
            start=start_dt,
            end=end_dt,
            summary=str(summary or ""),
            mask=bool(mask),
            classes=" ".join(str(classes or "").split()),
        )
        self._events.append(event)
        return event

    def add_events(self, events: Iterable[Any]) -> List[Event]:
        """Add events given as Event instances or mappings.

        Mapping keys: start, end, summary, mask, classes.
        """
        added: List[Event] = []
        for item in events:
            if isinstance(item, Event):
                added.append(self._adopt(item))
                continue
            if not isinstance(item, Mapping):
                raise InvalidEvent(f"event must be a mapping, got {type(item).__name__}")
            added.append(
                self.add_event(
                    item.get("start"),
                    item.get("end"),
                    item.get("summary") or "",
                    mask=bool(item.get("mask", False)),
                    classes=item.get("classes") or "",
                )
            )
        return added

    def _bounds(self, start: Any, end: Any, summary: Any) -> Tuple[pendulum.DateTime, pendulum.DateTime]:
        tz = self.config.tzinfo
        try:
            start_dt = coerce_datetime(start, tz)
            end_dt = coerce_datetime(end, tz)
        except ValueError as ex:
            raise InvalidEvent(f"event {summary!r}: {ex}") from ex
        if end_dt < start_dt:
            raise InvalidEvent(f"event {summary!r}: end {end_dt.isoformat()} is before start {start_dt.isoformat()}")
        return start_dt, end_dt

    def _adopt(self, event: Event) -> Event:
        # Already-aware events are kept as the same instance.
        start_dt, end_dt = self._bounds(event.start, event.end, event.summary)
        if start_dt is not event.start or end_dt is not event.end:
            event = replace(event, start=start_dt, end=end_dt)
        self._events.append(event)
        return event

    def clear_events(self) -> None:
        self._events = []

    def get_events(self) -> List[Event]:
        return list(self._events)

    def events_between(self, start: pendulum.DateTime, end: pendulum.DateTime) -> List[Event]:
        """Events overlapping [start, end), in insertion order."""
        return [e for e in self._events if e.overlaps(start, end)]


__all__ = ["Calendar"]
