# htmlcal/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import pendulum


@dataclass(frozen=True, eq=False)
class Event:
    # eq=False: two events with equal fields are still distinct entries;
    # "already rendered" bookkeeping relies on identity.
    start: pendulum.DateTime
    end: pendulum.DateTime
    summary: str
    mask: bool = False
    classes: str = ""

    def overlaps(self, range_start: pendulum.DateTime, range_end: pendulum.DateTime) -> bool:
        """True when the event touches the half-open range [range_start, range_end).

        Zero-length events belong to the range containing their start.
        """
        if self.start < range_end and self.end > range_start:
            return True
        return range_start <= self.start < range_end


@dataclass(frozen=True)
class EmptyCell:
    pass


@dataclass(frozen=True)
class EventStartCell:
    event: Event
    rowspan: int


@dataclass(frozen=True)
class OccupiedCell:
    event: Event
    start_row: int


Cell = Union[EmptyCell, EventStartCell, OccupiedCell]

EMPTY = EmptyCell()


__all__ = [
    "Event",
    "EmptyCell",
    "EventStartCell",
    "OccupiedCell",
    "Cell",
    "EMPTY",
]
