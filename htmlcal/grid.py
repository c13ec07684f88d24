"""Week grid layout.

The grid maps each day (ISO date key) to one cell per time-slot row:

  - EmptyCell: nothing overlaps the slot
  - EventStartCell: an event is drawn here, covering `rowspan` rows
  - OccupiedCell: the row is covered by an earlier EventStartCell in the same day

Layout runs in two passes. `build_grid` queries events slot by slot and
computes rowspans; `claim_rows` walks each day top-down and turns rows
covered by an earlier rowspan into OccupiedCell, so two drawn cells never
cover the same row.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Sequence

import pendulum

from .model import EMPTY, Cell, Event, EventStartCell, OccupiedCell
from .util.console import eprint, obs_enabled
from .util.dates import at_clock, wall_clock
from .util.timeparse import parse_hhmm
from .util.tz import TzInfo

FindEvents = Callable[[pendulum.DateTime, pendulum.DateTime], Sequence[Event]]
WeekGrid = Dict[str, List[Cell]]


def compute_rowspan(event: Event, slot_start: pendulum.DateTime, interval: int, rows_left: int) -> int:
    # Rows are wall-clock labels, so count wall-clock minutes (DST days included).
    tz = slot_start.tzinfo
    minutes = (wall_clock(event.end, tz) - wall_clock(slot_start, tz)).total_seconds() / 60.0
    rowspan = max(int(math.ceil(minutes / interval)), 1)
    # Never reach past the last row of the day.
    return min(rowspan, max(rows_left, 1))


def build_grid(
    days: Sequence[pendulum.Date],
    slots: Sequence[str],
    interval: int,
    find_events: FindEvents,
    tz: TzInfo,
) -> WeekGrid:
    clock = [parse_hhmm(label) for label in slots]
    grid: WeekGrid = {}

    for day in days:
        cells: List[Cell] = []
        for row, (hh, mm) in enumerate(clock):
            slot_start = at_clock(day, hh, mm, tz)
            if (slot_start.hour, slot_start.minute) != (hh, mm):
                # Wall time skipped by a DST change; the row exists only as a label.
                cells.append(EMPTY)
                continue
            found = find_events(slot_start, slot_start.add(minutes=interval))
            if not found:
                cells.append(EMPTY)
                continue

            # First match wins; the rest are not drawn in this slot.
            event = found[0]
            if len(found) > 1 and obs_enabled():
                eprint(
                    f"[htmlcal.grid] INFO: {len(found)} events in slot "
                    f"{day.isoformat()} {slots[row]}; showing {event.summary!r}"
                )
            rowspan = compute_rowspan(event, slot_start, interval, len(clock) - row)
            cells.append(EventStartCell(event=event, rowspan=rowspan))
        grid[day.isoformat()] = cells

    return grid


def claim_rows(grid: WeekGrid) -> WeekGrid:
    out: WeekGrid = {}
    for day_key, cells in grid.items():
        covered: Dict[int, OccupiedCell] = {}
        laid_out: List[Cell] = []
        for row, cell in enumerate(cells):
            if row in covered:
                laid_out.append(covered[row])
                continue
            if isinstance(cell, EventStartCell):
                for r in range(row + 1, row + cell.rowspan):
                    covered[r] = OccupiedCell(event=cell.event, start_row=row)
            laid_out.append(cell)
        out[day_key] = laid_out
    return out


def layout_week(
    days: Sequence[pendulum.Date],
    slots: Sequence[str],
    interval: int,
    find_events: FindEvents,
    tz: TzInfo,
) -> WeekGrid:
    return claim_rows(build_grid(days, slots, interval, find_events, tz))


__all__ = ["FindEvents", "WeekGrid", "compute_rowspan", "build_grid", "claim_rows", "layout_week"]
