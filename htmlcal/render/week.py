# htmlcal/render/week.py
from __future__ import annotations

import abc
import time
from html import escape
from typing import Any, Callable, List, Optional, Sequence, Set

import pendulum

from ..calendar import Calendar
from ..config import Config
from ..grid import WeekGrid, layout_week
from ..model import Event, EventStartCell, OccupiedCell
from ..options import OptionsLike, ResolvedWeekOptions, resolve_options
from ..util.console import eprint, obs_enabled
from ..util.dates import coerce_datetime, week_days
from ..util.timeparse import slot_end_label
from ..util.tz import now_in
from .header import make_header

Clock = Callable[[], Any]


def _class_attr(*names: str) -> str:
    return escape(" ".join(n for n in names if n), quote=True)


class View(abc.ABC):
    def __init__(self, config: Config, calendar: Calendar, clock: Optional[Clock] = None) -> None:
        self.config = config
        self.calendar = calendar
        self._clock = clock or (lambda: now_in(self.config.tzinfo))

    def now(self) -> pendulum.DateTime:
        tz = self.config.tzinfo
        return coerce_datetime(self._clock(), tz).in_timezone(tz)

    @abc.abstractmethod
    def find_events(self, start: pendulum.DateTime, end: pendulum.DateTime) -> List[Event]:
        """Events from the pool overlapping [start, end), in pool order."""

    @abc.abstractmethod
    def render(self, options: OptionsLike = None) -> str:
        """Render the view as an HTML fragment."""


class WeekView(View):
    """Seven-day grid with one table row per time slot."""

    def find_events(self, start: pendulum.DateTime, end: pendulum.DateTime) -> List[Event]:
        return self.calendar.events_between(start, end)

    def render(self, options: OptionsLike = None) -> str:
        t0 = time.monotonic()
        today = self.now().date()
        opts = resolve_options(options, self.config, today)
        days = week_days(opts.start_date)
        grid = layout_week(days, opts.slots, opts.time_interval, self.find_events, self.config.tzinfo)

        # Scoped to this call: repeated renders show every summary again.
        shown: Set[Event] = set()

        html = "".join(
            [
                '<div class="weekly-calendar-container">',
                f'<table class="{_class_attr("weekly-calendar", "calendar", opts.color, self.config.table_classes)}">',
                make_header(days, self.config),
                "<tbody>",
                self._render_rows(grid, days, opts, today, shown),
                "</tbody>",
                "</table>",
                "</div>",
            ]
        )

        if obs_enabled():
            elapsed_ms = int((time.monotonic() - t0) * 1000)
            eprint(
                f"[htmlcal.week] render.ok ms={elapsed_ms} start={opts.start_date.isoformat()} "
                f"rows={len(opts.slots)} events={len(shown)}"
            )
        return html

    def _render_rows(
        self,
        grid: WeekGrid,
        days: Sequence[pendulum.Date],
        opts: ResolvedWeekOptions,
        today: pendulum.Date,
        shown: Set[Event],
    ) -> str:
        content: List[str] = []
        visible = [d for d in days if not self.config.day_should_be_hidden(d)]

        for row, label in enumerate(opts.slots):
            content.append("<tr>")
            end_label = slot_end_label(label, opts.time_interval)
            content.append(f'<td class="cal-weekview-time-th"><div>{label} - {end_label}</div></td>')

            for day in visible:
                cell = grid[day.isoformat()][row]
                if isinstance(cell, OccupiedCell):
                    continue
                td_class = _class_attr("cal-weekview-time", "today" if day == today else "")
                if isinstance(cell, EventStartCell):
                    content.append(f'<td class="{td_class}" rowspan="{cell.rowspan}">')
                    content.append(self.render_event(cell.event, day, cell.rowspan, shown))
                    content.append("</td>")
                else:
                    content.append(f'<td class="{td_class}"><div></div></td>')
            content.append("</tr>")

        return "".join(content)

    def event_classes(self, event: Event, day: pendulum.Date, rowspan: int) -> List[str]:
        tz = self.config.tzinfo
        start_day = event.start.in_timezone(tz).date()
        end_day = event.end.in_timezone(tz).date()

        classes: List[str] = []
        if day == start_day:
            if event.mask:
                classes.append("mask-start")
            if event.classes:
                classes.append(event.classes)
        elif start_day < day < end_day:
            if event.mask:
                classes.append("mask")
        elif day == end_day:
            if event.mask:
                classes.append("mask-end")

        if rowspan > 1:
            classes.append("multi-row-event")
        return classes

    def render_event(self, event: Event, day: pendulum.Date, rowspan: int, shown: Set[Event]) -> str:
        """Markup for one event cell.

        The summary is written only the first time `event` is seen in this
        render; later cells keep the decoration with an empty body.
        """
        cls = _class_attr("cal-weekview-event", *self.event_classes(event, day, rowspan))
        if event in shown:
            return f'<div class="{cls}"></div>'
        shown.add(event)
        return f'<div class="{cls}">{escape(event.summary)}</div>'


def render_week(
    calendar: Calendar,
    options: OptionsLike = None,
    *,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> str:
    return WeekView(config or calendar.config, calendar, clock=clock).render(options)


__all__ = ["View", "WeekView", "render_week", "Clock"]
