# htmlcal/render/header.py
from __future__ import annotations

from html import escape
from typing import List, NamedTuple, Sequence

import pendulum

from ..config import Config
from ..util.dates import ucfirst


class DayLabel(NamedTuple):
    css_day: str      # English weekday, lower case; stable across locales
    weekday: str
    day: int
    month: str


def day_label(day: pendulum.Date, locale: str) -> DayLabel:
    return DayLabel(
        css_day=day.format("dddd", locale="en").lower(),
        weekday=ucfirst(day.format("dddd", locale=locale)),
        day=day.day,
        month=ucfirst(day.format("MMMM", locale=locale)),
    )


def make_header(days: Sequence[pendulum.Date], config: Config) -> str:
    parts: List[str] = ['<thead>', '<tr class="calendar-header">', "<th></th>"]
    for day in days:
        if config.day_should_be_hidden(day):
            continue
        label = day_label(day, config.locale)
        parts.append(f'<th class="cal-th cal-th-{label.css_day}">')
        parts.append(f'<div class="cal-weekview-dow">{escape(label.weekday)}</div>')
        parts.append(f'<div class="cal-weekview-day">{label.day}</div>')
        parts.append(f'<div class="cal-weekview-month">{escape(label.month)}</div>')
        parts.append("</th>")
    parts.append("</tr>")
    parts.append("</thead>")
    return "".join(parts)
