"""htmlcal.api

Stable *library* entrypoint for htmlcal.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from htmlcal.calendar import Calendar
from htmlcal.config import Config, config_from_mapping, load_config
from htmlcal.errors import (
    CalendarError,
    ConfigError,
    InvalidEvent,
    InvalidInterval,
    InvalidStartDate,
    InvalidTimeRange,
)
from htmlcal.events_io import load_events
from htmlcal.grid import layout_week
from htmlcal.model import EmptyCell, Event, EventStartCell, OccupiedCell
from htmlcal.options import WeekOptions
from htmlcal.render.page import build_page
from htmlcal.render.week import View, WeekView, render_week
from htmlcal.util.timeparse import time_slots

__all__ = [
    "Calendar",
    "Config",
    "config_from_mapping",
    "load_config",
    "Event",
    "EmptyCell",
    "EventStartCell",
    "OccupiedCell",
    "WeekOptions",
    "View",
    "WeekView",
    "render_week",
    "build_page",
    "layout_week",
    "time_slots",
    "load_events",
    "CalendarError",
    "ConfigError",
    "InvalidEvent",
    "InvalidInterval",
    "InvalidStartDate",
    "InvalidTimeRange",
]
