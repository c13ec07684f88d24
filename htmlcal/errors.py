"""Error types raised while normalizing calendar input.

Every error here is raised before any markup is produced.
"""

from __future__ import annotations


class CalendarError(ValueError):
    """Base class for invalid calendar input."""


class InvalidTimeRange(CalendarError):
    """Raised when a start/end clock time is not HH:MM or the range is inverted."""


class InvalidInterval(CalendarError):
    """Raised when the slot interval is not a positive number of minutes."""


class InvalidStartDate(CalendarError):
    """Raised when the week anchor date cannot be parsed."""


class InvalidEvent(CalendarError):
    """Raised when an event has missing, unparseable or inverted bounds."""


class ConfigError(CalendarError):
    """Raised when a config file or config value is invalid."""


__all__ = [
    "CalendarError",
    "InvalidTimeRange",
    "InvalidInterval",
    "InvalidStartDate",
    "InvalidEvent",
    "ConfigError",
]
