"""
openhours.week
~~~~~~~~~~~~~~

Recurring weekly opening hours.  A WeekInterval pairs two WeekTime points
(weekday 1 = monday ... 7 = sunday, minutes since midnight up to 1440 for
"24:00") and round-trips through a compact text notation.

Basic usage::

    from openhours.week import expand_to_days, parse_opening_hours

    intervals = parse_opening_hours("W1T08:00:00/W2T16:00:00")
    expand_to_days(intervals)
    # → {"monday": [DayRange("08:00", "24:00")],
    #    "tuesday": [DayRange("00:00", "16:00")]}

Public API
----------
WeekTime               A point in the week.
WeekInterval           An opening period; either endpoint may be unknown.
DayRange               An "HH:MM" range within a single day.
FormatError            Raised for every malformed value.
parse_opening_hours    Text → list of WeekInterval.
format_opening_hours   List of WeekInterval → text.
expand_to_days         List of WeekInterval → {weekday name: [DayRange]}.
parse_weekday_name     "Mon" / "monday" → 1.
parse_clock_minutes    ("08", "30") → 510.
weekday_name           1 → "monday".
"""

from __future__ import annotations

from openhours.week._exceptions import FormatError
from openhours.week.days import expand_to_days
from openhours.week.model import DayRange, WeekInterval, WeekTime, weekday_name
from openhours.week.notation import (
    format_opening_hours,
    parse_clock_minutes,
    parse_opening_hours,
    parse_weekday_name,
)

__all__ = [
    "DayRange",
    "FormatError",
    "WeekInterval",
    "WeekTime",
    "expand_to_days",
    "format_opening_hours",
    "parse_clock_minutes",
    "parse_opening_hours",
    "parse_weekday_name",
    "weekday_name",
]
