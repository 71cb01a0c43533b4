"""
Text notation for recurring weekly opening hours.

Neither RFC 3339 nor ISO 8601 can express a recurring time within a week, so
a point in the week is written ``W<d>T<HH>:<MM>:<SS>`` (weekday 1 = monday),
an interval is ``OPEN/CLOSE`` and several intervals are joined by commas::

    W2T06:00:00/W2T20:00:00,W5T10:30:00/W5T13:00:00

Either side of an interval may be empty when it is unknown. Seconds must be
present but are ignored and always written back as ``00``.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from ._exceptions import FormatError
from .model import WEEKDAY_NAMES, WeekInterval, WeekTime

_LOGGER = logging.getLogger(__name__)

INTERVAL_SEPARATOR = ","
ENDPOINT_SEPARATOR = "/"

_TOKEN_RE = re.compile(r"W(\d)T(\d{2}):(\d{2}):\d{2}", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)

_WEEKDAYS_BY_NAME: dict[str, int] = {
    **{name: i for i, name in enumerate(WEEKDAY_NAMES, start=1)},
    **{name[:3]: i for i, name in enumerate(WEEKDAY_NAMES, start=1)},
}


def _to_int(text: str) -> Optional[int]:
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    return int(text)


def parse_clock_minutes(hours: str, minutes: str) -> int:
    """
    Convert an hour and a minute string into minutes since midnight.

    "24" hours is accepted only together with "00" minutes and yields 1440,
    the end of the day.
    """
    h = _to_int(hours)
    if h is None or not 0 <= h <= 24:
        raise FormatError("invalid hours value")

    m = _to_int(minutes)
    if m is None or not 0 <= m <= 59:
        raise FormatError("invalid minutes value")

    if h == 24 and m != 0:
        raise FormatError("invalid value")

    return h * 60 + m


def parse_weekday_name(name: str) -> int:
    """
    Weekday number (1 = monday ... 7 = sunday) of an English weekday name.

    Full names and three-letter abbreviations are accepted in any case.
    """
    weekday = _WEEKDAYS_BY_NAME.get(name.lower())
    if weekday is None:
        raise FormatError(f"invalid weekday '{name}'")
    return weekday


def parse_week_time(token: str) -> Optional[WeekTime]:
    """Parse a single ``W<d>T<HH>:<MM>:<SS>`` token; an empty token is None."""
    if token == "":
        return None

    match = _TOKEN_RE.fullmatch(token)
    if match is None:
        raise FormatError(f"invalid value '{token}'")

    weekday = int(match.group(1))
    if not 1 <= weekday <= 7:
        raise FormatError(
            f"invalid workday in '{token}': expected to be between 1 (monday) and 7 (sunday)"
        )

    try:
        minutes = parse_clock_minutes(match.group(2), match.group(3))
    except FormatError as err:
        raise FormatError(f"invalid time in '{token}': {err}") from err

    return WeekTime(weekday, minutes)


def parse_opening_hours(text: str) -> list[WeekInterval]:
    """
    Parse the comma-separated interval notation.

    An empty string gives an empty list. Empty segments between commas are
    skipped, while a bare ``/`` is kept as an interval with both endpoints
    unknown. Any malformed segment fails the whole call.
    """
    intervals: list[WeekInterval] = []
    for segment in text.split(INTERVAL_SEPARATOR):
        if segment == "":
            _LOGGER.debug("Skipping empty segment in %r", text)
            continue

        parts = segment.split(ENDPOINT_SEPARATOR)
        if len(parts) != 2:
            raise FormatError(f"invalid opening hours string '{segment}'")

        try:
            open_ = parse_week_time(parts[0])
        except FormatError as err:
            raise FormatError(f"invalid opening hours: {err}") from err

        try:
            close = parse_week_time(parts[1])
        except FormatError as err:
            raise FormatError(f"invalid closing hours: {err}") from err

        intervals.append(WeekInterval(open_, close))

    _LOGGER.debug("Parsed %d interval(s)", len(intervals))
    return intervals


def format_opening_hours(intervals: Iterable[WeekInterval]) -> str:
    """Inverse of parse_opening_hours."""
    return INTERVAL_SEPARATOR.join(str(interval) for interval in intervals)
