from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from openhours.week.days import split_interval
from openhours.week.model import MINUTES_PER_DAY, WeekInterval, clock

_LOGGER = logging.getLogger(__name__)


def _period_end(minutes: int) -> str:
    # OCPI writes the end of the day as "00:00"; the field tells it apart from a start.
    return "00:00" if minutes == MINUTES_PER_DAY else clock(minutes)


@dataclass(frozen=True, slots=True)
class OCPIRegularHours:
    """One OCPI regular-hours entry."""

    weekday: int
    period_begin: str
    period_end: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "weekday": self.weekday,
            "period_begin": self.period_begin,
            "period_end": self.period_end,
        }


@dataclass(frozen=True, slots=True)
class OCPIOpeningTimes:
    """
    OCPI opening times: either the 24/7 flag, or a list of regular hours.
    regular_hours is None when it is not applicable or would be empty.
    """

    twenty_four_seven: bool = False
    regular_hours: Optional[tuple[OCPIRegularHours, ...]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"twentyfourseven": self.twenty_four_seven}
        if self.regular_hours is not None:
            data["regular_hours"] = [hours.to_dict() for hours in self.regular_hours]
        return data


def project_to_ocpi(intervals: Sequence[WeekInterval]) -> OCPIOpeningTimes:
    """
    Project `intervals` onto the OCPI opening-times shape.

    Intervals spanning the whole week collapse into the 24/7 flag. Otherwise
    every interval is split per weekday like expand_to_days, but an end of day
    is written "00:00" instead of "24:00".
    """
    if intervals and all(interval == WeekInterval.FULL_WEEK for interval in intervals):
        _LOGGER.debug("Opening hours cover the whole week, reporting 24/7")
        return OCPIOpeningTimes(twenty_four_seven=True)

    regular_hours = tuple(
        OCPIRegularHours(weekday, clock(begin), _period_end(end))
        for interval in intervals
        for weekday, begin, end in split_interval(interval)
    )
    if not regular_hours:
        return OCPIOpeningTimes()
    return OCPIOpeningTimes(regular_hours=regular_hours)
