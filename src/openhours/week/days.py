from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from ._exceptions import FormatError
from .model import (
    DAYS_PER_WEEK,
    MINUTES_PER_DAY,
    DayRange,
    WeekInterval,
    WeekTime,
    clock,
    weekday_name,
)

Segment = tuple[int, int, int]  # weekday, begin minutes, end minutes


def _days_between(first: int, last: int) -> list[int]:
    """Weekdays strictly between `first` and `last`, walking forward and wrapping sunday -> monday."""
    count = (last - first) % DAYS_PER_WEEK - 1
    if count <= 0:
        return []
    # weekday w is at index w - 1 of the cycle, so index `first` is the day after it
    return [int(d) for d in np.arange(first, first + count, dtype=np.int64) % DAYS_PER_WEEK + 1]


def _require_complete(interval: WeekInterval) -> tuple[WeekTime, WeekTime]:
    if interval.open is None or interval.close is None:
        raise FormatError(
            f"incomplete interval '{interval}': both opening and closing times are required"
        )
    return interval.open, interval.close


def split_interval(interval: WeekInterval) -> Iterator[Segment]:
    """
    Split one interval into per-weekday segments.

    A closing time of 00:00 is read as 24:00 of the previous weekday, so that
    "W1T08:00:00/W2T00:00:00" stays on monday. Days fully covered by the
    interval yield 0 -> 1440.
    """
    open_, close = _require_complete(interval)
    if close.minutes == 0:
        close = close.previous_day_end()

    if open_.weekday == close.weekday:
        yield open_.weekday, open_.minutes, close.minutes
        return

    yield open_.weekday, open_.minutes, MINUTES_PER_DAY
    for weekday in _days_between(open_.weekday, close.weekday):
        yield weekday, 0, MINUTES_PER_DAY
    yield close.weekday, 0, close.minutes


def expand_to_days(intervals: Iterable[WeekInterval]) -> dict[str, list[DayRange]]:
    """
    Human readable breakdown of `intervals`, keyed by lowercase weekday name.

    Days appear in the order they are first reached and only when they have
    at least one range; ranges within a day keep the input order.
    """
    days: dict[str, list[DayRange]] = {}
    for interval in intervals:
        for weekday, begin, end in split_interval(interval):
            days.setdefault(weekday_name(weekday), []).append(DayRange(clock(begin), clock(end)))
    return days
