from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from ._exceptions import FormatError

MINUTES_PER_DAY: int = 24 * 60
DAYS_PER_WEEK: int = 7

WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def weekday_name(weekday: int) -> str:
    """Lowercase English name of an RFC 3339 weekday (1 = monday)."""
    if not 1 <= weekday <= DAYS_PER_WEEK:
        raise FormatError(
            f"invalid workday {weekday}: expected to be between 1 (monday) and 7 (sunday)"
        )
    return WEEKDAY_NAMES[weekday - 1]


def clock(minutes: int) -> str:
    # 1440 renders as "24:00", never wraps to "00:00".
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True, slots=True)
class WeekTime:
    """
    A point in the recurring week.

    weekday follows RFC 3339 (1 = monday ... 7 = sunday); minutes counts from
    midnight and may be 1440, which is "24:00" of that weekday and not
    "00:00" of the next one.
    """

    weekday: int
    minutes: int

    def __post_init__(self) -> None:
        if not 1 <= self.weekday <= DAYS_PER_WEEK:
            raise FormatError(
                f"invalid workday {self.weekday}: expected to be between 1 (monday) and 7 (sunday)"
            )
        if not 0 <= self.minutes <= MINUTES_PER_DAY:
            raise FormatError(
                f"invalid time {self.minutes}: expected to be between 0 and {MINUTES_PER_DAY} minutes"
            )

    @property
    def clock(self) -> str:
        return clock(self.minutes)

    @property
    def token(self) -> str:
        return f"W{self.weekday}T{self.clock}:00"

    def previous_day_end(self) -> WeekTime:
        """The same instant expressed as 24:00 of the previous weekday."""
        weekday = self.weekday - 1 or DAYS_PER_WEEK
        return WeekTime(weekday, MINUTES_PER_DAY)

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True, slots=True)
class WeekInterval:
    """
    An opening period. Either endpoint may be None when it is unknown; such
    intervals survive parsing and formatting but cannot be split into days.
    """

    FULL_WEEK: ClassVar[WeekInterval]

    open: Optional[WeekTime] = None
    close: Optional[WeekTime] = None

    @property
    def is_complete(self) -> bool:
        return self.open is not None and self.close is not None

    def __str__(self) -> str:
        open_ = self.open.token if self.open is not None else ""
        close = self.close.token if self.close is not None else ""
        return f"{open_}/{close}"


WeekInterval.FULL_WEEK = WeekInterval(WeekTime(1, 0), WeekTime(DAYS_PER_WEEK, MINUTES_PER_DAY))


@dataclass(frozen=True, slots=True)
class DayRange:
    """Opening range within one day, as "HH:MM" strings ("24:00" allowed as close)."""

    open: str
    close: str

    def __str__(self) -> str:
        return f"open: {self.open}, close: {self.close}"
