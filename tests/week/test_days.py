"""
tests/week/test_days.py

Covers:
  - Same-day, overnight and multi-day expansion
  - Wrapping from sunday into monday
  - 00:00 closing read as 24:00 of the previous day
  - Ordering of days and of ranges within a day
  - Rejection of intervals with unknown endpoints
  - Inputs are left untouched
"""

import pytest

from openhours.week.days import _days_between, expand_to_days, split_interval
from openhours.week.model import DayRange, WeekInterval, WeekTime
from openhours.week.notation import parse_opening_hours
from openhours.week import FormatError


FULL_DAY = DayRange("00:00", "24:00")


def expand(text):
    return expand_to_days(parse_opening_hours(text))


# ── Single intervals ──────────────────────────────────────────────────────────

class TestExpandSingle:

    def test_same_day(self):
        assert expand("W2T06:00:00/W2T20:00:00") == {"tuesday": [DayRange("06:00", "20:00")]}

    def test_monday_to_tuesday(self):
        assert expand("W1T08:00:00/W2T16:00:00") == {
            "monday": [DayRange("08:00", "24:00")],
            "tuesday": [DayRange("00:00", "16:00")],
        }

    def test_overnight(self):
        assert expand("W2T20:00:00/W3T04:00:00") == {
            "tuesday": [DayRange("20:00", "24:00")],
            "wednesday": [DayRange("00:00", "04:00")],
        }

    def test_days_in_between_are_full(self):
        assert expand("W1T08:00:00/W4T12:00:00") == {
            "monday": [DayRange("08:00", "24:00")],
            "tuesday": [FULL_DAY],
            "wednesday": [FULL_DAY],
            "thursday": [DayRange("00:00", "12:00")],
        }

    def test_whole_week(self):
        result = expand("W1T00:00:00/W7T24:00:00")
        assert list(result) == [
            "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
        ]
        assert all(ranges == [FULL_DAY] for ranges in result.values())

    def test_closing_at_24_stays_on_same_day(self):
        assert expand("W3T18:00:00/W3T24:00:00") == {"wednesday": [DayRange("18:00", "24:00")]}


# ── Wrapping and midnight ─────────────────────────────────────────────────────

class TestWrapAndMidnight:

    def test_sunday_to_monday_midnight(self):
        assert expand("W7T00:00:00/W1T00:00:00") == {"sunday": [FULL_DAY]}

    def test_sunday_to_monday(self):
        assert expand("W7T00:00:00/W1T10:00:00") == {
            "sunday": [FULL_DAY],
            "monday": [DayRange("00:00", "10:00")],
        }

    def test_friday_to_tuesday_wraps_weekend(self):
        result = expand("W5T18:00:00/W2T06:00:00")
        assert list(result) == ["friday", "saturday", "sunday", "monday", "tuesday"]
        assert result["friday"] == [DayRange("18:00", "24:00")]
        assert result["sunday"] == [FULL_DAY]
        assert result["tuesday"] == [DayRange("00:00", "06:00")]

    def test_closing_midnight_moves_to_previous_day(self):
        assert expand("W1T08:00:00/W2T00:00:00") == {"monday": [DayRange("08:00", "24:00")]}

    def test_closing_midnight_after_several_days(self):
        assert expand("W1T08:00:00/W4T00:00:00") == {
            "monday": [DayRange("08:00", "24:00")],
            "tuesday": [FULL_DAY],
            "wednesday": [FULL_DAY],
        }

    def test_monday_midnight_to_monday_midnight_is_whole_week(self):
        result = expand("W1T00:00:00/W1T00:00:00")
        assert len(result) == 7
        assert result["monday"] == [FULL_DAY]
        assert result["sunday"] == [FULL_DAY]


# ── Several intervals ─────────────────────────────────────────────────────────

class TestExpandMany:

    def test_twice_on_monday(self):
        assert expand("W1T08:00:00/W1T12:00:00,W1T13:00:00/W1T18:00:00") == {
            "monday": [DayRange("08:00", "12:00"), DayRange("13:00", "18:00")],
        }

    def test_days_in_order_of_appearance(self):
        result = expand(
            "W5T10:00:00/W5T12:00:00,W3T10:00:00/W3T20:30:00,W5T13:00:00/W5T21:00:00"
        )
        assert list(result) == ["friday", "wednesday"]
        assert result["friday"] == [DayRange("10:00", "12:00"), DayRange("13:00", "21:00")]

    def test_never_open(self):
        assert expand("") == {}

    def test_overlapping_ranges_are_kept(self):
        assert expand("W1T08:00:00/W1T12:00:00,W1T10:00:00/W1T14:00:00") == {
            "monday": [DayRange("08:00", "12:00"), DayRange("10:00", "14:00")],
        }


# ── Unknown endpoints ─────────────────────────────────────────────────────────

class TestIncomplete:

    @pytest.mark.parametrize("text", ["/W1T16:00:00", "W1T08:00:00/", "/"])
    def test_rejected(self, text):
        with pytest.raises(FormatError, match="incomplete interval"):
            expand(text)

    def test_message_names_interval(self):
        with pytest.raises(FormatError) as exc_info:
            expand("W1T08:00:00/W1T16:00:00,W2T08:00:00/")
        assert str(exc_info.value) == (
            "incomplete interval 'W2T08:00:00/': both opening and closing times are required"
        )


# ── Purity ────────────────────────────────────────────────────────────────────

class TestPurity:

    def test_same_interval_expanded_twice(self):
        interval = WeekInterval(WeekTime(1, 480), WeekTime(2, 0))
        first = expand_to_days([interval, interval])
        assert first == {"monday": [DayRange("08:00", "24:00"), DayRange("08:00", "24:00")]}
        assert interval.close == WeekTime(2, 0)
        assert expand_to_days([interval]) == {"monday": [DayRange("08:00", "24:00")]}

    def test_split_interval_segments(self):
        interval = WeekInterval(WeekTime(6, 1200), WeekTime(1, 120))
        assert list(split_interval(interval)) == [(6, 1200, 1440), (7, 0, 1440), (1, 0, 120)]


class TestDaysBetween:

    @pytest.mark.parametrize(
        "first, last, expected",
        [
            (1, 2, []),
            (1, 4, [2, 3]),
            (1, 7, [2, 3, 4, 5, 6]),
            (7, 1, []),
            (7, 2, [1]),
            (5, 2, [6, 7, 1]),
            (2, 1, [3, 4, 5, 6, 7]),
        ],
    )
    def test_cyclic_walk(self, first, last, expected):
        assert _days_between(first, last) == expected
