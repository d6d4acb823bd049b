"""Tests for weekday mapping and day-granularity helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from trackday.dates import WeekDay, day_key, is_future_day, same_day, start_of_day, weekday_for


class TestPlatformIndexMapping:
    """The Sunday-first platform index must be remapped explicitly."""

    @pytest.mark.parametrize(
        "index, expected",
        [
            (1, WeekDay.SUNDAY),
            (2, WeekDay.MONDAY),
            (3, WeekDay.TUESDAY),
            (4, WeekDay.WEDNESDAY),
            (5, WeekDay.THURSDAY),
            (6, WeekDay.FRIDAY),
            (7, WeekDay.SATURDAY),
        ],
    )
    def test_every_platform_index(self, index, expected):
        assert WeekDay.from_platform_index(index) is expected
        assert expected.to_platform_index() == index

    @pytest.mark.parametrize("index", [0, 8, -1, 100])
    def test_out_of_range_index_rejected(self, index):
        with pytest.raises(ValueError):
            WeekDay.from_platform_index(index)

    def test_sunday_is_not_first_internally(self):
        assert int(WeekDay.MONDAY) == 1
        assert int(WeekDay.SUNDAY) == 7
        assert WeekDay.from_platform_index(1) != WeekDay(1)


def test_weekday_for_full_week():
    """2024-01-01 is a Monday; walk one week forward."""
    start = date(2024, 1, 1)
    expected = list(WeekDay)
    assert [weekday_for(start + timedelta(days=i)) for i in range(7)] == expected


def test_weekday_for_datetime_ignores_time_of_day():
    assert weekday_for(datetime(2024, 1, 7, 23, 59)) is WeekDay.SUNDAY
    assert weekday_for(datetime(2024, 1, 8, 0, 0)) is WeekDay.MONDAY


def test_short_names():
    assert [day.short_name for day in WeekDay] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def test_day_key_and_same_day():
    morning = datetime(2024, 3, 5, 6, 30)
    night = datetime(2024, 3, 5, 23, 45)
    assert day_key(morning) == date(2024, 3, 5)
    assert same_day(morning, night)
    assert same_day(morning, date(2024, 3, 5))
    assert not same_day(night, datetime(2024, 3, 6, 0, 1))


def test_day_key_converts_aware_datetimes_into_reference_zone():
    moment = datetime(2024, 3, 5, 23, 30, tzinfo=timezone.utc)
    tokyo = ZoneInfo("Asia/Tokyo")
    assert day_key(moment) == date(2024, 3, 5)
    assert day_key(moment, tokyo) == date(2024, 3, 6)
    assert weekday_for(moment, tokyo) is WeekDay.WEDNESDAY


def test_start_of_day():
    assert start_of_day(datetime(2024, 3, 5, 17, 12, 9)) == datetime(2024, 3, 5)
    assert start_of_day(date(2024, 3, 5)) == datetime(2024, 3, 5)

    aware = start_of_day(datetime(2024, 3, 5, 17, 0, tzinfo=timezone.utc))
    assert aware == datetime(2024, 3, 5, tzinfo=timezone.utc)


def test_is_future_day_is_strict():
    today = date(2024, 1, 10)
    assert is_future_day(date(2024, 1, 11), today)
    assert not is_future_day(today, today)
    assert not is_future_day(datetime(2024, 1, 10, 23, 59), today)
    assert not is_future_day(date(2023, 12, 31), today)
