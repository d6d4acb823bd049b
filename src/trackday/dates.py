"""Calendar helpers: weekday mapping and day-granularity normalization.

Every record lookup in the engine is keyed by a ``datetime.date``. Timestamps
are reduced to their calendar day in the reference time zone before they are
compared, so two completions at different times on the same day collapse.
"""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from enum import IntEnum
from typing import Optional, Union

DateLike = Union[date, datetime]


class WeekDay(IntEnum):
    """Day of week with a stable Monday-first ordinal (1-7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @classmethod
    def from_platform_index(cls, index: int) -> "WeekDay":
        """Map a Sunday-first platform index (Sunday=1 .. Saturday=7)."""

        try:
            return _PLATFORM_TO_WEEKDAY[index]
        except KeyError:
            raise ValueError(f"Platform weekday index out of range: {index!r}") from None

    def to_platform_index(self) -> int:
        """Inverse of :meth:`from_platform_index`."""

        return _WEEKDAY_TO_PLATFORM[self]


_SHORT_NAMES = {
    WeekDay.MONDAY: "Mon",
    WeekDay.TUESDAY: "Tue",
    WeekDay.WEDNESDAY: "Wed",
    WeekDay.THURSDAY: "Thu",
    WeekDay.FRIDAY: "Fri",
    WeekDay.SATURDAY: "Sat",
    WeekDay.SUNDAY: "Sun",
}

_PLATFORM_TO_WEEKDAY = {
    1: WeekDay.SUNDAY,
    2: WeekDay.MONDAY,
    3: WeekDay.TUESDAY,
    4: WeekDay.WEDNESDAY,
    5: WeekDay.THURSDAY,
    6: WeekDay.FRIDAY,
    7: WeekDay.SATURDAY,
}

_WEEKDAY_TO_PLATFORM = {day: index for index, day in _PLATFORM_TO_WEEKDAY.items()}


def day_key(value: DateLike, tz: Optional[tzinfo] = None) -> date:
    """Return the calendar day of ``value`` in the reference time zone.

    Aware datetimes are converted into ``tz`` when one is given; naive
    datetimes are taken as already being local wall-clock time.
    """

    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def start_of_day(value: DateLike, tz: Optional[tzinfo] = None) -> datetime:
    """Return midnight at the start of ``value``'s calendar day."""

    zone = tz
    if zone is None and isinstance(value, datetime):
        zone = value.tzinfo
    return datetime.combine(day_key(value, tz), time.min, tzinfo=zone)


def same_day(a: DateLike, b: DateLike, tz: Optional[tzinfo] = None) -> bool:
    """Return True when both values fall on the same calendar day."""

    return day_key(a, tz) == day_key(b, tz)


def weekday_for(value: DateLike, tz: Optional[tzinfo] = None) -> WeekDay:
    """Map any date or timestamp to its day of week."""

    return WeekDay(day_key(value, tz).isoweekday())


def today(tz: Optional[tzinfo] = None) -> date:
    """Return the current calendar day in ``tz`` (local time when None)."""

    return datetime.now(tz).date()


def is_future_day(value: DateLike, reference: DateLike, tz: Optional[tzinfo] = None) -> bool:
    """Return True when ``value`` falls on a day strictly after ``reference``."""

    return day_key(value, tz) > day_key(reference, tz)


__all__ = [
    "DateLike",
    "WeekDay",
    "day_key",
    "is_future_day",
    "same_day",
    "start_of_day",
    "today",
    "weekday_for",
]
