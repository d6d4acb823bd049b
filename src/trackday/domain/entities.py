"""Tracker domain values: trackers, categories, completion records and filters."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Iterable, Optional

from ..dates import DateLike, WeekDay, day_key
from ..errors import ValidationError

MAX_RGB = 0xFFFFFF


def _channel(value: float) -> int:
    """Scale a [0, 1] float channel to the nearest 8-bit value."""

    return max(0, min(255, round(value * 255)))


@dataclass(frozen=True)
class Color:
    """24-bit RGB color, independent of any UI toolkit."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_RGB:
            raise ValidationError(f"Color value out of range: {self.value:#x}")

    @classmethod
    def from_channels(cls, red: int, green: int, blue: int) -> "Color":
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                raise ValidationError(f"Color channel out of range: {channel}")
        return cls((red << 16) | (green << 8) | blue)

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> "Color":
        """Build from float channels in [0, 1], rounding and clamping each."""

        return cls.from_channels(_channel(red), _channel(green), _channel(blue))

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.red / 255, self.green / 255, self.blue / 255)


@dataclass(frozen=True)
class Tracker:
    """A habit (non-empty schedule) or an irregular event (empty schedule)."""

    id: uuid.UUID
    name: str
    emoji: str
    color: Color
    schedule: frozenset[WeekDay] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Tracker name must not be empty")
        if not isinstance(self.schedule, frozenset):
            object.__setattr__(self, "schedule", frozenset(self.schedule))

    @classmethod
    def new(
        cls,
        name: str,
        emoji: str,
        color: Color,
        schedule: Iterable[WeekDay] = (),
    ) -> "Tracker":
        """Create a tracker with a fresh identifier and a trimmed name."""

        return cls(
            id=uuid.uuid4(),
            name=(name or "").strip(),
            emoji=emoji,
            color=color,
            schedule=frozenset(schedule),
        )

    @property
    def is_habit(self) -> bool:
        return bool(self.schedule)

    @property
    def is_irregular(self) -> bool:
        return not self.schedule

    def occurs_on(self, weekday: WeekDay) -> bool:
        """Irregular events have no weekly recurrence and are eligible every day."""

        return not self.schedule or weekday in self.schedule

    def replace(self, **changes) -> "Tracker":
        """Return an edited copy; the identifier never changes."""

        changes.pop("id", None)
        return replace(self, **changes)


@dataclass(frozen=True)
class TrackerCategory:
    """A titled, ordered group of trackers."""

    id: uuid.UUID
    title: str
    trackers: tuple[Tracker, ...] = ()

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValidationError("Category title must not be empty")
        if not isinstance(self.trackers, tuple):
            object.__setattr__(self, "trackers", tuple(self.trackers))

    def with_trackers(self, trackers: Iterable[Tracker]) -> "TrackerCategory":
        return replace(self, trackers=tuple(trackers))


@dataclass(frozen=True)
class TrackerRecord:
    """Tracker ``tracker_id`` was completed on calendar day ``day``."""

    tracker_id: uuid.UUID
    day: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "day", day_key(self.day))

    @classmethod
    def on(cls, tracker_id: uuid.UUID, when: DateLike, tz=None) -> "TrackerRecord":
        return cls(tracker_id=tracker_id, day=day_key(when, tz))


class TrackerFilter(Enum):
    """Completion-status filter shown on top of the schedule/search filter."""

    ALL = "all"
    TODAY = "today"
    COMPLETED = "completed"
    NOT_COMPLETED = "not-completed"

    @property
    def title(self) -> str:
        return _FILTER_TITLES[self]

    @property
    def is_status_filter(self) -> bool:
        """True for the filters that depend on completion state."""

        return self in (TrackerFilter.COMPLETED, TrackerFilter.NOT_COMPLETED)

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["TrackerFilter"]:
        if value is None or not value.strip():
            return None
        normalized = value.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValidationError(f"Unknown tracker filter: {value!r}")


_FILTER_TITLES = {
    TrackerFilter.ALL: "All trackers",
    TrackerFilter.TODAY: "Trackers for today",
    TrackerFilter.COMPLETED: "Completed",
    TrackerFilter.NOT_COMPLETED: "Not completed",
}
