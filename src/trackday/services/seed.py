"""Demo data for trying the tracker board and statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from ..dates import WeekDay, weekday_for
from ..domain.entities import Color, Tracker
from .trackers import TrackerService

WEEKDAYS = tuple(WeekDay)
WORKDAYS = (WeekDay.MONDAY, WeekDay.TUESDAY, WeekDay.WEDNESDAY, WeekDay.THURSDAY, WeekDay.FRIDAY)

DEMO_TRACKERS = [
    {"category": "Health", "name": "Morning exercise", "emoji": "🏃", "color": 0xFD4C49, "schedule": WEEKDAYS},
    {"category": "Health", "name": "Drink water", "emoji": "💧", "color": 0x007BFA, "schedule": WEEKDAYS},
    {"category": "Health", "name": "Blood test", "emoji": "🩸", "color": 0xFF881E, "schedule": ()},
    {"category": "Mind", "name": "Meditate", "emoji": "🧘", "color": 0x6E44FE, "schedule": (WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY)},
    {"category": "Mind", "name": "Read 30 minutes", "emoji": "📚", "color": 0x33CF69, "schedule": WORKDAYS},
    {"category": "Home", "name": "Water the plants", "emoji": "🌱", "color": 0x2FD058, "schedule": (WeekDay.SATURDAY,)},
]

# Trackers skipped on these day offsets (0 = today) so the demo has gaps.
_SKIPPED_OFFSETS = {"Drink water": {3}, "Read 30 minutes": {1, 8}, "Morning exercise": {5, 6, 12}}


@dataclass(frozen=True)
class SeedSummary:
    categories: int
    trackers: int
    records: int


def run_demo_seed(service: TrackerService, *, today: date, days: int = 14) -> SeedSummary:
    """Create the demo trackers (once) and completions for the last ``days`` days."""

    existing = {(c.title, t.name): t for c in service.list_categories() for t in c.trackers}
    trackers: list[Tracker] = []
    for entry in DEMO_TRACKERS:
        tracker = existing.get((entry["category"], entry["name"]))
        if tracker is None:
            tracker = service.create_tracker(
                Tracker.new(entry["name"], entry["emoji"], Color(entry["color"]), entry["schedule"]),
                entry["category"],
            )
        trackers.append(tracker)

    for offset in range(days):
        day = today - timedelta(days=offset)
        weekday = weekday_for(day)
        for tracker in trackers:
            if tracker.is_irregular and offset != 2:
                continue
            if not tracker.occurs_on(weekday) or offset in _SKIPPED_OFFSETS.get(tracker.name, ()):
                continue
            service.ledger.mark_completed(tracker.id, day)

    categories = service.list_categories()
    return SeedSummary(
        categories=len(categories),
        trackers=sum(len(c.trackers) for c in categories),
        records=len(service.ledger),
    )
