"""Aggregate statistics over all completion records."""

from __future__ import annotations

import uuid
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from ..dates import WeekDay
from ..domain.entities import Tracker, TrackerRecord


@dataclass(frozen=True)
class Statistics:
    best_streak: int
    perfect_days: int
    total_completions: int
    average_per_active_day: float

    @property
    def is_empty(self) -> bool:
        """True when nothing was ever completed."""
        return self.total_completions == 0


def best_streak(days: Iterable[date]) -> int:
    """Length of the longest run of consecutive calendar days."""

    longest = 0
    run = 0
    last_day: date | None = None
    for d in sorted(set(days)):
        if last_day is not None and d == last_day + timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = d
    return longest


def perfect_days(completed_by_day: dict[date, set[uuid.UUID]], trackers: Sequence[Tracker]) -> int:
    """Count days on which every tracker due that day was completed.

    A day with nothing due is never perfect.
    """

    count = 0
    for day, completed in completed_by_day.items():
        weekday = WeekDay(day.isoweekday())
        due = {tracker.id for tracker in trackers if tracker.occurs_on(weekday)}
        if due and due <= completed:
            count += 1
    return count


def compute_statistics(records: Iterable[TrackerRecord], trackers: Sequence[Tracker]) -> Statistics:
    """Recompute every statistic from the given snapshots."""

    unique = set(records)
    completed_by_day: dict[date, set[uuid.UUID]] = defaultdict(set)
    for record in unique:
        completed_by_day[record.day].add(record.tracker_id)

    total = len(unique)
    active_days = len(completed_by_day)
    return Statistics(
        best_streak=best_streak(completed_by_day),
        perfect_days=perfect_days(completed_by_day, trackers),
        total_completions=total,
        average_per_active_day=total / active_days if active_days else 0.0,
    )


def finished_trackers_count(records: Iterable[TrackerRecord]) -> int:
    """Number of distinct trackers completed at least once."""

    return len({record.tracker_id for record in records})


__all__ = [
    "Statistics",
    "best_streak",
    "compute_statistics",
    "finished_trackers_count",
    "perfect_days",
]
