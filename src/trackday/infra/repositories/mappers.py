"""Conversions between SQLModel rows and domain values."""

from __future__ import annotations

from ...domain.encoding import color_to_hex, decode_schedule, encode_schedule, hex_to_color
from ...domain.entities import Tracker, TrackerCategory, TrackerRecord
from ...models import CategoryRow, RecordRow, TrackerRow


def tracker_from_row(row: TrackerRow) -> Tracker:
    return Tracker(
        id=row.id,
        name=row.name,
        emoji=row.emoji,
        color=hex_to_color(row.color),
        schedule=decode_schedule(row.schedule),
    )


def apply_tracker(row: TrackerRow, tracker: Tracker) -> TrackerRow:
    """Copy a tracker's editable attributes onto its row."""

    row.name = tracker.name
    row.emoji = tracker.emoji
    row.color = color_to_hex(tracker.color)
    row.schedule = encode_schedule(tracker.schedule)
    return row


def category_from_row(row: CategoryRow, trackers: list[TrackerRow]) -> TrackerCategory:
    return TrackerCategory(
        id=row.id,
        title=row.title,
        trackers=tuple(tracker_from_row(t) for t in trackers),
    )


def record_from_row(row: RecordRow) -> TrackerRecord:
    return TrackerRecord(tracker_id=row.tracker_id, day=row.day)
