"""Completion record repository protocol."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Protocol

from ..entities import TrackerRecord


class RecordRepository(Protocol):
    """Repository for completion records keyed by (tracker, day)."""

    def list_all(self) -> set[TrackerRecord]:
        """Return every completion record."""
        ...

    def add(self, tracker_id: uuid.UUID, day: date) -> TrackerRecord:
        """Insert a record; an existing one for the same day is returned as-is."""
        ...

    def delete(self, tracker_id: uuid.UUID, day: date) -> None:
        """Delete the record for a tracker on a day."""
        ...

    def delete_for_tracker(self, tracker_id: uuid.UUID) -> int:
        """Delete every record of a tracker, returning how many were removed."""
        ...
