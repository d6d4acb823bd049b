"""SQLModel implementation of the tracker repository."""

from __future__ import annotations

import dataclasses
import uuid
from typing import Optional

from sqlmodel import select

from ...domain.entities import Tracker
from ...errors import NotFoundError, ValidationError
from ...events import ChangeNotifier
from ...logging_config import get_logger
from ...models import CategoryRow, RecordRow, TrackerRow
from ..database import SessionFactory
from .mappers import apply_tracker, tracker_from_row

logger = get_logger(__name__)


class SQLModelTrackerRepository:
    """SQLModel-based tracker repository implementation."""

    def __init__(self, session_factory: SessionFactory, notifier: Optional[ChangeNotifier] = None):
        """Initialize with a session factory and an optional change notifier."""
        self.session_factory = session_factory
        self.notifier = notifier

    def _notify(self) -> None:
        if self.notifier is not None:
            self.notifier.notify()

    def get_by_id(self, tracker_id: uuid.UUID) -> Optional[Tracker]:
        """Retrieve a tracker by ID."""
        with self.session_factory() as session:
            row = session.get(TrackerRow, tracker_id)
            return tracker_from_row(row) if row is not None else None

    def get_category_id(self, tracker_id: uuid.UUID) -> Optional[uuid.UUID]:
        """Return the tracker's category id (None once its category was deleted)."""
        with self.session_factory() as session:
            row = session.get(TrackerRow, tracker_id)
            if row is None:
                raise NotFoundError("tracker", tracker_id)
            return row.category_id

    def list_all(self) -> list[Tracker]:
        """List all trackers ordered by name."""
        with self.session_factory() as session:
            rows = session.exec(select(TrackerRow).order_by(TrackerRow.name)).all()  # type: ignore[arg-type]
            return [tracker_from_row(row) for row in rows]

    def create(self, tracker: Tracker, category_id: uuid.UUID) -> Tracker:
        """Create a tracker inside an existing category."""
        with self.session_factory() as session:
            if session.get(CategoryRow, category_id) is None:
                raise NotFoundError("category", category_id)
            if session.get(TrackerRow, tracker.id) is not None:
                raise ValidationError(f"Tracker already exists: {tracker.id}")
            session.add(apply_tracker(TrackerRow(id=tracker.id, category_id=category_id), tracker))
        logger.info(
            "Tracker created",
            extra={"tracker_id": str(tracker.id), "category_id": str(category_id), "habit": tracker.is_habit},
        )
        self._notify()
        return tracker

    def update(self, tracker_id: uuid.UUID, tracker: Tracker) -> Tracker:
        """Replace a tracker's name, emoji, color and schedule."""
        with self.session_factory() as session:
            row = session.get(TrackerRow, tracker_id)
            if row is None:
                raise NotFoundError("tracker", tracker_id)
            session.add(apply_tracker(row, tracker))
        self._notify()
        return dataclasses.replace(tracker, id=tracker_id)

    def delete(self, tracker_id: uuid.UUID) -> None:
        """Delete a tracker together with its completion records."""
        with self.session_factory() as session:
            row = session.get(TrackerRow, tracker_id)
            if row is None:
                raise NotFoundError("tracker", tracker_id)
            records = session.exec(select(RecordRow).where(RecordRow.tracker_id == tracker_id)).all()
            for record in records:
                session.delete(record)
            session.flush()
            session.delete(row)
        logger.info("Tracker deleted", extra={"tracker_id": str(tracker_id), "records_removed": len(records)})
        self._notify()
