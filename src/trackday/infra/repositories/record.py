"""SQLModel implementation of the completion record repository."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from sqlmodel import Session, select

from ...domain.entities import TrackerRecord
from ...errors import NotFoundError
from ...events import ChangeNotifier
from ...models import RecordRow, TrackerRow
from ..database import SessionFactory
from .mappers import record_from_row


class SQLModelRecordRepository:
    """SQLModel-based completion record repository implementation."""

    def __init__(self, session_factory: SessionFactory, notifier: Optional[ChangeNotifier] = None):
        """Initialize with a session factory and an optional change notifier."""
        self.session_factory = session_factory
        self.notifier = notifier

    def _notify(self) -> None:
        if self.notifier is not None:
            self.notifier.notify()

    @staticmethod
    def _find(session: Session, tracker_id: uuid.UUID, day: date) -> Optional[RecordRow]:
        return session.exec(
            select(RecordRow)
            .where(RecordRow.tracker_id == tracker_id)
            .where(RecordRow.day == day)
        ).first()

    def list_all(self) -> set[TrackerRecord]:
        """Return every completion record."""
        with self.session_factory() as session:
            return {record_from_row(row) for row in session.exec(select(RecordRow)).all()}

    def list_for_tracker(self, tracker_id: uuid.UUID) -> list[TrackerRecord]:
        """Return a tracker's records in ascending day order."""
        with self.session_factory() as session:
            rows = session.exec(
                select(RecordRow)
                .where(RecordRow.tracker_id == tracker_id)
                .order_by(RecordRow.day)  # type: ignore[arg-type]
            ).all()
            return [record_from_row(row) for row in rows]

    def add(self, tracker_id: uuid.UUID, day: date) -> TrackerRecord:
        """Insert a record; if one exists for that day it is returned unchanged."""
        with self.session_factory() as session:
            existing = self._find(session, tracker_id, day)
            if existing is not None:
                return record_from_row(existing)
            if session.get(TrackerRow, tracker_id) is None:
                raise NotFoundError("tracker", tracker_id)
            row = RecordRow(tracker_id=tracker_id, day=day)
            session.add(row)
            record = record_from_row(row)
        self._notify()
        return record

    def delete(self, tracker_id: uuid.UUID, day: date) -> None:
        """Delete the record for a tracker on a day."""
        with self.session_factory() as session:
            row = self._find(session, tracker_id, day)
            if row is None:
                raise NotFoundError("record", (tracker_id, day))
            session.delete(row)
        self._notify()

    def delete_for_tracker(self, tracker_id: uuid.UUID) -> int:
        """Delete every record of a tracker."""
        with self.session_factory() as session:
            rows = session.exec(select(RecordRow).where(RecordRow.tracker_id == tracker_id)).all()
            for row in rows:
                session.delete(row)
            removed = len(rows)
        if removed:
            self._notify()
        return removed
