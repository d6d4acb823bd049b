"""SQLModel implementation of the tracker category repository."""

from __future__ import annotations

import uuid
from collections import defaultdict
from typing import Optional

from sqlmodel import Session, select

from ...domain.entities import TrackerCategory
from ...errors import NotFoundError, ValidationError
from ...events import ChangeNotifier
from ...logging_config import get_logger
from ...models import CategoryRow, TrackerRow
from ..database import SessionFactory
from .mappers import category_from_row

logger = get_logger(__name__)


def _clean_title(title: str) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError("Category title must not be empty")
    return cleaned


class SQLModelCategoryRepository:
    """SQLModel-based category repository implementation."""

    def __init__(self, session_factory: SessionFactory, notifier: Optional[ChangeNotifier] = None):
        """Initialize with a session factory and an optional change notifier."""
        self.session_factory = session_factory
        self.notifier = notifier

    def _notify(self) -> None:
        if self.notifier is not None:
            self.notifier.notify()

    def _assemble(self, session: Session, rows: list[CategoryRow]) -> list[TrackerCategory]:
        """Attach each category's trackers, ordered by name."""
        if not rows:
            return []
        ids = [row.id for row in rows]
        statement = (
            select(TrackerRow)
            .where(TrackerRow.category_id.in_(ids))  # type: ignore[union-attr]
            .order_by(TrackerRow.name)  # type: ignore[arg-type]
        )
        by_category: dict[uuid.UUID, list[TrackerRow]] = defaultdict(list)
        for tracker in session.exec(statement).all():
            by_category[tracker.category_id].append(tracker)  # type: ignore[index]
        return [category_from_row(row, by_category[row.id]) for row in rows]

    def get_by_id(self, category_id: uuid.UUID) -> Optional[TrackerCategory]:
        """Retrieve a category by ID."""
        with self.session_factory() as session:
            row = session.get(CategoryRow, category_id)
            if row is None:
                return None
            return self._assemble(session, [row])[0]

    def get_by_title(self, title: str) -> Optional[TrackerCategory]:
        """Retrieve a category by title."""
        with self.session_factory() as session:
            row = session.exec(select(CategoryRow).where(CategoryRow.title == title.strip())).first()
            if row is None:
                return None
            return self._assemble(session, [row])[0]

    def list_all(self) -> list[TrackerCategory]:
        """List all categories ordered by title."""
        with self.session_factory() as session:
            rows = list(session.exec(select(CategoryRow).order_by(CategoryRow.title)).all())  # type: ignore[arg-type]
            return self._assemble(session, rows)

    def create(self, title: str) -> TrackerCategory:
        """Create a category, or return the one that already has this title."""
        cleaned = _clean_title(title)
        with self.session_factory() as session:
            existing = session.exec(select(CategoryRow).where(CategoryRow.title == cleaned)).first()
            if existing is not None:
                return self._assemble(session, [existing])[0]
            row = CategoryRow(title=cleaned)
            session.add(row)
            session.flush()
            created = category_from_row(row, [])
        logger.info("Category created", extra={"category_id": str(created.id), "title": cleaned})
        self._notify()
        return created

    def update(self, category_id: uuid.UUID, title: str) -> TrackerCategory:
        """Rename a category."""
        cleaned = _clean_title(title)
        with self.session_factory() as session:
            row = session.get(CategoryRow, category_id)
            if row is None:
                raise NotFoundError("category", category_id)
            clash = session.exec(
                select(CategoryRow).where(CategoryRow.title == cleaned, CategoryRow.id != category_id)
            ).first()
            if clash is not None:
                raise ValidationError(f"Category title already in use: {cleaned!r}")
            row.title = cleaned
            session.add(row)
            session.flush()
            updated = self._assemble(session, [row])[0]
        self._notify()
        return updated

    def delete(self, category_id: uuid.UUID) -> None:
        """Delete a category; its trackers are kept without a category."""
        with self.session_factory() as session:
            row = session.get(CategoryRow, category_id)
            if row is None:
                raise NotFoundError("category", category_id)
            orphans = session.exec(select(TrackerRow).where(TrackerRow.category_id == category_id)).all()
            for tracker in orphans:
                tracker.category_id = None
                session.add(tracker)
            session.flush()
            session.delete(row)
        logger.info(
            "Category deleted",
            extra={"category_id": str(category_id), "orphaned_trackers": len(orphans)},
        )
        self._notify()
