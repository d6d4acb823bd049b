"""Tracker service: repositories, ledger, filter and statistics behind one API."""

from __future__ import annotations

import uuid
from contextlib import nullcontext
from datetime import tzinfo
from typing import ContextManager, Optional, Union

from ..dates import DateLike
from ..domain.drafts import TrackerDraft
from ..domain.entities import Tracker, TrackerCategory
from ..domain.repositories import CategoryRepository, RecordRepository, TrackerRepository
from ..errors import NotFoundError
from ..events import ChangeNotifier
from ..logging_config import get_logger
from .ledger import CompletionLedger, ToggleResult
from .statistics import Statistics, compute_statistics, finished_trackers_count
from .visibility import Board, BoardQuery, build_board

logger = get_logger(__name__)


class TrackerService:
    """Operations a tracker screen needs, wired to injected collaborators."""

    def __init__(
        self,
        categories: CategoryRepository,
        trackers: TrackerRepository,
        records: RecordRepository,
        ledger: CompletionLedger,
        *,
        notifier: Optional[ChangeNotifier] = None,
        tz: Optional[tzinfo] = None,
    ):
        self.categories = categories
        self.trackers = trackers
        self.records = records
        self.ledger = ledger
        self.notifier = notifier
        self.tz = tz

    def _deferred(self) -> ContextManager[None]:
        """Deliver one notification after a multi-step change is fully applied."""
        return self.notifier.deferred() if self.notifier is not None else nullcontext()

    # Categories
    def list_categories(self) -> list[TrackerCategory]:
        return self.categories.list_all()

    def create_category(self, title: str) -> TrackerCategory:
        return self.categories.create(title)

    def rename_category(self, category_id: uuid.UUID, title: str) -> TrackerCategory:
        category = self.categories.update(category_id, title)
        logger.info("Category renamed", extra={"category_id": str(category_id), "title": category.title})
        return category

    def delete_category(self, category_id: uuid.UUID) -> None:
        self.categories.delete(category_id)

    # Trackers
    def list_trackers(self) -> list[Tracker]:
        return self.trackers.list_all()

    def get_tracker(self, tracker_id: uuid.UUID) -> Optional[Tracker]:
        return self.trackers.get_by_id(tracker_id)

    def create_tracker(self, tracker: Union[Tracker, TrackerDraft], category_title: Optional[str] = None) -> Tracker:
        """Create a tracker, creating its category on first use of the title.

        A draft carries its own category title; it is validated before
        anything is written.
        """

        if isinstance(tracker, TrackerDraft):
            category_title = category_title or tracker.category_title
            tracker = tracker.build()
        with self._deferred():
            category = self.categories.create(category_title or "")
            return self.trackers.create(tracker, category.id)

    def update_tracker(self, tracker_id: uuid.UUID, tracker: Tracker) -> Tracker:
        updated = self.trackers.update(tracker_id, tracker)
        logger.info("Tracker updated", extra={"tracker_id": str(tracker_id)})
        return updated

    def delete_tracker(self, tracker_id: uuid.UUID) -> None:
        with self._deferred():
            self.trackers.delete(tracker_id)
            self.ledger.delete_all(tracker_id)

    # Completions
    def toggle_completion(self, tracker_id: uuid.UUID, day: DateLike) -> ToggleResult:
        if self.trackers.get_by_id(tracker_id) is None:
            raise NotFoundError("tracker", tracker_id)
        result = self.ledger.toggle(tracker_id, day)
        logger.info(
            "Completion toggled",
            extra={"tracker_id": str(tracker_id), "completed": result.now_completed},
        )
        return result

    def completion_count(self, tracker_id: uuid.UUID) -> int:
        return self.ledger.completion_count(tracker_id)

    def reload(self) -> None:
        """Re-read completion records from storage into the ledger."""

        self.ledger.reload(self.records.list_all())

    # Views
    def board(self, query: BoardQuery) -> Board:
        return build_board(self.list_categories(), query, self.ledger, tz=self.tz)

    def statistics(self) -> Statistics:
        return compute_statistics(self.ledger.records(), self.list_trackers())

    def finished_trackers_count(self) -> int:
        """Number of trackers completed at least once."""
        return finished_trackers_count(self.ledger.records())
