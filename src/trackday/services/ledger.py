"""In-memory completion ledger with optional write-through to storage."""

from __future__ import annotations

import uuid
from collections import defaultdict
from contextlib import nullcontext
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Callable, ContextManager, Iterable, Optional

from .. import dates
from ..dates import DateLike, day_key
from ..domain.entities import TrackerRecord
from ..domain.repositories import RecordRepository
from ..errors import InvalidDateError, NotFoundError
from ..events import ChangeNotifier
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    now_completed: bool


@dataclass(frozen=True)
class MarkResult:
    record: TrackerRecord
    was_already_completed: bool


class CompletionLedger:
    """The set of completion records, unique per (tracker, calendar day).

    When a ``store`` is supplied every mutation is written to it first and
    applied in memory only once the store call returned, so a failing store
    leaves the ledger as it was. Store notifications are held back on
    ``notifier`` until the in-memory state matches storage.
    """

    def __init__(
        self,
        records: Iterable[TrackerRecord] = (),
        *,
        store: Optional[RecordRepository] = None,
        notifier: Optional[ChangeNotifier] = None,
        clock: Optional[Callable[[], date]] = None,
        tz: Optional[tzinfo] = None,
    ):
        self.store = store
        self.notifier = notifier
        self.tz = tz
        self._clock = clock or (lambda: dates.today(tz))
        self._days: dict[uuid.UUID, set[date]] = defaultdict(set)
        self.reload(records)

    @classmethod
    def from_store(cls, store: RecordRepository, **kwargs) -> "CompletionLedger":
        return cls(store.list_all(), store=store, **kwargs)

    def reload(self, records: Iterable[TrackerRecord]) -> None:
        """Replace the in-memory state with a fresh snapshot."""

        self._days = defaultdict(set)
        for record in records:
            self._days[record.tracker_id].add(record.day)

    def _deferred(self) -> ContextManager[None]:
        return self.notifier.deferred() if self.notifier is not None else nullcontext()

    def _check_not_future(self, day: date) -> None:
        current = self._clock()
        if day > current:
            raise InvalidDateError(day, current)

    def is_completed(self, tracker_id: uuid.UUID, day: DateLike) -> bool:
        days = self._days.get(tracker_id)
        return bool(days) and day_key(day, self.tz) in days  # type: ignore[operator]

    def toggle(self, tracker_id: uuid.UUID, day: DateLike) -> ToggleResult:
        """Flip completion of a tracker on a day; future days are rejected."""

        key = day_key(day, self.tz)
        self._check_not_future(key)
        with self._deferred():
            if self.is_completed(tracker_id, key):
                self._remove_stored(tracker_id, key)
                self._discard(tracker_id, key)
                result = ToggleResult(now_completed=False)
            else:
                if self.store is not None:
                    self.store.add(tracker_id, key)
                self._days[tracker_id].add(key)
                result = ToggleResult(now_completed=True)
        logger.debug(
            "Completion toggled",
            extra={"tracker_id": str(tracker_id), "day": key.isoformat(), "completed": result.now_completed},
        )
        return result

    def mark_completed(self, tracker_id: uuid.UUID, day: DateLike) -> MarkResult:
        """Record a completion; an existing one is reported rather than duplicated."""

        key = day_key(day, self.tz)
        self._check_not_future(key)
        record = TrackerRecord(tracker_id=tracker_id, day=key)
        if self.is_completed(tracker_id, key):
            return MarkResult(record=record, was_already_completed=True)
        with self._deferred():
            if self.store is not None:
                record = self.store.add(tracker_id, key)
            self._days[tracker_id].add(key)
        return MarkResult(record=record, was_already_completed=False)

    def completion_count(self, tracker_id: uuid.UUID) -> int:
        return len(self._days.get(tracker_id, ()))

    def completed_days(self, tracker_id: uuid.UUID) -> list[date]:
        return sorted(self._days.get(tracker_id, ()))

    def delete_all(self, tracker_id: uuid.UUID) -> int:
        """Forget every record of a tracker, e.g. after the tracker was deleted."""

        with self._deferred():
            if self.store is not None:
                self.store.delete_for_tracker(tracker_id)
            return len(self._days.pop(tracker_id, ()))

    def records(self) -> frozenset[TrackerRecord]:
        return frozenset(
            TrackerRecord(tracker_id=tracker_id, day=day)
            for tracker_id, days in self._days.items()
            for day in days
        )

    def _remove_stored(self, tracker_id: uuid.UUID, day: date) -> None:
        if self.store is None:
            return
        try:
            self.store.delete(tracker_id, day)
        except NotFoundError:
            logger.warning(
                "Completion missing from storage, treating as removed",
                extra={"tracker_id": str(tracker_id), "day": day.isoformat()},
            )

    def _discard(self, tracker_id: uuid.UUID, day: date) -> None:
        days = self._days.get(tracker_id)
        if days is None:
            return
        days.discard(day)
        if not days:
            del self._days[tracker_id]

    def __len__(self) -> int:
        return sum(len(days) for days in self._days.values())

    def __contains__(self, record: object) -> bool:
        if not isinstance(record, TrackerRecord):
            return False
        return self.is_completed(record.tracker_id, record.day)
