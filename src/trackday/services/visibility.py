"""Which trackers to show for a date, a search text and a status filter."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import date, tzinfo
from enum import Enum
from typing import Iterable, Optional, Protocol, Sequence

from ..dates import DateLike, WeekDay, day_key, weekday_for
from ..domain.entities import Tracker, TrackerCategory, TrackerFilter


class CompletionLookup(Protocol):
    """Anything that can answer "was tracker X completed on day Y"."""

    def is_completed(self, tracker_id: uuid.UUID, day: DateLike) -> bool:  # pragma: no cover - interface
        ...


def _matches_search(tracker: Tracker, needle: str) -> bool:
    return not needle or needle in tracker.name.lower()


def _keep(
    categories: Iterable[TrackerCategory], predicate
) -> list[TrackerCategory]:
    """Filter trackers inside each category and drop categories left empty."""

    kept = []
    for category in categories:
        trackers = [tracker for tracker in category.trackers if predicate(tracker)]
        if trackers:
            kept.append(category.with_trackers(trackers))
    return kept


def visible_categories(
    categories: Sequence[TrackerCategory],
    reference_date: DateLike,
    search_text: str = "",
    status_filter: Optional[TrackerFilter] = None,
    ledger: Optional[CompletionLookup] = None,
    *,
    tz: Optional[tzinfo] = None,
) -> list[TrackerCategory]:
    """Return the non-empty categories to render, in their input order.

    A tracker is visible when it occurs on the reference date's weekday (or
    has no schedule) and its name contains ``search_text`` ignoring case.
    COMPLETED and NOT_COMPLETED then narrow by completion on that date; ALL
    and TODAY pass everything through.
    """

    current: WeekDay = weekday_for(reference_date, tz)
    needle = (search_text or "").lower()

    shown = _keep(
        categories,
        lambda tracker: tracker.occurs_on(current) and _matches_search(tracker, needle),
    )

    if status_filter is None or not status_filter.is_status_filter:
        return shown
    if ledger is None:
        raise ValueError(f"A completion ledger is required for the {status_filter.value!r} filter")

    day = day_key(reference_date, tz)
    want_completed = status_filter is TrackerFilter.COMPLETED
    return _keep(shown, lambda tracker: ledger.is_completed(tracker.id, day) == want_completed)


def has_trackers_on(
    categories: Iterable[TrackerCategory], reference_date: DateLike, *, tz: Optional[tzinfo] = None
) -> bool:
    """True when any tracker is scheduled for the date, ignoring search and filters."""

    current = weekday_for(reference_date, tz)
    return any(tracker.occurs_on(current) for category in categories for tracker in category.trackers)


@dataclass(frozen=True)
class BoardQuery:
    """The UI-driven query state behind the tracker board."""

    reference_date: date
    search_text: str = ""
    status_filter: Optional[TrackerFilter] = None

    def with_search(self, text: str) -> "BoardQuery":
        return replace(self, search_text=text or "")

    def with_date(self, day: DateLike) -> "BoardQuery":
        return replace(self, reference_date=day_key(day))

    def select_filter(self, selected: TrackerFilter, today: date) -> "BoardQuery":
        """Apply a choice from the filter list.

        TODAY jumps to today's date and, like ALL, clears the status filter;
        COMPLETED and NOT_COMPLETED are kept.
        """

        if selected is TrackerFilter.TODAY:
            return replace(self, reference_date=today, status_filter=None)
        if selected is TrackerFilter.ALL:
            return replace(self, status_filter=None)
        return replace(self, status_filter=selected)

    @property
    def is_narrowed(self) -> bool:
        """True when search text or a completion status filter is active."""

        return bool(self.search_text) or (
            self.status_filter is not None and self.status_filter.is_status_filter
        )


class EmptyState(Enum):
    NONE = "none"
    NO_TRACKERS = "no-trackers"
    NOTHING_FOUND = "nothing-found"


@dataclass(frozen=True)
class Board:
    categories: list[TrackerCategory]
    filters_available: bool
    empty_state: EmptyState

    @property
    def tracker_count(self) -> int:
        return sum(len(category.trackers) for category in self.categories)


def build_board(
    categories: Sequence[TrackerCategory],
    query: BoardQuery,
    ledger: Optional[CompletionLookup] = None,
    *,
    tz: Optional[tzinfo] = None,
) -> Board:
    """Filter the categories for ``query`` and derive the board's UI flags."""

    shown = visible_categories(
        categories,
        query.reference_date,
        query.search_text,
        query.status_filter,
        ledger,
        tz=tz,
    )
    if shown:
        empty_state = EmptyState.NONE
    elif query.is_narrowed:
        empty_state = EmptyState.NOTHING_FOUND
    else:
        empty_state = EmptyState.NO_TRACKERS
    return Board(
        categories=shown,
        filters_available=has_trackers_on(categories, query.reference_date, tz=tz),
        empty_state=empty_state,
    )
