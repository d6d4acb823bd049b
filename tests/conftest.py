"""Pytest configuration and shared fixtures for Trackday tests.

This module provides database fixtures, repository and service wiring, and
entity factories for testing the tracker engine without touching a real
application database.
"""

from __future__ import annotations

import uuid
from datetime import date

import pytest

from trackday.config import TestingConfig
from trackday.dates import WeekDay
from trackday.domain.entities import Color, Tracker, TrackerCategory
from trackday.events import ChangeNotifier
from trackday.infra.database import create_db_engine, create_session_factory, init_database
from trackday.infra.repositories import (
    SQLModelCategoryRepository,
    SQLModelRecordRepository,
    SQLModelTrackerRepository,
)
from trackday.services.ledger import CompletionLedger
from trackday.services.trackers import TrackerService

# Wednesday. The week of 2024-01-01 starts on a Monday.
TODAY = date(2024, 1, 10)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def test_config(tmp_path, monkeypatch):
    """Configuration rooted in a per-test temporary directory."""

    monkeypatch.delenv("TRACKDAY_DATABASE_URL", raising=False)
    monkeypatch.delenv("TRACKDAY_TIMEZONE", raising=False)
    return TestingConfig(tmp_path)


@pytest.fixture
def db_engine(test_config):
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    engine = create_db_engine(test_config)
    init_database(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory matching what the repositories expect."""

    return create_session_factory(db_engine)


@pytest.fixture
def notifier():
    return ChangeNotifier()


@pytest.fixture
def category_repo(session_factory, notifier):
    return SQLModelCategoryRepository(session_factory, notifier)


@pytest.fixture
def tracker_repo(session_factory, notifier):
    return SQLModelTrackerRepository(session_factory, notifier)


@pytest.fixture
def record_repo(session_factory, notifier):
    return SQLModelRecordRepository(session_factory, notifier)


@pytest.fixture
def stored_ledger(record_repo, notifier):
    """Ledger writing through to the record repository, with today pinned."""

    return CompletionLedger(store=record_repo, notifier=notifier, clock=lambda: TODAY)


@pytest.fixture
def service(category_repo, tracker_repo, record_repo, stored_ledger, notifier):
    return TrackerService(category_repo, tracker_repo, record_repo, stored_ledger, notifier=notifier)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def today() -> date:
    """The pinned "today" used by ledger clocks in these tests."""

    return TODAY


@pytest.fixture
def ledger():
    """In-memory ledger with today pinned to ``TODAY``."""

    return CompletionLedger(clock=lambda: TODAY)


@pytest.fixture
def tracker_factory():
    """Factory for tracker values.

    Returns:
        Callable: Function that builds Tracker instances with sensible defaults
    """

    def _create_tracker(
        name: str = "Exercise",
        schedule: tuple[WeekDay, ...] = (),
        emoji: str = "🏃",
        color: int = 0x33CF69,
    ) -> Tracker:
        return Tracker.new(name, emoji, Color(color), schedule)

    return _create_tracker


@pytest.fixture
def category_factory():
    """Factory for in-memory categories holding the given trackers."""

    def _create_category(title: str = "Health", trackers: tuple[Tracker, ...] = ()) -> TrackerCategory:
        return TrackerCategory(id=uuid.uuid4(), title=title, trackers=tuple(trackers))

    return _create_category
