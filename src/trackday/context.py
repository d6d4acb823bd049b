"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from .config import BaseConfig
from .events import ChangeNotifier
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import (
    SQLModelCategoryRepository,
    SQLModelRecordRepository,
    SQLModelTrackerRepository,
)
from .logging_config import get_logger
from .services.ledger import CompletionLedger
from .services.trackers import TrackerService

logger = get_logger(__name__)


@dataclass
class AppContext:
    """Centralized application context with services and state."""

    # Configuration
    config: BaseConfig

    # Persistence
    engine: Engine
    session_factory: SessionFactory

    # Repositories
    category_repo: SQLModelCategoryRepository
    tracker_repo: SQLModelTrackerRepository
    record_repo: SQLModelRecordRepository

    # Change notification shared by all repositories
    notifier: ChangeNotifier

    # Core
    ledger: CompletionLedger
    service: TrackerService

    def dispose(self) -> None:
        self.engine.dispose()


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    engine, session_factory = bootstrap_database(config)
    notifier = ChangeNotifier()

    category_repo = SQLModelCategoryRepository(session_factory, notifier)
    tracker_repo = SQLModelTrackerRepository(session_factory, notifier)
    record_repo = SQLModelRecordRepository(session_factory, notifier)

    ledger = CompletionLedger.from_store(record_repo, notifier=notifier, tz=config.TIMEZONE)
    service = TrackerService(
        category_repo, tracker_repo, record_repo, ledger, notifier=notifier, tz=config.TIMEZONE
    )

    logger.info("Application context ready", extra={"records": len(ledger)})

    return AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        category_repo=category_repo,
        tracker_repo=tracker_repo,
        record_repo=record_repo,
        notifier=notifier,
        ledger=ledger,
        service=service,
    )
