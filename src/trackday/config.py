"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from datetime import tzinfo
from pathlib import Path
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_timezone(name: str) -> Optional[tzinfo]:
    """Resolve an IANA zone name from the environment; None means local time."""

    value = (os.getenv(name) or "").strip()
    if not value:
        return None
    try:
        return ZoneInfo(value)
    except ZoneInfoNotFoundError as exc:
        raise ValueError(f"{name} names an unknown time zone: {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Trackday"
    DB_FILENAME = "trackday.db"
    LOG_FILENAME = "trackday.log"
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("TRACKDAY_DEV_MODE", default=True)
        self.TIMEZONE = _env_timezone("TRACKDAY_TIMEZONE")
        self.DATABASE_URL = os.getenv("TRACKDAY_DATABASE_URL", self._build_sqlite_url())

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("TRACKDAY_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        engine_options: dict[str, Any] = {}
        if self.is_sqlite:
            engine_options["connect_args"] = {"check_same_thread": False}
        return engine_options


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class TestingConfig(BaseConfig):
    """Configuration for tests: explicit data directory, no WAL journal."""

    __test__ = False
    DEBUG = False
    TESTING = True
    SQLITE_PRAGMAS = {"foreign_keys": "on"}

    def __init__(self, data_dir: Path | str) -> None:
        self._data_dir_override = Path(data_dir)
        super().__init__()
        self.DEV_MODE = True
        self.DATABASE_URL = self._build_sqlite_url()

    def _resolve_data_dir(self) -> Path:
        path = self._data_dir_override.expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path
