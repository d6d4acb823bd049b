"""Concrete repository implementations using SQLModel."""

from .category import SQLModelCategoryRepository
from .record import SQLModelRecordRepository
from .tracker import SQLModelTrackerRepository

__all__ = [
    "SQLModelCategoryRepository",
    "SQLModelRecordRepository",
    "SQLModelTrackerRepository",
]
