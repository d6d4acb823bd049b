"""Repository protocol definitions for domain layer."""

from .category import CategoryRepository
from .record import RecordRepository
from .tracker import TrackerRepository

__all__ = [
    "CategoryRepository",
    "RecordRepository",
    "TrackerRepository",
]
