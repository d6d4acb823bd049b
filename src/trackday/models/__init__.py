"""SQLModel table exports."""

from .category import CategoryRow
from .tracker import RecordRow, TrackerRow

__all__ = [
    "CategoryRow",
    "RecordRow",
    "TrackerRow",
]
