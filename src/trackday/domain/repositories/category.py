"""Tracker category repository protocol."""

from __future__ import annotations

import uuid
from typing import Optional, Protocol

from ..entities import TrackerCategory


class CategoryRepository(Protocol):
    """Repository for managing tracker categories."""

    def get_by_id(self, category_id: uuid.UUID) -> Optional[TrackerCategory]:
        """Retrieve a category (with its trackers) by ID."""
        ...

    def get_by_title(self, title: str) -> Optional[TrackerCategory]:
        """Retrieve a category by its exact title."""
        ...

    def list_all(self) -> list[TrackerCategory]:
        """List categories by title, each with its trackers ordered by name."""
        ...

    def create(self, title: str) -> TrackerCategory:
        """Create a category, returning the existing one when the title is taken."""
        ...

    def update(self, category_id: uuid.UUID, title: str) -> TrackerCategory:
        """Rename a category."""
        ...

    def delete(self, category_id: uuid.UUID) -> None:
        """Delete a category; its trackers lose their category reference."""
        ...
