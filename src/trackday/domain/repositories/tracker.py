"""Tracker repository protocol."""

from __future__ import annotations

import uuid
from typing import Optional, Protocol

from ..entities import Tracker


class TrackerRepository(Protocol):
    """Repository for managing trackers."""

    def get_by_id(self, tracker_id: uuid.UUID) -> Optional[Tracker]:
        """Retrieve a tracker by ID."""
        ...

    def list_all(self) -> list[Tracker]:
        """List all trackers ordered by name."""
        ...

    def create(self, tracker: Tracker, category_id: uuid.UUID) -> Tracker:
        """Create a tracker inside an existing category."""
        ...

    def update(self, tracker_id: uuid.UUID, tracker: Tracker) -> Tracker:
        """Replace a tracker's attributes; its category is kept."""
        ...

    def delete(self, tracker_id: uuid.UUID) -> None:
        """Delete a tracker and all of its completion records."""
        ...
