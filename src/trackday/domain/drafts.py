"""Creation-form state for new trackers and its readiness predicate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..dates import WeekDay
from ..errors import ValidationError
from .entities import Color, Tracker


class TrackerKind(Enum):
    HABIT = "habit"
    IRREGULAR_EVENT = "irregular"


@dataclass
class TrackerDraft:
    """What the user has entered so far in the "new tracker" flow.

    The create action is enabled only once :attr:`is_ready` holds; irregular
    events never ask for a schedule.
    """

    kind: TrackerKind = TrackerKind.HABIT
    name: str = ""
    category_title: Optional[str] = None
    schedule: set[WeekDay] = field(default_factory=set)
    emoji: Optional[str] = None
    color: Optional[Color] = None

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.name.strip():
            missing.append("name")
        if not (self.category_title or "").strip():
            missing.append("category")
        if self.kind is TrackerKind.HABIT and not self.schedule:
            missing.append("schedule")
        if not self.emoji:
            missing.append("emoji")
        if self.color is None:
            missing.append("color")
        return missing

    @property
    def is_ready(self) -> bool:
        return not self.missing_fields()

    def build(self) -> Tracker:
        """Return the tracker this draft describes, or raise ValidationError."""

        missing = self.missing_fields()
        if missing:
            raise ValidationError(f"Tracker draft is incomplete: missing {', '.join(missing)}")
        schedule = self.schedule if self.kind is TrackerKind.HABIT else ()
        return Tracker.new(self.name, self.emoji or "", self.color, schedule)  # type: ignore[arg-type]
