"""Tracker and completion record tables."""

from __future__ import annotations

import uuid
from datetime import date
from typing import ClassVar, Optional

from sqlalchemy import Column, ForeignKey, Uuid
from sqlmodel import Field, SQLModel


class TrackerRow(SQLModel, table=True):
    """Persisted tracker.

    ``schedule`` holds comma-joined weekday ordinals ("" for irregular
    events) and ``color`` a lowercase ``#rrggbb`` string.
    """

    __tablename__: ClassVar[str] = "tracker"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(nullable=False, index=True, max_length=128)
    emoji: str = Field(nullable=False, max_length=16)
    color: str = Field(nullable=False, max_length=7)
    schedule: str = Field(default="", nullable=False, max_length=32)
    category_id: Optional[uuid.UUID] = Field(
        default=None,
        sa_column=Column(
            Uuid,
            ForeignKey("tracker_category.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
    )


class RecordRow(SQLModel, table=True):
    """A tracker completed on a calendar day; one row per (tracker, day)."""

    __tablename__: ClassVar[str] = "tracker_record"

    tracker_id: uuid.UUID = Field(
        sa_column=Column(
            Uuid,
            ForeignKey("tracker.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    day: date = Field(primary_key=True, index=True)
