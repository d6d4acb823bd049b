"""Tracker category table."""

from __future__ import annotations

import uuid
from typing import ClassVar

from sqlmodel import Field, SQLModel


class CategoryRow(SQLModel, table=True):
    """Persisted tracker category; titles are unique."""

    __tablename__: ClassVar[str] = "tracker_category"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str = Field(nullable=False, unique=True, index=True, max_length=64)
