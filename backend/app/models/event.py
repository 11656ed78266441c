from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class EventState:
    PENDING = "PENDING"
    PUBLISHED = "PUBLISHED"
    CANCELED = "CANCELED"


class Event(SQLModel, table=True):
    """Event that users can request to participate in."""

    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=120)
    annotation: str = Field(max_length=2000)
    description: str = Field(max_length=7000)
    category_id: int = Field(foreign_key="categories.id", nullable=False, index=True)
    initiator_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    event_date: datetime = Field(nullable=False, index=True)
    created_on: datetime = Field(default_factory=datetime.now, nullable=False)
    published_on: Optional[datetime] = None
    lat: float
    lon: float
    paid: bool = Field(default=False)
    # 0 означает отсутствие ограничения
    participant_limit: int = Field(default=0)
    request_moderation: bool = Field(default=True)
    state: str = Field(default=EventState.PENDING, max_length=20, index=True)
