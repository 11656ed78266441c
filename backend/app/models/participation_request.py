from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class ParticipationStatus:
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"
    CANCELED = "CANCELED"


class ParticipationRequest(SQLModel, table=True):
    """A user's request to take part in an event."""

    __tablename__ = "participation_requests"
    __table_args__ = (
        UniqueConstraint("requester_id", "event_id", name="uq_requests_requester_event"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    requester_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    event_id: int = Field(foreign_key="events.id", nullable=False, index=True)
    status: str = Field(default=ParticipationStatus.PENDING, max_length=20, index=True)
    created: datetime = Field(default_factory=datetime.now, nullable=False)
