from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator

from app.schemas.category import CategoryRead
from app.schemas.common import CamelModel, FormattedDatetime
from app.schemas.user import UserShort


class Location(CamelModel):
    lat: float
    lon: float


class EventCreate(CamelModel):
    annotation: str = Field(min_length=20, max_length=2000)
    category: int = Field(gt=0)
    description: str = Field(min_length=20, max_length=7000)
    event_date: FormattedDatetime
    location: Location
    paid: bool = False
    participant_limit: int = Field(default=0, ge=0)
    request_moderation: bool = True
    title: str = Field(min_length=3, max_length=120)

    @field_validator("annotation", "description", "title")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class EventUpdateBase(CamelModel):
    """Partial update; only fields that were sent are applied."""

    annotation: Optional[str] = Field(default=None, min_length=20, max_length=2000)
    category: Optional[int] = Field(default=None, gt=0)
    description: Optional[str] = Field(default=None, min_length=20, max_length=7000)
    event_date: Optional[FormattedDatetime] = None
    location: Optional[Location] = None
    paid: Optional[bool] = None
    participant_limit: Optional[int] = Field(default=None, ge=0)
    request_moderation: Optional[bool] = None
    title: Optional[str] = Field(default=None, min_length=3, max_length=120)


class EventUserUpdate(EventUpdateBase):
    state_action: Optional[Literal["SEND_TO_REVIEW", "CANCEL_REVIEW"]] = None


class EventAdminUpdate(EventUpdateBase):
    state_action: Optional[Literal["PUBLISH_EVENT", "REJECT_EVENT"]] = None


class EventShortRead(CamelModel):
    id: int
    annotation: str
    category: CategoryRead
    confirmed_requests: int = 0
    event_date: FormattedDatetime
    initiator: UserShort
    paid: bool
    title: str
    views: int = 0


class EventFullRead(EventShortRead):
    created_on: FormattedDatetime
    description: str
    location: Location
    participant_limit: int
    published_on: Optional[FormattedDatetime] = None
    request_moderation: bool
    state: str
