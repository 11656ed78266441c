from __future__ import annotations

from typing import List, Literal

from pydantic import Field

from app.models import ParticipationRequest
from app.schemas.common import CamelModel, FormattedDatetime


class ParticipationRequestRead(CamelModel):
    id: int
    created: FormattedDatetime
    event: int
    requester: int
    status: str

    @classmethod
    def from_model(cls, request: ParticipationRequest) -> "ParticipationRequestRead":
        return cls(
            id=request.id,
            created=request.created,
            event=request.event_id,
            requester=request.requester_id,
            status=request.status,
        )


class EventRequestStatusUpdateRequest(CamelModel):
    request_ids: List[int] = Field(min_length=1)
    status: Literal["CONFIRMED", "REJECTED"]


class EventRequestStatusUpdateResult(CamelModel):
    confirmed_requests: List[ParticipationRequestRead] = Field(default_factory=list)
    rejected_requests: List[ParticipationRequestRead] = Field(default_factory=list)
