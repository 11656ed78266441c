"""Initiator-side event endpoints, including moderation of incoming requests."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status

from app.api.deps import EventServiceDep, RequestServiceDep
from app.schemas import (
    EventCreate,
    EventFullRead,
    EventRequestStatusUpdateRequest,
    EventRequestStatusUpdateResult,
    EventShortRead,
    EventUserUpdate,
    ParticipationRequestRead,
)

router = APIRouter()


@router.get("/{user_id}/events", response_model=List[EventShortRead], summary="List own events")
def list_user_events(
    user_id: int,
    events: EventServiceDep,
    offset: int = Query(default=0, ge=0, alias="from"),
    size: int = Query(default=10, gt=0),
) -> List[EventShortRead]:
    return events.get_user_events(user_id, offset, size)


@router.post(
    "/{user_id}/events",
    response_model=EventFullRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create event",
)
def create_user_event(
    user_id: int, payload: EventCreate, events: EventServiceDep
) -> EventFullRead:
    return events.add_user_event(user_id, payload)


@router.get("/{user_id}/events/{event_id}", response_model=EventFullRead, summary="Get own event")
def get_user_event(user_id: int, event_id: int, events: EventServiceDep) -> EventFullRead:
    return events.get_user_event(user_id, event_id)


@router.patch(
    "/{user_id}/events/{event_id}", response_model=EventFullRead, summary="Update own event"
)
def update_user_event(
    user_id: int, event_id: int, payload: EventUserUpdate, events: EventServiceDep
) -> EventFullRead:
    return events.update_user_event(user_id, event_id, payload)


@router.get(
    "/{user_id}/events/{event_id}/requests",
    response_model=List[ParticipationRequestRead],
    summary="List requests for own event",
)
def list_event_requests(
    user_id: int, event_id: int, requests: RequestServiceDep
) -> List[ParticipationRequestRead]:
    return [
        ParticipationRequestRead.from_model(r)
        for r in requests.list_for_organizer_event(user_id, event_id)
    ]


@router.patch(
    "/{user_id}/events/{event_id}/requests",
    response_model=EventRequestStatusUpdateResult,
    summary="Confirm or reject requests for own event",
)
def update_event_requests(
    user_id: int,
    event_id: int,
    payload: EventRequestStatusUpdateRequest,
    requests: RequestServiceDep,
) -> EventRequestStatusUpdateResult:
    confirmed, rejected = requests.bulk_update_status(
        user_id, event_id, payload.request_ids, payload.status
    )
    return EventRequestStatusUpdateResult(
        confirmed_requests=[ParticipationRequestRead.from_model(r) for r in confirmed],
        rejected_requests=[ParticipationRequestRead.from_model(r) for r in rejected],
    )
