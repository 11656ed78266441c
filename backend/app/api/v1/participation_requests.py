from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status

from app.api.deps import RequestServiceDep
from app.schemas import ParticipationRequestRead

router = APIRouter()


@router.get(
    "/{user_id}/requests",
    response_model=List[ParticipationRequestRead],
    summary="List own participation requests",
)
def list_user_requests(user_id: int, requests: RequestServiceDep) -> List[ParticipationRequestRead]:
    return [ParticipationRequestRead.from_model(r) for r in requests.list_by_requester(user_id)]


@router.post(
    "/{user_id}/requests",
    response_model=ParticipationRequestRead,
    status_code=status.HTTP_201_CREATED,
    summary="Request participation in an event",
)
def create_request(
    user_id: int,
    requests: RequestServiceDep,
    event_id: int = Query(..., alias="eventId"),
) -> ParticipationRequestRead:
    return ParticipationRequestRead.from_model(requests.submit(user_id, event_id))


@router.patch(
    "/{user_id}/requests/{request_id}/cancel",
    response_model=ParticipationRequestRead,
    summary="Cancel own participation request",
)
def cancel_request(
    user_id: int, request_id: int, requests: RequestServiceDep
) -> ParticipationRequestRead:
    return ParticipationRequestRead.from_model(requests.cancel(user_id, request_id))
