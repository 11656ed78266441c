from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, Query, Request

from app.api.deps import ClientIpDep, EventServiceDep
from app.schemas import EventAdminUpdate, EventFullRead, EventShortRead
from app.services.stats import parse_datetime_param

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[EventShortRead], summary="Search published events")
def list_public_events(
    request: Request,
    events: EventServiceDep,
    ip: ClientIpDep,
    text: Optional[str] = None,
    categories: Optional[List[int]] = Query(default=None),
    paid: Optional[bool] = None,
    range_start: Optional[str] = Query(default=None, alias="rangeStart"),
    range_end: Optional[str] = Query(default=None, alias="rangeEnd"),
    only_available: bool = Query(default=False, alias="onlyAvailable"),
    sort: Optional[Literal["EVENT_DATE", "VIEWS"]] = None,
    offset: int = Query(default=0, ge=0, alias="from"),
    size: int = Query(default=10, gt=0),
) -> List[EventShortRead]:
    return events.get_public_events(
        ip=ip,
        uri=request.url.path,
        text=text,
        categories=categories,
        paid=paid,
        range_start=parse_datetime_param(range_start, "rangeStart") if range_start else None,
        range_end=parse_datetime_param(range_end, "rangeEnd") if range_end else None,
        only_available=only_available,
        sort=sort or "EVENT_DATE",
        offset=offset,
        size=size,
    )


@router.get("/{event_id}", response_model=EventFullRead, summary="Get published event")
def get_public_event(
    event_id: int, request: Request, events: EventServiceDep, ip: ClientIpDep
) -> EventFullRead:
    return events.get_public_event(event_id, ip=ip, uri=request.url.path)


@admin_router.get("", response_model=List[EventFullRead], summary="Search all events")
def list_admin_events(
    events: EventServiceDep,
    users: Optional[List[int]] = Query(default=None),
    states: Optional[List[Literal["PENDING", "PUBLISHED", "CANCELED"]]] = Query(default=None),
    categories: Optional[List[int]] = Query(default=None),
    range_start: Optional[str] = Query(default=None, alias="rangeStart"),
    range_end: Optional[str] = Query(default=None, alias="rangeEnd"),
    offset: int = Query(default=0, ge=0, alias="from"),
    size: int = Query(default=10, gt=0),
) -> List[EventFullRead]:
    return events.get_admin_events(
        users=users,
        states=states,
        categories=categories,
        range_start=parse_datetime_param(range_start, "rangeStart") if range_start else None,
        range_end=parse_datetime_param(range_end, "rangeEnd") if range_end else None,
        offset=offset,
        size=size,
    )


@admin_router.patch("/{event_id}", response_model=EventFullRead, summary="Moderate event")
def update_admin_event(
    event_id: int, payload: EventAdminUpdate, events: EventServiceDep
) -> EventFullRead:
    return events.update_admin_event(event_id, payload)
