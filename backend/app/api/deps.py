from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.db import SessionDep
from app.repositories import (
    CategoryRepository,
    EventRepository,
    HitRepository,
    RequestRepository,
    UserRepository,
)
from app.services.categories import CategoryService
from app.services.events import EventService
from app.services.participation_requests import ParticipationRequestService
from app.services.stats import StatsService
from app.services.users import UserService


def get_request_service(session: SessionDep) -> ParticipationRequestService:
    return ParticipationRequestService(
        requests=RequestRepository(session),
        users=UserRepository(session),
        events=EventRepository(session),
    )


def get_stats_service(session: SessionDep) -> StatsService:
    return StatsService(HitRepository(session))


def get_event_service(session: SessionDep) -> EventService:
    return EventService(
        events=EventRepository(session),
        categories=CategoryRepository(session),
        users=UserRepository(session),
        requests=RequestRepository(session),
        stats=StatsService(HitRepository(session)),
    )


def get_category_service(session: SessionDep) -> CategoryService:
    return CategoryService(CategoryRepository(session), EventRepository(session))


def get_user_service(session: SessionDep) -> UserService:
    return UserService(
        UserRepository(session),
        EventRepository(session),
        RequestRepository(session),
    )


def get_client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


RequestServiceDep = Annotated[ParticipationRequestService, Depends(get_request_service)]
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
EventServiceDep = Annotated[EventService, Depends(get_event_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ClientIpDep = Annotated[str, Depends(get_client_ip)]
