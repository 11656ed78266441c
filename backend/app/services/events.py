"""
Event management: creation and edits by the initiator, moderation by an
administrator and public search.

Public lookups record a hit for the requested URI; the ``views`` value
shown on events is the number of unique IPs that opened ``/events/{id}``.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

from app.core.config import settings
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.models import Event, EventState, ParticipationStatus
from app.repositories import (
    CategoryRepository,
    EventRepository,
    RequestRepository,
    UserRepository,
)
from app.schemas import (
    CategoryRead,
    EventAdminUpdate,
    EventCreate,
    EventFullRead,
    EventShortRead,
    EventUserUpdate,
    Location,
    UserShort,
)
from app.schemas.event import EventUpdateBase
from app.services.stats import StatsService

logger = logging.getLogger(__name__)

# Минимальный запас времени до начала события
USER_EVENT_LEAD_TIME = timedelta(hours=2)
PUBLISH_LEAD_TIME = timedelta(hours=1)

SORT_EVENT_DATE = "EVENT_DATE"
SORT_VIEWS = "VIEWS"


def event_uri(event_id: int) -> str:
    return f"/events/{event_id}"


class EventService:
    def __init__(
        self,
        events: EventRepository,
        categories: CategoryRepository,
        users: UserRepository,
        requests: RequestRepository,
        stats: StatsService,
    ) -> None:
        self.events = events
        self.categories = categories
        self.users = users
        self.requests = requests
        self.stats = stats

    # --- initiator ---

    def add_user_event(self, user_id: int, payload: EventCreate) -> EventFullRead:
        if not self.users.exists(user_id):
            raise NotFoundError(f"User with id = {user_id} was not found.")
        if self.categories.get(payload.category) is None:
            raise NotFoundError(f"Category with id = {payload.category} was not found.")
        self._ensure_lead_time(payload.event_date, USER_EVENT_LEAD_TIME)

        event = Event(
            title=payload.title,
            annotation=payload.annotation,
            description=payload.description,
            category_id=payload.category,
            initiator_id=user_id,
            event_date=payload.event_date,
            created_on=datetime.now(),
            lat=payload.location.lat,
            lon=payload.location.lon,
            paid=payload.paid,
            participant_limit=payload.participant_limit,
            request_moderation=payload.request_moderation,
            state=EventState.PENDING,
        )
        event = self.events.save(event)
        logger.info(f"Event {event.id} created by user {user_id}")
        return self._to_full([event])[0]

    def get_user_events(self, user_id: int, offset: int, size: int) -> list[EventShortRead]:
        if not self.users.exists(user_id):
            raise NotFoundError(f"User with id = {user_id} was not found.")
        return self._to_short(self.events.list_by_initiator(user_id, offset, size))

    def get_user_event(self, user_id: int, event_id: int) -> EventFullRead:
        return self._to_full([self._get_owned(user_id, event_id)])[0]

    def update_user_event(
        self, user_id: int, event_id: int, payload: EventUserUpdate
    ) -> EventFullRead:
        event = self._get_owned(user_id, event_id)
        if event.state == EventState.PUBLISHED:
            raise ConflictError("Only pending or canceled events can be changed.")
        if payload.event_date is not None:
            self._ensure_lead_time(payload.event_date, USER_EVENT_LEAD_TIME)

        self._apply_update(event, payload)
        if payload.state_action == "SEND_TO_REVIEW":
            event.state = EventState.PENDING
        elif payload.state_action == "CANCEL_REVIEW":
            event.state = EventState.CANCELED

        event = self.events.save(event)
        logger.info(f"Event {event_id} updated by initiator {user_id}, state {event.state}")
        return self._to_full([event])[0]

    # --- admin ---

    def update_admin_event(self, event_id: int, payload: EventAdminUpdate) -> EventFullRead:
        event = self.events.get(event_id)
        if event is None:
            raise NotFoundError(f"Event with id = {event_id} was not found.")
        if payload.event_date is not None and payload.event_date < datetime.now():
            raise ValidationError("Event date must not be in the past.")

        if payload.state_action == "PUBLISH_EVENT":
            if event.state != EventState.PENDING:
                raise ConflictError(
                    f"Cannot publish the event because it's not in the right state: {event.state}."
                )
            now = datetime.now()
            event_date = payload.event_date or event.event_date
            if event_date < now + PUBLISH_LEAD_TIME:
                raise ConflictError(
                    "Event date must be at least one hour after the publication date."
                )
            event.state = EventState.PUBLISHED
            event.published_on = now
        elif payload.state_action == "REJECT_EVENT":
            if event.state == EventState.PUBLISHED:
                raise ConflictError(
                    "Cannot reject the event because it has already been published."
                )
            event.state = EventState.CANCELED

        self._apply_update(event, payload)
        event = self.events.save(event)
        logger.info(f"Event {event_id} updated by admin, state {event.state}")
        return self._to_full([event])[0]

    def get_admin_events(
        self,
        *,
        users: Optional[Sequence[int]] = None,
        states: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[int]] = None,
        range_start: Optional[datetime] = None,
        range_end: Optional[datetime] = None,
        offset: int = 0,
        size: int = 10,
    ) -> list[EventFullRead]:
        events = self.events.search(
            initiator_ids=users,
            states=states,
            category_ids=categories,
            range_start=range_start,
            range_end=range_end,
            offset=offset,
            limit=size,
        )
        return self._to_full(events)

    # --- public ---

    def get_public_events(
        self,
        *,
        ip: str,
        uri: str,
        text: Optional[str] = None,
        categories: Optional[Sequence[int]] = None,
        paid: Optional[bool] = None,
        range_start: Optional[datetime] = None,
        range_end: Optional[datetime] = None,
        only_available: bool = False,
        sort: str = SORT_EVENT_DATE,
        offset: int = 0,
        size: int = 10,
    ) -> list[EventShortRead]:
        if range_start and range_end and range_start > range_end:
            raise ValidationError("rangeStart must not be after rangeEnd.")
        if range_start is None and range_end is None:
            range_start = datetime.now()

        self._record_hit(uri, ip)
        events = self.events.search(
            states=[EventState.PUBLISHED],
            category_ids=categories,
            text=text,
            paid=paid,
            range_start=range_start,
            range_end=range_end,
        )
        if only_available:
            confirmed = self.requests.confirmed_counts([e.id for e in events])
            events = [
                e
                for e in events
                if e.participant_limit == 0 or confirmed.get(e.id, 0) < e.participant_limit
            ]

        result = self._to_short(events)
        if sort == SORT_VIEWS:
            result.sort(key=lambda item: item.views, reverse=True)
        return result[offset : offset + size]

    def get_public_event(self, event_id: int, *, ip: str, uri: str) -> EventFullRead:
        event = self.events.get(event_id)
        if event is None or event.state != EventState.PUBLISHED:
            raise NotFoundError(f"Event with id = {event_id} was not found.")
        self._record_hit(uri, ip)
        return self._to_full([event])[0]

    # --- helpers ---

    def _get_owned(self, user_id: int, event_id: int) -> Event:
        event = self.events.get_for_initiator(event_id, user_id)
        if event is None:
            raise NotFoundError(
                f"Event with id = {event_id} and user id = {user_id} doesn't exist."
            )
        return event

    @staticmethod
    def _ensure_lead_time(event_date: datetime, lead: timedelta) -> None:
        if event_date < datetime.now() + lead:
            hours = int(lead.total_seconds() // 3600)
            raise ValidationError(
                f"Event date must be at least {hours} hour(s) from now, got {event_date}."
            )

    def _apply_update(self, event: Event, payload: EventUpdateBase) -> None:
        data = payload.model_dump(exclude_unset=True, exclude={"state_action"})
        new_limit = data.get("participant_limit")
        if new_limit:
            confirmed = self.requests.count_by_event_and_status(
                event.id, ParticipationStatus.CONFIRMED
            )
            if new_limit < confirmed:
                raise ConflictError(
                    f"Participant limit {new_limit} is below the {confirmed} "
                    f"confirmed requests of event id = {event.id}."
                )
        if data.get("category") is not None:
            if self.categories.get(data["category"]) is None:
                raise NotFoundError(f"Category with id = {data['category']} was not found.")
            event.category_id = data.pop("category")
        if data.get("location") is not None:
            location = data.pop("location")
            event.lat = location["lat"]
            event.lon = location["lon"]
        for field in (
            "annotation",
            "description",
            "event_date",
            "paid",
            "participant_limit",
            "request_moderation",
            "title",
        ):
            if data.get(field) is not None:
                setattr(event, field, data[field])

    def _record_hit(self, uri: str, ip: str) -> None:
        self.stats.record(settings.STATS_APP_NAME, uri, ip, datetime.now())

    def _collect(self, events: list[Event]):
        ids = [event.id for event in events]
        categories = self.categories.get_many(list({e.category_id for e in events}))
        initiators = self.users.get_many(list({e.initiator_id for e in events}))
        confirmed = self.requests.confirmed_counts(ids)
        views = self.stats.views([event_uri(event_id) for event_id in ids])
        return categories, initiators, confirmed, views

    def _short_fields(self, event: Event, categories, initiators, confirmed, views) -> dict:
        return dict(
            id=event.id,
            annotation=event.annotation,
            category=CategoryRead.model_validate(categories[event.category_id]),
            confirmed_requests=confirmed.get(event.id, 0),
            event_date=event.event_date,
            initiator=UserShort.model_validate(initiators[event.initiator_id]),
            paid=event.paid,
            title=event.title,
            views=views.get(event_uri(event.id), 0),
        )

    def _to_short(self, events: list[Event]) -> list[EventShortRead]:
        lookups = self._collect(events)
        return [EventShortRead(**self._short_fields(event, *lookups)) for event in events]

    def _to_full(self, events: list[Event]) -> list[EventFullRead]:
        lookups = self._collect(events)
        return [
            EventFullRead(
                **self._short_fields(event, *lookups),
                created_on=event.created_on,
                description=event.description,
                location=Location(lat=event.lat, lon=event.lon),
                participant_limit=event.participant_limit,
                published_on=event.published_on,
                request_moderation=event.request_moderation,
                state=event.state,
            )
            for event in events
        ]
