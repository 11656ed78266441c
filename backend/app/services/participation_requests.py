"""
Participation request lifecycle.

Submission, cancellation by the requester and organizer-driven bulk
confirmation/rejection bounded by the event's participant limit.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from app.core.exceptions import ConflictError, NotFoundError
from app.models import EventState, ParticipationRequest, ParticipationStatus
from app.repositories import EventRepository, RequestRepository, UserRepository

logger = logging.getLogger(__name__)


class ParticipationRequestService:
    def __init__(
        self,
        requests: RequestRepository,
        users: UserRepository,
        events: EventRepository,
    ) -> None:
        self.requests = requests
        self.users = users
        self.events = events

    def submit(self, requester_id: int, event_id: int) -> ParticipationRequest:
        if self.requests.exists_by_requester_and_event(requester_id, event_id):
            raise ConflictError(
                f"Participation request with userId = {requester_id} "
                f"eventId = {event_id} already exists."
            )

        if not self.users.exists(requester_id):
            raise NotFoundError(f"User with id = {requester_id} was not found.")

        event = self.events.get(event_id)
        if event is None:
            raise NotFoundError(f"Event with id = {event_id} doesn't exist.")

        if event.state != EventState.PUBLISHED:
            raise ConflictError("Users are not allowed to register for unpublished events.")

        if event.initiator_id == requester_id:
            raise ConflictError(
                "Event organizers are not allowed to request participation in their own events."
            )

        if event.participant_limit != 0 and (
            self.requests.count_by_event_and_status(event_id, ParticipationStatus.CONFIRMED)
            >= event.participant_limit
        ):
            raise ConflictError("Participant limit reached.")

        auto_confirm = not event.request_moderation or event.participant_limit == 0
        request = ParticipationRequest(
            requester_id=requester_id,
            event_id=event_id,
            status=ParticipationStatus.CONFIRMED if auto_confirm else ParticipationStatus.PENDING,
            created=datetime.now(),
        )
        request = self.requests.save(request)
        logger.info(
            f"Request {request.id} by user {requester_id} for event {event_id} "
            f"created with status {request.status}"
        )
        return request

    def cancel(self, requester_id: int, request_id: int) -> ParticipationRequest:
        request = self.requests.get_for_requester(request_id, requester_id)
        if request is None:
            raise NotFoundError(f"Participation request with id = {request_id} doesn't exist.")

        if request.status == ParticipationStatus.CONFIRMED:
            raise ConflictError(
                f"Participation request with id = {request_id} is already confirmed."
            )

        request.status = ParticipationStatus.CANCELED
        request = self.requests.save(request)
        logger.info(f"Request {request_id} canceled by user {requester_id}")
        return request

    def list_by_requester(self, requester_id: int) -> list[ParticipationRequest]:
        return self.requests.list_by_requester(requester_id)

    def list_for_organizer_event(
        self, organizer_id: int, event_id: int
    ) -> list[ParticipationRequest]:
        if self.events.get_for_initiator(event_id, organizer_id) is None:
            raise NotFoundError(
                f"Event with id = {event_id} and user id = {organizer_id} doesn't exist."
            )
        return self.requests.list_by_event(event_id)

    def bulk_update_status(
        self,
        organizer_id: int,
        event_id: int,
        request_ids: Sequence[int],
        status: str,
    ) -> tuple[list[ParticipationRequest], list[ParticipationRequest]]:
        """Confirm or reject a batch of pending requests.

        Returns ``(confirmed, rejected)``. When confirming a moderated event
        with a limit, requests are confirmed in the order of ``request_ids``
        until the limit is hit and the remainder is rejected. Every check
        runs before the first status change, so a failing call leaves the
        batch untouched.
        """
        event = self.events.get_for_initiator(event_id, organizer_id)
        if event is None:
            raise NotFoundError(
                f"Event with id = {event_id} and user id = {organizer_id} doesn't exist."
            )

        if event.initiator_id != organizer_id:
            raise ConflictError(
                f"Access denied. User with id = {organizer_id} is not an event initiator."
            )

        fetched = self.requests.list_by_ids_and_event(request_ids, event_id)
        if len(fetched) != len(request_ids):
            raise NotFoundError("Incorrect request id(s) received in the request body.")

        for request in fetched:
            if request.status != ParticipationStatus.PENDING:
                raise ConflictError(
                    "Only requests with status 'Pending' can be accepted or rejected."
                )

        by_id = {request.id: request for request in fetched}
        batch = [by_id[request_id] for request_id in request_ids]

        confirmed: list[ParticipationRequest] = []
        rejected: list[ParticipationRequest] = []

        if status == ParticipationStatus.REJECTED:
            for request in batch:
                request.status = ParticipationStatus.REJECTED
                rejected.append(request)
        elif event.participant_limit == 0 or not event.request_moderation:
            for request in batch:
                request.status = ParticipationStatus.CONFIRMED
                confirmed.append(request)
        else:
            confirmed_count = self.requests.count_by_event_and_status(
                event_id, ParticipationStatus.CONFIRMED
            )
            if confirmed_count >= event.participant_limit:
                raise ConflictError(
                    f"Failed to accept request. Reached max participant limit "
                    f"for event id = {event_id}."
                )
            for request in batch:
                if confirmed_count < event.participant_limit:
                    request.status = ParticipationStatus.CONFIRMED
                    confirmed.append(request)
                    confirmed_count += 1
                else:
                    request.status = ParticipationStatus.REJECTED
                    rejected.append(request)

        self.requests.save_all(confirmed + rejected)
        logger.info(
            f"Event {event_id}: organizer {organizer_id} confirmed "
            f"{[r.id for r in confirmed]}, rejected {[r.id for r in rejected]}"
        )
        return confirmed, rejected
