from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sqlmodel import Session, func, select

from app.models import ParticipationRequest, ParticipationStatus


class RequestRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def exists_by_requester_and_event(self, requester_id: int, event_id: int) -> bool:
        return (
            self.session.exec(
                select(ParticipationRequest.id).where(
                    ParticipationRequest.requester_id == requester_id,
                    ParticipationRequest.event_id == event_id,
                )
            ).first()
            is not None
        )

    def exists_by_requester(self, requester_id: int) -> bool:
        return (
            self.session.exec(
                select(ParticipationRequest.id).where(
                    ParticipationRequest.requester_id == requester_id
                )
            ).first()
            is not None
        )

    def get_for_requester(
        self, request_id: int, requester_id: int
    ) -> Optional[ParticipationRequest]:
        return self.session.exec(
            select(ParticipationRequest).where(
                ParticipationRequest.id == request_id,
                ParticipationRequest.requester_id == requester_id,
            )
        ).first()

    def list_by_requester(self, requester_id: int) -> list[ParticipationRequest]:
        statement = (
            select(ParticipationRequest)
            .where(ParticipationRequest.requester_id == requester_id)
            .order_by(ParticipationRequest.id)
        )
        return list(self.session.exec(statement).all())

    def list_by_event(self, event_id: int) -> list[ParticipationRequest]:
        statement = (
            select(ParticipationRequest)
            .where(ParticipationRequest.event_id == event_id)
            .order_by(ParticipationRequest.id)
        )
        return list(self.session.exec(statement).all())

    def list_by_ids_and_event(
        self, request_ids: Sequence[int], event_id: int
    ) -> list[ParticipationRequest]:
        statement = select(ParticipationRequest).where(
            ParticipationRequest.id.in_(request_ids),
            ParticipationRequest.event_id == event_id,
        )
        return list(self.session.exec(statement).all())

    def count_by_event_and_status(self, event_id: int, status: str) -> int:
        return self.session.exec(
            select(func.count(ParticipationRequest.id)).where(
                ParticipationRequest.event_id == event_id,
                ParticipationRequest.status == status,
            )
        ).one()

    def confirmed_counts(self, event_ids: Sequence[int]) -> dict[int, int]:
        """CONFIRMED request count per event; events without any are omitted."""
        if not event_ids:
            return {}
        rows = self.session.exec(
            select(ParticipationRequest.event_id, func.count(ParticipationRequest.id))
            .where(
                ParticipationRequest.event_id.in_(event_ids),
                ParticipationRequest.status == ParticipationStatus.CONFIRMED,
            )
            .group_by(ParticipationRequest.event_id)
        ).all()
        return {event_id: count for event_id, count in rows}

    def save(self, request: ParticipationRequest) -> ParticipationRequest:
        self.session.add(request)
        self.session.commit()
        self.session.refresh(request)
        return request

    def save_all(
        self, requests: Iterable[ParticipationRequest]
    ) -> list[ParticipationRequest]:
        requests = list(requests)
        self.session.add_all(requests)
        self.session.commit()
        for request in requests:
            self.session.refresh(request)
        return requests
