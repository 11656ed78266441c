from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlmodel import Session, and_, func, or_, select

from app.models import Event


class EventRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, event_id: int) -> Optional[Event]:
        return self.session.get(Event, event_id)

    def get_for_initiator(self, event_id: int, initiator_id: int) -> Optional[Event]:
        return self.session.exec(
            select(Event).where(Event.id == event_id, Event.initiator_id == initiator_id)
        ).first()

    def list_by_initiator(
        self, initiator_id: int, offset: int = 0, limit: int = 10
    ) -> list[Event]:
        statement = (
            select(Event)
            .where(Event.initiator_id == initiator_id)
            .order_by(Event.id)
            .offset(offset)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def exists_with_category(self, category_id: int) -> bool:
        return (
            self.session.exec(
                select(Event.id).where(Event.category_id == category_id)
            ).first()
            is not None
        )

    def exists_with_initiator(self, initiator_id: int) -> bool:
        return (
            self.session.exec(
                select(Event.id).where(Event.initiator_id == initiator_id)
            ).first()
            is not None
        )

    def search(
        self,
        *,
        initiator_ids: Optional[Sequence[int]] = None,
        states: Optional[Sequence[str]] = None,
        category_ids: Optional[Sequence[int]] = None,
        text: Optional[str] = None,
        paid: Optional[bool] = None,
        range_start: Optional[datetime] = None,
        range_end: Optional[datetime] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[Event]:
        conditions = []
        if initiator_ids:
            conditions.append(Event.initiator_id.in_(initiator_ids))
        if states:
            conditions.append(Event.state.in_(states))
        if category_ids:
            conditions.append(Event.category_id.in_(category_ids))
        if text:
            pattern = f"%{text.lower()}%"
            conditions.append(
                or_(
                    func.lower(Event.annotation).like(pattern),
                    func.lower(Event.description).like(pattern),
                )
            )
        if paid is not None:
            conditions.append(Event.paid == paid)
        if range_start:
            conditions.append(Event.event_date >= range_start)
        if range_end:
            conditions.append(Event.event_date <= range_end)

        statement = select(Event)
        if conditions:
            statement = statement.where(and_(*conditions))
        statement = statement.order_by(Event.event_date, Event.id)
        if offset is not None:
            statement = statement.offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def save(self, event: Event) -> Event:
        self.session.add(event)
        self.session.commit()
        self.session.refresh(event)
        return event
