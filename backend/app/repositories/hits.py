from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlmodel import Session, func, select

from app.models import Hit


class HitRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, hit: Hit) -> Hit:
        self.session.add(hit)
        self.session.commit()
        self.session.refresh(hit)
        return hit

    def count_by_uri(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        uris: Optional[Sequence[str]] = None,
        unique: bool = False,
    ) -> list[tuple[str, int]]:
        """Hits per URI, most visited first."""
        counter = func.count(func.distinct(Hit.ip)) if unique else func.count(Hit.id)
        hits = counter.label("hits")
        statement = select(Hit.uri, hits)
        if start is not None:
            statement = statement.where(Hit.timestamp >= start)
        if end is not None:
            statement = statement.where(Hit.timestamp <= end)
        if uris:
            statement = statement.where(Hit.uri.in_(uris))
        statement = statement.group_by(Hit.uri).order_by(hits.desc(), Hit.uri)
        return [(uri, count) for uri, count in self.session.exec(statement).all()]
