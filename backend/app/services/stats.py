"""Endpoint hit recording and aggregation."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from app.core.exceptions import ValidationError
from app.models import Hit
from app.repositories import HitRepository
from app.schemas.common import strict_strptime

logger = logging.getLogger(__name__)


def parse_datetime_param(value: str, name: str) -> datetime:
    """Parse a ``yyyy-MM-dd HH:mm:ss`` query parameter or fail with 400."""
    try:
        return strict_strptime(value)
    except ValueError:
        logger.error(f"Invalid {name}={value!r}, expected yyyy-MM-dd HH:mm:ss")
        raise ValidationError(
            f"Parameter '{name}' must match format yyyy-MM-dd HH:mm:ss, got '{value}'."
        ) from None


class StatsService:
    def __init__(self, hits: HitRepository) -> None:
        self.hits = hits

    def record(self, app: str, uri: str, ip: str, timestamp: datetime) -> Hit:
        hit = self.hits.save(Hit(app=app, uri=uri, ip=ip, timestamp=timestamp))
        logger.debug(f"Hit recorded: app={app} uri={uri} ip={ip}")
        return hit

    def query(
        self,
        start: datetime,
        end: datetime,
        uris: Optional[Sequence[str]] = None,
        unique: bool = False,
    ) -> list[tuple[str, int]]:
        if start > end:
            raise ValidationError("Parameter 'start' must not be after 'end'.")
        return self.hits.count_by_uri(start=start, end=end, uris=uris, unique=unique)

    def views(self, uris: Sequence[str]) -> dict[str, int]:
        """Unique-IP view counts over all recorded time."""
        if not uris:
            return {}
        return dict(self.hits.count_by_uri(uris=uris, unique=True))
