import logging
from typing import List, Optional

from fastapi import APIRouter, Query, Request, Response, status

from app.api.deps import StatsServiceDep
from app.core.config import settings
from app.core.limiter import limiter
from app.schemas import HitCreate, ViewStats
from app.services.stats import parse_datetime_param

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/hit", status_code=status.HTTP_201_CREATED, summary="Record endpoint hit")
@limiter.limit(settings.HIT_RATE_LIMIT)
def record_hit(request: Request, payload: HitCreate, stats: StatsServiceDep) -> Response:
    logger.info(f"Recording hit: {payload.model_dump()}")
    stats.record(payload.app, payload.uri, payload.ip, payload.timestamp)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/stats", response_model=List[ViewStats], summary="Hit statistics")
def get_stats(
    stats: StatsServiceDep,
    start: str = Query(..., description="yyyy-MM-dd HH:mm:ss"),
    end: str = Query(..., description="yyyy-MM-dd HH:mm:ss"),
    uris: Optional[List[str]] = Query(default=None),
    unique: bool = Query(default=False),
) -> List[ViewStats]:
    start_dt = parse_datetime_param(start, "start")
    end_dt = parse_datetime_param(end, "end")
    # Допускаем как uris=a&uris=b, так и uris=a,b
    uri_filter = [u for item in uris or [] for u in item.split(",") if u]
    rows = stats.query(start_dt, end_dt, uri_filter or None, unique)
    return [ViewStats(uri=uri, hits=hits) for uri, hits in rows]
