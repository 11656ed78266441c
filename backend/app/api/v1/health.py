import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.db import missing_tables

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="Health check", tags=["health"])
@router.get("/", include_in_schema=False)
def read_health() -> dict[str, str]:
    return {"status": "ok", "service": settings.STATS_APP_NAME}


@router.get("/ready", summary="Readiness check", tags=["health"])
def read_ready():
    """Ready once the database answers and every model table exists."""
    try:
        missing = missing_tables()
    except SQLAlchemyError as exc:
        logger.error(f"Readiness check failed: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "database": "disconnected",
                "error": str(exc) if settings.ENVIRONMENT != "production" else "Database connection failed",
            },
        )
    if missing:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "database": "connected", "missingTables": missing},
        )
    return {"status": "ready", "database": "connected"}
