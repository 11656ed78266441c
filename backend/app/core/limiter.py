"""Rate limiting configuration."""

from __future__ import annotations

import logging

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

logger = logging.getLogger(__name__)

# Счётчик хитов открыт наружу без авторизации, поэтому ограничиваем его по IP
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URL,
)
logger.info(f"Rate limiter configured with storage: {settings.RATE_LIMIT_STORAGE_URL}")
