from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import FormattedDatetime


class HitCreate(BaseModel):
    """Incoming hit from a client application."""

    app: str = Field(min_length=1, max_length=255)
    uri: str = Field(min_length=1, max_length=512)
    ip: str = Field(min_length=1, max_length=45)
    timestamp: FormattedDatetime


class ViewStats(BaseModel):
    """Aggregated hit count for one URI."""

    uri: str
    hits: int = Field(default=0, description="Number of hits in the requested range")

    model_config = ConfigDict(from_attributes=True)
