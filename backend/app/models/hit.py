from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Hit(SQLModel, table=True):
    """Single recorded request to a public endpoint."""

    __tablename__ = "hits"

    id: Optional[int] = Field(default=None, primary_key=True)
    app: str = Field(max_length=255)
    uri: str = Field(max_length=512, index=True)
    ip: str = Field(max_length=45)
    timestamp: datetime = Field(nullable=False, index=True)
