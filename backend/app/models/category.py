from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    """Event category."""

    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True, max_length=50)
