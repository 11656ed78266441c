from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """Platform user; acts as event initiator or participation requester."""

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=250)
    email: str = Field(index=True, unique=True, max_length=254)
