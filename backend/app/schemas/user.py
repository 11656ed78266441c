from __future__ import annotations

from pydantic import ConfigDict, EmailStr, Field, field_validator

from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    name: str = Field(min_length=2, max_length=250)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class UserRead(CamelModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserShort(CamelModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
