from __future__ import annotations

from pydantic import ConfigDict, Field, field_validator

from app.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class CategoryRead(CamelModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
