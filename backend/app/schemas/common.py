"""Shared schema building blocks."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
# strptime alone lets "2024-1-1 0:0:0" through, every field must be zero-padded
DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")


def strict_strptime(value: str) -> datetime:
    """Parse exactly ``yyyy-MM-dd HH:mm:ss``, raising ``ValueError`` otherwise."""
    if not DATETIME_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' does not match yyyy-MM-dd HH:mm:ss")
    return datetime.strptime(value, DATETIME_FORMAT)


def parse_datetime(value: Any) -> Any:
    """Accept ``yyyy-MM-dd HH:mm:ss`` strings, leave datetimes untouched."""
    if isinstance(value, str):
        return strict_strptime(value)
    return value


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


FormattedDatetime = Annotated[
    datetime,
    BeforeValidator(parse_datetime),
    PlainSerializer(format_datetime, return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Schema exposed with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
