"""Shared pydantic base models for the JSON API."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire.

    - Accepts camelCase (``startDate``) or snake_case (``start_date``) input
    - FastAPI serializes response models by alias, so output is camelCase
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes so comparisons never mix naive/aware."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def column_values(fields: dict[str, Any]) -> dict[str, Any]:
    """Turn a model_dump() into column values: unwrap enums, pin datetimes to UTC."""
    values: dict[str, Any] = {}
    for key, value in fields.items():
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, datetime):
            value = as_utc(value)
        values[key] = value
    return values
