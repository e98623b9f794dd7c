# app/schemas/common.py
"""
Shared wire-format helpers.
Payloads use camelCase keys on the wire and snake_case attributes in Python.
"""
import datetime as dt
import uuid
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.config import settings

__all__ = ["WireModel", "IdIn", "UserProfileIdIn", "PageIn", "record_to_dict"]

ENVELOPE_OUT = ("created_at", "updated_at", "is_deleted", "deleted_at", "version")


class WireModel(BaseModel):
    """Base for inbound payloads: accepts camelCase (or snake_case) keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="after")
    def _naive_datetimes_are_utc(self):
        # Timestamps without an offset are taken as UTC
        for name, value in self.__dict__.items():
            if isinstance(value, dt.datetime) and value.tzinfo is None:
                setattr(self, name, value.replace(tzinfo=dt.timezone.utc))
        return self

    def values(self) -> dict:
        """Only the fields the caller actually sent (PATCH semantics)."""
        return self.model_dump(exclude_unset=True)


class IdIn(WireModel):
    id: uuid.UUID


class UserProfileIdIn(WireModel):
    user_profile_id: uuid.UUID


class PageIn(WireModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=settings.default_page_limit, ge=1, le=settings.max_page_limit)


def _wire(value: Any) -> Any:
    if isinstance(value, (dt.datetime, dt.date)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


def record_to_dict(record, fields: Iterable[str]) -> dict:
    """
    Serialize a model instance into its camelCase wire representation.

    Args:
        record: Tortoise model instance (or None)
        fields: entity-specific attribute names; envelope fields are always included
    """
    if record is None:
        return None
    names = ("id", *fields, *ENVELOPE_OUT)
    return {to_camel(name): _wire(getattr(record, name)) for name in names}
