# app/schemas/status.py
"""
Pydantic schemas for status.* message patterns.
"""
import datetime as dt
import uuid
from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import WireModel, record_to_dict

AccountStatus = Literal["active", "suspended", "banned"]

STATUS_FIELDS = (
    "user_profile_id",
    "status",
    "reason",
    "reason_detail",
    "actioned_by",
    "actioned_at",
    "expires_at",
    "notes",
    "can_login",
    "can_stream",
    "can_comment",
    "can_upload",
    "can_message",
    "can_purchase",
    "requires_kyc",
    "is_verified",
    "is_moderator",
    "is_content_creator",
    "is_premium_supporter",
)


class StatusFields(WireModel):
    status: AccountStatus = None
    reason: Optional[str] = Field(default=None, max_length=255)
    reason_detail: Optional[str] = Field(default=None, max_length=1000)
    actioned_by: Optional[str] = Field(default=None, max_length=255)
    actioned_at: Optional[dt.datetime] = None
    expires_at: Optional[dt.datetime] = None
    notes: Optional[str] = Field(default=None, max_length=1000)
    can_login: bool = None
    can_stream: bool = None
    can_comment: bool = None
    can_upload: bool = None
    can_message: bool = None
    can_purchase: bool = None
    requires_kyc: bool = None
    is_verified: bool = None
    is_moderator: bool = None
    is_content_creator: bool = None
    is_premium_supporter: bool = None


class CreateStatusIn(StatusFields):
    user_profile_id: uuid.UUID


class UpdateStatusIn(StatusFields):
    version: Optional[int] = Field(default=None, ge=1)


class StatusUpdateIn(WireModel):
    id: uuid.UUID
    patch: UpdateStatusIn = Field(default_factory=UpdateStatusIn)


class SuspendStatusIn(WireModel):
    id: uuid.UUID
    reason: str = Field(min_length=1, max_length=255)
    actioned_by: str = Field(min_length=1, max_length=255)
    expires_at: Optional[dt.datetime] = None


class BanStatusIn(WireModel):
    id: uuid.UUID
    reason: str = Field(min_length=1, max_length=255)
    actioned_by: str = Field(min_length=1, max_length=255)


def status_to_dict(record) -> dict:
    return record_to_dict(record, STATUS_FIELDS)
