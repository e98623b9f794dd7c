# app/schemas/subscription.py
"""
Pydantic schemas for subscription.* message patterns.
"""
import datetime as dt
import uuid
from typing import Any, Literal, Optional

from pydantic import Field

from app.schemas.common import WireModel, record_to_dict

SubscriptionStatus = Literal["inactive", "active", "canceled", "suspended"]

SUBSCRIPTION_FIELDS = (
    "user_profile_id",
    "plan_type",
    "status",
    "billing_cycle",
    "start_date",
    "end_date",
    "renewal_date",
    "canceled_at",
    "suspended_at",
    "trial_ends_at",
    "is_auto_renew",
    "is_trial",
    "max_devices",
    "max_profiles",
    "can_download",
    "video_quality",
    "ads_enabled",
    "external_subscription_id",
    "payment_method",
    "metadata",
)


class SubscriptionFields(WireModel):
    status: SubscriptionStatus = None
    billing_cycle: Optional[str] = Field(default=None, max_length=50)
    end_date: Optional[dt.datetime] = None
    renewal_date: Optional[dt.datetime] = None
    trial_ends_at: Optional[dt.datetime] = None
    is_auto_renew: bool = None
    is_trial: bool = None
    max_devices: int = Field(default=None, ge=1)
    max_profiles: int = Field(default=None, ge=1)
    can_download: bool = None
    video_quality: str = Field(default=None, max_length=20)
    ads_enabled: bool = None
    external_subscription_id: Optional[str] = Field(default=None, max_length=255)
    payment_method: Optional[str] = Field(default=None, max_length=50)
    metadata: Optional[Any] = None  # JSON object, or JSON text parsed by the manager


class CreateSubscriptionIn(SubscriptionFields):
    user_profile_id: uuid.UUID
    plan_type: str = Field(min_length=1, max_length=50)
    start_date: dt.datetime = None


class UpdateSubscriptionIn(SubscriptionFields):
    plan_type: str = Field(default=None, min_length=1, max_length=50)
    canceled_at: Optional[dt.datetime] = None
    suspended_at: Optional[dt.datetime] = None
    version: Optional[int] = Field(default=None, ge=1)


class SubscriptionUpdateIn(WireModel):
    id: uuid.UUID
    patch: UpdateSubscriptionIn = Field(default_factory=UpdateSubscriptionIn)


class SuspendSubscriptionIn(WireModel):
    id: uuid.UUID
    reason: Optional[str] = Field(default=None, max_length=255)


class ExpiringSoonIn(WireModel):
    days: Optional[int] = Field(default=None, ge=0, le=3650)


def subscription_to_dict(record) -> dict:
    return record_to_dict(record, SUBSCRIPTION_FIELDS)
