# app/schemas/settings.py
"""
Pydantic schemas for settings.* message patterns.
Preference columns are NOT NULL, so they may be omitted but never sent as null.
"""
import uuid
from typing import Optional

from pydantic import Field

from app.schemas.common import WireModel, record_to_dict

SETTINGS_FIELDS = (
    "user_profile_id",
    "language",
    "theme",
    "timezone",
    "email_notifications",
    "push_notifications",
    "sms_notifications",
    "marketing_emails",
    "autoplay",
    "video_quality",
    "subtitles_enabled",
    "subtitles_language",
    "maturity_rating",
    "data_saver_mode",
    "two_factor_enabled",
    "session_timeout",
    "privacy_show_profile",
    "privacy_show_activity",
    "privacy_allow_messages",
)


class SettingsFields(WireModel):
    language: str = Field(default=None, max_length=10)
    theme: str = Field(default=None, max_length=20)
    timezone: str = Field(default=None, max_length=50)
    email_notifications: bool = None
    push_notifications: bool = None
    sms_notifications: bool = None
    marketing_emails: bool = None
    autoplay: bool = None
    video_quality: str = Field(default=None, max_length=20)
    subtitles_enabled: bool = None
    subtitles_language: str = Field(default=None, max_length=10)
    maturity_rating: str = Field(default=None, max_length=20)
    data_saver_mode: bool = None
    two_factor_enabled: bool = None
    session_timeout: int = Field(default=None, ge=300)  # seconds
    privacy_show_profile: bool = None
    privacy_show_activity: bool = None
    privacy_allow_messages: bool = None


class CreateSettingsIn(SettingsFields):
    user_profile_id: uuid.UUID


class UpdateSettingsIn(SettingsFields):
    version: Optional[int] = Field(default=None, ge=1)


class SettingsUpdateIn(WireModel):
    id: uuid.UUID
    patch: UpdateSettingsIn = Field(default_factory=UpdateSettingsIn)


def settings_to_dict(record) -> dict:
    return record_to_dict(record, SETTINGS_FIELDS)
