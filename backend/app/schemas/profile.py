# app/schemas/profile.py
"""
Pydantic schemas for profile.* message patterns.
"""
import datetime as dt
import uuid
from typing import Optional

from pydantic import Field

from app.schemas.common import WireModel, record_to_dict

PROFILE_FIELDS = (
    "auth_user_id",
    "display_name",
    "first_name",
    "last_name",
    "avatar",
    "bio",
    "country",
    "date_of_birth",
    "phone",
)


class ProfileFields(WireModel):
    display_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    avatar: Optional[str] = Field(default=None, max_length=500)
    bio: Optional[str] = Field(default=None, max_length=1000)
    country: Optional[str] = Field(default=None, pattern="^[A-Z]{2}$")  # ISO 3166-1 alpha-2
    date_of_birth: Optional[dt.date] = None
    phone: Optional[str] = Field(default=None, max_length=20)


class CreateProfileIn(ProfileFields):
    auth_user_id: str = Field(min_length=1, max_length=255)


class UpdateProfileIn(ProfileFields):
    version: Optional[int] = Field(default=None, ge=1)  # Expected version (optimistic lock)


class ProfileUpdateIn(WireModel):
    id: uuid.UUID
    patch: UpdateProfileIn = Field(default_factory=UpdateProfileIn)


class AuthUserIdIn(WireModel):
    auth_user_id: str = Field(min_length=1, max_length=255)


def profile_to_dict(profile) -> dict:
    return record_to_dict(profile, PROFILE_FIELDS)
