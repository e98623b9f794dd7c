# app/models/profile.py
"""
Database model for user profiles.
The profile is the aggregate root: settings, subscriptions and status rows
all reference it by foreign key.
"""
from tortoise import fields

from app.models.base import LifecycleEnvelope


class UserProfile(LifecycleEnvelope):
    """
    User profile database model.

    Relationships:
    - Has one UserSettings (via related_name="settings")
    - Has many Subscriptions (via related_name="subscriptions")
    - Has one UserStatus (via related_name="account_status")

    The unique constraint on auth_user_id covers deleted rows as well, so a
    soft-deleted profile is restored instead of duplicated.
    """
    auth_user_id = fields.CharField(max_length=255, unique=True, index=True)  # External identity (immutable)
    display_name = fields.CharField(max_length=100, null=True)
    first_name = fields.CharField(max_length=50, null=True)
    last_name = fields.CharField(max_length=50, null=True)
    avatar = fields.CharField(max_length=500, null=True)
    bio = fields.TextField(null=True)
    country = fields.CharField(max_length=2, null=True)  # ISO 3166-1 alpha-2
    date_of_birth = fields.DateField(null=True)
    phone = fields.CharField(max_length=20, null=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "user_profiles"
