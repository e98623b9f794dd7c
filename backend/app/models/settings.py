# app/models/settings.py
"""
Database model for per-profile preferences.
"""
from tortoise import fields

from app.models.base import LifecycleEnvelope


class UserSettings(LifecycleEnvelope):
    """
    User settings database model (one-to-one with UserProfile).

    Column defaults mirror SETTINGS_DEFAULTS in app.services.settings_manager,
    which is also what settings.reset writes back.
    """
    user_profile = fields.OneToOneField(
        "models.UserProfile",
        related_name="settings",
        on_delete=fields.RESTRICT,
    )  # Unique FK: at most one settings row (deleted or not) per profile

    language = fields.CharField(max_length=10, default="en")
    theme = fields.CharField(max_length=20, default="light")
    timezone = fields.CharField(max_length=50, default="UTC")

    email_notifications = fields.BooleanField(default=True)
    push_notifications = fields.BooleanField(default=True)
    sms_notifications = fields.BooleanField(default=False)
    marketing_emails = fields.BooleanField(default=False)

    autoplay = fields.BooleanField(default=True)
    video_quality = fields.CharField(max_length=20, default="auto")
    subtitles_enabled = fields.BooleanField(default=False)
    subtitles_language = fields.CharField(max_length=10, default="en")
    maturity_rating = fields.CharField(max_length=20, default="PG-13")
    data_saver_mode = fields.BooleanField(default=False)

    two_factor_enabled = fields.BooleanField(default=False)
    session_timeout = fields.IntField(default=3600)  # seconds

    privacy_show_profile = fields.BooleanField(default=True)
    privacy_show_activity = fields.BooleanField(default=False)
    privacy_allow_messages = fields.BooleanField(default=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "user_settings"
