# app/models/status.py
"""
Database model for account moderation status and capability flags.
"""
from tortoise import fields

from app.models.base import LifecycleEnvelope


class UserStatus(LifecycleEnvelope):
    """
    User status database model (one-to-one with UserProfile).

    Capability flags are kept consistent with `status` by the suspend / ban /
    activate transitions in StatusManager, not by a database constraint.
    """
    user_profile = fields.OneToOneField(
        "models.UserProfile",
        related_name="account_status",
        on_delete=fields.RESTRICT,
    )
    status = fields.CharField(max_length=20, default="active", index=True)

    # Moderation metadata
    reason = fields.CharField(max_length=255, null=True)
    reason_detail = fields.TextField(null=True)
    actioned_by = fields.CharField(max_length=255, null=True)
    actioned_at = fields.DatetimeField(null=True)
    expires_at = fields.DatetimeField(null=True)
    notes = fields.TextField(null=True)

    # Capability flags (touched by moderation transitions)
    can_login = fields.BooleanField(default=True)
    can_stream = fields.BooleanField(default=True)
    can_comment = fields.BooleanField(default=True)
    can_upload = fields.BooleanField(default=False)
    can_message = fields.BooleanField(default=True)
    can_purchase = fields.BooleanField(default=True)
    requires_kyc = fields.BooleanField(default=False)

    # Independent of moderation transitions
    is_verified = fields.BooleanField(default=False)
    is_moderator = fields.BooleanField(default=False)
    is_content_creator = fields.BooleanField(default=False)
    is_premium_supporter = fields.BooleanField(default=False)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "user_statuses"
