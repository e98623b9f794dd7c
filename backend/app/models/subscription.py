# app/models/subscription.py
"""
Database model for subscriptions.
A profile may own many subscriptions over time; which one is "the active one"
is decided at query time by status, not by a uniqueness constraint.
"""
from tortoise import fields, timezone

from app.models.base import LifecycleEnvelope


class Subscription(LifecycleEnvelope):
    """
    Subscription database model.

    Status transitions: inactive -> active -> {canceled, suspended}, suspended -> active.
    end_date, when set, governs expiration; a null end_date never expires.
    """
    user_profile = fields.ForeignKeyField(
        "models.UserProfile",
        related_name="subscriptions",
        on_delete=fields.RESTRICT,
    )
    plan_type = fields.CharField(max_length=50)
    status = fields.CharField(max_length=20, default="inactive", index=True)
    billing_cycle = fields.CharField(max_length=50, null=True)

    start_date = fields.DatetimeField(default=timezone.now)
    end_date = fields.DatetimeField(null=True, index=True)
    renewal_date = fields.DatetimeField(null=True)
    canceled_at = fields.DatetimeField(null=True)
    suspended_at = fields.DatetimeField(null=True)
    trial_ends_at = fields.DatetimeField(null=True)

    is_auto_renew = fields.BooleanField(default=True)
    is_trial = fields.BooleanField(default=False)

    # Plan caps
    max_devices = fields.IntField(default=1)
    max_profiles = fields.IntField(default=1)
    can_download = fields.BooleanField(default=False)
    video_quality = fields.CharField(max_length=20, default="sd")
    ads_enabled = fields.BooleanField(default=True)

    # Billing provider references
    external_subscription_id = fields.CharField(max_length=255, null=True)
    payment_method = fields.CharField(max_length=50, null=True)

    metadata = fields.JSONField(null=True)  # Opaque structured blob

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "subscriptions"
