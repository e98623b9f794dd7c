# app/models/base.py
"""
Lifecycle envelope shared by every account record.
Provides identity, timestamps, the soft-delete marker and the optimistic-lock version.
"""
import uuid
from tortoise import fields, models


class LifecycleEnvelope(models.Model):
    """
    Abstract base model for versioned, soft-deletable records.

    - id: opaque identifier, assigned at creation and never changed
    - is_deleted / deleted_at: soft-delete marker (row is kept physically)
    - version: starts at 1, incremented by exactly 1 on every successful mutation
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)
    is_deleted = fields.BooleanField(default=False, index=True)
    deleted_at = fields.DatetimeField(null=True)
    version = fields.IntField(default=1)

    class Meta:
        abstract = True
