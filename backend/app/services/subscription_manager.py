# app/services/subscription_manager.py
"""
Subscription record manager.

A profile may hold many subscriptions, so there is no natural key and no
restore-on-create. Billing state moves through
inactive -> active -> {canceled, suspended}, suspended -> active.
"""
import datetime as dt
import json
import logging
from typing import Any, Dict, List, Optional

from app.core.errors import ValidationFailure
from app.core.store import RecordStore, utc_now
from app.models.subscription import Subscription
from app.services.lifecycle import LifecycleProtocol, ParentRef

logger = logging.getLogger("uvicorn.error")


def parse_metadata(value: Any) -> Any:
    """
    Normalize the opaque metadata blob.

    Accepts already-structured JSON (dict / list) or JSON text; malformed text
    is a ValidationFailure rather than a store error.
    """
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError as exc:
            raise ValidationFailure("metadata must be valid JSON", code="INVALID_METADATA") from exc
    return value


class SubscriptionManager:
    def __init__(self, store: RecordStore, profile_store: RecordStore, expiring_soon_days: int = 7):
        self.lifecycle = LifecycleProtocol(
            store=store,
            parent=ParentRef(store=profile_store, field="user_profile_id"),
        )
        self.expiring_soon_days = expiring_soon_days

    async def create(self, payload: Dict[str, Any]) -> Subscription:
        logger.info("[subscription] creating subscription for userProfileId=%s", payload.get("user_profile_id"))
        values = dict(payload)
        if "metadata" in values:
            values["metadata"] = parse_metadata(values["metadata"])
        return await self.lifecycle.create(values)

    async def find_by_id(self, subscription_id) -> Subscription:
        return await self.lifecycle.find_by_id(subscription_id)

    async def find_active_by_user_profile_id(self, user_profile_id) -> Optional[Subscription]:
        """Most recently created active subscription of a profile, or None."""
        rows = await self.lifecycle.store.list_active(
            order_by=("-created_at",),
            limit=1,
            user_profile_id=user_profile_id,
            status="active",
        )
        return rows[0] if rows else None

    async def find_all_by_user_profile_id(self, user_profile_id) -> List[Subscription]:
        return await self.lifecycle.store.list_active(
            order_by=("-created_at",),
            user_profile_id=user_profile_id,
        )

    async def update(self, subscription_id, patch: Dict[str, Any], expected_version: Optional[int] = None) -> Subscription:
        values = dict(patch)
        if "metadata" in values:
            values["metadata"] = parse_metadata(values["metadata"])
        return await self.lifecycle.update(subscription_id, values, expected_version)

    async def soft_delete(self, subscription_id) -> None:
        await self.lifecycle.soft_delete(subscription_id)

    # -------- billing state transitions (no expected version) --------
    async def cancel(self, subscription_id) -> Subscription:
        """
        Move to "canceled" from any state. Re-canceling re-stamps canceled_at.
        """
        logger.info("[subscription] canceling: %s", subscription_id)
        return await self.lifecycle.apply(
            subscription_id,
            {"status": "canceled", "canceled_at": utc_now(), "is_auto_renew": False},
        )

    async def suspend(self, subscription_id, reason: Optional[str] = None) -> Subscription:
        logger.info("[subscription] suspending: %s", subscription_id)
        fields: Dict[str, Any] = {"status": "suspended", "suspended_at": utc_now()}
        if reason:
            current = await self.lifecycle.find_by_id(subscription_id)
            metadata = current.metadata
            if metadata is None:
                metadata = {}
            elif not isinstance(metadata, dict):
                # Non-object metadata is kept under "previous"
                metadata = {"previous": metadata}
            fields["metadata"] = {**metadata, "suspendReason": reason}
        return await self.lifecycle.apply(subscription_id, fields)

    async def activate(self, subscription_id) -> Subscription:
        logger.info("[subscription] activating: %s", subscription_id)
        return await self.lifecycle.apply(subscription_id, {"status": "active", "suspended_at": None})

    # -------- expiration --------
    async def check_expiration(self, subscription_id) -> bool:
        """A subscription without end_date never expires; otherwise expired iff now > end_date."""
        subscription = await self.lifecycle.find_by_id(subscription_id)
        if subscription.end_date is None:
            return False
        return utc_now() > subscription.end_date

    async def find_expiring_soon(self, days: Optional[int] = None) -> List[Subscription]:
        """
        Active subscriptions whose end_date falls within [now, now + days], soonest first.
        """
        if days is None:
            days = self.expiring_soon_days
        if days < 0:
            raise ValidationFailure("days must not be negative", code="INVALID_WINDOW")
        logger.info("[subscription] finding subscriptions expiring within %d days", days)
        now = utc_now()
        return await self.lifecycle.store.list_active(
            order_by=("end_date",),
            status="active",
            end_date__gte=now,
            end_date__lte=now + dt.timedelta(days=days),
        )
