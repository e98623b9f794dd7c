# app/services/status_manager.py
"""
Account status record manager: moderation state machine and capability flags.

States: active <-> suspended, active/suspended -> banned. Ban has no reverse
transition here; only the generic update can change a banned row.
"""
import datetime as dt
import logging
from typing import Any, Dict, List, Optional

from app.core.store import RecordStore, utc_now
from app.models.status import UserStatus
from app.services.lifecycle import LifecycleProtocol, ParentRef

logger = logging.getLogger("uvicorn.error")

# Flags forced off by each transition; activate turns the ban set back on.
SUSPEND_REVOKES = ("can_login", "can_stream")
BAN_REVOKES = ("can_login", "can_stream", "can_comment", "can_message", "can_purchase")


class StatusManager:
    """
    suspend / ban / activate bump the version without an expected version:
    an administrative action overrides a concurrent user update.
    """

    def __init__(self, store: RecordStore, profile_store: RecordStore):
        self.lifecycle = LifecycleProtocol(
            store=store,
            natural_key="user_profile_id",
            parent=ParentRef(store=profile_store, field="user_profile_id"),
        )

    async def create(self, payload: Dict[str, Any]) -> UserStatus:
        logger.info("[status] creating status for userProfileId=%s", payload.get("user_profile_id"))
        return await self.lifecycle.create(payload)

    async def find_by_id(self, status_id) -> UserStatus:
        return await self.lifecycle.find_by_id(status_id)

    async def find_by_user_profile_id(self, user_profile_id) -> UserStatus:
        return await self.lifecycle.find_by_natural_key(user_profile_id)

    async def update(self, status_id, patch: Dict[str, Any], expected_version: Optional[int] = None) -> UserStatus:
        return await self.lifecycle.update(status_id, patch, expected_version)

    async def soft_delete(self, status_id) -> None:
        await self.lifecycle.soft_delete(status_id)

    # -------- moderation transitions --------
    async def suspend(
        self,
        status_id,
        reason: str,
        actioned_by: str,
        expires_at: Optional[dt.datetime] = None,
    ) -> UserStatus:
        logger.info("[status] suspending %s by %s", status_id, actioned_by)
        fields: Dict[str, Any] = {
            "status": "suspended",
            "reason": reason,
            "actioned_by": actioned_by,
            "actioned_at": utc_now(),
            "expires_at": expires_at,
        }
        fields.update({flag: False for flag in SUSPEND_REVOKES})
        return await self.lifecycle.apply(status_id, fields)

    async def ban(self, status_id, reason: str, actioned_by: str) -> UserStatus:
        logger.info("[status] banning %s by %s", status_id, actioned_by)
        fields: Dict[str, Any] = {
            "status": "banned",
            "reason": reason,
            "actioned_by": actioned_by,
            "actioned_at": utc_now(),
        }
        fields.update({flag: False for flag in BAN_REVOKES})
        return await self.lifecycle.apply(status_id, fields)

    async def activate(self, status_id) -> UserStatus:
        """
        Back to "active": clears moderation reason and expiry and restores the
        login/stream/comment/message/purchase flags. Verification and role
        flags are left as they are.
        """
        logger.info("[status] activating %s", status_id)
        fields: Dict[str, Any] = {
            "status": "active",
            "reason": None,
            "reason_detail": None,
            "expires_at": None,
        }
        fields.update({flag: True for flag in BAN_REVOKES})
        return await self.lifecycle.apply(status_id, fields)

    async def find_all_suspended(self) -> List[UserStatus]:
        return await self.lifecycle.store.list_active(order_by=("-actioned_at",), status="suspended")

    async def find_all_banned(self) -> List[UserStatus]:
        return await self.lifecycle.store.list_active(order_by=("-actioned_at",), status="banned")
