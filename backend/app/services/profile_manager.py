# app/services/profile_manager.py
"""
Profile record manager.
The profile anchors the account aggregate; it is keyed externally by auth_user_id.
"""
import logging
import math
from typing import Any, Dict, Optional

from app.core.store import RecordStore
from app.models.profile import UserProfile
from app.services.lifecycle import LifecycleProtocol

logger = logging.getLogger("uvicorn.error")


class ProfileManager:
    """
    Lifecycle operations for UserProfile.

    Deleting a profile does not cascade: settings, subscriptions and status
    rows keep their own lifecycle.
    """

    def __init__(
        self,
        store: RecordStore,
        settings_store: Optional[RecordStore] = None,
        subscription_store: Optional[RecordStore] = None,
        status_store: Optional[RecordStore] = None,
    ):
        self.lifecycle = LifecycleProtocol(store=store, natural_key="auth_user_id")
        self._settings_store = settings_store
        self._subscription_store = subscription_store
        self._status_store = status_store

    async def create(self, payload: Dict[str, Any]) -> UserProfile:
        """
        Create a profile for an external identity, restoring a soft-deleted one if present.
        """
        logger.info("[profile] creating profile for authUserId=%s", payload.get("auth_user_id"))
        await self.validate_auth_user(payload.get("auth_user_id"))
        return await self.lifecycle.create(payload)

    async def find_by_id(self, profile_id) -> UserProfile:
        return await self.lifecycle.find_by_id(profile_id)

    async def find_by_auth_user_id(self, auth_user_id: str) -> UserProfile:
        return await self.lifecycle.find_by_natural_key(auth_user_id)

    async def find_by_id_with_relations(self, profile_id) -> Dict[str, Any]:
        """
        Load a profile together with its active settings, subscriptions and status.

        Returns:
            dict: {"profile", "settings", "subscriptions", "status"}; settings and
                  status are None when absent or soft-deleted.
        """
        profile = await self.lifecycle.find_by_id(profile_id)
        relations: Dict[str, Any] = {"profile": profile, "settings": None, "subscriptions": [], "status": None}
        if self._settings_store is not None:
            relations["settings"] = await self._settings_store.get_active(user_profile_id=profile.id)
        if self._subscription_store is not None:
            relations["subscriptions"] = await self._subscription_store.list_active(user_profile_id=profile.id)
        if self._status_store is not None:
            relations["status"] = await self._status_store.get_active(user_profile_id=profile.id)
        return relations

    async def update(self, profile_id, patch: Dict[str, Any], expected_version: Optional[int] = None) -> UserProfile:
        return await self.lifecycle.update(profile_id, patch, expected_version)

    async def soft_delete(self, profile_id) -> None:
        await self.lifecycle.soft_delete(profile_id)

    async def find_all(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        """
        List active profiles, newest first.

        Returns:
            dict: {data, total, page, limit, totalPages}
        """
        store = self.lifecycle.store
        offset = (page - 1) * limit
        total = await store.count_active()
        rows = await store.list_active(order_by=("-created_at",), offset=offset, limit=limit)
        return {
            "data": rows,
            "total": total,
            "page": page,
            "limit": limit,
            "totalPages": math.ceil(total / limit),
        }

    async def validate_auth_user(self, auth_user_id: Optional[str]) -> bool:
        # Identity checks belong to the auth service; every id is accepted here
        logger.debug("[profile] auth validation skipped for authUserId=%s", auth_user_id)
        return True
