# app/services/settings_manager.py
"""
Settings record manager (one settings row per profile).
"""
import logging
from typing import Any, Dict, Optional

from app.core.store import RecordStore
from app.models.settings import UserSettings
from app.services.lifecycle import LifecycleProtocol, ParentRef

logger = logging.getLogger("uvicorn.error")

# Applied on create for fields the caller leaves out, and written back by reset
SETTINGS_DEFAULTS: Dict[str, Any] = {
    "language": "en",
    "theme": "light",
    "timezone": "UTC",
    "email_notifications": True,
    "push_notifications": True,
    "sms_notifications": False,
    "marketing_emails": False,
    "autoplay": True,
    "video_quality": "auto",
    "subtitles_enabled": False,
    "subtitles_language": "en",
    "maturity_rating": "PG-13",
    "data_saver_mode": False,
    "two_factor_enabled": False,
    "session_timeout": 3600,
    "privacy_show_profile": True,
    "privacy_show_activity": False,
    "privacy_allow_messages": True,
}


class SettingsManager:
    def __init__(self, store: RecordStore, profile_store: RecordStore):
        self.lifecycle = LifecycleProtocol(
            store=store,
            natural_key="user_profile_id",
            parent=ParentRef(store=profile_store, field="user_profile_id"),
            defaults=SETTINGS_DEFAULTS,
        )

    async def create(self, payload: Dict[str, Any]) -> UserSettings:
        logger.info("[settings] creating settings for userProfileId=%s", payload.get("user_profile_id"))
        return await self.lifecycle.create(payload)

    async def find_by_id(self, settings_id) -> UserSettings:
        return await self.lifecycle.find_by_id(settings_id)

    async def find_by_user_profile_id(self, user_profile_id) -> UserSettings:
        return await self.lifecycle.find_by_natural_key(user_profile_id)

    async def update(self, settings_id, patch: Dict[str, Any], expected_version: Optional[int] = None) -> UserSettings:
        return await self.lifecycle.update(settings_id, patch, expected_version)

    async def soft_delete(self, settings_id) -> None:
        await self.lifecycle.soft_delete(settings_id)

    async def reset_to_defaults(self, settings_id) -> UserSettings:
        """
        Overwrite every preference with SETTINGS_DEFAULTS.

        Last write wins: no expected version is taken.
        """
        current = await self.lifecycle.find_by_id(settings_id)
        logger.info("[settings] resetting to defaults: %s", current.id)
        return await self.lifecycle.apply(current.id, dict(SETTINGS_DEFAULTS))
