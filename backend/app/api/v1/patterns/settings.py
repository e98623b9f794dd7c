# app/api/v1/patterns/settings.py
"""
settings.* message patterns.
"""
from app.core.dispatch import PatternDispatcher
from app.schemas.common import IdIn, UserProfileIdIn
from app.schemas.settings import CreateSettingsIn, SettingsUpdateIn, settings_to_dict
from app.services.settings_manager import SettingsManager


def register(dispatcher: PatternDispatcher, manager: SettingsManager) -> None:

    @dispatcher.pattern("settings.create", CreateSettingsIn)
    async def create(body: CreateSettingsIn):
        return settings_to_dict(await manager.create(body.values()))

    @dispatcher.pattern("settings.findById", IdIn)
    async def find_by_id(body: IdIn):
        return settings_to_dict(await manager.find_by_id(body.id))

    @dispatcher.pattern("settings.findByUserProfileId", UserProfileIdIn)
    async def find_by_user_profile_id(body: UserProfileIdIn):
        return settings_to_dict(await manager.find_by_user_profile_id(body.user_profile_id))

    @dispatcher.pattern("settings.update", SettingsUpdateIn)
    async def update(body: SettingsUpdateIn):
        patch = body.patch.values()
        version = patch.pop("version", None)
        return settings_to_dict(await manager.update(body.id, patch, expected_version=version))

    @dispatcher.pattern("settings.delete", IdIn)
    async def delete(body: IdIn):
        await manager.soft_delete(body.id)
        return {"success": True, "message": "Settings deleted successfully"}

    @dispatcher.pattern("settings.reset", IdIn)
    async def reset(body: IdIn):
        return settings_to_dict(await manager.reset_to_defaults(body.id))
