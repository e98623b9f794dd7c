# app/api/v1/patterns/profile.py
"""
profile.* message patterns.
"""
from app.core.dispatch import PatternDispatcher
from app.schemas.common import IdIn, PageIn
from app.schemas.profile import AuthUserIdIn, CreateProfileIn, ProfileUpdateIn, profile_to_dict
from app.schemas.settings import settings_to_dict
from app.schemas.status import status_to_dict
from app.schemas.subscription import subscription_to_dict
from app.services.profile_manager import ProfileManager


def register(dispatcher: PatternDispatcher, manager: ProfileManager) -> None:

    @dispatcher.pattern("profile.create", CreateProfileIn)
    async def create(body: CreateProfileIn):
        return profile_to_dict(await manager.create(body.values()))

    @dispatcher.pattern("profile.findById", IdIn)
    async def find_by_id(body: IdIn):
        return profile_to_dict(await manager.find_by_id(body.id))

    @dispatcher.pattern("profile.findByAuthUserId", AuthUserIdIn)
    async def find_by_auth_user_id(body: AuthUserIdIn):
        return profile_to_dict(await manager.find_by_auth_user_id(body.auth_user_id))

    @dispatcher.pattern("profile.findByIdWithRelations", IdIn)
    async def find_by_id_with_relations(body: IdIn):
        relations = await manager.find_by_id_with_relations(body.id)
        data = profile_to_dict(relations["profile"])
        data["settings"] = settings_to_dict(relations["settings"])
        data["subscriptions"] = [subscription_to_dict(s) for s in relations["subscriptions"]]
        data["status"] = status_to_dict(relations["status"])
        return data

    @dispatcher.pattern("profile.update", ProfileUpdateIn)
    async def update(body: ProfileUpdateIn):
        patch = body.patch.values()
        version = patch.pop("version", None)
        return profile_to_dict(await manager.update(body.id, patch, expected_version=version))

    @dispatcher.pattern("profile.delete", IdIn)
    async def delete(body: IdIn):
        await manager.soft_delete(body.id)
        return {"success": True, "message": "Profile deleted successfully"}

    @dispatcher.pattern("profile.findAll", PageIn)
    async def find_all(body: PageIn):
        result = await manager.find_all(page=body.page, limit=body.limit)
        result["data"] = [profile_to_dict(p) for p in result["data"]]
        return result
