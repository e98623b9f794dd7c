# app/api/v1/patterns/status.py
"""
status.* message patterns.
"""
from app.core.dispatch import PatternDispatcher
from app.schemas.common import IdIn, UserProfileIdIn
from app.schemas.status import (
    BanStatusIn,
    CreateStatusIn,
    StatusUpdateIn,
    SuspendStatusIn,
    status_to_dict,
)
from app.services.status_manager import StatusManager


def register(dispatcher: PatternDispatcher, manager: StatusManager) -> None:

    @dispatcher.pattern("status.create", CreateStatusIn)
    async def create(body: CreateStatusIn):
        return status_to_dict(await manager.create(body.values()))

    @dispatcher.pattern("status.findById", IdIn)
    async def find_by_id(body: IdIn):
        return status_to_dict(await manager.find_by_id(body.id))

    @dispatcher.pattern("status.findByUserProfileId", UserProfileIdIn)
    async def find_by_user_profile_id(body: UserProfileIdIn):
        return status_to_dict(await manager.find_by_user_profile_id(body.user_profile_id))

    @dispatcher.pattern("status.update", StatusUpdateIn)
    async def update(body: StatusUpdateIn):
        patch = body.patch.values()
        version = patch.pop("version", None)
        return status_to_dict(await manager.update(body.id, patch, expected_version=version))

    @dispatcher.pattern("status.delete", IdIn)
    async def delete(body: IdIn):
        await manager.soft_delete(body.id)
        return {"success": True, "message": "Status deleted successfully"}

    @dispatcher.pattern("status.suspend", SuspendStatusIn)
    async def suspend(body: SuspendStatusIn):
        return status_to_dict(await manager.suspend(body.id, body.reason, body.actioned_by, body.expires_at))

    @dispatcher.pattern("status.ban", BanStatusIn)
    async def ban(body: BanStatusIn):
        return status_to_dict(await manager.ban(body.id, body.reason, body.actioned_by))

    @dispatcher.pattern("status.activate", IdIn)
    async def activate(body: IdIn):
        return status_to_dict(await manager.activate(body.id))

    @dispatcher.pattern("status.findAllSuspended")
    async def find_all_suspended(_payload):
        return [status_to_dict(s) for s in await manager.find_all_suspended()]

    @dispatcher.pattern("status.findAllBanned")
    async def find_all_banned(_payload):
        return [status_to_dict(s) for s in await manager.find_all_banned()]
