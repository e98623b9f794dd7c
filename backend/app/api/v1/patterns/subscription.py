# app/api/v1/patterns/subscription.py
"""
subscription.* message patterns.
"""
from app.core.dispatch import PatternDispatcher
from app.schemas.common import IdIn, UserProfileIdIn
from app.schemas.subscription import (
    CreateSubscriptionIn,
    ExpiringSoonIn,
    SubscriptionUpdateIn,
    SuspendSubscriptionIn,
    subscription_to_dict,
)
from app.services.subscription_manager import SubscriptionManager


def register(dispatcher: PatternDispatcher, manager: SubscriptionManager) -> None:

    @dispatcher.pattern("subscription.create", CreateSubscriptionIn)
    async def create(body: CreateSubscriptionIn):
        return subscription_to_dict(await manager.create(body.values()))

    @dispatcher.pattern("subscription.findById", IdIn)
    async def find_by_id(body: IdIn):
        return subscription_to_dict(await manager.find_by_id(body.id))

    @dispatcher.pattern("subscription.findActiveByUserProfileId", UserProfileIdIn)
    async def find_active_by_user_profile_id(body: UserProfileIdIn):
        # None when the profile has no active subscription
        return subscription_to_dict(await manager.find_active_by_user_profile_id(body.user_profile_id))

    @dispatcher.pattern("subscription.findAllByUserProfileId", UserProfileIdIn)
    async def find_all_by_user_profile_id(body: UserProfileIdIn):
        rows = await manager.find_all_by_user_profile_id(body.user_profile_id)
        return [subscription_to_dict(s) for s in rows]

    @dispatcher.pattern("subscription.update", SubscriptionUpdateIn)
    async def update(body: SubscriptionUpdateIn):
        patch = body.patch.values()
        version = patch.pop("version", None)
        return subscription_to_dict(await manager.update(body.id, patch, expected_version=version))

    @dispatcher.pattern("subscription.delete", IdIn)
    async def delete(body: IdIn):
        await manager.soft_delete(body.id)
        return {"success": True, "message": "Subscription deleted successfully"}

    @dispatcher.pattern("subscription.cancel", IdIn)
    async def cancel(body: IdIn):
        return subscription_to_dict(await manager.cancel(body.id))

    @dispatcher.pattern("subscription.suspend", SuspendSubscriptionIn)
    async def suspend(body: SuspendSubscriptionIn):
        return subscription_to_dict(await manager.suspend(body.id, body.reason))

    @dispatcher.pattern("subscription.activate", IdIn)
    async def activate(body: IdIn):
        return subscription_to_dict(await manager.activate(body.id))

    @dispatcher.pattern("subscription.checkExpiration", IdIn)
    async def check_expiration(body: IdIn):
        return {"isExpired": await manager.check_expiration(body.id)}

    @dispatcher.pattern("subscription.findExpiringSoon", ExpiringSoonIn)
    async def find_expiring_soon(body: ExpiringSoonIn):
        rows = await manager.find_expiring_soon(body.days)
        return [subscription_to_dict(s) for s in rows]
