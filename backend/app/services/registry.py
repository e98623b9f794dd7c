# app/services/registry.py
"""
Wiring of store handles and record managers.
"""
from dataclasses import dataclass

from app.config import settings
from app.core.store import RecordStore
from app.models import Subscription, UserProfile, UserSettings, UserStatus
from app.services.profile_manager import ProfileManager
from app.services.settings_manager import SettingsManager
from app.services.status_manager import StatusManager
from app.services.subscription_manager import SubscriptionManager


@dataclass
class Managers:
    profile: ProfileManager
    settings: SettingsManager
    subscription: SubscriptionManager
    status: StatusManager


def build_managers() -> Managers:
    """
    Create one RecordStore per table and hand them to the managers.

    Building the managers does not touch the database; connections are opened
    by app.core.db.init_db().
    """
    profile_store = RecordStore(UserProfile, "Profile")
    settings_store = RecordStore(UserSettings, "Settings")
    subscription_store = RecordStore(Subscription, "Subscription")
    status_store = RecordStore(UserStatus, "Status")

    return Managers(
        profile=ProfileManager(
            profile_store,
            settings_store=settings_store,
            subscription_store=subscription_store,
            status_store=status_store,
        ),
        settings=SettingsManager(settings_store, profile_store),
        subscription=SubscriptionManager(
            subscription_store,
            profile_store,
            expiring_soon_days=settings.expiring_soon_days,
        ),
        status=StatusManager(status_store, profile_store),
    )
