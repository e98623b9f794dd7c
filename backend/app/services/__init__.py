"""
Services Module

Record managers for the account aggregate:
- ProfileManager: aggregate root keyed by authUserId
- SettingsManager: per-profile preferences with reset to defaults
- SubscriptionManager: billing state machine and expiration queries
- StatusManager: moderation state machine and capability flags

All of them share the versioned LifecycleProtocol.
"""

from .lifecycle import LifecycleProtocol, ParentRef
from .profile_manager import ProfileManager
from .settings_manager import SettingsManager, SETTINGS_DEFAULTS
from .subscription_manager import SubscriptionManager
from .status_manager import StatusManager
from .registry import Managers, build_managers

__all__ = [
    "LifecycleProtocol",
    "ParentRef",
    "ProfileManager",
    "SettingsManager",
    "SETTINGS_DEFAULTS",
    "SubscriptionManager",
    "StatusManager",
    "Managers",
    "build_managers",
]
