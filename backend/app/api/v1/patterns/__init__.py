"""
Message pattern handlers, one module per record type.
"""
from typing import Optional

from app.core.dispatch import PatternDispatcher
from app.services.registry import Managers, build_managers

from . import profile, settings, status, subscription


def build_dispatcher(managers: Optional[Managers] = None) -> PatternDispatcher:
    """Register every profile/settings/subscription/status pattern on a new dispatcher."""
    managers = managers or build_managers()
    dispatcher = PatternDispatcher()
    profile.register(dispatcher, managers.profile)
    settings.register(dispatcher, managers.settings)
    subscription.register(dispatcher, managers.subscription)
    status.register(dispatcher, managers.status)
    return dispatcher
