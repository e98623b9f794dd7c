# app/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- UserProfile: Aggregate root, keyed externally by auth_user_id
- UserSettings: Preferences (one-to-one with UserProfile)
- Subscription: Plans and billing state (one-to-many with UserProfile)
- UserStatus: Moderation state and capability flags (one-to-one with UserProfile)
"""
from .profile import UserProfile
from .settings import UserSettings
from .subscription import Subscription
from .status import UserStatus
