"""
Unit tests for services.settings_manager.
"""
import pytest

from app.core.errors import DuplicateActiveRecord, NotFound, ParentNotFound, VersionConflict
from app.services.settings_manager import SETTINGS_DEFAULTS


pytestmark = pytest.mark.asyncio


def _preferences(record) -> dict:
    return {name: getattr(record, name) for name in SETTINGS_DEFAULTS}


async def test_create_applies_defaults(managers, create_profile):
    profile = await create_profile()
    settings = await managers.settings.create({"user_profile_id": profile.id})
    assert _preferences(settings) == SETTINGS_DEFAULTS
    assert settings.version == 1


async def test_one_settings_row_per_profile(managers, create_profile):
    profile = await create_profile()
    await managers.settings.create({"user_profile_id": profile.id})
    with pytest.raises(DuplicateActiveRecord):
        await managers.settings.create({"user_profile_id": profile.id, "theme": "dark"})


async def test_recreate_after_delete_restores_same_row(managers, create_profile):
    profile = await create_profile()
    first = await managers.settings.create({"user_profile_id": profile.id, "theme": "dark"})
    await managers.settings.soft_delete(first.id)

    again = await managers.settings.create({"user_profile_id": profile.id, "language": "fr"})

    assert again.id == first.id
    assert again.language == "fr"
    assert again.theme == "dark"
    assert again.version == 3


async def test_create_for_deleted_profile(managers, create_profile):
    profile = await create_profile()
    await managers.profile.soft_delete(profile.id)
    with pytest.raises(ParentNotFound):
        await managers.settings.create({"user_profile_id": profile.id})


async def test_update_with_expected_version(managers, create_profile):
    profile = await create_profile()
    settings = await managers.settings.create({"user_profile_id": profile.id})

    updated = await managers.settings.update(settings.id, {"theme": "dark"}, expected_version=1)
    assert updated.theme == "dark"
    assert updated.version == 2

    with pytest.raises(VersionConflict):
        await managers.settings.update(settings.id, {"theme": "light"}, expected_version=1)


async def test_reset_directly_after_create(managers):
    """Profile u1 -> settings with defaults -> reset: defaults again at version 2."""
    profile = await managers.profile.create({"auth_user_id": "u1"})
    settings = await managers.settings.create({"user_profile_id": profile.id})

    reset = await managers.settings.reset_to_defaults(settings.id)

    assert _preferences(reset) == SETTINGS_DEFAULTS
    assert reset.version == 2


async def test_reset_overwrites_customised_values(managers, create_profile):
    profile = await create_profile()
    settings = await managers.settings.create(
        {"user_profile_id": profile.id, "theme": "dark", "session_timeout": 60, "autoplay": False}
    )

    reset = await managers.settings.reset_to_defaults(settings.id)

    assert reset.theme == "light"
    assert reset.session_timeout == 3600
    assert reset.autoplay is True


async def test_reset_of_deleted_settings(managers, create_profile):
    profile = await create_profile()
    settings = await managers.settings.create({"user_profile_id": profile.id})
    await managers.settings.soft_delete(settings.id)
    with pytest.raises(NotFound):
        await managers.settings.reset_to_defaults(settings.id)


async def test_find_by_user_profile_id(managers, create_profile):
    profile = await create_profile()
    settings = await managers.settings.create({"user_profile_id": profile.id})
    found = await managers.settings.find_by_user_profile_id(profile.id)
    assert found.id == settings.id
