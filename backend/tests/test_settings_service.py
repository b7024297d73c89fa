"""
Bookmarks Backend: Settings Service Tests
=========================================

What we test:
    ✅ defaults when nothing is stored
    ✅ partial updates merge over stored values
    ✅ invalid theme / overlong title / overlong icon are rejected
    ✅ a rejected update writes nothing
"""

import pytest

from bookmarks.exceptions import ValidationError
from bookmarks.schemas.settings import SettingsUpdate
from bookmarks.services.settings_service import (
    MAX_SITE_ICON_LENGTH,
    MAX_SITE_TITLE_LENGTH,
    SettingsService,
)


class TestSettingsService:

    def setup_method(self):
        self.service = SettingsService()

    @pytest.mark.asyncio
    async def test_defaults(self, db_session):
        current = await self.service.get_settings(db_session)

        assert current.theme == "light"
        assert current.site_title == "个人书签"
        assert current.site_icon == "🔖"

    @pytest.mark.asyncio
    async def test_update_merges_over_defaults(self, db_session):
        updated = await self.service.update_settings(
            db_session, SettingsUpdate(theme="dark", siteTitle="My Links")
        )

        assert updated.theme == "dark"
        assert updated.site_title == "My Links"
        assert updated.site_icon == "🔖"

    @pytest.mark.asyncio
    async def test_second_update_overwrites_stored_row(self, db_session):
        await self.service.update_settings(db_session, SettingsUpdate(theme="dark"))
        updated = await self.service.update_settings(db_session, SettingsUpdate(theme="ocean"))

        assert updated.theme == "ocean"

    @pytest.mark.asyncio
    async def test_invalid_theme_leaves_settings_unchanged(self, db_session):
        await self.service.update_settings(db_session, SettingsUpdate(theme="forest"))

        with pytest.raises(ValidationError, match="主题"):
            await self.service.update_settings(
                db_session, SettingsUpdate(theme="neon", siteTitle="Changed")
            )

        current = await self.service.get_settings(db_session)
        assert current.theme == "forest"
        assert current.site_title == "个人书签"

    @pytest.mark.asyncio
    async def test_title_too_long(self, db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_settings(
                db_session, SettingsUpdate(siteTitle="x" * (MAX_SITE_TITLE_LENGTH + 1))
            )
        assert exc_info.value.field == "siteTitle"

    @pytest.mark.asyncio
    async def test_title_at_limit_is_accepted(self, db_session):
        title = "x" * MAX_SITE_TITLE_LENGTH
        updated = await self.service.update_settings(db_session, SettingsUpdate(siteTitle=title))
        assert updated.site_title == title

    @pytest.mark.asyncio
    async def test_icon_too_long(self, db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_settings(
                db_session, SettingsUpdate(siteIcon="i" * (MAX_SITE_ICON_LENGTH + 1))
            )
        assert exc_info.value.field == "siteIcon"
