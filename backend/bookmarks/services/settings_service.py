"""
Bookmarks Backend: Site Settings Service
========================================

What:  Reads and updates the site-wide settings (theme, title, icon).
How:   Values live as key-value rows in `settings`; reads merge them over
       DEFAULT_SETTINGS, writes upsert only the provided keys.

Validation happens for every provided field before any row is written, so a
rejected update leaves stored settings untouched.
"""

import logging
from typing import Dict

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.exceptions import DatabaseError, ValidationError
from bookmarks.models.setting import SiteSetting
from bookmarks.schemas.settings import SettingsResponse, SettingsUpdate

logger = logging.getLogger(__name__)

VALID_THEMES = ("light", "dark", "forest", "ocean", "sunrise", "twilight")
MAX_SITE_TITLE_LENGTH = 60
MAX_SITE_ICON_LENGTH = 512

# Keys are the stored (and API) names
DEFAULT_SETTINGS: Dict[str, str] = {
    "theme": "light",
    "siteTitle": "个人书签",
    "siteIcon": "🔖",
}

# SettingsUpdate attribute → stored key
_FIELD_KEYS = {
    "theme": "theme",
    "site_title": "siteTitle",
    "site_icon": "siteIcon",
}


def validate_settings(values: Dict[str, str]) -> None:
    """Raises ValidationError for the first provided field that breaks a rule."""
    theme = values.get("theme")
    if theme is not None and theme not in VALID_THEMES:
        raise ValidationError(
            message="主题必须是 light/dark/forest/ocean/sunrise/twilight 之一",
            field="theme",
        )

    site_title = values.get("site_title")
    if site_title is not None and len(site_title) > MAX_SITE_TITLE_LENGTH:
        raise ValidationError(
            message=f"站点标题不能超过 {MAX_SITE_TITLE_LENGTH} 个字符",
            field="siteTitle",
        )

    site_icon = values.get("site_icon")
    if site_icon is not None and len(site_icon) > MAX_SITE_ICON_LENGTH:
        raise ValidationError(
            message=f"站点图标不能超过 {MAX_SITE_ICON_LENGTH} 个字符",
            field="siteIcon",
        )


class SettingsService:

    async def get_settings(self, db: AsyncSession) -> SettingsResponse:
        """Stored values merged over DEFAULT_SETTINGS."""
        try:
            result = await db.execute(
                select(SiteSetting).where(SiteSetting.key.in_(DEFAULT_SETTINGS.keys()))
            )
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error reading settings: %s", str(e), exc_info=True)
            raise DatabaseError(message="获取设置失败")

        merged = dict(DEFAULT_SETTINGS)
        merged.update({row.key: row.value for row in rows})
        return SettingsResponse(
            theme=merged["theme"],
            site_title=merged["siteTitle"],
            site_icon=merged["siteIcon"],
        )

    async def update_settings(self, db: AsyncSession, patch: SettingsUpdate) -> SettingsResponse:
        """
        Upserts the provided settings.

        Raises:
            ValidationError: unknown theme, title over 60 or icon over 512 chars
        """
        values = patch.model_dump(exclude_none=True)
        validate_settings(values)

        try:
            for field, value in values.items():
                key = _FIELD_KEYS[field]
                row = await db.get(SiteSetting, key)
                if row is None:
                    db.add(SiteSetting(key=key, value=value))
                else:
                    row.value = value
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating settings: %s", str(e), exc_info=True)
            raise DatabaseError(message="更新设置失败")

        if values:
            logger.info("Settings updated: %s", ", ".join(_FIELD_KEYS[f] for f in values))
        return await self.get_settings(db)


settings_service = SettingsService()
