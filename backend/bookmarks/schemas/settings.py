"""
Bookmarks Backend: Site Settings Schemas
========================================

The frontend speaks camelCase (`siteTitle`, `siteIcon`); the alias generator
maps those onto snake_case attributes. Theme and length rules are enforced
by SettingsService so they fail with the Chinese 400 messages.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SettingsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    theme: str
    site_title: str
    site_icon: str


class SettingsUpdate(BaseModel):
    """Partial update; omitted or null fields are left unchanged."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    theme: Optional[str] = None
    site_title: Optional[str] = None
    site_icon: Optional[str] = None
