"""
Bookmarks Backend: Site Setting Model
=====================================

What:  Key-value rows backing the site settings (theme, siteTitle, siteIcon).
Why:   A key-value table lets new settings be added without a migration.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from bookmarks.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SiteSetting(Base):
    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)

    value: Mapped[str] = mapped_column(Text, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<SiteSetting(key='{self.key}', value='{self.value}')>"
