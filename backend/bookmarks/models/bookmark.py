"""
Bookmarks Backend: Bookmark SQLAlchemy Model
============================================

What:  ORM model for the `bookmarks` table.
Who:   Used by BookmarkService for CRUD and ordering; read by Alembic.

Table Design Rationale:
    - id: UUID4 text, generated in Python (portable across PostgreSQL and SQLite)
    - category: NOT NULL, "" for uncategorized, so `category = :value`
      matches the uncategorized group during order maintenance
    - "order": display position within the category; contiguous 0..n-1
    - created_at / updated_at: bookkeeping only, not exposed by the API
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from bookmarks.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Bookmark(Base):
    """
    A saved URL with title, category, visibility and display order.

    Query Patterns:
        - Listing: JOIN category_order, ORDER BY category rank then "order"
        - Order maintenance: WHERE category = :c AND "order" > :n
          → uses idx_bookmarks_category
    """

    __tablename__ = "bookmarks"

    id: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)

    url: Mapped[str] = mapped_column(Text, nullable=False)

    category: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        server_default=text("''"),
    )

    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    visible: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    # "order" is a reserved word; SQLAlchemy quotes the column name
    order: Mapped[int] = mapped_column(
        "order",
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_bookmarks_category", "category"),
        Index("idx_bookmarks_order", "order"),
    )

    def __repr__(self) -> str:
        return (
            f"<Bookmark(id={self.id}, category='{self.category}', "
            f"order={self.order}, title='{self.title}')>"
        )
