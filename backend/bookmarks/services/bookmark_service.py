"""
Bookmarks Backend: Bookmark Service (Ordering & CRUD)
=====================================================

What:  Business logic for bookmarks: listing, create/update/delete and
       manual reordering, keeping per-category display order contiguous.
Who:   Called by the bookmark route handlers.

Order Maintenance:
    Within one category the `order` column holds 0..n-1.

    create      → order = max(order in category) + 1
    delete      → every later item in the category shifts up by one
    move        → close the gap in the old category, append to the new one
    reorder     → order = position in the submitted id list; unmentioned
                  bookmarks follow in their current listing order

    Example (delete "b" from category "dev"):
        before: a=0  b=1  c=2  d=3
        after:  a=0       c=1  d=2

Listing Order:
    1. Category rank from `category_order` (unlisted categories last)
    2. Category name (keeps unlisted categories grouped)
    3. `order` ascending, then creation time as a tie-breaker

Statements run inside the caller's session without row locks; the session
dependency commits once per request.
"""

import logging
import re
import uuid
from typing import Dict, List, Optional, Sequence

from sqlalchemy import case, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.exceptions import DatabaseError, NotFoundError, ValidationError
from bookmarks.models.bookmark import Bookmark
from bookmarks.models.category_order import CategoryOrder
from bookmarks.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_category(category: Optional[str]) -> str:
    """Trims a category name; absent or blank becomes "" (uncategorized)."""
    return (category or "").strip()


def sanitize_url(url: str) -> str:
    """Trims the URL and adds https:// when it has no http(s) scheme."""
    trimmed = url.strip()
    if _SCHEME_RE.match(trimmed):
        return trimmed
    return f"https://{trimmed}"


def _clean_description(description: Optional[str]) -> Optional[str]:
    return (description or "").strip() or None


class BookmarkService:
    """
    Bookmark store operations.

    Error Handling Strategy:
        Business-rule failures raise ValidationError / NotFoundError directly.
        SQLAlchemy failures are logged and wrapped in DatabaseError with a
        message naming the failed operation.
    """

    # ── Queries ───────────────────────────────────────────────────────────

    def _listing_query(self):
        rank_missing = case((CategoryOrder.order.is_(None), 1), else_=0)
        return (
            select(Bookmark)
            .outerjoin(CategoryOrder, CategoryOrder.category == Bookmark.category)
            .order_by(
                rank_missing,
                CategoryOrder.order,
                Bookmark.category,
                Bookmark.order,
                Bookmark.created_at,
            )
        )

    async def _ordered_bookmarks(
        self, db: AsyncSession, include_hidden: bool = True
    ) -> List[Bookmark]:
        query = self._listing_query()
        if not include_hidden:
            query = query.where(Bookmark.visible.is_(True))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def _get_or_raise(self, db: AsyncSession, bookmark_id: str) -> Bookmark:
        bookmark = await db.get(Bookmark, bookmark_id)
        if bookmark is None:
            raise NotFoundError(resource="书签", resource_id=bookmark_id)
        return bookmark

    async def _next_order(self, db: AsyncSession, category: str) -> int:
        """max(order) + 1 within the category; 0 for an empty category."""
        result = await db.execute(
            select(func.coalesce(func.max(Bookmark.order), -1)).where(
                Bookmark.category == category
            )
        )
        return int(result.scalar_one()) + 1

    async def _close_gap(self, db: AsyncSession, category: str, removed_order: int) -> None:
        """Shifts every bookmark after `removed_order` in the category up by one."""
        await db.execute(
            update(Bookmark)
            .where(Bookmark.category == category, Bookmark.order > removed_order)
            .values(order=Bookmark.order - 1)
            .execution_options(synchronize_session="fetch")
        )

    # ── Public API ────────────────────────────────────────────────────────

    async def list_bookmarks(
        self, db: AsyncSession, include_hidden: bool = True
    ) -> List[BookmarkResponse]:
        """
        All bookmarks in display order.

        Args:
            include_hidden: False drops visible=false bookmarks (anonymous callers)
        """
        try:
            bookmarks = await self._ordered_bookmarks(db, include_hidden=include_hidden)
        except SQLAlchemyError as e:
            logger.error("Database error listing bookmarks: %s", str(e), exc_info=True)
            raise DatabaseError(message="获取书签失败")
        return [BookmarkResponse.model_validate(b) for b in bookmarks]

    async def create_bookmark(self, db: AsyncSession, data: BookmarkCreate) -> BookmarkResponse:
        """
        Appends a new bookmark to the end of its category.

        Raises:
            ValidationError: title or url missing/blank (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        title = (data.title or "").strip()
        url = (data.url or "").strip()
        if not title or not url:
            raise ValidationError(message="标题和链接不能为空")

        category = normalize_category(data.category)

        try:
            bookmark = Bookmark(
                id=str(uuid.uuid4()),
                title=title,
                url=sanitize_url(url),
                category=category,
                description=_clean_description(data.description),
                visible=True if data.visible is None else data.visible,
                order=await self._next_order(db, category),
            )
            db.add(bookmark)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating bookmark: %s", str(e), exc_info=True)
            raise DatabaseError(message="新增书签失败", context={"category": category})

        logger.info(
            "Bookmark created: %s (category=%r, order=%d)",
            bookmark.id, bookmark.category, bookmark.order,
        )
        return BookmarkResponse.model_validate(bookmark)

    async def update_bookmark(
        self, db: AsyncSession, bookmark_id: str, patch: BookmarkUpdate
    ) -> BookmarkResponse:
        """
        Applies the fields present in `patch`; omitted fields keep their values.

        A category change closes the gap in the old category and appends the
        bookmark to the end of the new one.

        Raises:
            NotFoundError: no bookmark with this id (→ 404)
            ValidationError: title or url given but blank (→ 400)
        """
        fields = patch.model_fields_set

        # Validate before touching anything
        title = url = None
        if "title" in fields:
            title = (patch.title or "").strip()
            if not title:
                raise ValidationError(message="标题不能为空", field="title")
        if "url" in fields:
            url = (patch.url or "").strip()
            if not url:
                raise ValidationError(message="链接不能为空", field="url")

        try:
            bookmark = await self._get_or_raise(db, bookmark_id)

            if "category" in fields:
                new_category = normalize_category(patch.category)
                if new_category != bookmark.category:
                    old_category = bookmark.category
                    await self._close_gap(db, old_category, bookmark.order)
                    # Computed before the move, so the bookmark itself is not counted
                    new_order = await self._next_order(db, new_category)
                    bookmark.category = new_category
                    bookmark.order = new_order
                    logger.info(
                        "Bookmark %s moved: %r → %r (order=%d)",
                        bookmark_id, old_category, new_category, new_order,
                    )

            if title is not None:
                bookmark.title = title
            if url is not None:
                bookmark.url = sanitize_url(url)
            if "description" in fields:
                bookmark.description = _clean_description(patch.description)
            if "visible" in fields:
                bookmark.visible = True if patch.visible is None else patch.visible

            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating bookmark %s: %s", bookmark_id, str(e), exc_info=True)
            raise DatabaseError(message="更新书签失败", context={"bookmark_id": bookmark_id})

        return BookmarkResponse.model_validate(bookmark)

    async def delete_bookmark(self, db: AsyncSession, bookmark_id: str) -> BookmarkResponse:
        """
        Removes a bookmark and closes the gap it leaves in its category.

        Returns:
            The deleted bookmark as it was before removal.
        """
        try:
            bookmark = await self._get_or_raise(db, bookmark_id)
            deleted = BookmarkResponse.model_validate(bookmark)

            await self._close_gap(db, bookmark.category, bookmark.order)
            await db.delete(bookmark)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting bookmark %s: %s", bookmark_id, str(e), exc_info=True)
            raise DatabaseError(message="删除书签失败", context={"bookmark_id": bookmark_id})

        logger.info("Bookmark deleted: %s (category=%r)", bookmark_id, deleted.category)
        return deleted

    async def reorder_bookmarks(
        self, db: AsyncSession, ids: Sequence[str]
    ) -> List[BookmarkResponse]:
        """
        Assigns order = position for each id in `ids`.

        Unknown ids are ignored and positions are not compacted; a repeated
        id keeps its last position. Bookmarks not mentioned are appended in
        their current listing order, numbered from len(ids).
        """
        positions: Dict[str, int] = {}
        for index, bookmark_id in enumerate(ids):
            positions[bookmark_id] = index

        try:
            next_order = len(ids)
            for bookmark in await self._ordered_bookmarks(db):
                if bookmark.id in positions:
                    bookmark.order = positions[bookmark.id]
                else:
                    bookmark.order = next_order
                    next_order += 1
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error reordering bookmarks: %s", str(e), exc_info=True)
            raise DatabaseError(message="调整书签顺序失败")

        logger.info("Bookmarks reordered: %d ids submitted", len(ids))
        return await self.list_bookmarks(db)


# ── Singleton Instance ────────────────────────────────────────────────────
bookmark_service = BookmarkService()
