"""
Bookmarks Backend: Category Order Service
=========================================

What:  Maintains the display sequence of categories (`category_order`).
How:   Full replacement: every reorder deletes all rows and inserts the new
       sequence with order = index. Categories missing from the table sort
       after all listed ones in the bookmark listing.
"""

import logging
from typing import List, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.exceptions import DatabaseError
from bookmarks.models.category_order import CategoryOrder
from bookmarks.schemas.bookmark import BookmarkResponse
from bookmarks.services.bookmark_service import bookmark_service, normalize_category

logger = logging.getLogger(__name__)


class CategoryService:

    async def list_categories(self, db: AsyncSession) -> List[str]:
        """Stored category sequence, first to last."""
        try:
            result = await db.execute(
                select(CategoryOrder.category).order_by(CategoryOrder.order)
            )
        except SQLAlchemyError as e:
            logger.error("Database error listing category order: %s", str(e), exc_info=True)
            raise DatabaseError(message="获取分类顺序失败")
        return list(result.scalars().all())

    async def reorder_categories(
        self, db: AsyncSession, categories: Sequence[str]
    ) -> List[BookmarkResponse]:
        """
        Replaces the whole category order with `categories`.

        Names are trimmed ("" ranks the uncategorized group); repeats after
        the first occurrence are dropped so the unique constraint holds.

        Returns:
            The bookmark listing under the new category order.
        """
        sequence: List[str] = []
        seen = set()
        for raw in categories:
            name = normalize_category(raw)
            if name not in seen:
                seen.add(name)
                sequence.append(name)

        try:
            await db.execute(delete(CategoryOrder))
            db.add_all(
                CategoryOrder(category=name, order=index)
                for index, name in enumerate(sequence)
            )
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error reordering categories: %s", str(e), exc_info=True)
            raise DatabaseError(message="调整分类顺序失败")

        logger.info("Category order replaced: %d categories", len(sequence))
        return await bookmark_service.list_bookmarks(db)


category_service = CategoryService()
