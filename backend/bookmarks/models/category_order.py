"""
Bookmarks Backend: Category Order Model
=======================================

What:  ORM model for `category_order`, the display sequence of categories.
How:   One row per listed category; the table is fully replaced on every
       reorder. Categories with no row sort after all listed ones.
"""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookmarks.database import Base


class CategoryOrder(Base):
    __tablename__ = "category_order"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    category: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    order: Mapped[int] = mapped_column("order", Integer, nullable=False)

    __table_args__ = (
        Index("idx_category_order_order", "order"),
    )

    def __repr__(self) -> str:
        return f"<CategoryOrder(category='{self.category}', order={self.order})>"
