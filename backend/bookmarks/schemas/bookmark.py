"""
Bookmarks Backend: Bookmark Request/Response Schemas
====================================================

What:  Pydantic models defining the bookmark API contract.
How:   FastAPI validates request bodies against these and serializes
       responses through them (also drives the OpenAPI docs).

Why title/url are Optional on create:
    A missing or blank title/url must produce the business-rule 400
    ("标题和链接不能为空") from the service, not a schema error, so the
    schema accepts them as optional and the service enforces presence.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class BookmarkCreate(BaseModel):
    """Body of POST /api/bookmarks."""
    title: Optional[str] = Field(default=None, max_length=500, description="Display title")
    url: Optional[str] = Field(default=None, description="Target URL; https:// is added when no scheme is given")
    category: Optional[str] = Field(default=None, max_length=255, description="Category name; empty means uncategorized")
    description: Optional[str] = Field(default=None, description="Free-form note")
    visible: Optional[bool] = Field(default=None, description="Shown to anonymous visitors (default true)")


class BookmarkUpdate(BaseModel):
    """
    Body of PUT /api/bookmarks/{id}.

    Only fields present in the body are applied (model_fields_set);
    omitted fields keep their stored values.
    """
    title: Optional[str] = Field(default=None, max_length=500)
    url: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    visible: Optional[bool] = None


class BookmarkResponse(BaseModel):
    """Full representation of a bookmark as returned by every bookmark endpoint."""
    id: str = Field(description="Opaque unique identifier")
    title: str
    url: str
    category: str = Field(description="Category name, \"\" when uncategorized")
    description: Optional[str] = None
    visible: bool = True
    order: int = Field(description="Display position within the category")

    model_config = {"from_attributes": True}


class ReorderRequest(BaseModel):
    """Body of POST /api/bookmarks/reorder: bookmark ids in their new display order."""
    order: List[str] = Field(description="Bookmark ids; unmentioned bookmarks are appended")
