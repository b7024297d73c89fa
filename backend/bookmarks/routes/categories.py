"""
Bookmarks Backend: Category Order Route Handlers
================================================

What:  GET/PUT /api/categories/order.
Why:   The admin panel drags categories into place; the whole sequence is
       submitted at once and replaces the stored order.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.database import get_db_session
from bookmarks.dependencies import get_category_service, no_store, require_auth
from bookmarks.schemas.bookmark import BookmarkResponse
from bookmarks.schemas.common import CategoryOrderRequest, CategoryOrderResponse, ErrorResponse
from bookmarks.services.auth_service import AdminIdentity
from bookmarks.services.category_service import CategoryService

router = APIRouter(prefix="/api", tags=["Categories"], dependencies=[Depends(no_store)])


@router.get(
    "/categories/order",
    response_model=CategoryOrderResponse,
    summary="Stored category display sequence",
)
async def get_category_order(
    db: AsyncSession = Depends(get_db_session),
    service: CategoryService = Depends(get_category_service),
) -> CategoryOrderResponse:
    return CategoryOrderResponse(order=await service.list_categories(db))


@router.put(
    "/categories/order",
    response_model=List[BookmarkResponse],
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
    summary="Replace the category display sequence",
    description="Returns the full bookmark listing under the new category order.",
)
async def reorder_categories(
    body: CategoryOrderRequest,
    identity: AdminIdentity = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
    service: CategoryService = Depends(get_category_service),
) -> List[BookmarkResponse]:
    return await service.reorder_categories(db, body.order)
