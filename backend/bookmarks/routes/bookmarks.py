"""
Bookmarks Backend: Bookmark Route Handlers
==========================================

What:  GET/POST /api/bookmarks, PUT/DELETE /api/bookmarks/{id},
       POST /api/bookmarks/reorder.
How:   Thin handlers: resolve auth, delegate to BookmarkService, return JSON.

Visibility:
    GET is public. Anonymous callers (or callers with an invalid token) only
    see visible bookmarks; a valid admin token reveals hidden ones too.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.database import get_db_session
from bookmarks.dependencies import (
    get_bookmark_service,
    no_store,
    optional_auth,
    require_auth,
)
from bookmarks.schemas.bookmark import (
    BookmarkCreate,
    BookmarkResponse,
    BookmarkUpdate,
    ReorderRequest,
)
from bookmarks.schemas.common import ErrorResponse
from bookmarks.services.auth_service import AdminIdentity
from bookmarks.services.bookmark_service import BookmarkService

router = APIRouter(prefix="/api", tags=["Bookmarks"], dependencies=[Depends(no_store)])


@router.get(
    "/bookmarks",
    response_model=List[BookmarkResponse],
    summary="List bookmarks in display order",
)
async def list_bookmarks(
    identity: Optional[AdminIdentity] = Depends(optional_auth),
    db: AsyncSession = Depends(get_db_session),
    service: BookmarkService = Depends(get_bookmark_service),
) -> List[BookmarkResponse]:
    return await service.list_bookmarks(db, include_hidden=identity is not None)


@router.post(
    "/bookmarks",
    status_code=201,
    response_model=BookmarkResponse,
    responses={
        400: {"description": "Title or URL missing", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
    },
    summary="Create a bookmark at the end of its category",
)
async def create_bookmark(
    body: BookmarkCreate,
    identity: AdminIdentity = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    return await service.create_bookmark(db, body)


@router.post(
    "/bookmarks/reorder",
    response_model=List[BookmarkResponse],
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
    summary="Set bookmark order from a list of ids",
)
async def reorder_bookmarks(
    body: ReorderRequest,
    identity: AdminIdentity = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
    service: BookmarkService = Depends(get_bookmark_service),
) -> List[BookmarkResponse]:
    return await service.reorder_bookmarks(db, body.order)


@router.put(
    "/bookmarks/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={
        400: {"description": "Blank title or URL", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
        404: {"description": "Bookmark not found", "model": ErrorResponse},
    },
    summary="Update a bookmark (partial)",
)
async def update_bookmark(
    bookmark_id: str,
    body: BookmarkUpdate,
    identity: AdminIdentity = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    return await service.update_bookmark(db, bookmark_id, body)


@router.delete(
    "/bookmarks/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
        404: {"description": "Bookmark not found", "model": ErrorResponse},
    },
    summary="Delete a bookmark and close its order gap",
)
async def delete_bookmark(
    bookmark_id: str,
    identity: AdminIdentity = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    return await service.delete_bookmark(db, bookmark_id)
