"""
Bookmarks Backend: Site Settings Route Handlers
===============================================

What:  GET /api/settings (public) and PUT /api/settings (admin).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks.database import get_db_session
from bookmarks.dependencies import get_settings_service, no_store, require_auth
from bookmarks.schemas.common import ErrorResponse
from bookmarks.schemas.settings import SettingsResponse, SettingsUpdate
from bookmarks.services.auth_service import AdminIdentity
from bookmarks.services.settings_service import SettingsService

router = APIRouter(prefix="/api", tags=["Settings"], dependencies=[Depends(no_store)])


@router.get("/settings", response_model=SettingsResponse, summary="Current site settings")
async def get_settings(
    db: AsyncSession = Depends(get_db_session),
    service: SettingsService = Depends(get_settings_service),
) -> SettingsResponse:
    return await service.get_settings(db)


@router.put(
    "/settings",
    response_model=SettingsResponse,
    responses={
        400: {"description": "Invalid theme or value too long", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
    },
    summary="Update site settings (partial)",
)
async def update_settings(
    body: SettingsUpdate,
    identity: AdminIdentity = Depends(require_auth),
    db: AsyncSession = Depends(get_db_session),
    service: SettingsService = Depends(get_settings_service),
) -> SettingsResponse:
    return await service.update_settings(db, body)
