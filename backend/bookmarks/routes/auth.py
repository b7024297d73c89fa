"""
Bookmarks Backend: Auth Route Handlers
======================================

What:  POST /api/auth/login (issue token), GET /api/auth/verify (check token).
Who:   The admin panel's login form and its session check on page load.
"""

from fastapi import APIRouter, Depends

from bookmarks.dependencies import get_auth_service, no_store, require_auth
from bookmarks.schemas.auth import LoginRequest, LoginResponse, VerifyResponse
from bookmarks.schemas.common import ErrorResponse
from bookmarks.services.auth_service import AdminIdentity, AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"], dependencies=[Depends(no_store)])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Username or password missing", "model": ErrorResponse},
        401: {"description": "Wrong credentials", "model": ErrorResponse},
    },
    summary="Exchange admin credentials for a bearer token",
)
async def login(
    body: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    return service.login(body.username, body.password)


@router.get(
    "/verify",
    response_model=VerifyResponse,
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
    summary="Check that the presented token is still valid",
)
async def verify(identity: AdminIdentity = Depends(require_auth)) -> VerifyResponse:
    return VerifyResponse(username=identity.username)
