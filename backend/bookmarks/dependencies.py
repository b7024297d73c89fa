"""
Bookmarks Backend: FastAPI Dependencies
=======================================

What:  Service providers and the auth gate used by route handlers.
How:   Routes depend on the `get_*_service` providers instead of importing
       singletons, so tests can swap any collaborator through
       `app.dependency_overrides`.

Auth gate:
    require_auth   → AdminIdentity, or 401 when the bearer token is missing/invalid
    optional_auth  → AdminIdentity or None; never fails (public read endpoints)
"""

from typing import Optional

from fastapi import Depends, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bookmarks.exceptions import AuthenticationError
from bookmarks.services.auth_service import AdminIdentity, AuthService, auth_service
from bookmarks.services.bookmark_service import BookmarkService, bookmark_service
from bookmarks.services.category_service import CategoryService, category_service
from bookmarks.services.settings_service import SettingsService, settings_service

# auto_error=False: missing or non-Bearer headers yield None instead of a
# FastAPI 403, so require_auth can answer with our own 401
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service() -> AuthService:
    return auth_service


def get_bookmark_service() -> BookmarkService:
    return bookmark_service


def get_category_service() -> CategoryService:
    return category_service


def get_settings_service() -> SettingsService:
    return settings_service


async def optional_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: AuthService = Depends(get_auth_service),
) -> Optional[AdminIdentity]:
    """Identity for a valid bearer token, None for anonymous or invalid callers."""
    if credentials is None:
        return None
    return service.verify_token(credentials.credentials)


async def require_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: AuthService = Depends(get_auth_service),
) -> AdminIdentity:
    """
    Guards write endpoints.

    Raises:
        AuthenticationError: no bearer token, or token expired/invalid (→ 401)
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(message="未授权：请提供有效的认证令牌")

    identity = service.verify_token(credentials.credentials)
    if identity is None:
        raise AuthenticationError(message="未授权：令牌无效或已过期")
    return identity


async def no_store(response: Response) -> None:
    """Marks the response uncacheable; bookmark data changes on every admin write."""
    response.headers["Cache-Control"] = "no-store"
