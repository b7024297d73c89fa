"""
Bookmarks Backend: Admin Auth Service
=====================================

What:  Credential check and bearer token issue/verify for the single admin.
How:   HS256 JWTs (PyJWT) carrying a `username` claim, `iat` and a 7-day
       `exp`. Credentials come from ADMIN_USERNAME / ADMIN_PASSWORD.
Who:   Used by POST /api/auth/login and by the auth dependencies that guard
       every write endpoint.

Token lifecycle:
    login ─▶ issue_token(username) ─▶ client stores token
    request with "Authorization: Bearer <token>" ─▶ verify_token()
        ├── valid     → AdminIdentity(username)
        └── expired / bad signature / malformed → None
"""

import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from bookmarks.config import settings
from bookmarks.exceptions import AuthenticationError, ValidationError
from bookmarks.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminIdentity:
    """The authenticated caller, as decoded from a valid token."""
    username: str


class AuthService:
    """
    Issues and verifies admin tokens.

    Constructor arguments override the application settings; anything left
    as None is read from `settings` at call time.
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expires_in: Optional[timedelta] = None,
        admin_username: Optional[str] = None,
        admin_password: Optional[str] = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in
        self._admin_username = admin_username
        self._admin_password = admin_password

    @property
    def secret(self) -> str:
        return self._secret if self._secret is not None else settings.jwt_secret

    @property
    def algorithm(self) -> str:
        return self._algorithm or settings.jwt_algorithm

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in or settings.jwt_expires_in

    def validate_credentials(self, username: str, password: str) -> bool:
        """Constant-time comparison against the configured admin account."""
        expected_username = (
            self._admin_username if self._admin_username is not None else settings.admin_username
        )
        expected_password = (
            self._admin_password if self._admin_password is not None else settings.admin_password
        )
        username_ok = hmac.compare_digest(username.encode("utf-8"), expected_username.encode("utf-8"))
        password_ok = hmac.compare_digest(password.encode("utf-8"), expected_password.encode("utf-8"))
        return username_ok and password_ok

    def issue_token(self, username: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "username": username,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Optional[AdminIdentity]:
        """
        Decodes a bearer token.

        Returns:
            AdminIdentity for a valid token; None when the token is expired,
            has a bad signature, is malformed or lacks a username claim.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except jwt.PyJWTError as e:
            logger.info("Rejected invalid token: %s", type(e).__name__)
            return None

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            return None
        return AdminIdentity(username=username)

    def login(self, username: Optional[str], password: Optional[str]) -> LoginResponse:
        """
        Checks admin credentials and issues a token.

        Raises:
            ValidationError: username or password missing (→ 400)
            AuthenticationError: credentials do not match (→ 401)
        """
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError(message="用户名和密码不能为空")

        if not self.validate_credentials(username, password):
            logger.warning("Failed login attempt for username %r", username)
            raise AuthenticationError(message="用户名或密码错误")

        logger.info("Admin %r logged in", username)
        return LoginResponse(token=self.issue_token(username), username=username)


auth_service = AuthService()
