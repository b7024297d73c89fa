"""
Bookmarks Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers (registered in main.py) turn them into JSON
       error responses with the matching HTTP status code.
Who:   Raised by services and the auth gate; caught by global handlers.

Exception Hierarchy:
    BookmarksError (base)
    ├── ValidationError       → 400 Bad Request
    ├── AuthenticationError   → 401 Unauthorized
    ├── NotFoundError         → 404 Not Found
    └── DatabaseError         → 500 Internal Server Error

Messages are shown to the admin as-is by the frontend toast, so they are
written in Chinese. Context is logged server-side and never returned for
500-class errors.
"""

from typing import Any, Dict, Optional


class BookmarksError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "服务器内部错误",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookmarksError):
    """
    Raised when client input fails a business rule.

    When:    Missing title/url, unknown theme, site title too long, etc.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "请求参数无效",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(BookmarksError):
    """
    Raised when a write endpoint is called without a valid bearer token,
    or when login credentials are wrong.

    HTTP:    401 Unauthorized (with WWW-Authenticate: Bearer)
    """

    def __init__(
        self,
        message: str = "未授权：请提供有效的认证令牌",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BookmarksError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that into
    this exception so routes stay free of None checks.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "资源",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource}不存在"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(BookmarksError):
    """
    Raised when a database operation fails unexpectedly.

    HTTP:    500 Internal Server Error
    The message names the failed operation (e.g. "新增书签失败"); the driver
    error is only logged.
    """

    def __init__(
        self,
        message: str = "数据库操作失败，请稍后重试",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
