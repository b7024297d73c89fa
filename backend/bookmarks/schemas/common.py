"""
Bookmarks Backend: Shared Schemas
=================================

What:  Error envelope, health check and category-order models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CategoryOrderRequest(BaseModel):
    """Body of PUT /api/categories/order: the complete category sequence."""
    order: List[str] = Field(description="Category names; position becomes the display order")


class CategoryOrderResponse(BaseModel):
    order: List[str]


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "标题和链接不能为空",
            "details": {"field": "title"},
            "request_id": "1f0c2a9e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
