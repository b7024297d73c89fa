"""Bookmarks Backend: Auth Schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str = Field(description="Bearer token for the Authorization header")
    username: str


class VerifyResponse(BaseModel):
    valid: bool = True
    username: str
