"""
Pydantic schemas for User and Authentication.
"""
from typing import Optional

from smartpark.schemas.base import EchoModel, RequestModel


class RegisterRequest(RequestModel):
    """Schema for registering a user."""
    username: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None


class LoginRequest(RequestModel):
    """Schema for login request."""
    username: Optional[str] = None
    password: Optional[str] = None


class UserPublic(EchoModel):
    """User fields safe to return and to keep in a session."""
    id: int
    username: str
    full_name: str


class AuthResponse(EchoModel):
    message: str
    user: UserPublic


class SessionStatus(EchoModel):
    is_logged_in: bool
    user: Optional[UserPublic] = None
