"""
FastAPI dependencies for sessions and authentication.
"""
from typing import Optional

from fastapi import Depends, Request

from smartpark.config import Settings, get_settings
from smartpark.errors import AuthError
from smartpark.schemas.user import UserPublic
from smartpark.sessions import SessionStore


def get_session_store(request: Request) -> SessionStore:
    """Session store attached to the application by ``create_app``."""
    return request.app.state.sessions


def get_session_token(request: Request, settings: Settings = Depends(get_settings)) -> Optional[str]:
    return request.cookies.get(settings.session_cookie_name)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
) -> UserPublic:
    """Require a valid session."""
    user = sessions.get(token)
    if user is None:
        raise AuthError("Not authenticated")
    return user
