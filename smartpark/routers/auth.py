"""
Authentication routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.config import Settings, get_settings
from smartpark.database import get_db
from smartpark.dependencies import get_session_store, get_session_token
from smartpark.schemas.base import Message
from smartpark.schemas.user import AuthResponse, LoginRequest, RegisterRequest, SessionStatus
from smartpark.services import auth as auth_service
from smartpark.sessions import SessionStore

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new user.
    """
    user = await auth_service.register(db, payload, settings)
    return AuthResponse(message="User registered successfully", user=user)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
    current_token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """
    Check credentials and open a session, replacing any current one.

    The session token is returned only in an HttpOnly cookie.
    """
    token, user = await auth_service.login(db, payload, sessions, previous_token=current_token)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=int(sessions.ttl.total_seconds()),
        httponly=True,
        secure=False,
        samesite="lax",
    )
    return AuthResponse(message="Login successful", user=user)


@router.get("/check", response_model=SessionStatus, response_model_exclude_none=True)
async def check(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
):
    """
    Report whether the caller holds a valid session.
    """
    return auth_service.check_session(sessions, token)


@router.post("/logout", response_model=Message)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """
    End the session. Succeeds even without one.
    """
    auth_service.logout(sessions, token)
    response.delete_cookie(key=settings.session_cookie_name, httponly=True, samesite="lax")
    return Message(message="Logout successful")
