"""
Registration, login and session handling.
"""
from typing import Optional, Tuple

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from smartpark.config import Settings
from smartpark.errors import AuthError, ConflictError, ValidationError
from smartpark.models.user import User
from smartpark.schemas.user import LoginRequest, RegisterRequest, SessionStatus, UserPublic
from smartpark.security import MAX_PASSWORD_BYTES, hash_password_async, verify_password_async
from smartpark.services.common import clean, require_fields
from smartpark.sessions import SessionStore


async def _username_taken(db: AsyncSession, username: str) -> bool:
    result = await db.execute(select(User.id).where(User.username == username))
    return result.scalar_one_or_none() is not None


async def register(db: AsyncSession, payload: RegisterRequest, settings: Settings) -> UserPublic:
    """
    Create a user account.

    The password is stored as a bcrypt hash; the returned fields never
    include it.
    """
    require_fields(
        payload,
        ("username", "password", "full_name"),
        "Username, password and full name are required",
    )
    if len(payload.password) < settings.min_password_length:
        raise ValidationError(
            f"Password must be at least {settings.min_password_length} characters long"
        )
    if len(payload.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")

    username = clean(payload.username)
    if await _username_taken(db, username):
        logger.warning("Registration rejected, username {} taken", username)
        raise ConflictError("Username already exists")

    user = User(
        username=username,
        password=await hash_password_async(payload.password, settings.bcrypt_rounds),
        full_name=clean(payload.full_name),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Username already exists")
    await db.refresh(user)

    logger.info("User {} registered", username)
    return UserPublic.model_validate(user)


async def authenticate(db: AsyncSession, payload: LoginRequest) -> UserPublic:
    """Check credentials and return the user's public fields."""
    require_fields(payload, ("username", "password"), "Username and password are required")

    username = clean(payload.username)
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()

    # Same error for unknown user and wrong password
    if user is None or not await verify_password_async(payload.password, user.password):
        logger.warning("Failed login for {}", username)
        raise AuthError("Invalid credentials")

    return UserPublic.model_validate(user)


async def login(
    db: AsyncSession,
    payload: LoginRequest,
    sessions: SessionStore,
    previous_token: Optional[str] = None,
) -> Tuple[str, UserPublic]:
    """
    Authenticate and open a session. Returns the session token and the user.

    A session the caller already held is closed first.
    """
    user = await authenticate(db, payload)
    sessions.destroy(previous_token)
    token = sessions.create(user)
    logger.info("User {} logged in", user.username)
    return token, user


def check_session(sessions: SessionStore, token: Optional[str]) -> SessionStatus:
    user = sessions.get(token)
    if user is None:
        return SessionStatus(is_logged_in=False)
    return SessionStatus(is_logged_in=True, user=user)


def logout(sessions: SessionStore, token: Optional[str]) -> None:
    """Invalidate the session, if any."""
    user = sessions.get(token)
    sessions.destroy(token)
    if user is not None:
        logger.info("User {} logged out", user.username)
