"""
Server-side session store.

Sessions are kept in process memory and keyed by an opaque token that
travels in the session cookie. Each session has a fixed absolute expiry
that is not extended by activity.
"""
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from loguru import logger

from smartpark.schemas.user import UserPublic


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionEntry:
    user: UserPublic
    expires_at: datetime


class SessionStore:
    """In-memory map of session token -> authenticated user."""

    def __init__(self, ttl: timedelta = timedelta(hours=24), clock: Callable[[], datetime] = _utcnow):
        self.ttl = ttl
        self._clock = clock
        self._sessions: Dict[str, SessionEntry] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, user: UserPublic) -> str:
        """Open a session for ``user`` and return its token.

        Expired sessions are dropped first.
        """
        self.purge_expired()
        token = secrets.token_urlsafe(32)
        self._sessions[token] = SessionEntry(user=user, expires_at=self._clock() + self.ttl)
        return token

    def get(self, token: Optional[str]) -> Optional[UserPublic]:
        """Return the session user, or None if the token is unknown or expired."""
        if not token:
            return None
        entry = self._sessions.get(token)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._sessions[token]
            return None
        return entry.user

    def destroy(self, token: Optional[str]) -> None:
        """Forget a session. Unknown tokens are ignored."""
        if token:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        """Drop every expired session and return how many were removed."""
        now = self._clock()
        expired = [token for token, entry in self._sessions.items() if entry.expires_at <= now]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.info("Cleaned up {} expired sessions", len(expired))
        return len(expired)
