"""
Tests for the in-memory session store.
"""
from datetime import datetime, timedelta, timezone

import pytest

from smartpark.schemas.user import UserPublic
from smartpark.sessions import SessionStore


class FakeClock:
    def __init__(self):
        self.now = datetime(2025, 3, 10, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(ttl=timedelta(hours=24), clock=clock)


@pytest.fixture
def alice():
    return UserPublic(id=1, username="alice", full_name="Alice A")


class TestSessionStore:
    def test_create_and_get(self, store, alice):
        token = store.create(alice)

        assert store.get(token) == alice
        assert len(store) == 1

    def test_tokens_are_unique(self, store, alice):
        assert store.create(alice) != store.create(alice)
        assert len(store) == 2

    def test_unknown_or_empty_token(self, store):
        assert store.get("nope") is None
        assert store.get("") is None
        assert store.get(None) is None

    def test_session_expires_after_ttl(self, store, clock, alice):
        token = store.create(alice)

        clock.advance(hours=23, minutes=59)
        assert store.get(token) == alice

        # activity does not extend the session
        clock.advance(minutes=1)
        assert store.get(token) is None
        assert len(store) == 0

    def test_destroy(self, store, alice):
        token = store.create(alice)

        store.destroy(token)
        store.destroy(token)
        store.destroy(None)

        assert store.get(token) is None

    def test_purge_expired(self, store, clock, alice):
        old = store.create(alice)
        clock.advance(hours=12)
        fresh = store.create(alice)
        clock.advance(hours=13)

        assert store.purge_expired() == 1
        assert store.get(old) is None
        assert store.get(fresh) == alice
        assert store.purge_expired() == 0

    def test_create_drops_expired_sessions(self, store, clock, alice):
        for _ in range(100):
            store.create(alice)
        clock.advance(days=30)

        token = store.create(alice)

        assert len(store) == 1
        assert store.get(token) == alice
