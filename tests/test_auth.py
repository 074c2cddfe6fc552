"""
Tests for registration, login and sessions.
"""
import pytest

from smartpark.services import auth as auth_service
from tests.helpers import API, user_data

pytestmark = pytest.mark.asyncio


class TestRegister:
    async def test_register_returns_public_fields(self, client):
        response = await client.post(f"{API}/auth/register", json=user_data())

        assert response.status_code == 201
        user = response.json()["user"]
        assert user["username"] == "alice"
        assert user["fullName"] == "Alice A"
        assert isinstance(user["id"], int)
        assert "password" not in user

    @pytest.mark.parametrize("missing", ["username", "password", "fullName"])
    async def test_register_missing_field(self, client, missing):
        data = user_data()
        del data[missing]
        response = await client.post(f"{API}/auth/register", json=data)

        assert response.status_code == 400
        assert response.json()["message"]

    async def test_register_short_password(self, client):
        response = await client.post(f"{API}/auth/register", json=user_data(password="ab12"))

        assert response.status_code == 400
        assert "at least 6" in response.json()["message"]

    async def test_register_duplicate_username(self, client):
        first = await client.post(f"{API}/auth/register", json=user_data())
        second = await client.post(f"{API}/auth/register", json=user_data(fullName="Other"))

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"message": "Username already exists"}

    async def test_duplicate_username_caught_by_store(self, client, monkeypatch):
        await client.post(f"{API}/auth/register", json=user_data())

        async def not_taken(db, username):
            return False

        monkeypatch.setattr(auth_service, "_username_taken", not_taken)
        response = await client.post(f"{API}/auth/register", json=user_data())

        assert response.status_code == 409
        assert response.json() == {"message": "Username already exists"}

    async def test_password_is_stored_hashed(self, client, db_session):
        from sqlalchemy import select
        from smartpark.models import User

        await client.post(f"{API}/auth/register", json=user_data())
        stored = (await db_session.execute(select(User.password))).scalar_one()

        assert stored != "abc123"
        assert stored.startswith("$2")


class TestLogin:
    async def test_scenario_register_then_login(self, client):
        """alice/abc123 registers, logs in, and is refused with a wrong password."""
        response = await client.post(f"{API}/auth/register", json=user_data())
        assert response.status_code == 201

        response = await client.post(f"{API}/auth/login", json={"username": "alice", "password": "abc123"})
        assert response.status_code == 200
        assert response.json()["user"]["fullName"] == "Alice A"
        assert "smartpark.sid" in response.cookies

        response = await client.post(f"{API}/auth/login", json={"username": "alice", "password": "wrong"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}

    @pytest.mark.parametrize(
        "username,password,full_name",
        [("bob", "secret1", "Bob B"), ("carol", "pa55word", "Carol C"), ("dave", "123456", "Dave")],
    )
    async def test_login_returns_registered_user(self, client, username, password, full_name):
        await client.post(
            f"{API}/auth/register",
            json={"username": username, "password": password, "fullName": full_name},
        )
        response = await client.post(f"{API}/auth/login", json={"username": username, "password": password})

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["username"] == username
        assert user["fullName"] == full_name

    async def test_login_with_padded_username(self, client):
        response = await client.post(f"{API}/auth/register", json=user_data(username="bob "))
        assert response.json()["user"]["username"] == "bob"

        response = await client.post(f"{API}/auth/login", json={"username": "bob ", "password": "abc123"})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "bob"

    async def test_login_unknown_user(self, client):
        response = await client.post(f"{API}/auth/login", json={"username": "nobody", "password": "abc123"})

        assert response.status_code == 401

    async def test_login_missing_fields(self, client):
        response = await client.post(f"{API}/auth/login", json={"username": "alice"})

        assert response.status_code == 400
        assert response.json() == {"message": "Username and password are required"}

    async def test_session_cookie_is_http_only(self, client):
        await client.post(f"{API}/auth/register", json=user_data())
        response = await client.post(f"{API}/auth/login", json={"username": "alice", "password": "abc123"})

        cookie = response.headers["set-cookie"].lower()
        assert "httponly" in cookie
        assert "secure" not in cookie
        assert "max-age=86400" in cookie


class TestSession:
    async def test_check_without_session(self, client):
        response = await client.get(f"{API}/auth/check")

        assert response.status_code == 200
        assert response.json() == {"isLoggedIn": False}

    async def test_check_with_session(self, auth_client):
        response = await auth_client.get(f"{API}/auth/check")

        assert response.status_code == 200
        body = response.json()
        assert body["isLoggedIn"] is True
        assert body["user"]["username"] == "alice"

    async def test_logout_ends_session(self, auth_client):
        response = await auth_client.post(f"{API}/auth/logout")
        assert response.status_code == 200

        response = await auth_client.get(f"{API}/auth/check")
        assert response.json() == {"isLoggedIn": False}

        response = await auth_client.get(f"{API}/cars")
        assert response.status_code == 401

    async def test_logout_is_idempotent(self, client):
        first = await client.post(f"{API}/auth/logout")
        second = await client.post(f"{API}/auth/logout")

        assert first.status_code == 200
        assert second.status_code == 200

    @pytest.mark.parametrize("path", ["/cars", "/packages", "/services", "/payments", "/reports/summary"])
    async def test_protected_routes_require_session(self, client, path):
        response = await client.get(f"{API}{path}")

        assert response.status_code == 401
        assert response.json() == {"message": "Not authenticated"}

    async def test_forged_cookie_is_rejected(self, client):
        response = await client.get(f"{API}/cars", headers={"Cookie": "smartpark.sid=not-a-real-token"})

        assert response.status_code == 401

    async def test_login_replaces_current_session(self, app, auth_client):
        old_token = auth_client.cookies.get("smartpark.sid")

        response = await auth_client.post(f"{API}/auth/login", json={"username": "alice", "password": "abc123"})

        assert response.status_code == 200
        new_token = auth_client.cookies.get("smartpark.sid")
        assert new_token != old_token
        assert app.state.sessions.get(old_token) is None
        assert app.state.sessions.get(new_token) is not None
        assert len(app.state.sessions) == 1
