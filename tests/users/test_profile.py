"""Tests for GET/PUT /api/me."""

from httpx import AsyncClient
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.auth.password import verify_password
from lerncasino.db.models import User, UserStats
from tests.conftest import register_user


class TestGetProfile:
    async def test_get_profile(self, authed_client: AsyncClient, registered_user: dict):
        response = await authed_client.get("/api/me")
        assert response.status_code == 200
        data = response.json()
        assert data == {
            "id": registered_user["user"]["id"],
            "username": "alice",
            "avatar_color": "#7F5AF0",
            "level": 1,
            "xp": 0,
            "coins": 0,
            "hearts": 3,
            "streak": 0,
            "best_streak": 0,
        }

    async def test_deleted_user_is_404(
        self, authed_client: AsyncClient, registered_user: dict, db_session: AsyncSession
    ):
        user_id = registered_user["user"]["id"]
        await db_session.execute(delete(UserStats).where(UserStats.user_id == user_id))
        await db_session.execute(delete(User).where(User.id == user_id))
        await db_session.commit()

        response = await authed_client.get("/api/me")
        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

        response = await authed_client.put("/api/me", json={"username": "ghost"})
        assert response.status_code == 404


class TestUpdateProfile:
    async def test_change_username(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/me", json={"username": "alicia"})
        assert response.status_code == 200
        assert response.json()["username"] == "alicia"
        assert (await authed_client.get("/api/me")).json()["username"] == "alicia"

    async def test_keep_own_username(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/me", json={"username": "alice"})
        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    async def test_username_taken_by_other(self, authed_client: AsyncClient):
        await register_user(authed_client, username="bob")
        response = await authed_client.put("/api/me", json={"username": "bob"})
        assert response.status_code == 409
        assert (await authed_client.get("/api/me")).json()["username"] == "alice"

    async def test_username_too_long(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/me", json={"username": "u" * 65})
        assert response.status_code == 400
        assert response.json() == {"detail": "Username must be at most 64 characters"}
        assert (await authed_client.get("/api/me")).json()["username"] == "alice"

    async def test_change_password(self, authed_client: AsyncClient, db_session: AsyncSession):
        response = await authed_client.put("/api/me", json={"password": "neues-pw"})
        assert response.status_code == 200

        user = (await db_session.execute(select(User).where(User.username == "alice"))).scalar_one()
        assert verify_password("neues-pw", user.password_hash)

        authed_client.headers.pop("Authorization")
        login = await authed_client.post("/api/auth/login", json={"username": "alice", "password": "neues-pw"})
        assert login.status_code == 200

    async def test_short_password_ignored(self, authed_client: AsyncClient, registered_user: dict):
        response = await authed_client.put("/api/me", json={"password": "abc"})
        assert response.status_code == 200

        authed_client.headers.pop("Authorization")
        login = await authed_client.post("/api/auth/login", json={
            "username": "alice",
            "password": registered_user["password"],
        })
        assert login.status_code == 200

    async def test_empty_body_changes_nothing(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/me", json={})
        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    async def test_response_includes_stats(self, authed_client: AsyncClient):
        await authed_client.post("/api/progress", json={"xp": 40, "coins": 5})
        data = (await authed_client.put("/api/me", json={"username": "alicia"})).json()
        assert data["xp"] == 40
        assert data["coins"] == 5
