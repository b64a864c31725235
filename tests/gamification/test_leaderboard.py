"""Tests for GET /api/leaderboard."""

from datetime import datetime, timezone

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.auth.password import hash_password
from lerncasino.db.models import User, UserStats
from tests.conftest import register_user


async def _seed_users(db: AsyncSession, xps: list[int]) -> None:
    """Insert users directly; hashing through the API would be slow for many rows."""
    password_hash = hash_password("irrelevant")
    now = datetime.now(timezone.utc)
    for i, xp in enumerate(xps):
        user = User(username=f"player{i:03d}", password_hash=password_hash, created_at=now, avatar_color="#7F5AF0")
        db.add(user)
        await db.flush()
        db.add(UserStats(user_id=user.id, level=xp // 100 + 1, xp=xp, coins=0, hearts=3, streak=i % 5, best_streak=i % 7))
    await db.commit()


class TestLeaderboard:
    async def test_public(self, client: AsyncClient):
        response = await client.get("/api/leaderboard")
        assert response.status_code == 200
        assert response.json() == []

    async def test_entry_shape(self, authed_client: AsyncClient):
        await authed_client.post("/api/progress", json={"xp": 30, "streak": 2, "bestStreak": 3})
        entries = (await authed_client.get("/api/leaderboard")).json()
        assert entries == [{"username": "alice", "level": 1, "xp": 30, "streak": 2, "best_streak": 3}]

    async def test_sorted_by_xp_desc(self, client: AsyncClient, db_session: AsyncSession):
        await _seed_users(db_session, [50, 300, 10, 220, 90])
        entries = (await client.get("/api/leaderboard")).json()
        assert [e["xp"] for e in entries] == [300, 220, 90, 50, 10]

    async def test_truncated_to_50(self, client: AsyncClient, db_session: AsyncSession):
        xps = [(i * 37) % 1000 for i in range(60)]
        await _seed_users(db_session, xps)
        entries = (await client.get("/api/leaderboard")).json()
        assert len(entries) == 50
        got = [e["xp"] for e in entries]
        assert got == sorted(got, reverse=True)
        assert got == sorted(xps, reverse=True)[:50]

    async def test_includes_registered_users(self, client: AsyncClient):
        await register_user(client, "alice")
        await register_user(client, "bob")
        names = {e["username"] for e in (await client.get("/api/leaderboard")).json()}
        assert names == {"alice", "bob"}
