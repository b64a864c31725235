"""Server-backed session against the real app."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport

from lerncasino.client.api import ApiClient
from lerncasino.client.controller import LernCasinoApp
from lerncasino.client.storage import LocalStore
from lerncasino.client.sync import SyncedSession
from tests.conftest import TEST_PASSWORD


@pytest_asyncio.fixture
async def session(app: FastAPI) -> AsyncGenerator[SyncedSession, None]:
    api = ApiClient("http://test", transport=ASGITransport(app=app))
    yield SyncedSession(LernCasinoApp(LocalStore()), api)
    await api.aclose()


class TestSyncedSession:
    async def test_register_adopts_server_stats(self, session: SyncedSession):
        session.app.state.user.xp = 999
        await session.register("mia", TEST_PASSWORD)
        user = session.app.state.user
        assert user.name == "mia"
        assert user.xp == 0
        assert user.hearts == 3
        assert session.app.state.main_screen_visible

    async def test_answers_are_pushed(self, session: SyncedSession):
        await session.register("mia", TEST_PASSWORD)
        await session.start_level(1)
        question = session.app.current_question()
        await session.play_answer(question.correct_index, delay=0)

        profile = await session.api.me()
        assert profile.xp == 10
        assert profile.streak == 1
        assert profile.best_streak == 1

    async def test_login_replaces_local_progress(self, session: SyncedSession):
        await session.register("mia", TEST_PASSWORD)
        session.app.know_card()  # local only, not pushed
        assert session.app.state.user.xp == 5

        await session.login("mia", TEST_PASSWORD)
        assert session.app.state.user.xp == 0

    async def test_known_card_is_pushed(self, session: SyncedSession):
        await session.register("mia", TEST_PASSWORD)
        await session.know_card()
        assert (await session.pull()).xp == 5

    async def test_server_questions_used(self, session: SyncedSession):
        await session.register("mia", TEST_PASSWORD)
        view = await session.start_level(2)
        assert view.progress_label == "Frage 1 / 1"

    async def test_leaderboard(self, session: SyncedSession):
        await session.register("mia", TEST_PASSWORD)
        entries = await session.leaderboard()
        assert [e.username for e in entries] == ["mia"]
