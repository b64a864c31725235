"""Server-backed play session.

The server owns the stats of a logged-in account: logging in or registering
replaces the local stats with the server's copy, and every local change made
through this session is pushed back with ``POST /api/progress``. Guest play
without a session never talks to the server.
"""

from __future__ import annotations

import structlog

from lerncasino.auth.schemas import UserResponse
from lerncasino.client.api import ApiClient
from lerncasino.client.controller import ANSWER_ADVANCE_DELAY, LernCasinoApp
from lerncasino.client.schemas import AnswerResult, FlashcardView, QuizView
from lerncasino.gamification.schemas import LeaderboardEntry, ProgressAck, ProgressUpdateRequest

logger = structlog.get_logger()


class SyncedSession:
    """Couples a :class:`LernCasinoApp` with an authenticated :class:`ApiClient`."""

    def __init__(self, app: LernCasinoApp, api: ApiClient) -> None:
        self.app = app
        self.api = api

    def adopt(self, profile: UserResponse) -> None:
        """Overwrite local stats with the server's copy."""
        user = self.app.state.user
        user.name = profile.username
        user.level = profile.level
        user.xp = profile.xp
        user.coins = profile.coins
        user.hearts = profile.hearts
        user.streak = profile.streak
        user.best_streak = profile.best_streak
        self.app.save()
        self.app.state.main_screen_visible = True

    async def register(self, username: str, password: str) -> UserResponse:
        result = await self.api.register(username, password)
        self.adopt(result.user)
        return result.user

    async def login(self, username: str, password: str) -> UserResponse:
        result = await self.api.login(username, password)
        self.adopt(result.user)
        return result.user

    async def pull(self) -> UserResponse:
        profile = await self.api.me()
        self.adopt(profile)
        return profile

    async def push(self) -> ProgressAck:
        user = self.app.state.user
        update = ProgressUpdateRequest(
            level=user.level,
            xp=user.xp,
            coins=user.coins,
            hearts=user.hearts,
            streak=user.streak,
            best_streak=user.best_streak,
        )
        ack = await self.api.push_progress(update)
        logger.debug("progress_pushed", xp=user.xp, level=user.level)
        return ack

    async def start_level(self, level: int) -> QuizView:
        """Open a level with the server's questions instead of the static bank."""
        questions = await self.api.questions(level)
        return self.app.start_level(level, questions)

    async def play_answer(self, answer_index: int, delay: float = ANSWER_ADVANCE_DELAY) -> AnswerResult:
        result = await self.app.play_answer(answer_index, delay)
        await self.push()
        return result

    async def know_card(self) -> FlashcardView:
        view = self.app.know_card()
        await self.push()
        return view

    async def leaderboard(self) -> list[LeaderboardEntry]:
        return await self.api.leaderboard()
