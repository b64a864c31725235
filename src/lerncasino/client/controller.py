"""View/state controller for the LernCasino client.

One :class:`LernCasinoApp` owns a :class:`ClientState` and the
:class:`LocalStore` it persists to. Every mutation goes through a method here,
which updates the state, saves the user blob and returns a fresh view model.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping

import structlog

from lerncasino.client.question_bank import QUESTIONS_BY_LEVEL
from lerncasino.client.schemas import (
    AnswerButton,
    AnswerResult,
    FlashcardView,
    HeaderView,
    LeaderboardRow,
    ProfileView,
    QuizView,
)
from lerncasino.client.state import ClientState, View
from lerncasino.client.storage import LocalStore, load_user, save_user
from lerncasino.gamification.levels import level_for_xp, level_progress
from lerncasino.questions.schemas import QuestionResponse

logger = structlog.get_logger()

XP_PER_CORRECT_ANSWER = 10
XP_PER_KNOWN_CARD = 5
COINS_PER_FINISHED_LEVEL = 5
ANSWER_ADVANCE_DELAY = 0.7  # seconds
FLASHCARD_LEVEL = 1

EXAMPLE_PLAYERS: list[dict] = [
    {"name": "Alice", "xp": 420, "streak": 4},
    {"name": "Bob", "xp": 260, "streak": 2},
    {"name": "Cara", "xp": 180, "streak": 3},
]

LevelUpListener = Callable[[int], None]


class InputLockedError(RuntimeError):
    """Raised when an answer arrives while the quiz is not accepting one."""


class LernCasinoApp:
    """Client controller: quiz, flashcards, leaderboard and profile views."""

    def __init__(
        self,
        store: LocalStore,
        state: ClientState | None = None,
        question_bank: Mapping[int, list[QuestionResponse]] | None = None,
    ) -> None:
        self.store = store
        self.state = state or ClientState()
        self.question_bank = question_bank if question_bank is not None else QUESTIONS_BY_LEVEL
        self._level_up_listeners: list[LevelUpListener] = []

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Merge the stored user blob into the current user state."""
        self.state.user = load_user(self.store, self.state.user)

    def save(self) -> None:
        save_user(self.store, self.state.user)

    # ------------------------------------------------------------------
    # Entry / navigation
    # ------------------------------------------------------------------

    def quick_start(self) -> None:
        """Play as guest."""
        self.state.main_screen_visible = True

    def login_local(self, name: str, password: str | None = None) -> None:  # noqa: ARG002
        """Local-only login: the name is kept, the password is not used."""
        self.state.user.name = name.strip() or "Player"
        self.save()
        self.state.main_screen_visible = True

    def switch_view(self, view: View | str) -> View:
        """Show one view and hide the rest. No guards, and no other state changes."""
        self.state.current_view = View(view)
        return self.state.current_view

    # ------------------------------------------------------------------
    # Header / profile / settings
    # ------------------------------------------------------------------

    def header(self) -> HeaderView:
        user = self.state.user
        return HeaderView(
            level=user.level,
            xp=user.xp,
            hearts=user.hearts,
            coins=user.coins,
            streak=user.streak,
            xp_progress=level_progress(user.xp),
        )

    def profile(self) -> ProfileView:
        user = self.state.user
        return ProfileView(name=user.name, level=user.level, xp=user.xp, best_streak=user.best_streak)

    def save_profile(self, name: str) -> ProfileView:
        """Rename the local player. Blank names are ignored."""
        if name.strip():
            self.state.user.name = name.strip()
        self.save()
        return self.profile()

    def toggle_sound(self, on: bool) -> None:
        self.state.sound = on
        logger.info("sound_toggled", on=on)

    def toggle_music(self, on: bool) -> None:
        self.state.music = on
        logger.info("music_toggled", on=on)

    # ------------------------------------------------------------------
    # XP and level-up
    # ------------------------------------------------------------------

    def add_level_up_listener(self, listener: LevelUpListener) -> None:
        self._level_up_listeners.append(listener)

    def close_level_up(self) -> None:
        self.state.level_up_visible = False

    def _gain_xp(self, amount: int) -> bool:
        """Add XP and raise the level if a threshold was crossed.

        Returns True only for the call that crossed it.
        """
        user = self.state.user
        user.xp += amount
        new_level = level_for_xp(user.xp)
        if new_level <= user.level:
            return False
        user.level = new_level
        self.state.level_up_visible = True
        logger.info("level_up", level=new_level, xp=user.xp)
        for listener in self._level_up_listeners:
            listener(new_level)
        return True

    # ------------------------------------------------------------------
    # Quiz
    # ------------------------------------------------------------------

    def start_level(self, level: int, questions: list[QuestionResponse] | None = None) -> QuizView:
        """Load a level's questions and open the quiz view.

        When the level has no questions the view stays where it is.
        """
        state = self.state
        state.current_level = level
        state.current_question_index = 0
        state.current_questions = list(questions if questions is not None else self.question_bank.get(level, []))
        state.answered = False
        state.selected_index = None
        state.level_finished = False
        if not state.current_questions:
            return QuizView(level=level, message="Für dieses Level sind noch keine Fragen hinterlegt.")
        self.switch_view(View.QUIZ)
        return self.quiz_view()

    def current_question(self) -> QuestionResponse | None:
        questions = self.state.current_questions or []
        idx = self.state.current_question_index
        return questions[idx] if idx < len(questions) else None

    def quiz_view(self) -> QuizView:
        state = self.state
        questions = state.current_questions or []
        level = state.current_level
        if not questions:
            return QuizView(level=level, message="Für dieses Level sind noch keine Fragen hinterlegt.")
        question = self.current_question()
        if question is None:
            return QuizView(
                level=level,
                subtitle=f"Level {level} – {len(questions)} Fragen",
                level_label=f"Level {level}",
                message="Level beendet! Du kannst ein neues Level wählen.",
            )
        buttons = [
            AnswerButton(
                text=text,
                disabled=state.answered,
                correct=state.answered and i == question.correct_index,
                wrong=state.answered and i == state.selected_index and i != question.correct_index,
            )
            for i, text in enumerate(question.answers)
        ]
        return QuizView(
            level=level,
            subtitle=f"Level {level} – {len(questions)} Fragen",
            level_label=f"Level {level}",
            progress_label=f"Frage {state.current_question_index + 1} / {len(questions)}",
            question=question.q,
            answers=buttons,
        )

    def answer(self, answer_index: int) -> AnswerResult:
        """Score one answer and lock input until :meth:`advance`.

        Raises:
            InputLockedError: If the question was already answered or no
                question is open.
        """
        question = self.current_question()
        if question is None or self.state.answered:
            msg = "No question is waiting for an answer"
            raise InputLockedError(msg)

        state = self.state
        user = state.user
        state.answered = True
        state.selected_index = answer_index

        correct = answer_index == question.correct_index
        gained = 0
        leveled_up = False
        if correct:
            gained = XP_PER_CORRECT_ANSWER * 2 if state.double_xp else XP_PER_CORRECT_ANSWER
            user.streak += 1
            user.best_streak = max(user.best_streak, user.streak)
            leveled_up = self._gain_xp(gained)
        else:
            user.hearts = max(0, user.hearts - 1)
            user.streak = 0
        self.save()

        return AnswerResult(
            correct=correct,
            correct_index=question.correct_index,
            xp_gained=gained,
            hearts=user.hearts,
            streak=user.streak,
            leveled_up=leveled_up,
            level=user.level,
        )

    def advance(self) -> QuizView:
        """Move to the next question; the first pass over the end pays coins."""
        state = self.state
        state.current_question_index += 1
        state.answered = False
        state.selected_index = None
        if self.current_question() is None and state.current_questions and not state.level_finished:
            state.level_finished = True
            state.user.coins += COINS_PER_FINISHED_LEVEL
            self.save()
        return self.quiz_view()

    async def play_answer(self, answer_index: int, delay: float = ANSWER_ADVANCE_DELAY) -> AnswerResult:
        """Answer, keep the marked buttons up for ``delay`` seconds, then advance."""
        result = self.answer(answer_index)
        await asyncio.sleep(delay)
        self.advance()
        return result

    # ------------------------------------------------------------------
    # Flashcards
    # ------------------------------------------------------------------

    def flashcard(self) -> FlashcardView:
        cards = self.question_bank.get(FLASHCARD_LEVEL, [])
        if not cards:
            return FlashcardView(front="Noch keine Karten angelegt.", back="")
        card = cards[self.state.current_question_index % len(cards)]
        return FlashcardView(front=card.q, back=card.correct_answer, flipped=self.state.card_flipped)

    def flip_card(self) -> FlashcardView:
        self.state.card_flipped = not self.state.card_flipped
        return self.flashcard()

    def know_card(self) -> FlashcardView:
        """Self-reported "I know this": flat XP, then the next card face up.

        The XP goes through the same level-up check as quiz answers, so a
        known card can open the level-up overlay too.
        """
        self._gain_xp(XP_PER_KNOWN_CARD)
        self.save()
        self.state.current_question_index += 1
        self.state.card_flipped = False
        return self.flashcard()

    # ------------------------------------------------------------------
    # Leaderboard
    # ------------------------------------------------------------------

    def build_leaderboard(self) -> list[LeaderboardRow]:
        """Example players plus the local user, by XP. Display only."""
        user = self.state.user
        me = {"name": user.name or "Du", "xp": user.xp, "streak": user.streak, "is_me": True}
        players = sorted([*EXAMPLE_PLAYERS, me], key=lambda p: p["xp"], reverse=True)
        return [
            LeaderboardRow(
                rank=rank,
                name=p["name"],
                label=f"Du ({p['name']})" if p.get("is_me") else p["name"],
                xp=p["xp"],
                streak=p["streak"],
                is_me=p.get("is_me", False),
            )
            for rank, p in enumerate(players, start=1)
        ]
