"""View models produced by the controller for rendering."""

from __future__ import annotations

from pydantic import BaseModel


class HeaderView(BaseModel):
    level: int
    xp: int
    hearts: int
    coins: int
    streak: int
    xp_progress: float


class ProfileView(BaseModel):
    name: str
    level: int
    xp: int
    best_streak: int


class AnswerButton(BaseModel):
    text: str
    disabled: bool = False
    correct: bool = False
    wrong: bool = False


class QuizView(BaseModel):
    """Quiz screen. ``message`` replaces the question when there is nothing to answer."""

    level: int | None = None
    subtitle: str = ""
    level_label: str = ""
    progress_label: str = ""
    question: str = ""
    answers: list[AnswerButton] = []
    message: str | None = None


class AnswerResult(BaseModel):
    correct: bool
    correct_index: int
    xp_gained: int
    hearts: int
    streak: int
    leveled_up: bool
    level: int


class FlashcardView(BaseModel):
    front: str
    back: str
    flipped: bool = False


class LeaderboardRow(BaseModel):
    rank: int
    name: str
    label: str
    xp: int
    streak: int
    is_me: bool = False

    @property
    def meta(self) -> str:
        return f"{self.xp} XP · Streak {self.streak}"
