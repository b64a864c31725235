"""Client state owned by one :class:`~lerncasino.client.controller.LernCasinoApp`."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from lerncasino.questions.schemas import QuestionResponse


class View(str, Enum):
    """The five main views; exactly one is visible at a time."""

    HOME = "Home"
    QUIZ = "Quiz"
    FLASHCARDS = "Flashcards"
    LEADERBOARD = "Leaderboard"
    SHOP = "Shop"


class UserState(BaseModel):
    """Local mirror of the player's stats. Serialized with camelCase bestStreak."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = "Gast"
    xp: int = 0
    level: int = 1
    coins: int = 0
    hearts: int = 3
    streak: int = 0
    best_streak: int = Field(0, alias="bestStreak")


class ClientState(BaseModel):
    """Everything the UI needs to render."""

    user: UserState = Field(default_factory=UserState)
    current_view: View = View.HOME
    current_level: int | None = None
    current_question_index: int = 0
    double_xp: bool = False
    current_questions: list[QuestionResponse] | None = None

    main_screen_visible: bool = False
    answered: bool = False
    selected_index: int | None = None
    level_finished: bool = False
    card_flipped: bool = False
    level_up_visible: bool = False
    sound: bool = True
    music: bool = True
