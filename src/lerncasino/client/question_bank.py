"""Static question bank used when the client plays without a server."""

from __future__ import annotations

from lerncasino.questions.schemas import QuestionResponse
from lerncasino.questions.seed import QUESTION_SEED_DATA


def build_question_bank(seed_data: list[dict]) -> dict[int, list[QuestionResponse]]:
    """Group seed questions by level, numbering them in seed order from 1."""
    bank: dict[int, list[QuestionResponse]] = {}
    for question_id, data in enumerate(seed_data, start=1):
        bank.setdefault(data["level"], []).append(
            QuestionResponse(
                id=question_id,
                level=data["level"],
                q=data["question"],
                answers=list(data["answers"]),
                correct_index=data["correct_index"],
            )
        )
    return bank


QUESTIONS_BY_LEVEL: dict[int, list[QuestionResponse]] = build_question_bank(QUESTION_SEED_DATA)
