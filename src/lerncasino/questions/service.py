"""Question reads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from lerncasino.db.models import Question
from lerncasino.questions.schemas import QuestionResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


def to_response(row: Question) -> QuestionResponse:
    """Reshape a questions row into the client payload."""
    return QuestionResponse(
        id=row.id,
        level=row.level,
        q=row.question,
        answers=row.answers,
        correct_index=row.correct_index,
    )


async def get_questions_for_level(db: AsyncSession, level: int) -> list[QuestionResponse]:
    """All questions of a level in insertion order."""
    result = await db.execute(select(Question).where(Question.level == level).order_by(Question.id.asc()))
    return [to_response(row) for row in result.scalars()]
