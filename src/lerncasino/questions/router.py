"""Question router — /api/questions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.auth.dependencies import get_current_claims
from lerncasino.auth.schemas import TokenClaims
from lerncasino.database import get_session
from lerncasino.questions.schemas import QuestionResponse
from lerncasino.questions.service import get_questions_for_level

router = APIRouter(prefix="/api", tags=["Questions"])

DEFAULT_LEVEL = 1


def parse_level(raw: str | None) -> int:
    """Read the level query value; absent or empty means level 1."""
    if raw is None or not raw.strip():
        return DEFAULT_LEVEL
    try:
        return int(raw)
    except ValueError as e:
        raise HTTPException(status_code=400, detail="Level must be an integer") from e


@router.get("/questions", response_model=list[QuestionResponse], response_model_by_alias=True)
async def list_questions(
    level: str | None = Query(None),
    _claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_session),
) -> list[QuestionResponse]:
    """Questions of one level, ordered by id."""
    return await get_questions_for_level(db, parse_level(level))
