"""Gamification router — progress sync and public leaderboard."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.auth.dependencies import get_current_claims
from lerncasino.auth.schemas import TokenClaims
from lerncasino.config import Settings
from lerncasino.database import get_session
from lerncasino.dependencies import get_app_settings
from lerncasino.gamification.schemas import LeaderboardEntry, ProgressAck, ProgressUpdateRequest
from lerncasino.gamification.service import apply_progress, get_leaderboard

router = APIRouter(prefix="/api", tags=["Gamification"])


@router.post("/progress", response_model=ProgressAck)
async def update_progress(
    body: ProgressUpdateRequest,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_session),
) -> ProgressAck:
    """Store the client's stats; only the fields sent are changed."""
    stats = await apply_progress(db, claims.id, body)
    if stats is None:
        raise HTTPException(status_code=404, detail="Stats not found")
    await db.commit()
    return ProgressAck(ok=True)


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def leaderboard(
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> list[LeaderboardEntry]:
    """Public top list by XP."""
    return await get_leaderboard(db, limit=settings.leaderboard_size)
