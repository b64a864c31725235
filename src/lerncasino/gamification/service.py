"""Progress updates and leaderboard reads."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from lerncasino.auth.service import get_stats
from lerncasino.db.models import User, UserStats
from lerncasino.gamification.schemas import LeaderboardEntry, ProgressUpdateRequest

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


def merge_progress(stats: UserStats, update: ProgressUpdateRequest) -> dict[str, int]:
    """
    Compute the six stat values after applying a partial update.

    Absent fields keep their stored value. best_streak never decreases and
    never drops below the resulting streak.
    """
    changes = update.changes()
    merged = {
        "level": changes.get("level", stats.level),
        "xp": changes.get("xp", stats.xp),
        "coins": changes.get("coins", stats.coins),
        "hearts": changes.get("hearts", stats.hearts),
        "streak": changes.get("streak", stats.streak),
    }
    merged["best_streak"] = max(
        changes.get("best_streak", stats.best_streak),
        stats.best_streak,
        merged["streak"],
    )
    return merged


async def apply_progress(db: AsyncSession, user_id: int, update: ProgressUpdateRequest) -> UserStats | None:
    """Persist a partial update. Returns None when the user has no stats row."""
    stats = await get_stats(db, user_id)
    if stats is None:
        return None

    merged = merge_progress(stats, update)
    for field, value in merged.items():
        setattr(stats, field, value)
    await db.flush()

    logger.info("progress_updated", user_id=user_id, fields=sorted(update.changes()), **merged)
    return stats


async def get_leaderboard(db: AsyncSession, limit: int = 50) -> list[LeaderboardEntry]:
    """Top users by XP, highest first; ties go to the older account."""
    result = await db.execute(
        select(
            User.username,
            UserStats.level,
            UserStats.xp,
            UserStats.streak,
            UserStats.best_streak,
        )
        .join(UserStats, UserStats.user_id == User.id)
        .order_by(UserStats.xp.desc(), User.id.asc())
        .limit(limit)
    )
    return [LeaderboardEntry.model_validate(row) for row in result.all()]
