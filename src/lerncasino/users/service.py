"""Profile reads and updates for the authenticated user."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from lerncasino.auth.password import hash_password
from lerncasino.auth.schemas import UserResponse
from lerncasino.auth.service import (
    UsernameTakenError,
    get_or_create_stats,
    get_user_by_id,
    validate_username,
)
from lerncasino.db.models import User, UserStats

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from lerncasino.config import Settings

logger = structlog.get_logger()


def build_user_response(user: User, stats: UserStats) -> UserResponse:
    """Merge a user row and its stats row into one payload."""
    return UserResponse(
        id=user.id,
        username=user.username,
        avatar_color=user.avatar_color,
        level=stats.level,
        xp=stats.xp,
        coins=stats.coins,
        hearts=stats.hearts,
        streak=stats.streak,
        best_streak=stats.best_streak,
    )


async def get_profile(db: AsyncSession, user_id: int) -> UserResponse | None:
    """Return the merged profile, or None if the user no longer exists."""
    user = await get_user_by_id(db, user_id)
    if user is None:
        return None
    stats = await get_or_create_stats(db, user.id)
    return build_user_response(user, stats)


async def username_taken_by_other(db: AsyncSession, username: str, user_id: int) -> bool:
    """Check whether another account already uses this username."""
    result = await db.execute(select(User.id).where(User.username == username).where(User.id != user_id))
    return result.first() is not None


async def update_profile(
    db: AsyncSession,
    user: User,
    settings: Settings,
    *,
    username: str | None = None,
    password: str | None = None,
) -> User:
    """
    Apply an optional username and/or password change.

    Empty usernames and passwords shorter than the minimum length are
    ignored.

    Raises:
        InvalidUsernameError: If the username is too long.
        UsernameTakenError: If another account already uses the username.
    """
    if username:
        validate_username(username, settings.username_max_length)
        if await username_taken_by_other(db, username, user.id):
            msg = "Username already taken"
            raise UsernameTakenError(msg)
        user.username = username

    if password and len(password) >= settings.password_min_length:
        user.password_hash = hash_password(password)

    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        msg = "Username already taken"
        raise UsernameTakenError(msg) from e
    logger.info(
        "profile_updated",
        user_id=user.id,
        username_changed=bool(username),
        password_changed=bool(password and len(password) >= settings.password_min_length),
    )
    return user
