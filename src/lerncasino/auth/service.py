"""
Authentication business logic.

Handles user registration, credential checks and the stats row that belongs
to every user.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from lerncasino.auth.password import (
    dummy_password_hash,
    hash_password,
    validate_password_strength,
    verify_password,
)
from lerncasino.db.models import User, UserStats

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from lerncasino.config import Settings

logger = structlog.get_logger()


class UsernameTakenError(ValueError):
    """Raised when a username is already used by another account."""


class InvalidCredentialsError(ValueError):
    """Raised for unknown usernames and wrong passwords alike."""


class MissingFieldError(ValueError):
    """Raised when a required request field is absent or empty."""


class InvalidUsernameError(ValueError):
    """Raised when a username exceeds the configured maximum length."""


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user by ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    """Fetch a user by exact username."""
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def get_stats(db: AsyncSession, user_id: int) -> UserStats | None:
    """Fetch the stats row of a user."""
    result = await db.execute(select(UserStats).where(UserStats.user_id == user_id))
    return result.scalar_one_or_none()


async def get_or_create_stats(db: AsyncSession, user_id: int) -> UserStats:
    """Get the stats row, recreating it with defaults if it went missing."""
    stats = await get_stats(db, user_id)
    if stats is None:
        stats = UserStats(user_id=user_id, level=1, xp=0, coins=0, hearts=3, streak=0, best_streak=0)
        db.add(stats)
        await db.flush()
        logger.warning("stats_recreated", user_id=user_id)
    return stats


# ---------------------------------------------------------------------------
# Registration / login
# ---------------------------------------------------------------------------


def require_credentials(username: str | None, password: str | None) -> tuple[str, str]:
    """Return (username, password) or raise MissingFieldError."""
    if not username or not password:
        msg = "Username and password required"
        raise MissingFieldError(msg)
    return username, password


def validate_username(username: str, max_length: int) -> None:
    """Raise InvalidUsernameError if the username is longer than allowed."""
    if len(username) > max_length:
        msg = f"Username must be at most {max_length} characters"
        raise InvalidUsernameError(msg)


async def register_user(db: AsyncSession, username: str, password: str, settings: Settings) -> User:
    """
    Create a user and their default stats row.

    Raises:
        InvalidUsernameError: If the username is too long.
        PasswordStrengthError: If the password is too short.
        UsernameTakenError: If the username already exists.
    """
    validate_username(username, settings.username_max_length)
    validate_password_strength(password, settings.password_min_length)

    if await get_user_by_username(db, username) is not None:
        msg = "Username already taken"
        raise UsernameTakenError(msg)

    now = datetime.now(timezone.utc)
    user = User(
        username=username,
        password_hash=hash_password(password),
        created_at=now,
        avatar_color=settings.default_avatar_color,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        # Lost a race against a concurrent registration with the same name
        await db.rollback()
        msg = "Username already taken"
        raise UsernameTakenError(msg) from e

    db.add(
        UserStats(
            user_id=user.id,
            level=1,
            xp=0,
            coins=0,
            hearts=3,
            streak=0,
            best_streak=0,
            last_login=now,
        )
    )
    await db.flush()
    logger.info("user_registered", user_id=user.id, username=username)
    return user


async def authenticate_user(db: AsyncSession, username: str, password: str) -> User:
    """
    Check credentials and stamp last_login.

    Raises:
        InvalidCredentialsError: Same error for unknown user and wrong password.
    """
    user = await get_user_by_username(db, username)
    # Unknown users still pay for one argon2 verification
    password_hash = user.password_hash if user is not None else dummy_password_hash()
    if not verify_password(password, password_hash) or user is None:
        logger.info("login_failed", username=username)
        msg = "Invalid credentials"
        raise InvalidCredentialsError(msg)

    stats = await get_or_create_stats(db, user.id)
    stats.last_login = datetime.now(timezone.utc)
    await db.flush()
    logger.info("user_login", user_id=user.id)
    return user
