"""Authentication router — /api/auth/* endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.auth.jwt import create_access_token
from lerncasino.auth.password import PasswordStrengthError
from lerncasino.auth.schemas import LoginRequest, RegisterRequest, TokenResponse
from lerncasino.auth.service import (
    InvalidCredentialsError,
    InvalidUsernameError,
    MissingFieldError,
    UsernameTakenError,
    authenticate_user,
    get_or_create_stats,
    register_user,
    require_credentials,
)
from lerncasino.config import Settings
from lerncasino.database import get_session
from lerncasino.db.models import User
from lerncasino.dependencies import get_app_settings
from lerncasino.users.service import build_user_response

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


async def _issue_token(db: AsyncSession, user: User, settings: Settings) -> TokenResponse:
    """Sign a token for the user and attach the merged profile."""
    stats = await get_or_create_stats(db, user.id)
    return TokenResponse(
        token=create_access_token(user.id, user.username, settings),
        token_type="bearer",
        expires_in=settings.jwt_expire_days * 24 * 60 * 60,
        user=build_user_response(user, stats),
    )


@router.post("/register", response_model=TokenResponse)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    """Create an account with default stats and return a signed token."""
    try:
        username, password = require_credentials(body.username, body.password)
        user = await register_user(db, username, password, settings)
    except (MissingFieldError, InvalidUsernameError, PasswordStrengthError) as e:
        raise HTTPException(
            status_code=400,
            detail=f"Username and password (min. {settings.password_min_length} chars) required",
        ) from e
    except UsernameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e

    response = await _issue_token(db, user, settings)
    await db.commit()
    return response


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    """Exchange username + password for a signed token."""
    try:
        username, password = require_credentials(body.username, body.password)
    except MissingFieldError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        user = await authenticate_user(db, username, password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    response = await _issue_token(db, user, settings)
    await db.commit()
    return response
