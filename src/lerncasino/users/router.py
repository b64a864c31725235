"""Profile router — /api/me endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.auth.dependencies import get_current_claims
from lerncasino.auth.schemas import TokenClaims
from lerncasino.auth.service import (
    InvalidUsernameError,
    UsernameTakenError,
    get_or_create_stats,
    get_user_by_id,
)
from lerncasino.config import Settings
from lerncasino.database import get_session
from lerncasino.dependencies import get_app_settings
from lerncasino.users.schemas import ProfileUpdateRequest, UserResponse
from lerncasino.users.service import build_user_response, get_profile, update_profile

router = APIRouter(prefix="/api/me", tags=["Users"])


@router.get("", response_model=UserResponse)
async def read_profile(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_session),
) -> UserResponse:
    """Get own profile merged with stats."""
    profile = await get_profile(db, claims.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    await db.commit()
    return profile


@router.put("", response_model=UserResponse)
async def update_my_profile(
    body: ProfileUpdateRequest,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> UserResponse:
    """Change username and/or password."""
    user = await get_user_by_id(db, claims.id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")

    try:
        user = await update_profile(db, user, settings, username=body.username, password=body.password)
    except InvalidUsernameError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except UsernameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e

    stats = await get_or_create_stats(db, user.id)
    await db.commit()
    return build_user_response(user, stats)
