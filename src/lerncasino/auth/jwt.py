"""
HS256 JWT token management.

Tokens carry the user's ``id`` and ``username`` and expire after
``Settings.jwt_expire_days`` days.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from lerncasino.config import Settings


def create_access_token(user_id: int, username: str, settings: Settings) -> str:
    """
    Create a signed access token.

    Args:
        user_id: The user's database ID.
        username: The user's current username.
        settings: Application settings holding the signing secret.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "id": user_id,
        "username": username,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expire_days),
        "iss": settings.jwt_issuer,
    }
    return jwt.encode(payload, settings.jwt_secret.get_secret_value(), algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Verify and decode a JWT token.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, forged, expired or
            lacks the user claims.
    """
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "iat", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        msg = "Token has expired"
        raise jwt.InvalidTokenError(msg) from None

    if not isinstance(payload.get("id"), int) or not isinstance(payload.get("username"), str):
        msg = "Token is missing user claims"
        raise jwt.InvalidTokenError(msg)

    return payload
