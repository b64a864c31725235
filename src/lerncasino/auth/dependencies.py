"""FastAPI authentication dependencies."""

from __future__ import annotations

import jwt
from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lerncasino.auth.jwt import verify_token
from lerncasino.auth.schemas import TokenClaims
from lerncasino.config import Settings
from lerncasino.dependencies import get_app_settings

# auto_error=False: a missing header must be a 401, not HTTPBearer's 403
_bearer = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    settings: Settings = Depends(get_app_settings),
) -> TokenClaims:
    """
    Extract and verify the bearer token, return its user claims.

    Raises 401 when the header is absent, not a bearer credential, or the
    token fails verification.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="No token provided", headers=_UNAUTHORIZED_HEADERS)
    try:
        payload = verify_token(credentials.credentials, settings)
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail="Invalid token", headers=_UNAUTHORIZED_HEADERS) from e
    return TokenClaims(id=payload["id"], username=payload["username"])
