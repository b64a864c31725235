"""Request/response schemas for authentication and profile endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class CredentialsRequest(BaseModel):
    """Username + password body for register and login.

    Both fields are optional at the schema level so that missing values are
    reported as 400 by the handlers instead of a generic validation error.
    """

    username: str | None = None
    password: str | None = None


class RegisterRequest(CredentialsRequest):
    """Registration request."""


class LoginRequest(CredentialsRequest):
    """Login request."""


class ProfileUpdateRequest(BaseModel):
    """Update own username and/or password. Omitted fields are left alone."""

    username: str | None = None
    password: str | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    """A user merged with their stats row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    avatar_color: str | None = None
    level: int
    xp: int
    coins: int
    hearts: int
    streak: int
    best_streak: int


class TokenResponse(BaseModel):
    """Token issued on register/login, with the merged user payload."""

    token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class TokenClaims(BaseModel):
    """Decoded claims attached to an authenticated request."""

    id: int
    username: str
