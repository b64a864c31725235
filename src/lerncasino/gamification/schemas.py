"""Request/response schemas for progress and leaderboard endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProgressUpdateRequest(BaseModel):
    """Partial stats update.

    Every field is either absent (omitted or ``null``) or a non-negative
    integer; ``0`` is a real value, not "absent".
    """

    model_config = ConfigDict(populate_by_name=True)

    level: int | None = Field(None, ge=1)
    xp: int | None = Field(None, ge=0)
    coins: int | None = Field(None, ge=0)
    hearts: int | None = Field(None, ge=0)
    streak: int | None = Field(None, ge=0)
    best_streak: int | None = Field(None, ge=0, alias="bestStreak")

    def changes(self) -> dict[str, int]:
        """Only the fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True, exclude_none=True, by_alias=False)


class ProgressAck(BaseModel):
    """Acknowledgement of a stored progress update."""

    ok: bool = True


class LeaderboardEntry(BaseModel):
    """One row of the public leaderboard."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    level: int
    xp: int
    streak: int
    best_streak: int
