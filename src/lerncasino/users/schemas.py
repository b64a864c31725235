"""Request/response schemas for user endpoints.

Re-exports from auth schemas for convenience.
"""

from lerncasino.auth.schemas import ProfileUpdateRequest, UserResponse

__all__ = [
    "ProfileUpdateRequest",
    "UserResponse",
]
