"""
Password hashing and validation using argon2id.

Hashes are salted per password; the full encoded hash (parameters, salt and
digest) is what gets stored.
"""

from __future__ import annotations

from functools import lru_cache

import argon2

_hasher = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,  # 64 MB
    parallelism=1,
    hash_len=32,
    salt_len=16,
    type=argon2.Type.ID,  # argon2id
)

MIN_PASSWORD_LENGTH = 4


class PasswordStrengthError(ValueError):
    """Raised when a password does not meet the length requirement."""


def hash_password(password: str) -> str:
    """Hash a password using argon2id. Returns the full hash string."""
    return _hasher.hash(password)


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """A throwaway hash to verify against when no user matches."""
    return _hasher.hash("lerncasino-no-such-user")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its argon2id hash.

    Returns True if the password matches. Never raises on mismatch.
    """
    try:
        return _hasher.verify(password_hash, password)
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def validate_password_strength(password: str | None, min_length: int = MIN_PASSWORD_LENGTH) -> None:
    """Raise PasswordStrengthError if the password is missing or too short."""
    if not password:
        msg = "Password is required"
        raise PasswordStrengthError(msg)
    if len(password) < min_length:
        msg = f"Password must be at least {min_length} characters"
        raise PasswordStrengthError(msg)
