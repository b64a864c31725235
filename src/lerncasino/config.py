"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with LERNCASINO_ prefix.

    ``jwt_secret`` has no default: building the settings without it raises a
    validation error, so the server refuses to start unsigned.
    """

    model_config = SettingsConfigDict(
        env_prefix="LERNCASINO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///./lerncasino.sqlite"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"
    log_format: str = "json"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 4000

    # --- JWT ---
    jwt_secret: SecretStr
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7
    jwt_issuer: str = "lerncasino"

    # --- Accounts ---
    password_min_length: int = 4
    username_max_length: int = 64
    default_avatar_color: str = "#7F5AF0"

    # --- Leaderboard ---
    leaderboard_size: int = 50


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
