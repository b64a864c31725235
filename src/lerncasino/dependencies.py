"""Shared FastAPI dependencies."""

from fastapi import Request

from lerncasino.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Return the settings instance the running application was built with."""
    settings: Settings = request.app.state.settings
    return settings
