"""Client side of LernCasino: local state, quiz/flashcard controller and API client."""

from lerncasino.client.api import ApiClient, ApiError
from lerncasino.client.controller import InputLockedError, LernCasinoApp
from lerncasino.client.state import ClientState, UserState, View
from lerncasino.client.storage import STORAGE_KEY, LocalStore
from lerncasino.client.sync import SyncedSession

__all__ = [
    "STORAGE_KEY",
    "ApiClient",
    "ApiError",
    "ClientState",
    "InputLockedError",
    "LernCasinoApp",
    "LocalStore",
    "SyncedSession",
    "UserState",
    "View",
]
