"""Key/value persistence for the client, mirroring browser localStorage.

The user state is stored as one JSON blob under :data:`STORAGE_KEY`.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from lerncasino.client.state import UserState

logger = structlog.get_logger()

STORAGE_KEY = "lerncasino_user"


class LocalStore:
    """String key/value store backed by a JSON file, or memory when no path is given."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._items: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("local_store_unreadable", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.error("local_store_unreadable", path=str(self.path), error="not an object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._items, ensure_ascii=False), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._write()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._write()


def load_user(store: LocalStore, base: UserState | None = None) -> UserState:
    """Merge the stored blob over ``base`` (defaults when omitted).

    A corrupt blob is logged and ignored; the base state is returned unchanged.
    """
    base = base or UserState()
    raw = store.get_item(STORAGE_KEY)
    if not raw:
        return base
    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            msg = "stored user state is not an object"
            raise TypeError(msg)
        return UserState.model_validate({**base.model_dump(by_alias=True), **data})
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.error("user_state_load_failed", error=str(e))
        return base


def save_user(store: LocalStore, user: UserState) -> None:
    """Write the user state blob."""
    store.set_item(STORAGE_KEY, user.model_dump_json(by_alias=True))
