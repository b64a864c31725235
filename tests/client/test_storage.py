"""Local key/value persistence of the user state."""

import json
from pathlib import Path

from lerncasino.client.state import UserState
from lerncasino.client.storage import STORAGE_KEY, LocalStore, load_user, save_user


class TestLocalStore:
    def test_memory_store(self):
        store = LocalStore()
        assert store.get_item("k") is None
        store.set_item("k", "v")
        assert store.get_item("k") == "v"
        store.remove_item("k")
        assert store.get_item("k") is None

    def test_file_store_persists(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        LocalStore(path).set_item("k", "v")
        assert LocalStore(path).get_item("k") == "v"

    def test_unreadable_file_starts_empty(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        path.write_text("{broken", encoding="utf-8")
        assert LocalStore(path).get_item(STORAGE_KEY) is None


class TestUserBlob:
    def test_single_blob_with_camel_case(self, tmp_path: Path):
        path = tmp_path / "storage.json"
        store = LocalStore(path)
        save_user(store, UserState(name="Mia", xp=30, best_streak=4))
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert list(raw) == [STORAGE_KEY]
        blob = json.loads(raw[STORAGE_KEY])
        assert blob["bestStreak"] == 4
        assert blob["name"] == "Mia"

    def test_round_trip(self):
        store = LocalStore()
        save_user(store, UserState(name="Mia", xp=30, level=1, coins=5, hearts=2, streak=1, best_streak=4))
        assert load_user(store) == UserState(name="Mia", xp=30, level=1, coins=5, hearts=2, streak=1, best_streak=4)

    def test_missing_blob_gives_defaults(self):
        user = load_user(LocalStore())
        assert user == UserState()
        assert user.name == "Gast"
        assert user.hearts == 3

    def test_partial_blob_merges_over_defaults(self):
        store = LocalStore()
        store.set_item(STORAGE_KEY, json.dumps({"xp": 70}))
        user = load_user(store)
        assert user.xp == 70
        assert user.hearts == 3

    def test_corrupt_blob_ignored(self):
        store = LocalStore()
        store.set_item(STORAGE_KEY, "not json")
        base = UserState(name="Keep")
        assert load_user(store, base) == base

    def test_wrong_types_ignored(self):
        store = LocalStore()
        store.set_item(STORAGE_KEY, json.dumps({"xp": "lots"}))
        assert load_user(store) == UserState()
