# tests/test_session_store.py

"""Tests for the persisted token/profile session."""

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from src.config.settings import Settings
from src.models.user import UserProfile
from src.storage.local_store import LocalStore
from src.storage.session_store import SessionStore


def _profile() -> UserProfile:
    return UserProfile(
        id=1,
        username="emilys",
        email="emily.johnson@x.dummyjson.com",
        first_name="Emily",
        last_name="Johnson",
        gender="female",
        image="https://dummyjson.com/icon/emilys/128",
    )


class TestSessionStore(unittest.TestCase):
    """Verify save/load/clear of the two session entries."""

    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.storage = LocalStore(Path(self._tmp.name) / "session.json")
        self.store = SessionStore(self.storage)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_empty_storage_loads_none(self) -> None:
        self.assertIsNone(self.store.load())
        self.assertIsNone(self.store.load_token())

    def test_save_then_load_round_trip(self) -> None:
        self.store.save(_profile(), "tok-123")
        self.assertEqual(self.store.load(), _profile())
        self.assertEqual(self.store.load_token(), "tok-123")

    def test_profile_stored_in_camel_case(self) -> None:
        self.store.save(_profile(), "tok-123")
        raw = self.storage.get(Settings.USER_KEY) or ""
        self.assertIn('"firstName": "Emily"', raw)

    def test_token_without_profile_loads_none(self) -> None:
        self.store.save_token("tok-123")
        self.assertIsNone(self.store.load())

    def test_profile_without_token_loads_none(self) -> None:
        self.store.save(_profile(), "tok-123")
        self.store.clear_token()
        self.assertIsNone(self.store.load())

    def test_malformed_profile_is_discarded(self) -> None:
        """Garbage in the profile entry clears the whole session."""
        self.storage.set(Settings.TOKEN_KEY, "tok-123")
        self.storage.set(Settings.USER_KEY, "{definitely not json")
        with self.assertLogs("catalog_admin.storage", level="WARNING"):
            self.assertIsNone(self.store.load())
        self.assertIsNone(self.storage.get(Settings.TOKEN_KEY))
        self.assertIsNone(self.storage.get(Settings.USER_KEY))

    def test_profile_missing_username_is_discarded(self) -> None:
        self.storage.set(Settings.TOKEN_KEY, "tok-123")
        self.storage.set(Settings.USER_KEY, '{"id": 1}')
        self.assertIsNone(self.store.load())
        self.assertEqual(self.storage.keys(), [])

    def test_clear_profile_keeps_token(self) -> None:
        self.store.save(_profile(), "tok-123")
        self.store.clear_profile()
        self.assertEqual(self.store.load_token(), "tok-123")
        self.assertIsNone(self.storage.get(Settings.USER_KEY))

    def test_clear_removes_both(self) -> None:
        self.store.save(_profile(), "tok-123")
        self.store.clear()
        self.assertEqual(self.storage.keys(), [])


if __name__ == "__main__":
    unittest.main()
