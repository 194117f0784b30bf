# tests/test_session_context.py

"""Tests for the session lifecycle shared by app and screens."""

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock, patch

from src.services.auth_gateway import AuthGateway
from src.services.errors import AuthenticationError
from src.services.session_context import SessionContext
from src.storage.local_store import LocalStore
from src.storage.session_store import SessionStore

_LOGIN_BODY = {
    "id": 1,
    "username": "emilys",
    "firstName": "Emily",
    "lastName": "Johnson",
    "accessToken": "access-abc",
}


class TestSessionContext(unittest.TestCase):
    """Verify restore, login and logout transitions."""

    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.path = Path(self._tmp.name) / "session.json"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _context(self, status: int = 200, body: object = None) -> SessionContext:
        store = SessionStore(LocalStore(self.path))
        with patch("src.services.api_client.curl_requests.Session"):
            auth = AuthGateway(store, base_url="https://api.test")
        resp = MagicMock()
        resp.status_code = status
        resp.json.return_value = _LOGIN_BODY if body is None else body
        auth.session.request.return_value = resp
        return SessionContext(store, auth)

    def test_starts_logged_out(self) -> None:
        ctx = self._context()
        self.assertIsNone(ctx.restore())
        self.assertFalse(ctx.is_authenticated)

    def test_login_survives_restart(self) -> None:
        """A new context on the same storage restores the user."""
        first = self._context()
        first.login("emilys", "emilyspass")
        self.assertTrue(first.is_authenticated)

        second = self._context()
        restored = second.restore()
        self.assertIsNotNone(restored)
        assert restored is not None
        self.assertEqual(restored.username, "emilys")
        self.assertEqual(restored.display_name, "Emily")

    def test_failed_login_leaves_no_user(self) -> None:
        ctx = self._context(401, {"message": "Invalid credentials"})
        with self.assertRaises(AuthenticationError):
            ctx.login("emilys", "nope")
        self.assertFalse(ctx.is_authenticated)
        self.assertIsNone(self._context().restore())

    def test_logout_clears_everything(self) -> None:
        ctx = self._context()
        ctx.login("emilys", "emilyspass")

        ctx.logout()

        self.assertFalse(ctx.is_authenticated)
        self.assertIsNone(ctx.store.load_token())
        self.assertEqual(LocalStore(self.path).keys(), [])
        self.assertIsNone(self._context().restore())

    def test_leaving_context_closes_auth_session(self) -> None:
        with self._context() as ctx:
            ctx.login("emilys", "emilyspass")
        ctx.auth.session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
