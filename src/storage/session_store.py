# src/storage/session_store.py

"""Persisted session: bearer token plus the last-authenticated profile."""

import json
import logging

from src.config.settings import Settings
from src.models.user import UserProfile
from src.services.errors import ParseError
from src.storage.local_store import LocalStore

logger = logging.getLogger("catalog_admin.storage")


def _parse_profile(raw: str) -> UserProfile:
    """Decode a stored profile, raising ``ParseError`` when malformed."""
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ParseError(f"Stored profile is not JSON: {exc}") from exc
    return UserProfile.from_api(data)


class SessionStore:
    """Reads and writes the token and profile entries of local storage.

    The two entries are keyed independently, as in browser storage.
    Nothing here talks to the network.
    """

    def __init__(self, storage: LocalStore | None = None) -> None:
        self.storage = storage or LocalStore()

    def save(self, profile: UserProfile, token: str) -> None:
        """Persist both entries, overwriting any prior session."""
        self.storage.set(Settings.TOKEN_KEY, token)
        self.storage.set(
            Settings.USER_KEY,
            json.dumps(profile.to_dict(), ensure_ascii=False),
        )
        logger.info("Session saved for user '%s'", profile.username)

    def save_token(self, token: str) -> None:
        self.storage.set(Settings.TOKEN_KEY, token)

    def load_token(self) -> str | None:
        return self.storage.get(Settings.TOKEN_KEY) or None

    def load(self) -> UserProfile | None:
        """Return the saved profile when a token and a valid profile exist.

        A malformed profile is discarded together with its token, so
        the caller simply sees a logged-out state.
        """
        token = self.load_token()
        raw = self.storage.get(Settings.USER_KEY)
        if not token or not raw:
            return None
        try:
            profile = _parse_profile(raw)
        except ParseError as exc:
            logger.warning("Discarding saved session: %s", exc)
            self.clear()
            return None
        logger.debug("Restored session for user '%s'", profile.username)
        return profile

    def clear(self) -> None:
        """Remove both entries."""
        self.clear_token()
        self.clear_profile()

    def clear_token(self) -> None:
        self.storage.remove(Settings.TOKEN_KEY)

    def clear_profile(self) -> None:
        self.storage.remove(Settings.USER_KEY)
