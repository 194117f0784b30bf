# src/services/session_context.py

"""Owner of the client-side session lifecycle."""

import logging

from src.models.user import UserProfile
from src.services.auth_gateway import AuthGateway
from src.storage.session_store import SessionStore

logger = logging.getLogger("catalog_admin.session")


class SessionContext:
    """Who is logged in, shared by the app and its screens.

    Restored from storage once at start-up, replaced on login and
    cleared on logout.  Nothing else writes the session entries.
    """

    def __init__(
        self,
        store: SessionStore | None = None,
        auth: AuthGateway | None = None,
    ) -> None:
        self.store = store or SessionStore()
        self.auth = auth or AuthGateway(self.store)
        self.user: UserProfile | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def restore(self) -> UserProfile | None:
        """Load a previously saved session, if any."""
        self.user = self.store.load()
        if self.user is not None:
            logger.info("Session restored for '%s'", self.user.username)
        else:
            logger.info("No saved session; starting logged out")
        return self.user

    def login(self, username: str, password: str) -> UserProfile:
        """Authenticate; errors from the gateway propagate unchanged."""
        self.user = self.auth.login(username, password)
        return self.user

    def logout(self) -> None:
        """Clear the token (via the gateway) and the cached profile."""
        username = self.user.username if self.user else None
        self.auth.logout()
        self.store.clear_profile()
        self.user = None
        logger.info("User '%s' logged out", username)

    def close(self) -> None:
        self.auth.close()

    def __enter__(self) -> "SessionContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
