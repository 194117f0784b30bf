# src/services/auth_gateway.py

"""Exchanges credentials for a bearer token and a user profile."""

from typing import Any

from src.models.user import UserProfile
from src.services.api_client import ApiClient
from src.services.errors import AuthenticationError, ParseError, RequestError
from src.storage.session_store import SessionStore

LOGIN_PATH = "/auth/login"


class AuthGateway(ApiClient):
    """Thin wrapper around the login endpoint and the session store."""

    def __init__(
        self,
        store: SessionStore | None = None,
        base_url: str | None = None,
    ) -> None:
        super().__init__("auth", base_url)
        self.store = store or SessionStore()

    def login(self, username: str, password: str) -> UserProfile:
        """Authenticate and persist the resulting session.

        Leading/trailing whitespace is stripped from both credentials
        before they are sent.  The refresh token in the response is
        deliberately ignored.

        Raises ``AuthenticationError`` on rejected credentials and
        ``RequestError`` when the service cannot be reached.
        """
        username = username.strip()
        password = password.strip()
        payload: dict[str, Any] = {
            "username": username,
            "password": password,
            "expiresInMins": self.settings.TOKEN_EXPIRES_MINS,
        }

        resp = self._request("POST", LOGIN_PATH, payload=payload)
        if not self.is_success(resp):
            message = self._error_message(resp, "Invalid credentials")
            self.logger.warning(
                "Login rejected for '%s' (HTTP %d): %s",
                username,
                resp.status_code,
                message,
            )
            raise AuthenticationError(message)

        data = self._decode(resp, LOGIN_PATH)
        token = data.get("accessToken") if isinstance(data, dict) else None
        if not token:
            raise RequestError(
                "Login response did not include an access token",
                status_code=resp.status_code,
            )
        try:
            profile = UserProfile.from_api(data)
        except ParseError as exc:
            raise RequestError(
                f"Login response has an invalid profile: {exc}",
                status_code=resp.status_code,
            ) from exc

        self.store.save(profile, str(token))
        self.logger.info("User '%s' logged in", profile.username)
        return profile

    def logout(self) -> None:
        """Forget the persisted token (the profile is the caller's job)."""
        self.store.clear_token()
        self.logger.info("Token cleared")

    def token(self) -> str | None:
        return self.store.load_token()

    def is_authenticated(self) -> bool:
        return self.token() is not None
