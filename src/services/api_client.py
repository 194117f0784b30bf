# src/services/api_client.py

"""Shared HTTP plumbing for the remote catalog gateways."""

import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.services.errors import RequestError


class ApiClient:
    """Base class for gateways talking JSON to the catalog service.

    Failures are never retried: a non-success status or a transport
    error surfaces to the caller as a typed exception.
    """

    def __init__(
        self,
        name: str,
        base_url: str | None = None,
    ) -> None:
        self.name = name
        self.logger = logging.getLogger(f"catalog_admin.{name}")
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def url(self, path: str) -> str:
        """Absolute URL of *path* on the catalog service."""
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def is_success(resp: curl_requests.Response) -> bool:
        """True for any 2xx status."""
        return 200 <= resp.status_code < 300

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> curl_requests.Response:
        """Send one request and return the raw response.

        Raises ``RequestError`` when the transport itself fails; the
        status code is left for the caller to judge.
        """
        headers: dict[str, str] = dict(self.settings.DEFAULT_HEADERS)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        url = self.url(path)

        try:
            resp = self.session.request(
                method,
                url,
                headers=headers,
                params=params,
                json=payload,
                timeout=self._request_timeout,
            )
        except curl_requests.RequestsError as exc:
            self.logger.error(
                "[%s] %s %s failed: %s",
                self.name,
                method,
                path,
                exc,
                exc_info=True,
            )
            raise RequestError(
                f"Could not reach the catalog service: {exc}"
            ) from exc

        self.logger.debug(
            "[%s] %s %s -> HTTP %d",
            self.name,
            method,
            path,
            resp.status_code,
        )
        return resp

    def _decode(self, resp: curl_requests.Response, path: str) -> Any:
        """Parse a JSON body, mapping garbage to ``RequestError``."""
        try:
            return resp.json()
        except ValueError as exc:
            self.logger.error(
                "[%s] Malformed JSON from %s (HTTP %d)",
                self.name,
                path,
                resp.status_code,
            )
            raise RequestError(
                f"Malformed response from {path}",
                status_code=resp.status_code,
            ) from exc

    def _as_object(self, body: Any, path: str) -> dict[str, Any]:
        """Insist on a JSON object body."""
        if not isinstance(body, dict):
            raise RequestError(
                f"Unexpected response shape from {path}: "
                f"{type(body).__name__}"
            )
        return body

    def _as_list(self, body: Any, path: str) -> list[Any]:
        """Insist on a JSON array body."""
        if not isinstance(body, list):
            raise RequestError(
                f"Unexpected response shape from {path}: "
                f"{type(body).__name__}"
            )
        return body

    def _error_message(
        self, resp: curl_requests.Response, default: str
    ) -> str:
        """Best-effort ``message`` field from an error body."""
        try:
            body = resp.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return default

    def _fetch_json(
        self,
        method: str,
        path: str,
        *,
        failure: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        """Request *path* and return its decoded body on success.

        Any non-success status raises ``RequestError`` with *failure*
        as the message.
        """
        resp = self._request(
            method, path, params=params, payload=payload, token=token
        )
        if not self.is_success(resp):
            self.logger.warning(
                "[%s] HTTP %d on %s %s",
                self.name,
                resp.status_code,
                method,
                path,
            )
            raise RequestError(failure, status_code=resp.status_code)
        return self._decode(resp, path)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
