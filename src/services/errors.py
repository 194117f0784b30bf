# src/services/errors.py

"""Typed failures raised by the gateways and the session store.

Views branch on the exception class rather than on message text.
"""


class CatalogError(Exception):
    """Base class for every catalog_admin failure."""


class AuthenticationError(CatalogError):
    """Credentials were rejected, or a mutating call has no token."""


class RequestError(CatalogError):
    """A remote call failed: non-success status, network error or bad body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(RequestError):
    """The requested product does not exist on the remote service."""


class ParseError(CatalogError):
    """A locally stored value could not be decoded."""
