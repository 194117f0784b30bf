# src/ui/router.py

"""Route parsing and the authentication guard in front of the screens."""

import re
from dataclasses import dataclass

from textual.message import Message

LOGIN_PATH = "/login"
PRODUCTS_PATH = "/products"

_DETAIL_RE = re.compile(r"^/products/(\d+)$")


@dataclass(frozen=True)
class Route:
    """A parsed navigation target."""

    name: str  # "root", "login", "products", "product_detail", "not_found"
    path: str
    product_id: int | None = None

    @property
    def protected(self) -> bool:
        return self.name in ("products", "product_detail")


def parse_route(path: str) -> Route:
    """Map a path such as ``/products/12`` to a :class:`Route`."""
    clean = "/" + path.strip().strip("/")
    if clean == "/":
        return Route("root", clean)
    if clean == LOGIN_PATH:
        return Route("login", clean)
    if clean == PRODUCTS_PATH:
        return Route("products", clean)
    match = _DETAIL_RE.match(clean)
    if match:
        return Route("product_detail", clean, int(match.group(1)))
    return Route("not_found", clean)


class RouteGuard:
    """Two states, driven only by whether a session is loaded.

    Unauthenticated access to a protected route lands on the login
    screen; the root redirects to the listing or to login.
    """

    def resolve(self, path: str, authenticated: bool) -> Route:
        route = parse_route(path)
        if route.name == "root":
            return parse_route(
                PRODUCTS_PATH if authenticated else LOGIN_PATH
            )
        if route.protected and not authenticated:
            return parse_route(LOGIN_PATH)
        return route


class Navigate(Message):
    """Ask the application to show another route.

    *flash* is a one-time message for the destination screen.
    """

    def __init__(self, path: str, flash: str | None = None) -> None:
        super().__init__()
        self.path = path
        self.flash = flash
