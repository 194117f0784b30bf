# src/ui/app.py

"""Terminal UI for the catalog_admin product catalog client."""

import logging

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from src.config.settings import Settings
from src.services.catalog_gateway import CatalogGateway
from src.services.session_context import SessionContext
from src.ui.detail_screen import ProductDetailScreen
from src.ui.dialogs import NotFoundScreen
from src.ui.login_screen import LoginScreen
from src.ui.products_screen import ProductsScreen
from src.ui.router import Navigate, Route, RouteGuard

logger = logging.getLogger("catalog_admin.ui")


class CatalogApp(App[object]):
    """Terminal UI for the remote product catalog."""

    CSS_PATH = "styles.css"
    TITLE = "Catalog Admin"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        session: SessionContext | None = None,
        catalog: CatalogGateway | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.session = session or SessionContext()
        self.catalog = catalog or CatalogGateway(self.session.store)
        self.guard = RouteGuard()
        self.current_route: Route | None = None

    def on_mount(self) -> None:
        """Restore any saved session, then route from the root."""
        self.session.restore()
        self.navigate("/")

    def _build_screen(self, route: Route, flash: str | None) -> Screen[None]:
        if route.name == "login":
            return LoginScreen(self.session)
        if route.name == "products":
            return ProductsScreen(self.session, self.catalog, flash=flash)
        if route.name == "product_detail" and route.product_id is not None:
            return ProductDetailScreen(self.catalog, route.product_id)
        return NotFoundScreen(route.path)

    def navigate(self, path: str, flash: str | None = None) -> Route:
        """Show the screen for *path*, applying the route guard.

        The previous screen is replaced, which cancels any of its
        outstanding requests.
        """
        route = self.guard.resolve(path, self.session.is_authenticated)
        if route.path != path:
            logger.info("Redirected %s -> %s", path, route.path)
        self.current_route = route
        self.sub_title = route.path
        screen = self._build_screen(route, flash)
        # The default screen stays at the bottom of the stack
        if len(self.screen_stack) <= 1:
            self.push_screen(screen)
        else:
            self.switch_screen(screen)
        return route

    def on_navigate(self, message: Navigate) -> None:
        self.navigate(message.path, flash=message.flash)

    def on_unmount(self) -> None:
        """Release the HTTP sessions held by the gateways."""
        self.catalog.close()
        self.session.close()
