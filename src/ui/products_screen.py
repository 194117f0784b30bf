# src/ui/products_screen.py

"""Paginated, searchable product listing (table or card presentation)."""

import asyncio
import logging
from typing import cast

from rich.text import Text
from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.message import Message
from textual.screen import Screen
from textual.widgets import (
    Button,
    ContentSwitcher,
    DataTable,
    Footer,
    Header,
    Input,
    LoadingIndicator,
    Select,
    Static,
)

from src.config.settings import Settings
from src.models.listing_state import ListingState
from src.models.product import Product, ProductFormData, ProductPage
from src.services.catalog_gateway import CatalogGateway
from src.services.errors import CatalogError
from src.services.session_context import SessionContext
from src.ui.formatting import (
    format_price,
    render_card,
    render_stars,
    render_stock,
)
from src.ui.product_form import ProductFormModal
from src.ui.router import LOGIN_PATH, Navigate

logger = logging.getLogger("catalog_admin.ui")

_VIEW_IDS: dict[str, str] = {
    "table": "products_table",
    "cards": "products_cards",
}


class ProductCard(Static, can_focus=True):
    """One product in the card presentation."""

    BINDINGS = [Binding("enter", "open", "Open")]

    class Selected(Message):
        """Posted when a card is clicked or activated."""

        def __init__(self, product_id: int) -> None:
            super().__init__()
            self.product_id = product_id

    def __init__(self, product: Product) -> None:
        super().__init__(
            render_card(product),
            id=f"card_{product.id}",
            classes="product_card",
        )
        self.product = product

    def on_click(self) -> None:
        self.action_open()

    def action_open(self) -> None:
        self.post_message(self.Selected(self.product.id))


class ProductsScreen(Screen[None]):
    """Listing screen; owns only ephemeral UI state."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search"),
        Binding("v", "toggle_view", "Table/Cards"),
        Binding("a", "add", "Add"),
        Binding("e", "edit", "Edit"),
        Binding("n", "next_page", "Next page"),
        Binding("p", "previous_page", "Prev page"),
        Binding("l", "logout", "Logout"),
    ]

    def __init__(
        self,
        session: SessionContext,
        catalog: CatalogGateway,
        flash: str | None = None,
    ) -> None:
        super().__init__()
        self.session = session
        self.catalog = catalog
        self.flash = flash
        self.state = ListingState()
        self.products: list[Product] = []
        self.status_message: str = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Horizontal(
                Static("", id="greeting"),
                Button("Add product", variant="success", id="add_btn"),
                Button("Logout", variant="error", id="logout_btn"),
                id="top_bar",
            ),
            Horizontal(
                Input(placeholder="Search products...", id="search_input"),
                Button("Search", variant="primary", id="search_btn"),
                Button("Clear", id="clear_btn"),
                Select(
                    [(c, c) for c in Settings.CATEGORIES],
                    prompt="All categories",
                    id="category_select",
                ),
                Button("Cards", id="view_btn"),
                id="search_bar",
            ),
            Static("", id="status"),
            LoadingIndicator(id="loader"),
            ContentSwitcher(
                cast(
                    DataTable[str | Text],
                    DataTable(
                        id="products_table",
                        zebra_stripes=True,
                        cursor_type="row",
                    ),
                ),
                VerticalScroll(id="products_cards"),
                initial="products_table",
                id="views",
            ),
            Horizontal(
                Button("◀ Prev", id="prev_btn"),
                Static("", id="page_label"),
                Button("Next ▶", id="next_btn"),
                id="pager",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Set up the table, show any flash message and load page 1."""
        user = self.session.user
        greeting = f"👋 Hello, {user.display_name}" if user else "👋 Hello"
        self.query_one("#greeting", Static).update(greeting)

        table = self._table()
        table.add_columns(
            "ID", "Title", "Category", "Brand", "Price", "Rating", "Stock"
        )
        self.query_one("#loader", LoadingIndicator).display = False
        self._update_pager(0)

        if self.flash:
            self.show_status(self.flash, kind="success", transient=True)
            self.notify(self.flash)
            self.flash = None

        self.load_products()
        self.load_categories()

    # ── Status line ──────────────────────────────────────

    def show_status(
        self,
        message: str,
        kind: str = "info",
        transient: bool = False,
    ) -> None:
        """Show *message* in the status line, optionally for a few seconds."""
        self.status_message = message
        status = self.query_one("#status", Static)
        status.set_classes(f"status-{kind}")
        status.update(message)
        if transient:
            self.set_timer(
                Settings.FLASH_DURATION,
                lambda: self._clear_status(message),
            )

    def _clear_status(self, message: str) -> None:
        if self.status_message == message:
            self.show_status("")

    # ── Loading ──────────────────────────────────────────

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )

    def _set_loading(self, loading: bool) -> None:
        self.query_one("#loader", LoadingIndicator).display = loading
        self.query_one("#search_btn", Button).disabled = loading

    def _fetch_page(self) -> ProductPage:
        """Blocking fetch of the page described by the current state."""
        state = self.state
        if state.query:
            return self.catalog.search_products(
                state.query, limit=state.page_size, skip=state.skip
            )
        if state.category:
            return self.catalog.products_by_category(
                state.category, limit=state.page_size, skip=state.skip
            )
        return self.catalog.list_products(state.page_size, state.skip)

    @work(exclusive=True, group="load")
    async def load_products(self) -> None:
        """Fetch the current page and render it."""
        self._set_loading(True)
        try:
            page = await asyncio.to_thread(self._fetch_page)
        except CatalogError as exc:
            logger.error(
                "Failed to load products (page=%d, query='%s'): %s",
                self.state.page,
                self.state.query,
                exc,
                exc_info=True,
            )
            self._set_loading(False)
            message = (
                "Could not search products"
                if self.state.query
                else "Could not load products"
            )
            self.show_status(f"❌ {message}", kind="error")
            self.notify(str(exc), severity="error")
            return

        self._set_loading(False)
        self.products = page.products
        self.state.total = page.total
        await self.populate()

    @work(exclusive=True, group="categories")
    async def load_categories(self) -> None:
        """Replace the built-in category list with the live one."""
        try:
            categories = await asyncio.to_thread(self.catalog.categories)
        except CatalogError as exc:
            logger.warning("Keeping built-in categories: %s", exc)
            return
        if not categories:
            return
        select = cast(
            Select[str], self.query_one("#category_select", Select)
        )
        select.set_options([(c, c) for c in categories])

    async def populate(self) -> None:
        """Render the current products in both presentations."""
        table = self._table()
        table.clear()
        for p in self.products:
            table.add_row(
                str(p.id),
                p.title[:50],
                p.category,
                p.brand or "—",
                Text(format_price(p.price), style="green"),
                render_stars(p.rating),
                render_stock(p),
                key=str(p.id),
            )

        cards = self.query_one("#products_cards", VerticalScroll)
        await cards.remove_children()
        await cards.mount_all([ProductCard(p) for p in self.products])

        self._update_pager(len(self.products))
        if not self.products:
            self.show_status("No products found")
        elif self.status_message.startswith("❌"):
            self.show_status("")

    def _update_pager(self, count: int) -> None:
        state = self.state
        first, last = state.visible_range(count)
        pages = max(state.total_pages, 1)
        self.query_one("#page_label", Static).update(
            f"Page {state.page} of {pages} · "
            f"Showing {first}–{last} of {state.total}"
        )
        self.query_one("#prev_btn", Button).disabled = not state.has_previous
        self.query_one("#next_btn", Button).disabled = not state.has_next

    # ── Search / filter / paging ─────────────────────────

    def search(self) -> None:
        """Search with the input text; blank means the first plain page."""
        query = self.query_one("#search_input", Input).value
        self.state.start_search(query)
        select = self.query_one("#category_select", Select)
        if isinstance(select.value, str):
            select.clear()
        self.load_products()

    def clear_search(self) -> None:
        self.query_one("#search_input", Input).value = ""
        self.state.clear_search()
        select = self.query_one("#category_select", Select)
        if isinstance(select.value, str):
            select.clear()
        self.load_products()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search_input":
            self.search()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "category_select":
            return
        category = event.value if isinstance(event.value, str) else ""
        if category == self.state.category:
            return
        if category:
            self.query_one("#search_input", Input).value = ""
            self.state.filter_category(category)
        else:
            self.state.clear_search()
        self.load_products()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        handlers = {
            "search_btn": self.search,
            "clear_btn": self.clear_search,
            "view_btn": self.action_toggle_view,
            "add_btn": self.action_add,
            "logout_btn": self.action_logout,
            "prev_btn": self.action_previous_page,
            "next_btn": self.action_next_page,
        }
        handler = handlers.get(event.button.id or "")
        if handler is not None:
            handler()

    def action_focus_search(self) -> None:
        self.query_one("#search_input", Input).focus()

    def action_next_page(self) -> None:
        if self.state.next_page():
            self.load_products()

    def action_previous_page(self) -> None:
        if self.state.previous_page():
            self.load_products()

    def action_toggle_view(self) -> None:
        mode = self.state.toggle_view_mode()
        self.query_one("#views", ContentSwitcher).current = _VIEW_IDS[mode]
        self.query_one("#view_btn", Button).label = (
            "Cards" if mode == "table" else "Table"
        )

    # ── Navigation ───────────────────────────────────────

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value is not None:
            self.post_message(Navigate(f"/products/{event.row_key.value}"))

    def on_product_card_selected(self, event: ProductCard.Selected) -> None:
        self.post_message(Navigate(f"/products/{event.product_id}"))

    def action_logout(self) -> None:
        self.session.logout()
        self.post_message(Navigate(LOGIN_PATH))

    # ── Create / edit ────────────────────────────────────

    def selected_product(self) -> Product | None:
        """Product under the cursor (table) or focus (cards)."""
        if self.state.view_mode == "cards":
            focused = self.app.focused
            return focused.product if isinstance(focused, ProductCard) else None
        row = self._table().cursor_row
        if 0 <= row < len(self.products):
            return self.products[row]
        return None

    async def _create(self, data: ProductFormData) -> None:
        await asyncio.to_thread(self.catalog.create_product, data)

    def action_add(self) -> None:
        self.app.push_screen(
            ProductFormModal(self._create, heading="Add product"),
            self._after_create,
        )

    def _after_create(self, saved: bool | None) -> None:
        if saved:
            self.show_status(
                "✅ Product created successfully",
                kind="success",
                transient=True,
            )
            self.load_products()

    def action_edit(self) -> None:
        product = self.selected_product()
        if product is None:
            self.notify("Select a product to edit", severity="warning")
            return

        async def update(data: ProductFormData) -> None:
            await asyncio.to_thread(
                self.catalog.update_product, product.id, data
            )

        self.app.push_screen(
            ProductFormModal(
                update,
                heading=f"Edit product #{product.id}",
                initial=ProductFormData.from_product(product),
            ),
            self._after_update,
        )

    def _after_update(self, saved: bool | None) -> None:
        if saved:
            self.show_status(
                "✅ Product updated successfully",
                kind="success",
                transient=True,
            )
            self.load_products()
