# src/ui/detail_screen.py

"""Single product view with image gallery, edit and delete."""

import asyncio
import logging
import webbrowser

from rich.text import Text
from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    LoadingIndicator,
    Static,
)

from src.config.settings import Settings
from src.models.product import Product, ProductFormData
from src.services.catalog_gateway import CatalogGateway
from src.services.errors import CatalogError, NotFoundError
from src.ui.dialogs import ConfirmDeleteModal
from src.ui.formatting import render_price, render_stars, render_stock
from src.ui.product_form import ProductFormModal
from src.ui.router import PRODUCTS_PATH, Navigate

logger = logging.getLogger("catalog_admin.ui")

DELETED_MESSAGE = "Product deleted successfully"


class ProductDetailScreen(Screen[None]):
    """Detail view for one product."""

    BINDINGS = [
        Binding("escape,b", "back", "Back"),
        Binding("left", "previous_image", "Prev image"),
        Binding("right", "next_image", "Next image"),
        Binding("o", "open_image", "Open image"),
        Binding("e", "edit", "Edit"),
        Binding("d", "delete", "Delete"),
    ]

    def __init__(self, catalog: CatalogGateway, product_id: int) -> None:
        super().__init__()
        self.catalog = catalog
        self.product_id = product_id
        self.product: Product | None = None
        self.image_index = 0
        self.deleting = False
        self.status_message: str = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Button("◀ Back to products", id="back_btn"),
            LoadingIndicator(id="loader"),
            Static("", id="status"),
            Static("", id="product_title"),
            Static("", id="product_info"),
            Static("", id="product_description"),
            Static("", id="gallery"),
            Horizontal(
                Button("◀ Image", id="prev_image_btn"),
                Button("Image ▶", id="next_image_btn"),
                Button("Open image", id="open_image_btn"),
                id="gallery_bar",
            ),
            Horizontal(
                Button("Edit", variant="primary", id="edit_btn"),
                Button("Delete", variant="error", id="delete_btn"),
                id="actions_bar",
            ),
            id="detail_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#loader", LoadingIndicator).display = False
        self._set_actions_enabled(False)
        self.load_product()

    def show_status(
        self,
        message: str,
        kind: str = "info",
        transient: bool = False,
    ) -> None:
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

    def _set_actions_enabled(self, enabled: bool) -> None:
        for button_id in ("#edit_btn", "#delete_btn"):
            self.query_one(button_id, Button).disabled = not enabled

    # ── Loading and rendering ────────────────────────────

    @work(exclusive=True, group="load")
    async def load_product(self) -> None:
        loader = self.query_one("#loader", LoadingIndicator)
        loader.display = True
        try:
            product = await asyncio.to_thread(
                self.catalog.get_product, self.product_id
            )
        except NotFoundError as exc:
            logger.warning("Product %s not found: %s", self.product_id, exc)
            loader.display = False
            self.show_status("❌ Product not found", kind="error")
            return
        except CatalogError as exc:
            logger.error(
                "Failed to load product %s: %s",
                self.product_id,
                exc,
                exc_info=True,
            )
            loader.display = False
            self.show_status("❌ Could not load the product", kind="error")
            self.notify(str(exc), severity="error")
            return

        loader.display = False
        self.product = product
        self.image_index = 0
        self.render_product()
        self._set_actions_enabled(True)

    def render_product(self) -> None:
        product = self.product
        if product is None:
            return
        self.query_one("#product_title", Static).update(
            Text(product.title, style="bold")
        )

        info = Text()
        info.append(f"{product.category}", style="magenta")
        info.append(f"  ·  {product.brand or 'No brand'}\n", style="dim")
        info.append_text(render_price(product))
        info.append("\nRating: ")
        info.append_text(render_stars(product.rating))
        info.append("\nStock: ")
        info.append_text(render_stock(product))
        info.append(f" ({product.stock_level})", style="dim")
        self.query_one("#product_info", Static).update(info)
        self.query_one("#product_description", Static).update(
            product.description
        )
        self.render_gallery()

    def render_gallery(self) -> None:
        gallery = self.product.gallery if self.product else []
        label = self.query_one("#gallery", Static)
        if not gallery:
            label.update("No images")
        else:
            label.update(
                f"🖼  Image {self.image_index + 1} of {len(gallery)}\n"
                f"{gallery[self.image_index]}"
            )
        many = len(gallery) > 1
        self.query_one("#prev_image_btn", Button).disabled = not many
        self.query_one("#next_image_btn", Button).disabled = not many
        self.query_one("#open_image_btn", Button).disabled = not gallery

    # ── Gallery ──────────────────────────────────────────

    def action_next_image(self) -> None:
        gallery = self.product.gallery if self.product else []
        if gallery:
            self.image_index = (self.image_index + 1) % len(gallery)
            self.render_gallery()

    def action_previous_image(self) -> None:
        gallery = self.product.gallery if self.product else []
        if gallery:
            self.image_index = (self.image_index - 1) % len(gallery)
            self.render_gallery()

    def action_open_image(self) -> None:
        """Open the current image in the default browser."""
        gallery = self.product.gallery if self.product else []
        if gallery:
            webbrowser.open(gallery[self.image_index])

    # ── Buttons ──────────────────────────────────────────

    def on_button_pressed(self, event: Button.Pressed) -> None:
        handlers = {
            "back_btn": self.action_back,
            "prev_image_btn": self.action_previous_image,
            "next_image_btn": self.action_next_image,
            "open_image_btn": self.action_open_image,
            "edit_btn": self.action_edit,
            "delete_btn": self.action_delete,
        }
        handler = handlers.get(event.button.id or "")
        if handler is not None:
            handler()

    def action_back(self) -> None:
        self.post_message(Navigate(PRODUCTS_PATH))

    # ── Edit ─────────────────────────────────────────────

    async def _update(self, data: ProductFormData) -> None:
        await asyncio.to_thread(
            self.catalog.update_product, self.product_id, data
        )

    def action_edit(self) -> None:
        if self.product is None:
            return
        self.app.push_screen(
            ProductFormModal(
                self._update,
                heading=f"Edit product #{self.product.id}",
                initial=ProductFormData.from_product(self.product),
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
            self.load_product()

    # ── Delete ───────────────────────────────────────────

    def action_delete(self) -> None:
        if self.product is None or self.deleting:
            return
        self.app.push_screen(
            ConfirmDeleteModal(self.product.title),
            self._after_confirm,
        )

    def _after_confirm(self, confirmed: bool | None) -> None:
        if confirmed:
            self.delete_product()

    @work(exclusive=True, group="delete")
    async def delete_product(self) -> None:
        """Delete, then leave for the listing with a one-time message."""
        self.deleting = True
        self._set_actions_enabled(False)
        try:
            await asyncio.to_thread(
                self.catalog.delete_product, self.product_id
            )
        except CatalogError as exc:
            logger.error(
                "Failed to delete product %s: %s",
                self.product_id,
                exc,
                exc_info=True,
            )
            self.deleting = False
            self._set_actions_enabled(True)
            self.show_status("❌ Could not delete the product", kind="error")
            self.notify(str(exc), severity="error")
            return

        self.deleting = False
        self.post_message(Navigate(PRODUCTS_PATH, flash=DELETED_MESSAGE))
