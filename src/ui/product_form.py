# src/ui/product_form.py

"""Modal create/edit form for a product."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from src.config.settings import Settings
from src.filters.field_validator import PRODUCT_FIELDS, FieldValidator
from src.models.product import ProductFormData
from src.services.errors import CatalogError

logger = logging.getLogger("catalog_admin.ui")

SubmitHandler = Callable[[ProductFormData], Awaitable[Any]]

# (field, label, placeholder, input type) for the plain text inputs
_INPUT_FIELDS: list[tuple[str, str, str, str]] = [
    ("title", "Title", "Product name", "text"),
    ("description", "Description", "At least 10 characters", "text"),
    ("price", "Price", "0.00", "number"),
    ("brand", "Brand", "Brand name", "text"),
    ("stock", "Stock", "0", "integer"),
    ("discount_percentage", "Discount %", "0", "number"),
]


class ProductFormModal(ModalScreen[bool]):
    """Collects and validates product fields, then calls *on_submit*.

    Dismisses with True once *on_submit* succeeds.  A failed submit
    keeps the form open with its values and shows the error.
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(
        self,
        on_submit: SubmitHandler,
        heading: str = "Add product",
        initial: ProductFormData | None = None,
    ) -> None:
        super().__init__()
        self._on_submit = on_submit
        self.heading = heading
        self.initial = initial
        self.touched: set[str] = set()
        self.errors: dict[str, str] = {}
        self.submitting = False

    def compose(self) -> ComposeResult:
        raw = self.initial.to_raw() if self.initial else {}
        categories = list(Settings.CATEGORIES)
        current = raw.get("category", "")
        if current and current not in categories:
            categories.append(current)

        fields: list[Any] = [Static(self.heading, id="form_heading")]
        for name, label, placeholder, input_type in _INPUT_FIELDS:
            fields.append(Label(label))
            fields.append(
                Input(
                    value=raw.get(name, ""),
                    placeholder=placeholder,
                    type=input_type,  # type: ignore[arg-type]
                    id=f"field_{name}",
                )
            )
            fields.append(Static("", id=f"error_{name}", classes="field_error"))
            if name == "price":
                fields.append(Label("Category"))
                fields.append(
                    Select(
                        [(c, c) for c in categories],
                        prompt="Select a category",
                        value=current if current else Select.NULL,
                        id="field_category",
                    )
                )
                fields.append(
                    Static("", id="error_category", classes="field_error")
                )

        fields.append(Static("", id="form_status"))
        fields.append(
            Horizontal(
                Button("Save", variant="primary", id="submit_btn"),
                Button("Cancel", id="cancel_btn"),
                id="form_buttons",
            )
        )
        yield VerticalScroll(*fields, id="product_form")

    # ── Values and errors ────────────────────────────────

    def raw_values(self) -> dict[str, str]:
        """Current input text for every product field."""
        values = {
            name: self.query_one(f"#field_{name}", Input).value
            for name, _, _, _ in _INPUT_FIELDS
        }
        category = self.query_one("#field_category", Select).value
        values["category"] = category if isinstance(category, str) else ""
        return values

    def _show_error(self, name: str, error: str | None) -> None:
        if error:
            self.errors[name] = error
        else:
            self.errors.pop(name, None)
        self.query_one(f"#error_{name}", Static).update(error or "")

    def _check_field(self, name: str) -> None:
        value = self.raw_values()[name]
        self._show_error(name, FieldValidator.validate(name, value))

    # ── Interactive validation ───────────────────────────

    def on_input_blurred(self, event: Input.Blurred) -> None:
        name = (event.input.id or "").removeprefix("field_")
        if name in PRODUCT_FIELDS:
            self.touched.add(name)
            self._check_field(name)

    def on_input_changed(self, event: Input.Changed) -> None:
        name = (event.input.id or "").removeprefix("field_")
        if name in self.touched:
            self._check_field(name)

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "field_category":
            self.touched.add("category")
            self._check_field("category")

    # ── Submission ───────────────────────────────────────

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit_btn":
            self.submit()
        elif event.button.id == "cancel_btn":
            self.action_cancel()

    def submit(self) -> bool:
        """Validate the whole form and start the request when clean.

        Returns True when a request was started.
        """
        if self.submitting:
            return False
        values = self.raw_values()
        errors = FieldValidator.validate_form(values)
        self.touched.update(PRODUCT_FIELDS)
        for name in PRODUCT_FIELDS:
            self._show_error(name, errors.get(name))

        status = self.query_one("#form_status", Static)
        if errors:
            status.update("Please fix the highlighted fields")
            return False

        status.update("Saving...")
        self._set_submitting(True)
        self._send(ProductFormData.from_raw(values))
        return True

    def _set_submitting(self, submitting: bool) -> None:
        self.submitting = submitting
        self.query_one("#submit_btn", Button).disabled = submitting
        self.query_one("#cancel_btn", Button).disabled = submitting

    @work(exclusive=True, group="submit")
    async def _send(self, data: ProductFormData) -> None:
        try:
            await self._on_submit(data)
        except CatalogError as exc:
            logger.error("Product form submit failed: %s", exc, exc_info=True)
            self.query_one("#form_status", Static).update(f"❌ {exc}")
            self.notify(str(exc), severity="error")
            self._set_submitting(False)
            return
        self.submitting = False
        self.dismiss(True)

    def action_cancel(self) -> None:
        if not self.submitting:
            self.dismiss(False)
