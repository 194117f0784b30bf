# src/ui/dialogs.py

"""Small modal dialogs and the not-found screen."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Label, Static

from src.ui.router import Navigate


class ConfirmDeleteModal(ModalScreen[bool]):
    """Yes/no confirmation before deleting a product."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, product_title: str) -> None:
        super().__init__()
        self.product_title = product_title

    def compose(self) -> ComposeResult:
        yield Grid(
            Label(
                f"Delete '{self.product_title}'? This cannot be undone.",
                id="confirm_question",
            ),
            Button("Delete", variant="error", id="confirm_btn"),
            Button("Cancel", variant="default", id="cancel_btn"),
            id="confirm_dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm_btn")

    def action_cancel(self) -> None:
        self.dismiss(False)


class NotFoundScreen(Screen[None]):
    """Shown for any path that matches no route."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static("404", id="not_found_code"),
            Static(f"Page not found: {self.path}", id="not_found_text"),
            Button("Back to start", variant="primary", id="home_btn"),
            id="not_found",
        )
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "home_btn":
            self.post_message(Navigate("/"))
