# src/ui/login_screen.py

"""Credential entry screen."""

import asyncio
import logging

from textual import work
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    LoadingIndicator,
    Static,
)

from src.filters.field_validator import FieldValidator
from src.services.errors import AuthenticationError, RequestError
from src.services.session_context import SessionContext
from src.ui.router import PRODUCTS_PATH, Navigate

logger = logging.getLogger("catalog_admin.ui")

DEMO_HINT = "Demo credentials: emilys / emilyspass"


class LoginScreen(Screen[None]):
    """Username/password form that opens a session."""

    def __init__(self, session: SessionContext) -> None:
        super().__init__()
        self.session = session
        self.touched: set[str] = set()
        self.submitting = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static("🔐 Welcome", id="login_title"),
            Input(placeholder="Username", id="username"),
            Static("", id="username_error", classes="field_error"),
            Input(placeholder="Password", password=True, id="password"),
            Static("", id="password_error", classes="field_error"),
            Static("", id="login_error"),
            Button("Log in", variant="primary", id="login_btn"),
            LoadingIndicator(id="loader"),
            Static(DEMO_HINT, id="login_hint"),
            id="login_form",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#loader", LoadingIndicator).display = False
        self.query_one("#username", Input).focus()

    def _credentials(self) -> tuple[str, str]:
        return (
            self.query_one("#username", Input).value,
            self.query_one("#password", Input).value,
        )

    def _show_field_errors(self) -> dict[str, str]:
        errors = FieldValidator.validate_login(*self._credentials())
        for name in ("username", "password"):
            message = errors.get(name, "") if name in self.touched else ""
            self.query_one(f"#{name}_error", Static).update(message)
        return errors

    def on_input_blurred(self, event: Input.Blurred) -> None:
        if event.input.id in ("username", "password"):
            self.touched.add(event.input.id)
            self._show_field_errors()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id in self.touched:
            self._show_field_errors()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "login_btn":
            self.submit()

    def submit(self) -> bool:
        """Validate locally, then start the login request.

        Returns True when a request was started.
        """
        if self.submitting:
            return False
        self.touched.update(("username", "password"))
        error_label = self.query_one("#login_error", Static)
        if self._show_field_errors():
            error_label.update("Please fill in all fields")
            return False

        error_label.update("")
        self._set_submitting(True)
        self._login(*self._credentials())
        return True

    def _set_submitting(self, submitting: bool) -> None:
        self.submitting = submitting
        self.query_one("#login_btn", Button).disabled = submitting
        self.query_one("#loader", LoadingIndicator).display = submitting

    @work(exclusive=True, group="login")
    async def _login(self, username: str, password: str) -> None:
        error_label = self.query_one("#login_error", Static)
        try:
            await asyncio.to_thread(self.session.login, username, password)
        except AuthenticationError as exc:
            logger.warning("Login failed: %s", exc)
            error_label.update(
                "Invalid credentials. Please check your details."
            )
            self._set_submitting(False)
            return
        except RequestError as exc:
            logger.error("Login request failed: %s", exc, exc_info=True)
            error_label.update(
                "Could not reach the catalog service. Try again."
            )
            self.notify(str(exc), severity="error")
            self._set_submitting(False)
            return

        self._set_submitting(False)
        self.post_message(Navigate(PRODUCTS_PATH))
