# src/models/listing_state.py

"""Ephemeral pagination/search state owned by the listing screen."""

import math
from dataclasses import dataclass

from src.config.settings import Settings

VIEW_MODES: tuple[str, ...] = ("table", "cards")


@dataclass
class ListingState:
    """Current page, filter and presentation mode of the product listing.

    Pages are 1-based.  ``total`` is whatever the last response reported,
    so the page count follows ``ceil(total / page_size)``.
    """

    page: int = 1
    page_size: int = Settings.PAGE_SIZE
    total: int = 0
    query: str = ""
    category: str = ""
    view_mode: str = "table"

    @property
    def total_pages(self) -> int:
        if self.total <= 0:
            return 0
        return math.ceil(self.total / self.page_size)

    @property
    def skip(self) -> int:
        """Offset of the first product on the current page."""
        return (self.page - 1) * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def is_filtered(self) -> bool:
        return bool(self.query or self.category)

    def go_to(self, page: int) -> bool:
        """Move to *page*, clamped to the known range.

        Returns True when the page actually changed.
        """
        last = max(self.total_pages, 1)
        target = min(max(page, 1), last)
        if target == self.page:
            return False
        self.page = target
        return True

    def next_page(self) -> bool:
        if not self.has_next:
            return False
        return self.go_to(self.page + 1)

    def previous_page(self) -> bool:
        if not self.has_previous:
            return False
        return self.go_to(self.page - 1)

    def start_search(self, query: str) -> None:
        """Apply a new search; a blank query means the unfiltered list."""
        self.query = query.strip()
        self.category = ""
        self.page = 1

    def clear_search(self) -> None:
        self.query = ""
        self.category = ""
        self.page = 1

    def filter_category(self, category: str) -> None:
        self.category = category.strip()
        self.query = ""
        self.page = 1

    def toggle_view_mode(self) -> str:
        """Switch between table and card presentation."""
        idx = VIEW_MODES.index(self.view_mode)
        self.view_mode = VIEW_MODES[(idx + 1) % len(VIEW_MODES)]
        return self.view_mode

    def visible_range(self, count: int) -> tuple[int, int]:
        """1-based (first, last) positions of *count* rendered rows."""
        if count <= 0:
            return 0, 0
        return self.skip + 1, self.skip + count
