# tests/test_listing_state.py

"""Tests for listing pagination and search state."""

import unittest

from src.models.listing_state import ListingState


class TestPagination(unittest.TestCase):
    """Verify page arithmetic."""

    def test_total_pages_is_ceiling(self) -> None:
        cases = [(0, 0), (1, 1), (10, 1), (11, 2), (194, 20)]
        for total, pages in cases:
            with self.subTest(total=total):
                self.assertEqual(ListingState(total=total).total_pages, pages)

    def test_skip_follows_page(self) -> None:
        state = ListingState(total=194)
        self.assertEqual(state.skip, 0)
        state.go_to(3)
        self.assertEqual(state.skip, 20)

    def test_next_and_previous_respect_bounds(self) -> None:
        state = ListingState(total=15)
        self.assertFalse(state.has_previous)
        self.assertFalse(state.previous_page())
        self.assertTrue(state.next_page())
        self.assertEqual(state.page, 2)
        self.assertFalse(state.next_page())
        self.assertTrue(state.previous_page())
        self.assertEqual(state.page, 1)

    def test_go_to_clamps(self) -> None:
        state = ListingState(total=25)
        state.go_to(99)
        self.assertEqual(state.page, 3)
        state.go_to(-4)
        self.assertEqual(state.page, 1)

    def test_visible_range_on_last_partial_page(self) -> None:
        state = ListingState(total=194)
        state.go_to(20)
        self.assertEqual(state.visible_range(4), (191, 194))
        self.assertEqual(state.visible_range(0), (0, 0))


class TestSearchState(unittest.TestCase):
    """Verify search, category filter and view mode transitions."""

    def test_new_search_resets_to_first_page(self) -> None:
        state = ListingState(total=194)
        state.go_to(5)
        state.start_search("  phone ")
        self.assertEqual(state.page, 1)
        self.assertEqual(state.query, "phone")

    def test_blank_search_is_unfiltered(self) -> None:
        state = ListingState(total=194, query="phone")
        state.start_search("   ")
        self.assertEqual(state.query, "")
        self.assertFalse(state.is_filtered)

    def test_category_replaces_query(self) -> None:
        state = ListingState(query="phone")
        state.filter_category("laptops")
        self.assertEqual(state.category, "laptops")
        self.assertEqual(state.query, "")

    def test_toggle_view_mode_cycles(self) -> None:
        state = ListingState()
        self.assertEqual(state.toggle_view_mode(), "cards")
        self.assertEqual(state.toggle_view_mode(), "table")


if __name__ == "__main__":
    unittest.main()
