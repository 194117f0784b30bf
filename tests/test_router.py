# tests/test_router.py

"""Tests for route parsing and the authentication guard."""

import unittest

from src.ui.router import LOGIN_PATH, PRODUCTS_PATH, RouteGuard, parse_route


class TestParseRoute(unittest.TestCase):
    """Verify path to route mapping."""

    def test_known_paths(self) -> None:
        cases = [
            ("/", "root"),
            ("", "root"),
            ("/login", "login"),
            ("/products", "products"),
            ("/products/", "products"),
            ("/products/12", "product_detail"),
        ]
        for path, name in cases:
            with self.subTest(path=path):
                self.assertEqual(parse_route(path).name, name)

    def test_detail_carries_product_id(self) -> None:
        self.assertEqual(parse_route("/products/12").product_id, 12)

    def test_unknown_paths_are_not_found(self) -> None:
        for path in ("/nope", "/products/abc", "/products/1/edit"):
            with self.subTest(path=path):
                route = parse_route(path)
                self.assertEqual(route.name, "not_found")
                self.assertFalse(route.protected)


class TestRouteGuard(unittest.TestCase):
    """Verify redirects in both session states."""

    def setUp(self) -> None:
        self.guard = RouteGuard()

    def test_root_redirects_by_session(self) -> None:
        self.assertEqual(self.guard.resolve("/", True).path, PRODUCTS_PATH)
        self.assertEqual(self.guard.resolve("/", False).path, LOGIN_PATH)

    def test_protected_routes_need_session(self) -> None:
        for path in ("/products", "/products/3"):
            with self.subTest(path=path):
                self.assertEqual(
                    self.guard.resolve(path, False).name, "login"
                )

    def test_authenticated_reaches_detail(self) -> None:
        route = self.guard.resolve("/products/3", True)
        self.assertEqual(route.name, "product_detail")
        self.assertEqual(route.product_id, 3)

    def test_login_and_not_found_are_public(self) -> None:
        self.assertEqual(self.guard.resolve("/login", False).name, "login")
        self.assertEqual(self.guard.resolve("/login", True).name, "login")
        self.assertEqual(
            self.guard.resolve("/missing", False).name, "not_found"
        )


if __name__ == "__main__":
    unittest.main()
