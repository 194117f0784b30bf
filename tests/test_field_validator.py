# tests/test_field_validator.py

"""Tests for the product and login form validation rules."""

import unittest

from src.filters.field_validator import PRODUCT_FIELDS, FieldValidator

_VALID_FORM = {
    "title": "Desk Lamp",
    "description": "Warm light for late nights",
    "price": "24.5",
    "category": "home-decoration",
    "brand": "Lumo",
    "stock": "12",
    "discount_percentage": "5",
}


class TestTextFields(unittest.TestCase):
    """Required text fields and minimum lengths."""

    def test_title_two_chars_rejected(self) -> None:
        self.assertEqual(
            FieldValidator.validate("title", "ab"),
            "Title must be at least 3 characters",
        )

    def test_title_three_chars_accepted(self) -> None:
        self.assertIsNone(FieldValidator.validate("title", "abc"))

    def test_title_length_is_trimmed(self) -> None:
        self.assertIsNotNone(FieldValidator.validate("title", "  ab  "))

    def test_blank_title_is_required(self) -> None:
        self.assertEqual(
            FieldValidator.validate("title", "   "), "Title is required"
        )

    def test_description_minimum_length(self) -> None:
        self.assertIsNotNone(FieldValidator.validate("description", "too short"))
        self.assertIsNone(FieldValidator.validate("description", "long enough"))

    def test_category_and_brand_required(self) -> None:
        self.assertEqual(
            FieldValidator.validate("category", ""), "Category is required"
        )
        self.assertEqual(
            FieldValidator.validate("brand", None), "Brand is required"
        )
        self.assertIsNone(FieldValidator.validate("brand", "Lumo"))


class TestNumericFields(unittest.TestCase):
    """Price, stock and discount ranges."""

    def test_price_must_be_positive(self) -> None:
        self.assertEqual(
            FieldValidator.validate("price", "0"),
            "Price must be greater than 0",
        )
        self.assertIsNotNone(FieldValidator.validate("price", -3))
        self.assertIsNone(FieldValidator.validate("price", 0.01))

    def test_price_rejects_text(self) -> None:
        self.assertEqual(
            FieldValidator.validate("price", "cheap"), "Price must be a number"
        )
        self.assertIsNotNone(FieldValidator.validate("price", "nan"))

    def test_stock_zero_accepted_negative_rejected(self) -> None:
        self.assertIsNone(FieldValidator.validate("stock", "0"))
        self.assertEqual(
            FieldValidator.validate("stock", "-1"),
            "Stock must be 0 or greater",
        )

    def test_stock_required_and_whole(self) -> None:
        self.assertEqual(
            FieldValidator.validate("stock", ""), "Stock is required"
        )
        self.assertEqual(
            FieldValidator.validate("stock", "2.5"),
            "Stock must be a whole number",
        )

    def test_discount_bounds(self) -> None:
        self.assertEqual(
            FieldValidator.validate("discount_percentage", 101),
            "Discount must be between 0 and 100",
        )
        self.assertIsNone(FieldValidator.validate("discount_percentage", 100))
        self.assertIsNone(FieldValidator.validate("discount_percentage", 0))
        self.assertIsNotNone(FieldValidator.validate("discount_percentage", "-1"))

    def test_discount_is_optional(self) -> None:
        self.assertIsNone(FieldValidator.validate("discount_percentage", ""))
        self.assertIsNone(FieldValidator.validate("discount_percentage", None))

    def test_api_spelling_of_discount_accepted(self) -> None:
        self.assertIsNotNone(FieldValidator.validate("discountPercentage", "101"))

    def test_unknown_field_is_valid(self) -> None:
        self.assertIsNone(FieldValidator.validate("colour", ""))


class TestWholeForm(unittest.TestCase):
    """Aggregate validation gating submission."""

    def test_valid_form_has_no_errors(self) -> None:
        self.assertEqual(FieldValidator.validate_form(_VALID_FORM), {})

    def test_every_error_is_reported(self) -> None:
        errors = FieldValidator.validate_form({})
        expected = set(PRODUCT_FIELDS) - {"discount_percentage"}
        self.assertEqual(set(errors), expected)

    def test_short_title_blocks_submission(self) -> None:
        form = dict(_VALID_FORM, title="ab")
        errors = FieldValidator.validate_form(form)
        self.assertEqual(list(errors), ["title"])


class TestLoginValidation(unittest.TestCase):
    def test_blank_credentials(self) -> None:
        errors = FieldValidator.validate_login(" ", "")
        self.assertEqual(errors["username"], "Username is required")
        self.assertEqual(errors["password"], "Password is required")

    def test_filled_credentials(self) -> None:
        self.assertEqual(FieldValidator.validate_login("emilys", "pw"), {})


if __name__ == "__main__":
    unittest.main()
