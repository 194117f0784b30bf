# src/filters/field_validator.py

"""Client-side validation rules for the product and login forms."""

import logging
import math
from typing import Any

logger = logging.getLogger("catalog_admin.filters")

PRODUCT_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "price",
    "category",
    "brand",
    "stock",
    "discount_percentage",
)

# API spellings accepted as field names
_ALIASES: dict[str, str] = {"discountPercentage": "discount_percentage"}

_MIN_TITLE_LENGTH = 3
_MIN_DESCRIPTION_LENGTH = 10


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _to_number(value: Any) -> float | None:
    """Parse *value* as a finite number, or return None."""
    if isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class FieldValidator:
    """Stateless field rules shared by on-blur and on-submit validation."""

    @staticmethod
    def validate(field_name: str, value: Any) -> str | None:
        """Return an error message for *value*, or None when it is valid.

        *value* may be raw input text or an already-typed number.
        Unknown field names always validate.
        """
        name = _ALIASES.get(field_name, field_name)

        if name == "title":
            if _is_blank(value):
                return "Title is required"
            if len(str(value).strip()) < _MIN_TITLE_LENGTH:
                return (
                    f"Title must be at least {_MIN_TITLE_LENGTH} characters"
                )
        elif name == "description":
            if _is_blank(value):
                return "Description is required"
            if len(str(value).strip()) < _MIN_DESCRIPTION_LENGTH:
                return (
                    "Description must be at least "
                    f"{_MIN_DESCRIPTION_LENGTH} characters"
                )
        elif name == "price":
            if _is_blank(value):
                return "Price is required"
            number = _to_number(value)
            if number is None:
                return "Price must be a number"
            if number <= 0:
                return "Price must be greater than 0"
        elif name == "category":
            if _is_blank(value):
                return "Category is required"
        elif name == "brand":
            if _is_blank(value):
                return "Brand is required"
        elif name == "stock":
            if _is_blank(value):
                return "Stock is required"
            number = _to_number(value)
            if number is None or not number.is_integer():
                return "Stock must be a whole number"
            if number < 0:
                return "Stock must be 0 or greater"
        elif name == "discount_percentage":
            if _is_blank(value):
                return None
            number = _to_number(value)
            if number is None:
                return "Discount must be a number"
            if not 0 <= number <= 100:
                return "Discount must be between 0 and 100"
        return None

    @staticmethod
    def validate_form(values: dict[str, Any]) -> dict[str, str]:
        """Validate every product field and aggregate the errors.

        Submission should only proceed when the result is empty.
        """
        normalised = {
            _ALIASES.get(k, k): v for k, v in values.items()
        }
        errors: dict[str, str] = {}
        for name in PRODUCT_FIELDS:
            error = FieldValidator.validate(name, normalised.get(name))
            if error:
                errors[name] = error

        if errors:
            logger.debug(
                "Product form rejected: %s", ", ".join(sorted(errors))
            )
        return errors

    @staticmethod
    def validate_login(username: str, password: str) -> dict[str, str]:
        """Both credentials are required after trimming."""
        errors: dict[str, str] = {}
        if _is_blank(username):
            errors["username"] = "Username is required"
        if _is_blank(password):
            errors["password"] = "Password is required"
        return errors
