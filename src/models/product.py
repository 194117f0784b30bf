# src/models/product.py

"""Product data models for inter-module data flow."""

from dataclasses import dataclass, field
from typing import Any

# Form field name -> API (camelCase) field name
API_FIELD_NAMES: dict[str, str] = {
    "title": "title",
    "description": "description",
    "price": "price",
    "category": "category",
    "brand": "brand",
    "stock": "stock",
    "discount_percentage": "discountPercentage",
}


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _as_int(value: Any) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


@dataclass
class Product:
    """A single catalog product as held by the client.

    The authoritative copy lives on the remote service; instances are
    transient and possibly stale.
    """

    id: int
    title: str
    description: str = ""
    price: float = 0.0
    discount_percentage: float = 0.0
    rating: float = 0.0
    stock: int = 0
    brand: str = ""
    category: str = ""
    thumbnail: str = ""
    images: list[str] = field(
        default_factory=lambda: list[str]()
    )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Product":
        """Build a product from a camelCase API payload."""
        images = data.get("images") or []
        return cls(
            id=_as_int(data.get("id")),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            price=_as_float(data.get("price")),
            discount_percentage=_as_float(
                data.get("discountPercentage")
            ),
            rating=_as_float(data.get("rating")),
            stock=_as_int(data.get("stock")),
            brand=str(data.get("brand") or ""),
            category=str(data.get("category") or ""),
            thumbnail=str(data.get("thumbnail") or ""),
            images=[str(url) for url in images if url],
        )

    @property
    def has_discount(self) -> bool:
        """True when a positive discount applies."""
        return self.discount_percentage > 0

    @property
    def original_price(self) -> float:
        """Pre-discount price, derived as price / (1 - discount/100)."""
        if not 0 < self.discount_percentage < 100:
            return self.price
        return self.price / (1 - self.discount_percentage / 100)

    @property
    def stock_level(self) -> str:
        """Coarse stock bucket: ``high``, ``medium`` or ``low``."""
        if self.stock > 50:
            return "high"
        if self.stock > 20:
            return "medium"
        return "low"

    @property
    def gallery(self) -> list[str]:
        """Images to browse, falling back to the thumbnail."""
        if self.images:
            return list(self.images)
        return [self.thumbnail] if self.thumbnail else []


@dataclass
class ProductPage:
    """One page of products plus the server-side total."""

    products: list[Product]
    total: int
    skip: int = 0
    limit: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ProductPage":
        """Build a page from a ``{products, total, skip, limit}`` body."""
        products = [
            Product.from_api(item)
            for item in data.get("products") or []
            if isinstance(item, dict)
        ]
        return cls(
            products=products,
            total=_as_int(data.get("total", len(products))),
            skip=_as_int(data.get("skip")),
            limit=_as_int(data.get("limit", len(products))),
        )


@dataclass
class DeletionResult:
    """Acknowledgment returned by the delete endpoint."""

    id: int
    is_deleted: bool
    deleted_on: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DeletionResult":
        return cls(
            id=_as_int(data.get("id")),
            is_deleted=bool(data.get("isDeleted", False)),
            deleted_on=str(data.get("deletedOn") or ""),
        )


@dataclass
class ProductFormData:
    """Writable product fields collected by the create/edit form."""

    title: str
    description: str
    price: float
    category: str
    brand: str
    stock: int
    discount_percentage: float = 0.0

    @classmethod
    def from_product(cls, product: Product) -> "ProductFormData":
        """Seed the edit form from an existing product."""
        return cls(
            title=product.title,
            description=product.description,
            price=product.price,
            category=product.category,
            brand=product.brand,
            stock=product.stock,
            discount_percentage=product.discount_percentage,
        )

    @classmethod
    def from_raw(cls, values: dict[str, Any]) -> "ProductFormData":
        """Convert raw (already validated) input strings to typed fields."""
        discount = values.get("discount_percentage")
        return cls(
            title=str(values.get("title") or "").strip(),
            description=str(values.get("description") or "").strip(),
            price=_as_float(values.get("price")),
            category=str(values.get("category") or "").strip(),
            brand=str(values.get("brand") or "").strip(),
            stock=_as_int(values.get("stock")),
            discount_percentage=(
                _as_float(discount)
                if str(discount or "").strip()
                else 0.0
            ),
        )

    def to_raw(self) -> dict[str, str]:
        """Render every field as input text for the form widgets.

        Floats use ``repr`` so an unedited value parses back unchanged.
        """
        return {
            "title": self.title,
            "description": self.description,
            "price": repr(self.price),
            "category": self.category,
            "brand": self.brand,
            "stock": str(self.stock),
            "discount_percentage": repr(self.discount_percentage),
        }

    def to_payload(self) -> dict[str, Any]:
        """Serialise to the camelCase body expected by the API."""
        return {
            API_FIELD_NAMES[name]: getattr(self, name)
            for name in API_FIELD_NAMES
        }
