# src/services/catalog_gateway.py

"""CRUD access to the remote product catalog."""

import urllib.parse
from typing import Any

from src.models.product import (
    DeletionResult,
    Product,
    ProductFormData,
    ProductPage,
)
from src.services.api_client import ApiClient
from src.services.errors import AuthenticationError, NotFoundError
from src.storage.session_store import SessionStore


def _page_params(limit: int | None, skip: int | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if limit is not None:
        params["limit"] = limit
    if skip is not None:
        params["skip"] = skip
    return params


class CatalogGateway(ApiClient):
    """List, fetch, search, create, update and delete products.

    Reads are anonymous.  Mutations attach the bearer token held by the
    session store.  The demo service acknowledges writes without
    persisting them, so a created product cannot be fetched afterwards.
    """

    def __init__(
        self,
        store: SessionStore | None = None,
        base_url: str | None = None,
    ) -> None:
        super().__init__("catalog", base_url)
        self.store = store or SessionStore()

    def _require_token(self) -> str:
        token = self.store.load_token()
        if not token:
            raise AuthenticationError("You must be logged in to do that")
        return token

    # ── Reads ────────────────────────────────────────────

    def list_products(self, limit: int = 10, skip: int = 0) -> ProductPage:
        """Fetch one page of the unfiltered catalog."""
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        if skip < 0:
            raise ValueError(f"skip must not be negative, got {skip}")

        path = "/products"
        data = self._fetch_json(
            "GET",
            path,
            params={"limit": limit, "skip": skip},
            failure="Could not load products",
        )
        page = ProductPage.from_api(self._as_object(data, path))
        self.logger.info(
            "Listed %d of %d products (skip=%d)",
            len(page.products),
            page.total,
            skip,
        )
        return page

    def get_product(self, product_id: int) -> Product:
        """Fetch one product; any failure status means it was not found."""
        path = f"/products/{product_id}"
        resp = self._request("GET", path)
        if not self.is_success(resp):
            self.logger.warning(
                "Product %s not found (HTTP %d)",
                product_id,
                resp.status_code,
            )
            raise NotFoundError(
                f"Product {product_id} not found",
                status_code=resp.status_code,
            )
        body = self._as_object(self._decode(resp, path), path)
        return Product.from_api(body)

    def search_products(
        self,
        query: str,
        limit: int | None = None,
        skip: int | None = None,
    ) -> ProductPage:
        """Free-text search; matching semantics belong to the service."""
        path = "/products/search"
        data = self._fetch_json(
            "GET",
            path,
            params={"q": query, **_page_params(limit, skip)},
            failure="Could not search products",
        )
        page = ProductPage.from_api(self._as_object(data, path))
        self.logger.info(
            "Search '%s' matched %d products", query, page.total
        )
        return page

    def categories(self) -> list[str]:
        """Return category slugs.

        The service has answered both with plain strings and with
        ``{slug, name, url}`` objects.
        """
        data = self._fetch_json(
            "GET",
            "/products/categories",
            failure="Could not load categories",
        )
        slugs: list[str] = []
        for item in self._as_list(data, "/products/categories"):
            if isinstance(item, dict):
                slug = item.get("slug") or item.get("name")
                if slug:
                    slugs.append(str(slug))
            elif item:
                slugs.append(str(item))
        return slugs

    def products_by_category(
        self,
        category: str,
        limit: int | None = None,
        skip: int | None = None,
    ) -> ProductPage:
        path = f"/products/category/{urllib.parse.quote(category, safe='')}"
        data = self._fetch_json(
            "GET",
            path,
            params=_page_params(limit, skip) or None,
            failure=f"Could not load category '{category}'",
        )
        return ProductPage.from_api(self._as_object(data, path))

    # ── Mutations ────────────────────────────────────────

    def create_product(self, data: ProductFormData) -> Product:
        token = self._require_token()
        path = "/products/add"
        body = self._fetch_json(
            "POST",
            path,
            payload=data.to_payload(),
            token=token,
            failure="Could not create product",
        )
        product = Product.from_api(self._as_object(body, path))
        self.logger.info(
            "Created product '%s' (id=%s)", product.title, product.id
        )
        return product

    def update_product(
        self,
        product_id: int,
        data: ProductFormData | dict[str, Any],
    ) -> Product:
        """Send changed fields; a plain dict is a partial camelCase body."""
        token = self._require_token()
        path = f"/products/{product_id}"
        payload = (
            data.to_payload()
            if isinstance(data, ProductFormData)
            else dict(data)
        )
        body = self._fetch_json(
            "PUT",
            path,
            payload=payload,
            token=token,
            failure="Could not update product",
        )
        self.logger.info(
            "Updated product %s (%s)", product_id, ", ".join(payload)
        )
        return Product.from_api(self._as_object(body, path))

    def delete_product(self, product_id: int) -> DeletionResult:
        token = self._require_token()
        path = f"/products/{product_id}"
        body = self._fetch_json(
            "DELETE",
            path,
            token=token,
            failure="Could not delete product",
        )
        result = DeletionResult.from_api(self._as_object(body, path))
        self.logger.info(
            "Deleted product %s (acknowledged=%s)",
            product_id,
            result.is_deleted,
        )
        return result
