# src/cli/runner.py

"""Headless CLI runner: read-only catalog access and session commands."""

import getpass
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.models.product import Product, ProductPage
from src.services.catalog_gateway import CatalogGateway
from src.services.errors import AuthenticationError, CatalogError
from src.services.session_context import SessionContext
from src.ui.formatting import format_price

logger = logging.getLogger("catalog_admin.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _product_to_dict(p: Product) -> dict[str, object]:
    """Serialise a product to a plain dict for JSON output."""
    return {
        "id": p.id,
        "title": p.title,
        "description": p.description,
        "price": p.price,
        "discountPercentage": p.discount_percentage,
        "originalPrice": round(p.original_price, 2),
        "rating": p.rating,
        "stock": p.stock,
        "brand": p.brand,
        "category": p.category,
        "thumbnail": p.thumbnail,
        "images": p.images,
    }


def _print_json(data: object) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def _print_table(products: list[Product], title: str) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=5)
    table.add_column("Title", max_width=50)
    table.add_column("Category", style="magenta")
    table.add_column("Brand")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Stock", justify="right")

    for p in products:
        table.add_row(
            str(p.id),
            p.title[:50],
            p.category,
            p.brand or "—",
            format_price(p.price),
            f"{p.rating:.1f}",
            str(p.stock),
        )

    Console().print(table)


def _emit_page(
    page: ProductPage, output_format: str, title: str
) -> int:
    if not page.products:
        _err.print("[yellow]No products found.[/yellow]")
    first = page.skip + 1 if page.products else 0
    _err.print(
        f"[dim]Showing {first}–{page.skip + len(page.products)}"
        f" of {page.total}[/dim]"
    )
    if output_format == "table":
        _print_table(page.products, title)
    else:
        _print_json(
            {
                "products": [_product_to_dict(p) for p in page.products],
                "total": page.total,
                "skip": page.skip,
                "limit": page.limit,
            }
        )
    return 0


def run_list(
    page: int,
    output_format: str,
    category: str | None = None,
    catalog: CatalogGateway | None = None,
) -> int:
    """Print one listing page (1-based), optionally within a category."""
    if page < 1:
        _err.print("[red]Page must be 1 or greater.[/red]")
        return 1
    if catalog is None:
        with CatalogGateway() as owned:
            return run_list(page, output_format, category, owned)
    limit = Settings.PAGE_SIZE
    skip = (page - 1) * limit
    try:
        if category:
            result = catalog.products_by_category(category, limit, skip)
        else:
            result = catalog.list_products(limit, skip)
    except CatalogError as exc:
        logger.error("Listing failed: %s", exc, exc_info=True)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1
    title = f"Products · {category}" if category else "Products"
    return _emit_page(result, output_format, f"{title} (page {page})")


def run_search(
    query: str,
    page: int,
    output_format: str,
    catalog: CatalogGateway | None = None,
) -> int:
    """Search; a blank query falls back to the plain listing."""
    if not query.strip():
        return run_list(page, output_format, catalog=catalog)
    if page < 1:
        _err.print("[red]Page must be 1 or greater.[/red]")
        return 1
    if catalog is None:
        with CatalogGateway() as owned:
            return run_search(query, page, output_format, owned)
    limit = Settings.PAGE_SIZE
    _err.print(f"[bold]Searching:[/bold] {query}")
    try:
        result = catalog.search_products(
            query.strip(), limit=limit, skip=(page - 1) * limit
        )
    except CatalogError as exc:
        logger.error("Search failed: %s", exc, exc_info=True)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1
    return _emit_page(result, output_format, f"Results for '{query}'")


def run_show(
    product_id: int,
    output_format: str,
    catalog: CatalogGateway | None = None,
) -> int:
    if catalog is None:
        with CatalogGateway() as owned:
            return run_show(product_id, output_format, owned)
    try:
        product = catalog.get_product(product_id)
    except CatalogError as exc:
        logger.error("Fetching product %s failed: %s", product_id, exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1
    if output_format == "table":
        _print_table([product], f"Product #{product.id}")
    else:
        _print_json(_product_to_dict(product))
    return 0


def run_categories(
    output_format: str,
    catalog: CatalogGateway | None = None,
) -> int:
    if catalog is None:
        with CatalogGateway() as owned:
            return run_categories(output_format, owned)
    try:
        categories = catalog.categories()
    except CatalogError as exc:
        logger.error("Fetching categories failed: %s", exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1
    if output_format == "table":
        table = Table(title="Categories", title_style="bold cyan")
        table.add_column("Slug", style="magenta")
        for slug in categories:
            table.add_row(slug)
        Console().print(table)
    else:
        _print_json(categories)
    return 0


def run_login(
    username: str,
    password: str | None,
    session: SessionContext | None = None,
) -> int:
    """Log in and persist the session for later TUI/CLI runs."""
    if session is None:
        with SessionContext() as owned:
            return run_login(username, password, owned)
    if password is None:
        password = getpass.getpass("Password: ")
    try:
        profile = session.login(username, password)
    except AuthenticationError as exc:
        _err.print(f"[red]Login failed: {exc}[/red]")
        return 1
    except CatalogError as exc:
        logger.error("Login request failed: %s", exc, exc_info=True)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1
    _err.print(
        f"[green]✓ Logged in as {profile.full_name}"
        f" ({profile.username})[/green]"
    )
    return 0


def run_logout(session: SessionContext | None = None) -> int:
    if session is None:
        with SessionContext() as owned:
            return run_logout(owned)
    session.restore()
    if not session.is_authenticated:
        _err.print("[yellow]No active session.[/yellow]")
        return 0
    session.logout()
    _err.print("[green]✓ Logged out[/green]")
    return 0


async def run_health_check() -> int:
    """Run connectivity health check on the catalog endpoints."""
    from src.services.health_checker import HealthChecker

    _err.print("[bold]Running catalog API health check...[/bold]")
    checker = HealthChecker()
    results = await checker.check_all()

    table = Table(
        title="Catalog API Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Endpoint", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    any_down = False
    for r in results:
        if r.status == "ok":
            status = "[green]✅ OK[/green]"
        elif r.status == "slow":
            status = "[yellow]⚠️  SLOW[/yellow]"
        else:
            status = "[red]❌ DOWN[/red]"
            any_down = True

        latency = (
            f"{r.latency_ms:.0f}ms"
            if r.latency_ms > 0
            else "—"
        )
        table.add_row(
            r.endpoint_id, status, latency, r.message,
        )

    Console().print(table)
    return 1 if any_down else 0
