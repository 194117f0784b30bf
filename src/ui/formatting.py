# src/ui/formatting.py

"""Rich text helpers shared by the screens and the headless CLI."""

from rich.text import Text

from src.models.product import Product

_STOCK_STYLES: dict[str, str] = {
    "high": "bold green",
    "medium": "bold yellow",
    "low": "bold red",
}


def format_price(value: float) -> str:
    return f"${value:,.2f}"


def render_stars(rating: float) -> Text:
    """Five stars, filled up to the rounded rating, plus the number."""
    filled = min(max(int(round(rating)), 0), 5)
    text = Text()
    text.append("★" * filled, style="yellow")
    text.append("☆" * (5 - filled), style="dim")
    text.append(f" {rating:.1f}")
    return text


def render_stock(product: Product) -> Text:
    return Text(
        str(product.stock),
        style=_STOCK_STYLES[product.stock_level],
    )


def render_price(product: Product) -> Text:
    """Price, followed by the struck-through original when discounted."""
    text = Text(format_price(product.price), style="bold green")
    if product.has_discount:
        text.append("  ")
        text.append(
            format_price(product.original_price), style="strike dim"
        )
        text.append(
            f"  -{product.discount_percentage:g}%", style="bold red"
        )
    return text


def render_card(product: Product) -> Text:
    """Multi-line summary used by the card presentation."""
    text = Text()
    text.append(f"{product.title}\n", style="bold")
    text.append(f"{product.brand or 'No brand'} · {product.category}\n", style="dim")
    text.append_text(render_price(product))
    text.append("\n")
    text.append_text(render_stars(product.rating))
    text.append("   Stock: ")
    text.append_text(render_stock(product))
    return text
