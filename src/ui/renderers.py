# src/ui/renderers.py

"""Pure view-model builders for the browse, admin and detail views.

Each function derives everything it returns from its arguments, so the
Textual widgets only copy these values into place.
"""

from dataclasses import dataclass

from src.filters.product_filter import ProductFilter
from src.models.product import Product

EMPTY_CATALOG_MESSAGE = "No products listed yet. Be the first to sell!"
NO_MATCHES_MESSAGE = (
    "No products match your current filters. Try adjusting your search!"
)


@dataclass(frozen=True)
class ProductCard:
    product_id: str
    title: str
    category: str
    summary: str
    price_label: str
    image_url: str


@dataclass(frozen=True)
class BrowseView:
    cards: tuple[ProductCard, ...]
    empty_message: str | None
    category_options: tuple[tuple[str, str], ...]
    selected_category: str


@dataclass(frozen=True)
class AdminRow:
    product_id: str
    thumbnail_url: str
    name: str
    category: str
    price_label: str
    seller: str


@dataclass(frozen=True)
class AdminView:
    rows: tuple[AdminRow, ...]
    show_table: bool
    show_placeholder: bool


@dataclass(frozen=True)
class DetailView:
    product_id: str
    title: str
    image_url: str
    description: str
    price_label: str
    seller_label: str
    category_label: str


def render_browse(
    products: list[Product],
    search_term: str = "",
    category: str = "",
) -> BrowseView:
    """Build the browse grid for the current filters.

    A category that is no longer in the catalog falls back to "all
    categories" before filtering, matching the rebuilt option list.
    """
    options = tuple(ProductFilter.category_options(products))
    if category not in {value for _label, value in options}:
        category = ""

    matches = ProductFilter.filter_catalog(products, search_term, category)
    cards = tuple(
        ProductCard(
            product_id=p.id,
            title=p.name,
            category=p.category,
            summary=p.summary(),
            price_label=p.price_label,
            image_url=p.display_image_url(),
        )
        for p in matches
    )

    empty_message: str | None = None
    if not cards:
        empty_message = (
            EMPTY_CATALOG_MESSAGE if not products else NO_MATCHES_MESSAGE
        )

    return BrowseView(
        cards=cards,
        empty_message=empty_message,
        category_options=options,
        selected_category=category,
    )


def render_admin(products: list[Product]) -> AdminView:
    """One row per product; table and placeholder are never both shown."""
    rows = tuple(
        AdminRow(
            product_id=p.id,
            thumbnail_url=p.display_image_url(50, 50),
            name=p.name,
            category=p.category,
            price_label=p.price_label,
            seller=p.seller,
        )
        for p in products
    )
    has_rows = bool(rows)
    return AdminView(
        rows=rows, show_table=has_rows, show_placeholder=not has_rows
    )


def render_detail(product: Product | None) -> DetailView | None:
    if product is None:
        return None
    return DetailView(
        product_id=product.id,
        title=product.name,
        image_url=product.display_image_url(),
        description=product.description,
        price_label=product.price_label,
        seller_label=f"Sold by: {product.seller}",
        category_label=f"Category: {product.category}",
    )
