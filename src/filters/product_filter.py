# src/filters/product_filter.py

"""Search-term and category filtering for the browse page."""

import logging

from src.models.product import Product

logger = logging.getLogger("bazaar.filters")

ALL_CATEGORIES_LABEL = "All Categories"


class ProductFilter:
    """Filter catalog products by search term and category."""

    @staticmethod
    def matches_term(product: Product, search_term: str) -> bool:
        """Case-insensitive substring match on name or description."""
        term = search_term.lower()
        return (
            term in product.name.lower()
            or term in product.description.lower()
        )

    @staticmethod
    def matches_category(product: Product, category: str) -> bool:
        """Exact category match; an empty filter matches everything."""
        return not category or product.category == category

    @staticmethod
    def filter_catalog(
        products: list[Product],
        search_term: str = "",
        category: str = "",
    ) -> list[Product]:
        """Keep products matching both the term and the category.

        Order of the input is preserved.
        """
        kept = [
            p
            for p in products
            if ProductFilter.matches_term(p, search_term)
            and ProductFilter.matches_category(p, category)
        ]
        logger.debug(
            "Filter term=%r category=%r kept %d of %d products",
            search_term,
            category,
            len(kept),
            len(products),
        )
        return kept

    @staticmethod
    def category_options(
        products: list[Product],
    ) -> list[tuple[str, str]]:
        """Return ``(label, value)`` pairs for the category selector.

        The "all categories" entry (value ``""``) comes first, followed
        by the distinct categories present, sorted ascending.
        """
        categories = sorted({p.category for p in products if p.category})
        return [(ALL_CATEGORIES_LABEL, "")] + [
            (c, c) for c in categories
        ]
