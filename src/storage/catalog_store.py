# src/storage/catalog_store.py

"""In-memory catalog of product listings for one session."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.models.errors import DuplicateProductError
from src.models.product import Product

logger = logging.getLogger("bazaar.catalog")


class CatalogStore:
    """Ordered, id-unique product collection, newest listing first.

    Nothing is persisted; the store lives as long as the session.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: list[Product] = []
        for product in products:
            if product.id in self:
                raise DuplicateProductError(product.id)
            self._products.append(product)
        logger.debug(
            "CatalogStore initialised with %d products",
            len(self._products),
        )

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return any(p.id == product_id for p in self._products)

    def list(self) -> list[Product]:
        """Return a copy of the current records, most recent first."""
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def add(self, product: Product) -> None:
        """Prepend *product*; its id must not be in the catalog yet."""
        if product.id in self:
            raise DuplicateProductError(product.id)
        self._products.insert(0, product)
        logger.info(
            "Added product %s ('%s'), catalog size %d",
            product.id,
            product.name,
            len(self._products),
        )

    def remove(self, product_id: str) -> bool:
        """Remove the record with *product_id*.

        Returns ``False`` without raising when the id is absent.
        """
        remaining = [p for p in self._products if p.id != product_id]
        if len(remaining) == len(self._products):
            logger.warning(
                "Remove ignored, product %s not in catalog", product_id
            )
            return False
        self._products = remaining
        logger.info(
            "Removed product %s, catalog size %d",
            product_id,
            len(self._products),
        )
        return True

    def categories(self) -> list[str]:
        """Sorted distinct categories present in the catalog."""
        return sorted({p.category for p in self._products if p.category})
