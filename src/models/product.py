# src/models/product.py

"""Product data model shared by the catalog, renderers and forms."""

from dataclasses import dataclass

from src.config.settings import Settings


def placeholder_image_url(
    seed: str, width: int = 400, height: int = 300
) -> str:
    """Return the deterministic placeholder image for *seed*."""
    return Settings.PLACEHOLDER_IMAGE_URL.format(
        seed=seed, width=width, height=height
    )


def format_price(price: float) -> str:
    """Format a price the way every view shows it, e.g. ``R 120.00``."""
    return f"{Settings.CURRENCY_SYMBOL} {price:.2f}"


@dataclass
class Product:
    """A single listing in the marketplace catalog."""

    id: str
    name: str
    description: str
    price: float
    seller: str
    image_url: str = ""
    category: str = ""
    keywords: str = ""

    @property
    def price_label(self) -> str:
        return format_price(self.price)

    def display_image_url(
        self, width: int = 400, height: int = 300
    ) -> str:
        """Image to show, falling back to a placeholder keyed by id."""
        return self.image_url or placeholder_image_url(
            self.id, width, height
        )

    def summary(self, limit: int = Settings.SUMMARY_LENGTH) -> str:
        """Description cut to *limit* characters for card views."""
        if len(self.description) > limit:
            return self.description[:limit] + "..."
        return self.description
