# src/filters/listing_validator.py

"""Validation of new-listing form input."""

import logging
import math
from dataclasses import dataclass

from src.models.errors import ValidationError

logger = logging.getLogger("bazaar.filters")

# Field name -> label shown to the user, in reporting order
FIELD_LABELS: dict[str, str] = {
    "name": "Name",
    "category": "Category",
    "price": "Price (must be a positive number)",
    "description": "Description",
}


@dataclass(frozen=True)
class ListingForm:
    """Raw text of the sell form, exactly as typed."""

    name: str = ""
    category: str = ""
    price: str = ""
    description: str = ""
    image_url: str = ""
    keywords: str = ""


@dataclass(frozen=True)
class ValidListing:
    """Cleaned listing values ready to become a Product."""

    name: str
    category: str
    price: float
    description: str
    image_url: str
    keywords: str


def parse_price(raw: str) -> float | None:
    """Return the price as a float, or ``None`` if not a positive number."""
    # float() accepts digit-group underscores such as "1_000"
    if "_" in raw:
        return None
    try:
        price = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(price) or price <= 0:
        return None
    return price


class ListingValidator:
    """Check every listing field and report all failures at once."""

    @staticmethod
    def validate(form: ListingForm) -> ValidListing:
        """Return the cleaned listing or raise :class:`ValidationError`.

        All rules are evaluated before raising so that the error names
        every failing field.
        """
        name = form.name.strip()
        category = form.category.strip()
        description = form.description.strip()
        price = parse_price(form.price)

        failing: list[str] = []
        if not name:
            failing.append("name")
        if not category:
            failing.append("category")
        if price is None:
            failing.append("price")
        if not description:
            failing.append("description")

        if failing or price is None:
            logger.debug(
                "Listing rejected, failing fields: %s",
                ", ".join(failing),
            )
            raise ValidationError(
                {field: FIELD_LABELS[field] for field in failing}
            )

        return ValidListing(
            name=name,
            category=category,
            price=price,
            description=description,
            image_url=form.image_url.strip(),
            keywords=form.keywords.strip(),
        )
