# src/models/commands.py

"""Pages and the closed set of commands the controller accepts.

UI events are translated into one of these commands and handed to
:meth:`MarketplaceController.dispatch`.
"""

from dataclasses import dataclass
from enum import Enum

from src.filters.listing_validator import ListingForm


class Page(str, Enum):
    """Top-level pages of the marketplace."""

    HOME = "home"
    BROWSE = "browse"
    SELL = "sell"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: "str | Page") -> "Page":
        """Resolve a page name, raising ``ValueError`` when unknown."""
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown page '{value}' (expected one of: {valid})"
            ) from None


@dataclass(frozen=True)
class Navigate:
    page: Page


@dataclass(frozen=True)
class FilterCatalog:
    search_term: str = ""
    category: str = ""


@dataclass(frozen=True)
class SubmitListing:
    form: ListingForm


@dataclass(frozen=True)
class DeleteProduct:
    """Delete a listing; nothing happens unless *confirmed* is true."""

    product_id: str
    confirmed: bool = False


@dataclass(frozen=True)
class SuggestDescription:
    name: str = ""
    keywords: str = ""


@dataclass(frozen=True)
class OpenDetail:
    product_id: str


@dataclass(frozen=True)
class CloseDetail:
    pass


Command = (
    Navigate
    | FilterCatalog
    | SubmitListing
    | DeleteProduct
    | SuggestDescription
    | OpenDetail
    | CloseDetail
)
