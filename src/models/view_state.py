# src/models/view_state.py

"""Explicit application state owned by the root controller."""

from dataclasses import dataclass, field

from src.models.commands import Page
from src.storage.catalog_store import CatalogStore


@dataclass
class ViewState:
    """What the user is currently looking at."""

    current_page: Page = Page.HOME
    selected_product_id: str | None = None
    suggestion_in_flight: bool = False
    search_term: str = ""
    category_filter: str = ""


@dataclass
class AppState:
    """The catalog plus the view state of one session."""

    catalog: CatalogStore = field(default_factory=CatalogStore)
    view: ViewState = field(default_factory=ViewState)
