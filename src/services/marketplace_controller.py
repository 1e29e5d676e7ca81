# src/services/marketplace_controller.py

"""Root controller: owns the session state and executes commands."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from src.filters.listing_validator import ListingForm
from src.models.commands import (
    CloseDetail,
    Command,
    DeleteProduct,
    FilterCatalog,
    Navigate,
    OpenDetail,
    Page,
    SubmitListing,
    SuggestDescription,
)
from src.models.product import Product
from src.models.view_state import AppState
from src.services.description_client import DescriptionSuggestionClient
from src.services.listing_form import ListingFormController, SuggestionOutcome
from src.services.view_router import ViewRouter
from src.storage.catalog_store import CatalogStore
from src.storage.seed_catalog import seed_products
from src.ui.renderers import (
    AdminView,
    BrowseView,
    DetailView,
    render_admin,
    render_browse,
    render_detail,
)

logger = logging.getLogger("bazaar.controller")


class StateChange(str, Enum):
    """Kinds of state change listeners can subscribe to."""

    CATALOG = "catalog"
    SELECTION = "selection"
    SUGGESTION = "suggestion"


class MarketplaceController:
    """Single owner of the catalog and view state for one session.

    UI events arrive as commands through :meth:`dispatch`; views read
    state back through the ``*_view`` methods and subscribe to
    :class:`StateChange` notifications to know when to re-render.
    """

    def __init__(
        self,
        state: AppState | None = None,
        client: DescriptionSuggestionClient | None = None,
    ) -> None:
        self.state = state or AppState(catalog=CatalogStore(seed_products()))
        self.router = ViewRouter(self.state.view)
        self._listeners: dict[StateChange, list[Callable[[], None]]] = {
            change: [] for change in StateChange
        }
        self.form = ListingFormController(
            self.state.catalog,
            self.router,
            client,
            on_suggestion_state=lambda _busy: self._notify(
                StateChange.SUGGESTION
            ),
        )

    # ── State access ─────────────────────────────────────

    @property
    def catalog(self) -> CatalogStore:
        return self.state.catalog

    @property
    def current_page(self) -> Page:
        return self.state.view.current_page

    @property
    def selected_product(self) -> Product | None:
        """The product shown in the detail overlay, if it still exists."""
        product_id = self.state.view.selected_product_id
        if product_id is None:
            return None
        return self.catalog.get(product_id)

    @property
    def suggestion_in_flight(self) -> bool:
        return self.state.view.suggestion_in_flight

    def subscribe(
        self, change: StateChange, listener: Callable[[], None]
    ) -> None:
        self._listeners[change].append(listener)

    def _notify(self, change: StateChange) -> None:
        for listener in self._listeners[change]:
            listener()

    # ── Views ────────────────────────────────────────────

    def browse_view(self) -> BrowseView:
        view = render_browse(
            self.catalog.list(),
            self.state.view.search_term,
            self.state.view.category_filter,
        )
        # Keep the stored filter in line with the rebuilt option list
        self.state.view.category_filter = view.selected_category
        return view

    def admin_view(self) -> AdminView:
        return render_admin(self.catalog.list())

    def detail_view(self) -> DetailView | None:
        return render_detail(self.selected_product)

    # ── Commands ─────────────────────────────────────────

    def navigate(self, page: Page | str) -> Page:
        return self.router.navigate(page)

    def filter_catalog(
        self, search_term: str = "", category: str = ""
    ) -> BrowseView:
        self.state.view.search_term = search_term
        self.state.view.category_filter = category
        return self.browse_view()

    def submit_listing(self, form: ListingForm) -> Product:
        product = self.form.submit(form)
        self._notify(StateChange.CATALOG)
        return product

    def delete_product(self, product_id: str, confirmed: bool) -> bool:
        """Remove a listing once the user has confirmed it.

        Returns ``True`` only when a record was removed. Unconfirmed
        requests and unknown ids leave the catalog untouched.
        """
        if not confirmed:
            logger.info("Deletion of product %s cancelled", product_id)
            return False
        if not self.catalog.remove(product_id):
            return False
        if self.state.view.selected_product_id == product_id:
            self.close_detail()
        self._notify(StateChange.CATALOG)
        return True

    async def suggest_description(
        self, name: str, keywords: str
    ) -> SuggestionOutcome:
        return await self.form.suggest(name, keywords)

    def open_detail(self, product_id: str) -> DetailView | None:
        if product_id not in self.catalog:
            logger.warning("Cannot open unknown product %s", product_id)
            return None
        self.state.view.selected_product_id = product_id
        self._notify(StateChange.SELECTION)
        return self.detail_view()

    def close_detail(self) -> None:
        self.state.view.selected_product_id = None
        self._notify(StateChange.SELECTION)

    async def dispatch(self, command: Command) -> Any:
        """Execute *command* and return its result.

        ``ValidationError`` from listing submission or an empty
        suggestion request propagates to the caller.
        """
        logger.debug("Dispatch %r", command)
        if isinstance(command, Navigate):
            return self.navigate(command.page)
        if isinstance(command, FilterCatalog):
            return self.filter_catalog(command.search_term, command.category)
        if isinstance(command, SubmitListing):
            return self.submit_listing(command.form)
        if isinstance(command, DeleteProduct):
            return self.delete_product(command.product_id, command.confirmed)
        if isinstance(command, SuggestDescription):
            return await self.suggest_description(
                command.name, command.keywords
            )
        if isinstance(command, OpenDetail):
            return self.open_detail(command.product_id)
        if isinstance(command, CloseDetail):
            return self.close_detail()
        raise TypeError(f"Unsupported command: {command!r}")
