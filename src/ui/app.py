# src/ui/app.py

"""Terminal UI for the bazaar marketplace."""

import logging
from datetime import datetime
from functools import partial
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import (
    Button,
    ContentSwitcher,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Select,
    Static,
    TextArea,
)

from src.config.settings import Settings
from src.filters.listing_validator import ListingForm
from src.filters.product_filter import ALL_CATEGORIES_LABEL
from src.models.commands import (
    FilterCatalog,
    Navigate,
    OpenDetail,
    Page,
    SubmitListing,
    SuggestDescription,
)
from src.models.errors import ValidationError
from src.services.description_client import DescriptionSuggestionClient
from src.services.listing_form import SuggestionOutcome
from src.services.marketplace_controller import (
    MarketplaceController,
    StateChange,
)
from src.ui.renderers import BrowseView, DetailView
from src.ui.screens import ConfirmDeleteScreen, ProductDetailScreen

logger = logging.getLogger("bazaar.ui")

SUGGEST_LABEL = "Suggest Description"
SUGGEST_BUSY_LABEL = "Suggesting..."

_FORM_INPUT_IDS = (
    "product_name",
    "product_category",
    "product_price",
    "product_image_url",
    "product_keywords",
)


class BazaarApp(App[object]):
    """Terminal UI for the bazaar marketplace."""

    CSS_PATH = "styles.css"
    TITLE = "Bazaar"

    BINDINGS = [
        Binding("f1", "go('home')", "Home"),
        Binding("f2", "go('browse')", "Browse"),
        Binding("f3", "go('sell')", "Sell"),
        Binding("f4", "go('admin')", "Admin"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, controller: MarketplaceController | None = None
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.controller = controller or MarketplaceController(
            client=DescriptionSuggestionClient()
        )
        self._previously_focused: Widget | None = None
        self._category_options: tuple[tuple[str, str], ...] = ()

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Horizontal(
            *[
                Button(
                    page.value.title(),
                    id=f"nav_{page.value}",
                    classes="nav-link",
                )
                for page in Page
            ],
            id="nav_bar",
        )
        yield ContentSwitcher(
            self._compose_home(),
            self._compose_browse(),
            self._compose_sell(),
            self._compose_admin(),
            initial=Page.HOME.value,
            id="pages",
        )
        yield Footer()

    def _compose_home(self) -> Widget:
        return Vertical(
            Static("Welcome to Bazaar", id="home_title", classes="page-title"),
            Static(
                "Buy and sell pre-loved treasures with your community.",
                id="home_tagline",
            ),
            Horizontal(
                Button("Browse Items", variant="primary", id="home_browse_btn"),
                Button("Sell an Item", id="home_sell_btn"),
                id="home_actions",
            ),
            Static(
                f"© {datetime.now().year} Bazaar marketplace demo",
                id="current_year",
            ),
            id=Page.HOME.value,
        )

    def _compose_browse(self) -> Widget:
        return Vertical(
            Static("Browse Listings", classes="page-title"),
            Horizontal(
                Input(placeholder="Search products...", id="search_term"),
                Select(
                    [(ALL_CATEGORIES_LABEL, "")],
                    allow_blank=False,
                    value="",
                    id="category_filter",
                ),
                id="browse_filters",
            ),
            Static("", id="no_products_message"),
            DataTable(
                id="product_grid",
                zebra_stripes=True,
                cursor_type="row",
            ),
            id=Page.BROWSE.value,
        )

    def _compose_sell(self) -> Widget:
        return VerticalScroll(
            Static("Sell an Item", classes="page-title"),
            Label("Product Name"),
            Input(placeholder="e.g. Vintage Leather Jacket", id="product_name"),
            Label("Category"),
            Input(placeholder="e.g. Fashion", id="product_category"),
            Label(f"Price ({self.settings.CURRENCY_SYMBOL})"),
            Input(placeholder="e.g. 120.00", id="product_price"),
            Label("Image URL (optional)"),
            Input(placeholder="https://...", id="product_image_url"),
            Label("Keywords (for description suggestions)"),
            Input(placeholder="e.g. leather, vintage", id="product_keywords"),
            Label("Description"),
            TextArea(id="product_description"),
            Horizontal(
                Button(SUGGEST_LABEL, id="generate_description_btn"),
                Button("List Item", variant="primary", id="list_item_btn"),
                id="form_actions",
            ),
            Static("", id="form_error_message"),
            id=Page.SELL.value,
        )

    def _compose_admin(self) -> Widget:
        return Vertical(
            Static(
                "Admin: Manage Listings",
                id="admin_page_title",
                classes="page-title",
            ),
            Static("No products listed.", id="no_admin_products_message"),
            Container(
                DataTable(
                    id="admin_products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
                id="admin_product_table_container",
            ),
            id=Page.ADMIN.value,
        )

    def on_mount(self) -> None:
        """Configure tables and wire controller notifications."""
        self._grid().add_columns("Title", "Category", "Description", "Price")
        self._admin_table().add_columns(
            "Image", "Name", "Category", "Price", "Seller", "Action"
        )
        self.query_one("#form_error_message", Static).display = False

        router = self.controller.router
        router.on_transition(self._activate_page)
        router.on_enter(Page.BROWSE, self.render_browse_page)
        router.on_enter(Page.ADMIN, self.render_admin_page)
        router.on_enter(Page.SELL, self.reset_product_form)
        self.controller.subscribe(StateChange.CATALOG, self._on_catalog_changed)
        self.controller.subscribe(
            StateChange.SUGGESTION, self.update_generate_button
        )

        self.controller.navigate(Page.HOME)
        self.render_browse_page()

    # ── Widget lookups ───────────────────────────────────

    def _grid(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#product_grid", DataTable),
        )

    def _admin_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#admin_products_table", DataTable),
        )

    # ── Rendering ────────────────────────────────────────

    def _activate_page(self, previous: Page, target: Page) -> None:
        self.query_one("#pages", ContentSwitcher).current = target.value
        for page in Page:
            self.query_one(f"#nav_{page.value}", Button).set_class(
                page is target, "-current"
            )

    def render_browse_page(self) -> None:
        self._show_browse(self.controller.browse_view())

    def _show_browse(self, view: BrowseView) -> None:
        table = self._grid()
        table.clear()
        for card in view.cards:
            table.add_row(
                Text(card.title),
                Text(card.category),
                Text(card.summary),
                card.price_label,
                key=card.product_id,
            )

        message = self.query_one("#no_products_message", Static)
        message.update(Text(view.empty_message or ""))
        message.display = view.empty_message is not None

        self._update_category_options(view)

    def _update_category_options(self, view: BrowseView) -> None:
        """Rebuild the category selector, keeping the current choice."""
        select = cast(
            Select[str], self.query_one("#category_filter", Select)
        )
        with self.prevent(Select.Changed):
            if view.category_options != self._category_options:
                self._category_options = view.category_options
                select.set_options(list(view.category_options))
            if select.value != view.selected_category:
                select.value = view.selected_category

    def render_admin_page(self) -> None:
        view = self.controller.admin_view()
        table = self._admin_table()
        table.clear()
        for row in view.rows:
            table.add_row(
                Text(row.thumbnail_url),
                Text(row.name),
                Text(row.category),
                row.price_label,
                Text(row.seller),
                Text("Delete", style="bold red"),
                key=row.product_id,
            )
        self.query_one("#no_admin_products_message", Static).display = (
            view.show_placeholder
        )
        self.query_one("#admin_product_table_container").display = (
            view.show_table
        )

    def _on_catalog_changed(self) -> None:
        self.render_admin_page()
        self.render_browse_page()

    def update_generate_button(self) -> None:
        """Reflect the in-flight suggestion state on the trigger button."""
        button = self.query_one("#generate_description_btn", Button)
        busy = self.controller.suggestion_in_flight
        button.label = SUGGEST_BUSY_LABEL if busy else SUGGEST_LABEL
        button.disabled = busy

    # ── Form helpers ─────────────────────────────────────

    def _read_form(self) -> ListingForm:
        def value(widget_id: str) -> str:
            return self.query_one(f"#{widget_id}", Input).value

        return ListingForm(
            name=value("product_name"),
            category=value("product_category"),
            price=value("product_price"),
            description=self.query_one("#product_description", TextArea).text,
            image_url=value("product_image_url"),
            keywords=value("product_keywords"),
        )

    def _clear_form(self) -> None:
        for widget_id in _FORM_INPUT_IDS:
            self.query_one(f"#{widget_id}", Input).value = ""
        self.query_one("#product_description", TextArea).clear()
        self.clear_form_error()
        self.update_generate_button()
        self.query_one("#list_item_btn", Button).disabled = False

    def reset_product_form(self) -> None:
        self._clear_form()
        self.query_one("#product_name", Input).focus()

    def display_form_error(self, message: str) -> None:
        error = self.query_one("#form_error_message", Static)
        error.update(Text(message))
        error.display = True

    def clear_form_error(self) -> None:
        error = self.query_one("#form_error_message", Static)
        error.update("")
        error.display = False

    # ── Event handlers ───────────────────────────────────

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Translate button clicks into controller commands."""
        button_id = event.button.id or ""
        if button_id.startswith("nav_"):
            await self.action_go(button_id.removeprefix("nav_"))
        elif button_id == "home_browse_btn":
            await self.action_go(Page.BROWSE.value)
        elif button_id == "home_sell_btn":
            await self.action_go(Page.SELL.value)
        elif button_id == "list_item_btn":
            await self.submit_listing()
        elif button_id == "generate_description_btn":
            # Never exclusive: a running request must not be cancelled
            self.run_worker(self.suggest_description(), group="suggest")

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search_term":
            await self.apply_filters()

    async def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "category_filter":
            await self.apply_filters()

    async def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        product_id = event.row_key.value
        if product_id is None:
            return
        if event.data_table.id == "product_grid":
            await self.open_product_modal(product_id)
        elif event.data_table.id == "admin_products_table":
            self.request_delete(product_id)

    # ── Actions ──────────────────────────────────────────

    async def action_go(self, page: str) -> None:
        """Navigate to *page*."""
        await self.controller.dispatch(Navigate(Page.parse(page)))

    async def apply_filters(self) -> None:
        search_term = self.query_one("#search_term", Input).value
        category = self.query_one("#category_filter", Select).value
        view: BrowseView = await self.controller.dispatch(
            FilterCatalog(
                search_term=search_term,
                category=category if isinstance(category, str) else "",
            )
        )
        self._show_browse(view)

    async def submit_listing(self) -> None:
        """Validate the sell form and list the product."""
        self.clear_form_error()
        try:
            product = await self.controller.dispatch(
                SubmitListing(self._read_form())
            )
        except ValidationError as exc:
            logger.info("Listing rejected: %s", exc)
            self.display_form_error(str(exc))
            return
        self._clear_form()
        self.notify(f'Listed "{product.name}"')

    async def suggest_description(self) -> None:
        """Fill the description field with a generated draft."""
        name = self.query_one("#product_name", Input).value
        keywords = self.query_one("#product_keywords", Input).value
        self.clear_form_error()
        try:
            outcome: SuggestionOutcome = await self.controller.dispatch(
                SuggestDescription(name=name, keywords=keywords)
            )
        except ValidationError as exc:
            self.display_form_error(str(exc))
            return

        if outcome.description is not None:
            description = self.query_one("#product_description", TextArea)
            description.load_text(outcome.description)
            description.focus()
        elif outcome.error_message:
            self.display_form_error(outcome.error_message)

    async def open_product_modal(self, product_id: str) -> None:
        """Show the detail overlay, remembering where focus was."""
        view: DetailView | None = await self.controller.dispatch(
            OpenDetail(product_id)
        )
        if view is None:
            return
        self._previously_focused = self.focused
        self.push_screen(ProductDetailScreen(view), self._on_detail_closed)

    def _on_detail_closed(self, _result: None = None) -> None:
        self.controller.close_detail()
        previous = self._previously_focused
        self._previously_focused = None
        if previous is not None and previous.is_attached:
            previous.focus()

    def request_delete(self, product_id: str) -> None:
        """Ask for confirmation before deleting a listing."""
        product = self.controller.catalog.get(product_id)
        if product is None:
            self.notify("That listing no longer exists", severity="warning")
            return
        self.push_screen(
            ConfirmDeleteScreen(product.name),
            partial(self._on_delete_answered, product_id, product.name),
        )

    def _on_delete_answered(
        self, product_id: str, name: str, confirmed: bool | None
    ) -> None:
        removed = self.controller.delete_product(product_id, bool(confirmed))
        if removed:
            self.notify(f'Deleted "{name}"')
            self._admin_table().focus()
