# src/ui/screens.py

"""Modal screens: product detail overlay and delete confirmation."""

import logging

from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from src.ui.renderers import DetailView

logger = logging.getLogger("bazaar.ui")

CONTACT_SELLER_MESSAGE = (
    "Contact seller functionality is a placeholder and not implemented."
)


class ProductDetailScreen(ModalScreen[None]):
    """Full details of one listing."""

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, view: DetailView) -> None:
        super().__init__()
        self.detail = view

    def compose(self) -> ComposeResult:
        view = self.detail
        yield Vertical(
            Static(Text(view.title, style="bold"), id="modal_title"),
            Static(
                Text(view.image_url, style=Style(link=view.image_url)),
                id="modal_image",
            ),
            Static(Text(view.description), id="modal_description"),
            Static(
                Text(view.price_label, style="bold green"),
                id="modal_price",
            ),
            Static(Text(view.seller_label), id="modal_seller"),
            Static(Text(view.category_label), id="modal_category"),
            Horizontal(
                Button(
                    "Contact Seller",
                    variant="primary",
                    id="modal_contact_seller_btn",
                ),
                Button("Close", id="modal_close_btn"),
                id="modal_actions",
            ),
            id="modal_content",
        )

    def on_mount(self) -> None:
        self.query_one("#modal_close_btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "modal_close_btn":
            self.dismiss(None)
        elif event.button.id == "modal_contact_seller_btn":
            self.notify(CONTACT_SELLER_MESSAGE)

    def action_close(self) -> None:
        self.dismiss(None)


class ConfirmDeleteScreen(ModalScreen[bool]):
    """Ask before a listing is deleted; dismisses with the answer."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, product_name: str) -> None:
        super().__init__()
        self.product_name = product_name

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static(
                Text(
                    f'Are you sure you want to delete "{self.product_name}"?'
                    " This action cannot be undone."
                ),
                id="confirm_message",
            ),
            Horizontal(
                Button("Delete", variant="error", id="confirm_delete_btn"),
                Button("Cancel", id="cancel_delete_btn"),
                id="confirm_actions",
            ),
            id="confirm_dialog",
        )

    def on_mount(self) -> None:
        self.query_one("#cancel_delete_btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        confirmed = event.button.id == "confirm_delete_btn"
        logger.debug(
            "Delete of '%s' %s",
            self.product_name,
            "confirmed" if confirmed else "declined",
        )
        self.dismiss(confirmed)

    def action_cancel(self) -> None:
        self.dismiss(False)
