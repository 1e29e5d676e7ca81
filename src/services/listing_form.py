# src/services/listing_form.py

"""Sell-form behaviour: listing submission and description suggestions."""

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from src.config.settings import Settings
from src.filters.listing_validator import ListingForm, ListingValidator
from src.models.commands import Page
from src.models.errors import (
    SuggestionError,
    SuggestionErrorKind,
    ValidationError,
)
from src.models.product import Product, placeholder_image_url
from src.services.description_client import DescriptionSuggestionClient
from src.services.view_router import ViewRouter
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("bazaar.form")

MISSING_SUGGESTION_INPUT_MESSAGE = (
    "Please enter product name or keywords to generate a description "
    "suggestion."
)
NOT_CONFIGURED_MESSAGE = (
    "Description suggestion service is not configured correctly or API "
    "key is missing. Please contact support."
)
RETRY_MESSAGE = (
    "Failed to suggest description. Please try again or write your own."
)
IN_FLIGHT_MESSAGE = "A description suggestion is already in progress."

_NOT_CONFIGURED_KINDS = (
    SuggestionErrorKind.CONFIGURATION,
    SuggestionErrorKind.AUTHENTICATION,
)


@dataclass(frozen=True)
class SuggestionOutcome:
    """Result of a suggestion request as the form should present it."""

    description: str | None = None
    error_message: str | None = None
    error_kind: SuggestionErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.description is not None


def new_product_id() -> str:
    return uuid.uuid4().hex


class ListingFormController:
    """Validate and submit listings, and run the suggestion flow."""

    def __init__(
        self,
        catalog: CatalogStore,
        router: ViewRouter,
        client: DescriptionSuggestionClient | None = None,
        on_suggestion_state: Callable[[bool], None] | None = None,
    ) -> None:
        self.catalog = catalog
        self.router = router
        self.client = client
        self._on_suggestion_state = on_suggestion_state

    @property
    def suggestion_in_flight(self) -> bool:
        return self.router.view.suggestion_in_flight

    def submit(self, form: ListingForm) -> Product:
        """Add the listing to the catalog and switch to browsing.

        Raises:
            ValidationError: one or more fields are invalid; the
                catalog is left unchanged.
        """
        listing = ListingValidator.validate(form)
        product_id = new_product_id()
        product = Product(
            id=product_id,
            name=listing.name,
            description=listing.description,
            price=listing.price,
            seller=Settings.PLACEHOLDER_SELLER,
            image_url=listing.image_url
            or placeholder_image_url(product_id),
            category=listing.category,
            keywords=listing.keywords,
        )
        self.catalog.add(product)
        self.router.navigate(Page.BROWSE)
        return product

    def _set_in_flight(self, value: bool) -> None:
        self.router.view.suggestion_in_flight = value
        if self._on_suggestion_state is not None:
            self._on_suggestion_state(value)

    async def suggest(self, name: str, keywords: str) -> SuggestionOutcome:
        """Ask for a description draft for the current form values.

        Raises:
            ValidationError: both *name* and *keywords* are blank; the
                client is not called.
        """
        name = name.strip()
        keywords = keywords.strip()
        if not name and not keywords:
            raise ValidationError(
                {"name": "Name", "keywords": "Keywords"},
                MISSING_SUGGESTION_INPUT_MESSAGE,
            )
        if self.suggestion_in_flight:
            logger.warning("Suggestion requested while one is in flight")
            return SuggestionOutcome(error_message=IN_FLIGHT_MESSAGE)

        self._set_in_flight(True)
        try:
            if self.client is None:
                logger.error("Suggestion requested but no client is set up")
                return SuggestionOutcome(
                    error_message=NOT_CONFIGURED_MESSAGE,
                    error_kind=SuggestionErrorKind.CONFIGURATION,
                )
            description = await self.client.suggest(
                name or Settings.SUGGESTION_FALLBACK_NAME, keywords
            )
            return SuggestionOutcome(description=description)
        except SuggestionError as exc:
            logger.error(
                "Description suggestion failed (%s): %s",
                exc.kind.value,
                exc,
            )
            if exc.kind in _NOT_CONFIGURED_KINDS:
                message = NOT_CONFIGURED_MESSAGE
            else:
                message = RETRY_MESSAGE
            return SuggestionOutcome(error_message=message, error_kind=exc.kind)
        except Exception:
            logger.error("Unexpected suggestion failure", exc_info=True)
            return SuggestionOutcome(
                error_message=RETRY_MESSAGE,
                error_kind=SuggestionErrorKind.TRANSIENT,
            )
        finally:
            self._set_in_flight(False)
