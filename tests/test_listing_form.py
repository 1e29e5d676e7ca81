# tests/test_listing_form.py

"""Tests for ListingFormController submission and suggestion flows."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from src.filters.listing_validator import ListingForm
from src.models.commands import Page
from src.models.errors import (
    AuthenticationError,
    ConfigurationError,
    EmptyResponseError,
    SuggestionErrorKind,
    TransientError,
    ValidationError,
)
from src.models.view_state import ViewState
from src.services.listing_form import (
    IN_FLIGHT_MESSAGE,
    MISSING_SUGGESTION_INPUT_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    RETRY_MESSAGE,
    ListingFormController,
)
from src.services.view_router import ViewRouter
from src.storage.catalog_store import CatalogStore
from src.storage.seed_catalog import seed_products


def _lamp_form(**overrides: str) -> ListingForm:
    fields = {
        "name": "Desk Lamp",
        "category": "Home Goods",
        "price": "39.99",
        "description": "A lamp.",
    }
    fields.update(overrides)
    return ListingForm(**fields)


class _FormTestCase(unittest.IsolatedAsyncioTestCase):
    """Common fixture: seeded catalog, router and a mock client."""

    def setUp(self) -> None:
        self.catalog = CatalogStore(seed_products())
        self.view = ViewState()
        self.router = ViewRouter(self.view)
        self.client = MagicMock()
        self.client.suggest = AsyncMock(return_value="Generated text.")
        self.busy_states: list[bool] = []
        self.form = ListingFormController(
            self.catalog,
            self.router,
            self.client,
            on_suggestion_state=self.busy_states.append,
        )


class TestSubmit(_FormTestCase):
    """ListingFormController.submit."""

    def test_valid_listing_becomes_catalog_head(self) -> None:
        before = len(self.catalog)
        product = self.form.submit(_lamp_form())

        self.assertEqual(len(self.catalog), before + 1)
        head = self.catalog.list()[0]
        self.assertIs(head, product)
        self.assertEqual(head.name, "Desk Lamp")
        self.assertEqual(head.category, "Home Goods")
        self.assertEqual(head.price, 39.99)
        self.assertEqual(head.description, "A lamp.")
        self.assertTrue(head.id)
        self.assertEqual(head.seller, "CurrentUser")

    def test_blank_image_gets_placeholder_keyed_by_id(self) -> None:
        product = self.form.submit(_lamp_form())
        self.assertEqual(
            product.image_url,
            f"https://picsum.photos/seed/{product.id}/400/300",
        )

    def test_given_image_and_keywords_kept(self) -> None:
        product = self.form.submit(
            _lamp_form(image_url="https://img/l.png", keywords=" brass ")
        )
        self.assertEqual(product.image_url, "https://img/l.png")
        self.assertEqual(product.keywords, "brass")

    def test_ids_are_unique(self) -> None:
        first = self.form.submit(_lamp_form())
        second = self.form.submit(_lamp_form())
        self.assertNotEqual(first.id, second.id)

    def test_submit_navigates_to_browse(self) -> None:
        self.form.submit(_lamp_form())
        self.assertEqual(self.view.current_page, Page.BROWSE)

    def test_invalid_price_leaves_catalog_unchanged(self) -> None:
        for price in ("-5", "abc"):
            with self.subTest(price=price):
                before = self.catalog.list()
                with self.assertRaises(ValidationError) as ctx:
                    self.form.submit(_lamp_form(price=price))
                self.assertIn("price", ctx.exception.fields)
                self.assertIn("Price", str(ctx.exception))
                self.assertEqual(self.catalog.list(), before)
                self.assertEqual(self.view.current_page, Page.HOME)


class TestSuggest(_FormTestCase):
    """ListingFormController.suggest."""

    async def test_success_returns_description(self) -> None:
        outcome = await self.form.suggest("Desk Lamp", "brass")
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.description, "Generated text.")
        self.client.suggest.assert_awaited_once_with("Desk Lamp", "brass")

    async def test_blank_inputs_do_not_call_client(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            await self.form.suggest("  ", "")
        self.assertEqual(str(ctx.exception), MISSING_SUGGESTION_INPUT_MESSAGE)
        self.client.suggest.assert_not_awaited()
        self.assertEqual(self.busy_states, [])

    async def test_keywords_only_uses_fallback_name(self) -> None:
        await self.form.suggest("", "brass, vintage")
        self.client.suggest.assert_awaited_once_with(
            "this item", "brass, vintage"
        )

    async def test_in_flight_toggles_around_call(self) -> None:
        seen: list[bool] = []

        async def _spy(name: str, keywords: str) -> str:
            seen.append(self.view.suggestion_in_flight)
            return "ok"

        self.client.suggest = _spy
        await self.form.suggest("Desk Lamp", "")
        self.assertEqual(seen, [True])
        self.assertFalse(self.view.suggestion_in_flight)
        self.assertEqual(self.busy_states, [True, False])

    async def test_configuration_and_auth_map_to_support_message(self) -> None:
        for error in (ConfigurationError("no key"), AuthenticationError("bad")):
            with self.subTest(error=type(error).__name__):
                self.client.suggest = AsyncMock(side_effect=error)
                outcome = await self.form.suggest("Desk Lamp", "")
                self.assertFalse(outcome.ok)
                self.assertEqual(outcome.error_message, NOT_CONFIGURED_MESSAGE)
                self.assertFalse(self.view.suggestion_in_flight)

    async def test_other_failures_map_to_retry_message(self) -> None:
        for error in (
            EmptyResponseError("empty"),
            TransientError("timeout"),
            RuntimeError("boom"),
        ):
            with self.subTest(error=type(error).__name__):
                self.client.suggest = AsyncMock(side_effect=error)
                outcome = await self.form.suggest("Desk Lamp", "")
                self.assertEqual(outcome.error_message, RETRY_MESSAGE)
                self.assertFalse(self.view.suggestion_in_flight)

    async def test_missing_client_is_not_configured(self) -> None:
        form = ListingFormController(self.catalog, self.router, None)
        outcome = await form.suggest("Desk Lamp", "")
        self.assertEqual(outcome.error_message, NOT_CONFIGURED_MESSAGE)
        self.assertEqual(outcome.error_kind, SuggestionErrorKind.CONFIGURATION)

    async def test_second_request_rejected_while_in_flight(self) -> None:
        self.view.suggestion_in_flight = True
        outcome = await self.form.suggest("Desk Lamp", "")
        self.assertEqual(outcome.error_message, IN_FLIGHT_MESSAGE)
        self.client.suggest.assert_not_awaited()
        self.assertTrue(self.view.suggestion_in_flight)

    async def test_suggestion_never_mutates_catalog(self) -> None:
        before = self.catalog.list()
        await self.form.suggest("Desk Lamp", "")
        self.client.suggest = AsyncMock(side_effect=TransientError("x"))
        await self.form.suggest("Desk Lamp", "")
        self.assertEqual(self.catalog.list(), before)


if __name__ == "__main__":
    unittest.main()
