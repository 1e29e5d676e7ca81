# tests/test_product_model.py

"""Tests for the Product dataclass and its helpers."""

import unittest

from src.models.product import Product, format_price, placeholder_image_url


def _make_product(**overrides: object) -> Product:
    fields: dict[str, object] = {
        "id": "42",
        "name": "Desk Lamp",
        "description": "A lamp.",
        "price": 39.99,
        "seller": "CurrentUser",
    }
    fields.update(overrides)
    return Product(**fields)  # type: ignore[arg-type]


class TestProductModel(unittest.TestCase):
    """Product dataclass unit tests."""

    def test_defaults(self) -> None:
        """Optional fields default to empty strings."""
        product = _make_product()
        self.assertEqual(product.image_url, "")
        self.assertEqual(product.category, "")
        self.assertEqual(product.keywords, "")

    def test_price_label(self) -> None:
        """Prices render with the currency symbol and two decimals."""
        self.assertEqual(_make_product(price=120).price_label, "R 120.00")
        self.assertEqual(format_price(39.999), "R 40.00")

    def test_display_image_prefers_own_url(self) -> None:
        """An explicit image URL is used as-is."""
        product = _make_product(image_url="https://img.example/a.png")
        self.assertEqual(
            product.display_image_url(), "https://img.example/a.png"
        )

    def test_display_image_falls_back_to_placeholder(self) -> None:
        """Without an image the placeholder is keyed by product id."""
        product = _make_product()
        self.assertEqual(
            product.display_image_url(),
            "https://picsum.photos/seed/42/400/300",
        )
        self.assertEqual(
            product.display_image_url(50, 50),
            "https://picsum.photos/seed/42/50/50",
        )

    def test_placeholder_is_deterministic(self) -> None:
        """The same seed always yields the same URL."""
        self.assertEqual(
            placeholder_image_url("abc"), placeholder_image_url("abc")
        )
        self.assertNotEqual(
            placeholder_image_url("abc"), placeholder_image_url("abd")
        )

    def test_summary_short_description_unchanged(self) -> None:
        """Descriptions within the limit are not truncated."""
        self.assertEqual(_make_product().summary(), "A lamp.")

    def test_summary_truncates_long_description(self) -> None:
        """Long descriptions are cut at 60 characters plus an ellipsis."""
        product = _make_product(description="x" * 61)
        self.assertEqual(product.summary(), "x" * 60 + "...")

    def test_summary_exact_limit_unchanged(self) -> None:
        """A description of exactly the limit keeps its full text."""
        product = _make_product(description="y" * 60)
        self.assertEqual(product.summary(), "y" * 60)


if __name__ == "__main__":
    unittest.main()
