# src/cli/runner.py

"""Headless CLI: list the demo catalog or draft a description."""

import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.models.errors import SuggestionErrorKind, ValidationError
from src.models.product import Product
from src.services.description_client import DescriptionSuggestionClient
from src.services.marketplace_controller import MarketplaceController

logger = logging.getLogger("bazaar.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOT_CONFIGURED = 2


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "name": p.name,
            "category": p.category,
            "price": p.price,
            "seller": p.seller,
            "description": p.description,
            "image_url": p.display_image_url(),
            "keywords": p.keywords,
        }
        for p in products
    ]


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Seller")
    table.add_column("Description", max_width=60, style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            escape(p.name),
            escape(p.category),
            p.price_label,
            escape(p.seller),
            escape(p.summary()),
        )

    Console().print(table)


def list_catalog(
    search_term: str = "",
    category: str = "",
    output_format: str = "table",
    controller: MarketplaceController | None = None,
) -> int:
    """Print the (filtered) catalog and return an exit code."""
    controller = controller or MarketplaceController()
    view = controller.filter_catalog(search_term, category)
    shown = {card.product_id for card in view.cards}
    products = [p for p in controller.catalog.list() if p.id in shown]

    if view.empty_message:
        _err.print(f"[yellow]{escape(view.empty_message)}[/yellow]")

    if output_format == "json":
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    elif products:
        _print_table(products)

    return EXIT_OK


async def cli_suggest(
    name: str,
    keywords: str = "",
    controller: MarketplaceController | None = None,
) -> int:
    """Print a drafted description for *name* / *keywords*.

    Exit codes: 0 on success, 2 when the service is not configured or
    the key is rejected, 1 for any other failure.
    """
    controller = controller or MarketplaceController(
        client=DescriptionSuggestionClient()
    )
    _err.print(f"[bold]Suggesting description for:[/bold] {escape(name)}")
    try:
        outcome = await controller.suggest_description(name, keywords)
    except ValidationError as exc:
        _err.print(f"[red]{escape(str(exc))}[/red]")
        return EXIT_FAILED

    if outcome.description is not None:
        sys.stdout.write(outcome.description + "\n")
        return EXIT_OK

    _err.print(f"[red]{escape(outcome.error_message or '')}[/red]")
    if outcome.error_kind in (
        SuggestionErrorKind.CONFIGURATION,
        SuggestionErrorKind.AUTHENTICATION,
    ):
        return EXIT_NOT_CONFIGURED
    return EXIT_FAILED
