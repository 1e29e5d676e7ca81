# main.py

"""Entry point for the bazaar marketplace (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging

logger = logging.getLogger("bazaar.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bazaar",
        description="Community marketplace demo.",
        epilog="Run without arguments to launch the interactive TUI.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_catalog",
        help="Print the demo catalog and exit.",
    )
    mode.add_argument(
        "--suggest",
        default=None,
        metavar="NAME",
        help="Draft a description for a product name and exit.",
    )
    parser.add_argument(
        "-k",
        "--keywords",
        default="",
        help="Keywords to guide --suggest.",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Search term applied to --list.",
    )
    parser.add_argument(
        "--category",
        default="",
        help="Exact category applied to --list.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format for --list (default: table).",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import BazaarApp

    try:
        app = BazaarApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("bazaar TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print the catalog and exit."""
    from src.cli.runner import list_catalog

    sys.exit(
        list_catalog(
            search_term=args.search,
            category=args.category,
            output_format=args.output_format,
        )
    )


def _run_suggest(args: argparse.Namespace) -> None:
    """Draft a description and exit."""
    from src.cli.runner import cli_suggest

    sys.exit(asyncio.run(cli_suggest(args.suggest, args.keywords)))


def main() -> None:
    """Route to the TUI (no args) or a headless command."""
    log_file = setup_logging()
    logger.info("bazaar starting, log file: %s", log_file)

    args = _build_parser().parse_args()

    if args.list_catalog:
        _run_list(args)
    elif args.suggest is not None:
        _run_suggest(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()
