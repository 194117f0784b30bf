# main.py

"""Entry point for the catalog_admin application (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("catalog_admin.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="catalog_admin",
        description="Product catalog client for the demo REST API.",
        epilog=f"API: {Settings.API_BASE_URL}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search query. Omit (with no other options) to launch the TUI.",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=None,
        help="Listing/search page to print, 1-based.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Only list products in this category.",
    )
    parser.add_argument(
        "--categories",
        action="store_true",
        default=False,
        help="Print the available category slugs.",
    )
    parser.add_argument(
        "--product",
        type=int,
        default=None,
        dest="product_id",
        help="Print a single product by id.",
    )
    parser.add_argument(
        "--login",
        default=None,
        dest="username",
        metavar="USERNAME",
        help="Log in and save the session.",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password for --login (prompted when omitted).",
    )
    parser.add_argument(
        "--logout",
        action="store_true",
        default=False,
        help="Forget the saved session.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Run a connectivity health check on the catalog API.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import CatalogApp

    try:
        app = CatalogApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("catalog_admin TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Dispatch a headless command and exit with its code."""
    from src.cli import runner

    page = args.page or 1
    if args.username is not None:
        exit_code = runner.run_login(args.username, args.password)
    elif args.logout:
        exit_code = runner.run_logout()
    elif args.categories:
        exit_code = runner.run_categories(args.output_format)
    elif args.product_id is not None:
        exit_code = runner.run_show(args.product_id, args.output_format)
    elif args.query is not None:
        exit_code = runner.run_search(args.query, page, args.output_format)
    else:
        exit_code = runner.run_list(
            page, args.output_format, category=args.category
        )
    sys.exit(exit_code)


def _run_health_check() -> None:
    """Run catalog API connectivity health check."""
    from src.cli.runner import run_health_check

    exit_code = asyncio.run(run_health_check())
    sys.exit(exit_code)


def _wants_cli(args: argparse.Namespace) -> bool:
    return any(
        (
            args.query is not None,
            args.page is not None,
            args.category is not None,
            args.categories,
            args.product_id is not None,
            args.username is not None,
            args.logout,
        )
    )


def main() -> None:
    """Route to TUI (no args) or a headless CLI command."""
    log_file = setup_logging()
    logger.info("catalog_admin starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.health:
        _run_health_check()
    elif _wants_cli(args):
        _run_cli(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()
