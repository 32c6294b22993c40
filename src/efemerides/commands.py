"""One-shot subcommands.

Provides ``fetch`` to print the efeméride of a date and ``favoritos`` to
print the saved favorites, most recent first.
"""

import argparse
import asyncio
from datetime import date

from .api import EfemeridesClient, FetchError
from .cli import render_favorites
from .config import config_from_env
from .dates import format_display_date, parse_user_date
from .favorites import FavoritesStore
from .logging import configure_logger
from .storage import PreferencesStore


def cmd_fetch(args: argparse.Namespace) -> int:
    """Print the efeméride of a date."""
    config = config_from_env()
    json_logger = configure_logger(config.log_dir)

    try:
        day = parse_user_date(args.date) if args.date else date.today()
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    client = EfemeridesClient(config.api_url, timeout=config.http_timeout, json_logger=json_logger)
    try:
        event = asyncio.run(client.fetch(day))
    except FetchError as e:
        print(e.message)
        return 1

    print(f"{event.titulo}")
    print(f"Fecha: {format_display_date(day)}")
    print()
    print(event.evento)
    return 0


def cmd_favorites(args: argparse.Namespace) -> int:
    """Print saved favorites in display order."""
    config = config_from_env()
    json_logger = configure_logger(config.log_dir)

    store = FavoritesStore(PreferencesStore(config.preferences_path), json_logger=json_logger)
    store.load()
    print(render_favorites(store.sorted_items()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for subcommands."""
    parser = argparse.ArgumentParser(
        prog="efemerides",
        description="Efemérides del día",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_parser = subparsers.add_parser("fetch", help="Print the efeméride of a date")
    fetch_parser.add_argument(
        "date", nargs="?", help="D/M/YYYY or YYYY-MM-DD (default: today)"
    )
    fetch_parser.set_defaults(func=cmd_fetch)

    fav_parser = subparsers.add_parser("favoritos", help="List saved favorites")
    fav_parser.set_defaults(func=cmd_favorites)

    return parser


def run_command(argv: list[str]) -> int:
    """Parse argv and run the selected subcommand."""
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)
