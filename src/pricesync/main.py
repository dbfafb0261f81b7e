#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pricesync.app import initialise_database
from pricesync.config import (
    ConfigurationError,
    configure_logging,
    get_reverse_sync_config,
    get_scheduler_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pricesync", description="Reverse price synchronisation tooling"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subcommands = parser.add_subparsers(dest="command", required=True)

    init_db = subcommands.add_parser("init-db", help="Create or upgrade the database schema")
    init_db.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy URI to initialise (default: DATABASE_URI or the data dir)",
    )

    subcommands.add_parser("show-config", help="Print the effective reverse sync configuration")
    return parser.parse_args(list(argv))


def _show_config() -> None:
    sync_config = get_reverse_sync_config()
    scheduler_config = get_scheduler_config()
    print(f"integration_type: {sync_config.integration_type}")
    print(f"connector_type: {sync_config.connector_type}")
    print(f"processor_alias: {sync_config.processor_alias}")
    print(f"max_pending_jobs: {scheduler_config.max_pending_jobs}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "init-db":
            uri = initialise_database(database_uri=parsed_args.database_uri)
            print(f"Database initialised: {uri}")
        else:
            _show_config()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
