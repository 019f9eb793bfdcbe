"""
main.py
-------
Command-line entry point for the LightBnB data access layer.

Commands:
    init-db    Create the schema in the configured database.
    search     Run a property search and print the result as JSON.
"""

import argparse
import json

from config import DEFAULT_SEARCH_LIMIT
from db.connection import Database
from db.init_db import create_tables
from services.search_service import SearchService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Define the CLI commands and their options."""
    parser = argparse.ArgumentParser(prog="lightbnb", description="LightBnB data access tools")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="create tables if missing")

    search = commands.add_parser("search", help="search properties")
    search.add_argument("--city")
    search.add_argument("--minimum-price-per-night", type=float)
    search.add_argument("--maximum-price-per-night", type=float)
    search.add_argument("--owner-id", type=int)
    search.add_argument("--minimum-rating", type=float)
    search.add_argument("--limit", type=int, default=DEFAULT_SEARCH_LIMIT)
    return parser


def main(argv=None) -> None:
    """Parse arguments and run the requested command."""
    args = build_parser().parse_args(argv)

    with Database() as db:
        if args.command == "init-db":
            create_tables(db)
            return

        query = {
            "city": args.city,
            "minimum_price_per_night": args.minimum_price_per_night,
            "maximum_price_per_night": args.maximum_price_per_night,
            "owner_id": args.owner_id,
            "minimum_rating": args.minimum_rating,
        }
        result = SearchService(db).search_properties(query, args.limit)
        logger.info(f"Found {len(result['properties'])} properties")
        print(json.dumps(result, indent=2, default=str))


if __name__ == "__main__":
    main()
