"""
Command-line interface for the movie catalog.

Provides commands for:
- setup: Check and create required tables
- seed: Insert the sample catalog
- status: Show current database status
- serve: Run the REST API
"""

import argparse
from typing import Optional

import uvicorn

from .config import Config
from .database import DatabaseManager
from .errors import CatalogError
from .utils import format_number, print_header, print_status_table


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands."""
    parser = argparse.ArgumentParser(
        prog="movie_catalog",
        description="Movie Catalog - manage the catalog database and run the REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Setup (run first)
  python -m movie_catalog setup

  # Load the sample movies
  python -m movie_catalog seed

  # Check status
  python -m movie_catalog status

  # Run the API on port 9000
  python -m movie_catalog serve --port 9000
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "setup",
        help="Check for missing tables and create them",
    )

    seed_parser = subparsers.add_parser(
        "seed",
        help="Insert the sample catalog (skipped when data exists)",
    )
    seed_parser.add_argument(
        "--force",
        action="store_true",
        help="Seed even if the catalog already has data",
    )

    subparsers.add_parser(
        "status",
        help="Show current database status",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Create tables and run the REST API",
    )
    serve_parser.add_argument("--host", help="Bind address (default: API_HOST)")
    serve_parser.add_argument("--port", type=int, help="Port (default: API_PORT)")
    serve_parser.add_argument(
        "--seed",
        action="store_true",
        help="Seed the sample catalog before starting",
    )

    return parser


def cmd_setup(db: DatabaseManager) -> int:
    """Create missing tables."""
    print_header("SETUP")
    result = db.check_and_create_tables()
    if result["created"]:
        print(f"Created tables: {', '.join(result['created'])}")
    else:
        print("All tables already exist.")
    return 0


def cmd_seed(db: DatabaseManager, args: argparse.Namespace) -> int:
    """Seed sample data."""
    db.create_tables()
    if db.seed(force=args.force):
        print("Sample catalog inserted.")
    else:
        print("Catalog already has data; use --force to seed anyway.")
    return 0


def cmd_status(db: DatabaseManager) -> int:
    """Print row counts."""
    print_header("CATALOG STATUS")
    missing = db.get_missing_tables()
    if missing:
        print(f"Missing tables: {', '.join(missing)} (run 'setup')")
        return 1
    counts = {table: format_number(count) for table, count in db.get_status().items()}
    print_status_table(counts, title="Rows")
    return 0


def cmd_serve(db: DatabaseManager, config: Config, args: argparse.Namespace) -> int:
    """Run the API with uvicorn."""
    db.create_tables()
    if args.seed or config.seed_on_startup:
        db.seed()

    uvicorn.run(
        "api.main:app",
        host=args.host or config.api_host,
        port=args.port or config.api_port,
        reload=config.api_debug,
    )
    return 0


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}")
        print("\nSet DATABASE_URL, or SQL_USER and SQL_DB (with SQL_HOST/SQL_PORT/SQL_PASS),")
        print("or leave them unset to use the SQLite file from SQLITE_PATH.")
        return 1

    db = DatabaseManager(config)

    try:
        if parsed_args.command == "setup":
            return cmd_setup(db)
        elif parsed_args.command == "seed":
            return cmd_seed(db, parsed_args)
        elif parsed_args.command == "status":
            return cmd_status(db)
        elif parsed_args.command == "serve":
            return cmd_serve(db, config, parsed_args)
    except CatalogError as e:
        print(f"Error: {e.message}")
        return 1

    parser.print_help()
    return 1
