#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

This script:
1. Creates the database schema (the movies table)
2. Optionally imports movies from an .xlsx workbook
3. Verifies the schema

Usage:
    # Create tables if missing
    python scripts/init_database.py

    # Drop and recreate, then seed from a workbook
    python scripts/init_database.py --reset --import data/movies.xlsx

    # Keep rows imported before a failing row
    python scripts/init_database.py --import data/movies.xlsx --no-atomic
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.api.config import get_database_path, get_import_atomic
from movie_catalog.core.importer import SpreadsheetError, import_spreadsheet
from movie_catalog.database import crud, init_database, verify_schema
from movie_catalog.utils import configure_script_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the movie catalog database")
    parser.add_argument("--db-path", default=get_database_path(), help="SQLite database file")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate all tables")
    parser.add_argument("--import", dest="import_file", metavar="FILE",
                        help="Seed movies from the first sheet of an .xlsx workbook")
    parser.add_argument("--no-atomic", dest="atomic", action="store_false",
                        default=get_import_atomic(),
                        help="Commit each imported row immediately")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_script_logging(debug=args.debug)

    db_manager = init_database(db_path=args.db_path, reset=args.reset)

    if args.import_file:
        try:
            with db_manager.session_scope() as session:
                created = import_spreadsheet(session, args.import_file, atomic=args.atomic)
        except (crud.MovieValidationError, SpreadsheetError) as e:
            logger.error("Import failed: %s", e)
            return 1
        logger.info("Imported %d movies from %s", len(created), args.import_file)

    if not verify_schema(db_manager):
        logger.error("Database initialization failed")
        return 1

    with db_manager.session_scope() as session:
        logger.info("Database ready: %d movies", crud.get_movie_count(session))
    return 0


if __name__ == "__main__":
    sys.exit(main())
