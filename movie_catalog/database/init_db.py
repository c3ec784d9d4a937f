"""
Database initialization and schema creation.
"""

import logging

from sqlalchemy import inspect

from movie_catalog.database.connection import DatabaseManager, DEFAULT_DB_PATH, get_db_manager

logger = logging.getLogger(__name__)


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.warning("Resetting database at %s (dropping all tables)", db_manager.db_path)
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.db_path)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that the movies table exists with the expected columns.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if the schema is complete, False otherwise
    """
    inspector = inspect(db_manager.engine)
    if 'movies' not in inspector.get_table_names():
        logger.error("Missing table: movies")
        return False

    columns = {column['name'] for column in inspector.get_columns('movies')}
    missing = {'id', 'Movie_Name', 'Description', 'Casting'} - columns
    if missing:
        logger.error("Table movies is missing columns: %s", sorted(missing))
        return False

    return True
