"""Factory functions for creating storage and repository instances."""

import os
from pathlib import Path
from typing import Optional

from exptrack.database.base import Storage
from exptrack.database.repository import KeyValueUserRepository
from exptrack.database.sqlalchemy_db import SQLAlchemyStorage


def create_sqlite_storage(database_path: Optional[str] = None) -> SQLAlchemyStorage:
    """Create a SQLite-backed storage instance.

    Args:
        database_path: Path to SQLite database file. If None, checks EXPTRACK_DB_PATH
            environment variable, then defaults to ~/.exptrack/exptrack.db

    Returns:
        SQLAlchemyStorage instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("EXPTRACK_DB_PATH")

    if database_path is None:
        home = Path.home()
        db_dir = home / ".exptrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "exptrack.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyStorage(database_url)


def create_user_repository(storage: Storage) -> KeyValueUserRepository:
    """Create the user repository over an already connected storage."""
    return KeyValueUserRepository(storage)
