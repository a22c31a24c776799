"""Persistence layer for exptrack."""

from exptrack.database.base import Storage, UserRepository
from exptrack.database.factories import create_sqlite_storage, create_user_repository
from exptrack.database.memory import InMemoryStorage
from exptrack.database.repository import KeyValueUserRepository

__all__ = [
    "Storage",
    "UserRepository",
    "InMemoryStorage",
    "KeyValueUserRepository",
    "create_sqlite_storage",
    "create_user_repository",
]
