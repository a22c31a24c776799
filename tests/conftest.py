"""Shared pytest fixtures for exptrack tests."""

import tempfile
import os
import pytest

from exptrack.database.factories import create_sqlite_storage, create_user_repository
from exptrack.database import InMemoryStorage
from exptrack.database.repository import KeyValueUserRepository
from exptrack.domain.account import AccountService
from exptrack.domain.ledger import LedgerService


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite-backed storage for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    # Cleanup
    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def repository(temp_storage):
    """Create a user repository on the temporary storage."""
    return create_user_repository(temp_storage)


@pytest.fixture
def memory_repository():
    """Create a user repository backed by a plain dict."""
    return KeyValueUserRepository(InMemoryStorage())


@pytest.fixture
def account_service(repository):
    """Create an AccountService with a temporary database."""
    return AccountService(repository)


@pytest.fixture
def ledger_service(repository):
    """Create a LedgerService with a temporary database."""
    return LedgerService(repository)


@pytest.fixture
def sample_user(account_service):
    """Register a sample user, which also starts a session for them."""
    return account_service.register("alice", "secret")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
