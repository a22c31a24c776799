"""Abstract storage and repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from exptrack.domain.entities import User


class Storage(ABC):
    """Flat string key-value substrate.

    Every call is a synchronous, point-in-time read or write. There are no
    transactions and no protection against concurrent writers.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the backing store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the backing store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Prepare the backing store (create tables if needed)."""
        pass

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing a missing key is a no-op."""
        pass


class UserRepository(ABC):
    """Persistence contract for user records and the session pointer.

    Callers read the whole collection, change it in memory and write the
    whole collection back. Last write wins.
    """

    @abstractmethod
    def load_all(self) -> dict[str, User]:
        """Return all registered users keyed by username.

        Never raises for unreadable data; a corrupt store reads as empty.
        """
        pass

    @abstractmethod
    def save_all(self, users: dict[str, User]) -> None:
        """Replace the entire user collection in a single write."""
        pass

    @abstractmethod
    def get_current_session(self) -> Optional[str]:
        """Return the username of the active session, if any."""
        pass

    @abstractmethod
    def set_current_session(self, username: str) -> None:
        """Mark username as the active session."""
        pass

    @abstractmethod
    def clear_current_session(self) -> None:
        """Forget the active session."""
        pass

    def get_user(self, username: str) -> Optional[User]:
        """Get a single user by username."""
        return self.load_all().get(username)
