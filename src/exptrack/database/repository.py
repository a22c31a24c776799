"""User repository on top of a two-slot key-value storage."""

import json
import logging
from typing import Optional

from exptrack.database.base import Storage, UserRepository
from exptrack.database.mappers import user_from_record, user_to_record
from exptrack.domain.entities import User
from exptrack.domain.errors import CorruptStoreError

logger = logging.getLogger(__name__)

USERS_KEY = "expenseTrackerUsers"
CURRENT_USER_KEY = "expenseTrackerCurrentUser"


class KeyValueUserRepository(UserRepository):
    """Keeps every user in one JSON blob and the session username in another slot."""

    def __init__(self, storage: Storage):
        """Initialize repository.

        Args:
            storage: Storage instance holding both slots
        """
        self.storage = storage

    def load_all(self) -> dict[str, User]:
        """Return all registered users keyed by username.

        A missing blob and an unreadable blob both read as an empty store.
        """
        raw = self.storage.get_item(USERS_KEY)
        if not raw:
            return {}

        try:
            return self._decode(raw)
        except CorruptStoreError as e:
            logger.warning("Discarding unreadable user store: %s", e)
            return {}

    def save_all(self, users: dict[str, User]) -> None:
        """Replace the entire user collection in a single write."""
        payload = {username: user_to_record(user) for username, user in users.items()}
        self.storage.set_item(USERS_KEY, json.dumps(payload))
        logger.debug("Saved %d user record(s)", len(payload))

    def get_current_session(self) -> Optional[str]:
        """Return the username of the active session, if any."""
        return self.storage.get_item(CURRENT_USER_KEY) or None

    def set_current_session(self, username: str) -> None:
        """Mark username as the active session."""
        self.storage.set_item(CURRENT_USER_KEY, username)

    def clear_current_session(self) -> None:
        """Forget the active session."""
        self.storage.remove_item(CURRENT_USER_KEY)

    @staticmethod
    def _decode(raw: str) -> dict[str, User]:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(f"Invalid JSON: {e}")

        if not isinstance(payload, dict):
            raise CorruptStoreError(f"Expected an object, got {type(payload).__name__}")

        return {
            username: user_from_record(record, username=username)
            for username, record in payload.items()
        }
