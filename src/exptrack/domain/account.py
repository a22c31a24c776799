"""Account and session domain service."""

import logging
from typing import Optional

from exptrack.database.base import UserRepository
from exptrack.domain.entities import User
from exptrack.domain.errors import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Service for registering users and managing the current session."""

    def __init__(self, repository: UserRepository):
        """Initialize account service.

        Args:
            repository: User repository instance
        """
        self.repository = repository

    def register(self, username: str, password: str) -> User:
        """Register a new user and start a session for them.

        Args:
            username: Desired username
            password: Password, stored as given

        Returns:
            The new user, with no expenses and a zero balance

        Raises:
            ValidationError: If username or password is blank
            DuplicateUsernameError: If the username is already taken
        """
        _require_credentials(username, password)

        users = self.repository.load_all()
        if username in users:
            raise DuplicateUsernameError(username)

        user = User(username=username, password=password)
        users[username] = user
        self.repository.save_all(users)
        self.repository.set_current_session(username)
        logger.info("Registered user '%s'", username)
        return user

    def login(self, username: str, password: str) -> User:
        """Log a user in.

        Args:
            username: Username
            password: Password, compared by plain equality

        Returns:
            The stored user

        Raises:
            ValidationError: If username or password is blank
            InvalidCredentialsError: If the user does not exist or the password differs
        """
        _require_credentials(username, password)

        user = self.repository.get_user(username)
        if user is None or user.password != password:
            logger.info("Rejected login for '%s'", username)
            raise InvalidCredentialsError()

        self.repository.set_current_session(username)
        logger.info("User '%s' logged in", username)
        return user

    def logout(self) -> None:
        """End the current session. User records are left untouched."""
        self.repository.clear_current_session()

    def resume_session(self) -> Optional[User]:
        """Return the user of the stored session, if it still resolves.

        A session pointing at a user that no longer exists reads as no session.
        """
        username = self.repository.get_current_session()
        if username is None:
            return None

        user = self.repository.get_user(username)
        if user is None:
            logger.debug("Session points at unknown user '%s'", username)
        return user

    def get_user(self, username: str) -> Optional[User]:
        """Get user by username."""
        return self.repository.get_user(username)


def _require_credentials(username: str, password: str) -> None:
    if not username or not username.strip():
        raise ValidationError("username", "must not be empty")
    if not password or not password.strip():
        raise ValidationError("password", "must not be empty")
