"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only catch ValueError.
    """


class ValidationError(DomainError):
    """Invalid input at a service entry point."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ExpenseNotFoundError(NotFoundError):
    """No expense with the given ID in the user's ledger."""

    def __init__(self, expense_id: str):
        self.expense_id = expense_id
        super().__init__(expense_not_found(expense_id))


class UserNotFoundError(NotFoundError):
    """The user behind a session handle is no longer stored."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(user_not_found(username))


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DuplicateUsernameError(ConflictError):
    """Registration attempted with a username that is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(duplicate_username(username))


class AuthenticationError(DomainError):
    """Login could not be completed."""


class InvalidCredentialsError(AuthenticationError):
    """Unknown username or wrong password."""

    def __init__(self):
        super().__init__("Invalid username or password")


class CorruptStoreError(DomainError):
    """Persisted user data could not be decoded.

    Raised inside the repository only; it is recovered there as an empty store.
    """


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense '{expense_id}' not found"


def user_not_found(username: str) -> str:
    """Return message for missing user."""
    return f"User '{username}' not found"


def duplicate_username(username: str) -> str:
    """Return message for a taken username."""
    return f"Username '{username}' already exists"
