"""Ledger domain service: expense lifecycle and balance reconciliation."""

import logging
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Union

from exptrack.database.base import UserRepository
from exptrack.domain.entities import Expense, User, new_expense_id
from exptrack.domain.errors import ExpenseNotFoundError, UserNotFoundError, ValidationError
from exptrack.utils.amount_parser import AmountInput, parse_amount
from exptrack.utils.date_parser import parse_iso_date

logger = logging.getLogger(__name__)

DateInput = Union[date, str]


class LedgerService:
    """Service for managing a user's expenses and balance.

    Every mutation re-reads the user's stored record, applies the change and
    writes the full collection back before returning the updated user. The
    balance moves by exactly the amount an operation adds, changes or removes.
    """

    def __init__(self, repository: UserRepository):
        """Initialize ledger service.

        Args:
            repository: User repository instance
        """
        self.repository = repository

    def add_expense(
        self,
        user: User,
        date: DateInput,
        hour: int,
        amount: AmountInput,
        description: str,
        notes: str = "",
    ) -> User:
        """Log a new expense and deduct it from the balance.

        Args:
            user: Session user
            date: Expense date (date or "YYYY-MM-DD")
            hour: Hour of day, 0-23
            amount: Positive amount
            description: Label, also used as the category
            notes: Optional free text

        Returns:
            Updated user

        Raises:
            ValidationError: If any field is invalid
            UserNotFoundError: If the user is no longer stored
        """
        expense = Expense(
            id=new_expense_id(),
            date=_validate_date(date),
            hour=_validate_hour(hour),
            amount=_validate_amount(amount),
            description=_validate_description(description),
            notes=notes or "",
        )

        users, current = self._load(user)
        updated = replace(
            current,
            expenses=current.expenses + (expense,),
            balance=current.balance - expense.amount,
        )
        self._save(users, updated)
        logger.debug("Added expense %s (%s) for '%s'", expense.id, expense.amount, updated.username)
        return updated

    def update_expense(
        self,
        user: User,
        expense_id: str,
        date: DateInput,
        hour: int,
        amount: AmountInput,
        description: str,
        notes: str = "",
    ) -> User:
        """Replace the fields of an existing expense.

        The balance moves by the difference between the new and old amount.
        The expense keeps its ID and its position in the ledger.

        Returns:
            Updated user

        Raises:
            ValidationError: If any field is invalid
            ExpenseNotFoundError: If no expense has the given ID
            UserNotFoundError: If the user is no longer stored
        """
        new_date = _validate_date(date)
        new_hour = _validate_hour(hour)
        new_amount = _validate_amount(amount)
        new_description = _validate_description(description)

        users, current = self._load(user)
        original = current.find_expense(expense_id)
        if original is None:
            raise ExpenseNotFoundError(expense_id)

        edited = replace(
            original,
            date=new_date,
            hour=new_hour,
            amount=new_amount,
            description=new_description,
            notes=notes or "",
        )
        expenses = tuple(edited if e.id == expense_id else e for e in current.expenses)
        updated = replace(
            current,
            expenses=expenses,
            balance=current.balance - (new_amount - original.amount),
        )
        self._save(users, updated)
        logger.debug("Updated expense %s for '%s'", expense_id, updated.username)
        return updated

    def delete_expense(self, user: User, expense_id: str) -> User:
        """Remove an expense and credit its amount back to the balance.

        Returns:
            Updated user

        Raises:
            ExpenseNotFoundError: If no expense has the given ID (nothing is written)
            UserNotFoundError: If the user is no longer stored
        """
        users, current = self._load(user)
        removed = current.find_expense(expense_id)
        if removed is None:
            raise ExpenseNotFoundError(expense_id)

        updated = replace(
            current,
            expenses=tuple(e for e in current.expenses if e.id != expense_id),
            balance=current.balance + removed.amount,
        )
        self._save(users, updated)
        logger.debug("Deleted expense %s for '%s'", expense_id, updated.username)
        return updated

    def set_balance(self, user: User, balance: AmountInput) -> User:
        """Overwrite the balance with an arbitrary value.

        Later expense mutations apply their deltas on top of this value.

        Raises:
            ValidationError: If balance is not a finite number
            UserNotFoundError: If the user is no longer stored
        """
        try:
            new_balance = parse_amount(balance)
        except ValueError:
            raise ValidationError("balance", "must be a number")

        users, current = self._load(user)
        updated = replace(current, balance=new_balance)
        self._save(users, updated)
        logger.debug("Balance for '%s' set to %s", updated.username, new_balance)
        return updated

    def get_expense(self, user: User, expense_id: str) -> Expense:
        """Get a single expense.

        Raises:
            ExpenseNotFoundError: If no expense has the given ID
        """
        _, current = self._load(user)
        expense = current.find_expense(expense_id)
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        return expense

    def expenses_for_day(self, user: User, day: DateInput) -> list[Expense]:
        """List expenses on a date, ordered by hour.

        Expenses in the same hour keep the order they were logged in.
        """
        target = _validate_date(day)
        _, current = self._load(user)
        return sorted(
            (e for e in current.expenses if e.date == target),
            key=lambda e: e.hour,
        )

    def total_for_day(self, user: User, day: DateInput) -> Decimal:
        """Sum of expense amounts on a date."""
        return sum((e.amount for e in self.expenses_for_day(user, day)), Decimal("0"))

    def _load(self, user: User) -> tuple[dict[str, User], User]:
        users = self.repository.load_all()
        current = users.get(user.username)
        if current is None:
            raise UserNotFoundError(user.username)
        return users, current

    def _save(self, users: dict[str, User], updated: User) -> None:
        users[updated.username] = updated
        self.repository.save_all(users)


def _validate_date(value: DateInput) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip())
        except ValueError:
            raise ValidationError("date", f"expected YYYY-MM-DD, got '{value}'")
    raise ValidationError("date", f"expected a date, got {type(value).__name__}")


def _validate_hour(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("hour", "must be a whole number")
    if not 0 <= value <= 23:
        raise ValidationError("hour", f"must be between 0 and 23, got {value}")
    return value


def _validate_amount(value: AmountInput) -> Decimal:
    try:
        amount = parse_amount(value)
    except ValueError:
        raise ValidationError("amount", "must be a number")
    if amount <= 0:
        raise ValidationError("amount", "must be greater than zero")
    return amount


def _validate_description(value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("description", "must not be empty")
    return value
