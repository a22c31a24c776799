"""Mapper functions to convert between domain entities and stored records.

Stored records are the plain dicts that live inside the JSON users blob.
Fields missing from older records fall back to defaults instead of failing,
so records written before a field existed still load.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from exptrack.domain import entities as domain
from exptrack.domain.entities import new_expense_id
from exptrack.domain.errors import CorruptStoreError
from exptrack.utils.date_parser import parse_iso_date


def expense_to_record(expense: domain.Expense) -> dict[str, Any]:
    """Convert an Expense entity to a stored record."""
    return {
        "id": expense.id,
        "date": expense.date.isoformat(),
        "hour": expense.hour,
        "amount": str(expense.amount),
        "description": expense.description,
        "notes": expense.notes,
    }


def expense_from_record(record: Any) -> domain.Expense:
    """Convert a stored record to an Expense entity.

    Raises:
        CorruptStoreError: If the record cannot be interpreted
    """
    if not isinstance(record, dict):
        raise CorruptStoreError(f"Expense record must be an object, got {type(record).__name__}")

    try:
        return domain.Expense(
            id=str(record.get("id") or new_expense_id()),
            date=parse_iso_date(str(record["date"])),
            hour=int(record.get("hour", 0)),
            amount=_decimal(record.get("amount", 0)),
            description=str(record.get("description") or ""),
            notes=str(record.get("notes") or ""),
        )
    except (KeyError, TypeError, ValueError, InvalidOperation) as e:
        raise CorruptStoreError(f"Unreadable expense record: {e!r}")


def user_to_record(user: domain.User) -> dict[str, Any]:
    """Convert a User entity to a stored record."""
    return {
        "username": user.username,
        "password": user.password,
        "expenses": [expense_to_record(expense) for expense in user.expenses],
        "balance": str(user.balance),
    }


def user_from_record(record: Any, username: Optional[str] = None) -> domain.User:
    """Convert a stored record to a User entity.

    Args:
        record: Stored user record
        username: Key the record was stored under; takes precedence over
            the record's own username field

    Raises:
        CorruptStoreError: If the record cannot be interpreted
    """
    if not isinstance(record, dict):
        raise CorruptStoreError(f"User record must be an object, got {type(record).__name__}")

    expenses = record.get("expenses") or []
    if not isinstance(expenses, list):
        raise CorruptStoreError("User expenses must be a list")

    try:
        balance = _decimal(record.get("balance", 0))
    except (TypeError, ValueError, InvalidOperation) as e:
        raise CorruptStoreError(f"Unreadable balance: {e!r}")

    return domain.User(
        # The mapping key is the primary key; the inner field is only a fallback
        username=username or str(record.get("username") or ""),
        password=str(record.get("password") or ""),
        expenses=tuple(expense_from_record(item) for item in expenses),
        balance=balance,
    )


def _decimal(value: Any) -> Decimal:
    # bool is an int subclass and has no meaning as an amount
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a number: {value!r}")
    amount = Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return amount
