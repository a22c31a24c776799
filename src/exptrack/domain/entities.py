"""Domain model entities for exptrack.

These are pure data classes representing business concepts, independent of
how they are persisted. The repository maps them to and from the stored
JSON blob, so the business logic stays stable if the storage substrate
changes.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import uuid4


def new_expense_id() -> str:
    """Return a fresh, collision-resistant expense ID."""
    return uuid4().hex


@dataclass(frozen=True)
class Expense:
    """Single expense logged against a date and hour of day."""

    id: str
    date: date
    hour: int
    amount: Decimal
    description: str
    notes: str = ""


@dataclass(frozen=True)
class User:
    """Registered user together with their ledger."""

    username: str
    password: str
    expenses: tuple[Expense, ...] = field(default_factory=tuple)
    balance: Decimal = Decimal("0")

    def find_expense(self, expense_id: str) -> Optional[Expense]:
        """Return the expense with the given ID, if present."""
        for expense in self.expenses:
            if expense.id == expense_id:
                return expense
        return None


@dataclass(frozen=True)
class CategoryTotal:
    """Total spent in one category for a period."""

    category: str
    total: Decimal
