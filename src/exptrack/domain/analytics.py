"""Analytics over a user's expenses.

Every function here is pure: it takes a collection of expenses plus the
period to look at and derives totals from them. Nothing is cached or
persisted, so results always reflect the expenses passed in.
"""

import calendar
from decimal import Decimal
from typing import Iterable

from exptrack.domain.entities import CategoryTotal, Expense
from exptrack.domain.errors import ValidationError

OTHER_CATEGORY = "Other"
TOP_CATEGORY_LIMIT = 5

ZERO = Decimal("0")


def normalize_category(description: str) -> str:
    """Map a free-text description to its category key."""
    return description.strip().casefold()


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, leap years included."""
    _require_month(month)
    return calendar.monthrange(year, month)[1]


def expenses_in_month(expenses: Iterable[Expense], year: int, month: int) -> list[Expense]:
    """Expenses dated within the given month, in their original order."""
    _require_month(month)
    return [e for e in expenses if e.date.year == year and e.date.month == month]


def yearly_totals(expenses: Iterable[Expense], year: int) -> list[Decimal]:
    """Total per calendar month of a year.

    Returns:
        Twelve totals, index 0 for January through 11 for December.
        Months without expenses are zero.
    """
    totals = [ZERO] * 12
    for expense in expenses:
        if expense.date.year == year:
            totals[expense.date.month - 1] += expense.amount
    return totals


def daily_totals(expenses: Iterable[Expense], year: int, month: int) -> list[Decimal]:
    """Total per day of a month.

    Returns:
        One total per day of the month, index 0 for the 1st.
    """
    totals = [ZERO] * days_in_month(year, month)
    for expense in expenses_in_month(expenses, year, month):
        totals[expense.date.day - 1] += expense.amount
    return totals


def category_totals(expenses: Iterable[Expense]) -> dict[str, Decimal]:
    """Sum amounts by normalized category, in first-seen order."""
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        category = normalize_category(expense.description)
        totals[category] = totals.get(category, ZERO) + expense.amount
    return totals


def category_breakdown(
    expenses: Iterable[Expense],
    year: int,
    month: int,
    limit: int = TOP_CATEGORY_LIMIT,
) -> list[CategoryTotal]:
    """Largest categories of a month.

    Categories are ordered by total, largest first. Equal totals keep the
    order in which the categories first appear among the expenses. When
    there are more than ``limit`` categories, the rest are summed into a
    single trailing "Other" entry.

    Args:
        expenses: Expenses to aggregate
        year: Year to look at
        month: Month to look at, 1-12
        limit: Number of named categories to keep

    Returns:
        List of category totals; empty when the month has no expenses
    """
    totals = category_totals(expenses_in_month(expenses, year, month))
    # sorted() is stable, so ties stay in first-seen order
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    breakdown = [CategoryTotal(category=name, total=total) for name, total in ranked]

    if len(breakdown) <= limit:
        return breakdown

    rest = sum((entry.total for entry in breakdown[limit:]), ZERO)
    return breakdown[:limit] + [CategoryTotal(category=OTHER_CATEGORY, total=rest)]


def _require_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValidationError("month", f"must be between 1 and 12, got {month}")
