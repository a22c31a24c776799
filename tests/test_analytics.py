"""Tests for the analytics functions."""

import pytest
from datetime import date
from decimal import Decimal

from exptrack.domain.analytics import (
    OTHER_CATEGORY,
    category_breakdown,
    category_totals,
    daily_totals,
    days_in_month,
    expenses_in_month,
    normalize_category,
    yearly_totals,
)
from exptrack.domain.entities import CategoryTotal, Expense
from exptrack.domain.errors import ValidationError


def _expense(day: str, amount, description="Coffee", hour=9, expense_id=None):
    return Expense(
        id=expense_id or f"{day}-{description}-{amount}",
        date=date.fromisoformat(day),
        hour=hour,
        amount=Decimal(str(amount)),
        description=description,
    )


class TestNormalizeCategory:
    """Tests for normalize_category."""

    @pytest.mark.parametrize(
        "description, expected",
        [("Coffee", "coffee"), ("  COFFEE ", "coffee"), ("Straße", "strasse"), ("", "")],
    )
    def test_normalize(self, description, expected):
        assert normalize_category(description) == expected


class TestDaysInMonth:
    """Tests for days_in_month."""

    @pytest.mark.parametrize(
        "year, month, expected",
        [(2024, 2, 29), (2023, 2, 28), (1900, 2, 28), (2000, 2, 29), (2024, 4, 30), (2024, 12, 31)],
    )
    def test_days(self, year, month, expected):
        assert days_in_month(year, month) == expected

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(ValidationError):
            days_in_month(2024, month)


class TestYearlyTotals:
    """Tests for yearly_totals."""

    def test_sums_per_month(self):
        expenses = [
            _expense("2024-01-15", 10),
            _expense("2024-01-31", 5),
            _expense("2024-12-01", 7),
            _expense("2023-01-15", 1000),
        ]

        totals = yearly_totals(expenses, 2024)

        assert len(totals) == 12
        assert totals[0] == Decimal("15")
        assert totals[11] == Decimal("7")
        assert all(total == 0 for total in totals[1:11])

    def test_empty(self):
        assert yearly_totals([], 2024) == [Decimal("0")] * 12

    def test_zero_and_negative_amounts(self):
        """Stored data with non-positive amounts is summed without complaint."""
        expenses = [_expense("2024-05-01", 0), _expense("2024-05-02", -3), _expense("2024-05-03", 10)]
        assert yearly_totals(expenses, 2024)[4] == Decimal("7")


class TestDailyTotals:
    """Tests for daily_totals."""

    def test_scenario(self):
        expenses = [
            _expense("2024-03-05", 50, "Coffee", hour=9),
            _expense("2024-03-05", 200, "Lunch", hour=13),
        ]

        totals = daily_totals(expenses, 2024, 3)

        assert len(totals) == 31
        assert totals[4] == Decimal("250")
        assert sum(totals) == Decimal("250")

    @pytest.mark.parametrize("year, expected", [(2024, 29), (2023, 28)])
    def test_february_length(self, year, expected):
        assert len(daily_totals([], year, 2)) == expected

    def test_filters_year_and_month(self):
        expenses = [
            _expense("2024-02-29", 4),
            _expense("2024-03-01", 8),
            _expense("2023-02-01", 16),
        ]

        totals = daily_totals(expenses, 2024, 2)

        assert totals[28] == Decimal("4")
        assert sum(totals) == Decimal("4")

    def test_invalid_month(self):
        with pytest.raises(ValidationError):
            daily_totals([], 2024, 13)


class TestCategoryBreakdown:
    """Tests for category_breakdown."""

    def test_groups_by_normalized_description(self):
        expenses = [
            _expense("2024-03-01", 5, "Coffee"),
            _expense("2024-03-02", 7, "  coffee "),
            _expense("2024-03-03", 3, "Tea"),
        ]

        assert category_breakdown(expenses, 2024, 3) == [
            CategoryTotal("coffee", Decimal("12")),
            CategoryTotal("tea", Decimal("3")),
        ]

    def test_collapses_beyond_top_five(self):
        totals = [("rent", 50), ("food", 40), ("fuel", 30), ("gym", 20), ("books", 10), ("gum", 5)]
        expenses = [_expense("2024-03-10", amount, name) for name, amount in reversed(totals)]

        breakdown = category_breakdown(expenses, 2024, 3)

        assert len(breakdown) == 6
        assert [entry.category for entry in breakdown[:5]] == ["rent", "food", "fuel", "gym", "books"]
        assert breakdown[5] == CategoryTotal(OTHER_CATEGORY, Decimal("5"))

    def test_other_sums_every_excluded_category(self):
        amounts = [100, 90, 80, 70, 60, 3, 2, 1]
        expenses = [_expense("2024-03-10", amount, f"cat{i}") for i, amount in enumerate(amounts)]

        breakdown = category_breakdown(expenses, 2024, 3)

        assert len(breakdown) == 6
        assert breakdown[-1] == CategoryTotal(OTHER_CATEGORY, Decimal("6"))
        assert sum(entry.total for entry in breakdown) == sum(Decimal(a) for a in amounts)

    def test_exactly_five_categories_has_no_other(self):
        expenses = [_expense("2024-03-10", i + 1, f"cat{i}") for i in range(5)]
        breakdown = category_breakdown(expenses, 2024, 3)

        assert len(breakdown) == 5
        assert OTHER_CATEGORY not in [entry.category for entry in breakdown]

    def test_ties_keep_first_seen_order(self):
        expenses = [
            _expense("2024-03-01", 10, "Zebra"),
            _expense("2024-03-02", 10, "Apple"),
            _expense("2024-03-03", 20, "Mango"),
            _expense("2024-03-04", 10, "Kiwi"),
        ]

        breakdown = category_breakdown(expenses, 2024, 3)

        assert [entry.category for entry in breakdown] == ["mango", "zebra", "apple", "kiwi"]

    def test_restricted_to_month(self):
        expenses = [
            _expense("2024-03-01", 10, "Coffee"),
            _expense("2024-04-01", 99, "Rent"),
            _expense("2023-03-01", 99, "Rent"),
        ]
        assert category_breakdown(expenses, 2024, 3) == [CategoryTotal("coffee", Decimal("10"))]

    def test_empty(self):
        assert category_breakdown([], 2024, 3) == []
        assert category_breakdown([_expense("2024-04-01", 5)], 2024, 3) == []

    def test_custom_limit(self):
        expenses = [_expense("2024-03-10", i + 1, f"cat{i}") for i in range(4)]
        breakdown = category_breakdown(expenses, 2024, 3, limit=2)

        assert [entry.category for entry in breakdown] == ["cat3", "cat2", OTHER_CATEGORY]
        assert breakdown[-1].total == Decimal("3")


def test_category_totals_first_seen_order():
    expenses = [_expense("2024-03-01", 1, "B"), _expense("2024-03-01", 2, "a"), _expense("2024-03-01", 3, "b")]
    assert list(category_totals(expenses).items()) == [("b", Decimal("4")), ("a", Decimal("2"))]


def test_expenses_in_month_keeps_order():
    first = _expense("2024-03-09", 1, "x")
    second = _expense("2024-03-01", 2, "y")
    assert expenses_in_month([first, _expense("2024-04-01", 3), second], 2024, 3) == [first, second]
