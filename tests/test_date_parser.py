"""Tests for date parsing utilities."""

import pytest
from datetime import date, timedelta

from exptrack.utils.date_parser import parse_date, parse_iso_date


class TestParseDate:
    """Tests for parse_date."""

    def test_iso_date(self):
        assert parse_date("2024-03-05") == date(2024, 3, 5)

    def test_written_date(self):
        assert parse_date("March 5, 2024") == date(2024, 3, 5)

    def test_relative_dates(self):
        today = date.today()
        assert parse_date("today") == today
        assert parse_date("Yesterday") == today - timedelta(days=1)
        assert parse_date(" tomorrow ") == today + timedelta(days=1)

    def test_invalid_date(self):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date("not a date")


class TestParseIsoDate:
    """Tests for parse_iso_date."""

    def test_valid(self):
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["2023-02-29", "2024-3-5", "20240305", "05/03/2024", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_iso_date(value)
