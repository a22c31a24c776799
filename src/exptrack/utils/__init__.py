"""Utility functions for exptrack."""

from exptrack.utils.date_parser import parse_date
from exptrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
