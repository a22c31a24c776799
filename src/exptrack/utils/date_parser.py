"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2024-03-05"
    - Other absolute dates understood by dateutil: "March 5, 2024", "5 Mar 2024"
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return parse_iso_date(date_str)
    except ValueError:
        pass

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_iso_date(date_str: str) -> date:
    """Parse a strict YYYY-MM-DD string.

    This is the format expenses are stored in, so nothing looser is accepted.

    Raises:
        ValueError: If the string is not a valid calendar date in that format
    """
    if len(date_str) != 10 or date_str[4] != "-" or date_str[7] != "-":
        raise ValueError(f"Expected YYYY-MM-DD, got '{date_str}'")
    return date.fromisoformat(date_str)
