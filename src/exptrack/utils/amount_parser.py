"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Union

AmountInput = Union[Decimal, int, float, str]


def parse_amount(value: AmountInput) -> Decimal:
    """Parse an amount into a finite Decimal.

    Accepts Decimal, int and float values as well as strings such as:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Floats are converted through their string form so that 0.1 stays 0.1.

    Args:
        value: Amount to parse

    Returns:
        Decimal amount

    Raises:
        ValueError: If the value is empty, not numeric, NaN or infinite
    """
    if isinstance(value, bool):
        raise ValueError(f"Could not parse amount {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        amount = _parse_amount_string(value)
    else:
        raise ValueError(f"Could not parse amount {value!r}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{value}'")
    return amount


def _parse_amount_string(amount_str: str) -> Decimal:
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Parentheses mean negative
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥₹]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount
