"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse a price or amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "123,45" (decimal comma)
    - "1 200 000" (space as thousands separator)
    - "150000 UZS", "150 000 сум"
    - "$123.45"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if amount_str is None or not str(amount_str).strip():
        raise ValueError("Empty amount string")

    amount_str = str(amount_str).strip()

    # Remove currency markers
    amount_str = re.sub(r"(?i)(uzs|сум|sum|[$€£¥])", "", amount_str)

    # Remove thousands separators (plain and non-breaking spaces)
    amount_str = re.sub(r"\s", "", amount_str)

    # A single comma with no dot is a decimal comma; otherwise commas group thousands
    if "," in amount_str and "." not in amount_str and amount_str.count(",") == 1:
        amount_str = amount_str.replace(",", ".")
    else:
        amount_str = amount_str.replace(",", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount


def parse_quantity(quantity_str: str) -> int:
    """Parse a stock quantity into an int.

    Raises:
        ValueError: If the string is not a whole number
    """
    if quantity_str is None or not str(quantity_str).strip():
        raise ValueError("Empty quantity string")
    try:
        return int(str(quantity_str).strip())
    except ValueError:
        raise ValueError(f"Could not parse quantity '{quantity_str}'")
