"""Amount parsing utilities."""

import math
from decimal import Decimal

# Decoration stripped from amount cells before parsing: peso sign and
# thousands separators.
CURRENCY_DECORATIONS = ("₱", ",")


def parse_amount(amount_str: str) -> float:
    """Parse an amount string into a float.

    Handles formats such as:
    - "123.45"
    - "-500"
    - "₱1,000.00"
    - "-₱1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Finite float amount

    Raises:
        ValueError: If amount string cannot be parsed to a finite number
    """
    if amount_str is None or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str
    for decoration in CURRENCY_DECORATIONS:
        cleaned = cleaned.replace(decoration, "")
    cleaned = cleaned.strip()

    # float() would accept digit grouping such as "1_000"
    if "_" in cleaned:
        raise ValueError(f"Could not parse amount '{amount_str}': underscores are not allowed")

    try:
        amount = float(cleaned)
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not math.isfinite(amount):
        raise ValueError(f"Amount '{amount_str}' is not a finite number")
    return amount


def format_amount(amount: float) -> str:
    """Render an amount at full precision without trailing zeros.

    Uses the shortest representation that round-trips, written out without
    an exponent: 100.0 -> "100", -0.004 -> "-0.004", 1e16 -> "10000000000000000".
    """
    text = format(Decimal(repr(float(amount))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
