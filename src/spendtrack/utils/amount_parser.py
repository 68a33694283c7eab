"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥\s]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Accepts "45.50", "$45.50", "-12", "1,234.56" and "(12.00)" for negatives.
    Negative amounts are returned as-is; the ledger treats them as refunds.

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()
    negate = cleaned.startswith("(") and cleaned.endswith(")")
    if negate:
        cleaned = cleaned[1:-1]
    cleaned = _CURRENCY_SYMBOLS.sub("", cleaned).replace(",", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{amount_str}'")
    return -amount if negate else amount


def parse_amount_or_default(amount_str: Optional[str], default: Decimal = Decimal("0")) -> Decimal:
    """Parse an amount, falling back to default when it is missing or invalid."""
    if amount_str is None:
        return default
    try:
        return parse_amount(amount_str)
    except ValueError:
        return default
