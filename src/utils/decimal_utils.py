"""Helpers for Decimal normalization of ledger amounts."""

from decimal import Decimal, InvalidOperation

_GROUP_SEPARATORS = (" ", "\u00a0", "\u202f")


def coerce_decimal(value) -> Decimal:
    """Normalize stored numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters. Floats go through
            their shortest repr so 12.1 stays 12.1.

    Returns:
        Decimal: Normalized numeric value, zero for None.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_amount(value) -> Decimal:
    """Parse an amount typed by a user.

    Accepts numbers and strings written either way, "1234.5" or
    "1 234,50".

    Args:
        value: Number or text.

    Returns:
        Decimal: Parsed amount.

    Raises:
        InvalidOperation: When the text is not a number.
    """
    if isinstance(value, (int, float, Decimal)):
        return coerce_decimal(value)
    text = str(value).strip()
    for separator in _GROUP_SEPARATORS:
        text = text.replace(separator, "")
    if text.count(",") == 1 and "." not in text:
        text = text.replace(",", ".")
    if not text:
        raise InvalidOperation(f"Empty amount: {value!r}")
    return Decimal(text)


__all__ = ["coerce_decimal", "parse_amount"]
