"""Helpers shared by the command-line adapters."""

from datetime import date
from decimal import Decimal
import os


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def resolve_as_of(logger) -> date:
    """Return LEDGER_AS_OF when set and valid, otherwise today."""
    return parse_date(os.getenv("LEDGER_AS_OF"), logger) or date.today()


def format_amount(amount: Decimal) -> str:
    """Render an amount with two decimals and the euro sign."""
    return f"{amount:.2f} €"


__all__ = ["parse_date", "resolve_as_of", "format_amount"]
