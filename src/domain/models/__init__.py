"""Domain models package."""

from .finance import (
    BalanceSummary,
    CategoryGroup,
    CategoryReport,
    CategoryShare,
    MaterializationFailure,
    SkippedRecord,
    TypeTotals,
)
from .transactions import Period, Transaction, TransactionType

__all__ = [
    "Transaction",
    "TransactionType",
    "Period",
    "BalanceSummary",
    "CategoryGroup",
    "CategoryReport",
    "CategoryShare",
    "MaterializationFailure",
    "SkippedRecord",
    "TypeTotals",
]
