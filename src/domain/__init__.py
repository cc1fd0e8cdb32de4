"""Domain package for ledger rules and core models."""

from .constants import (
    ALL_CATEGORIES_LABEL,
    DEFAULT_MAX_OCCURRENCES,
    RECURRENCE_MARKER,
    SYNTHETIC_TRANSACTION_ID,
)
from .errors import (
    ConfigurationMismatch,
    DivisionUndefined,
    InvalidDateFormat,
    InvalidTransactionInput,
    LedgerError,
)
from .models import (
    BalanceSummary,
    CategoryGroup,
    CategoryReport,
    CategoryShare,
    MaterializationFailure,
    Period,
    SkippedRecord,
    Transaction,
    TransactionType,
    TypeTotals,
)
from .policies import contains_marker, ensure_unique_description
from .services import (
    advance,
    compute_balance,
    compute_forecast,
    compute_shares,
    expand_template,
    format_date,
    group_all,
    group_one,
    parse_date,
)

__all__ = [
    "ALL_CATEGORIES_LABEL",
    "DEFAULT_MAX_OCCURRENCES",
    "RECURRENCE_MARKER",
    "SYNTHETIC_TRANSACTION_ID",
    "LedgerError",
    "InvalidDateFormat",
    "DivisionUndefined",
    "ConfigurationMismatch",
    "InvalidTransactionInput",
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
    "contains_marker",
    "ensure_unique_description",
    "advance",
    "compute_balance",
    "compute_forecast",
    "compute_shares",
    "expand_template",
    "format_date",
    "group_all",
    "group_one",
    "parse_date",
]
