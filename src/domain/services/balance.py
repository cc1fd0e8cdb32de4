"""Domain services for balance and forecast aggregation."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    BalanceSummary,
    SkippedRecord,
    Transaction,
    TransactionType,
    TypeTotals,
)
from src.domain.services.dates import DEFAULT_CODEC, DateCodec
from src.utils.decimal_utils import coerce_decimal


def signed_amount(transaction: Transaction) -> Decimal:
    """Return the amount signed by transaction type."""
    amount = coerce_decimal(transaction.amount)
    if transaction.type == TransactionType.EXPENSE:
        return -amount
    return amount


def summarize_balance(
    transactions: Iterable[Transaction],
    as_of: date,
    period_end: date,
    *,
    codec: DateCodec = DEFAULT_CODEC,
    logger: Logger | None = None,
) -> BalanceSummary:
    """Compute balance and forecast in a single pass.

    Transactions dated up to ``as_of`` make up the balance. The forecast adds
    transactions dated after ``as_of`` and up to ``period_end``. Transactions
    whose date does not parse are left out of both sums and reported in
    ``skipped``.

    Args:
        transactions: Ledger snapshot, occurrences included.
        as_of: Reference date treated as today.
        period_end: Last date included in the forecast.
        codec: Codec used to read transaction dates.
        logger: Optional logger for skipped transactions.

    Returns:
        BalanceSummary: Balance, forecast, and skipped records.
    """
    balance = Decimal("0")
    upcoming = Decimal("0")
    skipped: list[SkippedRecord] = []
    for transaction in transactions:
        transaction_date = codec.try_parse(transaction.date)
        if transaction_date is None:
            skipped.append(
                SkippedRecord(
                    transaction_id=transaction.id,
                    description=transaction.description,
                    reason=f"Unparseable date: {transaction.date!r}",
                )
            )
            continue
        if transaction_date <= as_of:
            balance += signed_amount(transaction)
        elif transaction_date <= period_end:
            upcoming += signed_amount(transaction)

    if skipped and logger is not None:
        logger.warning(
            f"Excluded {len(skipped)} transactions with unparseable dates "
            f"from balance computation"
        )
    return BalanceSummary(
        balance=balance,
        forecast=balance + upcoming,
        as_of=as_of,
        period_end=period_end,
        skipped=skipped,
    )


def compute_balance(
    transactions: Iterable[Transaction],
    as_of: date,
    *,
    codec: DateCodec = DEFAULT_CODEC,
) -> Decimal:
    """Return the signed sum of transactions dated up to ``as_of``."""
    return summarize_balance(transactions, as_of, as_of, codec=codec).balance


def compute_forecast(
    transactions: Iterable[Transaction],
    as_of: date,
    period_end: date,
    *,
    codec: DateCodec = DEFAULT_CODEC,
) -> Decimal:
    """Return the balance at ``as_of`` plus movements up to ``period_end``."""
    return summarize_balance(
        transactions,
        as_of,
        period_end,
        codec=codec,
    ).forecast


def compute_type_totals(transactions: Iterable[Transaction]) -> TypeTotals:
    """Return unsigned expense and income totals."""
    expense = Decimal("0")
    income = Decimal("0")
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.type == TransactionType.EXPENSE:
            expense += amount
        else:
            income += amount
    return TypeTotals(expense=expense, income=income)


__all__ = [
    "signed_amount",
    "summarize_balance",
    "compute_balance",
    "compute_forecast",
    "compute_type_totals",
]
