"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from src.domain.models.transactions import Transaction


@dataclass(frozen=True)
class SkippedRecord:
    """A transaction excluded from an aggregation.

    Attributes:
        transaction_id: Identifier of the excluded transaction.
        description: Description of the excluded transaction.
        reason: Human readable exclusion reason.
    """

    transaction_id: int
    description: str
    reason: str


@dataclass(frozen=True)
class MaterializationFailure:
    """A template whose expansion was aborted."""

    template_id: int
    description: str
    reason: str


@dataclass(frozen=True)
class BalanceSummary:
    """Historical balance and forecast around a reference date.

    Attributes:
        balance: Signed sum of transactions dated up to as_of.
        forecast: Balance plus transactions dated after as_of up to period_end.
        as_of: Reference date treated as today.
        period_end: Last date included in the forecast.
        skipped: Transactions excluded because their date did not parse.
        failures: Templates that could not be expanded.
    """

    balance: Decimal
    forecast: Decimal
    as_of: date
    period_end: date
    skipped: list[SkippedRecord] = field(default_factory=list)
    failures: list[MaterializationFailure] = field(default_factory=list)

    @property
    def upcoming(self) -> Decimal:
        """Return the signed amount expected between as_of and period_end."""
        return self.forecast - self.balance


@dataclass(frozen=True)
class TypeTotals:
    """Expense and income totals of a transaction set."""

    expense: Decimal
    income: Decimal

    @property
    def difference(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryGroup:
    """Transactions sharing a category or a type within one category."""

    label: str
    transactions: list[Transaction]

    @property
    def subtotal(self) -> Decimal:
        """Return the unsigned sum of the group amounts."""
        return sum(
            (transaction.amount for transaction in self.transactions),
            Decimal("0"),
        )


@dataclass(frozen=True)
class CategoryShare:
    """Subtotal of a group and its fraction of the overall total."""

    label: str
    subtotal: Decimal
    fraction: Decimal

    @property
    def percent(self) -> Decimal:
        """Return the share as a whole percentage."""
        return (self.fraction * 100).quantize(
            Decimal("1"),
            rounding=ROUND_HALF_UP,
        )


@dataclass(frozen=True)
class CategoryReport:
    """Category breakdown of a reporting window."""

    start_date: date
    end_date: date
    category: str | None
    totals: TypeTotals
    groups: list[CategoryGroup]
    shares: list[CategoryShare]
    is_undefined: bool = False
    skipped: list[SkippedRecord] = field(default_factory=list)
    failures: list[MaterializationFailure] = field(default_factory=list)


__all__ = [
    "SkippedRecord",
    "MaterializationFailure",
    "BalanceSummary",
    "TypeTotals",
    "CategoryGroup",
    "CategoryShare",
    "CategoryReport",
]
