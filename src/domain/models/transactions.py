"""Domain models for ledger transactions."""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from src.domain.constants import RECURRENCE_MARKER, SYNTHETIC_TRANSACTION_ID


class TransactionType(str, Enum):
    """Direction of a transaction."""

    EXPENSE = "expense"
    INCOME = "income"


class Period(str, Enum):
    """Recurrence period of a template."""

    NONE = ""
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"

    @classmethod
    def coerce(cls, raw) -> "Period | None":
        """Map a stored value to a Period.

        Args:
            raw: Period instance, stored string, or None.

        Returns:
            Period | None: Matching period, or None when unrecognized.
        """
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls.NONE
        try:
            return cls(str(raw).strip())
        except ValueError:
            return None


@dataclass(frozen=True)
class Transaction:
    """A ledger transaction, template, or generated occurrence.

    Attributes:
        id: Store identifier, -1 for synthetic occurrences.
        amount: Non-negative amount.
        category: Category label.
        type: Expense or income.
        date: Canonical formatted date string.
        is_template: Whether the transaction generates occurrences.
        period: Recurrence period; unrecognized stored values stay raw.
        description: Free text, suffixed with the marker on occurrences.
        template_id: Identifier of the generating template, if any.
    """

    id: int
    amount: Decimal
    category: str
    type: TransactionType
    date: str
    is_template: bool = False
    period: Period | str = Period.NONE
    description: str = ""
    template_id: int | None = None

    @property
    def is_synthetic(self) -> bool:
        """Return True when the transaction is not persisted."""
        return self.id == SYNTHETIC_TRANSACTION_ID

    @property
    def period_label(self) -> str:
        """Return the stored representation of the period."""
        if isinstance(self.period, Period):
            return self.period.value
        return str(self.period)

    @property
    def match_key(self) -> str:
        """Return the description carried by this template's occurrences."""
        return self.description + RECURRENCE_MARKER

    def occurrence_on(self, formatted_date: str) -> "Transaction":
        """Return a synthetic occurrence of this template.

        Args:
            formatted_date: Canonical date string of the occurrence.

        Returns:
            Transaction: Unpersisted occurrence linked to this template.
        """
        return Transaction(
            id=SYNTHETIC_TRANSACTION_ID,
            amount=self.amount,
            category=self.category,
            type=self.type,
            date=formatted_date,
            is_template=False,
            period=Period.NONE,
            description=self.match_key,
            template_id=self.id,
        )

    def with_id(self, transaction_id: int) -> "Transaction":
        """Return a copy carrying a store-assigned identifier."""
        return replace(self, id=transaction_id)


__all__ = ["Transaction", "TransactionType", "Period"]
