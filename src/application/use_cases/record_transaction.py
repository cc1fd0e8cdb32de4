"""Use case to record a transaction entered by the user."""

from dataclasses import dataclass, replace
from datetime import date
from decimal import InvalidOperation

from src.application.ports.transaction_store import TransactionStorePort
from src.application.use_cases.materialize_recurring import (
    MaterializationMode,
    MaterializationResult,
    MaterializeRecurringUseCase,
)
from src.domain.constants import (
    DEFAULT_MAX_OCCURRENCES,
    SYNTHETIC_TRANSACTION_ID,
)
from src.domain.errors import InvalidDateFormat, InvalidTransactionInput
from src.domain.models import Period, Transaction, TransactionType
from src.domain.policies.descriptions import (
    contains_marker,
    ensure_unique_description,
)
from src.domain.services.dates import DEFAULT_CODEC
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import parse_amount


@dataclass(frozen=True)
class RecordTransactionResult:
    """Result of recording a transaction.

    Attributes:
        transaction: The stored transaction with its identifier.
        materialized: Occurrences recorded because they were already due.
    """

    transaction: Transaction
    materialized: MaterializationResult


class RecordTransactionUseCase:
    """Validate and store a transaction, then record due occurrences."""

    def __init__(
        self,
        store: TransactionStorePort,
        logger=None,
        max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            max_occurrences: Cap on occurrences generated per template.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._materializer = MaterializeRecurringUseCase(
            store,
            logger=self._logger,
            max_occurrences=max_occurrences,
        )

    def execute(
        self,
        amount,
        category: str,
        transaction_type: TransactionType | str,
        transaction_date: date | str,
        description: str,
        as_of: date,
        period: Period | str = Period.NONE,
    ) -> RecordTransactionResult:
        """Record a transaction.

        A transaction with a period becomes a recurring template; its
        description is made unique among current templates. Occurrences
        due up to ``as_of`` are then recorded for every template.

        Args:
            amount: Non-negative amount, as a number or numeric string.
            category: Category label.
            transaction_type: Expense or income.
            transaction_date: Date, or canonical date string.
            description: Non-empty description.
            as_of: Reference date treated as today.
            period: Recurrence period, NONE for a one-off transaction.

        Returns:
            RecordTransactionResult: Stored transaction and due occurrences.

        Raises:
            InvalidTransactionInput: When a field is missing or unusable.
        """
        transaction = self._build_transaction(
            amount,
            category,
            transaction_type,
            transaction_date,
            description,
            period,
        )
        if transaction.is_template:
            unique = ensure_unique_description(
                transaction.description,
                self._store.get_recurring_templates(),
            )
            if unique != transaction.description:
                self._logger.info(
                    f"Renamed template description {transaction.description!r} "
                    f"to {unique!r}"
                )
                transaction = replace(transaction, description=unique)

        new_id = self._store.append_transaction(transaction)
        stored = transaction.with_id(new_id)
        self._logger.info(
            f"Recorded transaction id={new_id}: {stored.type.value} "
            f"{stored.amount} in {stored.category!r}"
        )
        materialized = self._materializer.execute(
            as_of,
            mode=MaterializationMode.PERSIST,
        )
        return RecordTransactionResult(
            transaction=stored,
            materialized=materialized,
        )

    @staticmethod
    def _build_transaction(
        amount,
        category: str,
        transaction_type: TransactionType | str,
        transaction_date: date | str,
        description: str,
        period: Period | str,
    ) -> Transaction:
        try:
            parsed_amount = parse_amount(amount)
        except InvalidOperation as exc:
            raise InvalidTransactionInput(f"Invalid amount: {amount!r}") from exc
        if not parsed_amount.is_finite() or parsed_amount < 0:
            raise InvalidTransactionInput(f"Invalid amount: {amount!r}")

        try:
            resolved_type = TransactionType(transaction_type)
        except ValueError as exc:
            raise InvalidTransactionInput(
                f"Invalid transaction type: {transaction_type!r}"
            ) from exc

        if not description or not description.strip():
            raise InvalidTransactionInput("Description is required")
        if contains_marker(description):
            raise InvalidTransactionInput(
                "Description contains the reserved recurrence marker"
            )

        resolved_period = Period.coerce(period)
        if resolved_period is None:
            raise InvalidTransactionInput(f"Invalid period: {period!r}")

        if isinstance(transaction_date, date):
            formatted_date = DEFAULT_CODEC.format(transaction_date)
        else:
            try:
                formatted_date = DEFAULT_CODEC.format(
                    DEFAULT_CODEC.parse(transaction_date)
                )
            except InvalidDateFormat as exc:
                raise InvalidTransactionInput(str(exc)) from exc

        return Transaction(
            id=SYNTHETIC_TRANSACTION_ID,
            amount=parsed_amount,
            category=category,
            type=resolved_type,
            date=formatted_date,
            is_template=resolved_period != Period.NONE,
            period=resolved_period,
            description=description,
        )


__all__ = ["RecordTransactionUseCase", "RecordTransactionResult"]
