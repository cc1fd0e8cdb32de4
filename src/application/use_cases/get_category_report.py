"""Use case to break a reporting window down by category."""

from datetime import date

from src.application.ports.transaction_store import TransactionStorePort
from src.application.use_cases.materialize_recurring import (
    MaterializationMode,
    MaterializeRecurringUseCase,
)
from src.domain.constants import DEFAULT_MAX_OCCURRENCES
from src.domain.errors import DivisionUndefined
from src.domain.models import (
    CategoryReport,
    MaterializationFailure,
    SkippedRecord,
    Transaction,
)
from src.domain.services.balance import compute_type_totals
from src.domain.services.categories import compute_shares, group_by_selection
from src.domain.services.dates import DEFAULT_CODEC
from src.infrastructure.logging.logger import get_app_logger


class GetCategoryReportUseCase:
    """Group the transactions of a window by category with their shares."""

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
        start_date: date,
        end_date: date,
        as_of: date,
        category: str | None = None,
    ) -> CategoryReport:
        """Return the category report of the window.

        Args:
            start_date: First date of the window.
            end_date: Last date of the window.
            as_of: Reference date treated as today; a window ending after it
                includes projected recurring occurrences.
            category: Category to split into expenses and incomes, or None
                for a breakdown across all categories.

        Returns:
            CategoryReport: Groups, totals, and shares. ``is_undefined`` is
            set and ``shares`` is empty when the window total is zero.
        """
        transactions = self._store.get_all_transactions()
        failures: list[MaterializationFailure] = []
        if end_date > as_of:
            projected = self._materializer.execute(
                end_date,
                mode=MaterializationMode.EPHEMERAL,
                transactions=transactions,
            )
            transactions = [*transactions, *projected.occurrences]
            failures = projected.failures

        in_window, skipped = self._filter_window(
            transactions,
            start_date,
            end_date,
        )
        groups = group_by_selection(in_window, category)
        totals = compute_type_totals(
            member for group in groups for member in group.transactions
        )
        try:
            shares = compute_shares(groups)
            is_undefined = False
        except DivisionUndefined:
            self._logger.info(
                f"No amounts between {start_date} and {end_date} "
                f"for category={'all' if category is None else repr(category)}"
            )
            shares = []
            is_undefined = True

        self._logger.info(
            f"Category report computed: groups={len(groups)}, "
            f"expense={totals.expense}, income={totals.income}"
        )
        return CategoryReport(
            start_date=start_date,
            end_date=end_date,
            category=category,
            totals=totals,
            groups=groups,
            shares=shares,
            is_undefined=is_undefined,
            skipped=skipped,
            failures=failures,
        )

    def _filter_window(
        self,
        transactions: list[Transaction],
        start_date: date,
        end_date: date,
    ) -> tuple[list[Transaction], list[SkippedRecord]]:
        """Keep transactions dated inside the window.

        Args:
            transactions: Ledger snapshot, projections included.
            start_date: First date of the window.
            end_date: Last date of the window.

        Returns:
            tuple: Transactions in the window and the unparseable ones.
        """
        kept: list[Transaction] = []
        skipped: list[SkippedRecord] = []
        for transaction in transactions:
            transaction_date = DEFAULT_CODEC.try_parse(transaction.date)
            if transaction_date is None:
                skipped.append(
                    SkippedRecord(
                        transaction_id=transaction.id,
                        description=transaction.description,
                        reason=f"Unparseable date: {transaction.date!r}",
                    )
                )
                continue
            if start_date <= transaction_date <= end_date:
                kept.append(transaction)
        if skipped:
            self._logger.warning(
                f"Excluded {len(skipped)} transactions with unparseable dates "
                f"from the category report"
            )
        return kept, skipped


__all__ = ["GetCategoryReportUseCase", "CategoryReport"]
