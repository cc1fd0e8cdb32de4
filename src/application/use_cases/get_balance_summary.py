"""Use case to compute the current balance and the period forecast."""

from datetime import date

from src.application.ports.transaction_store import TransactionStorePort
from src.application.use_cases.materialize_recurring import (
    MaterializationMode,
    MaterializeRecurringUseCase,
)
from src.domain.constants import DEFAULT_MAX_OCCURRENCES
from src.domain.models import BalanceSummary
from src.domain.services.balance import summarize_balance
from src.domain.services.periods import end_of_month
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceSummaryUseCase:
    """Compute the balance at a reference date and the forecast after it."""

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
        as_of: date,
        period_end: date | None = None,
    ) -> BalanceSummary:
        """Return the balance summary.

        Recurring templates are projected in memory up to the end of the
        period so the forecast includes occurrences not yet recorded.

        Args:
            as_of: Reference date treated as today.
            period_end: Last forecast date, the end of the as_of month when
                omitted.

        Returns:
            BalanceSummary: Balance, forecast, and diagnostics.
        """
        resolved_end = period_end or end_of_month(as_of)
        transactions = self._store.get_all_transactions()
        projected = self._materializer.execute(
            resolved_end,
            mode=MaterializationMode.EPHEMERAL,
            transactions=transactions,
        )
        summary = summarize_balance(
            [*transactions, *projected.occurrences],
            as_of,
            resolved_end,
            logger=self._logger,
        )
        self._logger.info(
            f"Balance computed: balance={summary.balance}, "
            f"forecast={summary.forecast}, as_of={as_of}, "
            f"period_end={resolved_end}"
        )
        return BalanceSummary(
            balance=summary.balance,
            forecast=summary.forecast,
            as_of=summary.as_of,
            period_end=summary.period_end,
            skipped=summary.skipped,
            failures=projected.failures,
        )


__all__ = ["GetBalanceSummaryUseCase", "BalanceSummary"]
