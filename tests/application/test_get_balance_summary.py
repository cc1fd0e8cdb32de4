"""Tests for the GetBalanceSummaryUseCase."""

from datetime import date
from decimal import Decimal

from conftest import InMemoryTransactionStore, make_transaction
from src.application.use_cases.get_balance_summary import (
    GetBalanceSummaryUseCase,
)
from src.domain.models import Period, TransactionType


AS_OF = date(2025, 3, 10)


def _ledger() -> InMemoryTransactionStore:
    return InMemoryTransactionStore(
        [
            make_transaction(
                1,
                "1000",
                date(2025, 2, 15),
                TransactionType.INCOME,
                category="Salaire",
                description="Paie",
                period=Period.MONTH,
            ),
            make_transaction(2, "50", date(2025, 3, 5)),
        ]
    )


def test_forecast_includes_projected_occurrences(logger) -> None:
    """Templates should be projected up to the end of the month."""
    store = _ledger()
    use_case = GetBalanceSummaryUseCase(store, logger=logger)

    summary = use_case.execute(AS_OF)

    assert summary.balance == Decimal("950")
    assert summary.forecast == Decimal("1950")
    assert summary.period_end == date(2025, 3, 31)
    assert store.appended == []


def test_explicit_period_end_limits_the_forecast(logger) -> None:
    """An earlier period end should leave later occurrences out."""
    use_case = GetBalanceSummaryUseCase(_ledger(), logger=logger)

    summary = use_case.execute(AS_OF, period_end=date(2025, 3, 14))

    assert summary.forecast == summary.balance == Decimal("950")


def test_empty_ledger(logger) -> None:
    """An empty ledger should report zero everywhere."""
    use_case = GetBalanceSummaryUseCase(InMemoryTransactionStore(), logger=logger)

    summary = use_case.execute(AS_OF)

    assert summary.balance == Decimal("0")
    assert summary.forecast == Decimal("0")
    assert summary.skipped == []
    assert summary.failures == []


def test_forecast_to_date_max_does_not_raise(logger) -> None:
    """A forecast up to date.max should still be computed."""
    store = InMemoryTransactionStore(
        [
            make_transaction(
                1,
                "1",
                date(2025, 2, 1),
                TransactionType.INCOME,
                description="Prime",
                period=Period.YEAR,
            )
        ]
    )
    use_case = GetBalanceSummaryUseCase(store, logger=logger)

    summary = use_case.execute(AS_OF, period_end=date.max)

    assert summary.balance == Decimal("1")
    assert summary.forecast == Decimal(1 + 9999 - 2025)
    assert summary.failures == []
