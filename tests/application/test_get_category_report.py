"""Tests for the GetCategoryReportUseCase."""

from datetime import date
from decimal import Decimal

from conftest import InMemoryTransactionStore, make_transaction
from src.application.use_cases.get_category_report import (
    GetCategoryReportUseCase,
)
from src.domain.models import Period, TransactionType


AS_OF = date(2025, 3, 10)
START = date(2025, 3, 1)
END = date(2025, 3, 31)


def _ledger() -> InMemoryTransactionStore:
    return InMemoryTransactionStore(
        [
            make_transaction(
                1,
                "600",
                date(2025, 2, 20),
                category="Logement",
                description="Loyer",
                period=Period.MONTH,
            ),
            make_transaction(2, "200", date(2025, 3, 4), category="Courses"),
            make_transaction(
                3,
                "100",
                date(2025, 3, 6),
                TransactionType.INCOME,
                category="Courses",
            ),
            make_transaction(4, "999", date(2025, 2, 28), category="Courses"),
        ]
    )


def test_report_across_all_categories_projects_future_occurrences(
    logger,
) -> None:
    """A window ending after as_of should include projected occurrences."""
    use_case = GetCategoryReportUseCase(_ledger(), logger=logger)

    report = use_case.execute(START, END, AS_OF)

    assert [group.label for group in report.groups] == ["Courses", "Logement"]
    assert [share.subtotal for share in report.shares] == [
        Decimal("300"),
        Decimal("600"),
    ]
    assert report.totals.expense == Decimal("800")
    assert report.totals.income == Decimal("100")
    assert report.is_undefined is False


def test_past_window_uses_stored_transactions_only(logger) -> None:
    """A window ending before as_of should not project templates."""
    use_case = GetCategoryReportUseCase(_ledger(), logger=logger)

    report = use_case.execute(START, date(2025, 3, 9), AS_OF)

    assert [group.label for group in report.groups] == ["Courses"]


def test_single_category_is_split_by_type(logger) -> None:
    """A selected category should produce expense and income groups."""
    use_case = GetCategoryReportUseCase(_ledger(), logger=logger)

    report = use_case.execute(START, END, AS_OF, category="Courses")

    assert [group.label for group in report.groups] == ["expense", "income"]
    assert [share.percent for share in report.shares] == [
        Decimal("67"),
        Decimal("33"),
    ]


def test_empty_window_is_undefined(logger) -> None:
    """A window without amounts should flag the undefined share state."""
    use_case = GetCategoryReportUseCase(_ledger(), logger=logger)

    report = use_case.execute(date(2024, 1, 1), date(2024, 1, 31), AS_OF)

    assert report.groups == []
    assert report.shares == []
    assert report.is_undefined is True


def test_unknown_category_is_undefined(logger) -> None:
    """A category with no transactions keeps its two empty groups."""
    use_case = GetCategoryReportUseCase(_ledger(), logger=logger)

    report = use_case.execute(START, END, AS_OF, category="Voyages")

    assert len(report.groups) == 2
    assert report.is_undefined is True
