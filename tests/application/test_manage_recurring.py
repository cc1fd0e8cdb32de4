"""Tests for listing and stopping recurring templates."""

from datetime import date
from decimal import Decimal

from conftest import InMemoryTransactionStore, make_transaction
from src.application.use_cases.manage_recurring import (
    ListRecurringTemplatesUseCase,
    StopRecurringTransactionUseCase,
)
from src.application.use_cases.materialize_recurring import (
    MaterializeRecurringUseCase,
)
from src.domain.models import Period, Transaction, TransactionType
from src.domain.services.dates import format_date


def _store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore(
        [
            make_transaction(
                2,
                "9",
                date(2025, 1, 5),
                description="netflix",
                period=Period.MONTH,
            ),
            make_transaction(
                1,
                "700",
                date(2025, 1, 1),
                description="Loyer",
                period=Period.MONTH,
            ),
            make_transaction(3, "4", date(2025, 1, 2), description="Café"),
        ]
    )


def test_lists_templates_sorted_by_description(logger) -> None:
    """Only templates are listed, ordered case-insensitively."""
    use_case = ListRecurringTemplatesUseCase(_store(), logger=logger)

    scheduled = use_case.execute(date(2025, 3, 10))

    assert [item.template.description for item in scheduled] == [
        "Loyer",
        "netflix",
    ]
    assert [item.next_due for item in scheduled] == [
        date(2025, 4, 1),
        date(2025, 4, 5),
    ]


def test_next_due_resumes_after_recorded_occurrences(logger) -> None:
    """The next date follows the latest occurrence already recorded."""
    store = _store()
    template = store.transactions[1]
    store.transactions.append(
        template.occurrence_on(format_date(date(2025, 3, 3))).with_id(9)
    )
    use_case = ListRecurringTemplatesUseCase(store, logger=logger)

    scheduled = use_case.execute(date(2025, 3, 5))

    assert scheduled[0].next_due == date(2025, 4, 3)


def test_future_template_is_due_on_its_own_date(logger) -> None:
    """A template dated after as_of is next due on that date."""
    use_case = ListRecurringTemplatesUseCase(_store(), logger=logger)

    scheduled = use_case.execute(date(2024, 12, 1))

    assert [item.next_due for item in scheduled] == [
        date(2025, 1, 1),
        date(2025, 1, 5),
    ]


def test_next_due_is_none_for_unreadable_template(logger) -> None:
    """A template whose date does not parse has no next date."""
    broken = Transaction(
        id=4,
        amount=Decimal("3"),
        category="Divers",
        type=TransactionType.EXPENSE,
        date="01/01/2025",
        is_template=True,
        period=Period.WEEK,
        description="Cassé",
    )
    use_case = ListRecurringTemplatesUseCase(
        InMemoryTransactionStore([broken]),
        logger=logger,
    )

    scheduled = use_case.execute(date(2025, 3, 10))

    assert scheduled[0].next_due is None
    logger.warning.assert_called_once()


def test_stopped_template_no_longer_generates(logger) -> None:
    """Stopping a template should end its expansion."""
    store = _store()
    stop = StopRecurringTransactionUseCase(store, logger=logger)

    assert stop.execute(1) is True

    result = MaterializeRecurringUseCase(store, logger=logger).execute(
        date(2025, 6, 30)
    )
    assert {item.template_id for item in result.occurrences} == {2}
    logger.info.assert_any_call("Stopped recurring template id=1")


def test_stopping_unknown_template_returns_false(logger) -> None:
    """Unknown identifiers are reported without raising."""
    stop = StopRecurringTransactionUseCase(_store(), logger=logger)

    assert stop.execute(42) is False
    logger.warning.assert_called_once()
