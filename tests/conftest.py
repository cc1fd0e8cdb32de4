"""Shared fixtures for ledger tests."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import Period, Transaction, TransactionType
from src.domain.services.dates import format_date


class InMemoryTransactionStore:
    """List-backed implementation of the transaction store port."""

    def __init__(self, transactions: list[Transaction] | None = None) -> None:
        self.transactions: list[Transaction] = list(transactions or [])
        self.appended: list[Transaction] = []

    def get_all_transactions(self) -> list[Transaction]:
        return list(self.transactions)

    def get_recurring_templates(self) -> list[Transaction]:
        return [item for item in self.transactions if item.is_template]

    def append_transaction(self, transaction: Transaction) -> int:
        new_id = max((item.id for item in self.transactions), default=0) + 1
        stored = replace(transaction, id=new_id)
        self.transactions.append(stored)
        self.appended.append(stored)
        return new_id

    def mark_template_stopped(self, transaction_id: int) -> bool:
        for position, item in enumerate(self.transactions):
            if item.id == transaction_id:
                self.transactions[position] = replace(
                    item,
                    is_template=False,
                    period=Period.NONE,
                )
                return True
        return False


def make_transaction(
    transaction_id: int,
    amount: str,
    on: date,
    transaction_type: TransactionType = TransactionType.EXPENSE,
    category: str = "Courses",
    description: str = "",
    period: Period | str = Period.NONE,
    template_id: int | None = None,
) -> Transaction:
    """Build a transaction dated with the canonical format."""
    is_template = period != Period.NONE and period != ""
    return Transaction(
        id=transaction_id,
        amount=Decimal(amount),
        category=category,
        type=transaction_type,
        date=format_date(on),
        is_template=is_template,
        period=period,
        description=description,
        template_id=template_id,
    )


@pytest.fixture
def logger() -> MagicMock:
    """Logger double accepting the logging.Logger-like API."""
    return MagicMock()


@pytest.fixture
def store() -> InMemoryTransactionStore:
    """Empty in-memory transaction store."""
    return InMemoryTransactionStore()


@pytest.fixture
def transaction_factory():
    """Expose make_transaction to tests."""
    return make_transaction
