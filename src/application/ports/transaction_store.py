"""Port for reading and writing ledger transactions."""

from typing import Protocol

from src.domain.models.transactions import Transaction


class TransactionStorePort(Protocol):
    """Port exposing the transaction ledger to the engine."""

    def get_all_transactions(self) -> list[Transaction]:
        """Return every transaction, most recent date first."""

    def get_recurring_templates(self) -> list[Transaction]:
        """Return the transactions currently flagged as templates."""

    def append_transaction(self, transaction: Transaction) -> int:
        """Persist a transaction and return its assigned identifier."""

    def mark_template_stopped(self, transaction_id: int) -> bool:
        """Clear the template flag and period of a transaction.

        Returns:
            bool: True when a transaction was updated.
        """


__all__ = ["TransactionStorePort"]
