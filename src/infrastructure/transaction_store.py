"""SQLAlchemy-backed store for ledger transactions."""

from datetime import date

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    MetaData,
    String,
    Table,
    insert,
    select,
    update,
)

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_store import TransactionStorePort
from src.domain.models import Period, Transaction, TransactionType
from src.domain.services.dates import DEFAULT_CODEC
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


metadata = MetaData()

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("amount", String, nullable=False),
    Column("category", String, nullable=False, default=""),
    Column("type", String, nullable=False),
    Column("date", String, nullable=False),
    Column("is_template", Boolean, nullable=False, default=False),
    Column("period", String, nullable=False, default=""),
    Column("description", String, nullable=False, default=""),
    Column("template_id", Integer, nullable=True),
)


class SqlAlchemyTransactionStore(TransactionStorePort):
    """Transaction store backed by a SQLAlchemy engine."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._schema_ready = False

    def prepare(self) -> None:
        """Create the transactions table if it does not exist."""
        if self._schema_ready:
            return
        engine = self._db_port.get_ledger_engine()
        metadata.create_all(engine, tables=[transactions_table])
        self._schema_ready = True

    def get_all_transactions(self) -> list[Transaction]:
        """Return every transaction, most recent date first.

        Dates are compared as calendar dates; rows whose date does not parse
        come last.
        """
        transactions = self._fetch(select(transactions_table))
        return sorted(transactions, key=self._date_sort_key, reverse=True)

    def get_recurring_templates(self) -> list[Transaction]:
        query = select(transactions_table).where(
            transactions_table.c.is_template.is_(True)
        )
        return self._fetch(query)

    def append_transaction(self, transaction: Transaction) -> int:
        """Persist a transaction and return its new identifier."""
        self.prepare()
        statement = insert(transactions_table).values(
            amount=str(transaction.amount),
            category=transaction.category,
            type=transaction.type.value,
            date=transaction.date,
            is_template=transaction.is_template,
            period=transaction.period_label,
            description=transaction.description,
            template_id=transaction.template_id,
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(statement)
        return int(result.inserted_primary_key[0])

    def mark_template_stopped(self, transaction_id: int) -> bool:
        self.prepare()
        statement = (
            update(transactions_table)
            .where(transactions_table.c.id == transaction_id)
            .values(is_template=False, period=Period.NONE.value)
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(statement)
        return result.rowcount > 0

    def _fetch(self, query) -> list[Transaction]:
        self.prepare()
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_transaction(row) for row in rows]

    def _to_transaction(self, row) -> Transaction:
        """Convert a database row into a Transaction.

        Args:
            row: Row of the transactions table.

        Returns:
            Transaction: Domain transaction; unknown types count as income
            and unknown periods keep their stored value.
        """
        try:
            transaction_type = TransactionType(row.type)
        except ValueError:
            self._logger.warning(
                f"Unknown transaction type '{row.type}' for id={row.id}, "
                f"treating it as income"
            )
            transaction_type = TransactionType.INCOME
        period = Period.coerce(row.period)
        return Transaction(
            id=row.id,
            amount=coerce_decimal(row.amount),
            category=row.category,
            type=transaction_type,
            date=row.date,
            is_template=bool(row.is_template),
            period=period if period is not None else row.period,
            description=row.description,
            template_id=row.template_id,
        )

    @staticmethod
    def _date_sort_key(transaction: Transaction) -> tuple[bool, date, int]:
        parsed = DEFAULT_CODEC.try_parse(transaction.date)
        return (parsed is not None, parsed or date.min, transaction.id)


__all__ = ["SqlAlchemyTransactionStore", "transactions_table", "metadata"]
