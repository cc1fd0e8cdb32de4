"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_store import TransactionStorePort
from src.application.use_cases.get_balance_summary import (
    GetBalanceSummaryUseCase,
)
from src.application.use_cases.get_category_report import (
    GetCategoryReportUseCase,
)
from src.application.use_cases.manage_recurring import (
    ListRecurringTemplatesUseCase,
    StopRecurringTransactionUseCase,
)
from src.application.use_cases.materialize_recurring import (
    MaterializeRecurringUseCase,
)
from src.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.transaction_store import SqlAlchemyTransactionStore


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transaction_store(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionStorePort:
    """Return the SQL transaction store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionStore(resolved_db, logger=get_app_logger())


def build_materialize_recurring_use_case(
    store: TransactionStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> MaterializeRecurringUseCase:
    """Return the recurrence materializer wired to the store."""
    resolved_settings = settings or LedgerSettings.from_env()
    return MaterializeRecurringUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
        max_occurrences=resolved_settings.max_occurrences,
    )


def build_balance_summary_use_case(
    store: TransactionStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetBalanceSummaryUseCase:
    """Return the balance summary use case."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetBalanceSummaryUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
        max_occurrences=resolved_settings.max_occurrences,
    )


def build_category_report_use_case(
    store: TransactionStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetCategoryReportUseCase:
    """Return the category report use case."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetCategoryReportUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
        max_occurrences=resolved_settings.max_occurrences,
    )


def build_record_transaction_use_case(
    store: TransactionStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> RecordTransactionUseCase:
    """Return the transaction entry use case."""
    resolved_settings = settings or LedgerSettings.from_env()
    return RecordTransactionUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
        max_occurrences=resolved_settings.max_occurrences,
    )


def build_list_recurring_use_case(
    store: TransactionStorePort | None = None,
) -> ListRecurringTemplatesUseCase:
    """Return the recurring template listing use case."""
    return ListRecurringTemplatesUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
    )


def build_stop_recurring_use_case(
    store: TransactionStorePort | None = None,
) -> StopRecurringTransactionUseCase:
    """Return the use case stopping recurring templates."""
    return StopRecurringTransactionUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_transaction_store",
    "build_materialize_recurring_use_case",
    "build_balance_summary_use_case",
    "build_category_report_use_case",
    "build_record_transaction_use_case",
    "build_list_recurring_use_case",
    "build_stop_recurring_use_case",
]
