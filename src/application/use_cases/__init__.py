"""Application use cases package."""

from .materialize_recurring import (
    MaterializationMode,
    MaterializationResult,
    MaterializeRecurringUseCase,
)
from .get_balance_summary import GetBalanceSummaryUseCase, BalanceSummary
from .get_category_report import GetCategoryReportUseCase, CategoryReport
from .record_transaction import (
    RecordTransactionResult,
    RecordTransactionUseCase,
)
from .manage_recurring import (
    ListRecurringTemplatesUseCase,
    ScheduledTemplate,
    StopRecurringTransactionUseCase,
)

__all__ = [
    "ScheduledTemplate",
    "MaterializationMode",
    "MaterializationResult",
    "MaterializeRecurringUseCase",
    "GetBalanceSummaryUseCase",
    "BalanceSummary",
    "GetCategoryReportUseCase",
    "CategoryReport",
    "RecordTransactionUseCase",
    "RecordTransactionResult",
    "ListRecurringTemplatesUseCase",
    "StopRecurringTransactionUseCase",
]
