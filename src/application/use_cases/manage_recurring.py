"""Use cases to list and stop recurring templates."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.errors import ConfigurationMismatch, InvalidDateFormat
from src.domain.models import Transaction
from src.domain.services.recurrence import OccurrenceIndex, next_due
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ScheduledTemplate:
    """A recurring template with its next due date.

    Attributes:
        template: The recurring template.
        next_due: First date after the reference date the template is due,
            None when it cannot be computed.
    """

    template: Transaction
    next_due: date | None


class ListRecurringTemplatesUseCase:
    """Return the recurring templates currently active."""

    def __init__(self, store: TransactionStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, as_of: date) -> list[ScheduledTemplate]:
        """Return templates sorted by description then identifier.

        Args:
            as_of: Reference date treated as today.

        Returns:
            list[ScheduledTemplate]: Templates with their next due date.
        """
        templates = sorted(
            self._store.get_recurring_templates(),
            key=lambda item: (item.description.lower(), item.id),
        )
        index = OccurrenceIndex.from_transactions(
            self._store.get_all_transactions()
        )
        scheduled = [
            ScheduledTemplate(
                template=template,
                next_due=self._next_due(template, index, as_of),
            )
            for template in templates
        ]
        self._logger.info(f"Fetched {len(scheduled)} recurring templates")
        return scheduled

    def _next_due(
        self,
        template: Transaction,
        index: OccurrenceIndex,
        as_of: date,
    ) -> date | None:
        try:
            return next_due(template, index, as_of)
        except (InvalidDateFormat, ConfigurationMismatch) as exc:
            self._logger.warning(
                f"No next date for template id={template.id}: {exc}"
            )
            return None


class StopRecurringTransactionUseCase:
    """Stop a template from generating further occurrences.

    Occurrences already recorded are kept as ordinary transactions.
    """

    def __init__(self, store: TransactionStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, template_id: int) -> bool:
        """Stop the template with the given identifier.

        Args:
            template_id: Store identifier of the template.

        Returns:
            bool: True when a template was stopped.
        """
        stopped = self._store.mark_template_stopped(template_id)
        if stopped:
            self._logger.info(f"Stopped recurring template id={template_id}")
        else:
            self._logger.warning(
                f"No transaction with id={template_id} to stop"
            )
        return stopped


__all__ = [
    "ListRecurringTemplatesUseCase",
    "StopRecurringTransactionUseCase",
    "ScheduledTemplate",
]
