"""Use case to materialize occurrences of recurring templates.

Each template is expanded from the latest of its own date and its known
occurrences up to a horizon. Occurrences are either appended to the store
(persist mode, used to record what is already due) or returned in memory
only (ephemeral mode, used for forecasts and reports).
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.constants import DEFAULT_MAX_OCCURRENCES
from src.domain.errors import ConfigurationMismatch, InvalidDateFormat
from src.domain.models import MaterializationFailure, Transaction
from src.domain.services.recurrence import OccurrenceIndex, expand_template
from src.infrastructure.logging.logger import get_app_logger


class MaterializationMode(str, Enum):
    """Where generated occurrences go."""

    PERSIST = "persist"
    EPHEMERAL = "ephemeral"


@dataclass(frozen=True)
class MaterializationResult:
    """Result of a materialization run.

    Attributes:
        occurrences: Generated occurrences; in persist mode they carry the
            identifiers assigned by the store.
        failures: Templates whose expansion was aborted.
        truncated: Identifiers of templates stopped by the occurrence cap.
    """

    occurrences: list[Transaction] = field(default_factory=list)
    failures: list[MaterializationFailure] = field(default_factory=list)
    truncated: list[int] = field(default_factory=list)


class MaterializeRecurringUseCase:
    """Expand recurring templates into concrete occurrences."""

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
        self._max_occurrences = max_occurrences

    def execute(
        self,
        horizon: date,
        mode: MaterializationMode = MaterializationMode.EPHEMERAL,
        transactions: list[Transaction] | None = None,
    ) -> MaterializationResult:
        """Expand every recurring template up to the horizon.

        Args:
            horizon: Last date (inclusive) that may receive an occurrence.
            mode: Persist occurrences or keep them in memory.
            transactions: Optional ledger snapshot already fetched by the
                caller; fetched from the store when omitted.

        Returns:
            MaterializationResult: Occurrences and per-template diagnostics.
        """
        templates = self._store.get_recurring_templates()
        if transactions is None:
            transactions = self._store.get_all_transactions()
        index = OccurrenceIndex.from_transactions(transactions)

        result = MaterializationResult()
        for template in templates:
            self._materialize_indexed(template, index, horizon, mode, result)

        self._logger.info(
            f"Materialized {len(result.occurrences)} occurrences from "
            f"{len(templates)} templates up to {horizon} ({mode.value})"
        )
        if result.failures:
            self._logger.warning(
                f"Skipped {len(result.failures)} templates during materialization"
            )
        return result

    def materialize(
        self,
        template: Transaction,
        all_transactions: list[Transaction],
        horizon: date,
        mode: MaterializationMode = MaterializationMode.EPHEMERAL,
    ) -> MaterializationResult:
        """Expand a single template against a ledger snapshot.

        Args:
            template: Recurring template to expand.
            all_transactions: Ledger snapshot used to find prior occurrences.
            horizon: Last date (inclusive) that may receive an occurrence.
            mode: Persist occurrences or keep them in memory.

        Returns:
            MaterializationResult: Occurrences, or the failure of the template.
        """
        index = OccurrenceIndex.from_transactions(all_transactions)
        result = MaterializationResult()
        self._materialize_indexed(template, index, horizon, mode, result)
        return result

    def _materialize_indexed(
        self,
        template: Transaction,
        index: OccurrenceIndex,
        horizon: date,
        mode: MaterializationMode,
        result: MaterializationResult,
    ) -> None:
        try:
            expansion = expand_template(
                template,
                index,
                horizon,
                max_occurrences=self._max_occurrences,
                logger=self._logger,
            )
        except (InvalidDateFormat, ConfigurationMismatch) as exc:
            self._logger.warning(
                f"Cannot expand template id={template.id} "
                f"({template.description!r}): {exc}"
            )
            result.failures.append(
                MaterializationFailure(
                    template_id=template.id,
                    description=template.description,
                    reason=str(exc),
                )
            )
            return

        if expansion.truncated:
            result.truncated.append(template.id)
        for occurrence in expansion.occurrences:
            if mode == MaterializationMode.PERSIST:
                new_id = self._store.append_transaction(occurrence)
                occurrence = occurrence.with_id(new_id)
            result.occurrences.append(occurrence)


__all__ = [
    "MaterializeRecurringUseCase",
    "MaterializationMode",
    "MaterializationResult",
]
