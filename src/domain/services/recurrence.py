"""Expansion of recurring templates into dated occurrences."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from logging import Logger

from src.domain.constants import DEFAULT_MAX_OCCURRENCES
from src.domain.errors import ConfigurationMismatch
from src.domain.models.transactions import Transaction
from src.domain.services.dates import DEFAULT_CODEC, DateCodec
from src.domain.services.periods import advance


@dataclass
class OccurrenceIndex:
    """Latest occurrence date per template, built from one ledger snapshot.

    Occurrences carrying a template identifier are indexed by it. Rows
    without one are indexed by their description, which for generated rows
    is the template description followed by the recurrence marker.
    """

    by_template_id: dict[int, date] = field(default_factory=dict)
    by_description: dict[str, date] = field(default_factory=dict)

    @classmethod
    def from_transactions(
        cls,
        transactions: Iterable[Transaction],
        codec: DateCodec = DEFAULT_CODEC,
    ) -> "OccurrenceIndex":
        index = cls()
        for transaction in transactions:
            if transaction.is_template:
                continue
            parsed = codec.try_parse(transaction.date)
            if parsed is None:
                continue
            if transaction.template_id is not None:
                _keep_latest(index.by_template_id, transaction.template_id, parsed)
            else:
                _keep_latest(index.by_description, transaction.description, parsed)
        return index

    def latest_for(self, template: Transaction) -> date | None:
        """Return the latest known occurrence date of a template."""
        candidates = [
            self.by_template_id.get(template.id),
            self.by_description.get(template.match_key),
        ]
        known = [value for value in candidates if value is not None]
        return max(known) if known else None


@dataclass(frozen=True)
class Expansion:
    """Occurrences generated for one template.

    Attributes:
        occurrences: Generated occurrences in chronological order.
        truncated: True when the occurrence cap stopped the expansion.
    """

    occurrences: list[Transaction]
    truncated: bool = False


def expand_template(
    template: Transaction,
    index: OccurrenceIndex,
    horizon: date,
    *,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
    codec: DateCodec = DEFAULT_CODEC,
    logger: Logger | None = None,
) -> Expansion:
    """Generate the occurrences of a template up to a horizon.

    Expansion resumes after the latest of the template date and its known
    occurrences, so calling it again after persisting the result produces
    nothing new.

    Args:
        template: Recurring template to expand.
        index: Occurrence index of the current ledger snapshot.
        horizon: Last date (inclusive) that may receive an occurrence.
        max_occurrences: Upper bound on generated occurrences.
        codec: Codec used to read and render dates.
        logger: Optional logger for truncation warnings.

    Returns:
        Expansion: Generated occurrences and truncation flag.

    Raises:
        InvalidDateFormat: When the template date does not parse.
        ConfigurationMismatch: When the template period does not advance.
    """
    last_date = codec.parse(template.date)
    latest = index.latest_for(template)
    if latest is not None and latest > last_date:
        last_date = latest

    next_date = _step(last_date, template.period)
    occurrences: list[Transaction] = []
    while next_date is not None and next_date <= horizon:
        if len(occurrences) >= max_occurrences:
            if logger is not None:
                logger.warning(
                    f"Stopped expanding template id={template.id} after "
                    f"{max_occurrences} occurrences (horizon={horizon})"
                )
            return Expansion(occurrences=occurrences, truncated=True)
        occurrences.append(template.occurrence_on(codec.format(next_date)))
        next_date = _step(next_date, template.period)
    return Expansion(occurrences=occurrences)


def next_due(
    template: Transaction,
    index: OccurrenceIndex,
    as_of: date,
    *,
    codec: DateCodec = DEFAULT_CODEC,
) -> date | None:
    """Return the first date after ``as_of`` the template is due.

    A template dated after ``as_of`` is due on its own date. Otherwise the
    series is stepped from the latest occurrence already recorded up to
    ``as_of`` (or the template date) until it passes ``as_of``.

    Args:
        template: Recurring template.
        index: Occurrence index of the current ledger snapshot.
        as_of: Reference date treated as today.
        codec: Codec used to read the template date.

    Returns:
        date | None: Next due date, None past the last representable date.

    Raises:
        InvalidDateFormat: When the template date does not parse.
        ConfigurationMismatch: When the template period does not advance.
    """
    current = codec.parse(template.date)
    if current > as_of:
        return current
    latest = index.latest_for(template)
    if latest is not None and current < latest <= as_of:
        current = latest
    while current is not None and current <= as_of:
        current = _step(current, template.period)
    return current


def _step(value: date, period) -> date | None:
    """Return the next date, or None past the last representable date."""
    try:
        following = advance(value, period)
    except (OverflowError, ValueError):
        return None
    if following <= value:
        raise ConfigurationMismatch(period)
    return following


def _keep_latest(target: dict, key, value: date) -> None:
    current = target.get(key)
    if current is None or value > current:
        target[key] = value


__all__ = ["OccurrenceIndex", "Expansion", "expand_template", "next_due"]
