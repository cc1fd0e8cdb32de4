"""CLI adapter recording recurring occurrences that are already due.

This module wires the MaterializeRecurringUseCase in persist mode to the
SQL transaction store, using today (or LEDGER_AS_OF) as the horizon.
"""

from src.adapters.cli_utils import resolve_as_of
from src.application.use_cases.materialize_recurring import MaterializationMode
from src.infrastructure.container import build_materialize_recurring_use_case
from src.infrastructure.logging.logger import get_cli_logger


def main() -> None:
    """Record every due occurrence of the recurring templates."""
    logger = get_cli_logger()
    as_of = resolve_as_of(logger)
    logger.info(f"sync_recurring invoked with as_of={as_of}")
    use_case = build_materialize_recurring_use_case()

    result = use_case.execute(as_of, mode=MaterializationMode.PERSIST)

    print(
        f"Recorded {len(result.occurrences)} recurring occurrences "
        f"up to {as_of}."
    )
    for failure in result.failures:
        print(
            f"Skipped template {failure.template_id} "
            f"({failure.description}): {failure.reason}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
