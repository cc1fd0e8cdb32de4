"""CLI adapter printing the balance and the end-of-period forecast."""

import os

from src.adapters.cli_utils import format_amount, parse_date, resolve_as_of
from src.infrastructure.container import build_balance_summary_use_case
from src.infrastructure.logging.logger import get_cli_logger


def main() -> None:
    """Print the balance at the reference date and the forecast."""
    logger = get_cli_logger()
    as_of = resolve_as_of(logger)
    period_end = parse_date(os.getenv("LEDGER_PERIOD_END"), logger)
    logger.info(f"balance invoked with as_of={as_of}, period_end={period_end}")
    use_case = build_balance_summary_use_case()

    summary = use_case.execute(as_of, period_end=period_end)

    print(f"Balance on {summary.as_of}: {format_amount(summary.balance)}")
    print(
        f"Forecast on {summary.period_end}: {format_amount(summary.forecast)}"
    )
    if summary.skipped:
        print(f"{len(summary.skipped)} transactions ignored (unreadable date)")


if __name__ == "__main__":  # pragma: no cover
    main()
