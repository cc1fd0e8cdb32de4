"""CLI adapter printing a category breakdown for a reporting window."""

import os

from src.adapters.cli_utils import format_amount, parse_date, resolve_as_of
from src.infrastructure.container import build_category_report_use_case
from src.infrastructure.logging.logger import get_cli_logger


def main() -> None:
    """Print category shares between REPORT_START_DATE and REPORT_END_DATE."""
    logger = get_cli_logger()
    as_of = resolve_as_of(logger)
    start_date = parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = parse_date(os.getenv("REPORT_END_DATE"), logger) or as_of
    start_date = start_date or end_date.replace(day=1)
    category = os.getenv("REPORT_CATEGORY") or None
    logger.info(
        f"category_report invoked with start={start_date}, end={end_date}, "
        f"category={category}"
    )
    use_case = build_category_report_use_case()

    report = use_case.execute(
        start_date,
        end_date,
        as_of=as_of,
        category=category,
    )

    print(
        f"Category report (start={start_date}, end={end_date}, "
        f"category={'all' if category is None else category})"
    )
    if report.is_undefined:
        print("No amounts in this period: 0%")
    for share in report.shares:
        print(f"{share.label}: {format_amount(share.subtotal)} ({share.percent}%)")
    print(
        f"Expenses: {format_amount(report.totals.expense)}, "
        f"incomes: {format_amount(report.totals.income)}, "
        f"balance: {format_amount(report.totals.difference)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
