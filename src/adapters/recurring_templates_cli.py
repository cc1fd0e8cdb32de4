"""CLI adapter listing recurring templates and stopping one on request."""

import os

from src.adapters.cli_utils import format_amount, resolve_as_of
from src.domain.services.dates import format_short_date
from src.infrastructure.container import (
    build_list_recurring_use_case,
    build_stop_recurring_use_case,
)
from src.infrastructure.logging.logger import get_cli_logger


def main() -> None:
    """Stop STOP_TEMPLATE_ID when set, then list the active templates."""
    logger = get_cli_logger()
    raw_id = os.getenv("STOP_TEMPLATE_ID")
    if raw_id:
        try:
            template_id = int(raw_id)
        except ValueError:
            logger.error(f"Invalid STOP_TEMPLATE_ID '{raw_id}'.")
            return
        stopped = build_stop_recurring_use_case().execute(template_id)
        print(
            f"Template {template_id} stopped."
            if stopped
            else f"Template {template_id} not found."
        )

    as_of = resolve_as_of(logger)
    scheduled = build_list_recurring_use_case().execute(as_of)
    print(f"{len(scheduled)} recurring templates")
    for item in scheduled:
        template = item.template
        next_due = (
            format_short_date(item.next_due)
            if item.next_due is not None
            else "??/??/????"
        )
        print(
            f"[{template.id}] {template.description} - "
            f"{template.type.value} {format_amount(template.amount)} "
            f"every {template.period_label}, next on {next_due}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
