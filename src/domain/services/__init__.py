"""Domain services package."""

from .balance import (
    compute_balance,
    compute_forecast,
    compute_type_totals,
    signed_amount,
    summarize_balance,
)
from .categories import (
    compute_shares,
    group_all,
    group_by_selection,
    group_one,
)
from .dates import (
    DateCodec,
    format_date,
    format_short_date,
    parse_date,
    try_parse_date,
)
from .periods import advance, end_of_month
from .recurrence import Expansion, OccurrenceIndex, expand_template, next_due

__all__ = [
    "DateCodec",
    "parse_date",
    "try_parse_date",
    "format_date",
    "format_short_date",
    "advance",
    "end_of_month",
    "Expansion",
    "OccurrenceIndex",
    "expand_template",
    "next_due",
    "signed_amount",
    "summarize_balance",
    "compute_balance",
    "compute_forecast",
    "compute_type_totals",
    "group_all",
    "group_one",
    "group_by_selection",
    "compute_shares",
]
