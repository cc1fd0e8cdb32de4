"""Period arithmetic for recurring templates."""

import calendar
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from src.domain.models.transactions import Period


_STEPS = {
    Period.DAY: timedelta(days=1),
    Period.WEEK: timedelta(days=7),
    Period.MONTH: relativedelta(months=1),
    Period.YEAR: relativedelta(years=1),
}


def advance(value: date, period: Period | str) -> date:
    """Return the next occurrence date after ``value``.

    Month and year steps clamp to the last day of shorter months, so
    January 31 advances to February 28 (or 29).

    Args:
        value: Current occurrence date.
        period: Period enum or raw stored period value.

    Returns:
        date: Next date, or ``value`` unchanged when the period is not
        recognized. Iterating callers must treat an unchanged result as a
        configuration error.
    """
    resolved = Period.coerce(period)
    step = _STEPS.get(resolved)
    if step is None:
        return value
    return value + step


def end_of_month(value: date) -> date:
    """Return the last calendar day of the month containing ``value``."""
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.replace(day=last_day)


__all__ = ["advance", "end_of_month"]
