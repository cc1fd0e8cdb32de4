"""Tests for the period resolver."""

from datetime import date

import pytest

from src.domain.models import Period
from src.domain.services.periods import advance, end_of_month


@pytest.mark.parametrize(
    ("period", "expected"),
    [
        (Period.DAY, date(2025, 2, 2)),
        (Period.WEEK, date(2025, 2, 8)),
        (Period.MONTH, date(2025, 3, 1)),
        (Period.YEAR, date(2026, 2, 1)),
    ],
)
def test_advance_steps_by_period(period: Period, expected: date) -> None:
    """Each period should move the date forward by its step."""
    assert advance(date(2025, 2, 1), period) == expected


def test_advance_accepts_stored_strings() -> None:
    """Raw stored values should resolve to their period."""
    assert advance(date(2025, 2, 1), "Month") == date(2025, 3, 1)


def test_month_step_clamps_to_end_of_month() -> None:
    """January 31 should advance to the last day of February."""
    assert advance(date(2025, 1, 31), Period.MONTH) == date(2025, 2, 28)
    assert advance(date(2024, 1, 31), Period.MONTH) == date(2024, 2, 29)


def test_year_step_clamps_leap_day() -> None:
    """February 29 should advance to February 28 of the next year."""
    assert advance(date(2024, 2, 29), Period.YEAR) == date(2025, 2, 28)


@pytest.mark.parametrize("period", [Period.NONE, "Fortnight", "", None])
def test_unrecognized_period_returns_input(period) -> None:
    """Unknown periods should not move the date."""
    assert advance(date(2025, 2, 1), period) == date(2025, 2, 1)


@pytest.mark.parametrize(
    "period",
    [Period.DAY, Period.WEEK, Period.MONTH, Period.YEAR],
)
@pytest.mark.parametrize(
    "start",
    [date(2024, 2, 29), date(2025, 1, 31), date(2025, 12, 31), date(2000, 1, 1)],
)
def test_advance_is_strictly_increasing(period: Period, start: date) -> None:
    """Recognized periods should always produce a later date."""
    assert advance(start, period) > start


def test_end_of_month() -> None:
    """end_of_month should return the last calendar day."""
    assert end_of_month(date(2025, 2, 10)) == date(2025, 2, 28)
    assert end_of_month(date(2024, 2, 1)) == date(2024, 2, 29)
    assert end_of_month(date(2025, 12, 31)) == date(2025, 12, 31)
