"""Tests for template description policies."""

from datetime import date

from src.domain.constants import RECURRENCE_MARKER
from src.domain.models import Period
from src.domain.policies.descriptions import (
    contains_marker,
    ensure_unique_description,
)


def test_free_description_is_kept(transaction_factory) -> None:
    """Descriptions not used by a template should not change."""
    templates = [
        transaction_factory(1, "5", date(2025, 1, 1), description="Loyer", period=Period.MONTH),
    ]

    assert ensure_unique_description("Netflix", templates) == "Netflix"


def test_duplicate_description_gets_first_free_suffix(
    transaction_factory,
) -> None:
    """Used descriptions should receive the first free numeric suffix."""
    templates = [
        transaction_factory(1, "5", date(2025, 1, 1), description="Loyer", period=Period.MONTH),
        transaction_factory(2, "5", date(2025, 1, 1), description="Loyer#1", period=Period.MONTH),
    ]

    assert ensure_unique_description("Loyer", templates) == "Loyer#2"


def test_contains_marker() -> None:
    """The reserved marker should be detected anywhere in the text."""
    assert contains_marker("Loyer" + RECURRENCE_MARKER)
    assert not contains_marker("Loyer #1")
