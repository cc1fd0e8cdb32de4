"""Description policies for recurring templates."""

from collections.abc import Iterable

from src.domain.constants import RECURRENCE_MARKER
from src.domain.models.transactions import Transaction


def contains_marker(description: str) -> bool:
    """Return True when the text carries the reserved recurrence marker."""
    return RECURRENCE_MARKER in description


def ensure_unique_description(
    description: str,
    templates: Iterable[Transaction],
) -> str:
    """Return a description no current template uses.

    Args:
        description: Description entered for a new template.
        templates: Existing recurring templates.

    Returns:
        str: The description itself when free, otherwise the first free
        ``"<description>#<n>"`` variant.
    """
    taken = {template.description for template in templates}
    if description not in taken:
        return description
    suffix = 1
    while f"{description}#{suffix}" in taken:
        suffix += 1
    return f"{description}#{suffix}"


__all__ = ["contains_marker", "ensure_unique_description"]
