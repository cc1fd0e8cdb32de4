"""Domain constants for the recurring ledger."""

RECURRENCE_MARKER = "#Répétition#"

ALL_CATEGORIES_LABEL = "Toutes les catégories"

SYNTHETIC_TRANSACTION_ID = -1

DEFAULT_MAX_OCCURRENCES = 10_000


__all__ = [
    "RECURRENCE_MARKER",
    "ALL_CATEGORIES_LABEL",
    "SYNTHETIC_TRANSACTION_ID",
    "DEFAULT_MAX_OCCURRENCES",
]
