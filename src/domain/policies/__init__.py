"""Domain policies package."""

from .descriptions import contains_marker, ensure_unique_description

__all__ = ["contains_marker", "ensure_unique_description"]
