"""Facet vocabulary, filtering and selection propagation."""

from .vocabulary import build_vocabulary, default_year_bounds
from .engine import apply_filters, matches
from .propagation import check_state, get_descendants, reset_selection, toggle_selection

__all__ = [
    "build_vocabulary",
    "default_year_bounds",
    "apply_filters",
    "matches",
    "check_state",
    "get_descendants",
    "reset_selection",
    "toggle_selection",
]
