"""Core data models for the organization directory."""

from .facets import CheckState, FacetKey, FacetNode, FacetVocabulary, YearRange
from .selection import FilterSelection
from .organization import Organization
from .organizations import Organizations
from .validators import (
    to_str,
    to_year,
    to_delimited,
    to_text,
    to_frozenset,
    empty_to_none,
    normalize,
)

__all__ = [
    "CheckState",
    "FacetKey",
    "FacetNode",
    "FacetVocabulary",
    "YearRange",
    "FilterSelection",
    "Organization",
    "Organizations",
    "to_str",
    "to_year",
    "to_delimited",
    "to_text",
    "to_frozenset",
    "empty_to_none",
    "normalize",
]
